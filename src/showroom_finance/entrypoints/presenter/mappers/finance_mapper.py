from __future__ import annotations

from decimal import ROUND_HALF_UP, Context, Decimal

from showroom_finance.domain.errors import ValidationError
from showroom_finance.domain.finance_products import FinanceResultSet
from showroom_finance.entrypoints.presenter.dtos.finance import (
    BalloonLoanDTO,
    FinanceInputsDTO,
    FinanceInputsEditDTO,
    FinanceResultSetDTO,
    IslamicFinanceDTO,
    LeaseDTO,
    StandardLoanDTO,
)
from showroom_finance.use_cases.finance_session import FinanceSession


CENT = Decimal("0.01")
PERCENTAGE_PRECISION = Decimal("0.01")

# Enough precision to quantize any finite float to two decimal places
_ROUNDING_CONTEXT = Context(prec=400)


def _quantize(value: float, exponent: Decimal) -> str:
    return str(
        Decimal(repr(float(value))).quantize(
            exponent, rounding=ROUND_HALF_UP, context=_ROUNDING_CONTEXT
        )
    )


def format_money(value: float) -> str:
    """
    Format a currency amount as a decimal string rounded to cents.

    Rounding policy: ROUND_HALF_UP on the shortest decimal representation
    of the float, so 1.005 renders as "1.01".
    """
    return _quantize(value, CENT)


def format_percentage(value: float) -> str:
    """Format a percentage (20 means 20%) with two decimal places, ROUND_HALF_UP."""
    return _quantize(value, PERCENTAGE_PRECISION)


class FinanceMapper:
    """Maps between presenter DTOs and the finance session."""

    @staticmethod
    def apply_edit(dto: FinanceInputsEditDTO, session: FinanceSession) -> FinanceResultSet:
        """
        Applies a user edit to the session.

        The vehicle price is applied first so that a down-payment edit in the
        same request is bounded by the new price.

        Args:
            dto: Edit DTO with raw string values
            session: Session to update

        Returns:
            Result set after the last setter ran

        Raises:
            ValidationError: If both down-payment amount and percentage are set
        """
        if dto.down_payment_amount is not None and dto.down_payment_percentage is not None:
            raise ValidationError(
                errors=[
                    {
                        "field": "down_payment_amount",
                        "message": "Cannot be set together with down_payment_percentage",
                        "code": "CONFLICTING_FIELDS",
                    },
                    {
                        "field": "down_payment_percentage",
                        "message": "Cannot be set together with down_payment_amount",
                        "code": "CONFLICTING_FIELDS",
                    },
                ]
            )

        if dto.vehicle_price is not None:
            session.set_vehicle_price(dto.vehicle_price)
        if dto.down_payment_amount is not None:
            session.set_down_payment_amount(dto.down_payment_amount)
        if dto.down_payment_percentage is not None:
            session.set_down_payment_percentage(dto.down_payment_percentage)
        if dto.interest_rate is not None:
            session.set_interest_rate(dto.interest_rate)
        if dto.loan_term_months is not None:
            session.set_loan_term(dto.loan_term_months)
        if dto.balloon_amount is not None:
            session.set_balloon_amount(dto.balloon_amount)
        if dto.residual_value is not None:
            session.set_residual_value(dto.residual_value)

        return session.results

    @staticmethod
    def to_inputs_response(session: FinanceSession) -> FinanceInputsDTO:
        """
        Converts the session's current inputs to a response DTO.

        Handles float → string conversion at the boundary.
        """
        inputs = session.inputs
        return FinanceInputsDTO(
            vehicle_price=format_money(inputs.vehicle_price),
            down_payment_amount=format_money(inputs.down_payment_amount),
            down_payment_percentage=format_percentage(inputs.down_payment_percentage),
            interest_rate=format_percentage(inputs.interest_rate),
            loan_term_months=inputs.loan_term_months,
            balloon_amount=format_money(inputs.balloon_amount),
            residual_value=format_money(inputs.residual_value),
        )

    @staticmethod
    def to_result_set_response(session: FinanceSession) -> FinanceResultSetDTO:
        """
        Converts the session's latest results to the presenter result set.

        Args:
            session: Session whose results are rendered

        Returns:
            Result set DTO with string monetary values
        """
        results = session.results
        standard = results.standard_loan
        balloon = results.balloon_loan
        lease = results.lease

        return FinanceResultSetDTO(
            vehicle_name=session.vehicle_name,
            active_product=session.active_product.value,
            active_product_label=session.active_product.label,
            monthly_payment=format_money(results.monthly_payment),
            total_payment=format_money(results.total_payment),
            total_interest=format_money(results.total_interest),
            balloon_monthly_payment=format_money(results.balloon_monthly_payment),
            lease_monthly_payment=format_money(results.lease_monthly_payment),
            standard_loan=StandardLoanDTO(
                principal=format_money(standard.principal),
                monthly_payment=format_money(standard.monthly_payment),
                total_payment=format_money(standard.total_payment),
                total_interest=format_money(standard.total_interest),
            ),
            balloon_loan=BalloonLoanDTO(
                principal=format_money(balloon.principal),
                monthly_payment=format_money(balloon.monthly_payment),
                total_payment=format_money(balloon.total_payment),
                final_lump_sum=format_money(balloon.final_lump_sum),
            ),
            lease=LeaseDTO(
                monthly_payment=format_money(lease.monthly_payment),
                total_payment=format_money(lease.total_payment),
                depreciation_component=format_money(lease.depreciation_component),
                finance_charge_component=format_money(lease.finance_charge_component),
            ),
            islamic_finance=IslamicFinanceDTO(
                title=results.islamic_finance.title,
                disclosure=results.islamic_finance.disclosure,
            ),
        )
