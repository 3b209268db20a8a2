"""Finance calculator session.

Owns the single `FinanceInputs` instance of one shopper's session, keeps the
down-payment amount and percentage in step, and recomputes every product
synchronously after each edit.
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace

from showroom_finance.domain.amortization import finite_or_zero, non_negative
from showroom_finance.domain.finance_inputs import (
    MAX_DOWN_PAYMENT_PERCENTAGE,
    MAX_INTEREST_RATE,
    MIN_DOWN_PAYMENT_PERCENTAGE,
    MIN_INTEREST_RATE,
    FinanceDefaults,
    FinanceInputs,
    Numeric,
    amount_from_percentage,
    clamp,
    clamp_loan_term,
    parse_number,
    percentage_from_amount,
)
from showroom_finance.domain.finance_products import (
    FinanceProduct,
    FinanceResult,
    FinanceResultSet,
)
from showroom_finance.domain.vehicle import Vehicle
from showroom_finance.use_cases.calculate_balloon_loan import CalculateBalloonLoan
from showroom_finance.use_cases.calculate_lease import CalculateLease
from showroom_finance.use_cases.calculate_standard_loan import CalculateStandardLoan
from showroom_finance.use_cases.describe_islamic_finance import DescribeIslamicFinance

logger = logging.getLogger(__name__)

# Upper bound of a percentage derived from an amount edit (amount <= price)
MAX_DERIVED_DOWN_PAYMENT_PERCENTAGE = 100.0


class FinanceSession:
    """
    Input model, down-payment synchronizer and product selection for one session.

    Responsibilities:
    - Clamp every edit into its valid range (never raise)
    - Keep `down_payment_amount == vehicle_price * down_payment_percentage / 100`
    - Recompute all four products before any setter returns
    - Track the active product (cyclic navigation, shared inputs preserved)

    Known limitation: amount and percentage are both stored and either may be
    edited, so many alternating edits can accumulate floating-point drift
    between them. Each individual edit re-establishes the ratio.
    """

    def __init__(self, inputs: FinanceInputs, vehicle_name: str = "") -> None:
        """
        Initialize session with starting inputs.

        The inputs are copied and brought into range the same way the setters
        would: rate, term, balloon and residual are clamped, and the
        down-payment amount is re-derived from the percentage.

        Args:
            inputs: Initial inputs (the caller's instance is left untouched)
            vehicle_name: Display label of the financed vehicle
        """
        self._inputs = self._normalize(inputs)
        self._vehicle_name = vehicle_name
        self._active_product = FinanceProduct.STANDARD_LOAN

        self._standard_loan = CalculateStandardLoan()
        self._balloon_loan = CalculateBalloonLoan()
        self._lease = CalculateLease()
        self._islamic_finance = DescribeIslamicFinance()

        self._results = self.recompute()

    @classmethod
    def for_vehicle(
        cls,
        vehicle: Vehicle,
        defaults: FinanceDefaults | None = None,
    ) -> FinanceSession:
        """Open a session seeded from the vehicle's catalog price."""
        inputs = FinanceInputs.from_vehicle_price(vehicle.price, defaults)
        return cls(inputs, vehicle_name=vehicle.name)

    # --------------------------------------------------------------------------
    # Read side
    # --------------------------------------------------------------------------

    @property
    def vehicle_name(self) -> str:
        return self._vehicle_name

    @property
    def inputs(self) -> FinanceInputs:
        """Copy of the current inputs; edit through the setters only."""
        return replace(self._inputs)

    @property
    def results(self) -> FinanceResultSet:
        return self._results

    @property
    def active_product(self) -> FinanceProduct:
        return self._active_product

    @property
    def active_result(self) -> FinanceResult:
        return self._results.for_product(self._active_product)

    # --------------------------------------------------------------------------
    # Setters
    # --------------------------------------------------------------------------

    def set_vehicle_price(self, value: Numeric) -> FinanceResultSet:
        """
        Set the vehicle price.

        The down-payment percentage is the anchor across price edits: the
        amount is re-derived from the existing percentage, the percentage
        itself is left unchanged.
        """
        price = self._coerce("vehicle_price", value, 0.0, math.inf)
        if price is not None:
            self._inputs.vehicle_price = price
            self._inputs.down_payment_amount = amount_from_percentage(
                self._inputs.down_payment_percentage, price
            )
        return self.recompute()

    def set_down_payment_amount(self, value: Numeric) -> FinanceResultSet:
        """Set the down-payment amount (0..price); the percentage follows."""
        amount = self._coerce("down_payment_amount", value, 0.0, self._inputs.vehicle_price)
        if amount is not None:
            self._inputs.down_payment_amount = amount
            self._inputs.down_payment_percentage = percentage_from_amount(
                amount, self._inputs.vehicle_price
            )
        return self.recompute()

    def set_down_payment_percentage(self, value: Numeric) -> FinanceResultSet:
        """Set the down-payment percentage (0..50); the amount follows."""
        percentage = self._coerce(
            "down_payment_percentage",
            value,
            MIN_DOWN_PAYMENT_PERCENTAGE,
            MAX_DOWN_PAYMENT_PERCENTAGE,
        )
        if percentage is not None:
            self._inputs.down_payment_percentage = percentage
            self._inputs.down_payment_amount = amount_from_percentage(
                percentage, self._inputs.vehicle_price
            )
        return self.recompute()

    def set_interest_rate(self, value: Numeric) -> FinanceResultSet:
        rate = self._coerce("interest_rate", value, MIN_INTEREST_RATE, MAX_INTEREST_RATE)
        if rate is not None:
            self._inputs.interest_rate = rate
        return self.recompute()

    def set_loan_term(self, value: Numeric) -> FinanceResultSet:
        """Set the term in months, snapped to 12..84 in 12-month steps."""
        months = parse_number(value)
        if months is None:
            self._log_ignored("loan_term_months", value)
        else:
            term = clamp_loan_term(months)
            if term != months:
                self._log_clamped("loan_term_months", months, term)
            self._inputs.loan_term_months = term
        return self.recompute()

    def set_balloon_amount(self, value: Numeric) -> FinanceResultSet:
        """Set the balloon lump sum (affects the balloon product only)."""
        amount = self._coerce("balloon_amount", value, 0.0, math.inf)
        if amount is not None:
            self._inputs.balloon_amount = amount
        return self.recompute()

    def set_residual_value(self, value: Numeric) -> FinanceResultSet:
        """Set the lease residual value (affects the lease product only)."""
        residual = self._coerce("residual_value", value, 0.0, math.inf)
        if residual is not None:
            self._inputs.residual_value = residual
        return self.recompute()

    # --------------------------------------------------------------------------
    # Product selection
    # --------------------------------------------------------------------------

    def next_product(self) -> FinanceProduct:
        return self.select_product(self._active_product.next())

    def previous_product(self) -> FinanceProduct:
        return self.select_product(self._active_product.previous())

    def select_product(self, product: FinanceProduct) -> FinanceProduct:
        """Switch the active product; inputs and results are untouched."""
        self._active_product = product
        return product

    # --------------------------------------------------------------------------
    # Recompute
    # --------------------------------------------------------------------------

    def recompute(self) -> FinanceResultSet:
        """Recompute every product from the current inputs."""
        self._results = FinanceResultSet(
            standard_loan=self._standard_loan.execute(self._inputs),
            balloon_loan=self._balloon_loan.execute(self._inputs),
            lease=self._lease.execute(self._inputs),
            islamic_finance=self._islamic_finance.execute(self._inputs),
        )

        logger.debug(
            "Finance results recomputed",
            extra={
                "vehicle_name": self._vehicle_name,
                "vehicle_price": self._inputs.vehicle_price,
                "monthly_payment": self._results.monthly_payment,
                "balloon_monthly_payment": self._results.balloon_monthly_payment,
                "lease_monthly_payment": self._results.lease_monthly_payment,
            },
        )
        return self._results

    def _normalize(self, inputs: FinanceInputs) -> FinanceInputs:
        price = max(0.0, finite_or_zero(inputs.vehicle_price))
        percentage = clamp(
            finite_or_zero(inputs.down_payment_percentage),
            MIN_DOWN_PAYMENT_PERCENTAGE,
            MAX_DERIVED_DOWN_PAYMENT_PERCENTAGE,
        )

        normalized = FinanceInputs(
            vehicle_price=price,
            down_payment_amount=amount_from_percentage(percentage, price),
            down_payment_percentage=percentage,
            interest_rate=clamp(
                finite_or_zero(inputs.interest_rate), MIN_INTEREST_RATE, MAX_INTEREST_RATE
            ),
            loan_term_months=clamp_loan_term(finite_or_zero(inputs.loan_term_months)),
            balloon_amount=non_negative(inputs.balloon_amount),
            residual_value=non_negative(inputs.residual_value),
        )

        if normalized != inputs:
            logger.info(
                "Normalized finance inputs",
                extra={"received": repr(inputs), "normalized": repr(normalized)},
            )
        return normalized

    def _coerce(self, field: str, value: Numeric, lower: float, upper: float) -> float | None:
        number = parse_number(value)
        if number is None:
            self._log_ignored(field, value)
            return None

        clamped = clamp(number, lower, upper)
        if clamped != number:
            self._log_clamped(field, number, clamped)
        return clamped

    def _log_ignored(self, field: str, value: object) -> None:
        logger.info(
            "Ignored non-numeric finance input",
            extra={"field": field, "value": repr(value)},
        )

    def _log_clamped(self, field: str, value: float, clamped_to: float) -> None:
        logger.info(
            "Clamped finance input",
            extra={"field": field, "value": value, "clamped_to": clamped_to},
        )
