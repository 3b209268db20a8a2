from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from showroom_finance.domain.amortization import (
    compute_annuity_payment,
    finite_or_zero,
    non_negative,
)
from showroom_finance.domain.finance_inputs import FinanceInputs
from showroom_finance.domain.finance_products import FinanceProduct, StandardLoanResult
from showroom_finance.ports.product_calculator import ProductCalculator


@dataclass(frozen=True, slots=True)
class CalculateStandardLoan(ProductCalculator):
    """
    Standard amortizing loan.

    - principal = vehicle_price - down_payment_amount
    - total_payment = monthly_payment * term + down_payment_amount
    - total_interest = monthly_payment * term - principal

    A vehicle paid in full (principal <= 0) has no interest and its total
    payment is the down payment alone.
    """

    product: ClassVar[FinanceProduct] = FinanceProduct.STANDARD_LOAN

    def execute(self, inputs: FinanceInputs) -> StandardLoanResult:
        principal = finite_or_zero(inputs.financed_amount)
        down_payment = non_negative(inputs.down_payment_amount)

        if principal <= 0:
            return StandardLoanResult(
                principal=0.0,
                monthly_payment=0.0,
                total_payment=down_payment,
                total_interest=0.0,
            )

        monthly_payment = compute_annuity_payment(
            principal, inputs.interest_rate, inputs.loan_term_months
        )
        paid_over_term = monthly_payment * inputs.loan_term_months

        return StandardLoanResult(
            principal=principal,
            monthly_payment=monthly_payment,
            total_payment=non_negative(paid_over_term + down_payment),
            total_interest=non_negative(paid_over_term - principal),
        )
