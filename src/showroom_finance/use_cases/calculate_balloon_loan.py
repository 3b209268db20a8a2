from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from showroom_finance.domain.amortization import compute_annuity_payment, non_negative
from showroom_finance.domain.finance_inputs import FinanceInputs
from showroom_finance.domain.finance_products import BalloonLoanResult, FinanceProduct
from showroom_finance.ports.product_calculator import ProductCalculator


@dataclass(frozen=True, slots=True)
class CalculateBalloonLoan(ProductCalculator):
    """
    Loan with a deferred lump sum (balloon) due at the end of the term.

    Only `price - down_payment - balloon` is amortized. The balloon is never
    folded into the monthly payment; it is reported as `final_lump_sum` and
    stays due even when nothing is left to amortize.
    """

    product: ClassVar[FinanceProduct] = FinanceProduct.BALLOON_PAYMENT

    def execute(self, inputs: FinanceInputs) -> BalloonLoanResult:
        down_payment = non_negative(inputs.down_payment_amount)
        final_lump_sum = non_negative(inputs.balloon_amount)
        principal = inputs.vehicle_price - inputs.down_payment_amount - inputs.balloon_amount

        # compute_annuity_payment returns 0 for principal <= 0
        monthly_payment = compute_annuity_payment(
            principal, inputs.interest_rate, inputs.loan_term_months
        )
        paid_over_term = monthly_payment * inputs.loan_term_months

        return BalloonLoanResult(
            principal=non_negative(principal),
            monthly_payment=monthly_payment,
            total_payment=non_negative(paid_over_term + down_payment + final_lump_sum),
            final_lump_sum=final_lump_sum,
        )
