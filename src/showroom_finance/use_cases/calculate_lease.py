from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from showroom_finance.domain.amortization import monthly_rate, non_negative
from showroom_finance.domain.finance_inputs import FinanceInputs
from showroom_finance.domain.finance_products import FinanceProduct, LeaseResult
from showroom_finance.ports.product_calculator import ProductCalculator


@dataclass(frozen=True, slots=True)
class CalculateLease(ProductCalculator):
    """
    Lease payment as the sum of a depreciation and a finance charge.

    - monthly depreciation = (price - residual_value) / term
    - monthly finance charge = (price + residual_value) * rate / 100 / 12
    - lease payment = monthly depreciation + monthly finance charge

    The finance charge is taken on price plus residual at the monthly rate,
    not through a money factor. Down payment does not enter the lease.
    A residual above the price floors depreciation at 0, and a vehicle with
    no price has nothing to lease.
    """

    product: ClassVar[FinanceProduct] = FinanceProduct.LEASE

    def execute(self, inputs: FinanceInputs) -> LeaseResult:
        term = inputs.loan_term_months

        if inputs.vehicle_price <= 0:
            return LeaseResult(
                monthly_payment=0.0,
                total_payment=0.0,
                depreciation_component=0.0,
                finance_charge_component=0.0,
            )

        depreciation = non_negative(inputs.vehicle_price - inputs.residual_value)

        if term > 0:
            monthly_depreciation = non_negative(depreciation / term)
        else:
            monthly_depreciation = 0.0

        finance_charge = non_negative(
            (inputs.vehicle_price + inputs.residual_value) * monthly_rate(inputs.interest_rate)
        )
        lease_payment = non_negative(monthly_depreciation + finance_charge)

        return LeaseResult(
            monthly_payment=lease_payment,
            total_payment=non_negative(lease_payment * term),
            depreciation_component=monthly_depreciation,
            finance_charge_component=finance_charge,
        )
