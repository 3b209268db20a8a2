from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from showroom_finance.domain.finance_inputs import FinanceInputs
from showroom_finance.domain.finance_products import FinanceProduct, IslamicFinanceDisclosure
from showroom_finance.ports.product_calculator import ProductCalculator


ISLAMIC_FINANCE_TITLE = "Islamic Finance"
ISLAMIC_FINANCE_DISCLOSURE = (
    "Sharia-compliant financing is structured as a profit-based sale or lease "
    "agreement rather than an interest-bearing loan. Payment estimates are not "
    "available for this product. Please contact our finance specialists for a "
    "personalized Islamic finance plan."
)


@dataclass(frozen=True, slots=True)
class DescribeIslamicFinance(ProductCalculator):
    """
    Islamic finance product: disclosure only, no computation.

    Inputs are accepted to satisfy the calculator contract and ignored. This
    product must not borrow another product's formula.
    """

    product: ClassVar[FinanceProduct] = FinanceProduct.ISLAMIC_FINANCE

    title: str = ISLAMIC_FINANCE_TITLE
    disclosure: str = ISLAMIC_FINANCE_DISCLOSURE

    def execute(self, inputs: FinanceInputs) -> IslamicFinanceDisclosure:
        return IslamicFinanceDisclosure(title=self.title, disclosure=self.disclosure)
