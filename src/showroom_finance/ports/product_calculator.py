from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from showroom_finance.domain.finance_inputs import FinanceInputs
from showroom_finance.domain.finance_products import FinanceProduct, FinanceResult


class ProductCalculator(ABC):
    """
    Port for a single finance product's calculation.

    Contract:
        - Implementations are stateless and never mutate `inputs`
        - Every numeric field of the returned result is finite and >= 0
        - No exceptions: degenerate inputs resolve to 0
    """

    product: ClassVar[FinanceProduct]

    @abstractmethod
    def execute(self, inputs: FinanceInputs) -> FinanceResult:
        """
        Compute this product's result for the current inputs.

        Args:
            inputs: Shared finance inputs (read-only for calculators)

        Returns:
            Product-specific result
        """
        ...
