from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FinanceProduct(str, Enum):
    """
    Finance products offered for a vehicle.

    Declaration order is the navigation order; `next()` and `previous()`
    wrap around in both directions.
    """

    STANDARD_LOAN = "standard_loan"
    BALLOON_PAYMENT = "balloon_payment"
    LEASE = "lease"
    ISLAMIC_FINANCE = "islamic_finance"

    @property
    def label(self) -> str:
        return _LABELS[self]

    def next(self) -> FinanceProduct:
        members = list(FinanceProduct)
        return members[(members.index(self) + 1) % len(members)]

    def previous(self) -> FinanceProduct:
        members = list(FinanceProduct)
        return members[(members.index(self) - 1) % len(members)]


_LABELS = {
    FinanceProduct.STANDARD_LOAN: "Standard Loan",
    FinanceProduct.BALLOON_PAYMENT: "Balloon Payment",
    FinanceProduct.LEASE: "Lease",
    FinanceProduct.ISLAMIC_FINANCE: "Islamic Finance",
}


# ==============================================================================
# Product results
# ==============================================================================


@dataclass(frozen=True, slots=True)
class StandardLoanResult:
    principal: float
    monthly_payment: float
    total_payment: float
    total_interest: float


@dataclass(frozen=True, slots=True)
class BalloonLoanResult:
    principal: float
    monthly_payment: float
    total_payment: float  # monthly payments + down payment + final lump sum
    final_lump_sum: float


@dataclass(frozen=True, slots=True)
class LeaseResult:
    monthly_payment: float
    total_payment: float
    depreciation_component: float  # per month
    finance_charge_component: float  # per month


@dataclass(frozen=True, slots=True)
class IslamicFinanceDisclosure:
    """Placeholder product: disclosure text only, no numeric fields."""

    title: str
    disclosure: str


FinanceResult = StandardLoanResult | BalloonLoanResult | LeaseResult | IslamicFinanceDisclosure


@dataclass(frozen=True, slots=True)
class FinanceResultSet:
    """
    Results of one recompute pass across all products.

    Immutable: a new set is produced for every edit, so a reader never sees
    results from two different input states.
    """

    standard_loan: StandardLoanResult
    balloon_loan: BalloonLoanResult
    lease: LeaseResult
    islamic_finance: IslamicFinanceDisclosure

    @property
    def monthly_payment(self) -> float:
        return self.standard_loan.monthly_payment

    @property
    def total_payment(self) -> float:
        return self.standard_loan.total_payment

    @property
    def total_interest(self) -> float:
        return self.standard_loan.total_interest

    @property
    def balloon_monthly_payment(self) -> float:
        return self.balloon_loan.monthly_payment

    @property
    def lease_monthly_payment(self) -> float:
        return self.lease.monthly_payment

    def for_product(self, product: FinanceProduct) -> FinanceResult:
        results: dict[FinanceProduct, FinanceResult] = {
            FinanceProduct.STANDARD_LOAN: self.standard_loan,
            FinanceProduct.BALLOON_PAYMENT: self.balloon_loan,
            FinanceProduct.LEASE: self.lease,
            FinanceProduct.ISLAMIC_FINANCE: self.islamic_finance,
        }
        return results[product]
