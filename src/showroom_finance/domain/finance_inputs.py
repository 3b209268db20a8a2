from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal

from showroom_finance.domain.amortization import finite_or_zero


# ==============================================================================
# Input ranges
# ==============================================================================

MIN_DOWN_PAYMENT_PERCENTAGE = 0.0
MAX_DOWN_PAYMENT_PERCENTAGE = 50.0

MIN_INTEREST_RATE = 1.0
MAX_INTEREST_RATE = 10.0

MIN_LOAN_TERM_MONTHS = 12
MAX_LOAN_TERM_MONTHS = 84
LOAN_TERM_STEP_MONTHS = 12

DEFAULT_DOWN_PAYMENT_PERCENTAGE = 20.0
DEFAULT_INTEREST_RATE = 4.5
DEFAULT_LOAN_TERM_MONTHS = 60

# Values a user may type into a numeric field
Numeric = float | int | Decimal | str


# ==============================================================================
# Coercion and clamping
# ==============================================================================


def parse_number(value: object) -> float | None:
    """
    Interpret a user-entered value as a finite float.

    Returns None when the value has no numeric meaning (blank, non-numeric
    text, None, booleans, NaN or infinity). Callers keep the previous value
    in that case, since there is no nearest valid number to clamp to.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None

    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError):
        return None

    return number if math.isfinite(number) else None


def clamp(value: float, lower: float, upper: float) -> float:
    return min(max(value, lower), upper)


def clamp_loan_term(months: float) -> int:
    """Snap a term to the nearest 12-month step inside 12..84."""
    steps = round(months / LOAN_TERM_STEP_MONTHS)
    return int(clamp(steps * LOAN_TERM_STEP_MONTHS, MIN_LOAN_TERM_MONTHS, MAX_LOAN_TERM_MONTHS))


# ==============================================================================
# Down payment synchronization
# ==============================================================================


def percentage_from_amount(amount: float, vehicle_price: float) -> float:
    """Percentage view of a down-payment amount (0 when the price is 0)."""
    if vehicle_price <= 0:
        return 0.0
    return finite_or_zero(amount / vehicle_price * 100)


def amount_from_percentage(percentage: float, vehicle_price: float) -> float:
    """Amount view of a down-payment percentage."""
    return finite_or_zero(percentage / 100 * vehicle_price)


# ==============================================================================
# Input model
# ==============================================================================


@dataclass(frozen=True, slots=True)
class FinanceDefaults:
    """Starting values applied when a session is opened for a vehicle."""

    down_payment_percentage: float = DEFAULT_DOWN_PAYMENT_PERCENTAGE
    interest_rate: float = DEFAULT_INTEREST_RATE
    loan_term_months: int = DEFAULT_LOAN_TERM_MONTHS
    balloon_percentage: float = 0.0
    residual_percentage: float = 0.0


@dataclass(slots=True)
class FinanceInputs:
    """
    Primitive inputs shared by every finance product.

    `down_payment_amount` and `down_payment_percentage` are both stored and
    both settable; they are kept in the ratio `amount = price * pct / 100`
    by the session setters, not by this class.
    """

    vehicle_price: float
    down_payment_amount: float
    down_payment_percentage: float
    interest_rate: float
    loan_term_months: int
    balloon_amount: float = 0.0
    residual_value: float = 0.0

    @classmethod
    def from_vehicle_price(
        cls,
        vehicle_price: float,
        defaults: FinanceDefaults | None = None,
    ) -> FinanceInputs:
        defaults = defaults or FinanceDefaults()
        price = max(0.0, finite_or_zero(vehicle_price))
        percentage = clamp(
            defaults.down_payment_percentage,
            MIN_DOWN_PAYMENT_PERCENTAGE,
            MAX_DOWN_PAYMENT_PERCENTAGE,
        )

        return cls(
            vehicle_price=price,
            down_payment_amount=amount_from_percentage(percentage, price),
            down_payment_percentage=percentage,
            interest_rate=clamp(defaults.interest_rate, MIN_INTEREST_RATE, MAX_INTEREST_RATE),
            loan_term_months=clamp_loan_term(defaults.loan_term_months),
            balloon_amount=amount_from_percentage(max(0.0, defaults.balloon_percentage), price),
            residual_value=amount_from_percentage(max(0.0, defaults.residual_percentage), price),
        )

    @property
    def financed_amount(self) -> float:
        """Price minus down payment (may be <= 0 when paid in full)."""
        return self.vehicle_price - self.down_payment_amount
