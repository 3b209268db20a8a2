"""Annuity (amortizing loan) payment calculation.

Pure functions only: every value is fully determined by the arguments and no
degenerate input ever produces NaN, Infinity or an exception.
"""

from __future__ import annotations

import math


def finite_or_zero(value: float) -> float:
    """Return `value` as a float, or 0.0 if it is NaN, infinite or not real."""
    try:
        finite = math.isfinite(value)
    except TypeError:
        # complex results from a negative base raised to a fractional power
        return 0.0
    return float(value) if finite else 0.0


def non_negative(value: float) -> float:
    """Finite, non-negative view of a computed currency value."""
    return max(0.0, finite_or_zero(value))


def monthly_rate(annual_rate_percent: float) -> float:
    """Convert an annual percentage rate (e.g. 4.5) to a monthly fraction."""
    return annual_rate_percent / 100 / 12


def compute_annuity_payment(
    principal: float,
    annual_rate_percent: float,
    term_months: float,
) -> float:
    """
    Monthly payment for a fully amortizing loan.

    Standard loan formula:
        payment = P * (r * (1 + r)^n) / ((1 + r)^n - 1)

    Where:
    - P = principal
    - r = annual_rate_percent / 100 / 12
    - n = term_months

    Degenerate cases:
    - principal <= 0: returns 0 without evaluating the formula
    - r == 0: returns principal / n (the formula would be 0/0)
    - zero term, overflow or any other non-finite outcome: returns 0

    Args:
        principal: Amount financed
        annual_rate_percent: Annual interest rate in percent (4.5 means 4.5%)
        term_months: Number of monthly payments

    Returns:
        Finite, non-negative monthly payment
    """
    if principal <= 0:
        return 0.0

    rate = monthly_rate(annual_rate_percent)

    try:
        if rate == 0:
            payment = principal / term_months
        else:
            growth = (1 + rate) ** term_months
            payment = principal * (rate * growth) / (growth - 1)
    except (ZeroDivisionError, OverflowError):
        return 0.0

    return non_negative(payment)
