from __future__ import annotations

import math
import os

from showroom_finance.domain.finance_inputs import (
    DEFAULT_DOWN_PAYMENT_PERCENTAGE,
    DEFAULT_INTEREST_RATE,
    DEFAULT_LOAN_TERM_MONTHS,
    FinanceDefaults,
)


def _float_setting(name: str, default: float) -> float:
    raw = os.getenv(name)

    if raw is None or not raw.strip():
        return default

    try:
        value = float(raw)
    except ValueError:
        raise RuntimeError(f"{name} environment variable must be a number, got {raw!r}")

    if not math.isfinite(value):
        raise RuntimeError(f"{name} environment variable must be finite, got {raw!r}")

    return value


def _int_setting(name: str, default: int) -> int:
    raw = os.getenv(name)

    if raw is None or not raw.strip():
        return default

    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} environment variable must be an integer, got {raw!r}")


def finance_defaults() -> FinanceDefaults:
    """
    Read session defaults from the environment.

    Variables (all optional):
    - FINANCE_DEFAULT_DOWN_PAYMENT_PERCENTAGE (default 20)
    - FINANCE_DEFAULT_INTEREST_RATE (default 4.5, percent per annum)
    - FINANCE_DEFAULT_LOAN_TERM_MONTHS (default 60)
    - FINANCE_DEFAULT_BALLOON_PERCENTAGE (default 0, percent of price)
    - FINANCE_DEFAULT_RESIDUAL_PERCENTAGE (default 0, percent of price)

    Raises:
        RuntimeError: If a variable is set but not a number
    """
    return FinanceDefaults(
        down_payment_percentage=_float_setting(
            "FINANCE_DEFAULT_DOWN_PAYMENT_PERCENTAGE", DEFAULT_DOWN_PAYMENT_PERCENTAGE
        ),
        interest_rate=_float_setting("FINANCE_DEFAULT_INTEREST_RATE", DEFAULT_INTEREST_RATE),
        loan_term_months=_int_setting("FINANCE_DEFAULT_LOAN_TERM_MONTHS", DEFAULT_LOAN_TERM_MONTHS),
        balloon_percentage=_float_setting("FINANCE_DEFAULT_BALLOON_PERCENTAGE", 0.0),
        residual_percentage=_float_setting("FINANCE_DEFAULT_RESIDUAL_PERCENTAGE", 0.0),
    )
