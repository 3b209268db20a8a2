import math
from dataclasses import replace

from showroom_finance.domain.finance_inputs import FinanceInputs
from showroom_finance.domain.finance_products import FinanceProduct
from showroom_finance.use_cases.calculate_standard_loan import CalculateStandardLoan


def _inputs(**overrides) -> FinanceInputs:
    values = dict(
        vehicle_price=100_000.0,
        down_payment_amount=20_000.0,
        down_payment_percentage=20.0,
        interest_rate=4.5,
        loan_term_months=60,
    )
    values.update(overrides)
    return FinanceInputs(**values)


def test_declares_standard_loan_product():
    assert CalculateStandardLoan.product is FinanceProduct.STANDARD_LOAN


# ============================================================================
# CALCULATION TESTS
# ============================================================================


def test_calculates_reference_scenario():
    """
    Price 100,000, 20,000 down, 4.5%, 60 months.

    Principal 80,000 → monthly ≈ 1,491.44, interest ≈ 9,486, total ≈ 109,486.
    """
    result = CalculateStandardLoan().execute(_inputs())

    assert result.principal == 80_000
    assert 1_491 < result.monthly_payment < 1_492
    assert 9_480 < result.total_interest < 9_490
    assert 109_480 < result.total_payment < 109_490


def test_totals_are_consistent_with_monthly_payment():
    result = CalculateStandardLoan().execute(_inputs(loan_term_months=48))

    assert abs(result.total_payment - (result.monthly_payment * 48 + 20_000)) < 1e-6
    assert abs(result.total_interest - (result.monthly_payment * 48 - 80_000)) < 1e-6


def test_zero_down_payment_finances_full_price():
    result = CalculateStandardLoan().execute(
        _inputs(down_payment_amount=0.0, down_payment_percentage=0.0)
    )

    assert result.principal == 100_000
    assert result.total_payment > 100_000


def test_balloon_and_residual_do_not_affect_standard_loan():
    base = CalculateStandardLoan().execute(_inputs())
    other = CalculateStandardLoan().execute(_inputs(balloon_amount=30_000.0, residual_value=40_000.0))

    assert base == other


# ============================================================================
# EDGE CASES
# ============================================================================


def test_paid_in_full_has_no_interest():
    """principal <= 0 → interest 0 and total equals the down payment."""
    result = CalculateStandardLoan().execute(
        _inputs(down_payment_amount=100_000.0, down_payment_percentage=100.0)
    )

    assert result.principal == 0
    assert result.monthly_payment == 0
    assert result.total_interest == 0
    assert result.total_payment == 100_000


def test_over_credited_purchase_reports_down_payment_total():
    result = CalculateStandardLoan().execute(
        _inputs(vehicle_price=50_000.0, down_payment_amount=60_000.0)
    )

    assert result.monthly_payment == 0
    assert result.total_interest == 0
    assert result.total_payment == 60_000


def test_zero_price_reports_zeros():
    result = CalculateStandardLoan().execute(
        _inputs(vehicle_price=0.0, down_payment_amount=0.0, down_payment_percentage=0.0)
    )

    assert result.monthly_payment == 0
    assert result.total_payment == 0
    assert result.total_interest == 0


def test_zero_term_never_produces_non_finite_values():
    result = CalculateStandardLoan().execute(_inputs(loan_term_months=0))

    for value in (result.principal, result.monthly_payment, result.total_payment, result.total_interest):
        assert math.isfinite(value)
        assert value >= 0


def test_does_not_mutate_inputs():
    inputs = _inputs()
    before = replace(inputs)

    CalculateStandardLoan().execute(inputs)

    assert inputs == before
