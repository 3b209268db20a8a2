import math

from showroom_finance.domain.finance_inputs import FinanceInputs
from showroom_finance.domain.finance_products import FinanceProduct
from showroom_finance.use_cases.calculate_lease import CalculateLease


def _inputs(**overrides) -> FinanceInputs:
    values = dict(
        vehicle_price=100_000.0,
        down_payment_amount=20_000.0,
        down_payment_percentage=20.0,
        interest_rate=4.5,
        loan_term_months=60,
        residual_value=40_000.0,
    )
    values.update(overrides)
    return FinanceInputs(**values)


def test_declares_lease_product():
    assert CalculateLease.product is FinanceProduct.LEASE


def test_calculates_reference_scenario():
    """
    Price 100,000, residual 40,000, 4.5%, 60 months.

    depreciation = 60,000 / 60 = 1,000
    finance charge = 140,000 * 0.00375 = 525
    lease payment = 1,525
    """
    result = CalculateLease().execute(_inputs())

    assert abs(result.depreciation_component - 1_000) < 1e-9
    assert abs(result.finance_charge_component - 525) < 1e-9
    assert abs(result.monthly_payment - 1_525) < 1e-9
    assert abs(result.total_payment - 1_525 * 60) < 1e-6


def test_finance_charge_uses_price_plus_residual():
    """Sum-based finance charge, not a money factor."""
    result = CalculateLease().execute(_inputs(interest_rate=6.0, residual_value=20_000.0))

    assert abs(result.finance_charge_component - 120_000 * 0.06 / 12) < 1e-9


def test_down_payment_does_not_affect_lease():
    base = CalculateLease().execute(_inputs())
    other = CalculateLease().execute(_inputs(down_payment_amount=50_000.0, down_payment_percentage=50.0))

    assert base == other


def test_zero_residual_depreciates_full_price():
    result = CalculateLease().execute(_inputs(residual_value=0.0))

    assert abs(result.depreciation_component - 100_000 / 60) < 1e-9
    assert abs(result.finance_charge_component - 375) < 1e-9


def test_residual_above_price_floors_depreciation():
    result = CalculateLease().execute(_inputs(residual_value=120_000.0))

    assert result.depreciation_component == 0
    assert result.monthly_payment >= 0


def test_zero_price_reports_zeros():
    """Nothing to lease, even if a residual was entered earlier."""
    result = CalculateLease().execute(_inputs(vehicle_price=0.0))

    assert result.monthly_payment == 0
    assert result.total_payment == 0
    assert result.depreciation_component == 0
    assert result.finance_charge_component == 0


def test_zero_term_never_produces_non_finite_values():
    result = CalculateLease().execute(_inputs(loan_term_months=0))

    for value in (
        result.monthly_payment,
        result.total_payment,
        result.depreciation_component,
        result.finance_charge_component,
    ):
        assert math.isfinite(value)
        assert value >= 0
