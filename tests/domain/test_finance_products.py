"""Tests for finance product navigation and the result set."""

from showroom_finance.domain.finance_products import (
    BalloonLoanResult,
    FinanceProduct,
    FinanceResultSet,
    IslamicFinanceDisclosure,
    LeaseResult,
    StandardLoanResult,
)


class TestFinanceProductNavigation:
    """Cyclic next/previous over the four products."""

    def test_next_follows_declaration_order(self) -> None:
        assert FinanceProduct.STANDARD_LOAN.next() is FinanceProduct.BALLOON_PAYMENT
        assert FinanceProduct.BALLOON_PAYMENT.next() is FinanceProduct.LEASE
        assert FinanceProduct.LEASE.next() is FinanceProduct.ISLAMIC_FINANCE

    def test_next_wraps_around(self) -> None:
        assert FinanceProduct.ISLAMIC_FINANCE.next() is FinanceProduct.STANDARD_LOAN

    def test_previous_wraps_around(self) -> None:
        assert FinanceProduct.STANDARD_LOAN.previous() is FinanceProduct.ISLAMIC_FINANCE

    def test_previous_undoes_next(self) -> None:
        for product in FinanceProduct:
            assert product.next().previous() is product

    def test_four_steps_return_to_start(self) -> None:
        product = FinanceProduct.LEASE
        for _ in range(4):
            product = product.next()
        assert product is FinanceProduct.LEASE

    def test_labels(self) -> None:
        assert FinanceProduct.STANDARD_LOAN.label == "Standard Loan"
        assert FinanceProduct.BALLOON_PAYMENT.label == "Balloon Payment"
        assert FinanceProduct.LEASE.label == "Lease"
        assert FinanceProduct.ISLAMIC_FINANCE.label == "Islamic Finance"

    def test_values_are_stable_identifiers(self) -> None:
        assert FinanceProduct("balloon_payment") is FinanceProduct.BALLOON_PAYMENT


class TestFinanceResultSet:
    """Read-only views exposed to the presentation layer."""

    def _result_set(self) -> FinanceResultSet:
        return FinanceResultSet(
            standard_loan=StandardLoanResult(
                principal=80_000, monthly_payment=1_491.44, total_payment=109_486.4, total_interest=9_486.4
            ),
            balloon_loan=BalloonLoanResult(
                principal=50_000, monthly_payment=932.15, total_payment=105_929.0, final_lump_sum=30_000
            ),
            lease=LeaseResult(
                monthly_payment=1_525, total_payment=91_500, depreciation_component=1_000, finance_charge_component=525
            ),
            islamic_finance=IslamicFinanceDisclosure(title="Islamic Finance", disclosure="Contact us"),
        )

    def test_top_level_views(self) -> None:
        results = self._result_set()

        assert results.monthly_payment == 1_491.44
        assert results.total_payment == 109_486.4
        assert results.total_interest == 9_486.4
        assert results.balloon_monthly_payment == 932.15
        assert results.lease_monthly_payment == 1_525

    def test_for_product_returns_matching_result(self) -> None:
        results = self._result_set()

        assert results.for_product(FinanceProduct.STANDARD_LOAN) is results.standard_loan
        assert results.for_product(FinanceProduct.BALLOON_PAYMENT) is results.balloon_loan
        assert results.for_product(FinanceProduct.LEASE) is results.lease
        assert results.for_product(FinanceProduct.ISLAMIC_FINANCE) is results.islamic_finance

    def test_islamic_disclosure_has_no_numeric_fields(self) -> None:
        disclosure = self._result_set().islamic_finance

        assert not hasattr(disclosure, "monthly_payment")
        assert not hasattr(disclosure, "total_payment")
