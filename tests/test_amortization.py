"""Tests for fixed-rate loan amortization and mortgage quotes."""

from __future__ import annotations

import pytest

from fincalc.services.amortization import (
    amortize,
    level_payment,
    mortgage_quote,
    term_in_months,
    yearly_breakdown,
)
from tests.conftest import assert_float_equal


class TestLevelPayment:
    """Level monthly payment for a fixed-rate loan."""

    def test_thirty_year_mortgage_payment(self):
        """A 30-year mortgage matches the reference payment."""
        # $320k at 6.5% over 360 months
        assert_float_equal(level_payment(320000, 6.5, 360), 2022.62, tolerance=0.05)

    def test_zero_rate_is_straight_line(self):
        """Zero interest divides the principal evenly."""
        assert level_payment(12000, 0, 12) == 1000.0

    @pytest.mark.parametrize(
        "principal, rate, months",
        [(0, 5.0, 12), (-100, 5.0, 12), (1000, 5.0, 0), (1000, -1.0, 12)],
    )
    def test_invalid_inputs_return_zero(self, principal, rate, months):
        """Non-positive principal or term and negative rates pay nothing."""
        assert level_payment(principal, rate, months) == 0.0


class TestAmortize:
    """Month-by-month amortization schedules."""

    def test_schedule_closes_to_zero(self):
        """The final balance reaches zero and principal sums to the loan."""
        loan = amortize(320000, 6.5, 360)

        assert len(loan.schedule) == 360
        assert loan.schedule[-1].balance < 1e-6
        assert sum(item.principal for item in loan.schedule) == pytest.approx(320000, abs=1e-4)

    def test_balance_never_increases_and_never_negative(self):
        """Balances fall monotonically and stay non-negative."""
        loan = amortize(25000, 7.9, 60)
        balances = [item.balance for item in loan.schedule]

        assert all(b >= 0 for b in balances)
        assert all(later <= earlier for earlier, later in zip(balances, balances[1:]))

    def test_first_month_split(self):
        """The first payment splits into a month of interest plus principal."""
        loan = amortize(10000, 12.0, 12)
        first = loan.schedule[0]

        assert first.month == 1
        assert_float_equal(first.interest, 100.0)
        assert_float_equal(first.principal, first.payment - 100.0)
        assert first.payment == loan.payment

    def test_total_interest_is_payments_minus_principal(self):
        """Total interest equals payments minus principal."""
        loan = amortize(20000, 5.0, 48)

        assert loan.total_payment == pytest.approx(loan.payment * 48)
        assert loan.total_interest == pytest.approx(loan.payment * 48 - 20000)
        assert loan.total_interest == pytest.approx(
            sum(item.interest for item in loan.schedule), abs=1e-6
        )
        assert loan.interest_percentage == pytest.approx(loan.total_interest / 20000 * 100)

    def test_zero_rate_schedule(self):
        """A zero-rate schedule carries no interest."""
        loan = amortize(12000, 0, 12)

        assert loan.payment == 1000.0
        assert all(item.interest == 0 for item in loan.schedule)
        assert loan.total_interest == 0.0
        assert loan.schedule[-1].balance == pytest.approx(0.0, abs=1e-9)

    def test_invalid_loan_returns_empty_schedule(self):
        """An invalid loan gives an empty schedule."""
        loan = amortize(0, 6.0, 360)

        assert loan.payment == 0.0
        assert loan.schedule == []
        assert loan.total_interest == 0.0
        assert loan.interest_percentage == 0.0


class TestYearlyBreakdown:
    """Rolling monthly rows into loan years."""

    def test_rolls_months_into_years_with_partial_tail(self):
        """A 30-month loan rolls into two full years and a partial one."""
        loan = amortize(10000, 6.0, 30)
        years = yearly_breakdown(loan.schedule)

        assert [row.year for row in years] == [1, 2, 3]
        assert years[-1].balance == loan.schedule[-1].balance
        assert sum(row.interest for row in years) == pytest.approx(
            sum(item.interest for item in loan.schedule)
        )
        assert years[0].balance == loan.schedule[11].balance

    def test_empty_schedule(self):
        """An empty schedule has no years."""
        assert yearly_breakdown([]) == []


class TestTermConversion:
    """Loan terms in years or months."""

    def test_years_and_months(self):
        """Years multiply by twelve and months pass through."""
        assert term_in_months(30, "years") == 360
        assert term_in_months(18, "months") == 18
        assert term_in_months(2.5, "Years") == 30

    def test_unknown_unit(self):
        """An unknown term unit is a caller error."""
        with pytest.raises(ValueError):
            term_in_months(5, "decades")


class TestMortgageQuote:
    """Monthly mortgage cost with taxes, insurance, HOA and PMI."""

    def test_twenty_percent_down_skips_pmi(self):
        """Twenty percent down drops PMI and adds monthly escrow items."""
        quote = mortgage_quote(
            400000, 80000, 6.5, 30, property_tax=4800, insurance=1200, hoa=50, pmi=100
        )

        assert quote.loan_amount == 320000
        assert quote.down_payment_percentage == pytest.approx(20.0)
        assert quote.pmi == 0.0
        assert quote.property_tax == pytest.approx(400.0)
        assert quote.insurance == pytest.approx(100.0)
        assert quote.hoa == 50.0
        assert_float_equal(quote.principal_and_interest, 2022.62, tolerance=0.05)
        assert quote.total_monthly_payment == pytest.approx(quote.principal_and_interest + 550.0)

    def test_low_down_payment_adds_pmi(self):
        """Under twenty percent down adds PMI to the monthly total."""
        quote = mortgage_quote(400000, 40000, 6.5, 30, pmi=150)

        assert quote.pmi == 150.0
        assert quote.total_monthly_payment == pytest.approx(quote.principal_and_interest + 150.0)

    def test_add_ons_do_not_change_interest(self):
        """Escrow add-ons leave the loan itself unchanged."""
        bare = mortgage_quote(300000, 60000, 7.0, 15)
        loaded = mortgage_quote(300000, 60000, 7.0, 15, property_tax=6000, hoa=200)

        assert bare.total_interest == pytest.approx(loaded.total_interest)
        assert len(loaded.loan.schedule) == 180

    def test_down_payment_above_price_means_no_loan(self):
        """A down payment covering the price leaves nothing to borrow."""
        quote = mortgage_quote(200000, 250000, 6.0, 30)

        assert quote.loan_amount == 0.0
        assert quote.principal_and_interest == 0.0
        assert quote.loan.schedule == []
