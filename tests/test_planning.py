"""Tests for budget, paycheck, net worth, inflation and return calculators."""

from __future__ import annotations

import pytest

from fincalc.services.planning import (
    BalanceLine,
    budget_split,
    cumulative_inflation,
    inflation_adjust,
    investment_returns,
    net_worth,
    paycheck,
)
from tests.conftest import assert_float_equal


class TestBudgetSplit:
    """Splitting income by a budget rule."""

    def test_fifty_thirty_twenty(self):
        """The default 50/30/20 rule."""
        split = budget_split(5000)

        assert (split.needs, split.wants, split.savings) == (2500, 1500, 1000)
        assert split.annual_savings == 12000

    def test_named_rule(self):
        """A named rule picks its own percentages."""
        split = budget_split(4000, "70/20/10")
        assert split.savings == pytest.approx(400)

    def test_custom_percentages(self):
        """Custom percentages are applied as given."""
        split = budget_split(3000, custom=(55, 25, 20))
        assert split.needs == pytest.approx(1650)

    def test_custom_must_total_one_hundred(self):
        """Custom percentages must add up to 100."""
        with pytest.raises(ValueError, match="total 100"):
            budget_split(3000, custom=(50, 30, 30))

    def test_unknown_rule(self):
        """An unknown rule name is a caller error."""
        with pytest.raises(ValueError):
            budget_split(3000, "80/10/10")

    def test_negative_income_clamped(self):
        """Negative income is treated as zero."""
        assert budget_split(-100).needs == 0.0


class TestPaycheck:
    """Take-home pay per period."""

    def test_biweekly_take_home(self):
        """Taxes and deductions come out of a biweekly gross."""
        check = paycheck(
            52000,
            "biweekly",
            federal_pct=12,
            state_pct=5,
            health_insurance=100,
            retirement_401k_pct=5,
        )

        assert check.gross == pytest.approx(2000)
        assert check.social_security == pytest.approx(124)
        assert check.medicare == pytest.approx(29)
        assert check.total_taxes == pytest.approx(493)
        assert check.total_deductions == pytest.approx(200)
        assert check.net == pytest.approx(1307)
        assert check.annual_net == pytest.approx(1307 * 26)
        assert_float_equal(check.effective_tax_rate, 24.65)

    def test_monthly_frequency(self):
        """Monthly pay divides the salary by twelve."""
        check = paycheck(60000, "monthly", social_security_pct=0, medicare_pct=0)

        assert check.gross == pytest.approx(5000)
        assert check.net == pytest.approx(5000)
        assert check.monthly_net == pytest.approx(5000)

    def test_unknown_frequency(self):
        """An unknown pay frequency is a caller error."""
        with pytest.raises(ValueError, match="pay frequency"):
            paycheck(50000, "daily")

    def test_zero_salary_has_no_tax_rate(self):
        """No salary means a zero effective tax rate."""
        assert paycheck(0).effective_tax_rate == 0.0


class TestNetWorth:
    """Assets minus liabilities."""

    def test_statement_totals_and_status(self):
        """Totals, status and category roll-up."""
        statement = net_worth(
            [
                BalanceLine("House", "Real Estate", 300000),
                BalanceLine("Checking", "Cash", 10000),
                BalanceLine("Savings", "Cash", 5000),
            ],
            [BalanceLine("Mortgage", "Mortgage", 250000)],
        )

        assert statement.total_assets == 315000
        assert statement.total_liabilities == 250000
        assert statement.net_worth == 65000
        assert statement.status == "Strong Position"
        assert statement.assets_by_category() == {"Real Estate": 300000, "Cash": 15000}

    def test_negative_net_worth(self):
        """Liabilities above assets need improvement."""
        statement = net_worth([BalanceLine("Car", "Vehicle", 5000)], [BalanceLine("Card", "Credit", 9000)])
        assert statement.net_worth == -4000
        assert statement.status == "Needs Improvement"

    def test_negative_lines_ignored(self):
        """Negative balance lines are dropped."""
        statement = net_worth([BalanceLine("Oops", "Cash", -50)], [])
        assert statement.assets == []
        assert statement.status == "Getting Started"


class TestInflation:
    """Inflation-adjusted values."""

    def test_future_purchasing_power(self):
        """Future purchasing power shrinks at the inflation rate."""
        assert_float_equal(inflation_adjust(1000, 3.0, 10), 744.09)

    def test_required_amount(self):
        """The required amount grows at the inflation rate."""
        assert_float_equal(inflation_adjust(1000, 3.0, 10, "required_amount"), 1343.92)
        assert inflation_adjust(1000, 3.0, 10, "past_value") == inflation_adjust(
            1000, 3.0, 10, "required_amount"
        )

    def test_cumulative(self):
        """Cumulative inflation compounds yearly."""
        assert_float_equal(cumulative_inflation(3.0, 10), 34.39)

    def test_invalid_inputs(self):
        """Bad amounts give zero and an unknown mode raises."""
        assert inflation_adjust(0, 3.0, 10) == 0.0
        assert inflation_adjust(1000, 3.0, 0) == 0.0
        with pytest.raises(ValueError):
            inflation_adjust(1000, 3.0, 10, "sideways")


class TestInvestmentReturns:
    """Total and annualized investment returns."""

    def test_gain(self):
        """A gain reports total, percentage and annualized return."""
        result = investment_returns(10000, 5000, 20000, 5)

        assert result.total_invested == 15000
        assert result.total_return == 5000
        assert_float_equal(result.return_percentage, 33.33)
        assert_float_equal(result.annualized_return, 5.92)
        assert result.performance == "Below Average"
        assert result.projected_value(0) == 20000

    def test_loss(self):
        """A loss is rated as such."""
        result = investment_returns(10000, 0, 8000, 2)

        assert result.total_return == -2000
        assert result.annualized_return < 0
        assert result.performance == "Loss"

    def test_months_converted_to_years(self):
        """A holding period in months converts to years."""
        assert investment_returns(1000, 0, 1100, 18, "months").years_held == pytest.approx(1.5)

    def test_unknown_unit(self):
        """An unknown holding-period unit is a caller error."""
        with pytest.raises(ValueError):
            investment_returns(1000, 0, 1100, 1, "weeks")

    def test_nothing_invested(self):
        """Nothing invested gives zero returns."""
        result = investment_returns(0, 0, 0, 1)
        assert result.return_percentage == 0.0
        assert result.annualized_return == 0.0
