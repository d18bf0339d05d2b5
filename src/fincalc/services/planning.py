"""Budgeting, paycheck, net worth, inflation and investment return calculators.

These are deliberately simple models: taxes are flat percentages and
inflation is a constant annual rate.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

BUDGET_RULES: dict[str, tuple[float, float, float]] = {
    "50/30/20": (50.0, 30.0, 20.0),
    "60/20/20": (60.0, 20.0, 20.0),
    "70/20/10": (70.0, 20.0, 10.0),
}

PAY_PERIODS: dict[str, int] = {
    "weekly": 52,
    "biweekly": 26,
    "semimonthly": 24,
    "monthly": 12,
}

NET_WORTH_TIERS: list[tuple[float, str]] = [
    (0, "Needs Improvement"),
    (10_000, "Getting Started"),
    (50_000, "Building Wealth"),
    (100_000, "Strong Position"),
    (500_000, "Excellent"),
]

RETURN_TIERS: list[tuple[float, str]] = [
    (0, "Loss"),
    (3, "Poor"),
    (7, "Below Average"),
    (10, "Good"),
    (15, "Excellent"),
]

_TIME_UNITS = {"years": 1.0, "months": 1.0 / 12.0, "days": 1.0 / 365.0}


def _tier(value: float, tiers: list[tuple[float, str]], top: str) -> str:
    for upper, label in tiers:
        if value < upper:
            return label
    return top


@dataclass(slots=True)
class BudgetSplit:
    """Lightweight DTO for a needs / wants / savings split."""

    income: float
    needs_pct: float
    wants_pct: float
    savings_pct: float

    @property
    def needs(self) -> float:
        return self.income * self.needs_pct / 100

    @property
    def wants(self) -> float:
        return self.income * self.wants_pct / 100

    @property
    def savings(self) -> float:
        return self.income * self.savings_pct / 100

    @property
    def annual_savings(self) -> float:
        return self.savings * 12


def budget_split(
    income: float,
    rule: str = "50/30/20",
    *,
    custom: tuple[float, float, float] | None = None,
) -> BudgetSplit:
    """Split monthly income by a named rule or custom percentages."""

    if custom is not None:
        if abs(sum(custom) - 100.0) > 1e-9:
            raise ValueError("Custom budget percentages must total 100.")
        needs, wants, savings = custom
    else:
        try:
            needs, wants, savings = BUDGET_RULES[rule]
        except KeyError:
            raise ValueError(f"Unknown budget rule: {rule!r}") from None
    return BudgetSplit(max(income, 0.0), needs, wants, savings)


@dataclass(slots=True)
class Paycheck:
    frequency: str
    gross: float
    federal_tax: float
    state_tax: float
    social_security: float
    medicare: float
    health_insurance: float
    retirement_401k: float
    other_deductions: float

    @property
    def periods_per_year(self) -> int:
        return PAY_PERIODS[self.frequency]

    @property
    def total_taxes(self) -> float:
        return self.federal_tax + self.state_tax + self.social_security + self.medicare

    @property
    def total_deductions(self) -> float:
        return self.health_insurance + self.retirement_401k + self.other_deductions

    @property
    def net(self) -> float:
        return self.gross - self.total_taxes - self.total_deductions

    @property
    def annual_net(self) -> float:
        return self.net * self.periods_per_year

    @property
    def monthly_net(self) -> float:
        return self.annual_net / 12

    @property
    def effective_tax_rate(self) -> float:
        if self.gross <= 0:
            return 0.0
        return self.total_taxes / self.gross * 100


def paycheck(
    annual_salary: float,
    frequency: str = "biweekly",
    *,
    federal_pct: float = 0.0,
    state_pct: float = 0.0,
    social_security_pct: float = 6.2,
    medicare_pct: float = 1.45,
    health_insurance: float = 0.0,
    retirement_401k_pct: float = 0.0,
    other_deductions: float = 0.0,
) -> Paycheck:
    """Estimate take-home pay per period using flat withholding percentages."""

    if frequency not in PAY_PERIODS:
        raise ValueError(f"Unknown pay frequency: {frequency!r}")
    gross = max(annual_salary, 0.0) / PAY_PERIODS[frequency]
    return Paycheck(
        frequency=frequency,
        gross=gross,
        federal_tax=gross * federal_pct / 100,
        state_tax=gross * state_pct / 100,
        social_security=gross * social_security_pct / 100,
        medicare=gross * medicare_pct / 100,
        health_insurance=health_insurance,
        retirement_401k=gross * retirement_401k_pct / 100,
        other_deductions=other_deductions,
    )


@dataclass(slots=True)
class BalanceLine:
    name: str
    category: str
    value: float


@dataclass(slots=True)
class NetWorth:
    assets: list[BalanceLine] = field(default_factory=list)
    liabilities: list[BalanceLine] = field(default_factory=list)

    @property
    def total_assets(self) -> float:
        return sum(line.value for line in self.assets)

    @property
    def total_liabilities(self) -> float:
        return sum(line.value for line in self.liabilities)

    @property
    def net_worth(self) -> float:
        return self.total_assets - self.total_liabilities

    @property
    def status(self) -> str:
        return _tier(self.net_worth, NET_WORTH_TIERS, "Outstanding")

    def assets_by_category(self) -> dict[str, float]:
        return _by_category(self.assets)

    def liabilities_by_category(self) -> dict[str, float]:
        return _by_category(self.liabilities)


def _by_category(lines: Iterable[BalanceLine]) -> dict[str, float]:
    totals: dict[str, float] = {}
    for line in lines:
        totals[line.category] = totals.get(line.category, 0.0) + line.value
    return totals


def net_worth(
    assets: Iterable[BalanceLine], liabilities: Iterable[BalanceLine]
) -> NetWorth:
    """Build a net worth statement; negative line values are ignored."""

    return NetWorth(
        assets=[line for line in assets if line.value >= 0],
        liabilities=[line for line in liabilities if line.value >= 0],
    )


INFLATION_MODES = ("future_value", "past_value", "required_amount")


def inflation_multiplier(annual_rate: float, years: float) -> float:
    return (1 + annual_rate / 100) ** years


def inflation_adjust(amount: float, annual_rate: float, years: float, mode: str = "future_value") -> float:
    """Adjust ``amount`` for constant inflation.

    future_value: purchasing power of today's money after ``years``.
    past_value / required_amount: amount scaled up by cumulative inflation.
    """

    if mode not in INFLATION_MODES:
        raise ValueError(f"Unknown inflation mode: {mode!r}")
    if amount <= 0 or annual_rate < 0 or years <= 0:
        return 0.0
    multiplier = inflation_multiplier(annual_rate, years)
    if mode == "future_value":
        return amount / multiplier
    return amount * multiplier


def cumulative_inflation(annual_rate: float, years: float) -> float:
    """Total price increase over the period, as a percentage."""
    return (inflation_multiplier(annual_rate, years) - 1) * 100


@dataclass(slots=True)
class InvestmentReturn:
    total_invested: float
    current_value: float
    years_held: float

    @property
    def total_return(self) -> float:
        return self.current_value - self.total_invested

    @property
    def return_percentage(self) -> float:
        if self.total_invested <= 0:
            return 0.0
        return self.total_return / self.total_invested * 100

    @property
    def annualized_return(self) -> float:
        if self.total_invested <= 0 or self.years_held <= 0 or self.current_value < 0:
            return 0.0
        return ((self.current_value / self.total_invested) ** (1.0 / self.years_held) - 1) * 100

    @property
    def performance(self) -> str:
        return _tier(self.annualized_return, RETURN_TIERS, "Outstanding")

    def projected_value(self, years: float) -> float:
        """Current value grown forward at the annualized rate."""
        return self.current_value * (1 + self.annualized_return / 100) ** years


def investment_returns(
    initial: float,
    additional: float,
    current_value: float,
    time_held: float,
    unit: str = "years",
) -> InvestmentReturn:
    try:
        multiplier = _TIME_UNITS[unit]
    except KeyError:
        raise ValueError(f"Unknown time unit: {unit!r}") from None
    return InvestmentReturn(
        total_invested=initial + additional,
        current_value=current_value,
        years_held=time_held * multiplier,
    )


__all__ = [
    "BalanceLine",
    "BudgetSplit",
    "InvestmentReturn",
    "NetWorth",
    "Paycheck",
    "budget_split",
    "cumulative_inflation",
    "inflation_adjust",
    "investment_returns",
    "net_worth",
    "paycheck",
]
