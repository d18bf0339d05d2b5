"""Compound growth and savings-goal value types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class CompoundFrequency(IntEnum):
    """Compounding periods per year."""

    ANNUALLY = 1
    SEMI_ANNUALLY = 2
    QUARTERLY = 4
    MONTHLY = 12
    DAILY = 365

    @property
    def display_name(self) -> str:
        return self.name.replace("_", "-").title()


@dataclass(slots=True)
class YearlyBreakdown:
    """Projection snapshot at the end of a year.

    ``principal`` is cumulative contributions, ``interest`` the growth on top.
    """

    year: int
    principal: float
    interest: float
    total: float


@dataclass(slots=True)
class GrowthProjection:
    total_value: float = 0.0
    total_contributions: float = 0.0
    total_interest: float = 0.0
    yearly: list[YearlyBreakdown] = field(default_factory=list)


@dataclass(slots=True)
class RetirementProjection:
    """Nest egg at retirement and the income it supports (4% rule)."""

    years_until_retirement: float
    total_at_retirement: float
    total_contributions: float
    monthly_income: float
    shortfall: float
    additional_savings_needed: float
    additional_monthly_needed: float = 0.0

    @property
    def on_track(self) -> bool:
        return self.shortfall <= 0


@dataclass(slots=True)
class DrawdownYear:
    """One retirement year: gains are added, then the withdrawal is taken."""

    year: int
    starting_balance: float
    gains: float
    withdrawal: float
    ending_balance: float


@dataclass(slots=True)
class DrawdownPlan:
    """Year-by-year drawdown of a nest egg.

    ``years_lasted`` is ``None`` when the money outlasts the simulated horizon.
    """

    yearly: list[DrawdownYear] = field(default_factory=list)
    years_lasted: int | None = None

    @property
    def lasts_indefinitely(self) -> bool:
        return bool(self.yearly) and self.years_lasted is None

    @property
    def total_withdrawn(self) -> float:
        return sum(row.withdrawal for row in self.yearly)


@dataclass(slots=True)
class EmergencyFundPlan:
    target_amount: float
    current_amount: float
    remaining_amount: float
    progress_percentage: float
    months_to_goal: int | None
    monthly_savings_for_1_year: float
    monthly_savings_for_2_years: float
    monthly_savings_for_3_years: float
    three_month_target: float
    six_month_target: float
    twelve_month_target: float
    recommended_months: int
    annual_interest_earnings: float

    @property
    def is_funded(self) -> bool:
        return self.remaining_amount <= 0
