"""Compound growth projections and savings-goal solvers."""

from __future__ import annotations

import math

from ..logging_config import get_logger
from ..models.growth import (
    CompoundFrequency,
    DrawdownPlan,
    DrawdownYear,
    EmergencyFundPlan,
    GrowthProjection,
    RetirementProjection,
    YearlyBreakdown,
)

logger = get_logger(__name__)

MAX_GOAL_MONTHS = 600
MAX_DRAWDOWN_YEARS = 100
SAFE_WITHDRAWAL_RATE = 0.04


def annuity_future_value(monthly_contribution: float, monthly_rate: float, months: float) -> float:
    """Future value of equal monthly contributions compounded monthly."""

    if monthly_rate == 0:
        return monthly_contribution * months
    return monthly_contribution * (((1 + monthly_rate) ** months - 1) / monthly_rate)


def _value_at(
    principal: float,
    monthly_contribution: float,
    rate: float,
    compounds_per_year: int,
    years: float,
) -> float:
    lump_sum = principal * (1 + rate / compounds_per_year) ** (compounds_per_year * years)
    return lump_sum + annuity_future_value(monthly_contribution, rate / 12, years * 12)


def project_growth(
    principal: float,
    monthly_contribution: float,
    annual_rate: float,
    years: float,
    compounds_per_year: int = CompoundFrequency.MONTHLY,
) -> GrowthProjection:
    """Project a lump sum plus monthly contributions under compounding.

    The lump sum compounds ``compounds_per_year`` times a year; contributions
    always compound monthly. The yearly ledger evaluates the closed form at
    every whole year from 0 to ``years`` independently.
    """

    try:
        frequency = CompoundFrequency(int(compounds_per_year))
    except ValueError:
        logger.warning("Unsupported compounding frequency", extra={"frequency": compounds_per_year})
        return GrowthProjection()

    if principal < 0 or monthly_contribution < 0 or annual_rate < 0 or years <= 0:
        logger.warning(
            "Growth inputs rejected",
            extra={
                "principal": principal,
                "contribution": monthly_contribution,
                "annual_rate": annual_rate,
                "years": years,
            },
        )
        return GrowthProjection()

    rate = annual_rate / 100
    n = int(frequency)
    total_value = _value_at(principal, monthly_contribution, rate, n, years)
    total_contributions = principal + monthly_contribution * years * 12

    yearly: list[YearlyBreakdown] = []
    for year in range(0, int(years) + 1):
        contributed = principal + monthly_contribution * year * 12
        total = _value_at(principal, monthly_contribution, rate, n, float(year))
        yearly.append(
            YearlyBreakdown(year=year, principal=contributed, interest=total - contributed, total=total)
        )

    return GrowthProjection(
        total_value=total_value,
        total_contributions=total_contributions,
        total_interest=total_value - total_contributions,
        yearly=yearly,
    )


def months_to_goal(
    starting_balance: float,
    monthly_contribution: float,
    annual_rate: float,
    target_amount: float,
    *,
    max_months: int = MAX_GOAL_MONTHS,
) -> int | None:
    """Return the number of months of saving needed to reach ``target_amount``.

    Returns 0 when the balance already meets the target and ``None`` when the
    goal is unreachable (no growth at all, or not reached within
    ``max_months``). The zero-rate path is solved directly but still honours
    the cap.
    """

    if starting_balance >= target_amount:
        return 0
    if monthly_contribution < 0 or annual_rate < 0:
        return None

    monthly_rate = annual_rate / 100 / 12
    if monthly_rate == 0:
        if monthly_contribution <= 0:
            return None
        months = math.ceil((target_amount - starting_balance) / monthly_contribution)
        if months > max_months:
            logger.warning(
                "Savings goal not reached within cap",
                extra={"max_months": max_months, "target": target_amount},
            )
            return None
        return months

    if monthly_contribution <= 0 and starting_balance <= 0:
        return None

    balance = starting_balance
    months = 0
    while balance < target_amount and months < max_months:
        balance = balance * (1 + monthly_rate) + monthly_contribution
        months += 1

    if balance < target_amount:
        logger.warning(
            "Savings goal not reached within cap",
            extra={"max_months": max_months, "target": target_amount},
        )
        return None
    return months


def retirement_projection(
    current_age: float,
    retirement_age: float,
    current_savings: float,
    monthly_contribution: float,
    employer_match: float = 0.0,
    expected_return: float = 7.0,
    desired_monthly_income: float = 0.0,
) -> RetirementProjection:
    """Project savings at retirement and test them against a target income.

    Existing savings compound annually; contributions plus employer match
    compound monthly. Income uses the 4% withdrawal rule.
    """

    years = max(0.0, retirement_age - current_age)
    rate = max(expected_return, 0.0) / 100
    months = years * 12
    total_monthly = max(monthly_contribution, 0.0) + max(employer_match, 0.0)
    savings = max(current_savings, 0.0)

    total = savings * (1 + rate) ** years + annuity_future_value(total_monthly, rate / 12, months)
    monthly_income = total * SAFE_WITHDRAWAL_RATE / 12
    shortfall = max(0.0, desired_monthly_income - monthly_income)
    additional_savings = shortfall * 12 / SAFE_WITHDRAWAL_RATE if shortfall > 0 else 0.0

    return RetirementProjection(
        years_until_retirement=years,
        total_at_retirement=total,
        total_contributions=savings + total_monthly * months,
        monthly_income=monthly_income,
        shortfall=shortfall,
        additional_savings_needed=additional_savings,
        additional_monthly_needed=additional_savings / months if months > 0 else 0.0,
    )


def retirement_drawdown(
    savings: float,
    annual_return: float,
    *,
    withdrawal_amount: float | None = None,
    withdrawal_pct: float | None = None,
    max_years: int = MAX_DRAWDOWN_YEARS,
) -> DrawdownPlan:
    """Simulate yearly withdrawals from a retirement balance.

    Each year the balance earns ``annual_return`` percent, then the
    withdrawal is taken. A fixed ``withdrawal_amount`` stays the same every
    year; ``withdrawal_pct`` is taken from the balance at the start of each
    year. A withdrawal never exceeds what is available, so the last row ends
    at zero. ``years_lasted`` is ``None`` when money remains after
    ``max_years``.
    """

    if (withdrawal_amount is None) == (withdrawal_pct is None):
        raise ValueError("Pass exactly one of withdrawal_amount or withdrawal_pct")

    requested = withdrawal_amount if withdrawal_amount is not None else withdrawal_pct
    if savings <= 0 or requested <= 0:
        logger.warning(
            "Drawdown skipped for invalid input",
            extra={"savings": savings, "withdrawal": requested},
        )
        return DrawdownPlan()

    rate = annual_return / 100
    balance = savings
    yearly: list[DrawdownYear] = []
    for year in range(1, max_years + 1):
        gains = balance * rate
        wanted = withdrawal_amount if withdrawal_amount is not None else balance * withdrawal_pct / 100
        withdrawal = min(wanted, balance + gains)
        ending = balance + gains - withdrawal
        yearly.append(
            DrawdownYear(
                year=year,
                starting_balance=balance,
                gains=gains,
                withdrawal=withdrawal,
                ending_balance=max(0.0, ending),
            )
        )
        if ending <= 0:
            return DrawdownPlan(yearly=yearly, years_lasted=year)
        balance = ending

    logger.info("Savings outlast the drawdown horizon", extra={"max_years": max_years})
    return DrawdownPlan(yearly=yearly, years_lasted=None)


def emergency_fund_plan(
    monthly_expenses: float,
    target_months: float = 6,
    current_savings: float = 0.0,
    monthly_savings: float = 0.0,
    annual_rate: float = 0.0,
    *,
    max_months: int = MAX_GOAL_MONTHS,
) -> EmergencyFundPlan:
    """Size an emergency fund and estimate how long it takes to fill."""

    expenses = max(monthly_expenses, 0.0)
    target_amount = expenses * target_months
    remaining = max(0.0, target_amount - current_savings)

    months: int | None = 0
    if remaining > 0:
        months = months_to_goal(
            current_savings, monthly_savings, annual_rate, target_amount, max_months=max_months
        )

    return EmergencyFundPlan(
        target_amount=target_amount,
        current_amount=current_savings,
        remaining_amount=remaining,
        progress_percentage=(current_savings / target_amount * 100) if target_amount > 0 else 0.0,
        months_to_goal=months,
        monthly_savings_for_1_year=remaining / 12,
        monthly_savings_for_2_years=remaining / 24,
        monthly_savings_for_3_years=remaining / 36,
        three_month_target=expenses * 3,
        six_month_target=expenses * 6,
        twelve_month_target=expenses * 12,
        recommended_months=6 if expenses >= 3000 else 3,
        annual_interest_earnings=target_amount * annual_rate / 100,
    )


__all__ = [
    "annuity_future_value",
    "emergency_fund_plan",
    "months_to_goal",
    "project_growth",
    "retirement_drawdown",
    "retirement_projection",
]
