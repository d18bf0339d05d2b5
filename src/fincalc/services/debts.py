"""Debt payoff calculators (snowball and avalanche)."""

from __future__ import annotations

from typing import Callable, Iterable

from ..logging_config import get_logger
from ..models.debt import (
    PAID_OFF_THRESHOLD,
    Debt,
    MonthlyPayment,
    PayoffPlan,
    PayoffResult,
    StrategyComparison,
)

logger = get_logger(__name__)

MAX_PAYOFF_MONTHS = 600  # 50 years

SNOWBALL = "snowball"
AVALANCHE = "avalanche"


def snowball_order(debts: Iterable[Debt]) -> list[Debt]:
    """Smallest balance first; ties keep input order."""
    return sorted(debts, key=lambda d: d.balance)


def avalanche_order(debts: Iterable[Debt]) -> list[Debt]:
    """Highest APR first; ties keep input order."""
    return sorted(debts, key=lambda d: d.annual_rate, reverse=True)


STRATEGIES: dict[str, tuple[str, Callable[[Iterable[Debt]], list[Debt]]]] = {
    SNOWBALL: ("Snowball", snowball_order),
    AVALANCHE: ("Avalanche", avalanche_order),
}


def simulate_ordered(
    ordered_debts: Iterable[Debt],
    extra_payment: float,
    *,
    method: str = "Custom",
    max_months: int = MAX_PAYOFF_MONTHS,
) -> PayoffResult:
    """Run the month-by-month payoff simulation for debts in priority order.

    Each month every active debt accrues interest and receives its minimum
    payment. Afterwards the whole ``extra_payment`` goes to the first debt
    that still carries a balance. Extra left over after clearing that debt
    is not passed on to the next debt in the same month.

    The loop stops once every balance is at or below one cent, or after
    ``max_months``; in the latter case ``reached_cap`` is set and
    ``remaining_balance`` holds what is still owed.
    """

    debts = list(ordered_debts)
    result = PayoffResult(method=method, order=[d.name for d in debts])
    if not debts:
        return result

    balances = [d.balance for d in debts]
    extra = max(float(extra_payment or 0.0), 0.0)
    month = 0

    while any(b > PAID_OFF_THRESHOLD for b in balances) and month < max_months:
        month += 1
        entries: dict[int, MonthlyPayment] = {}

        for idx, debt in enumerate(debts):
            balance = balances[idx]
            if balance <= PAID_OFF_THRESHOLD:
                continue

            interest_payment = balance * debt.monthly_rate
            principal_payment = min(debt.minimum_payment - interest_payment, balance)
            balances[idx] = max(0.0, balance - principal_payment)
            result.total_interest += interest_payment

            entry = MonthlyPayment(
                month=month,
                debt_name=debt.name,
                payment=principal_payment + interest_payment,
                principal_payment=principal_payment,
                interest_payment=interest_payment,
                remaining_balance=balances[idx],
            )
            entries[idx] = entry
            result.monthly_breakdown.append(entry)

        target = next(
            (idx for idx, balance in enumerate(balances) if balance > PAID_OFF_THRESHOLD),
            None,
        )
        if target is not None and extra > 0:
            extra_applied = min(extra, balances[target])
            balances[target] = max(0.0, balances[target] - extra_applied)
            entries[target].extra_payment = extra_applied
            entries[target].remaining_balance = balances[target]

    result.total_months = month
    result.remaining_balance = sum(b for b in balances if b > PAID_OFF_THRESHOLD)
    result.reached_cap = result.remaining_balance > 0

    if result.reached_cap:
        logger.warning(
            "Payoff simulation hit the month cap",
            extra={
                "method": method,
                "max_months": max_months,
                "remaining_balance": round(result.remaining_balance, 2),
            },
        )
    else:
        logger.debug(
            "Payoff simulation finished",
            extra={"method": method, "months": month, "interest": round(result.total_interest, 2)},
        )
    return result


def simulate_payoff(
    debts: Iterable[Debt],
    extra_payment: float,
    strategy: str,
    *,
    max_months: int = MAX_PAYOFF_MONTHS,
) -> PayoffResult:
    """Order debts by ``strategy`` and simulate the payoff.

    Debts without a positive balance, rate and minimum are dropped first;
    when none remain the result is empty (zero months, zero interest).
    """

    key = (strategy or "").strip().lower()
    if key not in STRATEGIES:
        raise ValueError("Invalid debt payoff strategy.")
    method, order = STRATEGIES[key]

    payable = [d for d in debts if d.is_payable]
    if not payable:
        logger.warning("No payable debts supplied", extra={"method": method})
        return PayoffResult(method=method)

    return simulate_ordered(order(payable), extra_payment, method=method, max_months=max_months)


def snowball_payoff(debts: Iterable[Debt], extra_payment: float, **kwargs) -> PayoffResult:
    """Return payoff result prioritizing smallest balances first."""
    return simulate_payoff(debts, extra_payment, SNOWBALL, **kwargs)


def avalanche_payoff(debts: Iterable[Debt], extra_payment: float, **kwargs) -> PayoffResult:
    """Return payoff result prioritizing highest APR first."""
    return simulate_payoff(debts, extra_payment, AVALANCHE, **kwargs)


def compare_payoff_strategies(
    debts: Iterable[Debt],
    extra_payment: float,
    *,
    max_months: int = MAX_PAYOFF_MONTHS,
) -> StrategyComparison:
    """Simulate both strategies over the same debts."""

    debt_list = list(debts)
    return StrategyComparison(
        snowball=snowball_payoff(debt_list, extra_payment, max_months=max_months),
        avalanche=avalanche_payoff(debt_list, extra_payment, max_months=max_months),
    )


def compare_plan(plan: PayoffPlan, *, max_months: int = MAX_PAYOFF_MONTHS) -> StrategyComparison:
    return compare_payoff_strategies(
        plan.debts, plan.extra_monthly_payment, max_months=max_months
    )


__all__ = [
    "AVALANCHE",
    "MAX_PAYOFF_MONTHS",
    "SNOWBALL",
    "avalanche_order",
    "avalanche_payoff",
    "compare_payoff_strategies",
    "compare_plan",
    "simulate_ordered",
    "simulate_payoff",
    "snowball_order",
    "snowball_payoff",
]
