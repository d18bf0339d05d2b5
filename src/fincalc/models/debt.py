"""Debt payoff value types."""

from __future__ import annotations

from dataclasses import dataclass, field

PAID_OFF_THRESHOLD = 0.01


@dataclass(slots=True, frozen=True)
class Debt:
    """A liability snapshot used as payoff simulation input.

    ``annual_rate`` is a percentage (18.99 means 18.99% APR).
    """

    name: str
    balance: float
    annual_rate: float
    minimum_payment: float

    @property
    def monthly_rate(self) -> float:
        return self.annual_rate / 100 / 12

    @property
    def is_payable(self) -> bool:
        """True when the debt can take part in a payoff simulation."""
        return self.balance > 0 and self.annual_rate > 0 and self.minimum_payment > 0


@dataclass(slots=True)
class PayoffPlan:
    """A set of debts plus the monthly budget on top of all minimums."""

    debts: list[Debt] = field(default_factory=list)
    extra_monthly_payment: float = 0.0

    @property
    def payable_debts(self) -> list[Debt]:
        return [debt for debt in self.debts if debt.is_payable]

    @property
    def is_runnable(self) -> bool:
        return bool(self.payable_debts)

    @property
    def total_balance(self) -> float:
        return sum(debt.balance for debt in self.payable_debts)

    @property
    def total_minimums(self) -> float:
        return sum(debt.minimum_payment for debt in self.payable_debts)


@dataclass(slots=True)
class MonthlyPayment:
    """One debt's activity within one simulated month.

    ``payment`` is what was applied toward the minimum, i.e.
    ``principal_payment + interest_payment``. It equals the contractual
    minimum except in a final month, where only the amount owed is paid.
    ``extra_payment`` is recorded separately and ``remaining_balance`` is the
    balance after both the minimum and the extra were applied. Schedules that
    report the contractual minimum and the pre-extra balance can be rebuilt
    from ``total_paid`` and ``extra_payment``.
    """

    month: int
    debt_name: str
    payment: float
    principal_payment: float
    interest_payment: float
    remaining_balance: float
    extra_payment: float = 0.0

    @property
    def total_paid(self) -> float:
        return self.payment + self.extra_payment


@dataclass(slots=True)
class PayoffResult:
    """Outcome of a single payoff simulation."""

    method: str
    total_months: int = 0
    total_interest: float = 0.0
    monthly_breakdown: list[MonthlyPayment] = field(default_factory=list)
    order: list[str] = field(default_factory=list)
    remaining_balance: float = 0.0
    reached_cap: bool = False

    @property
    def years(self) -> float:
        return self.total_months / 12.0

    @property
    def paid_off(self) -> bool:
        return self.total_months > 0 and not self.reached_cap

    @property
    def total_paid(self) -> float:
        return sum(entry.total_paid for entry in self.monthly_breakdown)

    def balance_by_month(self) -> list[float]:
        """Return the total remaining balance at the end of each month."""

        totals: dict[int, float] = {}
        for entry in self.monthly_breakdown:
            totals[entry.month] = totals.get(entry.month, 0.0) + entry.remaining_balance
        return [totals[month] for month in sorted(totals)]

    def debt_payoff_months(self) -> dict[str, int]:
        """Map each debt name to the month its balance cleared."""

        payoff: dict[str, int] = {}
        for entry in self.monthly_breakdown:
            if entry.remaining_balance <= PAID_OFF_THRESHOLD and entry.debt_name not in payoff:
                payoff[entry.debt_name] = entry.month
        return payoff


@dataclass(slots=True)
class StrategyComparison:
    """Snowball and avalanche results for the same debt set."""

    snowball: PayoffResult
    avalanche: PayoffResult

    @property
    def avalanche_is_better(self) -> bool:
        return self.avalanche.total_interest < self.snowball.total_interest

    @property
    def interest_saved(self) -> float | None:
        if not self.avalanche_is_better:
            return None
        return self.snowball.total_interest - self.avalanche.total_interest

    @property
    def months_saved(self) -> int | None:
        if not self.avalanche_is_better:
            return None
        return self.snowball.total_months - self.avalanche.total_months

    @property
    def recommended(self) -> str:
        return self.avalanche.method if self.avalanche_is_better else self.snowball.method
