"""Loan and mortgage value types."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class AmortizationItem:
    """A single month of a fixed-payment loan."""

    month: int
    payment: float
    principal: float
    interest: float
    balance: float


@dataclass(slots=True)
class LoanSchedule:
    """Level payment plus the full month-by-month schedule."""

    principal: float = 0.0
    annual_rate: float = 0.0
    term_months: int = 0
    payment: float = 0.0
    schedule: list[AmortizationItem] = field(default_factory=list)

    @property
    def total_payment(self) -> float:
        return self.payment * self.term_months

    @property
    def total_interest(self) -> float:
        if not self.schedule:
            return 0.0
        return self.total_payment - self.principal

    @property
    def interest_percentage(self) -> float:
        """Total interest as a percentage of the amount borrowed."""
        if self.principal <= 0:
            return 0.0
        return self.total_interest / self.principal * 100


@dataclass(slots=True)
class LoanYear:
    """Schedule rows rolled up per loan year."""

    year: int
    balance: float
    interest: float
    principal: float


@dataclass(slots=True)
class MortgageQuote:
    """Monthly housing cost: amortizing P&I plus flat add-ons."""

    home_price: float
    down_payment: float
    loan: LoanSchedule
    property_tax: float = 0.0
    insurance: float = 0.0
    hoa: float = 0.0
    pmi: float = 0.0

    @property
    def loan_amount(self) -> float:
        return self.loan.principal

    @property
    def down_payment_percentage(self) -> float:
        if self.home_price <= 0:
            return 0.0
        return self.down_payment / self.home_price * 100

    @property
    def principal_and_interest(self) -> float:
        return self.loan.payment

    @property
    def total_monthly_payment(self) -> float:
        return self.principal_and_interest + self.property_tax + self.insurance + self.hoa + self.pmi

    @property
    def total_interest(self) -> float:
        return self.loan.total_interest
