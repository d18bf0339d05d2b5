"""Fixed-rate loan and mortgage amortization."""

from __future__ import annotations

from typing import Iterable

from ..logging_config import get_logger
from ..models.loan import AmortizationItem, LoanSchedule, LoanYear, MortgageQuote

logger = get_logger(__name__)

PMI_DOWN_PAYMENT_THRESHOLD = 20.0  # percent of home price

_TERM_UNITS = {"years": 12, "months": 1}


def term_in_months(term: float, unit: str = "years") -> int:
    """Convert a loan term to whole months."""

    multiplier = _TERM_UNITS.get((unit or "").strip().lower())
    if multiplier is None:
        raise ValueError(f"Unknown term unit: {unit!r}")
    return int(round(term * multiplier))


def level_payment(principal: float, annual_rate: float, term_months: int) -> float:
    """Return the fixed monthly payment for an annuity loan.

    A zero rate degrades to straight-line repayment. Non-positive principal
    or term yields 0.
    """

    if principal <= 0 or term_months <= 0 or annual_rate < 0:
        return 0.0

    monthly_rate = annual_rate / 100 / 12
    if monthly_rate == 0:
        return principal / term_months

    growth = (1 + monthly_rate) ** term_months
    return principal * (monthly_rate * growth) / (growth - 1)


def amortize(principal: float, annual_rate: float, term_months: int) -> LoanSchedule:
    """Split a level-payment loan into monthly principal and interest."""

    term_months = int(term_months)
    payment = level_payment(principal, annual_rate, term_months)
    if payment <= 0:
        logger.warning(
            "Loan inputs rejected",
            extra={"principal": principal, "annual_rate": annual_rate, "term_months": term_months},
        )
        return LoanSchedule(principal=max(principal, 0.0), annual_rate=annual_rate)

    monthly_rate = annual_rate / 100 / 12
    balance = principal
    schedule: list[AmortizationItem] = []

    for month in range(1, term_months + 1):
        interest = balance * monthly_rate
        principal_portion = payment - interest
        balance = max(0.0, balance - principal_portion)
        schedule.append(
            AmortizationItem(
                month=month,
                payment=payment,
                principal=principal_portion,
                interest=interest,
                balance=balance,
            )
        )

    logger.debug(
        "Amortization schedule built",
        extra={"payment": round(payment, 2), "term_months": term_months},
    )
    return LoanSchedule(
        principal=principal,
        annual_rate=annual_rate,
        term_months=term_months,
        payment=payment,
        schedule=schedule,
    )


def yearly_breakdown(schedule: Iterable[AmortizationItem]) -> list[LoanYear]:
    """Roll monthly rows into loan years; a trailing partial year is kept."""

    rows = list(schedule)
    breakdown: list[LoanYear] = []
    year_interest = 0.0
    year_principal = 0.0

    for idx, item in enumerate(rows, start=1):
        year_interest += item.interest
        year_principal += item.principal
        if idx % 12 == 0 or idx == len(rows):
            breakdown.append(
                LoanYear(
                    year=(idx - 1) // 12 + 1,
                    balance=item.balance,
                    interest=year_interest,
                    principal=year_principal,
                )
            )
            year_interest = 0.0
            year_principal = 0.0

    return breakdown


def mortgage_quote(
    home_price: float,
    down_payment: float,
    annual_rate: float,
    term_years: float,
    *,
    property_tax: float = 0.0,
    insurance: float = 0.0,
    hoa: float = 0.0,
    pmi: float = 0.0,
) -> MortgageQuote:
    """Price a mortgage: amortizing P&I plus flat monthly add-ons.

    ``property_tax`` and ``insurance`` are annual amounts; ``hoa`` and
    ``pmi`` are monthly. PMI only applies below a 20% down payment.
    """

    loan_amount = max(0.0, home_price - down_payment)
    loan = amortize(loan_amount, annual_rate, term_in_months(term_years, "years"))

    quote = MortgageQuote(
        home_price=home_price,
        down_payment=down_payment,
        loan=loan,
        property_tax=max(property_tax, 0.0) / 12,
        insurance=max(insurance, 0.0) / 12,
        hoa=max(hoa, 0.0),
    )
    if quote.down_payment_percentage < PMI_DOWN_PAYMENT_THRESHOLD:
        quote.pmi = max(pmi, 0.0)
    return quote


__all__ = [
    "amortize",
    "level_payment",
    "mortgage_quote",
    "term_in_months",
    "yearly_breakdown",
]
