"""Value types shared by the calculators."""

from .debt import Debt, MonthlyPayment, PayoffPlan, PayoffResult, StrategyComparison
from .growth import (
    CompoundFrequency,
    DrawdownPlan,
    DrawdownYear,
    EmergencyFundPlan,
    GrowthProjection,
    RetirementProjection,
    YearlyBreakdown,
)
from .loan import AmortizationItem, LoanSchedule, LoanYear, MortgageQuote

__all__ = [
    "AmortizationItem",
    "CompoundFrequency",
    "Debt",
    "DrawdownPlan",
    "DrawdownYear",
    "EmergencyFundPlan",
    "GrowthProjection",
    "LoanSchedule",
    "LoanYear",
    "MonthlyPayment",
    "MortgageQuote",
    "PayoffPlan",
    "PayoffResult",
    "RetirementProjection",
    "StrategyComparison",
    "YearlyBreakdown",
]
