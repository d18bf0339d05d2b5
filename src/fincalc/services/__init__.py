"""Service module exports."""

from . import (
    amortization,
    conversions,
    debts,
    everyday,
    export_csv,
    growth,
    planning,
    reports,
    validation,
)

__all__ = [
    "amortization",
    "conversions",
    "debts",
    "everyday",
    "export_csv",
    "growth",
    "planning",
    "reports",
    "validation",
]
