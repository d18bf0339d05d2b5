"""CSV export helpers for calculation results."""

from __future__ import annotations

import csv
from dataclasses import asdict
from pathlib import Path
from typing import Iterable

from ..models.debt import PayoffResult
from ..models.growth import YearlyBreakdown
from ..models.loan import AmortizationItem

PAYOFF_HEADERS = [
    "month",
    "debt_name",
    "payment",
    "extra_payment",
    "principal_payment",
    "interest_payment",
    "remaining_balance",
]
AMORTIZATION_HEADERS = ["month", "payment", "principal", "interest", "balance"]
GROWTH_HEADERS = ["year", "principal", "interest", "total"]


def _serialize_value(value):
    if value is None:
        return ""
    if isinstance(value, float):
        return f"{value:.2f}"
    return str(value)


def _write_rows(output_path: Path, headers: list[str], rows: Iterable[dict]) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)

    # Use newline='' for csv on Windows
    with output_path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.DictWriter(
            fh, fieldnames=headers, extrasaction="ignore", quoting=csv.QUOTE_MINIMAL
        )
        writer.writeheader()
        for row in rows:
            writer.writerow({key: _serialize_value(row.get(key)) for key in headers})

    return output_path


def export_payoff_csv(*, result: PayoffResult, output_path: Path) -> Path:
    """Write one row per debt per month. Returns the path written."""

    return _write_rows(output_path, PAYOFF_HEADERS, (asdict(e) for e in result.monthly_breakdown))


def export_amortization_csv(*, schedule: Iterable[AmortizationItem], output_path: Path) -> Path:
    return _write_rows(output_path, AMORTIZATION_HEADERS, (asdict(item) for item in schedule))


def export_growth_csv(*, yearly: Iterable[YearlyBreakdown], output_path: Path) -> Path:
    return _write_rows(output_path, GROWTH_HEADERS, (asdict(row) for row in yearly))


__all__ = ["export_amortization_csv", "export_growth_csv", "export_payoff_csv"]
