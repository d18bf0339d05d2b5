"""Percentage, tip and sales tax helpers."""

from __future__ import annotations

from dataclasses import dataclass


def percent_of(percent: float, number: float) -> float:
    """What is ``percent``% of ``number``?"""
    return percent / 100 * number


def what_percent(part: float, whole: float) -> float:
    """``part`` is what percent of ``whole``? Zero whole yields 0."""
    if whole == 0:
        return 0.0
    return part / whole * 100


def percentage_change(original: float, new: float) -> float:
    if original == 0:
        return 0.0
    return (new - original) / original * 100


def increase_decrease(base: float, percent: float) -> float:
    """Apply a signed percentage change to ``base``."""
    return base * (1 + percent / 100)


@dataclass(slots=True)
class TipSplit:
    bill: float
    tip_percentage: float
    people: int

    @property
    def total_tip(self) -> float:
        if self.bill <= 0 or self.tip_percentage < 0:
            return 0.0
        return self.bill * self.tip_percentage / 100

    @property
    def total(self) -> float:
        return max(self.bill, 0.0) + self.total_tip

    @property
    def per_person(self) -> float:
        return self.total / self.people

    @property
    def tip_per_person(self) -> float:
        return self.total_tip / self.people


def split_tip(bill: float, tip_percentage: float = 20.0, people: int = 1) -> TipSplit:
    """Tip and per-person share; fewer than one diner counts as one."""
    return TipSplit(bill=bill, tip_percentage=tip_percentage, people=max(int(people), 1))


@dataclass(slots=True)
class SalesTax:
    pre_tax: float
    tax: float

    @property
    def total(self) -> float:
        return self.pre_tax + self.tax


def add_sales_tax(amount: float, rate: float) -> SalesTax:
    """Tax on a pre-tax ``amount``."""
    if amount <= 0 or rate < 0:
        return SalesTax(pre_tax=max(amount, 0.0), tax=0.0)
    return SalesTax(pre_tax=amount, tax=amount * rate / 100)


def remove_sales_tax(total: float, rate: float) -> SalesTax:
    """Back the tax out of a tax-inclusive ``total``."""
    if total <= 0 or rate < 0:
        return SalesTax(pre_tax=max(total, 0.0), tax=0.0)
    pre_tax = total / (1 + rate / 100)
    return SalesTax(pre_tax=pre_tax, tax=total - pre_tax)


__all__ = [
    "SalesTax",
    "TipSplit",
    "add_sales_tax",
    "increase_decrease",
    "percent_of",
    "percentage_change",
    "remove_sales_tax",
    "split_tip",
    "what_percent",
]
