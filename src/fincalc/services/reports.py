"""Chart rendering for payoff, amortization and growth results."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import matplotlib.ticker as mticker
from matplotlib.figure import Figure

from ..models.debt import PayoffResult, StrategyComparison
from ..models.growth import GrowthProjection
from ..models.loan import LoanSchedule

_CURRENCY = mticker.FuncFormatter(lambda x, p: f"${x:,.0f}")


class ReportRenderer(Protocol):
    """Protocol describing renderer behavior."""

    def render(self, figure: Figure, *, output_path: Path) -> None:  # pragma: no cover - interface
        ...


def _empty(ax, message: str) -> None:
    ax.text(0.5, 0.5, message, ha="center", va="center", fontsize=14, color="#666")
    ax.axis("off")


def payoff_chart(result: PayoffResult) -> Figure:
    """Line chart of total remaining debt by month, with milestone markers."""

    totals = result.balance_by_month()
    fig, ax = plt.subplots(figsize=(10, 6))

    if not totals:
        _empty(ax, "No payoff schedule")
        plt.tight_layout()
        return fig

    months = list(range(1, len(totals) + 1))
    ax.plot(months, totals, color="#4F46E5", linewidth=2.5)
    ax.fill_between(months, totals, color="#E0E7FF", alpha=0.5)

    initial = totals[0]
    if len(totals) > 1 and initial > 0:
        for share, colour in ((0.5, "#22C55E"), (0.25, "#16A34A")):
            for month, total in zip(months, totals):
                if total <= initial * share:
                    ax.axvline(x=month, color=colour, linestyle="--", alpha=0.6, linewidth=1.5)
                    ax.annotate(
                        f"{100 - share * 100:.0f}% Paid",
                        (month, total),
                        xytext=(10, 25),
                        textcoords="offset points",
                        fontsize=9,
                        color=colour,
                        fontweight="bold",
                    )
                    break

    if result.paid_off:
        ax.scatter([months[-1]], [0], s=200, c="gold", marker="*", zorder=5, edgecolors="#F59E0B")
        ax.annotate(
            "DEBT FREE",
            (months[-1], 0),
            xytext=(0, 25),
            textcoords="offset points",
            ha="center",
            fontsize=12,
            fontweight="bold",
            color="#16A34A",
        )

    ax.grid(True, linestyle="--", alpha=0.3)
    ax.set_axisbelow(True)
    ax.set_title(f"{result.method} Payoff Projection", fontsize=14, fontweight="bold", pad=15)
    ax.set_ylabel("Remaining Balance ($)", fontsize=11)
    ax.set_xlabel("Month", fontsize=11)
    ax.yaxis.set_major_formatter(_CURRENCY)

    status = f"{result.total_months}" if result.paid_off else f"not within {result.total_months}"
    textstr = (
        f"Interest: ${result.total_interest:,.0f}\n"
        f"Months to Payoff: {status}"
    )
    props = dict(boxstyle="round", facecolor="lavender", alpha=0.8)
    ax.text(0.98, 0.98, textstr, transform=ax.transAxes, fontsize=9,
            va="top", ha="right", bbox=props)

    plt.tight_layout()
    return fig


def strategy_chart(comparison: StrategyComparison) -> Figure:
    """Overlay snowball and avalanche remaining-balance curves."""

    fig, ax = plt.subplots(figsize=(10, 6))
    plotted = False
    for result, colour in ((comparison.snowball, "#0EA5E9"), (comparison.avalanche, "#F97316")):
        totals = result.balance_by_month()
        if not totals:
            continue
        plotted = True
        ax.plot(
            range(1, len(totals) + 1),
            totals,
            color=colour,
            linewidth=2,
            label=f"{result.method}: {result.total_months} mo, ${result.total_interest:,.0f} interest",
        )

    if not plotted:
        _empty(ax, "No payoff schedule")
    else:
        ax.legend(loc="upper right", fontsize=9, framealpha=0.9)
        ax.grid(True, linestyle="--", alpha=0.3)
        ax.set_title("Snowball vs Avalanche", fontsize=14, fontweight="bold", pad=15)
        ax.set_xlabel("Month", fontsize=11)
        ax.set_ylabel("Remaining Balance ($)", fontsize=11)
        ax.yaxis.set_major_formatter(_CURRENCY)

    plt.tight_layout()
    return fig


def amortization_chart(loan: LoanSchedule) -> Figure:
    """Stacked principal/interest bars per month with the balance line."""

    fig, ax = plt.subplots(figsize=(10, 6))
    if not loan.schedule:
        _empty(ax, "No amortization schedule")
        plt.tight_layout()
        return fig

    months = [item.month for item in loan.schedule]
    principal = [item.principal for item in loan.schedule]
    interest = [item.interest for item in loan.schedule]
    balance = [item.balance for item in loan.schedule]

    ax.stackplot(months, principal, interest, labels=["Principal", "Interest"],
                 colors=["#22C55E", "#EF4444"], alpha=0.7)
    ax.set_ylabel("Monthly Payment ($)", fontsize=11)
    ax.set_xlabel("Month", fontsize=11)
    ax.yaxis.set_major_formatter(_CURRENCY)

    balance_ax = ax.twinx()
    balance_ax.plot(months, balance, color="#4F46E5", linewidth=2, label="Balance")
    balance_ax.set_ylabel("Remaining Balance ($)", fontsize=11)
    balance_ax.yaxis.set_major_formatter(_CURRENCY)

    handles, labels = ax.get_legend_handles_labels()
    extra_handles, extra_labels = balance_ax.get_legend_handles_labels()
    ax.legend(handles + extra_handles, labels + extra_labels, loc="center right", fontsize=9)
    ax.set_title(
        f"Amortization: ${loan.payment:,.2f}/mo over {loan.term_months} months",
        fontsize=14, fontweight="bold", pad=15,
    )
    ax.grid(True, linestyle="--", alpha=0.3)

    plt.tight_layout()
    return fig


def growth_chart(projection: GrowthProjection) -> Figure:
    """Stacked contributions vs growth per year."""

    fig, ax = plt.subplots(figsize=(10, 6))
    if not projection.yearly:
        _empty(ax, "No growth projection")
        plt.tight_layout()
        return fig

    years = [row.year for row in projection.yearly]
    contributions = [row.principal for row in projection.yearly]
    growth = [max(row.interest, 0.0) for row in projection.yearly]

    ax.bar(years, contributions, color="#0EA5E9", label="Contributions")
    ax.bar(years, growth, bottom=contributions, color="#22C55E", label="Interest")
    ax.set_title(
        f"Projected Value: ${projection.total_value:,.0f}", fontsize=14, fontweight="bold", pad=15
    )
    ax.set_xlabel("Year", fontsize=11)
    ax.set_ylabel("Value ($)", fontsize=11)
    ax.yaxis.set_major_formatter(_CURRENCY)
    ax.legend(loc="upper left", fontsize=9)
    ax.grid(True, axis="y", linestyle="--", alpha=0.3)

    plt.tight_layout()
    return fig


def export_png(
    figure: Figure,
    output_path: Path,
    *,
    renderer: ReportRenderer | None = None,
) -> Path:
    """Write ``figure`` to PNG, close it and return the path."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    if renderer is not None:
        renderer.render(figure, output_path=output_path)
    else:
        figure.savefig(output_path, bbox_inches="tight", dpi=120)
    plt.close(figure)
    return output_path


__all__ = [
    "ReportRenderer",
    "amortization_chart",
    "export_png",
    "growth_chart",
    "payoff_chart",
    "strategy_chart",
]
