"""Command line interface for the fincalc calculators."""

from __future__ import annotations

from pathlib import Path

import click

from . import __version__
from .config import BaseConfig
from .devtools import dev_log
from .logging_config import get_logger, setup_logging
from .models.growth import CompoundFrequency
from .services import (
    amortization,
    conversions,
    debts,
    everyday,
    export_csv,
    growth,
    planning,
    reports,
)
from .services.validation import (
    parse_amount,
    parse_debt,
    validate_debts,
    validate_growth,
    validate_loan,
)

logger = get_logger(__name__)

_FREQUENCIES = [str(int(f)) for f in CompoundFrequency]


def _require(result, param_hint: str | None = None):
    """Unwrap a validation result or turn it into a click usage error."""

    if result.ok:
        return result.value
    config = click.get_current_context().obj
    dev_log(config, "Validation failed", context={"field": result.field, "reason": result.reason})
    raise click.BadParameter(result.reason, param_hint=param_hint or result.field)


def _amount(raw, name: str, **kwargs) -> float:
    return _require(parse_amount(raw, name, **kwargs), name)


def _money(amount: float) -> str:
    config = click.get_current_context().obj
    if isinstance(config, BaseConfig):
        return config.format_money(amount)
    return f"${amount:,.2f}"


def _months_label(months: int | None) -> str:
    if months is None:
        return "not reachable"
    return f"{months} months ({months / 12:.1f} years)"


@click.group()
@click.version_option(version=__version__, prog_name="fincalc")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Personal finance calculators."""

    config = BaseConfig()
    setup_logging(config)
    ctx.obj = config


def _echo_payoff(result) -> None:
    click.echo(f"{result.method} order: {' -> '.join(result.order) or '-'}")
    if result.reached_cap:
        click.echo(
            f"  Not paid off within {result.total_months} months; "
            f"{_money(result.remaining_balance)} still owed"
        )
    else:
        click.echo(f"  Debt free in {result.total_months} months ({result.years:.1f} years)")
    click.echo(f"  Total interest: {_money(result.total_interest)}")


@cli.command()
@click.option(
    "--debt",
    "debt_specs",
    multiple=True,
    required=True,
    help="Debt as NAME:BALANCE:APR:MINIMUM (repeatable).",
)
@click.option("--extra", default="0", show_default=True, help="Extra monthly payment.")
@click.option(
    "--strategy",
    type=click.Choice(["snowball", "avalanche", "compare"], case_sensitive=False),
    default="compare",
    show_default=True,
)
@click.option("--csv", "csv_path", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--chart", "chart_path", type=click.Path(dir_okay=False, path_type=Path))
@click.pass_obj
def payoff(config, debt_specs, extra, strategy, csv_path, chart_path) -> None:
    """Simulate snowball and/or avalanche debt payoff."""

    parsed = [_require(parse_debt(spec), "--debt") for spec in debt_specs]
    params = _require(validate_debts(parsed, extra), "--debt")
    logger.info("Payoff requested", extra={"strategy": strategy, "debts": len(params.debts)})

    if strategy.lower() == "compare":
        comparison = debts.compare_payoff_strategies(
            params.debts, params.extra_payment, max_months=config.MAX_MONTHS
        )
        _echo_payoff(comparison.snowball)
        _echo_payoff(comparison.avalanche)
        if comparison.interest_saved is not None:
            click.echo(
                f"Avalanche saves {_money(comparison.interest_saved)} in interest "
                f"and {comparison.months_saved} months"
            )
        else:
            click.echo("Avalanche does not save interest over snowball for these debts")
        result = comparison.avalanche
        figure = reports.strategy_chart(comparison) if chart_path else None
    else:
        result = debts.simulate_payoff(
            params.debts, params.extra_payment, strategy, max_months=config.MAX_MONTHS
        )
        _echo_payoff(result)
        figure = reports.payoff_chart(result) if chart_path else None

    if csv_path:
        export_csv.export_payoff_csv(result=result, output_path=csv_path)
        click.echo(f"Schedule written: {csv_path}")
    if figure is not None:
        reports.export_png(figure, chart_path)
        click.echo(f"Chart written: {chart_path}")


@cli.command()
@click.option("--principal", required=True)
@click.option("--rate", required=True, help="Annual rate in percent.")
@click.option("--term", required=True)
@click.option("--unit", type=click.Choice(["years", "months"]), default="years", show_default=True)
@click.option("--yearly", is_flag=True, help="Print a per-year breakdown.")
@click.option("--csv", "csv_path", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--chart", "chart_path", type=click.Path(dir_okay=False, path_type=Path))
def loan(principal, rate, term, unit, yearly, csv_path, chart_path) -> None:
    """Level payment and amortization for a fixed-rate loan."""

    term_value = _amount(term, "term", allow_zero=False)
    params = _require(
        validate_loan(principal, rate, amortization.term_in_months(term_value, unit))
    )
    result = amortization.amortize(params.principal, params.annual_rate, params.term_months)

    click.echo(f"Monthly payment: {_money(result.payment)}")
    click.echo(f"Total paid: {_money(result.total_payment)}")
    click.echo(f"Total interest: {_money(result.total_interest)} ({result.interest_percentage:.1f}%)")
    if yearly:
        for row in amortization.yearly_breakdown(result.schedule):
            click.echo(
                f"  Year {row.year:>2}: principal {_money(row.principal)}, "
                f"interest {_money(row.interest)}, balance {_money(row.balance)}"
            )
    if csv_path:
        export_csv.export_amortization_csv(schedule=result.schedule, output_path=csv_path)
        click.echo(f"Schedule written: {csv_path}")
    if chart_path:
        reports.export_png(reports.amortization_chart(result), chart_path)
        click.echo(f"Chart written: {chart_path}")


@cli.command()
@click.option("--price", required=True, help="Home price.")
@click.option("--down", required=True, help="Down payment.")
@click.option("--rate", required=True, help="Annual rate in percent.")
@click.option("--years", default="30", show_default=True)
@click.option("--tax", default="0", help="Annual property tax.")
@click.option("--insurance", default="0", help="Annual home insurance.")
@click.option("--hoa", default="0", help="Monthly HOA dues.")
@click.option("--pmi", default="0", help="Monthly PMI (applied below 20% down).")
def mortgage(price, down, rate, years, tax, insurance, hoa, pmi) -> None:
    """Monthly mortgage cost including taxes, insurance, HOA and PMI."""

    quote = amortization.mortgage_quote(
        _amount(price, "price", allow_zero=False),
        _amount(down, "down"),
        _amount(rate, "rate"),
        _amount(years, "years", allow_zero=False),
        property_tax=_amount(tax, "tax"),
        insurance=_amount(insurance, "insurance"),
        hoa=_amount(hoa, "hoa"),
        pmi=_amount(pmi, "pmi"),
    )
    click.echo(f"Loan amount: {_money(quote.loan_amount)} ({quote.down_payment_percentage:.1f}% down)")
    click.echo(f"Principal & interest: {_money(quote.principal_and_interest)}")
    click.echo(f"Property tax: {_money(quote.property_tax)}")
    click.echo(f"Insurance: {_money(quote.insurance)}")
    click.echo(f"HOA: {_money(quote.hoa)}")
    click.echo(f"PMI: {_money(quote.pmi)}")
    click.echo(f"Total monthly payment: {_money(quote.total_monthly_payment)}")
    click.echo(f"Total interest: {_money(quote.total_interest)}")


@cli.command()
@click.option("--principal", default="0", show_default=True)
@click.option("--monthly", default="0", show_default=True, help="Monthly contribution.")
@click.option("--rate", required=True, help="Annual rate in percent.")
@click.option("--years", required=True)
@click.option("--compound", type=click.Choice(_FREQUENCIES), default="12", show_default=True)
@click.option("--csv", "csv_path", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--chart", "chart_path", type=click.Path(dir_okay=False, path_type=Path))
def grow(principal, monthly, rate, years, compound, csv_path, chart_path) -> None:
    """Compound growth of a lump sum plus monthly contributions."""

    params = _require(validate_growth(principal, monthly, rate, years, compound))
    projection = growth.project_growth(
        params.principal,
        params.monthly_contribution,
        params.annual_rate,
        params.years,
        params.compounds_per_year,
    )
    click.echo(f"Future value: {_money(projection.total_value)}")
    click.echo(f"Total contributions: {_money(projection.total_contributions)}")
    click.echo(f"Total interest: {_money(projection.total_interest)}")
    if csv_path:
        export_csv.export_growth_csv(yearly=projection.yearly, output_path=csv_path)
        click.echo(f"Schedule written: {csv_path}")
    if chart_path:
        reports.export_png(reports.growth_chart(projection), chart_path)
        click.echo(f"Chart written: {chart_path}")


@cli.command()
@click.option("--balance", default="0", show_default=True, help="Current savings.")
@click.option("--monthly", required=True, help="Monthly contribution.")
@click.option("--rate", default="0", show_default=True, help="Annual rate in percent.")
@click.option("--target", required=True)
@click.pass_obj
def goal(config, balance, monthly, rate, target) -> None:
    """Months of saving needed to reach a target."""

    months = growth.months_to_goal(
        _amount(balance, "balance"),
        _amount(monthly, "monthly"),
        _amount(rate, "rate"),
        _amount(target, "target", allow_zero=False),
        max_months=config.MAX_MONTHS,
    )
    click.echo(f"Time to goal: {_months_label(months)}")


@cli.command()
@click.option("--expenses", required=True, help="Monthly expenses.")
@click.option("--months", "target_months", default="6", show_default=True)
@click.option("--saved", default="0", show_default=True, help="Current savings.")
@click.option("--monthly", default="0", show_default=True, help="Monthly savings.")
@click.option("--rate", default="0", show_default=True, help="Savings account APY in percent.")
@click.pass_obj
def emergency(config, expenses, target_months, saved, monthly, rate) -> None:
    """Emergency fund target and time to fill it."""

    plan = growth.emergency_fund_plan(
        _amount(expenses, "expenses", allow_zero=False),
        _amount(target_months, "months", allow_zero=False),
        _amount(saved, "saved"),
        _amount(monthly, "monthly"),
        _amount(rate, "rate"),
        max_months=config.MAX_MONTHS,
    )
    click.echo(f"Target: {_money(plan.target_amount)} ({plan.progress_percentage:.1f}% funded)")
    click.echo(f"Remaining: {_money(plan.remaining_amount)}")
    if not plan.is_funded:
        click.echo(f"Time to goal: {_months_label(plan.months_to_goal)}")
        click.echo(f"Save per month to finish in 1 year: {_money(plan.monthly_savings_for_1_year)}")
    click.echo(f"Recommended coverage: {plan.recommended_months} months")


@cli.command()
@click.option("--age", required=True, help="Current age.")
@click.option("--retire-at", default="65", show_default=True)
@click.option("--saved", default="0", show_default=True, help="Current savings.")
@click.option("--monthly", default="0", show_default=True, help="Monthly contribution.")
@click.option("--match", default="0", show_default=True, help="Monthly employer match.")
@click.option("--return", "expected_return", default="7", show_default=True)
@click.option("--income", default="0", show_default=True, help="Desired monthly income.")
def retire(age, retire_at, saved, monthly, match, expected_return, income) -> None:
    """Retirement nest egg and 4%-rule income."""

    projection = growth.retirement_projection(
        _amount(age, "age"),
        _amount(retire_at, "retire-at"),
        _amount(saved, "saved"),
        _amount(monthly, "monthly"),
        _amount(match, "match"),
        _amount(expected_return, "return"),
        _amount(income, "income"),
    )
    click.echo(f"Years until retirement: {projection.years_until_retirement:g}")
    click.echo(f"Total at retirement: {_money(projection.total_at_retirement)}")
    click.echo(f"Monthly income (4% rule): {_money(projection.monthly_income)}")
    if projection.on_track:
        click.echo("On track for the desired income")
    else:
        click.echo(f"Shortfall: {_money(projection.shortfall)} per month")
        click.echo(f"Additional savings needed: {_money(projection.additional_savings_needed)}")
        if projection.years_until_retirement > 0:
            click.echo(f"Additional monthly contribution: {_money(projection.additional_monthly_needed)}")


@cli.command()
@click.option("--savings", required=True, help="Balance at retirement.")
@click.option("--return", "expected_return", default="5", show_default=True)
@click.option("--withdraw", "withdrawal", help="Fixed yearly withdrawal.")
@click.option("--percent", "withdrawal_pct", help="Yearly withdrawal as a percent of the balance.")
@click.option("--yearly", is_flag=True, help="Print every simulated year.")
def drawdown(savings, expected_return, withdrawal, withdrawal_pct, yearly) -> None:
    """How long retirement savings last under yearly withdrawals."""

    if (withdrawal is None) == (withdrawal_pct is None):
        raise click.UsageError("Pass exactly one of --withdraw or --percent")
    logger.info("Drawdown requested", extra={"mode": "fixed" if withdrawal is not None else "percent"})

    plan = growth.retirement_drawdown(
        _amount(savings, "savings", allow_zero=False),
        _amount(expected_return, "return", allow_negative=True),
        withdrawal_amount=None if withdrawal is None else _amount(withdrawal, "withdraw", allow_zero=False),
        withdrawal_pct=None if withdrawal_pct is None else _amount(withdrawal_pct, "percent", allow_zero=False),
    )
    if yearly:
        for row in plan.yearly:
            click.echo(
                f"Year {row.year:>3}: start {_money(row.starting_balance)}, "
                f"gains {_money(row.gains)}, withdrawn {_money(row.withdrawal)}, "
                f"end {_money(row.ending_balance)}"
            )
    if plan.years_lasted is None:
        click.echo(f"Savings last indefinitely (over {len(plan.yearly)} years)")
    else:
        click.echo(f"Savings last {plan.years_lasted} years")
    click.echo(f"Total withdrawn: {_money(plan.total_withdrawn)}")


@cli.command("convert-currency")
@click.argument("amount")
@click.argument("from_code")
@click.argument("to_code")
def convert_currency(amount, from_code, to_code) -> None:
    """Convert AMOUNT from one currency to another (fixed rates)."""

    value = _amount(amount, "amount")
    try:
        converted = conversions.convert_currency(value, from_code, to_code)
        rate = conversions.exchange_rate(from_code, to_code)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc
    click.echo(f"{value:,.2f} {from_code.upper()} = {converted:,.2f} {to_code.upper()}")
    click.echo(f"Rate: 1 {from_code.upper()} = {rate:.4f} {to_code.upper()}")


@cli.command("convert-unit", context_settings={"ignore_unknown_options": True})
@click.argument("value")
@click.argument("category", type=click.Choice(list(conversions.CATEGORIES)))
@click.argument("from_unit")
@click.argument("to_unit")
def convert_unit(value, category, from_unit, to_unit) -> None:
    """Convert VALUE between units of a CATEGORY."""

    number = _amount(value, "value", allow_negative=category == "temperature")
    try:
        converted = conversions.convert_unit(number, category, from_unit, to_unit)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc
    click.echo(f"{number:g} {from_unit} = {converted:.4f} {to_unit}")


@cli.command()
@click.argument("bill")
@click.option("--percent", default="20", show_default=True)
@click.option("--people", default=1, show_default=True, type=int)
def tip(bill, percent, people) -> None:
    """Tip and per-person split for a BILL."""

    split = everyday.split_tip(_amount(bill, "bill"), _amount(percent, "percent"), people)
    click.echo(f"Tip: {_money(split.total_tip)}")
    click.echo(f"Total: {_money(split.total)}")
    if split.people > 1:
        click.echo(f"Per person: {_money(split.per_person)} (tip {_money(split.tip_per_person)})")


@cli.command("sales-tax")
@click.argument("amount")
@click.argument("rate")
@click.option("--remove", is_flag=True, help="AMOUNT already includes tax.")
def sales_tax(amount, rate, remove) -> None:
    """Add or back out sales tax."""

    value = _amount(amount, "amount")
    rate_value = _amount(rate, "rate")
    result = everyday.remove_sales_tax(value, rate_value) if remove else everyday.add_sales_tax(value, rate_value)
    click.echo(f"Pre-tax: {_money(result.pre_tax)}")
    click.echo(f"Tax: {_money(result.tax)}")
    click.echo(f"Total: {_money(result.total)}")


_PERCENT_MODES = {
    "of": everyday.percent_of,
    "what": everyday.what_percent,
    "change": everyday.percentage_change,
    "adjust": everyday.increase_decrease,
}


@cli.command(context_settings={"ignore_unknown_options": True})
@click.argument("mode", type=click.Choice(list(_PERCENT_MODES)))
@click.argument("first")
@click.argument("second")
def percent(mode, first, second) -> None:
    """Percentage helpers: of (X% of Y), what (X is ?% of Y), change (X to Y), adjust (X by Y%)."""

    a = _amount(first, "first", allow_negative=True)
    b = _amount(second, "second", allow_negative=True)
    click.echo(f"{_PERCENT_MODES[mode](a, b):,.4f}")


@cli.command()
@click.argument("amount")
@click.option("--rate", default="3", show_default=True, help="Annual inflation in percent.")
@click.option("--years", required=True)
@click.option(
    "--mode",
    type=click.Choice(list(planning.INFLATION_MODES)),
    default="future_value",
    show_default=True,
)
def inflation(amount, rate, years, mode) -> None:
    """Adjust an AMOUNT for inflation."""

    rate_value = _amount(rate, "rate")
    years_value = _amount(years, "years", allow_zero=False)
    adjusted = planning.inflation_adjust(_amount(amount, "amount"), rate_value, years_value, mode)
    click.echo(f"Adjusted value: {_money(adjusted)}")
    click.echo(f"Cumulative inflation: {planning.cumulative_inflation(rate_value, years_value):.2f}%")


@cli.command("paycheck")
@click.option("--salary", required=True, help="Annual salary.")
@click.option(
    "--frequency",
    type=click.Choice(list(planning.PAY_PERIODS)),
    default="biweekly",
    show_default=True,
)
@click.option("--federal", default="0", show_default=True, help="Federal withholding %.")
@click.option("--state", default="0", show_default=True, help="State withholding %.")
@click.option("--retirement", default="0", show_default=True, help="401k contribution %.")
@click.option("--health", default="0", show_default=True, help="Health insurance per period.")
def pay(salary, frequency, federal, state, retirement, health) -> None:
    """Estimate take-home pay per period."""

    check = planning.paycheck(
        _amount(salary, "salary", allow_zero=False),
        frequency,
        federal_pct=_amount(federal, "federal"),
        state_pct=_amount(state, "state"),
        retirement_401k_pct=_amount(retirement, "retirement"),
        health_insurance=_amount(health, "health"),
    )
    click.echo(f"Gross per period: {_money(check.gross)}")
    click.echo(f"Taxes: {_money(check.total_taxes)} ({check.effective_tax_rate:.1f}%)")
    click.echo(f"Deductions: {_money(check.total_deductions)}")
    click.echo(f"Net per period: {_money(check.net)}")
    click.echo(f"Annual net: {_money(check.annual_net)}")


@cli.command()
@click.argument("income")
@click.option(
    "--rule",
    type=click.Choice(list(planning.BUDGET_RULES)),
    default="50/30/20",
    show_default=True,
)
def budget(income, rule) -> None:
    """Split monthly INCOME into needs, wants and savings."""

    split = planning.budget_split(_amount(income, "income"), rule)
    click.echo(f"Needs ({split.needs_pct:g}%): {_money(split.needs)}")
    click.echo(f"Wants ({split.wants_pct:g}%): {_money(split.wants)}")
    click.echo(f"Savings ({split.savings_pct:g}%): {_money(split.savings)}")
    click.echo(f"Annual savings: {_money(split.annual_savings)}")


def main() -> None:  # pragma: no cover - console entry point
    cli()


if __name__ == "__main__":  # pragma: no cover
    main()
