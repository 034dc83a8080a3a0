"""`flask project` command: print the projection and scenario tables."""

from __future__ import annotations

from typing import Sequence

import click
from flask import current_app
from flask.cli import with_appcontext

from compound_calc.core.insights import build_report
from compound_calc.models import DEFAULT_PARAMETERS, InvestmentParameters


def _money(value: float) -> str:
    return f"{value:,.0f}"


def _percent(value: float) -> str:
    return f"{value:.1f}%"


def _row(cells: Sequence[str], widths: Sequence[int]) -> str:
    return " | ".join(cell.rjust(width) for cell, width in zip(cells, widths))


@click.command("project")
@click.option("--initial-amount", default=str(DEFAULT_PARAMETERS.initialAmount), show_default=True)
@click.option(
    "--monthly-contribution",
    default=str(DEFAULT_PARAMETERS.monthlyContribution),
    show_default=True,
)
@click.option(
    "--annual-return",
    default=str(DEFAULT_PARAMETERS.annualReturnPercent),
    show_default=True,
    help="Nominal annual return in % (e.g. 7)",
)
@click.option("--years", default=str(DEFAULT_PARAMETERS.years), show_default=True)
@click.option(
    "--inflation-rate",
    default=str(DEFAULT_PARAMETERS.inflationRatePercent),
    show_default=True,
    help="Annual inflation in %, used for the real value column",
)
@click.option("--rows", type=int, default=None, help="Yearly rows to print (default: BREAKDOWN_ROWS)")
@with_appcontext
def project_command(
    initial_amount: str,
    monthly_contribution: str,
    annual_return: str,
    years: str,
    inflation_rate: str,
    rows: int | None,
) -> None:
    """Project a portfolio and compare the standard return scenarios."""
    params = InvestmentParameters(
        initialAmount=initial_amount,
        monthlyContribution=monthly_contribution,
        annualReturnPercent=annual_return,
        years=years,
        inflationRatePercent=inflation_rate,
    )
    breakdown_rows = rows if rows is not None else current_app.config["BREAKDOWN_ROWS"]
    report = build_report(params, breakdown_rows=breakdown_rows)
    projection = report.projection

    header = ["Year", "Total value", "Contributed", "Interest", "Real value"]
    widths = [6, 14, 14, 14, 14]
    click.echo(_row(header, widths))
    for row in report.breakdown:
        marker = " *" if row.isCrossover else ""
        click.echo(
            _row(
                [
                    str(row.year),
                    _money(row.totalValue),
                    _money(row.totalContributed),
                    _money(row.interestEarned),
                    _money(row.realValue),
                ],
                widths,
            )
            + marker
        )

    click.echo("")
    click.echo(f"Final value:       {_money(projection.finalValue)}")
    click.echo(f"Total contributed: {_money(projection.totalContributed)}")
    click.echo(f"Total interest:    {_money(projection.totalInterest)}")
    click.echo(f"Real value:        {_money(projection.totalRealValue)}")
    click.echo(f"ROI:               {_percent(projection.roi)}")
    if report.insights.crossoverYear is not None:
        click.echo(f"Interest overtakes contributions in year {report.insights.crossoverYear}")
    else:
        click.echo("Interest does not overtake contributions within the horizon")

    click.echo("")
    click.echo(_row(["Scenario", "Return", "Final value", "Interest", "Multiple"], [14, 7, 14, 14, 8]))
    for scenario, multiple in zip(report.scenarios, report.insights.scenarioMultipliers):
        click.echo(
            _row(
                [
                    scenario.name,
                    _percent(scenario.returnPercent),
                    _money(scenario.finalValue),
                    _money(scenario.interest),
                    f"{multiple:.1f}x",
                ],
                [14, 7, 14, 14, 8],
            )
        )
