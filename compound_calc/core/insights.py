"""Derived figures shown next to the projection: shares, composition and the yearly breakdown."""

from __future__ import annotations

from typing import List, Optional, Sequence

from compound_calc.core.arithmetic import ieee_divide
from compound_calc.core.projection import project
from compound_calc.core.scenarios import compare_scenarios
from compound_calc.models import InvestmentParameters, ScenarioPreset
from compound_calc.schemas.projection import (
    BreakdownRow,
    CalculatorReport,
    CompositionSlice,
    Insights,
    ProjectionResult,
    ScenarioResult,
)

DEFAULT_BREAKDOWN_ROWS = 11

CONTRIBUTED_COLOR = "#94a3b8"
INTEREST_COLOR = "#3b82f6"


def build_insights(
    params: InvestmentParameters,
    projection: ProjectionResult,
    scenarios: Sequence[ScenarioResult] = (),
) -> Insights:
    crossover = projection.crossoverPoint
    return Insights(
        interestSharePercent=ieee_divide(projection.totalInterest, projection.finalValue) * 100,
        annualContribution=params.monthlyContribution * 12,
        crossoverYear=crossover.year if crossover is not None else None,
        scenarioMultipliers=[
            ieee_divide(scenario.finalValue, scenario.totalContributed) for scenario in scenarios
        ],
    )


def composition(projection: ProjectionResult) -> List[CompositionSlice]:
    """Final value split into contributed capital and interest earned."""
    whole = projection.totalContributed + projection.totalInterest
    parts = [
        ("Contributed capital", projection.totalContributed, CONTRIBUTED_COLOR),
        ("Interest earned", projection.totalInterest, INTEREST_COLOR),
    ]
    return [
        CompositionSlice(
            name=name,
            value=value,
            percent=ieee_divide(value, whole) * 100,
            color=color,
        )
        for name, value, color in parts
    ]


def breakdown(
    projection: ProjectionResult,
    rows: int = DEFAULT_BREAKDOWN_ROWS,
) -> List[BreakdownRow]:
    """Leading rows of the yearly series, with the crossover year flagged."""
    crossover_year = projection.crossoverPoint.year if projection.crossoverPoint else None
    return [
        BreakdownRow(
            **point.model_dump(),
            isCrossover=crossover_year is not None and point.year == crossover_year,
        )
        for point in projection.series[: max(rows, 0)]
    ]


def build_report(
    params: InvestmentParameters,
    presets: Optional[Sequence[ScenarioPreset]] = None,
    breakdown_rows: int = DEFAULT_BREAKDOWN_ROWS,
) -> CalculatorReport:
    projection = project(params)
    scenarios = compare_scenarios(params, presets)
    return CalculatorReport(
        parameters=params,
        projection=projection,
        scenarios=scenarios,
        insights=build_insights(params, projection, scenarios),
        composition=composition(projection),
        breakdown=breakdown(projection, breakdown_rows),
    )


__all__ = [
    "DEFAULT_BREAKDOWN_ROWS",
    "breakdown",
    "build_insights",
    "build_report",
    "composition",
]
