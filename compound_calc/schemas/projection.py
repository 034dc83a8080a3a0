"""Data contracts for projection, scenario and report responses."""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from compound_calc.models import InvestmentParameters, ScenarioPreset, default_presets

# Rounded snapshot values stay ints; non-finite results stay floats.
Rounded = Union[int, float]


class YearlyDataPoint(BaseModel):
    """Single row of the year-by-year series, rounded for display."""

    model_config = ConfigDict(frozen=True)

    year: Rounded
    month: int
    totalValue: Rounded
    totalContributed: Rounded
    interestEarned: Rounded
    realValue: Rounded


class ProjectionResult(BaseModel):
    """Series plus unrounded totals taken from the last simulated month."""

    series: List[YearlyDataPoint]
    finalValue: float
    totalContributed: float
    totalInterest: float
    totalRealValue: float
    crossoverPoint: Optional[YearlyDataPoint] = None
    roi: float


class ScenarioResult(BaseModel):
    name: str
    finalValue: Rounded
    totalContributed: Rounded
    interest: Rounded
    returnPercent: float
    color: str


class BreakdownRow(YearlyDataPoint):
    isCrossover: bool = False


class CompositionSlice(BaseModel):
    name: str
    value: float
    percent: float
    color: str


class Insights(BaseModel):
    interestSharePercent: float
    annualContribution: float
    crossoverYear: Optional[Rounded] = None
    scenarioMultipliers: List[float] = Field(default_factory=list)


class ScenarioRequest(BaseModel):
    """Parameters plus an optional preset list (defaults to the three standard presets)."""

    model_config = ConfigDict(extra="forbid")

    parameters: InvestmentParameters = Field(default_factory=InvestmentParameters)
    presets: List[ScenarioPreset] = Field(default_factory=default_presets)


class CalculatorReport(BaseModel):
    parameters: InvestmentParameters
    projection: ProjectionResult
    scenarios: List[ScenarioResult]
    insights: Insights
    composition: List[CompositionSlice]
    breakdown: List[BreakdownRow]
