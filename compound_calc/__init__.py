"""Compound interest projection: engine, scenario comparison and a small Flask API."""

from compound_calc.core.projection import project
from compound_calc.core.scenarios import compare_scenarios
from compound_calc.models import DEFAULT_PARAMETERS, DEFAULT_PRESETS, InvestmentParameters, ScenarioPreset

__all__ = [
    "DEFAULT_PARAMETERS",
    "DEFAULT_PRESETS",
    "InvestmentParameters",
    "ScenarioPreset",
    "compare_scenarios",
    "project",
]
