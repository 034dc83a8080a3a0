"""Fixed-return scenario comparison."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from compound_calc.core.arithmetic import round_half_up
from compound_calc.core.projection import last_month, monthly_rate, step_month
from compound_calc.models import DEFAULT_PRESETS, InvestmentParameters, ScenarioPreset
from compound_calc.schemas.projection import ScenarioResult

logger = logging.getLogger(__name__)


def run_scenario(params: InvestmentParameters, preset: ScenarioPreset) -> ScenarioResult:
    """Final totals for one preset return; no inflation adjustment, no yearly series."""
    rate = monthly_rate(preset.returnPercent)
    value = params.initialAmount
    contributed = params.initialAmount

    for _ in range(1, last_month(params.years) + 1):
        value, contributed = step_month(value, contributed, params.monthlyContribution, rate)

    return ScenarioResult(
        name=preset.name,
        finalValue=round_half_up(value),
        totalContributed=round_half_up(contributed),
        interest=round_half_up(value - contributed),
        returnPercent=preset.returnPercent,
        color=preset.color,
    )


def compare_scenarios(
    params: InvestmentParameters,
    presets: Optional[Sequence[ScenarioPreset]] = None,
) -> List[ScenarioResult]:
    """Run every preset against the same parameters, preserving preset order."""
    if presets is None:
        presets = DEFAULT_PRESETS
    results = [run_scenario(params, preset) for preset in presets]
    logger.debug("compared %d scenarios over %s years", len(results), params.years)
    return results


__all__ = ["compare_scenarios", "run_scenario"]
