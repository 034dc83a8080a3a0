from __future__ import annotations

import logging
import math
from typing import List, Optional, Tuple

from compound_calc.core.arithmetic import ieee_divide, ieee_power, round_half_up
from compound_calc.models import InvestmentParameters
from compound_calc.schemas.projection import ProjectionResult, YearlyDataPoint

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


def monthly_rate(annual_percent: float) -> float:
    """Annual percentage (e.g. 7 for 7%) -> per-month decimal rate."""
    return annual_percent / 100 / MONTHS_PER_YEAR


def last_month(years: float) -> int:
    """Index of the last simulated month; negative horizons simulate nothing past month 0."""
    return math.floor(years * MONTHS_PER_YEAR)


def step_month(
    value: float,
    contributed: float,
    contribution: float,
    rate: float,
) -> Tuple[float, float]:
    """
    Advance one month.

    Order of operations:
      1) Add the monthly contribution to the balance and to the contributed total.
      2) Apply the month's growth to the post-contribution balance.
    """
    value += contribution
    contributed += contribution
    value *= 1 + rate
    return value, contributed


def _snapshot(
    month: int,
    value: float,
    contributed: float,
    real_value: float,
) -> YearlyDataPoint:
    year = month / MONTHS_PER_YEAR
    return YearlyDataPoint(
        year=round_half_up(year),
        month=month,
        totalValue=round_half_up(value),
        totalContributed=round_half_up(contributed),
        interestEarned=round_half_up(value - contributed),
        realValue=round_half_up(real_value),
    )


def find_crossover(series: List[YearlyDataPoint]) -> Optional[YearlyDataPoint]:
    """First year (ascending) where accumulated interest exceeds contributed capital."""
    for point in series:
        if point.interestEarned > point.totalContributed:
            return point
    return None


def project(params: InvestmentParameters) -> ProjectionResult:
    """
    Month-by-month projection with a yearly snapshot series.

    The running balance, contributed total and real value are carried unrounded;
    only the yearly snapshots are rounded, so the scalar totals can differ from
    the last series row by rounding.
    """
    rate = monthly_rate(params.annualReturnPercent)
    inflation_rate = monthly_rate(params.inflationRatePercent)

    current_value = params.initialAmount
    total_contributed = params.initialAmount
    real_value = params.initialAmount

    series: List[YearlyDataPoint] = []
    for month in range(0, last_month(params.years) + 1):
        if month > 0:
            current_value, total_contributed = step_month(
                current_value, total_contributed, params.monthlyContribution, rate
            )
            # deflate to month-0 purchasing power
            real_value = ieee_divide(current_value, ieee_power(1 + inflation_rate, month))

        if month % MONTHS_PER_YEAR == 0:
            series.append(_snapshot(month, current_value, total_contributed, real_value))

    final_value = current_value
    crossover = find_crossover(series)
    roi = ieee_divide(final_value - total_contributed, total_contributed) * 100

    logger.debug(
        "projected %d months: final=%.2f contributed=%.2f crossover=%s",
        max(last_month(params.years), 0),
        final_value,
        total_contributed,
        crossover.year if crossover else None,
    )

    return ProjectionResult(
        series=series,
        finalValue=final_value,
        totalContributed=total_contributed,
        totalInterest=final_value - total_contributed,
        totalRealValue=real_value,
        crossoverPoint=crossover,
        roi=roi,
    )


__all__ = [
    "MONTHS_PER_YEAR",
    "find_crossover",
    "last_month",
    "monthly_rate",
    "project",
    "step_month",
]
