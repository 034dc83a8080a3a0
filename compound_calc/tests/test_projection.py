from __future__ import annotations

import math
from math import isclose

import pytest

from compound_calc.core.projection import find_crossover, project, step_month
from compound_calc.models import DEFAULT_PARAMETERS, InvestmentParameters


def annuity_due_value(initial: float, monthly: float, annual_pct: float, months: int) -> float:
    """Closed form for monthly compounding with contributions made before each month's growth."""
    rate = annual_pct / 100 / 12
    if rate == 0:
        return initial + monthly * months
    growth = (1 + rate) ** months
    return initial * growth + monthly * (1 + rate) * (growth - 1) / rate


def test_default_inputs_start_flat_at_year_zero():
    result = project(DEFAULT_PARAMETERS)
    first = result.series[0]

    assert first.year == 0
    assert first.month == 0
    assert first.totalValue == 10000
    assert first.totalContributed == 10000
    assert first.realValue == 10000
    assert first.interestEarned == 0


def test_default_inputs_match_closed_form():
    result = project(DEFAULT_PARAMETERS)
    expected = annuity_due_value(10000, 500, 7, 240)

    assert result.finalValue == pytest.approx(expected, rel=1e-9)
    assert result.totalContributed == pytest.approx(10000 + 500 * 240)
    assert result.totalInterest == pytest.approx(expected - 130000, rel=1e-9)
    assert result.totalRealValue == pytest.approx(expected / (1 + 0.025 / 12) ** 240, rel=1e-9)

    last = result.series[-1]
    assert last.year == 20
    assert last.month == 240
    assert abs(last.totalValue - expected) <= 1
    assert abs(last.totalContributed - 130000) <= 1
    assert abs(last.interestEarned - (expected - 130000)) <= 1


def test_every_snapshot_matches_closed_form():
    params = InvestmentParameters(
        initialAmount=2500, monthlyContribution=150, annualReturnPercent=5.5, years=10
    )
    result = project(params)
    for point in result.series:
        expected = annuity_due_value(2500, 150, 5.5, point.month)
        assert abs(point.totalValue - expected) <= 1


def test_contribution_is_added_before_growth():
    params = InvestmentParameters(monthlyContribution=100, annualReturnPercent=12, years=1)
    value, contributed = step_month(0.0, 0.0, 100.0, 0.01)

    assert isclose(value, 101.0)
    assert isclose(contributed, 100.0)
    assert project(params).finalValue == pytest.approx(annuity_due_value(0, 100, 12, 12))


def test_projection_is_deterministic():
    assert project(DEFAULT_PARAMETERS) == project(DEFAULT_PARAMETERS)


@pytest.mark.parametrize("years", [0, 1, 5, 20, 50])
def test_series_has_one_point_per_year(years):
    params = DEFAULT_PARAMETERS.model_copy(update={"years": years})
    result = project(params)

    assert len(result.series) == years + 1
    assert [point.year for point in result.series] == list(range(years + 1))
    assert [point.month for point in result.series] == [year * 12 for year in range(years + 1)]


def test_contributed_capital_never_decreases():
    result = project(DEFAULT_PARAMETERS)
    contributed = [point.totalContributed for point in result.series]
    assert contributed == sorted(contributed)
    for point in result.series:
        assert point.totalContributed == 10000 + 500 * point.month


def test_zero_contribution_keeps_contributed_at_initial_amount():
    params = InvestmentParameters(initialAmount=5000, annualReturnPercent=6, years=15)
    result = project(params)

    assert all(point.totalContributed == 5000 for point in result.series)
    assert result.totalContributed == 5000
    assert result.series[-1].totalValue > 5000


def test_zero_rates_accumulate_contributions_only():
    params = InvestmentParameters(initialAmount=1000, monthlyContribution=100, years=2)
    result = project(params)

    assert [point.totalValue for point in result.series] == [1000, 2200, 3400]
    assert [point.realValue for point in result.series] == [1000, 2200, 3400]
    assert all(point.interestEarned == 0 for point in result.series)
    assert result.finalValue == 3400
    assert result.roi == 0
    assert result.crossoverPoint is None


def test_zero_inflation_real_value_tracks_nominal():
    params = DEFAULT_PARAMETERS.model_copy(update={"inflationRatePercent": 0})
    result = project(params)

    assert all(point.realValue == point.totalValue for point in result.series)
    assert result.totalRealValue == result.finalValue


def test_inflation_erodes_real_value():
    result = project(DEFAULT_PARAMETERS)
    for point in result.series[1:]:
        assert point.realValue < point.totalValue


def test_crossover_is_first_year_interest_exceeds_contributions():
    result = project(DEFAULT_PARAMETERS)
    crossover = result.crossoverPoint

    assert crossover is not None
    assert crossover.interestEarned > crossover.totalContributed
    for point in result.series:
        if point.year < crossover.year:
            assert not point.interestEarned > point.totalContributed
    assert find_crossover(result.series) == crossover


def test_no_crossover_when_interest_never_catches_up():
    params = InvestmentParameters(
        initialAmount=10000, monthlyContribution=500, annualReturnPercent=2, years=10
    )
    assert project(params).crossoverPoint is None


def test_snapshots_round_half_up_while_totals_stay_exact():
    result = project(InvestmentParameters(initialAmount=2.5, years=0))

    assert result.series[0].totalValue == 3
    assert result.series[0].totalContributed == 3
    assert result.series[0].realValue == 3
    assert result.finalValue == 2.5
    assert result.totalRealValue == 2.5


def test_totals_can_differ_from_last_snapshot_by_rounding():
    params = InvestmentParameters(
        initialAmount=1234.56, monthlyContribution=78.9, annualReturnPercent=6.3, years=7
    )
    result = project(params)
    last = result.series[-1]

    assert last.totalValue == math.floor(result.finalValue + 0.5)
    assert abs(last.totalValue - result.finalValue) <= 0.5
    assert isinstance(result.finalValue, float)


def test_zero_capital_gives_nan_roi():
    result = project(InvestmentParameters(annualReturnPercent=7, years=5))

    assert result.finalValue == 0
    assert result.totalContributed == 0
    assert math.isnan(result.roi)


def test_negative_horizon_simulates_nothing():
    params = InvestmentParameters(initialAmount=1000, monthlyContribution=100, years=-3)
    result = project(params)

    assert result.series == []
    assert result.finalValue == 1000
    assert result.totalContributed == 1000
    assert result.crossoverPoint is None


def test_fractional_horizon_runs_partial_year():
    params = InvestmentParameters(initialAmount=1000, monthlyContribution=100, years=1.5)
    result = project(params)

    assert [point.year for point in result.series] == [0, 1]
    assert result.totalContributed == 1000 + 100 * 18


def test_negative_inputs_do_not_raise():
    params = InvestmentParameters(
        initialAmount=-500, monthlyContribution=-10, annualReturnPercent=-3, years=2
    )
    result = project(params)

    assert len(result.series) == 3
    assert result.totalContributed == -500 - 10 * 24
