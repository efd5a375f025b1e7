import math

import pytest

from b2a import config
from b2a.data_model import RiskProfile
from b2a.engine.timeline import (
    accelerated_timeline,
    natural_rate,
    natural_timeline,
    resolve_desired_timeline,
    years_to_target,
)


def test_ten_x_at_twelve_percent_rounds_up():
    result = years_to_target(1_000_000, 10_000_000, 12.0)
    raw = math.log(10) / math.log(1.12)
    assert raw == pytest.approx(20.3, abs=0.05)
    assert result.years == 21
    assert result.annual_return == 12.0


def test_exact_answer_is_not_pushed_up_a_year():
    assert years_to_target(100.0, 121.0, 10.0).years == 2


@pytest.mark.parametrize("current,target", [(100.0, 100.0), (200.0, 100.0), (0.0, 0.0)])
def test_goal_already_met(current, target):
    assert years_to_target(current, target, 10.0).years == 0
    assert accelerated_timeline(current, target, 10.0) == 0


@pytest.mark.parametrize("rate", [0.0, -3.0])
def test_non_positive_rate_is_unreachable(rate):
    result = years_to_target(100.0, 200.0, rate)
    assert result.years is None
    assert not result.is_reachable


def test_zero_wealth_is_unreachable():
    assert years_to_target(0.0, 200.0, 10.0).years is None


def test_negative_wealth_rejected():
    with pytest.raises(ValueError, match="current"):
        years_to_target(-1.0, 200.0, 10.0)


def test_years_non_increasing_in_rate():
    previous = math.inf
    for rate in [0.5, 1, 2, 4, 6, 8, 10, 12, 15, 20, 30]:
        years = years_to_target(250_000, 5_000_000, rate).years
        assert years <= previous
        previous = years


def test_natural_rate_table():
    assert natural_rate(RiskProfile.CONSERVATIVE) == 8.0
    assert natural_rate("moderate") == 10.0
    assert natural_rate(RiskProfile.AGGRESSIVE) == 12.0
    assert natural_rate("veryAggressive") == 14.0
    assert set(config.RISK_PROFILE_RETURNS) == {p.value for p in RiskProfile}
    assert config.RATE_TABLE_VERSION


def test_natural_rate_unknown_profile():
    with pytest.raises(ValueError, match="Unknown risk profile"):
        natural_rate("reckless")


def test_natural_timeline_projection():
    result = natural_timeline(1_000_000, 2_000_000, RiskProfile.MODERATE)
    assert result.years == 8
    assert result.annual_return == 10.0
    assert result.projected_value == pytest.approx(1_000_000 * 1.1**8)
    assert result.projected_value >= 2_000_000
    assert not result.is_already_achieved


def test_natural_timeline_override_and_achieved():
    assert natural_timeline(5.0, 1.0, "moderate").is_already_achieved
    assert natural_timeline(1_000_000, 2_000_000, "moderate", annual_return_override=12.0).annual_return == 12.0


def test_natural_and_accelerated_use_same_rounding():
    natural = natural_timeline(1_000_000, 10_000_000, RiskProfile.AGGRESSIVE)
    assert natural.years == accelerated_timeline(1_000_000, 10_000_000, 12.0)


def test_accelerated_requires_positive_weighted_return():
    assert accelerated_timeline(1_000_000, 10_000_000, 0.0) is None


def test_goal_met_wins_over_missing_return():
    assert accelerated_timeline(200.0, 100.0, 0.0) == 0
    assert accelerated_timeline(100.0, 100.0, -2.0) == 0


def test_resolve_desired_timeline():
    assert resolve_desired_timeline(7, 12, 20) == 7
    assert resolve_desired_timeline(None, 12, 20) == 12
    assert resolve_desired_timeline(None, None, 20) == 20
    assert resolve_desired_timeline(None, None, None) == 0
    assert resolve_desired_timeline(0, 12, 20) == 0
