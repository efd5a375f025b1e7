import pytest

from b2a import config
from b2a.data_model import CashFlow, CashFlowType
from b2a.engine.contribution import annuity_payment, solve_required_contribution
from b2a.engine.projector import future_value, project_with_required_contribution


def test_shortfall_sip_reproduces_target_at_month_120():
    result = solve_required_contribution(0.0, 1_200_000.0, 10, 10.0)
    assert not result.is_achievable_with_cash_flows
    assert result.remaining_target == pytest.approx(1_200_000.0)
    i = 0.10 / 12
    assert result.required_monthly_sip == pytest.approx(1_200_000.0 * i / ((1 + i) ** 120 - 1))

    sip = CashFlow("sip", CashFlowType.SIP, result.required_monthly_sip, start_year=1, end_year=10)
    assert future_value(0.0, 10, 10.0, [sip]) == pytest.approx(1_200_000.0, rel=1e-9)


def test_existing_flows_reaching_target_need_nothing():
    flows = [CashFlow("sip", CashFlowType.SIP, 20_000.0, start_year=1, end_year=10)]
    result = solve_required_contribution(1_000_000.0, 3_000_000.0, 10, 10.0, flows)
    assert result.is_achievable_with_cash_flows
    assert result.required_monthly_sip == 0.0
    assert result.required_yearly_sip == 0.0
    assert result.required_lumpsum == 0.0
    assert result.remaining_target == 0.0
    assert result.projected_value_with_cash_flows >= 3_000_000.0


def test_reinjected_sip_reaches_target_with_existing_flows(mixed_cash_flows):
    target = 5_000_000.0
    result = solve_required_contribution(500_000.0, target, 12, 11.0, mixed_cash_flows)
    assert result.required_monthly_sip > 0
    assert result.projected_value_with_cash_flows < target

    series = project_with_required_contribution(500_000.0, 12, 11.0, mixed_cash_flows, result)
    assert series.final_value == pytest.approx(target, rel=0.005)


def test_lumpsum_added_today_closes_the_gap():
    result = solve_required_contribution(100_000.0, 1_000_000.0, 15, 9.0)
    topped_up = future_value(100_000.0 + result.required_lumpsum, 15, 9.0)
    assert topped_up == pytest.approx(1_000_000.0, rel=1e-9)


def test_yearly_sip_uses_annual_compounding():
    result = solve_required_contribution(0.0, 100_000.0, 5, 8.0)
    expected = 100_000.0 * 0.08 / (1.08**5 - 1)
    assert result.required_yearly_sip == pytest.approx(expected)


def test_zero_rate_uses_linear_form():
    result = solve_required_contribution(0.0, 12_000.0, 1, 0.0)
    assert result.required_monthly_sip == pytest.approx(1000.0)
    assert result.required_yearly_sip == pytest.approx(12_000.0)
    assert result.required_lumpsum == pytest.approx(12_000.0)


def test_non_positive_timeline_rejected():
    with pytest.raises(ValueError, match="desired_timeline"):
        solve_required_contribution(0.0, 1000.0, 0, 10.0)


def test_annuity_payment():
    assert annuity_payment(1200.0, 0.0, 12) == pytest.approx(100.0)
    assert annuity_payment(1000.0, 0.01, 1) == pytest.approx(1000.0)
    with pytest.raises(ValueError, match="periods"):
        annuity_payment(1000.0, 0.01, 0)


def test_timeline_beyond_horizon_rejected():
    with pytest.raises(ValueError, match="desired_timeline"):
        solve_required_contribution(0.0, 1_000_000.0, config.MAX_TIMELINE_YEARS + 1, 14.0)


@pytest.mark.parametrize(
    "current,flows,rate",
    [
        (0.0, [CashFlow("swp", CashFlowType.SWP, 10_000.0, start_year=1, end_year=10)], 10.0),
        (200_000.0, [CashFlow("w", CashFlowType.WITHDRAWAL, 1_000_000.0, start_year=2)], 8.0),
        (50_000.0, [CashFlow("swp", CashFlowType.SWP, 2_000.0, start_year=1, end_year=5)], 0.0),
    ],
)
def test_requirements_reach_target_when_withdrawals_empty_the_balance(current, flows, rate):
    target = 1_000_000.0
    result = solve_required_contribution(current, target, 10, rate, flows)
    assert not result.is_achievable_with_cash_flows

    series = project_with_required_contribution(current, 10, rate, flows, result) if rate > 0 else None
    with_sip = [*flows, CashFlow("sip", CashFlowType.SIP, result.required_monthly_sip, start_year=1, end_year=10)]
    final = future_value(current, 10, rate, with_sip)
    assert final == pytest.approx(target, rel=0.005)
    assert final >= target * (1 - 1e-6)
    if series is not None:
        assert series.final_value == pytest.approx(final)

    assert future_value(current + result.required_lumpsum, 10, rate, flows) == pytest.approx(target, rel=0.005)


def test_drained_balance_needs_more_than_the_closed_form():
    flows = [CashFlow("swp", CashFlowType.SWP, 10_000.0, start_year=1, end_year=10)]
    result = solve_required_contribution(0.0, 1_000_000.0, 10, 10.0, flows)
    assert result.projected_value_with_cash_flows == 0.0
    closed_form = annuity_payment(1_000_000.0, 0.10 / 12, 120)
    # SIP and SWP land in the same month, so the SIP has to carry the SWP too.
    assert result.required_monthly_sip == pytest.approx(closed_form + 10_000.0, rel=1e-6)
