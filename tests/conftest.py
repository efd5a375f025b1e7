"""Shared fixtures for the planning engine tests."""

import pytest

from b2a.data_model import AllocationEntry, CashFlow, CashFlowType, PlanState, RiskProfile


@pytest.fixture()
def two_asset_mix():
    return [
        AllocationEntry("Equity", 60.0, 12.0, color="#3b82f6"),
        AllocationEntry("Debt", 40.0, 7.0, color="#10b981"),
    ]


@pytest.fixture()
def mixed_cash_flows():
    """Flows that keep the balance positive throughout."""
    return [
        CashFlow("sip", CashFlowType.SIP, 5000.0, start_year=1, end_year=5),
        CashFlow("bonus", CashFlowType.LUMPSUM, 100000.0, start_year=3),
        CashFlow("swp", CashFlowType.SWP, 2000.0, start_year=6, end_year=8),
        CashFlow("car", CashFlowType.WITHDRAWAL, 50000.0, start_year=9),
    ]


@pytest.fixture()
def sample_plan(two_asset_mix):
    return PlanState(
        current_wealth=1_000_000.0,
        target_wealth=10_000_000.0,
        current_age=35,
        risk_profile=RiskProfile.AGGRESSIVE,
        allocations=two_asset_mix,
        cash_flows=[],
    )
