# data_model/plan.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from .. import config
from .allocation import AllocationEntry, allocations_for_profile
from .cashflow import CashFlow


class RiskProfile(str, Enum):
    CONSERVATIVE = "conservative"
    MODERATE = "moderate"
    AGGRESSIVE = "aggressive"
    VERY_AGGRESSIVE = "veryAggressive"


class PlanMode(str, Enum):
    VISION = "vision"  # persisted by the host
    PLAY = "play"  # sandbox


@dataclass
class PlanState:
    current_wealth: float
    target_wealth: float
    current_age: int
    risk_profile: RiskProfile | str = RiskProfile.MODERATE
    allocations: List[AllocationEntry] = field(default_factory=list)
    cash_flows: List[CashFlow] = field(default_factory=list)
    desired_timeline: int | None = None
    mode: PlanMode | str = PlanMode.PLAY


def default_plan(mode: PlanMode | str = PlanMode.PLAY) -> PlanState:
    risk_profile = RiskProfile(config.DEFAULT_PLAN["risk_profile"])
    return PlanState(
        current_wealth=config.DEFAULT_PLAN["current_wealth"],
        target_wealth=config.DEFAULT_PLAN["target_wealth"],
        current_age=config.DEFAULT_PLAN["current_age"],
        risk_profile=risk_profile,
        allocations=allocations_for_profile(risk_profile.value),
        cash_flows=[],
        desired_timeline=None,
        mode=PlanMode(mode),
    )
