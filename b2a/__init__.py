"""B2A (Before-to-After) goal-planning calculation engine."""

from .data_model import (
    AllocationEntry,
    CashFlow,
    CashFlowType,
    DerivedPlan,
    InvalidPlan,
    PlanMode,
    PlanState,
    RiskProfile,
    default_plan,
)
from .engine.allocation import is_allocation_valid, weighted_return
from .engine.contribution import solve_required_contribution
from .engine.planner import derive_plan, natural_retirement_age
from .engine.projector import project, project_with_required_contribution
from .engine.reverse import earliest_retirement_age, required_for_retirement_age
from .engine.timeline import years_to_target

__all__ = [
    "AllocationEntry",
    "CashFlow",
    "CashFlowType",
    "DerivedPlan",
    "InvalidPlan",
    "PlanMode",
    "PlanState",
    "RiskProfile",
    "default_plan",
    "derive_plan",
    "earliest_retirement_age",
    "is_allocation_valid",
    "natural_retirement_age",
    "project",
    "project_with_required_contribution",
    "required_for_retirement_age",
    "solve_required_contribution",
    "weighted_return",
    "years_to_target",
]
