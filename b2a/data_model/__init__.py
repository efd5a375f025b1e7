from .allocation import (
    AllocationEntry,
    AllocationTableModel,
    allocations_for_profile,
    dataframe_to_allocations,
)
from .cashflow import (
    CASH_FLOW_TYPES,
    CashFlow,
    CashFlowTableModel,
    CashFlowType,
    dataframe_to_cash_flows,
)
from .plan import PlanMode, PlanState, RiskProfile, default_plan
from .results import (
    ContributionResult,
    DerivedPlan,
    EarliestAgeResult,
    InvalidPlan,
    NaturalTimeline,
    PlanIssue,
    ProjectionPoint,
    ProjectionSeries,
    ReverseResult,
    ScenarioProjection,
    ScenarioProjections,
    TimelineResult,
)

__all__ = [
    "CASH_FLOW_TYPES",
    "AllocationEntry",
    "AllocationTableModel",
    "CashFlow",
    "CashFlowTableModel",
    "CashFlowType",
    "ContributionResult",
    "DerivedPlan",
    "EarliestAgeResult",
    "InvalidPlan",
    "NaturalTimeline",
    "PlanIssue",
    "PlanMode",
    "PlanState",
    "ProjectionPoint",
    "ProjectionSeries",
    "ReverseResult",
    "RiskProfile",
    "ScenarioProjection",
    "ScenarioProjections",
    "TimelineResult",
    "allocations_for_profile",
    "dataframe_to_allocations",
    "dataframe_to_cash_flows",
    "default_plan",
]
