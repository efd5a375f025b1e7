"""Boundary checks for plan inputs.

``plan_issues`` collects every problem with a plan so the planner can hand
back an ``InvalidPlan`` instead of computing on bad numbers. The ``ensure_*``
helpers are for the lower-level solvers, which raise ``ValueError`` when
called directly with out-of-range values.
"""

from __future__ import annotations

import math
from typing import Iterable, List

from .. import config
from ..data_model import AllocationEntry, CashFlow, PlanIssue, PlanState


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def _non_negative(value, field: str) -> List[PlanIssue]:
    if not _is_number(value):
        return [PlanIssue(field, "must be a finite number")]
    if value < 0:
        return [PlanIssue(field, "must not be negative")]
    return []


def cash_flow_issues(flow: CashFlow, prefix: str = "cash_flow") -> List[PlanIssue]:
    field = f"{prefix}[{flow.id}]"
    issues = _non_negative(flow.amount, f"{field}.amount")
    if not isinstance(flow.start_year, int) or flow.start_year < 1:
        issues.append(PlanIssue(f"{field}.start_year", "must be a whole year of at least 1"))
        return issues
    if flow.type.is_recurring:
        if flow.end_year is None:
            issues.append(PlanIssue(f"{field}.end_year", f"is required for {flow.type.value}"))
        elif not isinstance(flow.end_year, int):
            issues.append(PlanIssue(f"{field}.end_year", "must be a whole year"))
        elif flow.end_year < flow.start_year:
            issues.append(PlanIssue(f"{field}.end_year", "must not be before start_year"))
    return issues


def allocation_issues(entry: AllocationEntry, index: int) -> List[PlanIssue]:
    field = f"allocations[{index}]"
    issues: List[PlanIssue] = []
    pct = entry.allocation_percentage
    if not _is_number(pct) or not 0 <= pct <= 100:
        issues.append(PlanIssue(f"{field}.allocation_percentage", "must be between 0 and 100"))
    issues.extend(_non_negative(entry.return_rate, f"{field}.return_rate"))
    return issues


def plan_issues(plan: PlanState) -> List[PlanIssue]:
    issues: List[PlanIssue] = []
    issues.extend(_non_negative(plan.current_wealth, "current_wealth"))
    issues.extend(_non_negative(plan.target_wealth, "target_wealth"))
    issues.extend(_non_negative(plan.current_age, "current_age"))
    if getattr(plan.risk_profile, "value", plan.risk_profile) not in config.RISK_PROFILE_RETURNS:
        issues.append(PlanIssue("risk_profile", f"unknown profile {plan.risk_profile!r}"))
    if plan.desired_timeline is not None:
        if not isinstance(plan.desired_timeline, int) or plan.desired_timeline < 0:
            issues.append(PlanIssue("desired_timeline", "must be a whole number of years, not negative"))
        elif plan.desired_timeline > config.MAX_TIMELINE_YEARS:
            issues.append(PlanIssue("desired_timeline", f"must be at most {config.MAX_TIMELINE_YEARS} years"))
    for index, entry in enumerate(plan.allocations):
        issues.extend(allocation_issues(entry, index))
    for flow in plan.cash_flows:
        issues.extend(cash_flow_issues(flow))
    return issues


def ensure_non_negative(value: float, name: str) -> None:
    issues = _non_negative(value, name)
    if issues:
        raise ValueError(f"{name} {issues[0].message}")


def ensure_cash_flows(cash_flows: Iterable[CashFlow]) -> None:
    for flow in cash_flows:
        issues = cash_flow_issues(flow)
        if issues:
            raise ValueError("; ".join(f"{i.field} {i.message}" for i in issues))
