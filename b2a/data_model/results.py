"""Derived values produced by the engine.

Every object here is frozen: a ``DerivedPlan`` is rebuilt from scratch on each
call and never patched field by field.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

import pandas as pd


@dataclass(frozen=True)
class TimelineResult:
    """Years to target at a given rate.

    ``years`` is ``None`` when the target cannot be reached (non-positive
    rate or nothing to compound).
    """

    years: int | None
    annual_return: float

    @property
    def is_reachable(self) -> bool:
        return self.years is not None


@dataclass(frozen=True)
class NaturalTimeline:
    years: int | None
    annual_return: float
    projected_value: float
    is_already_achieved: bool


@dataclass(frozen=True)
class ContributionResult:
    """Additional investment needed to close the gap by the desired timeline.

    Parameters
    ----------
    required_monthly_sip : float
        Level end-of-month contribution over the whole timeline.
    required_yearly_sip : float
        Level end-of-year contribution, annual compounding.
    required_lumpsum : float
        Amount to add to today's balance instead of a SIP.
    projected_value_with_cash_flows : float
        Balance at the timeline from current wealth and existing flows only.
    remaining_target : float
        Shortfall against the target; 0 when achievable.
    is_achievable_with_cash_flows : bool
        Existing flows already reach the target.
    """

    required_monthly_sip: float
    required_yearly_sip: float
    required_lumpsum: float
    projected_value_with_cash_flows: float
    remaining_target: float
    is_achievable_with_cash_flows: bool


@dataclass(frozen=True)
class ProjectionPoint:
    year: int
    value: float


@dataclass(frozen=True)
class ProjectionSeries:
    points: Tuple[ProjectionPoint, ...]

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def __getitem__(self, idx: int) -> ProjectionPoint:
        return self.points[idx]

    @property
    def final_value(self) -> float:
        return self.points[-1].value

    def value_at(self, year: int) -> float:
        for point in self.points:
            if point.year == year:
                return point.value
        raise KeyError(f"No sample for year {year}")

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            [{"Year": p.year, "Value": p.value} for p in self.points],
            columns=["Year", "Value"],
        )


@dataclass(frozen=True)
class ScenarioProjection:
    expected_return: float
    final_value: float
    growth: float  # % over the starting value
    series: ProjectionSeries


@dataclass(frozen=True)
class ScenarioProjections:
    starting_value: float
    timeline: int
    optimistic: ScenarioProjection
    base_case: ScenarioProjection
    pessimistic: ScenarioProjection

    def to_frame(self) -> pd.DataFrame:
        frames = []
        for name, scenario in (
            ("optimistic", self.optimistic),
            ("base_case", self.base_case),
            ("pessimistic", self.pessimistic),
        ):
            df = scenario.series.to_frame()
            df.insert(0, "Scenario", name)
            frames.append(df)
        return pd.concat(frames, ignore_index=True)


@dataclass(frozen=True)
class ReverseResult:
    desired_timeline: int
    retirement_age: int
    requirements: ContributionResult


@dataclass(frozen=True)
class EarliestAgeResult:
    years: int | None
    retirement_age: int | None
    extra_monthly_investment: float


@dataclass(frozen=True)
class PlanIssue:
    field: str
    message: str


@dataclass(frozen=True)
class InvalidPlan:
    """Plan rejected at the boundary; nothing was computed."""

    issues: Tuple[PlanIssue, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return False

    def messages(self) -> list[str]:
        return [f"{issue.field}: {issue.message}" for issue in self.issues]


@dataclass(frozen=True)
class DerivedPlan:
    natural_timeline: NaturalTimeline
    weighted_return: float
    allocation_total: float
    allocation_valid: bool
    accelerated_timeline: int | None
    desired_timeline: int
    requirements: ContributionResult | None
    projections: ProjectionSeries | None
    scenarios: ScenarioProjections | None
    natural_growth: ProjectionSeries | None

    @property
    def ok(self) -> bool:
        return True
