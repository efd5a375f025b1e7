"""Full recompute of a plan's derived values.

``derive_plan`` is called by the host on every change to a ``PlanState``. It
holds no state and reuses nothing from earlier calls, so every field of the
result comes from the same inputs.
"""

import logging

from .. import config
from ..data_model import DerivedPlan, InvalidPlan, PlanState
from .allocation import allocation_total, is_allocation_valid, weighted_return
from .contribution import solve_required_contribution
from .projector import natural_growth, project_scenarios, project_with_required_contribution, with_required_contribution
from .timeline import accelerated_timeline, natural_timeline, resolve_desired_timeline
from .validation import plan_issues

logger = logging.getLogger(__name__)


def derive_plan(plan: PlanState) -> DerivedPlan | InvalidPlan:
    issues = plan_issues(plan)
    if issues:
        logger.warning("Plan rejected with %d issue(s): %s", len(issues), issues[0].message)
        return InvalidPlan(issues=tuple(issues))

    natural = natural_timeline(plan.current_wealth, plan.target_wealth, plan.risk_profile)
    blended = weighted_return(plan.allocations)
    accelerated = accelerated_timeline(plan.current_wealth, plan.target_wealth, blended)
    desired = resolve_desired_timeline(plan.desired_timeline, accelerated, natural.years)

    requirements = None
    projections = None
    scenarios = None
    if 0 < desired <= config.MAX_TIMELINE_YEARS and blended > 0:
        requirements = solve_required_contribution(
            plan.current_wealth,
            plan.target_wealth,
            desired,
            blended,
            plan.cash_flows,
        )
        projections = project_with_required_contribution(
            plan.current_wealth,
            desired,
            blended,
            plan.cash_flows,
            requirements,
        )
        scenarios = project_scenarios(
            plan.current_wealth,
            desired,
            blended,
            with_required_contribution(plan.cash_flows, requirements, desired),
        )

    growth_years = min(max(desired, config.MIN_PROJECTION_YEARS), config.MAX_TIMELINE_YEARS)
    total = allocation_total(plan.allocations)
    allocation_valid = is_allocation_valid(plan.allocations)
    if not allocation_valid:
        logger.warning("Allocation totals %.2f%%, expected 100%%", total)
    derived = DerivedPlan(
        natural_timeline=natural,
        weighted_return=blended,
        allocation_total=total,
        allocation_valid=allocation_valid,
        accelerated_timeline=accelerated,
        desired_timeline=desired,
        requirements=requirements,
        projections=projections,
        scenarios=scenarios,
        natural_growth=natural_growth(plan.current_wealth, growth_years, natural.annual_return),
    )
    logger.info(
        "Derived plan: natural=%s accelerated=%s desired=%d weighted=%.2f%%",
        natural.years,
        accelerated,
        desired,
        blended,
    )
    return derived


def natural_retirement_age(plan: PlanState, derived: DerivedPlan) -> int | None:
    years = derived.natural_timeline.years
    if years is None:
        return None
    return plan.current_age + years
