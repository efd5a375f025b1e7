"""What-if calculations.

Reuses the timeline and contribution solvers with different quantities held
fixed: the monthly investment needed to retire at a chosen age, the earliest
age a given extra investment buys, and the return needed to finish in a given
number of years.
"""

import logging
from typing import Sequence, Tuple

from .. import config
from ..data_model import CashFlow, CashFlowType, EarliestAgeResult, ReverseResult
from .contribution import solve_required_contribution
from .projector import future_value
from .validation import ensure_non_negative

logger = logging.getLogger(__name__)

EXTRA_SIP_ID = "what-if-sip"


def required_for_retirement_age(
    current_wealth: float,
    target_wealth: float,
    current_age: int,
    desired_retirement_age: int,
    annual_return: float,
    existing_cash_flows: Sequence[CashFlow] = (),
) -> ReverseResult:
    if desired_retirement_age <= current_age:
        raise ValueError(
            f"desired_retirement_age {desired_retirement_age} must be after current_age {current_age}"
        )
    desired_timeline = desired_retirement_age - current_age
    requirements = solve_required_contribution(
        current_wealth,
        target_wealth,
        desired_timeline,
        annual_return,
        existing_cash_flows,
    )
    return ReverseResult(
        desired_timeline=desired_timeline,
        retirement_age=current_age + desired_timeline,
        requirements=requirements,
    )


def earliest_retirement_age(
    current_wealth: float,
    target_wealth: float,
    current_age: int,
    annual_return: float,
    extra_monthly_investment: float = 0.0,
    existing_cash_flows: Sequence[CashFlow] = (),
    max_years: int = config.MAX_TIMELINE_YEARS,
) -> EarliestAgeResult:
    """Smallest whole number of years to the target with an extra monthly SIP.

    The extra SIP runs from year 1 to the candidate year. ``years`` is
    ``None`` when the target is out of reach within ``max_years``.
    """
    ensure_non_negative(extra_monthly_investment, "extra_monthly_investment")
    ensure_non_negative(current_wealth, "current_wealth")
    ensure_non_negative(target_wealth, "target_wealth")

    if current_wealth >= target_wealth:
        return EarliestAgeResult(years=0, retirement_age=current_age, extra_monthly_investment=extra_monthly_investment)

    for years in range(1, max_years + 1):
        flows = list(existing_cash_flows)
        if extra_monthly_investment > 0:
            flows.append(
                CashFlow(
                    id=EXTRA_SIP_ID,
                    type=CashFlowType.SIP,
                    amount=extra_monthly_investment,
                    start_year=1,
                    end_year=years,
                )
            )
        if future_value(current_wealth, years, annual_return, flows) >= target_wealth:
            logger.debug("Target reached in %d years with extra %.2f/month", years, extra_monthly_investment)
            return EarliestAgeResult(
                years=years,
                retirement_age=current_age + years,
                extra_monthly_investment=extra_monthly_investment,
            )

    logger.debug("Target not reached within %d years", max_years)
    return EarliestAgeResult(years=None, retirement_age=None, extra_monthly_investment=extra_monthly_investment)


def required_annual_return(current_wealth: float, target_wealth: float, years: int) -> float | None:
    """Annual return (%) that grows ``current_wealth`` to the target in ``years``.

    The timeline equation solved for the rate. ``None`` when no rate can do
    it (nothing to compound, or no time).
    """
    ensure_non_negative(current_wealth, "current_wealth")
    ensure_non_negative(target_wealth, "target_wealth")
    if current_wealth >= target_wealth:
        return 0.0
    if years <= 0 or current_wealth <= 0:
        return None
    return ((target_wealth / current_wealth) ** (1 / years) - 1) * 100


def retirement_age_bounds(
    current_age: int,
    natural_retire_age: int | None,
    max_span: int = config.MAX_REVERSE_SPAN_YEARS,
) -> Tuple[int, int]:
    """Range of retirement ages worth offering in a what-if."""
    min_age = current_age + 1
    max_age = current_age + max_span
    if natural_retire_age is not None:
        max_age = min(natural_retire_age, max_age)
    return min_age, max(min_age, max_age)
