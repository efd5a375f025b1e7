"""Years-to-target solver for the natural and accelerated timelines.

Both timelines use the same rounding policy, ceiling to whole years, so the
two figures can be compared directly.
"""

import logging
import math

from .. import config
from ..data_model import NaturalTimeline, RiskProfile, TimelineResult
from .validation import ensure_non_negative

logger = logging.getLogger(__name__)

# Keeps ceil() from adding a year when the exact answer is an integer.
_YEAR_EPSILON = 1e-9


def natural_rate(risk_profile: RiskProfile | str) -> float:
    """Baseline annual return (%) for a risk profile."""
    key = getattr(risk_profile, "value", risk_profile)
    try:
        return config.RISK_PROFILE_RETURNS[key]
    except KeyError:
        raise ValueError(f"Unknown risk profile: {risk_profile!r}") from None


def years_to_target(current: float, target: float, annual_return_percent: float) -> TimelineResult:
    ensure_non_negative(current, "current")
    ensure_non_negative(target, "target")
    if current >= target:
        return TimelineResult(years=0, annual_return=annual_return_percent)
    if annual_return_percent <= 0 or current <= 0:
        logger.debug("Target unreachable at %.2f%% from %.2f", annual_return_percent, current)
        return TimelineResult(years=None, annual_return=annual_return_percent)

    raw = math.log(target / current) / math.log(1 + annual_return_percent / 100)
    years = math.ceil(raw - _YEAR_EPSILON)
    logger.debug("years_to_target: raw=%.4f reported=%d at %.2f%%", raw, years, annual_return_percent)
    return TimelineResult(years=years, annual_return=annual_return_percent)


def natural_timeline(
    current: float,
    target: float,
    risk_profile: RiskProfile | str,
    annual_return_override: float | None = None,
) -> NaturalTimeline:
    annual_return = annual_return_override if annual_return_override is not None else natural_rate(risk_profile)
    result = years_to_target(current, target, annual_return)
    if result.years is None:
        projected = current
    else:
        projected = current * (1 + annual_return / 100) ** result.years
    return NaturalTimeline(
        years=result.years,
        annual_return=annual_return,
        projected_value=projected,
        is_already_achieved=result.years == 0,
    )


def accelerated_timeline(current: float, target: float, weighted_return: float) -> int | None:
    if current >= target:
        return 0
    if weighted_return <= 0:
        return None
    return years_to_target(current, target, weighted_return).years


def resolve_desired_timeline(
    user_value: int | None,
    accelerated: int | None,
    natural_years: int | None,
) -> int:
    """User's timeline verbatim if set, else accelerated, else natural."""
    for candidate in (user_value, accelerated, natural_years):
        if candidate is not None:
            return candidate
    return 0
