"""Required-contribution solver.

Inverts the annuity future-value formula for the level contribution that
closes the gap between what current wealth and existing cash flows reach by
the desired timeline and the target. When existing withdrawals run the
balance down to zero the projector stops being linear in the contribution,
so the closed-form answer is checked against ``future_value`` and refined by
bisection if it falls short.
"""

import logging
from typing import Callable, Sequence

from .. import config
from ..data_model import CashFlow, CashFlowType, ContributionResult
from .projector import REQUIRED_SIP_ID, future_value
from .validation import ensure_non_negative

logger = logging.getLogger(__name__)

# Relative shortfall a reinjected contribution may leave before it is refined.
REINJECTION_TOLERANCE = 1e-9
BISECTION_STEPS = 100


def annuity_payment(shortfall: float, periodic_rate: float, periods: int) -> float:
    """Level end-of-period payment whose future value is ``shortfall``.

    Falls back to ``shortfall / periods`` when the rate is zero.
    """
    if periods <= 0:
        raise ValueError("periods must be positive")
    if periodic_rate == 0:
        return shortfall / periods
    growth = (1 + periodic_rate) ** periods
    return shortfall * periodic_rate / (growth - 1)


def _smallest_amount_reaching(
    target: float,
    estimate: float,
    reach: Callable[[float], float],
) -> float:
    """Smallest amount (to bisection precision) whose ``reach`` hits ``target``.

    ``reach`` must be non-decreasing in the amount. ``estimate`` is returned
    unchanged when it already gets there.
    """
    floor = target * (1 - REINJECTION_TOLERANCE)
    if reach(estimate) >= floor:
        return estimate

    low = estimate
    high = max(estimate * 2, 1.0)
    while reach(high) < floor:
        low, high = high, high * 2

    for _ in range(BISECTION_STEPS):
        middle = (low + high) / 2
        if reach(middle) >= floor:
            high = middle
        else:
            low = middle
        if high - low <= high * REINJECTION_TOLERANCE:
            break
    logger.debug("Closed form %.2f refined to %.2f against the projector", estimate, high)
    return high


def solve_required_contribution(
    current_wealth: float,
    target_wealth: float,
    desired_timeline: int,
    annual_return: float,
    existing_cash_flows: Sequence[CashFlow] = (),
) -> ContributionResult:
    """Solve for the additional monthly SIP needed to hit the target.

    Parameters
    ----------
    current_wealth : float
        Starting balance.
    target_wealth : float
        Balance wanted at ``desired_timeline``.
    desired_timeline : int
        Years available; between 1 and ``config.MAX_TIMELINE_YEARS``.
    annual_return : float
        Expected annual return in percent; zero uses the linear form.
    existing_cash_flows : Sequence[CashFlow]
        Flows already scheduled. They count toward the target before any
        extra contribution is asked for.

    Returns
    -------
    ContributionResult
        The monthly SIP and lumpsum reach the target when projected with the
        existing flows, even where those flows empty the balance on the way.
        The yearly SIP is the closed-form annual annuity.
    """
    if desired_timeline <= 0:
        raise ValueError("desired_timeline must be positive")
    if desired_timeline > config.MAX_TIMELINE_YEARS:
        raise ValueError(f"desired_timeline must be at most {config.MAX_TIMELINE_YEARS} years")
    ensure_non_negative(target_wealth, "target_wealth")

    projected = future_value(current_wealth, desired_timeline, annual_return, existing_cash_flows)
    if projected >= target_wealth:
        logger.debug("Target %.2f reached by existing flows (%.2f)", target_wealth, projected)
        return ContributionResult(
            required_monthly_sip=0.0,
            required_yearly_sip=0.0,
            required_lumpsum=0.0,
            projected_value_with_cash_flows=projected,
            remaining_target=0.0,
            is_achievable_with_cash_flows=True,
        )

    shortfall = target_wealth - projected
    months = desired_timeline * 12
    monthly_rate = annual_return / 100 / 12
    annual_rate = annual_return / 100

    def with_sip(amount: float) -> float:
        sip = CashFlow(
            id=REQUIRED_SIP_ID,
            type=CashFlowType.SIP,
            amount=amount,
            start_year=1,
            end_year=desired_timeline,
        )
        return future_value(current_wealth, desired_timeline, annual_return, [*existing_cash_flows, sip])

    def with_lumpsum(amount: float) -> float:
        return future_value(current_wealth + amount, desired_timeline, annual_return, existing_cash_flows)

    monthly_sip = annuity_payment(shortfall, monthly_rate, months)
    monthly_sip = _smallest_amount_reaching(target_wealth, monthly_sip, with_sip)
    yearly_sip = annuity_payment(shortfall, annual_rate, desired_timeline)
    lumpsum = shortfall / (1 + monthly_rate) ** months
    lumpsum = _smallest_amount_reaching(target_wealth, lumpsum, with_lumpsum)

    logger.debug(
        "Shortfall %.2f over %d months at %.2f%%: SIP %.2f, lumpsum %.2f",
        shortfall,
        months,
        annual_return,
        monthly_sip,
        lumpsum,
    )
    return ContributionResult(
        required_monthly_sip=max(0.0, monthly_sip),
        required_yearly_sip=max(0.0, yearly_sip),
        required_lumpsum=max(0.0, lumpsum),
        projected_value_with_cash_flows=projected,
        remaining_target=shortfall,
        is_achievable_with_cash_flows=False,
    )
