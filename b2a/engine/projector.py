"""Month-by-month compounding with scheduled cash flows.

Each month the balance grows first and then takes that month's net cash flow,
so contributions behave like an ordinary annuity (paid at month end). The
balance never drops below zero.
"""

import logging
from typing import Iterator, List, Sequence

import pandas as pd

from .. import config
from ..data_model import (
    CashFlow,
    CashFlowType,
    ContributionResult,
    ProjectionPoint,
    ProjectionSeries,
    ScenarioProjection,
    ScenarioProjections,
)
from .validation import ensure_cash_flows, ensure_non_negative

logger = logging.getLogger(__name__)

REQUIRED_SIP_ID = "required-sip"

MONTHLY_COLUMNS = [
    "MonthIndex",
    "Year",
    "MonthInYear",
    "Inflow",
    "Outflow",
    "NetCashflow",
    "Growth",
    "Balance",
]
REQUIRED_COLUMNS = {"MonthIndex", "Year", "MonthInYear", "Balance"}


def _build_flow_state(flow: CashFlow) -> dict:
    start_m = flow.start_month
    if flow.type.is_recurring:
        end_m = flow.end_year * 12
    else:
        end_m = start_m
    return {
        "amount": flow.amount,
        "inflow": flow.type.is_inflow,
        "start_m": start_m,
        "end_m": end_m,
    }


def _run_months(
    starting_value: float,
    timeline_years: int,
    annual_return_percent: float,
    cash_flows: Sequence[CashFlow],
) -> Iterator[dict]:
    ensure_non_negative(starting_value, "starting_value")
    ensure_non_negative(annual_return_percent, "annual_return_percent")
    ensure_cash_flows(cash_flows)

    rate_m = annual_return_percent / 100 / 12
    states = [_build_flow_state(flow) for flow in cash_flows if flow.amount]
    balance = float(starting_value)

    for m in range(1, int(timeline_years) * 12 + 1):
        growth = balance * rate_m
        balance += growth

        inflow = sum(s["amount"] for s in states if s["inflow"] and s["start_m"] <= m <= s["end_m"])
        outflow = sum(s["amount"] for s in states if not s["inflow"] and s["start_m"] <= m <= s["end_m"])
        balance = max(0.0, balance + inflow - outflow)

        yield {
            "MonthIndex": m,
            "Year": (m - 1) // 12 + 1,
            "MonthInYear": (m - 1) % 12 + 1,
            "Inflow": inflow,
            "Outflow": outflow,
            "NetCashflow": inflow - outflow,
            "Growth": growth,
            "Balance": balance,
        }


def _yearly_series(
    starting_value: float,
    timeline_years: int,
    annual_return_percent: float,
    cash_flows: Sequence[CashFlow],
) -> ProjectionSeries:
    points = [ProjectionPoint(year=0, value=float(starting_value))]
    for record in _run_months(starting_value, timeline_years, annual_return_percent, cash_flows):
        if record["MonthInYear"] == 12:
            points.append(ProjectionPoint(year=record["Year"], value=record["Balance"]))
    return ProjectionSeries(points=tuple(points))


def project(
    starting_value: float,
    timeline_years: int,
    annual_return_percent: float,
    cash_flows: Sequence[CashFlow] = (),
) -> ProjectionSeries | None:
    """Yearly balances from year 0 to ``timeline_years`` inclusive.

    Returns ``None`` when there is no timeline or no positive rate to
    compound at.
    """
    if timeline_years <= 0 or annual_return_percent <= 0:
        return None
    return _yearly_series(starting_value, timeline_years, annual_return_percent, cash_flows)


def future_value(
    starting_value: float,
    timeline_years: int,
    annual_return_percent: float,
    cash_flows: Sequence[CashFlow] = (),
) -> float:
    """Balance at the end of ``timeline_years``; accepts a zero rate."""
    balance = float(starting_value)
    for record in _run_months(starting_value, timeline_years, annual_return_percent, cash_flows):
        balance = record["Balance"]
    return balance


def natural_growth(starting_value: float, timeline_years: int, annual_return_percent: float) -> ProjectionSeries | None:
    return project(starting_value, timeline_years, annual_return_percent, ())


def simulate_monthly(
    starting_value: float,
    timeline_years: int,
    annual_return_percent: float,
    cash_flows: Sequence[CashFlow] = (),
) -> pd.DataFrame:
    records = list(_run_months(starting_value, timeline_years, annual_return_percent, cash_flows))
    return pd.DataFrame(records, columns=MONTHLY_COLUMNS)


def aggregate_yearly(df: pd.DataFrame) -> pd.DataFrame:
    """Reduce a monthly trace to one row per year.

    Flow and growth columns are summed over the year; ``Balance`` is the
    end-of-year value.
    """
    if df.empty:
        return df
    missing = REQUIRED_COLUMNS.difference(df.columns)
    if missing:
        raise KeyError(f"Missing required columns: {', '.join(sorted(missing))}")
    df = df.sort_values("MonthIndex")
    summed = [col for col in ("Inflow", "Outflow", "NetCashflow", "Growth") if col in df.columns]
    agg = {col: "sum" for col in summed}
    agg["Balance"] = "last"
    return df.groupby("Year", as_index=False).agg(agg)


def _scenario(starting_value: float, series: ProjectionSeries, rate: float) -> ScenarioProjection:
    final = series.final_value
    growth = (final - starting_value) / starting_value * 100 if starting_value > 0 else 0.0
    return ScenarioProjection(expected_return=rate, final_value=final, growth=growth, series=series)


def project_scenarios(
    starting_value: float,
    timeline_years: int,
    expected_return: float,
    cash_flows: Sequence[CashFlow] = (),
    optimistic_bonus: float = config.OPTIMISTIC_BONUS,
    pessimistic_penalty: float = config.PESSIMISTIC_PENALTY,
) -> ScenarioProjections | None:
    """Base, optimistic and pessimistic projections around ``expected_return``."""
    if timeline_years <= 0 or expected_return <= 0:
        return None
    rates = {
        "optimistic": expected_return + optimistic_bonus,
        "base_case": expected_return,
        "pessimistic": max(0.0, expected_return - pessimistic_penalty),
    }
    scenarios = {
        name: _scenario(starting_value, _yearly_series(starting_value, timeline_years, rate, cash_flows), rate)
        for name, rate in rates.items()
    }
    return ScenarioProjections(starting_value=starting_value, timeline=timeline_years, **scenarios)


def required_contribution_flow(requirements: ContributionResult | None, desired_timeline: int) -> CashFlow | None:
    """Synthetic SIP covering the shortfall, or ``None`` if nothing is needed."""
    if requirements is None or requirements.is_achievable_with_cash_flows:
        return None
    if desired_timeline <= 0 or requirements.required_monthly_sip <= 0:
        return None
    return CashFlow(
        id=REQUIRED_SIP_ID,
        type=CashFlowType.SIP,
        amount=requirements.required_monthly_sip,
        start_year=1,
        end_year=desired_timeline,
    )


def with_required_contribution(
    cash_flows: Sequence[CashFlow],
    requirements: ContributionResult | None,
    desired_timeline: int,
) -> List[CashFlow]:
    """New list of flows including the required SIP; the input is untouched."""
    flows = list(cash_flows)
    extra = required_contribution_flow(requirements, desired_timeline)
    if extra is not None:
        flows.append(extra)
    return flows


def project_with_required_contribution(
    starting_value: float,
    timeline_years: int,
    annual_return_percent: float,
    cash_flows: Sequence[CashFlow],
    requirements: ContributionResult | None,
) -> ProjectionSeries | None:
    """Trajectory for the "what it would take" scenario."""
    flows = with_required_contribution(cash_flows, requirements, timeline_years)
    logger.debug("Projecting %d flows (%d existing)", len(flows), len(cash_flows))
    return project(starting_value, timeline_years, annual_return_percent, flows)
