from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List

import pandas as pd

from .base import ColumnDefinition, TableModel, cell_number, cell_text


class CashFlowType(str, Enum):
    SIP = "SIP"
    LUMPSUM = "Lumpsum"
    SWP = "SWP"
    WITHDRAWAL = "Withdrawal"

    @property
    def is_recurring(self) -> bool:
        return self in (CashFlowType.SIP, CashFlowType.SWP)

    @property
    def is_inflow(self) -> bool:
        return self in (CashFlowType.SIP, CashFlowType.LUMPSUM)


CASH_FLOW_TYPES = [t.value for t in CashFlowType]


@dataclass
class CashFlow:
    """A scheduled contribution or withdrawal.

    ``start_year`` is 1-based. ``end_year`` bounds recurring flows (SIP/SWP)
    and is ignored for one-time flows. ``amount`` is unsigned; the type
    decides the direction.
    """

    id: str
    type: CashFlowType
    amount: float
    start_year: int = 1
    end_year: int | None = None

    def __post_init__(self) -> None:
        self.type = CashFlowType(self.type)

    @property
    def start_month(self) -> int:
        return (self.start_year - 1) * 12 + 1


class CashFlowTableModel(TableModel):
    def __init__(self) -> None:
        columns = [
            ColumnDefinition(
                "Type",
                "Type",
                kind="select",
                default=CashFlowType.SIP.value,
                options=CASH_FLOW_TYPES,
            ),
            ColumnDefinition(
                "Amount",
                "Amount (monthly for SIP/SWP)",
                kind="number",
                default=10000.0,
                min_value=0.0,
                step=1000.0,
                format="%.2f",
            ),
            ColumnDefinition("Start Year", "Start Year", kind="number", default=1, min_value=1, step=1),
            ColumnDefinition(
                "End Year",
                "End Year (SIP/SWP only)",
                kind="number",
                default="",
                min_value=1,
                step=1,
                help="Ignored for Lumpsum and Withdrawal",
            ),
        ]
        super().__init__("cash_flows", columns)


def dataframe_to_cash_flows(df: pd.DataFrame) -> List[CashFlow]:
    rows: List[CashFlow] = []
    for idx, row in enumerate(df.to_dict("records")):
        raw_type = cell_text(row.get("Type"))
        if not raw_type:
            continue
        try:
            flow_type = CashFlowType(raw_type)
        except ValueError:
            raise ValueError(f"Unknown cash flow type {raw_type!r} in row {idx}") from None
        amount = cell_number(row.get("Amount"))
        if amount == 0.0:
            continue
        end_year = cell_number(row.get("End Year"), default=None)
        rows.append(
            CashFlow(
                id=cell_text(row.get("Id")) or f"flow-{idx}",
                type=flow_type,
                amount=amount,
                start_year=int(cell_number(row.get("Start Year"), default=1)),
                end_year=int(end_year) if end_year is not None and flow_type.is_recurring else None,
            )
        )
    return rows
