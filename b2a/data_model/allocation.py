from __future__ import annotations

from dataclasses import dataclass
from typing import List

import pandas as pd

from .. import config
from .base import ColumnDefinition, TableModel, cell_number, cell_text


@dataclass
class AllocationEntry:
    asset_class_name: str
    allocation_percentage: float  # 0-100
    return_rate: float  # expected annual %
    color: str = ""
    asset_class_id: int | None = None
    id: str = ""

    def weight(self) -> float:
        return self.allocation_percentage / 100.0


def allocations_for_profile(risk_profile: str) -> List[AllocationEntry]:
    """Default five-asset mix for a risk profile."""
    try:
        template = config.ALLOCATION_TEMPLATES[getattr(risk_profile, "value", risk_profile)]
    except KeyError:
        raise ValueError(f"Unknown risk profile: {risk_profile!r}") from None
    return [
        AllocationEntry(
            asset_class_name=asset["name"],
            allocation_percentage=float(template["percentages"][i]),
            return_rate=float(template["returns"][i]),
            color=asset["color"],
            asset_class_id=asset["id"],
            id=f"alloc-{asset['id']}",
        )
        for i, asset in enumerate(config.ASSET_CLASSES)
    ]


def _allocation_rows(risk_profile: str) -> List[dict[str, float | str]]:
    return [
        {
            "Asset Class": entry.asset_class_name,
            "Allocation (%)": entry.allocation_percentage,
            "Return (%)": entry.return_rate,
            "Color": entry.color,
        }
        for entry in allocations_for_profile(risk_profile)
    ]


class AllocationTableModel(TableModel):
    def __init__(self, risk_profile: str = "moderate") -> None:
        columns = [
            ColumnDefinition("Asset Class", "Asset Class"),
            ColumnDefinition(
                "Allocation (%)",
                "Allocation (%)",
                kind="number",
                default=0.0,
                min_value=0.0,
                max_value=100.0,
                step=1.0,
                format="%.1f",
            ),
            ColumnDefinition(
                "Return (%)",
                "Expected Return (% p.a.)",
                kind="number",
                default=0.0,
                min_value=0.0,
                step=0.5,
                format="%.1f",
            ),
            ColumnDefinition("Color", "Color", default=""),
        ]
        super().__init__("allocation", columns, _allocation_rows(risk_profile))


def dataframe_to_allocations(df: pd.DataFrame) -> List[AllocationEntry]:
    rows: List[AllocationEntry] = []
    for idx, row in enumerate(df.to_dict("records")):
        name = cell_text(row.get("Asset Class"))
        if not name:
            continue
        rows.append(
            AllocationEntry(
                asset_class_name=name,
                allocation_percentage=cell_number(row.get("Allocation (%)")),
                return_rate=cell_number(row.get("Return (%)")),
                color=cell_text(row.get("Color")),
                id=f"alloc-row-{idx}",
            )
        )
    return rows
