from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List

import pandas as pd


@dataclass
class ColumnDefinition:
    """Editor column descriptor for allocation and cash-flow tables."""

    field: str
    label: str
    kind: str = "text"  # text | number | select
    default: Any = ""
    options: List[str] | None = None
    min_value: float | None = None
    max_value: float | None = None
    step: float | None = None
    format: str | None = None
    help: str | None = None


@dataclass
class TableModel:
    """Table schema plus the rows a fresh editor starts with."""

    name: str
    columns: List[ColumnDefinition]
    default_rows: List[dict[str, Any]] = field(default_factory=list)

    def field_names(self) -> List[str]:
        return [col.field for col in self.columns]

    def create_default_df(self) -> pd.DataFrame:
        if self.default_rows:
            return pd.DataFrame(self.default_rows, columns=self.field_names())
        return pd.DataFrame(columns=self.field_names())


def cell_text(value: Any) -> str:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return ""
    return str(value).strip()


def cell_number(value: Any, default: float | None = 0.0) -> float | None:
    if value is None or (isinstance(value, str) and not value.strip()):
        return default
    number = float(value)
    if pd.isna(number):
        return default
    return number
