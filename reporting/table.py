"""
Display tables built from the record sequence.

Rounding happens here and only here: records keep monthly figures at full
precision, the table shows whole currency units.
"""

from __future__ import annotations

from typing import Iterable, Sequence

import pandas as pd

from core.schema import CURRENCY_COLUMNS, TABLE_LABELS
from core.utils import excel_round
from engine.events import LifeEvent
from engine.projection import YearRecord, records_to_frame


def build_display_table(records: Sequence[YearRecord]) -> pd.DataFrame:
    """
    One row per year with the columns the UI table shows, in display order,
    currency rounded to whole units and labelled for humans.
    """
    df = records_to_frame(records)
    cols = list(TABLE_LABELS)
    out = df[cols].copy()
    for c in cols:
        if c in CURRENCY_COLUMNS:
            out[c] = excel_round(out[c].to_numpy(dtype=float), 0).astype(int)
    return out.rename(columns=TABLE_LABELS).reset_index(drop=True)


def format_currency_table(table: pd.DataFrame, *, symbol: str = "€") -> pd.DataFrame:
    """String-format every numeric money column as '1,234€' (Year/Age/Covered untouched)."""
    plain = {"Year", "Age", "Covered", "Comments"}
    out = table.copy()
    for c in out.columns:
        if c in plain:
            continue
        out[c] = out[c].map(lambda v: f"{int(v):,}{symbol}")
    return out


def event_markers(events: Iterable[LifeEvent]) -> pd.DataFrame:
    """Events as a frame for chart reference lines (one rule per event)."""
    rows = [{"year": ev.year, "label": ev.label, "kind": ev.kind} for ev in events]
    return pd.DataFrame(rows, columns=["year", "label", "kind"])


def chart_frame(records: Sequence[YearRecord], *, include_fund: bool = False) -> pd.DataFrame:
    """Long-format annual cost series for the line chart."""
    df = records_to_frame(records)
    series = {"annual_private": "Annual PKV Cost", "annual_public": "Annual GKV Cost"}
    if include_fund:
        series["fund_balance"] = "GBZ Fund Balance"
    long = df[["year", "age", *series]].melt(
        id_vars=["year", "age"], value_vars=list(series), var_name="series", value_name="value"
    )
    long["series"] = long["series"].map(series)
    return long
