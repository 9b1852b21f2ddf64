"""
Lifetime summary — the handful of numbers a household looks at first.

  Q1: "What do we pay today?"          → initial monthly PKV vs GKV
  Q2: "What do we pay in total?"       → cumulative PKV vs GKV at the horizon
  Q3: "When does PKV get dearer?"      → break-even year of the cumulative curves
  Q4: "Does the fund carry us?"        → peak fund balance, year the discount lapses
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import pandas as pd

from core.utils import round_currency
from engine.projection import YearRecord


@dataclass
class LifetimeSummary:
    """Headline figures for one projection."""
    first_year: int
    last_year: int

    initial_monthly_private: int
    initial_monthly_public: int
    total_private: int
    total_public: int
    difference: int  # GKV − PKV, positive means PKV is cheaper over the lifetime

    break_even_year: Optional[int]  # first year cumulative PKV exceeds cumulative GKV
    peak_fund_balance: float
    peak_fund_year: Optional[int]
    fund_depleted_year: Optional[int]  # first year the discount lapses after it started
    total_fund_contributions: int

    flags: List[str] = field(default_factory=list)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a display-friendly table."""
        rows = [
            {"Metric": "Horizon", "Value": f"{self.first_year}–{self.last_year}", "Unit": ""},
            {"Metric": "Initial Monthly PKV", "Value": f"{self.initial_monthly_private:,}", "Unit": "€"},
            {"Metric": "Initial Monthly GKV", "Value": f"{self.initial_monthly_public:,}", "Unit": "€"},
            {"Metric": "Total PKV", "Value": f"{self.total_private / 1000:,.0f}", "Unit": "k€"},
            {"Metric": "Total GKV", "Value": f"{self.total_public / 1000:,.0f}", "Unit": "k€"},
            {"Metric": "Difference (GKV - PKV)", "Value": f"{self.difference / 1000:,.0f}", "Unit": "k€"},
            {
                "Metric": "Break-even Year",
                "Value": str(self.break_even_year) if self.break_even_year is not None else "never",
                "Unit": "",
            },
            {"Metric": "Total GBZ Paid", "Value": f"{self.total_fund_contributions:,}", "Unit": "€"},
            {"Metric": "Peak Fund Balance", "Value": f"{round_currency(self.peak_fund_balance):,}", "Unit": "€"},
            {
                "Metric": "Peak Fund Year",
                "Value": str(self.peak_fund_year) if self.peak_fund_year is not None else "n/a",
                "Unit": "",
            },
        ]
        if self.flags:
            rows.append({"Metric": "FLAGS", "Value": " | ".join(self.flags), "Unit": ""})
        return pd.DataFrame(rows)


def compute_lifetime_summary(records: Sequence[YearRecord]) -> LifetimeSummary:
    """
    Summarise a record sequence produced by engine.run_projection().

    Raises ValueError on an empty sequence; there is nothing to summarise.
    """
    if not records:
        raise ValueError("Cannot summarise an empty projection.")

    first, last = records[0], records[-1]

    break_even = next(
        (r.year for r in records if r.cumulative_private > r.cumulative_public), None
    )

    peak = max(records, key=lambda r: r.fund_balance)
    peak_year = peak.year if peak.fund_balance > 0 else None

    depleted = None
    first_discount = next((r.year for r in records if r.discount_applied), None)
    if first_discount is not None:
        depleted = next(
            (
                r.year for r in records
                if r.year > first_discount and not r.discount_applied
                and (r.adult_1_covered or r.adult_2_covered)
            ),
            None,
        )

    flags: List[str] = []
    if last.difference < 0:
        flags.append("PKV costs more than GKV over the full horizon")
    if depleted is not None:
        flags.append(f"Surcharge fund exhausted in {depleted}")
    if first.annual_private > first.annual_public:
        flags.append("PKV is already dearer in the first year")

    return LifetimeSummary(
        first_year=first.year,
        last_year=last.year,
        initial_monthly_private=round_currency(first.monthly_private),
        initial_monthly_public=round_currency(first.monthly_public),
        total_private=last.cumulative_private,
        total_public=last.cumulative_public,
        difference=last.difference,
        break_even_year=break_even,
        peak_fund_balance=float(peak.fund_balance),
        peak_fund_year=peak_year,
        fund_depleted_year=depleted,
        total_fund_contributions=last.cumulative_fund_contributions,
        flags=flags,
    )
