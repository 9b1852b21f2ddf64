from __future__ import annotations

import numpy as np


def excel_round(x, decimals: int = 2):
    """Excel ROUND: half away from zero (vectorized)."""
    m = 10 ** decimals
    x = np.asarray(x, dtype=float)
    return np.sign(x) * (np.floor(np.abs(x) * m + 0.5) / m)


def round_currency(x: float) -> int:
    """Round a currency amount to whole units (half away from zero)."""
    return int(excel_round(x, 0))


def compound(value: float, rate: float, years: int) -> float:
    """value × (1 + rate)^years. Negative year counts are treated as zero."""
    return float(value) * (1.0 + float(rate)) ** max(int(years), 0)


def two_phase_compound(
    value: float,
    *,
    rate: float,
    years: int,
    switch_after: int,
    rate_after: float | None = None,
) -> float:
    """
    Compound at `rate` for the first `switch_after` years, then at `rate_after`.

    With rate_after=None this is plain compound(). switch_after is clamped to
    [0, years] so a switch point already in the past compounds entirely at
    the second rate.
    """
    if rate_after is None:
        return compound(value, rate, years)
    years = max(int(years), 0)
    first = min(max(int(switch_after), 0), years)
    return compound(compound(value, rate, first), rate_after, years - first)


def pct_to_fraction(pct: float) -> float:
    return float(pct) / 100.0
