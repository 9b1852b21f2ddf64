"""
Surcharge fund (GBZ) — one year of contributions, withdrawal, and interest.

Order within a year:
  1. contributions are added (only while age <= cutoff)
  2. the stabilisation withdrawal granted this year is taken out, floored at 0
  3. interest accrues on what is left

The closing balance is the next year's opening balance.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FundYear:
    """Result of rolling the fund forward by one year."""
    opening_balance: float
    contribution: float
    withdrawal: float  # amount actually taken (never more than available)
    interest: float
    closing_balance: float


def step_fund(
    *,
    opening_balance: float,
    contribution: float,
    requested_withdrawal: float,
    interest_rate: float,
) -> FundYear:
    """
    Roll the fund balance forward one year.

    Parameters
    ----------
    opening_balance : float
        Prior year-end balance (0 for the first year)
    contribution : float
        Annual loading paid into the fund this year
    requested_withdrawal : float
        Annual discount granted this year (monthly discount × 12 × adults)
    interest_rate : float
        Annual interest rate credited on the post-withdrawal balance
    """
    available = max(float(opening_balance), 0.0) + max(float(contribution), 0.0)
    withdrawal = min(max(float(requested_withdrawal), 0.0), available)
    after = max(available - withdrawal, 0.0)
    interest = after * float(interest_rate)
    closing = max(after + interest, 0.0)
    return FundYear(
        opening_balance=float(opening_balance),
        contribution=float(contribution),
        withdrawal=withdrawal,
        interest=interest,
        closing_balance=closing,
    )


def discount_available(opening_balance: float, threshold: float) -> bool:
    """Stabilisation discount is granted only if the prior year-end balance covers the threshold."""
    return float(opening_balance) >= float(threshold)
