"""
Projection engine — folds the configuration over the year range into yearly records.

Each year is computed by project_year() from the configuration, the year
offset, and the running ProjectionState (cumulative totals and the fund
balance). project_year() returns the record plus the next state; nothing is
mutated. Monthly figures stay at full precision; annual and cumulative
figures are whole currency units so the running sums are exact.

The stabilisation discount is granted when the prior year-end fund balance
covers one annual amount. The adults then share what the fund actually pays
out, so premium relief never exceeds the withdrawal.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import List, Optional, Sequence, Tuple

import pandas as pd

from core.config import ProjectionConfig
from core.schema import RECORD_COLUMNS
from core.utils import round_currency

from .events import LifeEvent, annotate, build_event_schedule
from .fund import discount_available, step_fund
from .premiums import (
    adult_base_premium,
    billed_adult_premium,
    dependent_premium,
    in_loading_band,
    in_stabilization_band,
    monthly_deductible,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectionState:
    """Values carried from one year to the next."""
    cumulative_private: int = 0
    cumulative_public: int = 0
    cumulative_fund_contributions: int = 0
    fund_balance: float = 0.0


@dataclass(frozen=True)
class YearRecord:
    year: int
    age: int

    adult_1_covered: bool
    adult_2_covered: bool
    dependent_1_covered: bool
    dependent_2_covered: bool
    covered_members: int

    base_premium: float
    adult_1_premium: float
    adult_2_premium: float
    dependent_1_premium: float
    dependent_2_premium: float
    monthly_deductible: float
    monthly_surcharge: float
    discount_applied: bool

    monthly_private: float
    annual_private: int
    monthly_public: float
    annual_public: int
    cumulative_private: int
    cumulative_public: int
    difference: int  # cumulative GKV − cumulative PKV

    fund_contribution: float
    fund_withdrawal: float
    fund_interest: float
    fund_balance: float
    cumulative_fund_contributions: int

    comment: str = ""


def project_year(
    config: ProjectionConfig,
    state: ProjectionState,
    offset: int,
    events: Optional[Sequence[LifeEvent]] = None,
) -> Tuple[YearRecord, ProjectionState]:
    """Compute the record for year `offset` and the state carried into the next year."""
    cfg = config
    if events is None:
        events = build_event_schedule(cfg)

    year = cfg.start_year + offset
    age = cfg.current_age + offset

    # Coverage
    adult_1_covered = age <= cfg.adult_1_life_expectancy
    adult_2_covered = age <= cfg.adult_2_life_expectancy
    dep_1, dep_2 = cfg.dependents
    dependent_1_covered = year < dep_1.leave_year(cfg.start_year)
    dependent_2_covered = year < dep_2.leave_year(cfg.start_year)
    flags = (adult_1_covered, adult_2_covered, dependent_1_covered, dependent_2_covered)
    covered_members = sum(flags)
    covered_adults = int(adult_1_covered) + int(adult_2_covered)

    # Adults
    base = adult_base_premium(cfg, age)
    discount = 0.0
    if in_stabilization_band(cfg, age) and discount_available(
        state.fund_balance, cfg.stabilization_annual_amount
    ):
        discount = cfg.monthly_stabilization_discount
    discount_applied = discount > 0 and covered_adults > 0

    # Fund
    monthly_surcharge = 0.0
    if in_loading_band(cfg, age):
        monthly_surcharge = base * cfg.fund_loading * covered_adults
    requested = min(discount, base) * covered_adults * 12 if discount_applied else 0.0
    fund = step_fund(
        opening_balance=state.fund_balance,
        contribution=monthly_surcharge * 12,
        requested_withdrawal=requested,
        interest_rate=cfg.fund_interest_rate,
    )
    if fund.withdrawal < requested:
        # the covered adults share whatever the fund could pay
        discount = fund.withdrawal / 12.0 / covered_adults

    adult_1 = billed_adult_premium(cfg, base, age, covered=adult_1_covered, discount=discount)
    adult_2 = billed_adult_premium(cfg, base, age, covered=adult_2_covered, discount=discount)

    # Dependents
    child_1 = dependent_premium(dep_1, offset, covered=dependent_1_covered)
    child_2 = dependent_premium(dep_2, offset, covered=dependent_2_covered)

    # GKV
    monthly_public = cfg.public_policy.monthly_cost(offset, age, adult_1_covered=adult_1_covered)

    deductible = monthly_deductible(covered_members, cfg.deductible_per_person)
    monthly_private = adult_1 + adult_2 + child_1 + child_2 + deductible

    annual_private = round_currency(monthly_private * 12)
    annual_public = round_currency(monthly_public * 12)

    next_state = ProjectionState(
        cumulative_private=state.cumulative_private + annual_private,
        cumulative_public=state.cumulative_public + annual_public,
        cumulative_fund_contributions=(
            state.cumulative_fund_contributions + round_currency(fund.contribution)
        ),
        fund_balance=fund.closing_balance,
    )

    record = YearRecord(
        year=year,
        age=age,
        adult_1_covered=adult_1_covered,
        adult_2_covered=adult_2_covered,
        dependent_1_covered=dependent_1_covered,
        dependent_2_covered=dependent_2_covered,
        covered_members=covered_members,
        base_premium=base,
        adult_1_premium=adult_1,
        adult_2_premium=adult_2,
        dependent_1_premium=child_1,
        dependent_2_premium=child_2,
        monthly_deductible=deductible,
        monthly_surcharge=monthly_surcharge,
        discount_applied=discount_applied,
        monthly_private=monthly_private,
        annual_private=annual_private,
        monthly_public=monthly_public,
        annual_public=annual_public,
        cumulative_private=next_state.cumulative_private,
        cumulative_public=next_state.cumulative_public,
        difference=next_state.cumulative_public - next_state.cumulative_private,
        fund_contribution=fund.contribution,
        fund_withdrawal=fund.withdrawal,
        fund_interest=fund.interest,
        fund_balance=fund.closing_balance,
        cumulative_fund_contributions=next_state.cumulative_fund_contributions,
        comment=annotate(year, events),
    )
    return record, next_state


def run_projection(config: ProjectionConfig) -> List[YearRecord]:
    """
    Run the full projection from the current age to adult 2's life expectancy.

    Returns
    -------
    list of YearRecord, one per year, total_years + 1 long.
    Deterministic: the same configuration always yields the same list.
    """
    cfg = config
    events = build_event_schedule(cfg)
    logger.info(
        "Projecting %d-%d (age %d-%d), public policy=%s",
        cfg.start_year, cfg.end_year, cfg.current_age, cfg.adult_2_life_expectancy,
        cfg.public_policy.name,
    )

    state = ProjectionState()
    records: List[YearRecord] = []
    for offset in range(cfg.total_years + 1):
        record, state = project_year(cfg, state, offset, events)
        if record.comment:
            logger.debug("%d (age %d): %s", record.year, record.age, record.comment)
        records.append(record)

    if records:
        logger.info(
            "Lifetime totals: PKV=%s GKV=%s fund=%.2f",
            records[-1].cumulative_private, records[-1].cumulative_public, records[-1].fund_balance,
        )
    return records


def records_to_frame(records: Sequence[YearRecord]) -> pd.DataFrame:
    """Flat DataFrame (one row per year) for chart and table consumers."""
    return pd.DataFrame([asdict(r) for r in records], columns=list(RECORD_COLUMNS))
