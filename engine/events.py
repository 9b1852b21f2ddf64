"""
Life-event schedule — the years where something changes for the household.

The schedule is precomputed once per run from the configuration. The chart
draws a marker for every event; the table shows a single comment per year.
When several events fall into the same year the later entry in schedule
order overwrites the earlier ones (dependents, fund cutoff, stabilisation,
adult 1, adult 2).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List

from core.config import ProjectionConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LifeEvent:
    """One dated event on the projection horizon."""
    year: int
    label: str
    kind: str  # "dependent" | "fund_cutoff" | "stabilization" | "adult"


def build_event_schedule(config: ProjectionConfig) -> List[LifeEvent]:
    """
    Return every event in annotation-precedence order (lowest first).

    Events are returned even when they fall outside the projection horizon;
    consumers filter by year.
    """
    cfg = config
    events: List[LifeEvent] = []

    for n, dep in enumerate(cfg.dependents, start=1):
        events.append(LifeEvent(dep.leave_year(cfg.start_year), f"Child {n} leaves", "dependent"))

    # Last year with fund contributions: the year the cutoff age is reached.
    events.append(LifeEvent(
        cfg.year_at_age(cfg.fund_cutoff_age),
        f"GBZ ends (age {cfg.fund_cutoff_age + 1})",
        "fund_cutoff",
    ))
    # Marks where the band opens, whether or not the fund can pay the
    # discount. No marker when there is no discount at all.
    if cfg.stabilization_annual_amount > 0:
        start_age = cfg.stabilization_start_age
        events.append(LifeEvent(
            cfg.year_at_age(start_age),
            f"GBZ stabilisation starts (age {start_age})",
            "stabilization",
        ))
    events.append(LifeEvent(
        cfg.year_at_age(cfg.adult_1_life_expectancy),
        f"Adult 1 ends (age {cfg.adult_1_life_expectancy})",
        "adult",
    ))
    events.append(LifeEvent(
        cfg.year_at_age(cfg.adult_2_life_expectancy),
        f"Adult 2 ends (age {cfg.adult_2_life_expectancy})",
        "adult",
    ))
    return events


def annotate(year: int, events: Iterable[LifeEvent]) -> str:
    """Comment for `year`: the last matching event's label, or ''."""
    comment = ""
    matched = 0
    for ev in events:
        if ev.year == year:
            comment = ev.label
            matched += 1
    if matched > 1:
        logger.debug("%d events fall in %d; keeping %r", matched, year, comment)
    return comment


def events_in_horizon(config: ProjectionConfig, events: Iterable[LifeEvent]) -> List[LifeEvent]:
    return [ev for ev in events if config.start_year <= ev.year <= config.end_year]
