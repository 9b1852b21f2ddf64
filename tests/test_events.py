import pytest

from core.config import Dependent, ProjectionConfig
from engine.events import LifeEvent, annotate, build_event_schedule, events_in_horizon
from engine.projection import run_projection

pytestmark = pytest.mark.engine


def test_default_schedule_years(default_config):
    events = build_event_schedule(default_config)
    years = {ev.label: ev.year for ev in events}
    assert years["Child 1 leaves"] == 2030
    assert years["Child 2 leaves"] == 2033
    assert years["GBZ ends (age 61)"] == 2043
    assert years["GBZ stabilisation starts (age 65)"] == 2048
    assert years["Adult 1 ends (age 81)"] == 2064
    assert years["Adult 2 ends (age 88)"] == 2071


def test_records_carry_comments(default_records):
    comments = {r.year: r.comment for r in default_records if r.comment}
    assert comments == {
        2030: "Child 1 leaves",
        2033: "Child 2 leaves",
        2043: "GBZ ends (age 61)",
        2048: "GBZ stabilisation starts (age 65)",
        2064: "Adult 1 ends (age 81)",
        2071: "Adult 2 ends (age 88)",
    }


def test_last_matching_event_wins():
    events = [
        LifeEvent(2030, "first", "dependent"),
        LifeEvent(2031, "other", "dependent"),
        LifeEvent(2030, "second", "adult"),
    ]
    assert annotate(2030, events) == "second"
    assert annotate(2031, events) == "other"
    assert annotate(2032, events) == ""


def test_collision_between_child_and_fund_cutoff():
    # child 1 leaves in the same year the cutoff age is reached
    cfg = ProjectionConfig(
        current_age=41,
        fund_cutoff_age=47,
        dependents=(Dependent(current_age=19), Dependent(current_age=16)),
    )
    by_year = {r.year: r for r in run_projection(cfg)}
    assert by_year[2030].comment == "GBZ ends (age 48)"


def test_stabilisation_event_follows_loading_band():
    cfg = ProjectionConfig(stabilize_age=55, fund_cutoff_age=60)
    years = {ev.label: ev.year for ev in build_event_schedule(cfg)}
    assert years["GBZ stabilisation starts (age 61)"] == cfg.year_at_age(61)
    assert "GBZ stabilisation starts (age 55)" not in years

    by_age = {r.age: r for r in run_projection(cfg)}
    assert by_age[55].comment == ""
    assert by_age[55].discount_applied is False
    assert by_age[61].comment == "GBZ stabilisation starts (age 61)"
    assert by_age[61].discount_applied is True


def test_no_stabilisation_event_without_discount():
    cfg = ProjectionConfig(stabilization_annual_amount=0.0)
    kinds = {ev.kind for ev in build_event_schedule(cfg)}
    assert "stabilization" not in kinds
    assert all(r.comment != "GBZ stabilisation starts (age 65)" for r in run_projection(cfg))


def test_events_in_horizon_filters(default_config):
    cfg = default_config.replace(dependents=(Dependent(current_age=30), Dependent(current_age=16)))
    events = events_in_horizon(cfg, build_event_schedule(cfg))
    assert all(cfg.start_year <= ev.year <= cfg.end_year for ev in events)
    assert "Child 1 leaves" not in {ev.label for ev in events}
