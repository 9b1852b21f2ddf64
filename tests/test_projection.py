import pytest

from core.config import Dependent, ProjectionConfig
from core.utils import round_currency
from engine.projection import (
    ProjectionState,
    project_year,
    records_to_frame,
    run_projection,
)
from core.schema import RECORD_COLUMNS

pytestmark = pytest.mark.engine


def test_sequence_length_matches_horizon(default_config, default_records):
    expected = default_config.adult_2_life_expectancy - default_config.current_age + 1
    assert len(default_records) == expected == 48


@pytest.mark.parametrize("age,le2", [(41, 41), (50, 95), (30, 60)])
def test_sequence_length_other_horizons(age, le2):
    cfg = ProjectionConfig(current_age=age, adult_2_life_expectancy=le2, adult_1_life_expectancy=le2)
    assert len(run_projection(cfg)) == le2 - age + 1


def test_year_and_age_step_by_one(default_config, default_records):
    assert default_records[0].year == default_config.start_year
    assert default_records[0].age == default_config.current_age
    for prev, cur in zip(default_records, default_records[1:]):
        assert cur.year == prev.year + 1
        assert cur.age == prev.age + 1


def test_cumulative_is_running_sum(default_records):
    private = public = 0
    for r in default_records:
        private += r.annual_private
        public += r.annual_public
        assert r.cumulative_private == private
        assert r.cumulative_public == public
        assert r.difference == public - private


def test_cumulative_non_decreasing(default_records):
    for prev, cur in zip(default_records, default_records[1:]):
        assert cur.cumulative_private >= prev.cumulative_private
        assert cur.cumulative_public >= prev.cumulative_public


def test_annual_is_rounded_monthly_times_twelve(default_records):
    for r in default_records:
        assert r.annual_private == round_currency(r.monthly_private * 12)
        assert r.annual_public == round_currency(r.monthly_public * 12)


def test_dependent_leaves_in_leave_year(default_records):
    by_year = {r.year: r for r in default_records}
    # 19 years old in 2024 -> leaves 2024 + (25 - 19) = 2030
    assert by_year[2029].dependent_1_covered is True
    assert by_year[2030].dependent_1_covered is False
    assert by_year[2030].dependent_1_premium == 0.0
    # 16 years old -> leaves 2033
    assert by_year[2032].dependent_2_covered is True
    assert by_year[2033].dependent_2_covered is False


def test_dependent_flag_never_returns(default_records):
    seen_gone = False
    for r in default_records:
        if not r.dependent_1_covered:
            seen_gone = True
        if seen_gone:
            assert not r.dependent_1_covered


def test_adult_coverage_by_life_expectancy(default_records):
    by_age = {r.age: r for r in default_records}
    assert by_age[81].adult_1_covered is True
    assert by_age[82].adult_1_covered is False
    assert by_age[82].adult_1_premium == 0.0
    assert by_age[88].adult_2_covered is True
    assert all(r.adult_2_covered for r in default_records)


def test_covered_members_count(default_records):
    for r in default_records:
        flags = [r.adult_1_covered, r.adult_2_covered, r.dependent_1_covered, r.dependent_2_covered]
        assert r.covered_members == sum(flags)
        assert r.monthly_deductible == pytest.approx(r.covered_members * 800 / 12)


def test_first_year_adult_premium_includes_loading(default_records):
    first = default_records[0]
    assert first.adult_1_premium == pytest.approx(680.36 * 1.10)
    assert round_currency(first.adult_1_premium) == 748
    assert first.adult_2_premium == first.adult_1_premium


def test_base_premium_at_cutoff_age(default_records):
    by_age = {r.age: r for r in default_records}
    assert by_age[60].base_premium == pytest.approx(680.36 * 1.03 ** 19)
    assert round_currency(by_age[60].base_premium) == 1193
    # still in the loading band at 60
    assert by_age[60].adult_1_premium == pytest.approx(680.36 * 1.03 ** 19 * 1.10)


def test_growth_switches_after_cutoff(default_records):
    by_age = {r.age: r for r in default_records}
    expected = 680.36 * 1.03 ** 19 * 1.02
    assert by_age[61].base_premium == pytest.approx(expected)
    # middle band: no loading, no discount
    assert by_age[61].adult_1_premium == pytest.approx(expected)
    assert by_age[61].monthly_surcharge == 0.0


def test_single_growth_rate_when_no_second_rate():
    cfg = ProjectionConfig(adult_growth_rate_after_cutoff=None)
    by_age = {r.age: r for r in run_projection(cfg)}
    assert by_age[61].base_premium == pytest.approx(680.36 * 1.03 ** 20)


def test_one_time_surcharge_applied_once():
    cfg = ProjectionConfig(one_time_surcharge_pct=5.0)
    records = run_projection(cfg)
    assert records[0].base_premium == pytest.approx(680.36 * 1.05)
    assert records[1].base_premium == pytest.approx(680.36 * 1.05 * 1.03)


def test_dependent_premium_compounds_on_offset(default_records):
    assert default_records[0].dependent_1_premium == pytest.approx(223.75)
    assert default_records[3].dependent_1_premium == pytest.approx(223.75 * 1.03 ** 3)


def test_monthly_private_is_sum_of_components(default_records):
    for r in default_records:
        total = (
            r.adult_1_premium + r.adult_2_premium
            + r.dependent_1_premium + r.dependent_2_premium
            + r.monthly_deductible
        )
        assert r.monthly_private == pytest.approx(total)


def test_nothing_covered_means_zero_private_cost(default_config):
    # One year past adult 2's life expectancy: nobody is covered any more.
    offset = default_config.total_years + 1
    record, _ = project_year(default_config, ProjectionState(), offset)
    assert record.covered_members == 0
    assert record.adult_1_premium == 0.0
    assert record.adult_2_premium == 0.0
    assert record.dependent_1_premium == 0.0
    assert record.dependent_2_premium == 0.0
    assert record.monthly_deductible == 0.0
    assert record.monthly_private == 0.0
    assert record.annual_private == 0
    assert record.monthly_public > 0


def test_children_already_gone(childless_config):
    records = run_projection(childless_config)
    assert not any(r.dependent_1_covered or r.dependent_2_covered for r in records)
    assert records[0].covered_members == 2


def test_projection_is_deterministic(default_config):
    assert run_projection(default_config) == run_projection(default_config)


def test_config_not_mutated(default_config):
    before = ProjectionConfig()
    run_projection(default_config)
    assert default_config == before


def test_empty_horizon_gives_no_records():
    cfg = ProjectionConfig(current_age=90)
    assert run_projection(cfg) == []


def test_records_to_frame_columns(default_records):
    df = records_to_frame(default_records)
    assert list(df.columns) == list(RECORD_COLUMNS)
    assert len(df) == len(default_records)
    assert df["year"].is_monotonic_increasing


def test_negative_growth_floors_nothing_below_zero():
    cfg = ProjectionConfig(
        adult_growth_rate=-1.0,
        adult_growth_rate_after_cutoff=None,
        dependents=(Dependent(current_age=19, growth_rate=-1.0), Dependent(current_age=16, growth_rate=-1.0)),
    )
    records = run_projection(cfg)
    assert records[1].base_premium == 0.0
    assert records[1].dependent_1_premium == 0.0
    assert all(r.monthly_private >= 0 for r in records)
