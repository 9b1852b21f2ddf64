import pandas as pd
import pytest

from core.config import ProjectionConfig
from engine.events import build_event_schedule
from engine.projection import run_projection
from reporting.summary import compute_lifetime_summary
from reporting.table import (
    build_display_table,
    chart_frame,
    event_markers,
    format_currency_table,
)

pytestmark = pytest.mark.reporting


def test_summary_totals_match_last_record(default_records):
    s = compute_lifetime_summary(default_records)
    last = default_records[-1]
    assert s.first_year == 2024
    assert s.last_year == 2071
    assert s.total_private == last.cumulative_private
    assert s.total_public == last.cumulative_public
    assert s.difference == last.cumulative_public - last.cumulative_private
    assert s.initial_monthly_public == 2200


def test_break_even_year_is_first_crossing(default_records):
    s = compute_lifetime_summary(default_records)
    expected = next(
        (r.year for r in default_records if r.cumulative_private > r.cumulative_public), None
    )
    assert s.break_even_year == expected


def test_peak_fund(default_records):
    s = compute_lifetime_summary(default_records)
    assert s.peak_fund_balance == pytest.approx(max(r.fund_balance for r in default_records))
    assert s.total_fund_contributions == default_records[-1].cumulative_fund_contributions
    peak = max(default_records, key=lambda r: r.fund_balance)
    assert s.peak_fund_year == peak.year
    # last year before the discount starts drawing on the fund
    assert s.peak_fund_year == 2047
    df = s.to_dataframe().set_index("Metric")
    assert df.loc["Peak Fund Year", "Value"] == "2047"


def test_no_peak_year_without_fund():
    s = compute_lifetime_summary(run_projection(ProjectionConfig(fund_loading=0.0)))
    assert s.peak_fund_balance == 0.0
    assert s.peak_fund_year is None
    df = s.to_dataframe().set_index("Metric")
    assert df.loc["Peak Fund Year", "Value"] == "n/a"


def test_fund_exhaustion_flagged():
    cfg = ProjectionConfig(stabilize_age=61, stabilization_annual_amount=20_000.0, fund_interest_rate=0.0)
    s = compute_lifetime_summary(run_projection(cfg))
    assert s.fund_depleted_year is not None
    assert any("exhausted" in f for f in s.flags)


def test_summary_empty_raises():
    with pytest.raises(ValueError):
        compute_lifetime_summary([])


def test_summary_to_dataframe(default_records):
    df = compute_lifetime_summary(default_records).to_dataframe()
    assert list(df.columns) == ["Metric", "Value", "Unit"]
    assert "Total PKV" in set(df["Metric"])


def test_display_table_rounds_currency(default_records):
    table = build_display_table(default_records)
    assert len(table) == len(default_records)
    assert table.loc[0, "Adult 1"] == 748
    assert table.loc[0, "Monthly GKV"] == 2200
    assert table.loc[0, "Covered"] == 4
    assert table["Year"].tolist() == [r.year for r in default_records]


def test_format_currency_table(default_records):
    formatted = format_currency_table(build_display_table(default_records))
    assert formatted.loc[0, "Adult 1"] == "748€"
    assert formatted.loc[0, "Year"] == 2024
    assert formatted.loc[6, "Comments"] == "Child 1 leaves"


def test_event_markers(default_config):
    markers = event_markers(build_event_schedule(default_config))
    assert list(markers.columns) == ["year", "label", "kind"]
    assert len(markers) == 6
    assert event_markers([]).empty


def test_chart_frame_long_format(default_records):
    long = chart_frame(default_records)
    assert set(long["series"]) == {"Annual PKV Cost", "Annual GKV Cost"}
    assert len(long) == 2 * len(default_records)

    with_fund = chart_frame(default_records, include_fund=True)
    assert "GBZ Fund Balance" in set(with_fund["series"])
    assert isinstance(with_fund, pd.DataFrame)
