"""
PKV vs GKV — Lifetime Health Insurance Cost Dashboard
=====================================================

Sidebar: every projection parameter as a form field.
Main:    lifetime summary, annual cost chart with life-event markers, yearly table.

Any change to a field recomputes the whole projection; nothing is cached
between runs.

Run: streamlit run app/streamlit_app.py
"""

from __future__ import annotations

import sys
from pathlib import Path

import altair as alt
import pandas as pd
import streamlit as st

# ---------------------------------------------------------------------------
# Make project root importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.logging_config import setup_logging

from engine.events import build_event_schedule, events_in_horizon
from engine.projection import run_projection

from inputs.form import InputError, ProjectionInputs, parse_inputs
from inputs.validators import validate_config

from reporting.summary import compute_lifetime_summary
from reporting.table import (
    build_display_table,
    chart_frame,
    event_markers,
    format_currency_table,
)

setup_logging()

DEFAULTS = ProjectionInputs()

POLICY_LABELS = {
    "flat": "Flat growth",
    "halve_after_first_adult": "Halve after adult 1 coverage ends",
    "pension": "Pension-based after retirement",
}

EVENT_COLORS = {
    "dependent": "blue",
    "fund_cutoff": "purple",
    "stabilization": "orange",
    "adult": "red",
}


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------
def _fmt_eur(val):
    """Format whole euros with thousands separators."""
    return f"{val:,.0f}€"


def _fmt_keur(val):
    return f"{val / 1000:,.0f}k€"


# ---------------------------------------------------------------------------
# Chart helpers
# ---------------------------------------------------------------------------
def _plot_costs(long_df: pd.DataFrame, markers: pd.DataFrame, *, title: str, height: int = 420):
    if len(long_df) == 0:
        st.info("No data to plot.")
        return
    lines = (
        alt.Chart(long_df).mark_line()
        .encode(
            x=alt.X("year:Q", title="Year", axis=alt.Axis(format="d")),
            y=alt.Y("value:Q", title="€ per year", axis=alt.Axis(format=",.0f")),
            color=alt.Color("series:N", title="Series"),
            tooltip=[
                alt.Tooltip("year:Q", format="d"),
                "age:Q",
                "series:N",
                alt.Tooltip("value:Q", format=",.0f"),
            ],
        )
    )
    layers = [lines]
    if len(markers) > 0:
        rules = (
            alt.Chart(markers).mark_rule(strokeDash=[4, 4])
            .encode(
                x="year:Q",
                color=alt.Color(
                    "kind:N",
                    scale=alt.Scale(domain=list(EVENT_COLORS), range=list(EVENT_COLORS.values())),
                    legend=None,
                ),
                tooltip=["label:N", alt.Tooltip("year:Q", format="d")],
            )
        )
        labels = (
            alt.Chart(markers).mark_text(angle=270, align="left", dx=4, dy=-4, fontSize=10)
            .encode(x="year:Q", y=alt.value(10), text="label:N")
        )
        layers += [rules, labels]
    chart = alt.layer(*layers).resolve_scale(color="independent").properties(title=title, height=height)
    st.altair_chart(chart, use_container_width=True)


# ═══════════════════════════════════════════════════════════════════════════
# PAGE CONFIG
# ═══════════════════════════════════════════════════════════════════════════
st.set_page_config(page_title="PKV vs GKV", layout="wide")
st.title("PKV vs GKV Cost Comparison")
st.caption("Lifetime projection of private vs public health insurance costs for one household")

# ═══════════════════════════════════════════════════════════════════════════
# SIDEBAR — Parameters
# ═══════════════════════════════════════════════════════════════════════════
raw = {}
with st.sidebar:
    st.header("Household")
    raw["start_year"] = st.number_input("Start year", value=DEFAULTS.start_year, step=1)
    raw["current_age"] = st.number_input("Current age", value=DEFAULTS.current_age, step=1)
    c1, c2 = st.columns(2)
    raw["adult_1_life_expectancy"] = c1.number_input(
        "Adult 1 life expectancy", value=DEFAULTS.adult_1_life_expectancy, step=1
    )
    raw["adult_2_life_expectancy"] = c2.number_input(
        "Adult 2 life expectancy", value=DEFAULTS.adult_2_life_expectancy, step=1
    )

    st.header("Children")
    c1, c2 = st.columns(2)
    raw["dependent_1_age"] = c1.number_input("Child 1 age", value=DEFAULTS.dependent_1_age, step=1)
    raw["dependent_2_age"] = c2.number_input("Child 2 age", value=DEFAULTS.dependent_2_age, step=1)
    raw["dependent_1_premium"] = c1.number_input(
        "Child 1 premium €/mo", value=DEFAULTS.dependent_1_premium, step=5.0
    )
    raw["dependent_2_premium"] = c2.number_input(
        "Child 2 premium €/mo", value=DEFAULTS.dependent_2_premium, step=5.0
    )
    raw["dependent_growth_pct"] = st.number_input(
        "Child premium growth %", value=DEFAULTS.dependent_growth_pct, step=0.1
    )
    raw["dependent_leave_age"] = st.number_input(
        "Leave age", value=DEFAULTS.dependent_leave_age, step=1
    )

    st.header("PKV Adults")
    raw["adult_base_premium"] = st.number_input(
        "Base premium €/mo (excl. GBZ)", value=DEFAULTS.adult_base_premium, step=5.0
    )
    raw["adult_growth_pct"] = st.number_input(
        "Growth % until GBZ cutoff", value=DEFAULTS.adult_growth_pct, step=0.1
    )
    two_phase = st.checkbox("Different growth after cutoff", value=True)
    raw["adult_growth_after_cutoff_pct"] = (
        st.number_input(
            "Growth % after cutoff", value=DEFAULTS.adult_growth_after_cutoff_pct, step=0.1
        )
        if two_phase else None
    )
    raw["one_time_surcharge_pct"] = st.number_input(
        "One-time surcharge %", value=DEFAULTS.one_time_surcharge_pct, step=1.0
    )
    raw["deductible_per_person"] = st.number_input(
        "Deductible €/person/year", value=DEFAULTS.deductible_per_person, step=50.0
    )

    st.header("GBZ Fund")
    c1, c2 = st.columns(2)
    raw["fund_cutoff_age"] = c1.number_input("Cutoff age", value=DEFAULTS.fund_cutoff_age, step=1)
    raw["stabilize_age"] = c2.number_input("Stabilise age", value=DEFAULTS.stabilize_age, step=1)
    raw["fund_loading_pct"] = st.number_input("Loading %", value=DEFAULTS.fund_loading_pct, step=1.0)
    raw["stabilization_annual_amount"] = st.number_input(
        "Stabilisation €/adult/year", value=DEFAULTS.stabilization_annual_amount, step=100.0
    )
    raw["fund_interest_pct"] = st.number_input(
        "Fund interest %", value=DEFAULTS.fund_interest_pct, step=0.1
    )

    st.header("GKV")
    raw["public_policy"] = st.selectbox(
        "Policy", options=list(POLICY_LABELS), format_func=POLICY_LABELS.get, index=0
    )
    raw["public_base_monthly"] = st.number_input(
        "GKV €/mo", value=DEFAULTS.public_base_monthly, step=10.0
    )
    raw["public_growth_pct"] = st.number_input("GKV growth %", value=DEFAULTS.public_growth_pct, step=0.1)
    if raw["public_policy"] == "pension":
        raw["retirement_age"] = st.number_input("Retirement age", value=DEFAULTS.retirement_age, step=1)
        c1, c2 = st.columns(2)
        raw["pension_1"] = c1.number_input("Pension 1 €/mo", value=DEFAULTS.pension_1, step=50.0)
        raw["pension_2"] = c2.number_input("Pension 2 €/mo", value=DEFAULTS.pension_2, step=50.0)
        raw["rate_1_pct"] = c1.number_input("Health rate %", value=DEFAULTS.rate_1_pct, step=0.1)
        raw["rate_2_pct"] = c2.number_input("Care rate %", value=DEFAULTS.rate_2_pct, step=0.1)

    show_fund = st.checkbox("Show fund balance on chart", value=False)

# ═══════════════════════════════════════════════════════════════════════════
# CONFIG — parse and check
# ═══════════════════════════════════════════════════════════════════════════
try:
    cfg = parse_inputs(raw)
except InputError as e:
    st.error("Invalid parameters:\n\n" + "\n".join(f"- {msg}" for msg in e.errors))
    st.stop()

vr = validate_config(cfg)
if not vr.is_valid:
    st.error("Configuration check failed:\n" + vr.summary())
    st.stop()
for w in vr.warnings:
    st.warning(w)

# ═══════════════════════════════════════════════════════════════════════════
# PROJECTION
# ═══════════════════════════════════════════════════════════════════════════
records = run_projection(cfg)
summary = compute_lifetime_summary(records)
events = events_in_horizon(cfg, build_event_schedule(cfg))

# --- 1. KPI row ---
k1, k2, k3, k4, k5 = st.columns(5)
k1.metric("Initial Monthly PKV", _fmt_eur(summary.initial_monthly_private))
k2.metric("Initial Monthly GKV", _fmt_eur(summary.initial_monthly_public))
k3.metric("Total PKV", _fmt_keur(summary.total_private))
k4.metric("Total GKV", _fmt_keur(summary.total_public))
k5.metric("Difference (GKV - PKV)", _fmt_keur(summary.difference))

# --- 2. Flags ---
for flag in summary.flags:
    st.warning(flag)

st.caption(cfg.public_policy.describe())

# --- 3. Chart ---
_plot_costs(
    chart_frame(records, include_fund=show_fund),
    event_markers(events),
    title="Annual PKV vs GKV Cost",
)

# --- 4. Summary + table ---
left, right = st.columns([1, 2])
with left:
    st.markdown("**Lifetime Summary**")
    st.dataframe(summary.to_dataframe(), use_container_width=True, hide_index=True)
with right:
    st.markdown("**Life Events**")
    st.dataframe(event_markers(events), use_container_width=True, hide_index=True)

with st.expander("Yearly projection table", expanded=True):
    st.dataframe(
        format_currency_table(build_display_table(records)),
        use_container_width=True,
        hide_index=True,
    )
