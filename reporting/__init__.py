"""
Reporting — lifetime summary, display table, and chart frames.
"""

from .summary import LifetimeSummary, compute_lifetime_summary
from .table import build_display_table, chart_frame, event_markers, format_currency_table

__all__ = [
    "LifetimeSummary",
    "compute_lifetime_summary",
    "build_display_table",
    "chart_frame",
    "event_markers",
    "format_currency_table",
]
