"""
Core package — configuration, output schema, and shared numeric helpers.
No business logic lives here.
"""

from .schema import RECORD_COLUMNS, TABLE_LABELS
from .config import Dependent, ProjectionConfig
from .utils import excel_round, round_currency, compound, two_phase_compound
from .logging_config import setup_logging

__all__ = [
    "RECORD_COLUMNS",
    "TABLE_LABELS",
    "Dependent",
    "ProjectionConfig",
    "excel_round",
    "round_currency",
    "compound",
    "two_phase_compound",
    "setup_logging",
]
