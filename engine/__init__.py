"""
Projection engine — deterministic yearly PKV/GKV cost fold.
"""

from .projection import (
    ProjectionState,
    YearRecord,
    project_year,
    records_to_frame,
    run_projection,
)
from .events import LifeEvent, build_event_schedule, annotate

__all__ = [
    "ProjectionState",
    "YearRecord",
    "project_year",
    "records_to_frame",
    "run_projection",
    "LifeEvent",
    "build_event_schedule",
    "annotate",
]
