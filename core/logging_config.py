"""
Logging configuration for the projection tool.

Library modules only ever call logging.getLogger(__name__); the app (or a
test session) calls setup_logging() once to attach a handler.
"""

from __future__ import annotations

import logging
from typing import Optional

PROJECTION_LOGGER = "engine"
INPUTS_LOGGER = "inputs"

LOG_FORMAT = "%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_LOGGING_CONFIGURED = False


def setup_logging(level: int = logging.INFO, debug: bool = False, stream: Optional[object] = None) -> None:
    """
    Attach a single stream handler to the root logger.

    Args:
        level: Level for the project loggers when debug is False.
        debug: If True, project loggers emit DEBUG (per-event detail).
        stream: Optional stream for the handler (defaults to stderr).
    """
    global _LOGGING_CONFIGURED

    if _LOGGING_CONFIGURED:
        return

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    root = logging.getLogger()
    root.addHandler(handler)
    if root.level == logging.NOTSET or root.level > level:
        root.setLevel(level)

    effective = logging.DEBUG if debug else level
    for name in (PROJECTION_LOGGER, INPUTS_LOGGER):
        logging.getLogger(name).setLevel(effective)
    if debug:
        root.setLevel(logging.DEBUG)

    _LOGGING_CONFIGURED = True
