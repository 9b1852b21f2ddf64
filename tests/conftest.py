import os
import sys

import pytest

# Ensure project root is on sys.path before imports
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from core.config import Dependent, ProjectionConfig  # noqa: E402
from engine.projection import run_projection  # noqa: E402


def pytest_configure(config):
    """
    Register custom markers to avoid pytest warnings.
    """
    config.addinivalue_line("markers", "engine: projection engine tests")
    config.addinivalue_line("markers", "inputs: boundary parsing/validation tests")
    config.addinivalue_line("markers", "reporting: summary/table tests")


@pytest.fixture
def default_config():
    return ProjectionConfig()


@pytest.fixture
def default_records(default_config):
    return run_projection(default_config)


@pytest.fixture
def early_stabilization_config():
    """Stabilisation starts right after the fund cutoff (age 61)."""
    return ProjectionConfig(stabilize_age=61, stabilization_annual_amount=1200.0)


@pytest.fixture
def childless_config():
    """Both children already past leave age at the start year."""
    return ProjectionConfig(dependents=(Dependent(current_age=30), Dependent(current_age=27)))
