"""
Inputs — parsing form values into a configuration, and sanity checks.
"""

from .form import InputError, ProjectionInputs, parse_inputs
from .validators import ValidationResult, validate_config

__all__ = [
    "InputError",
    "ProjectionInputs",
    "parse_inputs",
    "ValidationResult",
    "validate_config",
]
