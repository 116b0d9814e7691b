"""
Core infrastructure for pydescent.

Shared abstractions used by the domain modules.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Device detection, timing, tolerances
"""

from pydescent.core.result import Result
from pydescent.core.exceptions import (
    PyDescentError,
    ValidationError,
    DimensionError,
    IllegalStateError,
)

__all__ = [
    "Result",
    "PyDescentError",
    "ValidationError",
    "DimensionError",
    "IllegalStateError",
]
