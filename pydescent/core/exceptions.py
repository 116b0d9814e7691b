"""
Exception hierarchy for pydescent.

Every exception raised on purpose by the library derives from PyDescentError,
so callers can catch library errors without catching unrelated ones.

Design principles:
    - Messages state the offending value next to what was expected
    - Input problems and state problems are separate branches
    - Numeric degeneracy (zero variance, overshooting steps) is handled
      inside the algorithms and is not an error
"""


class PyDescentError(Exception):
    """Base exception for all pydescent errors."""
    pass


class ValidationError(PyDescentError):
    """
    Input validation failed.

    Raised when user-provided data or parameters are rejected, e.g. a
    training row that is too short to hold its features and target.
    """
    pass


class DimensionError(ValidationError):
    """
    Array shapes are wrong or inconsistent with each other.

    Attributes:
        expected: The expected shape or size, if known
        actual: The shape or size that was received, if known
    """

    def __init__(
        self,
        message: str,
        expected: tuple[int, ...] | int | None = None,
        actual: tuple[int, ...] | int | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class IllegalStateError(PyDescentError):
    """
    Operation is not valid in the object's current state.

    Raised by LinearRegressionModel.predict() before any successful solve().
    """
    pass
