# =============================================================================
# approxeq -- EXCEPTIONS
# File:   approxeq/exceptions.py
# =============================================================================
#
# SCOPE
# -----
# Defines the exception hierarchy of the package.
# All exceptions are pure value objects: no side effects, no logging,
# no I/O of any kind.
#
# EXCEPTION HIERARCHY
# -------------------
#   ApproxEqError(Exception)                          -- base; never raised directly
#     InvalidConfigurationError(ApproxEqError)        -- bad tolerance / flag value
#   ApproximateEqualityAssertionError(AssertionError) -- assertion layer failure
#
# ApproximateEqualityAssertionError derives from AssertionError rather than
# ApproxEqError so that test runners report it as an ordinary test failure
# and not as an error raised by the code under test.
#
# MESSAGE CONTRACT
# ----------------
# InvalidConfigurationError builds its message from field name, value and
# constraint, so identical inputs give identical messages. The three parts
# stay available as attributes for tests that inspect the failure.
#
# =============================================================================

from __future__ import annotations

from typing import Any


# =============================================================================
# BASE EXCEPTION
# =============================================================================

class ApproxEqError(Exception):
    """Base class for approxeq errors other than assertion failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message: str = message


# =============================================================================
# CONCRETE EXCEPTIONS
# =============================================================================

class InvalidConfigurationError(ApproxEqError):
    """
    Raised when a tolerance or flag value violates its constraint.

    This covers:
      - Negative or NaN margin / multiplier passed to an evaluator factory.
      - Non-numeric tolerance values (including bool).
      - Unparseable values of the APPROXEQ_* environment flags.

    Always raised at construction / load time, never during a comparison.

    Message format:
        "InvalidConfigurationError: '<field_name>' violates constraint
         '<constraint>': got <value>."

    Args:
        field_name:  Name of the offending parameter. Must be non-empty.
        value:       The offending value.
        constraint:  Human-readable constraint description, e.g.
                     "must be >= 0". Must be non-empty.

    Raises:
        ValueError if field_name or constraint is empty.
    """

    def __init__(
        self,
        field_name: str,
        value:      Any,
        constraint: str,
    ) -> None:
        if not field_name:
            raise ValueError(
                "InvalidConfigurationError: field_name must be a non-empty string"
            )
        if not isinstance(constraint, str) or not constraint:
            raise ValueError(
                "InvalidConfigurationError: constraint must be a non-empty string"
            )
        message = (
            "InvalidConfigurationError: '"
            + field_name
            + "' violates constraint '"
            + constraint
            + "': got "
            + repr(value)
            + "."
        )
        super().__init__(message)
        self.field_name: str = field_name
        self.value:      Any = value
        self.constraint: str = constraint

    def __repr__(self) -> str:
        return (
            f"InvalidConfigurationError(field_name={self.field_name!r}, "
            f"value={self.value!r}, constraint={self.constraint!r})"
        )


class ApproximateEqualityAssertionError(AssertionError):
    """
    Raised by the assertion layer when a comparison result contradicts the
    asserted polarity.

    Attributes:
        result:  The ScalarComparisonResult or VectorComparisonResult that
                 triggered the failure, for programmatic inspection.
    """

    def __init__(self, message: str, result: Any) -> None:
        super().__init__(message)
        self.message: str = message
        self.result:  Any = result


__all__ = [
    "ApproxEqError",
    "InvalidConfigurationError",
    "ApproximateEqualityAssertionError",
]
