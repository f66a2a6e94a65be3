# =============================================================================
# approxeq -- EVALUATOR STRATEGIES
# File:   approxeq/evaluators.py
# =============================================================================
#
# SCOPE
# -----
# Defines the evaluator capability and the three stock tolerance strategies:
#
#   ApproximateEqualityEvaluator     -- capability; one operation, decide().
#   MarginEvaluator                  -- absolute-difference tolerance.
#   MultiplierEvaluator              -- relative-difference tolerance.
#   ZeroMarginOrMultiplierEvaluator  -- margin when either side is zero,
#                                       multiplier otherwise.
#
# plus the factories margin(), multiplier(), zero_margin_or_multiplier() and
# default_evaluator().
#
# TOLERANCE SEMANTICS
# -------------------
#   margin:      expected - margin <= actual <= expected + margin
#   multiplier:  the same range with tolerance
#                multiplier * max(|expected|, |actual|)
#
# The range ends are computed in float arithmetic and the test is
# containment, so 3.0001 lies within margin 0.0001 of 3.0 even though
# 3.0001 - 3.0 rounds to slightly more than 0.0001. Both bounds are
# inclusive. When a range end overflows to infinity the range is
# unbounded on that side.
#
# A multiplier tolerance shrinks to nothing as the operands approach zero,
# so comparing 0.0 against 1e-12 by multiplier always fails. The combined
# strategy switches to an absolute margin whenever either operand is zero.
#
# SPECIAL VALUES
# --------------
# Identical comparands are always equal (inf == inf included).
# An infinite comparand is never approximately equal to anything else.
# NaN never reaches decide() from the engines; the scalar engine owns the
# NaN policy. Called directly with NaN, every stock strategy returns False.
#
# EXTENSIBILITY
# -------------
# The engines accept any object whose class defines a callable decide().
# Inheriting from ApproximateEqualityEvaluator is optional; the structural
# check is implemented in __subclasshook__. Evaluators may expose a `kind`
# string and numeric `margin` / `multiplier` attributes; these are read
# for diagnostics only.
#
# VALIDATION
# ----------
# Tolerances are validated once, at construction. Negative, NaN, bool and
# non-numeric values raise InvalidConfigurationError. +inf is accepted.
#
# PROHIBITED ACTIONS CONFIRMED ABSENT
# ------------------------------------
#   No logging module
#   No module-level mutable state
#   No I/O
# =============================================================================

from __future__ import annotations

import math
import numbers
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from .constants import DEFAULT_MARGIN, DEFAULT_MULTIPLIER
from .exceptions import InvalidConfigurationError


# =============================================================================
# SECTION 1 -- CAPABILITY
# =============================================================================

class ApproximateEqualityEvaluator(ABC):
    """
    Decides whether two floats are approximately equal.

    Implementations must be pure: no side effects, and identical inputs
    always produce the identical decision.
    """

    kind: ClassVar[str] = "custom"

    @abstractmethod
    def decide(self, expected: float, actual: float) -> bool:
        """Return True iff *actual* is approximately equal to *expected*."""

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is ApproximateEqualityEvaluator:
            for base in subclass.__mro__:
                if "decide" in base.__dict__:
                    if callable(base.__dict__["decide"]):
                        return True
                    return NotImplemented
        return NotImplemented


# =============================================================================
# SECTION 2 -- INTERNAL HELPERS (module-private)
# =============================================================================

def _check_tolerance(field_name: str, value: object) -> float:
    """Return *value* as a float, or raise InvalidConfigurationError."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidConfigurationError(
            field_name=field_name,
            value=value,
            constraint="must be a real number",
        )
    tolerance = float(value)
    # NaN fails this comparison as well as negatives.
    if not tolerance >= 0.0:
        raise InvalidConfigurationError(
            field_name=field_name,
            value=value,
            constraint="must be >= 0",
        )
    return tolerance


def _in_range(expected: float, actual: float, tolerance: float) -> bool:
    """True iff actual lies in the closed range expected -/+ tolerance."""
    if expected == actual:
        return True
    if math.isinf(expected) or math.isinf(actual):
        return False
    lo = expected - tolerance
    hi = expected + tolerance
    if lo > hi:
        lo, hi = hi, lo
    return lo <= actual <= hi


def _within_margin(expected: float, actual: float, margin: float) -> bool:
    return _in_range(expected, actual, margin)


def _within_multiplier(expected: float, actual: float, multiplier: float) -> bool:
    return _in_range(expected, actual, multiplier * max(abs(expected), abs(actual)))


# =============================================================================
# SECTION 3 -- STOCK STRATEGIES
# =============================================================================

@dataclass(frozen=True)
class MarginEvaluator(ApproximateEqualityEvaluator):
    """
    Absolute tolerance: equal iff actual lies in
    [expected - margin, expected + margin].
    """

    kind: ClassVar[str] = "margin"

    margin: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "margin", _check_tolerance("margin", self.margin))

    def decide(self, expected: float, actual: float) -> bool:
        return _within_margin(expected, actual, self.margin)


@dataclass(frozen=True)
class MultiplierEvaluator(ApproximateEqualityEvaluator):
    """
    Relative tolerance: equal iff actual lies within
    multiplier * max(|expected|, |actual|) of expected.

    Scale-invariant. With both operands zero only exact equality passes,
    which the identical-comparand check already covers.
    """

    kind: ClassVar[str] = "multiplier"

    multiplier: float

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "multiplier", _check_tolerance("multiplier", self.multiplier)
        )

    def decide(self, expected: float, actual: float) -> bool:
        return _within_multiplier(expected, actual, self.multiplier)


@dataclass(frozen=True)
class ZeroMarginOrMultiplierEvaluator(ApproximateEqualityEvaluator):
    """
    Margin semantics when either operand is zero, multiplier semantics
    otherwise.
    """

    kind: ClassVar[str] = "zero_margin_or_multiplier"

    margin:     float
    multiplier: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "margin", _check_tolerance("margin", self.margin))
        object.__setattr__(
            self, "multiplier", _check_tolerance("multiplier", self.multiplier)
        )

    def decide(self, expected: float, actual: float) -> bool:
        if expected == 0.0 or actual == 0.0:
            return _within_margin(expected, actual, self.margin)
        return _within_multiplier(expected, actual, self.multiplier)


# =============================================================================
# SECTION 4 -- FACTORIES
# =============================================================================

def margin(value: float = DEFAULT_MARGIN) -> MarginEvaluator:
    """Evaluator applying *value* as an absolute margin."""
    return MarginEvaluator(margin=value)


def multiplier(value: float = DEFAULT_MULTIPLIER) -> MultiplierEvaluator:
    """Evaluator applying *value* as a multiplier of the larger magnitude."""
    return MultiplierEvaluator(multiplier=value)


def zero_margin_or_multiplier(
    margin:     float = DEFAULT_MARGIN,
    multiplier: float = DEFAULT_MULTIPLIER,
) -> ZeroMarginOrMultiplierEvaluator:
    """
    Evaluator applying *multiplier* in all cases except when either
    comparand is zero, in which case *margin* is applied.
    """
    return ZeroMarginOrMultiplierEvaluator(margin=margin, multiplier=multiplier)


def default_evaluator() -> MarginEvaluator:
    """The evaluator used when a caller supplies none."""
    return MarginEvaluator(margin=DEFAULT_MARGIN)


__all__ = [
    "ApproximateEqualityEvaluator",
    "MarginEvaluator",
    "MultiplierEvaluator",
    "ZeroMarginOrMultiplierEvaluator",
    "margin",
    "multiplier",
    "zero_margin_or_multiplier",
    "default_evaluator",
]
