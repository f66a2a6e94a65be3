# approxeq/results.py
# Immutable comparison results returned by the scalar and vector engines.
#
# Results are pure value objects. They are never constructed by callers of
# the public API; the engines in approxeq.engine build them.

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class ComparisonOutcome(str, Enum):
    """
    Outcome of a single comparison.

    EXACTLY_EQUAL        -- comparands are identical (or both NaN with
                            NaN-equality enabled).
    APPROXIMATELY_EQUAL  -- comparands differ but within tolerance.
    UNEQUAL              -- comparands differ beyond tolerance, or a NaN is
                            involved, or (vectors) the lengths differ.
    """
    EXACTLY_EQUAL       = "EXACTLY_EQUAL"
    APPROXIMATELY_EQUAL = "APPROXIMATELY_EQUAL"
    UNEQUAL             = "UNEQUAL"

    @property
    def is_equal(self) -> bool:
        return self is not ComparisonOutcome.UNEQUAL


@dataclass(frozen=True)
class ScalarComparisonResult:
    """
    Result of comparing two scalars.

    Fields:
      outcome           -- ComparisonOutcome.
      expected          -- expected comparand after float conversion.
      actual            -- actual comparand after float conversion.
      diff              -- |actual - expected|; 0.0 for identical comparands,
                           NaN when either comparand is NaN. Diagnostic only;
                           never used to decide equality.
      evaluator_kind    -- `kind` of the evaluator used.
      margin_factor     -- margin exposed by the evaluator, or None.
      multiplier_factor -- multiplier exposed by the evaluator, or None.
    """
    outcome:           ComparisonOutcome
    expected:          float
    actual:            float
    diff:              float
    evaluator_kind:    str
    margin_factor:     Optional[float]
    multiplier_factor: Optional[float]

    @property
    def is_equal(self) -> bool:
        return self.outcome.is_equal


@dataclass(frozen=True)
class VectorComparisonResult:
    """
    Result of comparing two sequences element-wise.

    Fields:
      outcome           -- overall ComparisonOutcome. UNEQUAL if the lengths
                           differ or any element is UNEQUAL; otherwise
                           APPROXIMATELY_EQUAL if any element is; otherwise
                           EXACTLY_EQUAL.
      per_index         -- tuple of ScalarComparisonResult in input order.
                           Empty when length_mismatch is True.
      length_mismatch   -- True iff the two sequences differ in length.
      expected_length   -- len(expected).
      actual_length     -- len(actual).
      evaluator_kind    -- `kind` of the evaluator used.
      margin_factor     -- margin exposed by the evaluator, or None.
      multiplier_factor -- multiplier exposed by the evaluator, or None.

    Invariants:
      length_mismatch  ->  per_index == () and outcome is UNEQUAL.
      not length_mismatch  ->  len(per_index) == expected_length == actual_length.
    """
    outcome:           ComparisonOutcome
    per_index:         Tuple[ScalarComparisonResult, ...]
    length_mismatch:   bool
    expected_length:   int
    actual_length:     int
    evaluator_kind:    str
    margin_factor:     Optional[float]
    multiplier_factor: Optional[float]

    @property
    def is_equal(self) -> bool:
        return self.outcome.is_equal

    @property
    def unequal_indices(self) -> Tuple[int, ...]:
        return tuple(
            ix for ix, element in enumerate(self.per_index) if not element.is_equal
        )

    @property
    def first_unequal_index(self) -> Optional[int]:
        indices = self.unequal_indices
        return indices[0] if indices else None

    @property
    def first_unequal(self) -> Optional[ScalarComparisonResult]:
        ix = self.first_unequal_index
        return None if ix is None else self.per_index[ix]


__all__ = [
    "ComparisonOutcome",
    "ScalarComparisonResult",
    "VectorComparisonResult",
]
