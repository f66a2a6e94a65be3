# approxeq/assertions.py
# Assertion helpers for test code.
#
# Each helper runs the matching engine and raises
# ApproximateEqualityAssertionError (an AssertionError) when the result
# contradicts the asserted polarity. No comparison logic lives here.
#
# Standard import:
#   from approxeq import assert_scalar_eq_approx, margin
#
#   def test_area():
#       assert_scalar_eq_approx(3.0, compute_area(), margin(0.0001))

from __future__ import annotations

import logging
from typing import Any, Optional, Union

from .engine import evaluate_scalar_eq_approx, evaluate_vector_eq_approx
from .evaluators import ApproximateEqualityEvaluator
from .exceptions import ApproximateEqualityAssertionError
from .results import ScalarComparisonResult, VectorComparisonResult

logger = logging.getLogger(__name__)


def _format_factors(result: Union[ScalarComparisonResult, VectorComparisonResult]) -> str:
    parts = [f"evaluator={result.evaluator_kind}"]
    if result.margin_factor is not None:
        parts.append(f"margin_factor={result.margin_factor!r}")
    if result.multiplier_factor is not None:
        parts.append(f"multiplier_factor={result.multiplier_factor!r}")
    return ", ".join(parts)


def _fail(message: str, result: Any) -> None:
    logger.debug(f"Approximate equality assertion failed: {message}")
    raise ApproximateEqualityAssertionError(message, result)


def format_scalar_failure(
    expected: Any,
    actual: Any,
    result: ScalarComparisonResult,
    *,
    expect_equal: bool,
) -> str:
    verb = "equality" if expect_equal else "inequality"
    return (
        f"failed to verify approximate {verb}: "
        f"expected={expected!r}, actual={actual!r}, {_format_factors(result)}"
    )


def format_vector_failure(result: VectorComparisonResult, *, expect_equal: bool) -> str:
    if not expect_equal:
        return (
            "failed to verify approximate inequality for vectors; "
            + _format_factors(result)
        )
    if result.length_mismatch:
        return (
            "failed to verify approximate equality for vectors: "
            f"expected-length {result.expected_length} differs from "
            f"actual-length {result.actual_length}"
        )
    ix = result.first_unequal_index
    first = result.per_index[ix]
    indices = list(result.unequal_indices)
    diffs = [result.per_index[i].diff for i in indices]
    return (
        "failed to verify approximate equality for vectors: "
        f"at index {ix} expected={first.expected!r}, actual={first.actual!r}, "
        f"diff={first.diff!r}, {_format_factors(result)}; "
        f"unequal indices: {indices} with diffs {diffs}"
    )


def assert_scalar_eq_approx(
    expected: Any,
    actual: Any,
    evaluator: Optional[ApproximateEqualityEvaluator] = None,
) -> ScalarComparisonResult:
    """Fail unless *actual* is approximately equal to *expected*."""
    result = evaluate_scalar_eq_approx(expected, actual, evaluator)
    if not result.is_equal:
        _fail(format_scalar_failure(expected, actual, result, expect_equal=True), result)
    return result


def assert_scalar_ne_approx(
    expected: Any,
    actual: Any,
    evaluator: Optional[ApproximateEqualityEvaluator] = None,
) -> ScalarComparisonResult:
    """Fail if *actual* is approximately equal to *expected*."""
    result = evaluate_scalar_eq_approx(expected, actual, evaluator)
    if result.is_equal:
        _fail(format_scalar_failure(expected, actual, result, expect_equal=False), result)
    return result


def assert_vector_eq_approx(
    expected: Any,
    actual: Any,
    evaluator: Optional[ApproximateEqualityEvaluator] = None,
) -> VectorComparisonResult:
    """Fail unless the sequences have equal length and every element matches."""
    result = evaluate_vector_eq_approx(expected, actual, evaluator)
    if not result.is_equal:
        _fail(format_vector_failure(result, expect_equal=True), result)
    return result


def assert_vector_ne_approx(
    expected: Any,
    actual: Any,
    evaluator: Optional[ApproximateEqualityEvaluator] = None,
) -> VectorComparisonResult:
    """Fail if the sequences are approximately equal."""
    result = evaluate_vector_eq_approx(expected, actual, evaluator)
    if result.is_equal:
        _fail(format_vector_failure(result, expect_equal=False), result)
    return result


__all__ = [
    "assert_scalar_eq_approx",
    "assert_scalar_ne_approx",
    "assert_vector_eq_approx",
    "assert_vector_ne_approx",
    "format_scalar_failure",
    "format_vector_failure",
]
