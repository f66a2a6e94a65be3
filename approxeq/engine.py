# =============================================================================
# approxeq -- COMPARISON ENGINE
# File:   approxeq/engine.py
# =============================================================================
#
# SCOPE
# -----
# Exactly two public entry points:
#
#   evaluate_scalar_eq_approx  -- one pair of scalars -> ScalarComparisonResult
#   evaluate_vector_eq_approx  -- two sequences       -> VectorComparisonResult
#
# WHAT IS NOT IN THIS FILE
# ------------------------
#   No tolerance arithmetic (approxeq.evaluators).
#   No failure reporting (approxeq.assertions).
#   No logging. No I/O. No global mutable state.
#
# NaN POLICY
# ----------
# Applied before the evaluator is consulted, so evaluators never see NaN:
#
#   either operand NaN, nan_equality off        ->  UNEQUAL
#   both operands NaN,  nan_equality on         ->  EXACTLY_EQUAL
#   exactly one operand NaN, nan_equality on    ->  UNEQUAL
#
# nan_equality defaults to the Settings.nan_equality cached at import
# (APPROXEQ_NAN_EQUALITY), so a comparison never reads the environment. It
# may be overridden per call.
#
# VECTOR ALGORITHM
# ----------------
#   1. len(expected) != len(actual)  ->  length_mismatch, no element work.
#   2. For each index in order: to_float both elements, scalar engine.
#   3. Overall outcome aggregates every element; there is no early exit, so
#      per_index always names every differing index.
# =============================================================================

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any, Optional, Tuple

import numpy as np

from .config import get_settings
from .conversion import to_float
from .evaluators import ApproximateEqualityEvaluator, default_evaluator
from .results import ComparisonOutcome, ScalarComparisonResult, VectorComparisonResult


# =============================================================================
# SECTION 1 -- INTERNAL HELPERS (module-private)
# =============================================================================

def _resolve_evaluator(evaluator: Any) -> ApproximateEqualityEvaluator:
    if evaluator is None:
        return default_evaluator()
    if not isinstance(evaluator, ApproximateEqualityEvaluator):
        raise TypeError(
            "evaluator must implement decide(expected, actual); got "
            + type(evaluator).__name__
        )
    return evaluator


def _resolve_nan_equality(nan_equality: Optional[bool]) -> bool:
    if nan_equality is None:
        return get_settings().nan_equality
    return bool(nan_equality)


def _factor(evaluator: Any, name: str) -> Optional[float]:
    """Numeric tolerance attribute of *evaluator*, or None."""
    value = getattr(evaluator, name, None)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _describe(evaluator: Any) -> Tuple[str, Optional[float], Optional[float]]:
    kind = getattr(evaluator, "kind", None)
    if not isinstance(kind, str) or not kind:
        kind = type(evaluator).__name__
    return kind, _factor(evaluator, "margin"), _factor(evaluator, "multiplier")


def _as_sequence(name: str, value: Any) -> Any:
    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise ValueError(
                name + " must be one-dimensional; got an array with ndim="
                + str(value.ndim)
            )
        return value
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise TypeError(
            name + " must be a sequence of numbers; got " + type(value).__name__
        )
    return value


def _compare(
    expected:     float,
    actual:       float,
    evaluator:    ApproximateEqualityEvaluator,
    nan_equality: bool,
) -> Tuple[ComparisonOutcome, float]:
    expected_is_nan = math.isnan(expected)
    actual_is_nan = math.isnan(actual)
    if expected_is_nan or actual_is_nan:
        if nan_equality and expected_is_nan and actual_is_nan:
            return ComparisonOutcome.EXACTLY_EQUAL, math.nan
        return ComparisonOutcome.UNEQUAL, math.nan

    diff = 0.0 if expected == actual else abs(actual - expected)
    if not evaluator.decide(expected, actual):
        return ComparisonOutcome.UNEQUAL, diff
    if expected == actual:
        return ComparisonOutcome.EXACTLY_EQUAL, diff
    return ComparisonOutcome.APPROXIMATELY_EQUAL, diff


# =============================================================================
# SECTION 2 -- PUBLIC API
# =============================================================================

def evaluate_scalar_eq_approx(
    expected:     Any,
    actual:       Any,
    evaluator:    Optional[ApproximateEqualityEvaluator] = None,
    *,
    nan_equality: Optional[bool] = None,
) -> ScalarComparisonResult:
    """
    Compare two scalars with *evaluator* (default: margin(DEFAULT_MARGIN)).

    Args:
        expected:      Any value accepted by to_float().
        actual:        Any value accepted by to_float().
        evaluator:     Object implementing decide(expected, actual).
        nan_equality:  Overrides Settings.nan_equality when not None.

    Returns:
        ScalarComparisonResult. Never raises for numeric input.

    Raises:
        TypeError if a comparand is not convertible or the evaluator does
        not implement decide().
    """
    evaluator = _resolve_evaluator(evaluator)
    expected_f = to_float(expected)
    actual_f = to_float(actual)
    outcome, diff = _compare(
        expected_f, actual_f, evaluator, _resolve_nan_equality(nan_equality)
    )
    kind, margin_factor, multiplier_factor = _describe(evaluator)
    return ScalarComparisonResult(
        outcome=outcome,
        expected=expected_f,
        actual=actual_f,
        diff=diff,
        evaluator_kind=kind,
        margin_factor=margin_factor,
        multiplier_factor=multiplier_factor,
    )


def evaluate_vector_eq_approx(
    expected:     Any,
    actual:       Any,
    evaluator:    Optional[ApproximateEqualityEvaluator] = None,
    *,
    nan_equality: Optional[bool] = None,
) -> VectorComparisonResult:
    """
    Compare two sequences element-wise with *evaluator*.

    Args:
        expected:      Sequence or 1-D numpy array of values accepted by
                       to_float(). Not modified.
        actual:        Same, for the actual values.
        evaluator:     Object implementing decide(expected, actual).
        nan_equality:  Overrides Settings.nan_equality when not None.

    Returns:
        VectorComparisonResult. A length mismatch is an UNEQUAL outcome,
        not an exception.

    Raises:
        TypeError  if either input is not a sequence, an element is not
                   convertible, or the evaluator does not implement decide().
        ValueError if an ndarray input is not one-dimensional.
    """
    evaluator = _resolve_evaluator(evaluator)
    expected = _as_sequence("expected", expected)
    actual = _as_sequence("actual", actual)
    kind, margin_factor, multiplier_factor = _describe(evaluator)

    expected_length = len(expected)
    actual_length = len(actual)
    if expected_length != actual_length:
        return VectorComparisonResult(
            outcome=ComparisonOutcome.UNEQUAL,
            per_index=(),
            length_mismatch=True,
            expected_length=expected_length,
            actual_length=actual_length,
            evaluator_kind=kind,
            margin_factor=margin_factor,
            multiplier_factor=multiplier_factor,
        )

    nan_eq = _resolve_nan_equality(nan_equality)
    per_index = []
    for expected_element, actual_element in zip(expected, actual):
        expected_f = to_float(expected_element)
        actual_f = to_float(actual_element)
        outcome, diff = _compare(expected_f, actual_f, evaluator, nan_eq)
        per_index.append(ScalarComparisonResult(
            outcome=outcome,
            expected=expected_f,
            actual=actual_f,
            diff=diff,
            evaluator_kind=kind,
            margin_factor=margin_factor,
            multiplier_factor=multiplier_factor,
        ))

    outcomes = {element.outcome for element in per_index}
    if ComparisonOutcome.UNEQUAL in outcomes:
        overall = ComparisonOutcome.UNEQUAL
    elif ComparisonOutcome.APPROXIMATELY_EQUAL in outcomes:
        overall = ComparisonOutcome.APPROXIMATELY_EQUAL
    else:
        overall = ComparisonOutcome.EXACTLY_EQUAL

    return VectorComparisonResult(
        outcome=overall,
        per_index=tuple(per_index),
        length_mismatch=False,
        expected_length=expected_length,
        actual_length=actual_length,
        evaluator_kind=kind,
        margin_factor=margin_factor,
        multiplier_factor=multiplier_factor,
    )


__all__ = [
    "evaluate_scalar_eq_approx",
    "evaluate_vector_eq_approx",
]
