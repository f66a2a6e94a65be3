import logging
import math
import re

import pytest

from approxeq import (
    ApproximateEqualityAssertionError,
    ComparisonOutcome,
    assert_scalar_eq_approx,
    assert_scalar_ne_approx,
    assert_vector_eq_approx,
    assert_vector_ne_approx,
    margin,
    multiplier,
    zero_margin_or_multiplier,
)


def _exact(message: str) -> str:
    return "^" + re.escape(message) + "$"


# =============================================================================
# SECTION 1 -- Scalar assertions
# =============================================================================

class TestAssertScalarEqApprox:
    """assert_scalar_eq_approx -- pass-through result and failure messages."""

    def test_passes_and_returns_result(self):
        result = assert_scalar_eq_approx(3.0, 3.0001, margin(0.0001))
        assert result.outcome is ComparisonOutcome.APPROXIMATELY_EQUAL

    def test_passes_with_default_evaluator(self):
        assert_scalar_eq_approx(0.12345678, 0.12345679)

    def test_failure_message_margin(self):
        with pytest.raises(ApproximateEqualityAssertionError, match=_exact(
            "failed to verify approximate equality: "
            "expected=0.12345678, actual=0.12345679, evaluator=margin, margin_factor=1e-09"
        )):
            assert_scalar_eq_approx(0.12345678, 0.12345679, margin(0.000000001))

    def test_failure_message_multiplier(self):
        with pytest.raises(ApproximateEqualityAssertionError, match=_exact(
            "failed to verify approximate equality: "
            "expected=123456.0, actual=123456.01, evaluator=multiplier, multiplier_factor=0.0"
        )):
            assert_scalar_eq_approx(123456.0, 123456.01, multiplier(0.0))

    def test_failure_message_combined(self):
        with pytest.raises(ApproximateEqualityAssertionError, match=_exact(
            "failed to verify approximate equality: "
            "expected=1.0, actual=2.0, evaluator=zero_margin_or_multiplier, "
            "margin_factor=0.01, multiplier_factor=0.0001"
        )):
            assert_scalar_eq_approx(1.0, 2.0, zero_margin_or_multiplier(0.01, 0.0001))

    def test_failure_message_custom_evaluator(self):
        class Never:
            kind = "never"

            def decide(self, expected, actual):
                return False

        with pytest.raises(ApproximateEqualityAssertionError, match=_exact(
            "failed to verify approximate equality: "
            "expected=1, actual=1, evaluator=never"
        )):
            assert_scalar_eq_approx(1, 1, Never())

    def test_is_assertion_error_and_carries_result(self):
        with pytest.raises(AssertionError) as exc_info:
            assert_scalar_eq_approx(1.0, 2.0, margin(0.5))
        assert isinstance(exc_info.value, ApproximateEqualityAssertionError)
        assert exc_info.value.result.diff == 1.0
        assert not exc_info.value.result.is_equal

    def test_nan_fails_without_nan_equality(self, nan_equality_off):
        with pytest.raises(ApproximateEqualityAssertionError, match=_exact(
            "failed to verify approximate equality: "
            "expected=nan, actual=nan, evaluator=margin, margin_factor=0.0001"
        )):
            assert_scalar_eq_approx(math.nan, math.nan)

    def test_nan_passes_with_nan_equality(self, nan_equality_on):
        assert_scalar_eq_approx(math.nan, math.nan)

    def test_failure_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="approxeq.assertions"):
            with pytest.raises(ApproximateEqualityAssertionError):
                assert_scalar_eq_approx(1.0, 2.0, margin(0.5))
        assert "failed to verify approximate equality" in caplog.text


class TestAssertScalarNeApprox:
    """assert_scalar_ne_approx -- inverted polarity, NaN handling."""

    def test_passes_for_distinct_values(self):
        result = assert_scalar_ne_approx(123456.0, 123456.01, multiplier(0.0))
        assert result.outcome is ComparisonOutcome.UNEQUAL

    def test_failure_message(self):
        with pytest.raises(ApproximateEqualityAssertionError, match=_exact(
            "failed to verify approximate inequality: "
            "expected=0.12345678, actual=0.12345678, evaluator=margin, margin_factor=0.0001"
        )):
            assert_scalar_ne_approx(0.12345678, 0.12345678)

    def test_nan_passes_without_nan_equality(self, nan_equality_off):
        assert_scalar_ne_approx(math.nan, math.nan)

    def test_nan_fails_with_nan_equality(self, nan_equality_on):
        with pytest.raises(ApproximateEqualityAssertionError, match="approximate inequality"):
            assert_scalar_ne_approx(math.nan, math.nan)

    def test_nan_versus_number_always_passes(self, nan_equality_on):
        assert_scalar_ne_approx(math.nan, 1.0)


# =============================================================================
# SECTION 2 -- Vector assertions
# =============================================================================

class TestAssertVectorEqApprox:
    """assert_vector_eq_approx -- lengths, first failing index, diffs."""

    def test_passes(self):
        assert_vector_eq_approx(
            [3.0, -40404.0, 1.23456],
            [3.0, -40410.0, 1.234567],
            multiplier(0.00015),
        )

    def test_empty_passes(self):
        assert_vector_eq_approx([], ())

    def test_length_mismatch_message(self):
        with pytest.raises(ApproximateEqualityAssertionError, match=_exact(
            "failed to verify approximate equality for vectors: "
            "expected-length 2 differs from actual-length 1"
        )):
            assert_vector_eq_approx([1.0, 2.0], [1.0])

    def test_element_message_names_first_index(self):
        with pytest.raises(ApproximateEqualityAssertionError, match=_exact(
            "failed to verify approximate equality for vectors: "
            "at index 1 expected=-3.0, actual=-3.5, diff=0.5, "
            "evaluator=zero_margin_or_multiplier, margin_factor=0.01, multiplier_factor=0.0001; "
            "unequal indices: [1] with diffs [0.5]"
        )):
            assert_vector_eq_approx(
                [1.0, -3.0, 5.0],
                [1.0, -3.5, 5.0],
                zero_margin_or_multiplier(0.01, 0.0001),
            )

    def test_element_message_lists_every_unequal_index(self):
        with pytest.raises(ApproximateEqualityAssertionError) as exc_info:
            assert_vector_eq_approx([1.0, 2.0, 3.0], [1.5, 2.0, 3.5], margin(0.1))
        assert exc_info.value.message.endswith("unequal indices: [0, 2] with diffs [0.5, 0.5]")
        assert exc_info.value.result.first_unequal_index == 0

    def test_element_message_names_custom_evaluator_kind(self):
        class Banded:
            kind = "banded"
            margin = 0.01
            multiplier = 0.0001

            def decide(self, expected, actual):
                return expected == actual

        with pytest.raises(ApproximateEqualityAssertionError, match=_exact(
            "failed to verify approximate equality for vectors: "
            "at index 0 expected=2.0, actual=2.25, diff=0.25, "
            "evaluator=banded, margin_factor=0.01, multiplier_factor=0.0001; "
            "unequal indices: [0] with diffs [0.25]"
        )):
            assert_vector_eq_approx([2.0], [2.25], Banded())

    def test_permissive_multiplier_passes(self):
        assert_vector_eq_approx(
            [1.0, -3.0, 5.0],
            [1.0, -3.001, 5.0],
            zero_margin_or_multiplier(0.01, 0.001),
        )


class TestAssertVectorNeApprox:
    """assert_vector_ne_approx."""

    def test_passes_on_length_mismatch(self):
        result = assert_vector_ne_approx([1.0], [1.0, 2.0])
        assert result.length_mismatch

    def test_passes_on_unequal_element(self):
        assert_vector_ne_approx([1.0, 2.0], [1.0, 2.5], margin(0.1))

    def test_empty_fails(self):
        with pytest.raises(ApproximateEqualityAssertionError, match=_exact(
            "failed to verify approximate inequality for vectors; evaluator=margin, margin_factor=0.0001"
        )):
            assert_vector_ne_approx([], [])

    def test_failure_message_multiplier(self):
        with pytest.raises(ApproximateEqualityAssertionError, match=_exact(
            "failed to verify approximate inequality for vectors; evaluator=multiplier, multiplier_factor=0.5"
        )):
            assert_vector_ne_approx([1.0, 2.0], [1.1, 2.1], multiplier(0.5))
