# usage_example.py
# Minimal usage example for the approxeq package.
# This file is not part of the approxeq package. For reference only.

from approxeq import (
    ApproximateEqualityAssertionError,
    assert_scalar_eq_approx,
    assert_scalar_ne_approx,
    assert_vector_eq_approx,
    evaluate_vector_eq_approx,
    margin,
    multiplier,
)

# Scalars
expected: float = 123456.0
actual: float = 123456.01

# Passes: the values are not exactly equal.
assert_scalar_ne_approx(expected, actual, multiplier(0.0))

# Passes: 0.01 / 123456.01 is well inside a 1e-6 multiplier.
assert_scalar_eq_approx(expected, actual, multiplier(0.000001))

# Fails: a zero multiplier demands exact equality.
try:
    assert_scalar_eq_approx(expected, actual, multiplier(0.0))
except ApproximateEqualityAssertionError as exc:
    print(exc)

# Vectors
assert_vector_eq_approx(
    [3.0, -40404.0, 1.23456],
    [3.0, -40410.0, 1.234567],
    multiplier(0.00015),
)

result = evaluate_vector_eq_approx([1.0, 2.0, 3.0], [1.0, 2.5, 3.5], margin(0.01))
print(result.outcome.value, result.unequal_indices)

# Expected output:
# failed to verify approximate equality: expected=123456.0, actual=123456.01, evaluator=multiplier, multiplier_factor=0.0
# UNEQUAL (1, 2)
