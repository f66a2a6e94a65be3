# approxeq/__init__.py
# Approximate equality of floats and float sequences for unit tests.
#
# Canonical import:
#   from approxeq import (
#       assert_scalar_eq_approx, assert_vector_eq_approx,
#       margin, multiplier, zero_margin_or_multiplier,
#   )

from .constants import (
    DEFAULT_MARGIN,
    DEFAULT_MULTIPLIER,
)
from .exceptions import (
    ApproxEqError,
    ApproximateEqualityAssertionError,
    InvalidConfigurationError,
)
from .config import (
    Settings,
    get_settings,
    load_settings,
    reload_settings,
)
from .conversion import (
    SupportsToFloat,
    to_float,
)
from .evaluators import (
    ApproximateEqualityEvaluator,
    MarginEvaluator,
    MultiplierEvaluator,
    ZeroMarginOrMultiplierEvaluator,
    default_evaluator,
    margin,
    multiplier,
    zero_margin_or_multiplier,
)
from .results import (
    ComparisonOutcome,
    ScalarComparisonResult,
    VectorComparisonResult,
)
from .engine import (
    evaluate_scalar_eq_approx,
    evaluate_vector_eq_approx,
)
from .assertions import (
    assert_scalar_eq_approx,
    assert_scalar_ne_approx,
    assert_vector_eq_approx,
    assert_vector_ne_approx,
)

__version__ = "0.1.0"

# Flags are fixed here; a malformed APPROXEQ_* value fails the import.
get_settings()

__all__ = [
    # Constants
    "DEFAULT_MARGIN",
    "DEFAULT_MULTIPLIER",
    # Exceptions
    "ApproxEqError",
    "InvalidConfigurationError",
    "ApproximateEqualityAssertionError",
    # Settings
    "Settings",
    "get_settings",
    "load_settings",
    "reload_settings",
    # Conversion
    "SupportsToFloat",
    "to_float",
    # Evaluators
    "ApproximateEqualityEvaluator",
    "MarginEvaluator",
    "MultiplierEvaluator",
    "ZeroMarginOrMultiplierEvaluator",
    "default_evaluator",
    "margin",
    "multiplier",
    "zero_margin_or_multiplier",
    # Results
    "ComparisonOutcome",
    "ScalarComparisonResult",
    "VectorComparisonResult",
    # Engine
    "evaluate_scalar_eq_approx",
    "evaluate_vector_eq_approx",
    # Assertions
    "assert_scalar_eq_approx",
    "assert_scalar_ne_approx",
    "assert_vector_eq_approx",
    "assert_vector_ne_approx",
]
