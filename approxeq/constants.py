# approxeq/constants.py
# Version: 0.1.0
# Fixed default tolerances. Part of the stable public contract: changing
# either literal changes the verdict of every assertion that relies on the
# default evaluator.
#
# Standard import pattern:
#   from approxeq.constants import (
#       DEFAULT_MARGIN,
#       DEFAULT_MULTIPLIER,
#   )


# ---------------------------------------------------------------------------
# DEFAULT TOLERANCES
# ---------------------------------------------------------------------------

DEFAULT_MARGIN:     float = 0.0001      # absolute difference
DEFAULT_MULTIPLIER: float = 0.000001    # relative to the larger magnitude


# ---------------------------------------------------------------------------
# ENVIRONMENT VARIABLES (read once per process by approxeq.config)
# ---------------------------------------------------------------------------

ENV_NAN_EQUALITY: str = "APPROXEQ_NAN_EQUALITY"
ENV_NULL_FEATURE: str = "APPROXEQ_NULL_FEATURE"
