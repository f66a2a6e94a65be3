# approxeq/config.py
# Process-wide settings: the NaN-equality flag and the no-op flag.
#
# Both flags are read from the environment once, when the approxeq package is
# imported, and are then fixed for the lifetime of the process. A malformed
# flag raises InvalidConfigurationError at that point, never from a
# comparison. reload_settings() re-reads the environment and replaces the
# cached settings only when the new values parse.

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .constants import ENV_NAN_EQUALITY, ENV_NULL_FEATURE
from .exceptions import InvalidConfigurationError

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "t", "yes", "y", "on"}
_FALSE_VALUES = {"0", "false", "f", "no", "n", "off"}

_SETTINGS: Optional["Settings"] = None


@dataclass(frozen=True)
class Settings:
    """
    Comparison settings.

    Fields:
      nan_equality -- when True, NaN compared against NaN is EXACTLY_EQUAL.
                      NaN against any other value is always UNEQUAL.
      null_feature -- has no effect. Lets driver scripts always pass a flag.
    """
    nan_equality: bool = False
    null_feature: bool = False


def env_bool(name: str, or_value: bool = False, *, environ: Optional[Mapping[str, str]] = None) -> bool:
    """Fetch an environment variable and coerce it to ``bool``."""

    source = os.environ if environ is None else environ
    raw = source.get(name)
    if raw is None:
        return or_value
    value = raw.strip().lower()
    if value == "":
        return or_value
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise InvalidConfigurationError(
        field_name=name,
        value=raw,
        constraint="must be one of " + ", ".join(sorted(_TRUE_VALUES | _FALSE_VALUES)),
    )


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build a Settings instance from *environ* (defaults to ``os.environ``)."""

    settings = Settings(
        nan_equality=env_bool(ENV_NAN_EQUALITY, environ=environ),
        null_feature=env_bool(ENV_NULL_FEATURE, environ=environ),
    )
    logger.debug(
        f"Loaded approxeq settings: nan_equality={settings.nan_equality}, "
        f"null_feature={settings.null_feature}"
    )
    return settings


def get_settings() -> Settings:
    """Return the process-wide settings, loading them if nothing is cached yet."""
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = load_settings()
    return _SETTINGS


def reload_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Re-read the flags and cache the result.

    Raises InvalidConfigurationError on a malformed flag; the previously
    cached settings are kept in that case.
    """
    global _SETTINGS
    settings = load_settings(environ)
    _SETTINGS = settings
    return settings


__all__ = [
    "Settings",
    "env_bool",
    "get_settings",
    "load_settings",
    "reload_settings",
]
