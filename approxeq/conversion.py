# approxeq/conversion.py
# to_float -- narrow adapter turning numeric-like values into Python floats.
#
# The comparison engines never call float() directly on a comparand; every
# value passes through to_float(), so any type that implements
# SupportsToFloat, defines __float__, or is registered with
# to_float.register(...) can be compared.
#
# No silent coercion: strings, complex numbers and arbitrary objects are
# rejected with TypeError rather than parsed or truncated.

from __future__ import annotations

from functools import singledispatch
from typing import Any, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class SupportsToFloat(Protocol):
    """A type that knows how to present itself as a float for comparison."""

    def to_float(self) -> float: ...


def _reject(value: Any) -> float:
    raise TypeError(
        "to_float: value of type "
        + type(value).__name__
        + " is not convertible to float: "
        + repr(value)
    )


@singledispatch
def to_float(value: Any) -> float:
    """
    Convert *value* to a Python float.

    Resolution order for unregistered types:
      1. value.to_float()  (SupportsToFloat)
      2. value.__float__()
      3. TypeError
    """
    if isinstance(value, SupportsToFloat):
        return float(value.to_float())
    if hasattr(type(value), "__float__"):
        return float(value)
    return _reject(value)


@to_float.register(float)
def _(value: float) -> float:
    return float(value)


@to_float.register(int)
def _(value: int) -> float:
    # OverflowError for ints beyond float range propagates; clamping to inf
    # would make 10**400 and 10**401 compare equal.
    return float(value)


@to_float.register(np.floating)
@to_float.register(np.integer)
def _(value: Any) -> float:
    return float(value)


@to_float.register(complex)
@to_float.register(np.complexfloating)
@to_float.register(str)
@to_float.register(bytes)
def _(value: Any) -> float:
    return _reject(value)


__all__ = [
    "SupportsToFloat",
    "to_float",
]
