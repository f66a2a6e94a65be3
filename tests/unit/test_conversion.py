from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from approxeq import SupportsToFloat, evaluate_scalar_eq_approx, to_float


class Meters:
    """Numeric-like type participating through to_float()."""

    def __init__(self, value):
        self.value = value

    def to_float(self):
        return self.value


class Ratio:
    """Numeric-like type participating through __float__."""

    def __init__(self, num, den):
        self.num = num
        self.den = den

    def __float__(self):
        return self.num / self.den


class Opaque:
    pass


class TestToFloat:
    """to_float -- registered types, protocol fallbacks, rejected types."""

    def test_float_passthrough(self):
        assert to_float(1.5) == 1.5
        assert type(to_float(1.5)) is float

    def test_int(self):
        assert to_float(3) == 3.0
        assert type(to_float(3)) is float

    def test_bool(self):
        assert to_float(True) == 1.0

    def test_huge_int_overflows(self):
        with pytest.raises(OverflowError):
            to_float(10 ** 400)

    @pytest.mark.parametrize("value", [
        np.float16(0.5), np.float32(0.5), np.float64(0.5), np.int8(1), np.uint64(1),
    ])
    def test_numpy_scalars(self, value):
        assert type(to_float(value)) is float
        assert to_float(value) == float(value)

    def test_fraction_and_decimal(self):
        assert to_float(Fraction(3, 4)) == 0.75
        assert to_float(Decimal("2.5")) == 2.5

    def test_to_float_protocol(self):
        assert isinstance(Meters(2.0), SupportsToFloat)
        assert to_float(Meters(2.0)) == 2.0
        assert type(to_float(Meters(2))) is float

    def test_dunder_float(self):
        assert to_float(Ratio(1, 4)) == 0.25

    @pytest.mark.parametrize("value", [
        "1.0", b"1.0", 1 + 0j, np.complex128(1.0), None, Opaque(), [1.0],
    ])
    def test_rejected(self, value):
        with pytest.raises(TypeError, match="not convertible to float"):
            to_float(value)

    def test_registration_extends_adapter(self):
        class Cents:
            def __init__(self, cents):
                self.cents = cents

        @to_float.register(Cents)
        def _(value):
            return value.cents / 100.0

        assert to_float(Cents(250)) == 2.5
        assert evaluate_scalar_eq_approx(Cents(250), 2.5).is_equal
