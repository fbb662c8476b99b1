import math

import pytest

from frametree.units import (
    AngleUnit,
    LengthUnit,
    Quantity,
    as_radians,
    centimeter,
    converter,
    degree,
    kilometer,
    meter,
    millimeter,
    radian,
    to_radians,
)


class TestLength:
    def test_converter(self):
        assert converter(meter, meter) == 1.0
        assert converter(kilometer, meter) == 1000.0
        assert converter(millimeter, meter) == pytest.approx(1e-3)
        assert converter(meter, centimeter) == pytest.approx(100.0)

    def test_convert(self):
        assert meter.convert(1500.0, millimeter) == pytest.approx(1.5)
        assert millimeter.convert(2.0, kilometer) == pytest.approx(2e6)

    def test_custom_unit(self):
        inch = LengthUnit("inch", "in", 0.0254)
        assert millimeter.convert(1.0, inch) == pytest.approx(25.4)

    def test_non_positive_size_rejected(self):
        with pytest.raises(ValueError, match="meters must be positive"):
            LengthUnit("nothing", "0", 0.0)


class TestAngle:
    def test_to_radians(self):
        assert to_radians(180.0, degree) == pytest.approx(math.pi)
        assert to_radians(1.0, radian) == 1.0
        assert degree.convert(math.pi / 2, radian) == pytest.approx(90.0)

    def test_as_radians(self):
        assert as_radians(Quantity(90.0, degree)) == pytest.approx(math.pi / 2)
        assert as_radians(0.25) == 0.25
        assert as_radians(1) == 1.0

    def test_non_positive_size_rejected(self):
        with pytest.raises(ValueError):
            AngleUnit("bad", "?", -1.0)


class TestQuantity:
    def test_convert(self):
        q = Quantity(1500.0, millimeter).convert(meter)
        assert q.unit is meter
        assert q.value == pytest.approx(1.5)

    def test_convert_same_unit_is_identity(self):
        q = Quantity(2.0, meter)
        assert q.convert(meter) is q

    def test_equality_uses_unit_identity(self):
        assert Quantity(1.0, meter) == Quantity(1.0, meter)
        assert Quantity(1.0, meter) != Quantity(1000.0, millimeter)
        assert Quantity(1.0, meter) != Quantity(1.0, radian)
        assert hash(Quantity(1.0, meter)) == hash(Quantity(1.0, meter))

    def test_value_is_float(self):
        q = Quantity(3, degree)
        assert isinstance(q.value, float)
        assert repr(q) == "Quantity(3.0, deg)"
