"""
Conversion engine tests.
"""
import math

import pytest

from pressure_units import (
    InvalidNumberError,
    Pressure,
    UnsupportedUnitError,
    convert_pressure,
)
from pressure_units.pressure import format_number
from pressure_units.units import UNITS

IDS = [u.identifier for u in UNITS]


def test_from_bar():
    p = Pressure(1, "Bar")
    assert p.to_value() == 100000
    assert p.to_value("Pa") == 100000
    assert p.to_string() == "100000 Pa"
    assert str(p) == "100000 Pa"


def test_from_pascal_default():
    p = Pressure(100000)
    assert p.to_value("Bar") == 1
    assert p.to_string("Bar") == "1 bar"


def test_from_atm_and_torr():
    assert Pressure(1, "atm").to_value("Pa") == 101325
    assert Pressure(1, "Torr").to_value("Pa") == pytest.approx(133.32236842105263, rel=1e-12)
    assert Pressure(760, "Torr").to_value("Standard Atmosphere") == pytest.approx(1.0, rel=1e-12)


def test_convert_psi_to_pa():
    assert convert_pressure(14.6959, "psi", "Pa") == pytest.approx(101325, rel=1e-5)
    assert convert_pressure(1, "at", "Technical Atmosphere") == 1


def test_to_object_covers_every_unit():
    obj = Pressure(2.5, "atm").to_object()
    assert list(obj) == IDS


def test_to_object_returns_a_copy():
    p = Pressure(1, "bar")
    obj = p.to_object()
    obj["Pa"] = 0
    assert p.to_value("Pa") == 100000
    with pytest.raises(TypeError):
        p.table["Pa"] = 0


@pytest.mark.parametrize("source", IDS)
@pytest.mark.parametrize("value", [0.1, 1.0, 3.3333333, 12345.678, -42.0])
def test_source_value_preserved_exactly(source, value):
    assert Pressure(value, source).to_value(source) == value


@pytest.mark.parametrize("source", IDS)
@pytest.mark.parametrize("target", IDS)
@pytest.mark.parametrize("x", [987.654321, 1e-12, 1e12, -3.5, 0.0])
def test_round_trip(source, target, x):
    there = convert_pressure(x, source, target)
    back = convert_pressure(there, target, source)
    assert back == pytest.approx(x, rel=1e-9)


def test_infinity_propagates():
    p = Pressure(float("inf"), "bar")
    assert p.to_value("Pa") == math.inf
    assert p.to_string("psi") == "Infinity psi"
    assert Pressure(float("-inf")).to_value("atm") == -math.inf


@pytest.mark.parametrize("unit", ["Pa", "bar", "Torr"])
def test_nan_rejected(unit):
    with pytest.raises(InvalidNumberError) as exc_info:
        Pressure(float("nan"), unit)
    assert math.isnan(exc_info.value.value)
    assert exc_info.value.parameter_name == "fromValue"


@pytest.mark.parametrize("bad", ["1", None, True, 1j])
def test_non_numbers_rejected(bad):
    with pytest.raises(InvalidNumberError):
        Pressure(bad)


@pytest.mark.parametrize("big", [10 ** 400, -(10 ** 400)])
def test_int_out_of_float_range_rejected(big):
    with pytest.raises(InvalidNumberError) as exc_info:
        Pressure(big, "bar")
    assert exc_info.value.value == big
    assert exc_info.value.parameter_name == "fromValue"


def test_large_int_within_float_range_accepted():
    p = Pressure(10 ** 300)
    assert p.to_value() == 10 ** 300
    assert p.to_value("bar") == pytest.approx(1e295)


def test_nan_checked_before_unit():
    with pytest.raises(InvalidNumberError):
        Pressure(float("nan"), "XYZ")


def test_unsupported_units_name_their_parameter():
    with pytest.raises(UnsupportedUnitError) as exc_info:
        Pressure(1, "XYZ")
    assert exc_info.value.parameter_name == "fromUnit"

    p = Pressure(1)
    with pytest.raises(UnsupportedUnitError) as exc_info:
        p.to_value("XYZ")
    assert exc_info.value.parameter_name == "toUnit"
    with pytest.raises(UnsupportedUnitError):
        p.to_string("kPa")


def test_static_unit_meta():
    assert Pressure.unit("Torr").symbol_ascii == "Torr"
    assert Pressure.unit().is_si_unit
    metas = Pressure.units()
    assert len(metas) == 6
    assert sum(m.is_si_unit for m in metas) == 1


def test_format_number():
    assert format_number(100000.0) == "100000"
    assert format_number(1) == "1"
    assert format_number(-0.0) == "0"
    assert format_number(133.32236842105263) == "133.32236842105263"
    assert format_number(1e21) == "1e+21"
    assert format_number(float("inf")) == "Infinity"
    assert format_number(float("-inf")) == "-Infinity"
    assert format_number(0.00001) == "1e-5"
    assert format_number(1.5e22) == "1.5e+22"
    assert format_number(0.001) == "0.001"
