import math

import pytest

from growcalc.core.psychrometrics import (effective_temperature,
                                          saturation_vapor_pressure,
                                          vapor_pressure_deficit,
                                          vpd_for_reading)
from growcalc.core.units import (celsius_to_fahrenheit, convert_offset,
                                 convert_temperature, fahrenheit_to_celsius,
                                 to_celsius)


@pytest.mark.parametrize("c", [-40.0, -3.7, 0.0, 18.0, 23.889, 37.5, 50.0])
def test_celsius_fahrenheit_round_trip(c):
    assert fahrenheit_to_celsius(celsius_to_fahrenheit(c)) == pytest.approx(c, abs=1e-9)


def test_known_conversions():
    assert celsius_to_fahrenheit(100) == pytest.approx(212)
    assert fahrenheit_to_celsius(32) == pytest.approx(0)
    assert convert_temperature(75, "F", "C") == pytest.approx(23.8889, abs=1e-4)
    assert convert_temperature(20, "C", "C") == 20


def test_offset_conversion_scales_without_shift():
    assert convert_offset(9, "F", "C") == pytest.approx(5)
    assert convert_offset(5, "C", "F") == pytest.approx(9)
    assert convert_offset(3, "F", "F") == 3


def test_unknown_unit_rejected():
    with pytest.raises(ValueError):
        to_celsius(20, "K")


def test_svp_reference_value():
    assert saturation_vapor_pressure(20) == pytest.approx(2.338, abs=0.01)
    assert saturation_vapor_pressure(0) == pytest.approx(0.6108)


def test_vpd_monotonic_in_temperature():
    values = [vapor_pressure_deficit(t, 55) for t in range(-10, 45)]
    assert all(b > a for a, b in zip(values, values[1:]))


def test_vpd_monotonic_in_humidity():
    values = [vapor_pressure_deficit(24, h) for h in range(1, 100)]
    assert all(b < a for a, b in zip(values, values[1:]))


def test_vpd_non_negative_over_humidity_range():
    assert vapor_pressure_deficit(25, 100) == 0
    assert all(vapor_pressure_deficit(25, h) >= 0 for h in range(0, 101))


def test_vpd_at_75f_60_percent():
    vpd = vpd_for_reading(75, "F", 60)
    assert vpd == pytest.approx(1.186, abs=0.005)
    assert 0.8 <= vpd <= 1.2


def test_leaf_offset_applied_before_unit_conversion():
    assert effective_temperature(75, 3) == 72
    assert effective_temperature(75) == 75
    expected = vapor_pressure_deficit(fahrenheit_to_celsius(72), 60)
    assert vpd_for_reading(75, "F", 60, leaf_offset=3) == pytest.approx(expected)


def test_same_reading_in_either_unit():
    f = vpd_for_reading(77, "F", 50)
    c = vpd_for_reading(25, "C", 50)
    assert math.isclose(f, c, rel_tol=1e-12)
