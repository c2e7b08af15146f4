from __future__ import annotations

from typing import Tuple

FAHRENHEIT = "F"
CELSIUS = "C"
UNITS: Tuple[str, str] = (FAHRENHEIT, CELSIUS)

# Allowed values of the temperature input.
INPUT_BAND = {FAHRENHEIT: (60.0, 95.0), CELSIUS: (15.0, 35.0)}
# Range the instruments (and the temperature solver) work within.
SOLVER_BAND = {FAHRENHEIT: (65.0, 85.0), CELSIUS: (18.0, 29.0)}
LEAF_OFFSET_BAND = {FAHRENHEIT: (1.0, 6.0), CELSIUS: (0.5, 3.0)}


def celsius_to_fahrenheit(c: float) -> float:
    return (c * 9 / 5) + 32


def fahrenheit_to_celsius(f: float) -> float:
    return (f - 32) * 5 / 9


def check_unit(unit: str) -> str:
    if unit not in UNITS:
        raise ValueError(f"Unknown temperature unit '{unit}'")
    return unit


def to_celsius(value: float, unit: str) -> float:
    if check_unit(unit) == FAHRENHEIT:
        return fahrenheit_to_celsius(value)
    return value


def from_celsius(value_c: float, unit: str) -> float:
    if check_unit(unit) == FAHRENHEIT:
        return celsius_to_fahrenheit(value_c)
    return value_c


def convert_temperature(value: float, from_unit: str, to_unit: str) -> float:
    return from_celsius(to_celsius(value, from_unit), to_unit)


def convert_offset(offset: float, from_unit: str, to_unit: str) -> float:
    """
    Convert a temperature difference (no 32° shift, only the scale changes).
    """
    check_unit(from_unit)
    check_unit(to_unit)
    if from_unit == to_unit:
        return offset
    if to_unit == CELSIUS:
        return offset * 5 / 9
    return offset * 9 / 5


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def band(table: dict, unit: str) -> Tuple[float, float]:
    return table[check_unit(unit)]
