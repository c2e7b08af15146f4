from __future__ import annotations

import math
from typing import Optional

from growcalc.core.units import to_celsius


def saturation_vapor_pressure(temperature_c: float) -> float:
    """
    Saturation vapor pressure (kPa) using the Tetens formula.
    """
    return 0.6108 * math.exp((17.27 * temperature_c) / (temperature_c + 237.3))


def vapor_pressure_deficit(temperature_c: float, humidity_percent: float) -> float:
    """
    Calculate Vapor Pressure Deficit (VPD) in kPa.
    """
    svp = saturation_vapor_pressure(temperature_c)
    return svp * (1 - humidity_percent / 100.0)


def effective_temperature(air_temperature: float, leaf_offset: Optional[float] = None) -> float:
    """
    Temperature the VPD is computed at, in the caller's unit.

    With leaf mode on the leaf sits `leaf_offset` degrees below the air.
    """
    if leaf_offset is None:
        return air_temperature
    return air_temperature - leaf_offset


def vpd_for_reading(
    air_temperature: float,
    unit: str,
    humidity_percent: float,
    leaf_offset: Optional[float] = None,
) -> float:
    # Pick leaf vs air first, then convert: the offset is expressed in `unit`.
    temperature_c = to_celsius(effective_temperature(air_temperature, leaf_offset), unit)
    return vapor_pressure_deficit(temperature_c, humidity_percent)
