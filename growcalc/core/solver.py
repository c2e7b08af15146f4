from __future__ import annotations

from typing import NamedTuple, Optional

from growcalc.core.psychrometrics import saturation_vapor_pressure, vpd_for_reading
from growcalc.core.units import SOLVER_BAND, band, clamp

HUMIDITY_BAND = (30.0, 90.0)
MAX_ITERATIONS = 20
VPD_TOLERANCE = 0.01


class TemperatureSearch(NamedTuple):
    temperature: float
    iterations: int
    converged: bool


def unclamped_humidity_for_target(temperature_c: float, target_vpd_kpa: float) -> float:
    svp = saturation_vapor_pressure(temperature_c)
    avp = svp - target_vpd_kpa
    return (avp / svp) * 100


def solve_humidity_for_target(temperature_c: float, target_vpd_kpa: float) -> float:
    """
    Relative humidity needed to reach a target VPD at a given temperature.

    Clamped to the humidity band; callers check the unclamped value when
    they need to know whether the target is actually reachable.
    """
    return clamp(unclamped_humidity_for_target(temperature_c, target_vpd_kpa), *HUMIDITY_BAND)


def search_temperature_for_target(
    humidity_percent: float,
    target_vpd_kpa: float,
    unit: str,
    leaf_offset: Optional[float] = None,
) -> TemperatureSearch:
    """
    Bisect the air temperature (in `unit`) that gives the target VPD.

    VPD grows with temperature at fixed humidity, so plain bisection over the
    solver band works. Work is capped at MAX_ITERATIONS; without convergence
    the midpoint of the last bracket is returned.
    """
    low, high = band(SOLVER_BAND, unit)

    for i in range(MAX_ITERATIONS):
        mid = (low + high) / 2
        vpd = vpd_for_reading(mid, unit, humidity_percent, leaf_offset)

        if abs(vpd - target_vpd_kpa) < VPD_TOLERANCE:
            return TemperatureSearch(mid, i + 1, True)

        if vpd > target_vpd_kpa:
            high = mid
        else:
            low = mid

    return TemperatureSearch((low + high) / 2, MAX_ITERATIONS, False)


def solve_temperature_for_target(
    humidity_percent: float,
    target_vpd_kpa: float,
    unit: str,
    leaf_offset: Optional[float] = None,
) -> float:
    return search_temperature_for_target(humidity_percent, target_vpd_kpa, unit, leaf_offset).temperature


def temperature_band_reaches(
    humidity_percent: float,
    target_vpd_kpa: float,
    unit: str,
    leaf_offset: Optional[float] = None,
) -> bool:
    low, high = band(SOLVER_BAND, unit)
    vpd_low = vpd_for_reading(low, unit, humidity_percent, leaf_offset)
    vpd_high = vpd_for_reading(high, unit, humidity_percent, leaf_offset)
    return vpd_low <= target_vpd_kpa <= vpd_high
