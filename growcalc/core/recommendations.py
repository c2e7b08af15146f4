from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from growcalc.core.psychrometrics import effective_temperature, vpd_for_reading
from growcalc.core.solver import (HUMIDITY_BAND, solve_temperature_for_target,
                                  temperature_band_reaches,
                                  unclamped_humidity_for_target)
from growcalc.core.units import to_celsius

ON_TARGET_TOLERANCE = 0.05

TOO_HIGH = "too_high"
TOO_LOW = "too_low"


@dataclass(frozen=True)
class Recommendation:
    variable: str  # "humidity" | "temperature"
    action: str  # "increase" | "decrease"
    change: float
    target: float
    unit: str
    text: str


@dataclass(frozen=True)
class RecommendationReport:
    current_vpd: float
    target_vpd: float
    difference: float
    on_target: bool
    direction: Optional[str]
    headline: str
    recommendations: List[Recommendation] = field(default_factory=list)

    @property
    def title(self) -> str:
        return f"Recommendations to reach {self.target_vpd:.1f} kPa"

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["title"] = self.title
        return data


def _humidity_candidate(humidity: float, target_humidity: float, too_high: bool) -> Recommendation:
    change = abs(target_humidity - humidity)
    if too_high:
        action, sign = "increase", "+"
    else:
        action, sign = "decrease", "-"
    return Recommendation(
        variable="humidity",
        action=action,
        change=change,
        target=target_humidity,
        unit="%",
        text=f"{action.capitalize()} humidity {sign}{change:.0f}% (to {target_humidity:.0f}%)",
    )


def _temperature_candidate(temperature: float, target_temperature: float, unit: str, too_high: bool) -> Recommendation:
    change = abs(temperature - target_temperature)
    if too_high:
        action, sign = "decrease", "-"
    else:
        action, sign = "increase", "+"
    return Recommendation(
        variable="temperature",
        action=action,
        change=change,
        target=target_temperature,
        unit=f"°{unit}",
        text=(
            f"{action.capitalize()} temperature {sign}{change:.1f}°{unit} "
            f"(to {target_temperature:.1f}°{unit})"
        ),
    )


def recommend(
    temperature: float,
    unit: str,
    humidity: float,
    target_vpd: float,
    leaf_offset: Optional[float] = None,
) -> RecommendationReport:
    """
    Single-variable adjustments that bring the current VPD to `target_vpd`.

    Humidity and air temperature are solved independently with the other one
    held at its current value. A candidate the instruments can't reach is
    left out.
    """
    current_vpd = vpd_for_reading(temperature, unit, humidity, leaf_offset)
    difference = current_vpd - target_vpd

    if abs(difference) <= ON_TARGET_TOLERANCE:
        return RecommendationReport(
            current_vpd=current_vpd,
            target_vpd=target_vpd,
            difference=difference,
            on_target=True,
            direction=None,
            headline="Perfect! You're right on target!",
        )

    too_high = difference > 0
    direction = TOO_HIGH if too_high else TOO_LOW
    recommendations: List[Recommendation] = []

    temperature_c = to_celsius(effective_temperature(temperature, leaf_offset), unit)
    target_humidity = unclamped_humidity_for_target(temperature_c, target_vpd)
    if HUMIDITY_BAND[0] < target_humidity < HUMIDITY_BAND[1]:
        recommendations.append(_humidity_candidate(humidity, target_humidity, too_high))

    if temperature_band_reaches(humidity, target_vpd, unit, leaf_offset):
        target_temperature = solve_temperature_for_target(humidity, target_vpd, unit, leaf_offset)
        recommendations.append(_temperature_candidate(temperature, target_temperature, unit, too_high))

    return RecommendationReport(
        current_vpd=current_vpd,
        target_vpd=target_vpd,
        difference=difference,
        on_target=False,
        direction=direction,
        headline=f"VPD is {abs(difference):.2f} kPa {'too high' if too_high else 'too low'}",
        recommendations=recommendations,
    )
