"""
Immutable input values for the calculator.

Out-of-range values are clamped on construction rather than rejected: the
callers are UI widgets and a slightly wrong slider value should still give a
result. Unknown stages or units are the only thing refused.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional

from growcalc.core.light import daily_light_integral
from growcalc.core.stages import get_stage_range
from growcalc.core.units import (FAHRENHEIT, INPUT_BAND, LEAF_OFFSET_BAND,
                                 band, check_unit, clamp, convert_offset,
                                 convert_temperature)

TARGET_VPD_BAND = (0.4, 1.6)
HUMIDITY_INPUT_BAND = (30.0, 90.0)
PPFD_BAND = (100.0, 2000.0)
PHOTOPERIOD_BAND = (8.0, 24.0)

DEFAULT_TEMPERATURE_F = 75.0
DEFAULT_HUMIDITY = 60.0
DEFAULT_STAGE = "vegetative"
DEFAULT_LEAF_OFFSET_F = 3.0
DEFAULT_PPFD = 500.0
DEFAULT_PHOTOPERIOD = 12.0


@dataclass(frozen=True)
class TargetConfiguration:
    enabled: bool = False
    target_vpd: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "target_vpd", clamp(float(self.target_vpd), *TARGET_VPD_BAND))

    @classmethod
    def disabled_for(cls, stage: str) -> "TargetConfiguration":
        return cls(enabled=False, target_vpd=get_stage_range(stage).optimal)

    def resolve(self, stage: str) -> float:
        # A disabled custom target always falls back to the stage optimum.
        if not self.enabled:
            return get_stage_range(stage).optimal
        return self.target_vpd


@dataclass(frozen=True)
class LeafTemperatureConfiguration:
    enabled: bool = False
    offset: float = DEFAULT_LEAF_OFFSET_F
    unit: str = FAHRENHEIT

    def __post_init__(self) -> None:
        object.__setattr__(self, "offset", clamp(float(self.offset), *band(LEAF_OFFSET_BAND, self.unit)))

    @property
    def effective_offset(self) -> Optional[float]:
        return self.offset if self.enabled else None

    def with_unit(self, unit: str) -> "LeafTemperatureConfiguration":
        return replace(self, offset=convert_offset(self.offset, self.unit, unit), unit=unit)


@dataclass(frozen=True)
class LightConfiguration:
    enabled: bool = False
    ppfd: float = DEFAULT_PPFD
    photoperiod_hours: float = DEFAULT_PHOTOPERIOD

    def __post_init__(self) -> None:
        object.__setattr__(self, "ppfd", clamp(float(self.ppfd), *PPFD_BAND))
        object.__setattr__(self, "photoperiod_hours", clamp(float(self.photoperiod_hours), *PHOTOPERIOD_BAND))

    @property
    def dli(self) -> Optional[float]:
        if not self.enabled:
            return None
        return daily_light_integral(self.ppfd, self.photoperiod_hours)


@dataclass(frozen=True)
class CalculatorInputs:
    temperature: float = DEFAULT_TEMPERATURE_F
    unit: str = FAHRENHEIT
    humidity: float = DEFAULT_HUMIDITY
    stage: str = DEFAULT_STAGE
    leaf: LeafTemperatureConfiguration = field(default_factory=LeafTemperatureConfiguration)
    target: TargetConfiguration = field(default_factory=TargetConfiguration)
    light: LightConfiguration = field(default_factory=LightConfiguration)

    def __post_init__(self) -> None:
        check_unit(self.unit)
        get_stage_range(self.stage)
        if self.leaf.unit != self.unit:
            object.__setattr__(self, "leaf", self.leaf.with_unit(self.unit))
        object.__setattr__(self, "temperature", clamp(float(self.temperature), *band(INPUT_BAND, self.unit)))
        object.__setattr__(self, "humidity", clamp(float(self.humidity), *HUMIDITY_INPUT_BAND))

    @property
    def target_vpd(self) -> float:
        return self.target.resolve(self.stage)

    def with_unit(self, unit: str) -> "CalculatorInputs":
        """Same reading expressed in another temperature unit."""
        return replace(
            self,
            temperature=convert_temperature(self.temperature, self.unit, unit),
            unit=unit,
            leaf=self.leaf.with_unit(unit),
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CalculatorInputs":
        """
        Build inputs from a flat settings snapshot (the format the browser
        page posts and the settings store keeps).
        """
        unit = str(data.get("tempUnit") or FAHRENHEIT).upper()
        check_unit(unit)
        default_offset = convert_offset(DEFAULT_LEAF_OFFSET_F, FAHRENHEIT, unit)
        default_temperature = convert_temperature(DEFAULT_TEMPERATURE_F, FAHRENHEIT, unit)
        stage = str(data.get("growthStage") or DEFAULT_STAGE)

        target_enabled = _get_bool(data, "useCustomTarget")
        if target_enabled:
            target = TargetConfiguration(True, _get_float(data, "targetVPD", get_stage_range(stage).optimal))
        else:
            target = TargetConfiguration.disabled_for(stage)

        return cls(
            temperature=_get_float(data, "temperature", default_temperature),
            unit=unit,
            humidity=_get_float(data, "humidity", DEFAULT_HUMIDITY),
            stage=stage,
            leaf=LeafTemperatureConfiguration(
                enabled=_get_bool(data, "useLeafTemp"),
                offset=_get_float(data, "leafTempOffset", default_offset),
                unit=unit,
            ),
            target=target,
            light=LightConfiguration(
                enabled=_get_bool(data, "useDLI"),
                ppfd=_get_float(data, "ppfd", DEFAULT_PPFD),
                photoperiod_hours=_get_float(data, "photoperiod", DEFAULT_PHOTOPERIOD),
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "temperature": self.temperature,
            "humidity": self.humidity,
            "tempUnit": self.unit,
            "growthStage": self.stage,
            "targetVPD": self.target_vpd,
            "useLeafTemp": self.leaf.enabled,
            "leafTempOffset": self.leaf.offset,
            "useDLI": self.light.enabled,
            "useCustomTarget": self.target.enabled,
            "ppfd": self.light.ppfd,
            "photoperiod": self.light.photoperiod_hours,
        }


def _get_float(data: Mapping[str, Any], name: str, default: float) -> float:
    val = data.get(name)
    if val is None or val == "":
        return default
    if isinstance(val, bool):
        raise ValueError(f"'{name}' must be a number")
    try:
        number = float(val)
    except (TypeError, ValueError):
        raise ValueError(f"'{name}' must be a number") from None
    if not math.isfinite(number):
        raise ValueError(f"'{name}' must be a finite number")
    return number


def _get_bool(data: Mapping[str, Any], name: str) -> bool:
    val = data.get(name)
    if isinstance(val, bool):
        return val
    if val is None:
        return False
    return str(val).strip().lower() in ("true", "1", "on", "yes")
