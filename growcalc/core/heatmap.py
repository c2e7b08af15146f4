from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from growcalc.core.psychrometrics import vpd_for_reading
from growcalc.core.stages import color_for, get_stage_range
from growcalc.core.units import SOLVER_BAND, band

HUMIDITY_AXIS = (40.0, 80.0)
MIN_STEP = 0.1


@dataclass(frozen=True)
class HeatmapCell:
    temperature: float
    humidity: float
    vpd: float
    color: Tuple[int, int, int]


@dataclass(frozen=True)
class Heatmap:
    unit: str
    stage: str
    temperatures: List[float]
    humidities: List[float]
    cells: List[HeatmapCell]

    def marker(self, temperature: float, humidity: float) -> Tuple[float, float]:
        """
        Position of a reading on the chart as fractions (x, y) in [0, 1],
        y measured from the top (humidity grows upwards).
        """
        t_min, t_max = band(SOLVER_BAND, self.unit)
        h_min, h_max = HUMIDITY_AXIS
        x = (temperature - t_min) / (t_max - t_min)
        y = (h_max - humidity) / (h_max - h_min)
        return x, y

    def to_dict(self) -> Dict[str, Any]:
        return {
            "unit": self.unit,
            "stage": self.stage,
            "temperatures": self.temperatures,
            "humidities": self.humidities,
            "cells": [
                {"temperature": c.temperature, "humidity": c.humidity, "vpd": c.vpd, "color": list(c.color)}
                for c in self.cells
            ],
        }


def _axis(start: float, stop: float, step: float) -> List[float]:
    # Every value stays strictly below stop.
    count = math.ceil((stop - start) / step - 1e-9)
    return [round(start + i * step, 6) for i in range(count)]


def heatmap_grid(stage: str, unit: str, leaf_offset: Optional[float] = None, step: float = 1.0) -> Heatmap:
    if not math.isfinite(step) or step < MIN_STEP:
        raise ValueError(f"Heatmap step must be a number of at least {MIN_STEP}, got {step}")

    stage_range = get_stage_range(stage)
    temperatures = _axis(*band(SOLVER_BAND, unit), step)
    humidities = _axis(*HUMIDITY_AXIS, step)

    cells = []
    for temperature in temperatures:
        for humidity in humidities:
            vpd = vpd_for_reading(temperature, unit, humidity, leaf_offset)
            cells.append(HeatmapCell(temperature, humidity, vpd, color_for(vpd, stage_range)))

    return Heatmap(unit=unit, stage=stage, temperatures=temperatures, humidities=humidities, cells=cells)
