"""
Growth-stage VPD ranges, status classification and the heatmap color ramp.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

# Margins around the optimal band.
LOW_MARGIN = 0.2
HIGH_MARGIN = 0.4
PERFECT_TOLERANCE = 0.1

DANGER_LOW_COLOR: Tuple[int, int, int] = (142, 68, 173)
DANGER_HIGH_COLOR: Tuple[int, int, int] = (139, 0, 0)


@dataclass(frozen=True)
class StageRange:
    min: float
    max: float
    optimal: float


STAGE_RANGES: Dict[str, StageRange] = {
    "seedling": StageRange(min=0.4, max=0.8, optimal=0.6),
    "vegetative": StageRange(min=0.8, max=1.2, optimal=1.0),
    "flowering": StageRange(min=1.0, max=1.5, optimal=1.25),
}
STAGES = tuple(STAGE_RANGES)


class VpdStatus(str, Enum):
    DANGEROUSLY_LOW = "dangerously_low"
    TOO_LOW = "too_low"
    OPTIMAL = "optimal"
    TOO_HIGH = "too_high"
    DANGEROUSLY_HIGH = "dangerously_high"


@dataclass(frozen=True)
class Classification:
    category: VpdStatus
    perfect: bool = False


_CSS_CLASSES = {
    VpdStatus.DANGEROUSLY_LOW: "status-danger",
    VpdStatus.TOO_LOW: "status-low",
    VpdStatus.OPTIMAL: "status-optimal",
    VpdStatus.TOO_HIGH: "status-high",
    VpdStatus.DANGEROUSLY_HIGH: "status-danger",
}


def get_stage_range(stage: str) -> StageRange:
    try:
        return STAGE_RANGES[stage]
    except KeyError:
        raise ValueError(f"Unknown stage '{stage}'") from None


def stage_display_name(stage: str) -> str:
    get_stage_range(stage)
    return stage[:1].upper() + stage[1:]


def classify(vpd_kpa: float, stage_range: StageRange) -> Classification:
    # Ties go to the category nearer optimal: exactly `min` is OPTIMAL.
    if vpd_kpa < stage_range.min - LOW_MARGIN:
        return Classification(VpdStatus.DANGEROUSLY_LOW)
    if vpd_kpa < stage_range.min:
        return Classification(VpdStatus.TOO_LOW)
    if vpd_kpa <= stage_range.max:
        perfect = abs(vpd_kpa - stage_range.optimal) <= PERFECT_TOLERANCE
        return Classification(VpdStatus.OPTIMAL, perfect=perfect)
    if vpd_kpa <= stage_range.max + HIGH_MARGIN:
        return Classification(VpdStatus.TOO_HIGH)
    return Classification(VpdStatus.DANGEROUSLY_HIGH)


def status_label(classification: Classification, stage: str) -> str:
    category = classification.category
    if category == VpdStatus.DANGEROUSLY_LOW:
        return "Dangerously Low - Risk of mold/mildew"
    if category == VpdStatus.TOO_LOW:
        return "Too Low - Slow transpiration"
    if category == VpdStatus.OPTIMAL:
        name = stage_display_name(stage)
        return f"Perfect for {name}!" if classification.perfect else f"Good for {name}"
    if category == VpdStatus.TOO_HIGH:
        return "Too High - Stress risk"
    return "Dangerously High - Plant stress"


def status_css_class(category: VpdStatus) -> str:
    return _CSS_CLASSES[category]


def color_for(vpd_kpa: float, stage_range: StageRange) -> Tuple[int, int, int]:
    """
    RGB color for a VPD value, shared by the status dot and heatmap cells.

    Purple below the range, green peaking at the optimal value, orange to
    red-orange above the range and dark red past the high margin.
    """
    low_edge = stage_range.min - LOW_MARGIN
    if vpd_kpa < low_edge:
        return DANGER_LOW_COLOR
    if vpd_kpa < stage_range.min:
        factor = (vpd_kpa - low_edge) / LOW_MARGIN
        return (
            math.floor(142 - 90 * factor),
            math.floor(68 + 84 * factor),
            math.floor(173 + 46 * factor),
        )
    if vpd_kpa <= stage_range.max:
        center = stage_range.optimal
        max_distance = max(center - stage_range.min, stage_range.max - center)
        intensity = max(0.0, 1 - abs(vpd_kpa - center) / max_distance)
        return (
            math.floor(39 + 20 * (1 - intensity)),
            math.floor(174 + 80 * intensity),
            math.floor(96 + 20 * (1 - intensity)),
        )
    if vpd_kpa <= stage_range.max + HIGH_MARGIN:
        factor = (vpd_kpa - stage_range.max) / HIGH_MARGIN
        return (
            math.floor(230 + 25 * factor),
            math.floor(126 - 50 * factor),
            math.floor(34 - 10 * factor),
        )
    return DANGER_HIGH_COLOR
