from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

# Reference DLI per week of the grow: (regular growth, high growth).
WEEKLY_DLI_GUIDE: List[Tuple[float, float]] = [
    (12, 16), (20, 25), (30, 38), (40, 50), (45, 55), (31, 45), (25, 35),
    (28, 38), (30, 42), (34, 45), (36, 48), (38, 50), (40, 50), (36, 45), (32, 40),
]

# Week spans per stage, end exclusive.
STAGE_WEEKS = {
    "seedling": (0, 2),
    "vegetative": (2, 8),
    "flowering": (8, 15),
}


@dataclass(frozen=True)
class DliGuide:
    week: int
    stage: str
    regular: float
    high: float


def daily_light_integral(ppfd: float, photoperiod_hours: float) -> float:
    """
    Compute DLI (mol·m⁻²·day⁻¹) from PPFD (µmol·m⁻²·s⁻¹)
    and photoperiod in hours.
    """
    return ppfd * photoperiod_hours * 3600 / 1_000_000


def dli_guide_for_week(week: int) -> DliGuide:
    if week < 0 or week >= len(WEEKLY_DLI_GUIDE):
        raise ValueError(f"Week {week} outside the DLI guide (0-{len(WEEKLY_DLI_GUIDE) - 1})")
    regular, high = WEEKLY_DLI_GUIDE[week]
    stage = next(name for name, (start, end) in STAGE_WEEKS.items() if start <= week < end)
    return DliGuide(week=week, stage=stage, regular=regular, high=high)


def compare_dli(dli: float, week: int) -> str:
    guide = dli_guide_for_week(week)
    if dli < guide.regular:
        return "below"
    if dli > guide.high:
        return "above"
    return "within"
