from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from growcalc.core.inputs import CalculatorInputs
from growcalc.core.psychrometrics import effective_temperature, vpd_for_reading
from growcalc.core.recommendations import RecommendationReport, recommend
from growcalc.core.stages import (Classification, classify, color_for,
                                  get_stage_range, status_css_class,
                                  status_label)


@dataclass(frozen=True)
class Evaluation:
    inputs: CalculatorInputs
    vpd: float
    effective_temperature: float
    classification: Classification
    status_label: str
    status_class: str
    color: Tuple[int, int, int]
    target_vpd: float
    target_info: str
    recommendations: Optional[RecommendationReport]
    dli: Optional[float]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "inputs": self.inputs.to_dict(),
            "vpd": self.vpd,
            "effective_temperature": self.effective_temperature,
            "status_category": self.classification.category.value,
            "perfect": self.classification.perfect,
            "status_label": self.status_label,
            "status_class": self.status_class,
            "color": list(self.color),
            "target_vpd": self.target_vpd,
            "target_info": self.target_info,
            "recommendations": self.recommendations.to_dict() if self.recommendations else None,
            "dli": self.dli,
        }


def _target_info(inputs: CalculatorInputs) -> str:
    if not inputs.target.enabled:
        return f"Using optimal range for {inputs.stage} stage"
    if inputs.leaf.enabled:
        return f"Target: {inputs.target_vpd:.1f} kPa (using leaf temp)"
    return f"Target: {inputs.target_vpd:.1f} kPa"


def evaluate(inputs: CalculatorInputs) -> Evaluation:
    """
    Full recompute for one set of inputs: VPD, status, color, recommendations
    and (when light is enabled) DLI.
    """
    leaf_offset = inputs.leaf.effective_offset
    stage_range = get_stage_range(inputs.stage)

    vpd = vpd_for_reading(inputs.temperature, inputs.unit, inputs.humidity, leaf_offset)
    classification = classify(vpd, stage_range)
    target_vpd = inputs.target_vpd

    report = None
    if inputs.target.enabled:
        report = recommend(inputs.temperature, inputs.unit, inputs.humidity, target_vpd, leaf_offset)

    return Evaluation(
        inputs=inputs,
        vpd=vpd,
        effective_temperature=effective_temperature(inputs.temperature, leaf_offset),
        classification=classification,
        status_label=status_label(classification, inputs.stage),
        status_class=status_css_class(classification.category),
        color=color_for(vpd, stage_range),
        target_vpd=target_vpd,
        target_info=_target_info(inputs),
        recommendations=report,
        dli=inputs.light.dli,
    )
