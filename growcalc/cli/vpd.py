#!/usr/bin/env python

"""
Terminal VPD calculator.
Evaluates one reading and prints status, recommendations and DLI.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from growcalc.core.evaluate import Evaluation, evaluate
from growcalc.core.heatmap import Heatmap, heatmap_grid
from growcalc.core.inputs import (CalculatorInputs, LeafTemperatureConfiguration,
                                  LightConfiguration, TargetConfiguration)
from growcalc.core.stages import STAGES, VpdStatus

STATUS_ICONS = {
    VpdStatus.DANGEROUSLY_LOW: "🟣",
    VpdStatus.TOO_LOW: "🔵",
    VpdStatus.OPTIMAL: "🟢",
    VpdStatus.TOO_HIGH: "🟠",
    VpdStatus.DANGEROUSLY_HIGH: "🔴",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="VPD / DLI calculator")
    parser.add_argument("temperature", type=float, help="Air temperature")
    parser.add_argument("humidity", type=float, help="Relative humidity (%%)")
    parser.add_argument("--unit", choices=["F", "C"], default="F", help="Temperature unit (default F)")
    parser.add_argument("--stage", choices=STAGES, default="vegetative", help="Growth stage")
    parser.add_argument(
        "--leaf-offset",
        type=float,
        help="Use leaf temperature = air - offset (same unit as temperature)",
    )
    parser.add_argument("--target", type=float, help="Custom target VPD (kPa); enables recommendations")
    parser.add_argument("--ppfd", type=float, help="PPFD (µmol/m²/s); enables DLI")
    parser.add_argument("--photoperiod", type=float, default=12.0, help="Photoperiod hours (default 12)")
    parser.add_argument("--heatmap", action="store_true", help="Print the VPD heatmap (24-bit color terminal)")
    return parser


def inputs_from_args(args: argparse.Namespace) -> CalculatorInputs:
    if args.target is None:
        target = TargetConfiguration.disabled_for(args.stage)
    else:
        target = TargetConfiguration(enabled=True, target_vpd=args.target)

    leaf = LeafTemperatureConfiguration().with_unit(args.unit)
    if args.leaf_offset is not None:
        leaf = LeafTemperatureConfiguration(enabled=True, offset=args.leaf_offset, unit=args.unit)

    light = LightConfiguration(enabled=False)
    if args.ppfd is not None:
        light = LightConfiguration(enabled=True, ppfd=args.ppfd, photoperiod_hours=args.photoperiod)

    return CalculatorInputs(
        temperature=args.temperature,
        unit=args.unit,
        humidity=args.humidity,
        stage=args.stage,
        leaf=leaf,
        target=target,
        light=light,
    )


def format_evaluation(result: Evaluation) -> List[str]:
    inputs = result.inputs
    lines = [
        f"🌡️  {inputs.temperature:.1f}°{inputs.unit}  💧 {inputs.humidity:.0f}%",
        f"{STATUS_ICONS[result.classification.category]} VPD {result.vpd:.2f} kPa - {result.status_label}",
        f"🎯 {result.target_info}",
    ]
    if inputs.leaf.enabled:
        lines.append(f"🍃 Leaf temperature {result.effective_temperature:.1f}°{inputs.unit}")

    report = result.recommendations
    if report is not None:
        if report.on_target:
            lines.append(f"✅ {report.headline}")
        else:
            lines.append(f"💡 {report.title}: {report.headline}")
            if not report.recommendations:
                lines.append("   No single adjustment within instrument range")
            for rec in report.recommendations:
                lines.append(f"   - {rec.text}")

    if result.dli is not None:
        lines.append(
            f"☀️  DLI {result.dli:.1f} mol/m²/day "
            f"({inputs.light.ppfd:.0f} µmol/m²/s × {inputs.light.photoperiod_hours:g} h)"
        )
    return lines


def format_heatmap(grid: Heatmap) -> List[str]:
    lines = []
    for humidity in reversed(grid.humidities):
        row = [c for c in grid.cells if c.humidity == humidity]
        cells = "".join(f"\x1b[48;2;{r};{g};{b}m  " for r, g, b in (c.color for c in row))
        lines.append(f"{humidity:>4.0f}% {cells}\x1b[0m")
    first, last = grid.temperatures[0], grid.temperatures[-1]
    lines.append(f"      {first:.0f}°{grid.unit} → {last:.0f}°{grid.unit}")
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    inputs = inputs_from_args(args)
    result = evaluate(inputs)

    for line in format_evaluation(result):
        print(line)

    if args.heatmap:
        print()
        grid = heatmap_grid(inputs.stage, inputs.unit, leaf_offset=inputs.leaf.effective_offset)
        for line in format_heatmap(grid):
            print(line)

    return 0


if __name__ == "__main__":
    sys.exit(main())
