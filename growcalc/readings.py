"""
Flat reading snapshots and their CSV export.
"""

from __future__ import annotations

import csv
import io
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from growcalc.core.evaluate import Evaluation
from growcalc.time import now

CSV_HEADER = [
    "Timestamp",
    "Local Time",
    "Temperature",
    "Unit",
    "Humidity (%)",
    "VPD (kPa)",
    "Growth Stage",
    "Target VPD",
    "Uses Leaf Temp",
    "Leaf Temp Offset",
    "DLI",
    "PPFD",
    "Photoperiod",
]

# Reading dict keys, in CSV column order.
READING_FIELDS = [
    "timestamp",
    "localTime",
    "temperature",
    "temperatureUnit",
    "humidity",
    "vpd",
    "growthStage",
    "targetVPD",
    "useLeafTemp",
    "leafTempOffset",
    "dli",
    "ppfd",
    "photoperiod",
]

NOT_AVAILABLE = "N/A"


def build_reading(evaluation: Evaluation, when: Optional[datetime] = None) -> Dict[str, Any]:
    when = when or now()
    inputs = evaluation.inputs
    light_on = inputs.light.enabled

    return {
        "timestamp": when.isoformat(),
        "localTime": when.strftime("%Y-%m-%d %H:%M:%S"),
        "temperature": f"{inputs.temperature:.1f}",
        "temperatureUnit": inputs.unit,
        "humidity": inputs.humidity,
        "vpd": f"{evaluation.vpd:.2f}",
        "growthStage": inputs.stage,
        "targetVPD": f"{evaluation.target_vpd:.1f}",
        "useLeafTemp": inputs.leaf.enabled,
        "leafTempOffset": f"{inputs.leaf.offset:.1f}" if inputs.leaf.enabled else NOT_AVAILABLE,
        "dli": f"{evaluation.dli:.1f}" if light_on else NOT_AVAILABLE,
        "ppfd": inputs.light.ppfd if light_on else NOT_AVAILABLE,
        "photoperiod": inputs.light.photoperiod_hours if light_on else NOT_AVAILABLE,
    }


def _csv_value(value: Any) -> Any:
    # Match the browser export: booleans as lowercase words.
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def readings_to_csv(readings: Iterable[Dict[str, Any]]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for reading in readings:
        writer.writerow([_csv_value(reading.get(name, "")) for name in READING_FIELDS])
    return buffer.getvalue()


def reading_filename(when: datetime) -> str:
    return f"vpd-reading-{when.strftime('%Y-%m-%d_%H-%M')}.csv"


def history_filename(when: datetime) -> str:
    return f"vpd-readings-history-{when.strftime('%Y-%m-%d')}.csv"


def summarize(readings: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Count and VPD min/avg/max over logged readings.
    """
    values = []
    for reading in readings:
        try:
            values.append(float(reading["vpd"]))
        except (KeyError, TypeError, ValueError):
            continue

    if not values:
        return {"count": len(readings), "vpd_min": None, "vpd_avg": None, "vpd_max": None}

    return {
        "count": len(readings),
        "vpd_min": round(min(values), 2),
        "vpd_avg": round(sum(values) / len(values), 2),
        "vpd_max": round(max(values), 2),
    }
