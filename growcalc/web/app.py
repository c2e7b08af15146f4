from __future__ import annotations

import logging
import math
from typing import Any, Dict, Optional

import redis
from flask import Flask, Response, jsonify, render_template, request

from growcalc.config import storage_config_from_env
from growcalc.core.evaluate import evaluate
from growcalc.core.heatmap import heatmap_grid
from growcalc.core.inputs import (DEFAULT_STAGE, CalculatorInputs,
                                  LeafTemperatureConfiguration,
                                  LightConfiguration)
from growcalc.core.light import compare_dli, dli_guide_for_week
from growcalc.core.stages import STAGE_RANGES
from growcalc.core.units import FAHRENHEIT
from growcalc.paths import TEMPLATES_DIR
from growcalc.readings import (build_reading, history_filename,
                               reading_filename, readings_to_csv, summarize)
from growcalc.store import CalculatorStore, redis_client_from_config
from growcalc.time import now

logger = logging.getLogger(__name__)


def _json_body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")
    return data


def _arg_float(name: str, default: Optional[float] = None) -> Optional[float]:
    value = request.args.get(name, default=default, type=float)
    if value is not None and not math.isfinite(value):
        raise ValueError(f"'{name}' must be a finite number")
    return value


def _csv_response(content: str, filename: str) -> Response:
    return Response(
        content,
        mimetype="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


def create_app(redis_client: Optional[redis.Redis] = None) -> Flask:
    app = Flask(__name__, template_folder=str(TEMPLATES_DIR))
    if redis_client is None:
        redis_client = redis_client_from_config()
    store = CalculatorStore(redis_client, storage_config_from_env())

    @app.errorhandler(ValueError)
    def handle_value_error(e: ValueError):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(redis.RedisError)
    def handle_redis_error(e: redis.RedisError):
        logger.error("Redis request failed: %s", e)
        return jsonify({"error": f"Storage unavailable: {e}"}), 500

    @app.route("/")
    def index():
        """
        Serve the calculator page.
        """
        return render_template("index.html", stages=STAGE_RANGES)

    @app.route("/api/evaluate", methods=["POST"])
    def evaluate_endpoint():
        """
        Evaluate one set of inputs.

        Body (JSON): flat settings snapshot (temperature, humidity, tempUnit,
        growthStage, useLeafTemp, leafTempOffset, useCustomTarget, targetVPD,
        useDLI, ppfd, photoperiod). Missing keys take defaults.
        """
        data = _json_body()
        inputs = CalculatorInputs.from_dict(data)
        return jsonify(evaluate(inputs).to_dict())

    @app.route("/api/heatmap", methods=["GET"])
    def heatmap_endpoint():
        """
        Heatmap cells for a stage and unit.
        Query params: stage, unit (F|C), leaf_offset (optional), step (default 1)
        """
        stage = request.args.get("stage", DEFAULT_STAGE)
        unit = request.args.get("unit", FAHRENHEIT).upper()
        offset = _arg_float("leaf_offset")
        step = _arg_float("step", 1.0)

        leaf = LeafTemperatureConfiguration(enabled=offset is not None, offset=offset or 0.0, unit=unit)
        grid = heatmap_grid(stage, unit, leaf_offset=leaf.effective_offset, step=step)
        return jsonify(grid.to_dict())

    @app.route("/api/dli", methods=["GET"])
    def dli_endpoint():
        """
        Daily Light Integral.
        Query params: ppfd, photoperiod, week (optional, compares against the weekly guide)
        """
        light = LightConfiguration(
            enabled=True,
            ppfd=_arg_float("ppfd", 500.0),
            photoperiod_hours=_arg_float("photoperiod", 12.0),
        )
        response = {"ppfd": light.ppfd, "photoperiod": light.photoperiod_hours, "dli": light.dli}

        week = request.args.get("week", type=int)
        if week is not None:
            guide = dli_guide_for_week(week)
            response["guide"] = {
                "week": guide.week,
                "stage": guide.stage,
                "regular": guide.regular,
                "high": guide.high,
                "comparison": compare_dli(light.dli, week),
            }

        return jsonify(response)

    # ===============================
    # Settings Endpoints
    # ===============================

    @app.route("/api/settings", methods=["GET"])
    def load_settings_endpoint():
        settings = store.load_settings()
        if settings is None:
            return jsonify({"error": "No saved settings found"}), 404
        return jsonify(settings)

    @app.route("/api/settings", methods=["POST"])
    def save_settings_endpoint():
        """
        Save the settings snapshot. Values are normalized (clamped) first.
        """
        data = _json_body()
        inputs = CalculatorInputs.from_dict(data)
        snapshot = store.save_settings(inputs.to_dict())
        return jsonify({"success": True, "settings": snapshot})

    @app.route("/api/settings", methods=["DELETE"])
    def clear_settings_endpoint():
        store.clear_settings()
        return jsonify({"success": True, "message": "Saved settings cleared"})

    # ===============================
    # Reading Log Endpoints
    # ===============================

    @app.route("/api/readings", methods=["GET"])
    def get_readings_endpoint():
        readings = store.get_readings()
        return jsonify({"readings": readings, "summary": summarize(readings)})

    @app.route("/api/readings", methods=["POST"])
    def log_reading_endpoint():
        """
        Evaluate the posted inputs and append the reading to the log.
        """
        data = _json_body()
        reading = build_reading(evaluate(CalculatorInputs.from_dict(data)))
        count = store.log_reading(reading)
        return jsonify({"success": True, "reading": reading, "count": count})

    @app.route("/api/readings", methods=["DELETE"])
    def clear_readings_endpoint():
        store.clear_readings()
        return jsonify({"success": True, "message": "All logged readings cleared"})

    @app.route("/api/readings.csv", methods=["GET"])
    def download_readings_endpoint():
        readings = store.get_readings()
        if not readings:
            return jsonify({"error": "No readings stored yet"}), 404
        return _csv_response(readings_to_csv(readings), history_filename(now()))

    @app.route("/api/reading.csv", methods=["POST"])
    def download_reading_endpoint():
        """
        One-row CSV of the posted inputs, without logging it.
        """
        data = _json_body()
        when = now()
        reading = build_reading(evaluate(CalculatorInputs.from_dict(data)), when)
        return _csv_response(readings_to_csv([reading]), reading_filename(when))

    return app


# Convenience for WSGI servers
app = create_app()
