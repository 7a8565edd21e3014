from __future__ import annotations

import logging
from typing import Any, Mapping

from coloraide import Color
from flask import Flask, jsonify, request

from .colorops import choose_text_color
from .colorspace import FormatError
from .palette import PalettePlan, generate_palettes
from .population import SimulationParams, simulate
from .random_palette import random_plan

log = logging.getLogger(__name__)

DEFAULT_CONFIG: Mapping[str, Any] = {
    "PALETTE_COUNT_DEFAULT": 4,
    "RANDOM_SIZE_DEFAULT": 5,
    "RANDOM_SIZE_MAX": 12,
    "SIMULATION_MAX_STEPS": 10000,
    "SIMULATION_DEFAULTS": {
        "alpha": 1.1,
        "beta": 0.4,
        "gamma": 0.4,
        "delta": 0.1,
        "prey_initial": 10.0,
        "predator_initial": 5.0,
        "steps": 200,
        "dt": 0.05,
    },
    "LOG_LEVEL": "INFO",
}


def css_hsl(hex_color: str) -> str:
    """CSS `hsl()` form of a swatch colour."""
    return Color(hex_color).convert("hsl").to_string(precision=3)


def swatch(entry_hex: str, role: str, is_accent: bool) -> dict[str, Any]:
    return {
        "hex": entry_hex.upper(),
        "role": role,
        "accent": is_accent,
        "text": choose_text_color(entry_hex),
        "css": css_hsl(entry_hex),
    }


def plan_payload(plan: PalettePlan) -> dict[str, Any]:
    payload = plan.to_dict()
    payload["colors"] = [
        swatch(c["color"], c["role"], c["is_accent"]) for c in payload["colors"]
    ]
    return payload


def _int_arg(name: str, default: int) -> int:
    raw = request.args.get(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


# ----------------------------- Flask app ----------------------------------


def create_app(config: Mapping[str, Any] | None = None) -> Flask:
    app = Flask(__name__)
    app.config.from_mapping(DEFAULT_CONFIG)
    app.config.from_prefixed_env("CHROMIND")
    if config:
        app.config.from_mapping(config)
    logging.basicConfig(
        level=app.config["LOG_LEVEL"], format="%(levelname)s: %(message)s"
    )

    @app.route("/palette")
    def palette():
        base = request.args.get("base", "")
        try:
            count = _int_arg("count", app.config["PALETTE_COUNT_DEFAULT"])
        except ValueError:
            return jsonify({"error": "count must be an integer"}), 400
        try:
            plans = generate_palettes(base, count)
        except FormatError as e:
            return jsonify({"error": str(e)}), 400
        except Exception as exc:
            log.exception("Palette generation failed")
            return jsonify({"error": str(exc)}), 500
        return jsonify({"plans": [plan_payload(p) for p in plans]})

    @app.route("/simulate")
    def simulation():
        values = dict(app.config["SIMULATION_DEFAULTS"])
        values.update({k: v for k, v in request.args.items() if v.strip() != ""})
        try:
            params = SimulationParams.from_mapping(values)
        except ValueError as e:
            return jsonify({"error": str(e)}), 400

        limit = app.config["SIMULATION_MAX_STEPS"]
        if params.steps > limit:
            return jsonify({"error": f"steps must be at most {limit}"}), 400
        try:
            history = simulate(params)
        except Exception as exc:
            log.exception("Simulation failed")
            return jsonify({"error": str(exc)}), 500
        return jsonify({"history": history.to_records(), "peak": history.peak()})

    @app.route("/random")
    def random():
        try:
            size = _int_arg("size", app.config["RANDOM_SIZE_DEFAULT"])
            raw_seed = (request.args.get("seed") or "").strip()
            seed = int(raw_seed) if raw_seed else None
        except ValueError:
            return jsonify({"error": "size and seed must be integers"}), 400
        size = max(1, min(size, app.config["RANDOM_SIZE_MAX"]))
        return jsonify({"plan": plan_payload(random_plan(size, seed))})

    return app


if __name__ == "__main__":
    create_app().run(debug=False, threaded=True)
