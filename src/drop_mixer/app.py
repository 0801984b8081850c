from __future__ import annotations

import logging
import math
from functools import lru_cache
from typing import Any, Mapping

from flask import Flask, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

# Project-local engine
from .config import DEFAULTS, ENV_PREFIX
from .convert import canon_hex, hex_to_rgb
from .mixing import mix
from .naming import CATALOGS, name_color
from .palette import DEFAULT_TARGET, mixing_hints, random_target, target_chips
from .pigments import PIGMENT_KEYS, total_drops
from .recipes import Recipe, search
from .similarity import distance, is_match, similarity_percent

# ColorAide
from coloraide import Color as CAColor

log = logging.getLogger(__name__)

SRGB_FIT = {"method": "raytrace"}


def parse_target(s: str | None) -> str:
    """Any CSS color ColorAide understands (or bare hex) → '#RRGGBB'."""
    raw = (s or "").strip()
    try:
        return canon_hex(raw)
    except ValueError:
        pass
    try:
        color = CAColor(raw)
    except ValueError:
        raise ValueError(f"unrecognised color {raw!r}") from None
    return canon_hex(
        color.convert("srgb").to_string(hex=True, alpha=False, fit=SRGB_FIT)
    )


def parse_weights(args: Mapping[str, str]) -> dict[str, int]:
    weights: dict[str, int] = {}
    for key in PIGMENT_KEYS:
        raw = args.get(key)
        if raw in (None, ""):
            continue
        try:
            n = int(raw)
        except ValueError:
            raise ValueError(f"{key} must be an integer") from None
        if n < 0:
            raise ValueError(f"{key} must be >= 0")
        weights[key] = n
    return weights


def parse_lang(val: str | None) -> str:
    lang = (val or current_app.config["DEFAULT_LANG"]).strip().lower()
    if lang not in CATALOGS:
        raise ValueError(f"unknown language '{lang}'")
    return lang


def int_arg(name: str, default: int, lo: int, hi: int) -> int:
    raw = request.args.get(name)
    if raw in (None, ""):
        return default
    try:
        n = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer") from None
    return max(lo, min(n, hi))


@lru_cache(maxsize=256)
def cached_search(target_hex: str, max_drops: int, top_k: int) -> tuple[Recipe, ...]:
    return tuple(search(hex_to_rgb(target_hex), max_drops, top_k))


# ----------------------------- Flask app ----------------------------------


def create_app(overrides: Mapping[str, Any] | None = None) -> Flask:
    app = Flask(__name__)
    app.config.from_mapping(DEFAULTS)
    app.config.from_prefixed_env(ENV_PREFIX)
    if overrides:
        app.config.from_mapping(overrides)
    logging.basicConfig(
        level=app.config["LOG_LEVEL"], format="%(levelname)s: %(message)s"
    )

    @app.errorhandler(ValueError)
    def bad_request(exc: ValueError):
        return jsonify({"error": str(exc)}), 400

    @app.errorhandler(Exception)
    def server_error(exc: Exception):
        if isinstance(exc, HTTPException):
            return exc
        log.exception("Request failed")
        return jsonify({"error": str(exc)}), 500

    @app.route("/mix")
    def mix_route():
        weights = parse_weights(request.args)
        lang = parse_lang(request.args.get("lang"))
        color = mix(weights)
        drops = total_drops(weights)
        body: dict[str, Any] = {
            **color.as_dict(),
            "name": name_color(*color.hsl, lang=lang),
            "total_drops": drops,
        }

        target_arg = request.args.get("target")
        if target_arg:
            target = parse_target(target_arg)
            d = distance(color.rgb, hex_to_rgb(target))
            pct = similarity_percent(d)
            body.update(
                target=target,
                distance=d,
                similarity=pct,
                match=is_match(pct, drops, app.config["MATCH_THRESHOLD"]),
            )
        return jsonify(body)

    @app.route("/recipes")
    def recipes_route():
        target = parse_target(request.args.get("target", DEFAULT_TARGET))
        lang = parse_lang(request.args.get("lang"))
        max_drops = int_arg(
            "max_drops", app.config["MAX_TOTAL_DROPS"], 1, app.config["MAX_DROPS_LIMIT"]
        )
        top_k = int_arg("top_k", app.config["TOP_K"], 1, app.config["TOP_K_LIMIT"])

        recipes = cached_search(target, max_drops, top_k)
        light, sat = mixing_hints(hex_to_rgb(target), lang)
        return jsonify(
            {
                "target": target,
                "max_drops": max_drops,
                "recipes": [r.as_dict(lang) for r in recipes],
                "hints": [light, sat],
            }
        )

    @app.route("/name")
    def name_route():
        lang = parse_lang(request.args.get("lang"))
        try:
            h = float(request.args["h"])
            s = float(request.args["s"])
            l = float(request.args["l"])
        except (KeyError, ValueError):
            raise ValueError("h, s and l are required numbers") from None
        if not all(math.isfinite(v) for v in (h, s, l)):
            raise ValueError("h, s and l must be finite")
        return jsonify({"name": name_color(h, s, l, lang=lang)})

    @app.route("/palette")
    def palette_route():
        return jsonify(list(target_chips()))

    @app.route("/palette/random")
    def random_route():
        return jsonify({"target": random_target()})

    return app


if __name__ == "__main__":
    create_app().run(debug=False, threaded=True)
