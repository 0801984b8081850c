"""Defaults for the HTTP app; override via create_app(overrides) or DROP_MIXER_* env vars."""

from __future__ import annotations

from typing import Any

ENV_PREFIX = "DROP_MIXER"

DEFAULTS: dict[str, Any] = {
    # recipe search budget; candidates grow as C(max + 5, 5)
    "MAX_TOTAL_DROPS": 8,
    "TOP_K": 3,
    "MAX_DROPS_LIMIT": 10,
    "TOP_K_LIMIT": 20,
    "MATCH_THRESHOLD": 90.0,
    "DEFAULT_LANG": "en",
    "LOG_LEVEL": "INFO",
}
