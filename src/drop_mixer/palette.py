from __future__ import annotations

from functools import lru_cache
from typing import Sequence

import numpy as np

from .convert import hsl_to_rgb_array, rgb_to_hex, rgb_to_hsl
from .naming import check_lang

DEFAULT_TARGET = "#4CAF50"

CHIP_HUES = 8  # 0, 45, …, 315
CHIP_LIGHTNESS = (0.28, 0.36, 0.44, 0.52, 0.60, 0.68, 0.76, 0.84)
CHIP_SATURATION = 0.75
CHIP_SATURATION_LIGHTEST = 0.6  # lightest row is toned down

HINTS = {
    "en": {
        "too_light": "Too light? Add a tiny drop of black.",
        "too_dark": "Too dark? Add a little white.",
        "lightness": "Adjust lightness with white and black.",
        "grayish": "Grayish? Add one drop of a primary (red, yellow, blue).",
        "saturation": "Adjust saturation with primary drops.",
    },
    "ko": {
        "too_light": "너무 밝으면 검정을 아주 조금!",
        "too_dark": "너무 어두우면 하양을 조금!",
        "lightness": "밝기는 하양/검정으로 조절해요",
        "grayish": "회색빛이면 원색(빨/노/파)을 한 방울!",
        "saturation": "채도는 원색 방울로 조절해요",
    },
}


@lru_cache(None)
def target_chips() -> tuple[str, ...]:
    """The 64 target chips, hue-major, as '#RRGGBB'."""
    hsl = [
        (
            i * 360 / CHIP_HUES,
            CHIP_SATURATION_LIGHTEST if j == len(CHIP_LIGHTNESS) - 1 else CHIP_SATURATION,
            l,
        )
        for i in range(CHIP_HUES)
        for j, l in enumerate(CHIP_LIGHTNESS)
    ]
    return tuple(rgb_to_hex(*row) for row in hsl_to_rgb_array(np.array(hsl)))


def random_target(rng: np.random.Generator | None = None) -> str:
    rng = rng if rng is not None else np.random.default_rng()
    chips = target_chips()
    return chips[int(rng.integers(len(chips)))]


def mixing_hints(target_rgb: Sequence[int], lang: str = "en") -> tuple[str, str]:
    """(lightness hint, saturation hint) for reaching `target_rgb`."""
    text = HINTS[check_lang(lang)]
    _, s, l = rgb_to_hsl(*target_rgb)
    if l > 0.65:
        light = text["too_light"]
    elif l < 0.35:
        light = text["too_dark"]
    else:
        light = text["lightness"]
    sat = text["grayish"] if s < 0.25 else text["saturation"]
    return light, sat


__all__ = ["DEFAULT_TARGET", "target_chips", "random_target", "mixing_hints"]
