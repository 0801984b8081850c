from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

import numpy as np

from .convert import HSL, RGB, hex_to_rgb, rgb_to_hsl

Weights = Mapping[str, int]


@dataclass(frozen=True)
class Pigment:
    key: str
    hex: str
    labels: Mapping[str, str]

    @property
    def rgb(self) -> RGB:
        return hex_to_rgb(self.hex)

    @property
    def hsl(self) -> HSL:
        return rgb_to_hsl(*self.rgb)


# Fixed order: every drop vector, enumeration and label follows it.
PIGMENTS: tuple[Pigment, ...] = (
    Pigment("red", "#FF0000", {"en": "red", "ko": "빨강"}),
    Pigment("yellow", "#FFFF00", {"en": "yellow", "ko": "노랑"}),
    Pigment("blue", "#0066FF", {"en": "blue", "ko": "파랑"}),
    Pigment("white", "#FFFFFF", {"en": "white", "ko": "하양"}),
    Pigment("black", "#000000", {"en": "black", "ko": "검정"}),
)

PIGMENT_KEYS: tuple[str, ...] = tuple(p.key for p in PIGMENTS)
ACHROMATIC: tuple[str, ...] = ("white", "black")

_INDEX = {k: i for i, k in enumerate(PIGMENT_KEYS)}
ACHROMATIC_MASK = np.array([k in ACHROMATIC for k in PIGMENT_KEYS])


def pigment(key: str) -> Pigment:
    try:
        return PIGMENTS[_INDEX[key]]
    except KeyError:
        raise ValueError(f"unknown pigment '{key}'") from None


def drops_vector(weights: Weights) -> np.ndarray:
    """
    Weight mapping → length-5 int64 vector in pigment order.

    This is where drop counts enter the engine: unknown keys and negative or
    non-integral counts are rejected here, absent keys count as 0.
    """
    vec = np.zeros(len(PIGMENTS), dtype=np.int64)
    for key, count in weights.items():
        idx = _INDEX.get(key)
        if idx is None:
            raise ValueError(f"unknown pigment '{key}'")
        try:
            n = int(count)
        except (TypeError, ValueError):
            n = -1
        if isinstance(count, bool) or n != count or n < 0:
            raise ValueError(f"drop count for '{key}' must be a non-negative integer")
        if n > np.iinfo(np.int64).max:
            raise ValueError(f"drop count for '{key}' is too large")
        vec[idx] = n
    return vec


def weights_from_vector(vec) -> dict[str, int]:
    return {k: int(v) for k, v in zip(PIGMENT_KEYS, vec)}


def total_drops(weights: Weights) -> int:
    return sum(int(v or 0) for v in weights.values())


__all__ = [
    "Pigment",
    "Weights",
    "PIGMENTS",
    "PIGMENT_KEYS",
    "ACHROMATIC",
    "ACHROMATIC_MASK",
    "pigment",
    "drops_vector",
    "weights_from_vector",
    "total_drops",
]
