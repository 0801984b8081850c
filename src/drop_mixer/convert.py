# convert.py – hex / RGB / HSL conversions
#   - channels are 0..255 integers, HSL is (deg, 0..1, 0..1)
#   - rounding is half-up everywhere (floor(x + 0.5)), never banker's rounding

from __future__ import annotations

import math
import re

import numpy as np

RGB = tuple[int, int, int]
HSL = tuple[float, float, float]

_HEX_RE = re.compile(r"#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


def canon_hex(s: str) -> str:
    """'#abc', 'abc', '#aabbcc' or 'aabbcc' → '#AABBCC'."""
    m = _HEX_RE.fullmatch((s or "").strip())
    if m is None:
        raise ValueError(f"expected a 3- or 6-digit hex color, got {s!r}")
    digits = m.group(1).upper()
    if len(digits) == 3:
        digits = "".join(2 * d for d in digits)
    return "#" + digits


def hex_to_rgb(hex_str: str) -> RGB:
    v = int(hex_str.lstrip("#"), 16)
    return (v >> 16) & 255, (v >> 8) & 255, v & 255


def _round(x: float) -> int:
    return int(math.floor(x + 0.5))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    return "#" + "".join(f"{_round(v):02X}" for v in (r, g, b))


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    r1, g1, b1 = r / 255.0, g / 255.0, b / 255.0
    hi, lo = max(r1, g1, b1), min(r1, g1, b1)
    h = s = 0.0
    l = (hi + lo) / 2
    if hi != lo:
        d = hi - lo
        s = d / (2 - hi - lo) if l > 0.5 else d / (hi + lo)
        # sector is picked by the first channel equal to max, r before g before b
        if hi == r1:
            h = (g1 - b1) / d + (6 if g1 < b1 else 0)
        elif hi == g1:
            h = (b1 - r1) / d + 2
        else:
            h = (r1 - g1) / d + 4
        h /= 6
    return h * 360, s, l


def _hue_to_channel(p: np.ndarray, q: np.ndarray, t: np.ndarray) -> np.ndarray:
    t = np.where(t < 0, t + 1, t)
    t = np.where(t > 1, t - 1, t)
    return np.select(
        [t < 1 / 6, t < 1 / 2, t < 2 / 3],
        [p + (q - p) * 6 * t, q, p + (q - p) * (2 / 3 - t) * 6],
        default=p,
    )


def hsl_to_rgb_array(hsl: np.ndarray) -> np.ndarray:
    """
    (N, 3) array of (h deg, s, l) → (N, 3) int64 array of 0..255 channels.
    Rows with s == 0 take the achromatic shortcut r = g = b = l.
    """
    hsl = np.asarray(hsl, dtype=np.float64).reshape(-1, 3)
    h = hsl[:, 0] / 360
    s = hsl[:, 1]
    l = hsl[:, 2]

    q = np.where(l < 0.5, l * (1 + s), l + s - l * s)
    p = 2 * l - q
    rgb = np.stack(
        [
            _hue_to_channel(p, q, h + 1 / 3),
            _hue_to_channel(p, q, h),
            _hue_to_channel(p, q, h - 1 / 3),
        ],
        axis=1,
    )
    rgb = np.where((s == 0)[:, None], l[:, None], rgb)
    return np.floor(rgb * 255 + 0.5).astype(np.int64)


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    r, g, b = hsl_to_rgb_array(np.array([[h, s, l]]))[0]
    return int(r), int(g), int(b)


__all__ = [
    "RGB",
    "HSL",
    "canon_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "hsl_to_rgb_array",
]
