# mixing.py – drop mixer on HSL with a saturation-weighted hue vector
#   - hue is averaged as a 2-D vector (cos h, sin h) scaled by w·s, so white
#     and black (s = 0) add no hue pull: blue + white stays sky blue
#   - saturation and lightness are plain drop-weighted means
#   - one kernel (mix_counts) serves both the live mix and recipe scoring

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .convert import HSL, RGB, hsl_to_rgb_array, rgb_to_hex, rgb_to_hsl
from .pigments import PIGMENTS, Weights, drops_vector

# --- constants ---------------------------------------------------------------
EMPTY_HEX = "#F5F5F5"
EMPTY_RGB: RGB = (245, 245, 245)

_HSL = np.array([p.hsl for p in PIGMENTS], dtype=np.float64)  # 5×3
_RAD = np.radians(_HSL[:, 0])
_COS = np.cos(_RAD)
_SIN = np.sin(_RAD)
_S = _HSL[:, 1]
_L = _HSL[:, 2]


@dataclass(frozen=True)
class MixedColor:
    hex: str
    rgb: RGB
    hsl: HSL

    def as_dict(self) -> dict:
        h, s, l = self.hsl
        return {
            "hex": self.hex,
            "rgb": list(self.rgb),
            "hsl": {"h": h, "s": s, "l": l},
        }


EMPTY = MixedColor(EMPTY_HEX, EMPTY_RGB, rgb_to_hsl(*EMPTY_RGB))


def mix_counts(counts: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """
    Mix every row of an (N, 5) array of drop counts in pigment order.

    Returns (rgb, hsl): an (N, 3) int64 array and an (N, 3) float64 array.
    Rows with zero drops are *not* special-cased here (their hsl is nan);
    callers that may pass empty rows use `mix`.
    """
    w = np.asarray(counts, dtype=np.float64).reshape(-1, len(PIGMENTS))
    n = w.shape[0]
    x = np.zeros(n)
    y = np.zeros(n)
    sum_s = np.zeros(n)
    sum_l = np.zeros(n)
    sum_w = np.zeros(n)
    sum_ws = np.zeros(n)

    # accumulate pigment by pigment so each row is independent of batch size
    for i in range(len(PIGMENTS)):
        wi = w[:, i]
        x = x + _COS[i] * wi * _S[i]
        y = y + _SIN[i] * wi * _S[i]
        sum_s = sum_s + _S[i] * wi
        sum_l = sum_l + _L[i] * wi
        sum_w = sum_w + wi
        sum_ws = sum_ws + wi * _S[i]

    h = np.degrees(np.arctan2(y, x))
    h = np.where(h < 0, h + 360, h)
    h = np.where(sum_ws > 0, h, 0.0)
    with np.errstate(invalid="ignore", divide="ignore"):
        s = sum_s / sum_w
        l = sum_l / sum_w

    hsl = np.stack([h, s, l], axis=1)
    return hsl_to_rgb_array(hsl), hsl


def mix(weights: Weights) -> MixedColor:
    """Blend a drop multiset into one color; no drops gives the empty canvas."""
    vec = drops_vector(weights)
    if not vec.any():
        return EMPTY
    rgb, hsl = mix_counts(vec[None, :])
    r, g, b = (int(v) for v in rgb[0])
    h, s, l = (float(v) for v in hsl[0])
    return MixedColor(rgb_to_hex(r, g, b), (r, g, b), (h, s, l))


__all__ = ["MixedColor", "EMPTY", "EMPTY_HEX", "mix", "mix_counts"]
