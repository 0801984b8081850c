"""Heuristic color names for a mixed HSL color.

An ordered decision list, first match wins:

1. extreme lightness → black / white
2. low saturation    → dark gray / gray / light gray
3. special windows   → brown, khaki / olive, burgundy, wine
4. hue table         → one of 28 hue bands
5. lightness prefix  → very pale / pale / very deep / deep
6. grayish suffix    → low-to-mid saturation outside the extremes

The cutoffs are hand-tuned and kept literal; tests pin them.
"""

from __future__ import annotations

import bisect
from typing import Mapping

# (exclusive upper bound in degrees, name token); red wraps past 350.
HUE_BANDS: tuple[tuple[float, str], ...] = (
    (10, "red"),
    (20, "vermilion"),
    (27, "coral"),
    (33, "salmon"),
    (40, "orange"),
    (48, "peach"),
    (56, "yellow"),
    (64, "mustard"),
    (74, "lime"),
    (88, "green_yellow"),
    (110, "green"),
    (135, "teal_green"),
    (155, "jade"),
    (172, "mint"),
    (186, "turquoise"),
    (200, "teal_sky"),
    (208, "sky_blue"),
    (220, "blue"),
    (232, "royal_blue"),
    (242, "indigo_blue"),
    (252, "navy"),
    (265, "violet_navy"),
    (280, "purple"),
    (292, "light_purple"),
    (305, "lilac"),
    (318, "magenta"),
    (332, "fuchsia"),
    (350, "pink"),
    (360, "red"),
)
_BOUNDS = [b for b, _ in HUE_BANDS]

CATALOGS: Mapping[str, Mapping[str, str]] = {
    "en": {
        "black": "black",
        "white": "white",
        "dark_gray": "dark gray",
        "gray": "gray",
        "light_gray": "light gray",
        "brown": "brown",
        "khaki": "khaki",
        "olive": "olive",
        "burgundy": "burgundy",
        "wine": "wine",
        "red": "red",
        "vermilion": "vermilion",
        "coral": "coral",
        "salmon": "salmon",
        "orange": "orange",
        "peach": "peach",
        "yellow": "yellow",
        "mustard": "mustard",
        "lime": "lime",
        "green_yellow": "green-yellow",
        "green": "green",
        "teal_green": "teal green",
        "jade": "jade",
        "mint": "mint",
        "turquoise": "turquoise",
        "teal_sky": "teal sky",
        "sky_blue": "sky blue",
        "blue": "blue",
        "royal_blue": "royal blue",
        "indigo_blue": "indigo blue",
        "navy": "navy",
        "violet_navy": "violet navy",
        "purple": "purple",
        "light_purple": "light purple",
        "lilac": "lilac",
        "magenta": "magenta",
        "fuchsia": "fuchsia",
        "pink": "pink",
        "very_pale": "very pale ",
        "pale": "pale ",
        "very_deep": "very deep ",
        "deep": "deep ",
        "grayish": " (grayish)",
    },
    "ko": {
        "black": "검정",
        "white": "하양",
        "dark_gray": "진한 회색",
        "gray": "회색",
        "light_gray": "연한 회색",
        "brown": "갈색",
        "khaki": "카키",
        "olive": "올리브",
        "burgundy": "버건디",
        "wine": "와인",
        "red": "빨강",
        "vermilion": "주홍",
        "coral": "코랄",
        "salmon": "살몬",
        "orange": "주황",
        "peach": "복숭아",
        "yellow": "노랑",
        "mustard": "머스터드",
        "lime": "라임",
        "green_yellow": "연두",
        "green": "초록",
        "teal_green": "청록",
        "jade": "옥색",
        "mint": "민트",
        "turquoise": "터키석",
        "teal_sky": "청록빛 하늘",
        "sky_blue": "하늘",
        "blue": "파랑",
        "royal_blue": "로열 블루",
        "indigo_blue": "푸른 파랑",
        "navy": "남색",
        "violet_navy": "남보라",
        "purple": "보라",
        "light_purple": "연보라",
        "lilac": "라일락",
        "magenta": "마젠타",
        "fuchsia": "자홍",
        "pink": "분홍",
        "very_pale": "아주 연한 ",
        "pale": "연한 ",
        "very_deep": "아주 진한 ",
        "deep": "진한 ",
        "grayish": " (회색빛)",
    },
}


def check_lang(lang: str) -> str:
    """Return `lang` if a catalog exists for it, else raise ValueError."""
    if lang not in CATALOGS:
        raise ValueError(
            f"unknown language '{lang}' (supported: {', '.join(CATALOGS)})"
        )
    return lang


def hue_band(hue: float) -> str:
    """Token of the hue band containing `hue` (degrees, any sign)."""
    hue = (hue + 360) % 360
    return HUE_BANDS[bisect.bisect_right(_BOUNDS, hue)][1]


def name_tokens(h: float, s: float, l: float) -> tuple[str | None, str, str | None]:
    """(prefix, base, suffix) tokens; prefix and suffix may be None."""
    if l < 0.08:
        return None, "black", None
    if l > 0.94:
        return None, "white", None
    if s < 0.10:
        if l < 0.32:
            return None, "dark_gray", None
        if l > 0.78:
            return None, "light_gray", None
        return None, "gray", None

    hue = (h + 360) % 360
    if 15 <= hue < 50 and l < 0.58 and s > 0.2:
        return None, "brown", None
    if 55 <= hue < 95 and s < 0.35 and 0.32 <= l <= 0.6:
        return None, ("khaki" if l < 0.46 else "olive"), None
    if (hue >= 350 or hue < 10) and l < 0.35:
        return None, "burgundy", None
    if 330 <= hue < 350 and l < 0.42:
        return None, "wine", None

    base = hue_band(hue)

    prefix = None
    if l > 0.9:
        prefix = "very_pale"
    elif l > 0.8:
        prefix = "pale"
    elif l < 0.18:
        prefix = "very_deep"
    elif l < 0.3:
        prefix = "deep"

    suffix = "grayish" if s < 0.22 and 0.18 <= l <= 0.9 else None
    return prefix, base, suffix


def name_color(h: float, s: float, l: float, lang: str = "en") -> str:
    cat = CATALOGS[check_lang(lang)]
    prefix, base, suffix = name_tokens(h, s, l)
    out = (cat[prefix] if prefix else "") + cat[base] + (cat[suffix] if suffix else "")
    return out.strip()


__all__ = ["CATALOGS", "HUE_BANDS", "check_lang", "hue_band", "name_tokens", "name_color"]
