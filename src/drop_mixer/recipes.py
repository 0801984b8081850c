# recipes.py – exhaustive drop-recipe search
#   - enumerates every 5-part composition of each total 1..max_total_drops
#   - scores all candidates with the same mixing kernel as the live mix
#   - ranks by RGB distance, then by fewest white+black drops
#
# The candidate count is sum_k C(k+4, 4) = C(max+5, 5) - 1: 1 286 for the
# default budget of 8, ~4 368 for 10, 53 129 for 20. This is meant for small
# budgets only; callers should cap max_total_drops.

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from itertools import combinations
from types import MappingProxyType
from typing import Iterator, Mapping, Sequence

import numpy as np

from .convert import rgb_to_hex
from .mixing import MixedColor, mix_counts
from .naming import check_lang
from .pigments import ACHROMATIC, ACHROMATIC_MASK, PIGMENTS, weights_from_vector
from .similarity import distances, similarity_percent

log = logging.getLogger(__name__)

DEFAULT_MAX_DROPS = 8
DEFAULT_TOP_K = 3


@dataclass(frozen=True)
class Recipe:
    weights: Mapping[str, int]
    color: MixedColor
    distance: float
    similarity: float

    def __post_init__(self) -> None:
        # weights are exposed read-only
        object.__setattr__(self, "weights", MappingProxyType(dict(self.weights)))

    @property
    def total_drops(self) -> int:
        return sum(self.weights.values())

    @property
    def achromatic_drops(self) -> int:
        return sum(self.weights.get(k, 0) for k in ACHROMATIC)

    def label(self, lang: str = "en") -> str:
        """Human label such as 'red × 2 · white × 1' (pigment order, zeros skipped)."""
        check_lang(lang)
        parts = [
            f"{p.labels[lang]} × {self.weights[p.key]}"
            for p in PIGMENTS
            if self.weights.get(p.key, 0) > 0
        ]
        return " · ".join(parts)

    def as_dict(self, lang: str = "en") -> dict:
        return {
            "weights": dict(self.weights),
            "color": self.color.as_dict(),
            "distance": self.distance,
            "similarity": self.similarity,
            "label": self.label(lang),
        }


def compositions(total: int, parts: int) -> Iterator[tuple[int, ...]]:
    """
    All ways to write `total` as `parts` non-negative integers, in
    lexicographic order (stars and bars over the bar positions).
    """
    slots = total + parts - 1
    for bars in combinations(range(slots), parts - 1):
        out = []
        prev = -1
        for b in bars:
            out.append(b - prev - 1)
            prev = b
        out.append(slots - 1 - prev)
        yield tuple(out)


@lru_cache(maxsize=32)
def candidate_counts(max_total_drops: int) -> np.ndarray:
    """(N, 5) drop counts for every total 1..max_total_drops, totals ascending."""
    rows = [
        c
        for k in range(1, max_total_drops + 1)
        for c in compositions(k, len(PIGMENTS))
    ]
    arr = np.array(rows, dtype=np.int64).reshape(-1, len(PIGMENTS))
    arr.setflags(write=False)
    return arr


def search(
    target_rgb: Sequence[int],
    max_total_drops: int = DEFAULT_MAX_DROPS,
    top_k: int = DEFAULT_TOP_K,
) -> list[Recipe]:
    """Best `top_k` drop recipes for `target_rgb`, best first."""
    if max_total_drops < 1 or top_k < 1:
        return []
    target = tuple(int(v) for v in target_rgb)
    counts = candidate_counts(int(max_total_drops))
    rgb, hsl = mix_counts(counts)
    d = distances(rgb, target)
    achromatic = counts[:, ACHROMATIC_MASK].sum(axis=1)

    # lexsort is stable: equal (distance, achromatic) keep enumeration order
    order = np.lexsort((achromatic, d))[:top_k]
    log.debug(
        "recipe search target=%s candidates=%d best=%.3f",
        rgb_to_hex(*target),
        len(counts),
        float(d[order[0]]),
    )

    out: list[Recipe] = []
    for i in order:
        r, g, b = (int(v) for v in rgb[i])
        h, s, l = (float(v) for v in hsl[i])
        out.append(
            Recipe(
                weights=weights_from_vector(counts[i]),
                color=MixedColor(rgb_to_hex(r, g, b), (r, g, b), (h, s, l)),
                distance=float(d[i]),
                similarity=similarity_percent(float(d[i])),
            )
        )
    return out


__all__ = [
    "Recipe",
    "DEFAULT_MAX_DROPS",
    "DEFAULT_TOP_K",
    "compositions",
    "candidate_counts",
    "search",
]
