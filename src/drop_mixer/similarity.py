from __future__ import annotations

import math
from typing import Sequence

import numpy as np

# sqrt(3 * 255**2) ≈ 441.673, truncated; black vs white therefore clamps to 0
MAX_DISTANCE = 441.67
MATCH_THRESHOLD = 90.0


def distance(a: Sequence[int], b: Sequence[int]) -> float:
    """Euclidean distance between two RGB triples."""
    dr, dg, db = a[0] - b[0], a[1] - b[1], a[2] - b[2]
    return math.sqrt(dr * dr + dg * dg + db * db)


def distances(rgb: np.ndarray, target: Sequence[int]) -> np.ndarray:
    """Row-wise `distance` of an (N, 3) integer array to `target`."""
    d = np.asarray(rgb, dtype=np.int64) - np.asarray(target, dtype=np.int64)
    return np.sqrt((d * d).sum(axis=1).astype(np.float64))


def similarity_percent(d):
    """0..100 score; accepts a float or an array of distances."""
    pct = 100 - np.minimum(100, d / MAX_DISTANCE * 100)
    pct = np.maximum(0, pct)
    return float(pct) if np.ndim(pct) == 0 else pct


def is_match(similarity: float, total: int, threshold: float = MATCH_THRESHOLD) -> bool:
    """A mix counts as a hit once it has drops and is at least `threshold` % similar."""
    return total > 0 and similarity >= threshold


__all__ = [
    "MAX_DISTANCE",
    "MATCH_THRESHOLD",
    "distance",
    "distances",
    "similarity_percent",
    "is_match",
]
