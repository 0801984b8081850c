"""In-memory mixing session: the caller-owned state around the pure engine.

Holds the live drop counts, an undo history of added drops, the current
target and the "hit" latch. Nothing here is persisted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping

from .convert import canon_hex, hex_to_rgb
from .mixing import MixedColor, mix
from .naming import name_color
from .palette import DEFAULT_TARGET
from .pigments import PIGMENT_KEYS, drops_vector, pigment
from .recipes import DEFAULT_MAX_DROPS, DEFAULT_TOP_K, Recipe, search
from .similarity import MATCH_THRESHOLD, distance, is_match, similarity_percent

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    color: MixedColor
    name: str
    total_drops: int
    target: str
    distance: float
    similarity: float
    matched: bool
    celebrate: bool
    recipes: tuple[Recipe, ...] = ()


@dataclass
class MixSession:
    target: str = DEFAULT_TARGET
    max_total_drops: int = DEFAULT_MAX_DROPS
    top_k: int = DEFAULT_TOP_K
    threshold: float = MATCH_THRESHOLD
    answer_mode: bool = True
    lang: str = "en"
    weights: dict[str, int] = field(default_factory=lambda: dict.fromkeys(PIGMENT_KEYS, 0))
    history: list[str] = field(default_factory=list)
    matched: bool = field(default=False, init=False)
    _celebrated: bool = field(default=False, init=False, repr=False)
    _celebrate_now: bool = field(default=False, init=False, repr=False)
    _recipes: dict[tuple, tuple[Recipe, ...]] = field(
        default_factory=dict, init=False, repr=False
    )

    def __post_init__(self) -> None:
        self.target = canon_hex(self.target)
        drops_vector(self.weights)
        self.weights = {k: int(self.weights.get(k, 0)) for k in PIGMENT_KEYS}
        self._update()

    # ---- drops ----

    def add_drop(self, key: str) -> None:
        pigment(key)
        self.weights[key] = self.weights.get(key, 0) + 1
        self.history.append(key)
        self._update()

    def remove_drop(self, key: str) -> None:
        pigment(key)
        self.weights[key] = max(0, self.weights.get(key, 0) - 1)
        self._update()

    def undo(self) -> None:
        if not self.history:
            return
        last = self.history.pop()
        self.weights[last] = max(0, self.weights.get(last, 0) - 1)
        self._update()

    def reset(self) -> None:
        self.weights = dict.fromkeys(PIGMENT_KEYS, 0)
        self.history = []
        self._celebrated = False
        self._update()

    def apply_recipe(self, recipe: Recipe | Mapping[str, int]) -> None:
        """Replace the mix with a recipe; history is rebuilt in pigment order."""
        weights = recipe.weights if isinstance(recipe, Recipe) else recipe
        drops_vector(weights)
        self.weights = {k: int(weights.get(k, 0)) for k in PIGMENT_KEYS}
        self.history = [k for k in PIGMENT_KEYS for _ in range(self.weights[k])]
        self._update()

    # ---- target ----

    def set_target(self, hex_str: str) -> None:
        self.target = canon_hex(hex_str)
        self._celebrated = False
        self._update()

    def use_current_as_target(self) -> None:
        self.set_target(self.color.hex)

    def set_answer_mode(self, on: bool) -> None:
        self.answer_mode = bool(on)
        self._update()

    # ---- derived ----

    @property
    def total_drops(self) -> int:
        return sum(self.weights.values())

    @property
    def color(self) -> MixedColor:
        return mix(self.weights)

    def recipes(self) -> tuple[Recipe, ...]:
        key = (self.target, self.max_total_drops, self.top_k)
        if key not in self._recipes:
            # one entry: the current target
            self._recipes = {
                key: tuple(
                    search(hex_to_rgb(self.target), self.max_total_drops, self.top_k)
                )
            }
        return self._recipes[key]

    def state(self) -> Snapshot:
        color = self.color
        d = distance(color.rgb, hex_to_rgb(self.target))
        return Snapshot(
            color=color,
            name=name_color(*color.hsl, lang=self.lang),
            total_drops=self.total_drops,
            target=self.target,
            distance=d,
            similarity=similarity_percent(d),
            matched=self.matched,
            celebrate=self._celebrate_now,
            recipes=self.recipes() if self.matched else (),
        )

    def _update(self) -> None:
        self._celebrate_now = False
        if not self.answer_mode:
            self.matched = False
            return
        color = self.color
        pct = similarity_percent(distance(color.rgb, hex_to_rgb(self.target)))
        self.matched = is_match(pct, self.total_drops, self.threshold)
        if self.matched and not self._celebrated:
            self._celebrated = True
            self._celebrate_now = True
            log.info("target %s reached with %s (%.0f%%)", self.target, color.hex, pct)


__all__ = ["MixSession", "Snapshot"]
