"""Keyword-based visualization selector.

Lower-cases the input and checks substring containment against a fixed,
ordered keyword table. The first category that matches wins, so text
mentioning both temperature and salinity resolves to temperature.
"""

import random

from .base import VisualizationSelector
from .datasets import currents_payload, salinity_payload, temperature_payload
from .models import VisualizationKind, VisualizationPayload

# Checked in order; earlier entries take priority
KEYWORDS: tuple[tuple[VisualizationKind, tuple[str, ...]], ...] = (
    (VisualizationKind.TEMPERATURE, ("temperature", "temp")),
    (VisualizationKind.SALINITY, ("salinity", "salt")),
    (VisualizationKind.CURRENTS, ("current", "flow")),
)


class KeywordVisualizationSelector(VisualizationSelector):
    """Substring keyword matcher over the canned ARGO datasets.

    The currents chart carries a synthetic velocity field. Pass `seed`
    (or a ready `rng`) to make it reproducible.
    """

    def __init__(self, rng: random.Random | None = None, seed: int | None = None):
        if rng is not None and seed is not None:
            raise ValueError("Pass either rng or seed, not both")
        self._rng = rng or random.Random(seed)

    def classify(self, text: str) -> VisualizationKind | None:
        lowered = text.lower()
        for kind, words in KEYWORDS:
            if any(word in lowered for word in words):
                return kind
        return None

    def build(self, kind: VisualizationKind) -> VisualizationPayload:
        if kind == VisualizationKind.TEMPERATURE:
            return temperature_payload()
        if kind == VisualizationKind.SALINITY:
            return salinity_payload()
        return currents_payload(self._rng)

    @property
    def selector_type(self) -> str:
        return "keyword"
