"""Factory for creating visualization selectors."""

from typing import Any

from .base import VisualizationSelector
from .models import VisualizationPayload


def create_visualization_selector(
    selector: str = "keyword",
    **kwargs: Any
) -> VisualizationSelector:
    """Create a visualization selector.

    Args:
        selector: Selector type (only "keyword" today)
        **kwargs: Selector-specific configuration
            - seed: int, seeds the currents velocity draw
            - rng: random.Random, used instead of a seed

    Returns:
        VisualizationSelector instance

    Raises:
        ValueError: If selector type is not supported
    """
    if selector == "keyword":
        from .keyword import KeywordVisualizationSelector
        return KeywordVisualizationSelector(**kwargs)

    raise ValueError(
        f"Unsupported visualization selector: {selector}. "
        f"Supported selectors: keyword"
    )


_default_selector: VisualizationSelector | None = None


def select(text: str) -> VisualizationPayload | None:
    """Select a payload for text using a shared, unseeded keyword selector."""
    global _default_selector
    if _default_selector is None:
        _default_selector = create_visualization_selector()
    return _default_selector.select(text)
