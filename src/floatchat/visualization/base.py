"""Abstract base class for visualization selectors.

This module defines how free text is mapped to a chart payload.
The abstraction hides:
- How a query is understood (keyword matching today)
- Where the chart data comes from
- Which random source feeds synthetic fields
"""

from abc import ABC, abstractmethod

from .models import VisualizationKind, VisualizationPayload


class VisualizationSelector(ABC):
    """Maps user text to an optional visualization payload."""

    @abstractmethod
    def classify(self, text: str) -> VisualizationKind | None:
        """Decide which chart kind, if any, the text asks for."""

    @abstractmethod
    def build(self, kind: VisualizationKind) -> VisualizationPayload:
        """Build the payload for a chart kind."""

    def select(self, text: str) -> VisualizationPayload | None:
        """Select the payload for a piece of user text.

        Args:
            text: Free-form user input

        Returns:
            The matching payload, or None if nothing matched
        """
        kind = self.classify(text)
        if kind is None:
            return None
        return self.build(kind)

    @property
    @abstractmethod
    def selector_type(self) -> str:
        """Get the selector type identifier."""
