"""Visualization selection for FloatChat.

Maps chat text to a canned ARGO chart payload.
"""

from .base import VisualizationSelector
from .datasets import SALINITY_DATA, TEMPERATURE_DATA
from .factory import create_visualization_selector, select
from .keyword import KeywordVisualizationSelector
from .models import (
    CurrentPoint,
    SalinityPoint,
    TemperaturePoint,
    VisualizationKind,
    VisualizationPayload,
)

__all__ = [
    "CurrentPoint",
    "KeywordVisualizationSelector",
    "SALINITY_DATA",
    "SalinityPoint",
    "TEMPERATURE_DATA",
    "TemperaturePoint",
    "VisualizationKind",
    "VisualizationPayload",
    "VisualizationSelector",
    "create_visualization_selector",
    "select",
]
