"""Canned ARGO sample data and payload builders.

Hides where chart data comes from. Every dataset is static demo data;
nothing here reads from a real float archive.
"""

import random

from .models import (
    CurrentPoint,
    SalinityPoint,
    TemperaturePoint,
    VisualizationKind,
    VisualizationPayload,
)

# Sea surface temperature at 10 m, one sample per month
TEMPERATURE_DATA: tuple[TemperaturePoint, ...] = tuple(
    TemperaturePoint(month=month, temperature=temperature, depth=10)
    for month, temperature in (
        ("Jan", 24.2),
        ("Feb", 25.1),
        ("Mar", 26.8),
        ("Apr", 28.2),
        ("May", 29.5),
        ("Jun", 30.1),
        ("Jul", 29.8),
        ("Aug", 29.2),
        ("Sep", 28.5),
        ("Oct", 27.1),
        ("Nov", 25.8),
        ("Dec", 24.9),
    )
)

SALINITY_DATA: tuple[SalinityPoint, ...] = tuple(
    SalinityPoint(depth=depth, salinity=salinity)
    for depth, salinity in (
        (0, 35.2),
        (50, 35.4),
        (100, 35.6),
        (200, 35.8),
        (500, 34.9),
        (1000, 34.7),
        (1500, 34.6),
        (2000, 34.7),
    )
)

# Velocity draw bounds for the synthetic currents series (m/s, upper exclusive)
VELOCITY_MIN = 0.5
VELOCITY_SPAN = 2.0

TEMPERATURE_TITLE = "Ocean Temperature Trends"
TEMPERATURE_DESCRIPTION = (
    "Sea surface temperature data from ARGO floats showing seasonal variations."
)
SALINITY_TITLE = "Salinity Profile by Depth"
SALINITY_DESCRIPTION = (
    "Salinity measurements across different ocean depths from ARGO profiles."
)
CURRENTS_TITLE = "Ocean Current Analysis"
CURRENTS_DESCRIPTION = (
    "Ocean current velocity data derived from ARGO float trajectories."
)


def temperature_payload() -> VisualizationPayload:
    return VisualizationPayload(
        kind=VisualizationKind.TEMPERATURE,
        title=TEMPERATURE_TITLE,
        description=TEMPERATURE_DESCRIPTION,
        series=TEMPERATURE_DATA,
        x_field="month",
        y_field="temperature",
    )


def salinity_payload() -> VisualizationPayload:
    return VisualizationPayload(
        kind=VisualizationKind.SALINITY,
        title=SALINITY_TITLE,
        description=SALINITY_DESCRIPTION,
        series=SALINITY_DATA,
        x_field="depth",
        y_field="salinity",
    )


def currents_payload(rng: random.Random) -> VisualizationPayload:
    """Build the currents payload from the temperature series.

    Args:
        rng: Random source for the synthetic velocity field

    Returns:
        Payload whose points carry a velocity in [0.5, 2.5)
    """
    series = tuple(
        CurrentPoint(
            month=point.month,
            temperature=point.temperature,
            depth=point.depth,
            velocity=rng.random() * VELOCITY_SPAN + VELOCITY_MIN,
        )
        for point in TEMPERATURE_DATA
    )
    return VisualizationPayload(
        kind=VisualizationKind.CURRENTS,
        title=CURRENTS_TITLE,
        description=CURRENTS_DESCRIPTION,
        series=series,
        x_field="month",
        y_field="velocity",
    )
