"""Data models for visualization payloads.

These models define the chart bundle attached to bot messages,
independent of how a presentation layer draws it.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class VisualizationKind(str, Enum):
    """Kind of chart attached to a bot reply."""

    TEMPERATURE = "temperature"  # Line chart of monthly temperature
    SALINITY = "salinity"        # Area chart of salinity by depth
    CURRENTS = "currents"        # Scatter chart of velocity by month


class TemperaturePoint(BaseModel):
    """Monthly sea temperature sample."""

    model_config = ConfigDict(frozen=True)

    month: str = Field(description="Three-letter month name")
    temperature: float = Field(description="Temperature in degrees Celsius")
    depth: int = Field(ge=0, description="Sample depth in meters")


class SalinityPoint(BaseModel):
    """Salinity sample at a given depth."""

    model_config = ConfigDict(frozen=True)

    depth: int = Field(ge=0, description="Sample depth in meters")
    salinity: float = Field(description="Salinity in PSU")


class CurrentPoint(TemperaturePoint):
    """Temperature sample with a derived current velocity."""

    velocity: float = Field(ge=0.5, lt=2.5, description="Current velocity in m/s")


DataPoint = CurrentPoint | TemperaturePoint | SalinityPoint


class VisualizationPayload(BaseModel):
    """Chart type, dataset and display text for a bot message."""

    model_config = ConfigDict(frozen=True)

    kind: VisualizationKind
    title: str
    description: str
    series: tuple[DataPoint, ...] = Field(default=(), description="Ordered data points")
    x_field: str = Field(description="Field plotted on the x axis")
    y_field: str = Field(description="Field plotted on the y axis")

    def columns(self) -> list[str]:
        """Get the field names present in the series, in declaration order."""
        if not self.series:
            return [self.x_field, self.y_field]
        return list(type(self.series[0]).model_fields)

    def rows(self) -> list[tuple]:
        """Get series values as tuples ordered like `columns()`."""
        columns = self.columns()
        return [tuple(getattr(point, name) for name in columns) for point in self.series]

    def axis_values(self) -> tuple[list, list]:
        """Get the x and y values of the plotted axes."""
        xs = [getattr(point, self.x_field) for point in self.series]
        ys = [getattr(point, self.y_field) for point in self.series]
        return xs, ys
