"""Chart rendering for visualization payloads.

Hidden design decisions:
- Which chart type each visualization kind uses
- How charts become images (matplotlib, Agg canvas, PNG files)
- How the data is shown as text inside a chat message
"""

from pathlib import Path

from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from rich.table import Table

from ..visualization import VisualizationKind, VisualizationPayload
from .config import CHART_DPI, CHART_SIZE

# Line/fill colors per kind, matching the web client's palette
CHART_COLORS = {
    VisualizationKind.TEMPERATURE: ("#2563eb", "#93c5fd"),
    VisualizationKind.SALINITY: ("#0d9488", "#5eead4"),
    VisualizationKind.CURRENTS: ("#7c3aed", "#c4b5fd"),
}

CHART_STYLES = {
    VisualizationKind.TEMPERATURE: "line",
    VisualizationKind.SALINITY: "area",
    VisualizationKind.CURRENTS: "scatter",
}

AXIS_LABELS = {
    "month": "Month",
    "depth": "Depth (m)",
    "temperature": "Temperature (°C)",
    "salinity": "Salinity (PSU)",
    "velocity": "Velocity (m/s)",
}


def chart_style(kind: VisualizationKind) -> str:
    """Get the chart style ("line", "area" or "scatter") for a kind."""
    return CHART_STYLES[kind]


def build_figure(payload: VisualizationPayload) -> Figure:
    """Draw a payload onto a new matplotlib figure.

    Args:
        payload: Visualization to draw

    Returns:
        Figure with a single axes holding the chart
    """
    figure = Figure(figsize=CHART_SIZE, dpi=CHART_DPI)
    FigureCanvasAgg(figure)
    axes = figure.add_subplot(1, 1, 1)
    stroke, fill = CHART_COLORS[payload.kind]
    xs, ys = payload.axis_values()
    style = chart_style(payload.kind)

    # Categorical x values (months) are plotted by position
    positions = list(range(len(xs))) if payload.x_field == "month" else xs

    if style == "line":
        axes.plot(positions, ys, color=stroke, linewidth=3, marker="o", label=payload.y_field)
    elif style == "area":
        axes.fill_between(positions, ys, min(ys) if ys else 0, color=fill, alpha=0.6)
        axes.plot(positions, ys, color=stroke, linewidth=2, label=payload.y_field)
    else:
        axes.scatter(positions, ys, color=stroke, label=payload.y_field)

    if payload.x_field == "month":
        axes.set_xticks(positions)
        axes.set_xticklabels(xs)

    axes.set_title(payload.title)
    axes.set_xlabel(AXIS_LABELS.get(payload.x_field, payload.x_field))
    axes.set_ylabel(AXIS_LABELS.get(payload.y_field, payload.y_field))
    axes.grid(True, linestyle="--", alpha=0.4)
    axes.legend()
    figure.tight_layout()
    return figure


def render_chart(payload: VisualizationPayload, directory: Path, name: str) -> Path:
    """Render a payload to a PNG file.

    Args:
        payload: Visualization to draw
        directory: Directory to write into (must exist)
        name: File stem, e.g. "003-salinity"

    Returns:
        Path to the written PNG
    """
    path = Path(directory) / f"{name}.png"
    figure = build_figure(payload)
    figure.savefig(path, format="png")
    return path


def chart_table(payload: VisualizationPayload) -> Table:
    """Build a Rich table of the payload's series."""
    table = Table(
        title=f"{payload.title} ({chart_style(payload.kind)} chart)",
        show_header=True,
        header_style="bold",
        expand=False,
    )
    for column in payload.columns():
        table.add_column(AXIS_LABELS.get(column, column.capitalize()), justify="right")
    for row in payload.rows():
        table.add_row(*(f"{value:.2f}" if isinstance(value, float) else str(value) for value in row))
    return table
