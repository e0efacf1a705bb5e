"""Reply text templates for the simulated assistant."""

from ..visualization import VisualizationPayload

WELCOME_MESSAGE = (
    "Welcome to FloatChat! I can help you explore ARGO ocean data. "
    "Ask me about ocean temperature, salinity, currents, or any marine data "
    "insights you need."
)

REPLY_PREFIX = "I've analyzed the ARGO ocean data for your query. "

CLARIFYING_PROMPT = (
    "Could you please specify what ocean parameter you'd like to explore? "
    "I can help with temperature, salinity, currents, and more."
)


def compose_reply(visualization: VisualizationPayload | None) -> str:
    """Build the bot reply body for a selected visualization.

    Args:
        visualization: Selected payload, or None when no keyword matched

    Returns:
        Reply text referencing the chart, or a clarifying prompt
    """
    if visualization is None:
        return REPLY_PREFIX + CLARIFYING_PROMPT
    return (
        f"{REPLY_PREFIX}Here's what I found regarding {visualization.title.lower()}. "
        f"{visualization.description}"
    )
