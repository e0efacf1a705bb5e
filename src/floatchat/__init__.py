"""
FloatChat: a demonstration chat interface over canned ARGO float data.

Each subpackage hides one design decision: the chat session (how replies
are produced and when), the visualization selector (which chart a question
maps to), the terminal UI and the HTTP API shell.
"""

__version__ = "0.1.0"

from .chat import ChatMessage, ChatSession, Role
from .visualization import VisualizationKind, VisualizationPayload, select

__all__ = [
    "ChatMessage",
    "ChatSession",
    "Role",
    "VisualizationKind",
    "VisualizationPayload",
    "select",
]
