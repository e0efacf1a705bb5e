"""Terminal UI module for FloatChat.

Provides a Textual-based TUI over a ChatSession.

Module structure (each module hides a design decision):
- config.py: Display text and constants
- charts.py: Chart drawing (matplotlib images, Rich tables)
- widgets.py: Custom widgets (messages, sidebar, input, log, charts)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palette
- app.py: Application orchestration (user interaction flow)
"""

from .app import FloatChatApp, run_textual_tui
from .config import QUICK_QUESTIONS, LogLevel
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel, PlotPanel, QuickQuestions

__all__ = [
    "ChatHistoryWidget",
    "ChatInputBar",
    "DebugPanel",
    "FloatChatApp",
    "LogLevel",
    "PlotPanel",
    "QUICK_QUESTIONS",
    "QuickQuestions",
    "run_textual_tui",
]
