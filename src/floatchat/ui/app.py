"""Main Textual TUI application.

Orchestrates the UI components around one ChatSession. The app owns no
conversation state: every change flows from the session's listener into
`_refresh_from_session`.
"""

import asyncio
import shutil
import tempfile
from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header

from ..chat import ChatSession, create_scheduler
from ..chat.session import DEFAULT_RESPONSE_DELAY
from ..visualization import VisualizationPayload
from .charts import render_chart
from .config import APP_SUBTITLE, APP_TITLE, LogLevel
from .styles import APP_CSS
from .themes import FLOATCHAT_OCEAN
from .widgets import (
    ChatHistoryWidget,
    ChatInputBar,
    DataSourcesPanel,
    DebugPanel,
    PlotPanel,
    QuickQuestions,
)


class FloatChatApp(App):
    """Textual TUI for FloatChat."""

    CSS = APP_CSS
    TITLE = APP_TITLE
    SUB_TITLE = APP_SUBTITLE

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+k", "clear_chat", "Clear Chat", priority=True),
        Binding("escape", "cancel_pending", "Cancel", priority=True),
        Binding("ctrl+r", "copy_last_response", "Copy Response"),
        Binding("ctrl+b", "toggle_maximize_chat", "Max Chat"),
        Binding("ctrl+d", "toggle_debug", "Debug", priority=True),
    ]

    def __init__(
        self,
        session: ChatSession | None = None,
        response_delay: float = DEFAULT_RESPONSE_DELAY,
        seed: int | None = None,
        log_level: str | None = None,
        render_charts: bool = True,
    ) -> None:
        super().__init__()
        self._session = session
        self._response_delay = response_delay
        self._seed = seed
        self._log_level = log_level
        self._render_charts = render_charts
        self._chart_dir: Path | None = None

    @property
    def session(self) -> ChatSession:
        if self._session is None:
            raise RuntimeError("Session is created when the app mounts")
        return self._session

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)

        with Vertical(id="sidebar"):
            yield QuickQuestions(id="quick-questions")
            yield DataSourcesPanel(id="data-sources")

        yield ChatHistoryWidget(id="chat-history")

        with Vertical(id="right-panel"):
            yield PlotPanel(id="plot-panel")
            yield DebugPanel(id="debug-panel")

        with Vertical(id="bottom-bar"):
            yield ChatInputBar(id="chat-input-bar")

        yield Footer()

    def on_mount(self) -> None:
        self.register_theme(FLOATCHAT_OCEAN)
        self.theme = "floatchat-ocean"

        log_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")

        if self._session is None:
            self._session = ChatSession(
                scheduler=create_scheduler("asyncio"),
                response_delay=self._response_delay,
                seed=self._seed,
            )
        self._session.set_debug_callback(self._route_debug)
        self._session.add_listener(self._refresh_from_session)

        if self._render_charts:
            self._chart_dir = Path(tempfile.mkdtemp(prefix="floatchat-"))

        self._refresh_from_session()
        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def on_unmount(self) -> None:
        """Cancel outstanding work and remove rendered charts."""
        if self._session is not None:
            self._session.remove_listener(self._refresh_from_session)
            self._session.set_debug_callback(None)
            self._session.cancel_pending()
        if self._chart_dir is not None:
            shutil.rmtree(self._chart_dir, ignore_errors=True)
            self._chart_dir = None

    def _route_debug(self, level: str, component: str, message: str) -> None:
        """Route session trace messages to the log panel."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        log_panel.log(component, message, LogLevel.from_string(level))

    def _refresh_from_session(self) -> None:
        session = self.session
        chat = self.query_one("#chat-history", ChatHistoryWidget)
        input_bar = self.query_one("#chat-input-bar", ChatInputBar)

        new_messages = chat.sync(session.session_id, session.messages, session.pending)
        input_bar.set_busy(session.pending)

        for message in new_messages:
            if message.visualization is not None:
                self._show_chart(message.id, message.visualization)

    def _show_chart(self, message_id: int, payload: VisualizationPayload) -> None:
        if self._chart_dir is None:
            return
        log_panel = self.query_one("#debug-panel", DebugPanel)
        name = f"{message_id:03d}-{payload.kind.value}"
        path = render_chart(payload, self._chart_dir, name)
        self.query_one("#plot-panel", PlotPanel).show_image(path)
        log_panel.debug("Chart", f"Rendered {path.name}")

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Hand user input to the session."""
        input_bar = self.query_one("#chat-input-bar", ChatInputBar)
        if self.session.submit(event.value):
            input_bar.accept()
        elif self.session.pending and event.value.strip():
            self.notify("FloatChat AI is still thinking", severity="warning", timeout=2)

    def on_quick_questions_selected(self, event: QuickQuestions.Selected) -> None:
        """Fill the input with a quick question without sending it."""
        self.query_one("#chat-input-bar", ChatInputBar).set_text(event.question)

    def action_clear_chat(self) -> None:
        """Start a fresh session."""
        self.query_one("#plot-panel", PlotPanel).clear_images()
        self.session.reset()
        self.notify("Chat cleared", timeout=2)

    def action_cancel_pending(self) -> None:
        """Cancel the outstanding reply."""
        if self.session.cancel_pending():
            self.notify("Cancelled", severity="warning", timeout=2)

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)

    def action_toggle_maximize_chat(self) -> None:
        chat = self.query_one("#chat-history", ChatHistoryWidget)
        right_panel = self.query_one("#right-panel", Vertical)
        if chat.has_class("-maximized"):
            chat.remove_class("-maximized")
            right_panel.display = True
        else:
            chat.add_class("-maximized")
            right_panel.display = False

    def action_copy_last_response(self) -> None:
        """Copy last bot response to clipboard."""
        reply = self.session.last_reply()
        if reply is not None:
            self.copy_to_clipboard(reply.text)
            self.notify("Response copied")
        else:
            self.notify("No response to copy", severity="warning")


async def run_textual_tui(
    response_delay: float = DEFAULT_RESPONSE_DELAY,
    seed: int | None = None,
    log_level: str | None = None,
) -> None:
    """Run the Textual TUI.

    Args:
        response_delay: Simulated reply latency in seconds
        seed: Seed for the currents velocity draw
        log_level: Log level for panel (debug/info/warning/error), None to hide
    """
    app = FloatChatApp(response_delay=response_delay, seed=seed, log_level=log_level)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
