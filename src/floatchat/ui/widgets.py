"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Chat message and chart card rendering
- Quick question sidebar
- Input history management
- Log rendering and level filtering
- Chart image display
"""

from datetime import datetime
from pathlib import Path

# textual_image must be imported before the app starts so it can detect
# the terminal's graphics protocol
import textual_image.renderable  # noqa: F401
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Click, Key
from textual.message import Message
from textual.widgets import Button, RichLog, Static, TextArea
from textual_image.widget import Image as TextualImageWidget

from ..chat import ChatMessage, Role
from ..visualization import VisualizationPayload
from .charts import chart_table
from .config import (
    BOT_LABEL,
    DATA_SOURCES,
    INPUT_HISTORY_MAX_SIZE,
    INPUT_PLACEHOLDER,
    LOG_TIMESTAMP_FORMAT,
    MESSAGE_TIMESTAMP_FORMAT,
    QUICK_QUESTIONS,
    THINKING_TEXT,
    USER_LABEL,
    LogLevel,
)


class QuickQuestions(Vertical):
    """Canned example questions. Choosing one fills the input, nothing more."""

    class Selected(Message):
        """Message sent when the user picks a question."""

        def __init__(self, question: str) -> None:
            super().__init__()
            self.question = question

    def __init__(self, questions: tuple[str, ...] = QUICK_QUESTIONS, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._questions = questions

    def compose(self):
        yield Static("Quick Questions", classes="sidebar-heading")
        for index, question in enumerate(self._questions):
            yield Button(question, id=f"question-{index}")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id.startswith("question-"):
            event.stop()
            self.post_message(self.Selected(self._questions[int(button_id[9:])]))


class DataSourcesPanel(Static):
    """Static data source status lines."""

    def on_mount(self) -> None:
        lines = ["[bold]Data Sources[/]"]
        lines.extend(f"[green]●[/] {name}: {status}" for name, status in DATA_SOURCES)
        self.update("\n".join(lines))


class ChartCard(Vertical):
    """Chart title, description and data table for a bot message."""

    def __init__(self, payload: VisualizationPayload, *args, **kwargs) -> None:
        super().__init__(*args, classes=f"chart-{payload.kind.value}", **kwargs)
        self.payload = payload

    def compose(self):
        yield Static(self.payload.title, classes="chart-title")
        yield Static(self.payload.description, classes="chart-description")
        yield Static(chart_table(self.payload), classes="chart-table")


class MessageView(Vertical):
    """A chat message container that copies its text when clicked."""

    def __init__(self, message: ChatMessage, *args, **kwargs) -> None:
        role_class = "user-message" if message.role == Role.USER else "bot-message"
        super().__init__(*args, classes=f"chat-message {role_class}", **kwargs)
        self.message = message

    def compose(self):
        label = USER_LABEL if self.message.role == Role.USER else BOT_LABEL
        yield Static(label, classes="message-header", markup=False)
        yield Static(self.message.text, classes="message-content", markup=False)
        if self.message.visualization is not None:
            yield ChartCard(self.message.visualization)
        yield Static(
            self.message.created_at.strftime(MESSAGE_TIMESTAMP_FORMAT),
            classes="message-time",
        )

    def on_click(self, event: Click) -> None:
        event.stop()
        self.app.copy_to_clipboard(self.message.text)
        self.app.notify("Copied to clipboard", timeout=2)


class ThinkingIndicator(Static):
    """Shown at the end of the history while a reply is pending."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(f"… {THINKING_TEXT}", *args, **kwargs)


class ChatHistoryWidget(VerticalScroll):
    """Scrollable message list, rebuilt from session snapshots."""

    BORDER_TITLE = "Chat"
    BORDER_SUBTITLE = "Conversation history"
    ALLOW_MAXIMIZE = True

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._session_id: str | None = None
        self._rendered = 0
        self._indicator: ThinkingIndicator | None = None

    @property
    def rendered_count(self) -> int:
        return self._rendered

    @property
    def is_thinking(self) -> bool:
        return self._indicator is not None

    def sync(
        self,
        session_id: str,
        messages: tuple[ChatMessage, ...],
        pending: bool
    ) -> list[ChatMessage]:
        """Bring the display in line with a session snapshot.

        The message list is append-only within a session, so only messages
        past the last rendered one are mounted. A new session id clears the
        display first.

        Args:
            session_id: Session the snapshot belongs to
            messages: All messages, oldest first
            pending: Whether a reply is outstanding

        Returns:
            The newly mounted messages
        """
        if session_id != self._session_id:
            self.remove_children()
            self._indicator = None
            self._rendered = 0
            self._session_id = session_id

        if self._indicator is not None:
            self._indicator.remove()
            self._indicator = None

        new_messages = list(messages[self._rendered:])
        for message in new_messages:
            self.mount(MessageView(message))
        self._rendered = len(messages)

        if pending:
            self._indicator = ThinkingIndicator()
            self.mount(self._indicator)

        self.border_subtitle = f"{self._rendered} messages"
        self.call_after_refresh(self.scroll_end, animate=False)
        return new_messages


class ChatTextArea(TextArea):
    """TextArea whose Enter key submits instead of inserting a newline."""

    def _on_key(self, event: Key) -> None:
        # Skip TextArea's newline insert and let the key bubble to ChatInputBar
        if event.key == "enter":
            event.prevent_default()


class ChatInputBar(Horizontal):
    """Chat input bar with TextArea and Send button.

    Submitting posts the raw text; the app clears the box only once the
    session accepts it.
    """

    class Submitted(Message):
        """Message sent when user submits input."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._history: list[str] = []
        self._history_index: int = -1

    def compose(self):
        text_area = ChatTextArea(
            id="chat-input",
            show_line_numbers=False,
            placeholder=INPUT_PLACEHOLDER,
        )
        text_area.cursor_blink = False
        yield text_area
        yield Button("Send", id="send-btn", variant="success").with_tooltip(
            "Submit message (Enter)"
        )

    def on_mount(self) -> None:
        text_area = self.query_one("#chat-input", TextArea)
        text_area.highlight_cursor_line = False
        text_area.focus()

    @property
    def text(self) -> str:
        return self.query_one("#chat-input", TextArea).text

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            event.stop()
            self._submit()

    def on_key(self, event: Key) -> None:
        """Handle keyboard shortcuts.

        Enter submits. Some terminals send ctrl+j for Enter, so it submits too.
        """
        if event.key in ("enter", "ctrl+j"):
            self._submit()
            event.prevent_default()
            event.stop()
        elif event.key == "up" and self._is_cursor_at_start():
            self._navigate_history(-1)
            event.prevent_default()
            event.stop()
        elif event.key == "down" and self._is_cursor_at_end():
            self._navigate_history(1)
            event.prevent_default()
            event.stop()

    def _is_cursor_at_start(self) -> bool:
        text_area = self.query_one("#chat-input", TextArea)
        return text_area.cursor_location == (0, 0)

    def _is_cursor_at_end(self) -> bool:
        text_area = self.query_one("#chat-input", TextArea)
        lines = text_area.text.split("\n")
        return text_area.cursor_location == (len(lines) - 1, len(lines[-1]))

    def _navigate_history(self, direction: int) -> None:
        if not self._history:
            return
        text_area = self.query_one("#chat-input", TextArea)
        if direction < 0:
            if self._history_index == -1:
                self._history_index = len(self._history) - 1
            elif self._history_index > 0:
                self._history_index -= 1
        else:
            if self._history_index < len(self._history) - 1:
                self._history_index += 1
            else:
                self._history_index = -1
                text_area.text = ""
                return
        text_area.text = self._history[self._history_index]

    def _submit(self) -> None:
        self.post_message(self.Submitted(self.text))

    def accept(self) -> None:
        """Record the current text in history and clear the box."""
        text_area = self.query_one("#chat-input", TextArea)
        value = text_area.text.strip()
        if value and (not self._history or self._history[-1] != value):
            self._history.append(value)
            del self._history[:-INPUT_HISTORY_MAX_SIZE]
        self._history_index = -1
        text_area.text = ""

    def set_text(self, value: str) -> None:
        """Replace the input text and move the cursor to its end."""
        text_area = self.query_one("#chat-input", TextArea)
        text_area.text = value
        text_area.move_cursor(text_area.document.end)
        text_area.focus()

    def set_busy(self, busy: bool) -> None:
        self.query_one("#send-btn", Button).disabled = busy

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#chat-input", TextArea).focus()


class DebugPanel(RichLog):
    """Log panel for real-time session tracing with level filtering.

    Hidden by default, shown with --log-level or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    LEVEL_COLORS = {
        LogLevel.DEBUG: "dim white",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "red",
    }

    COMPONENT_COLORS = {
        "TUI": "cyan",
        "Session": "bright_green",
        "Chart": "bright_magenta",
    }

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=False,
            **kwargs
        )
        self._log_level = log_level

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def on_mount(self) -> None:
        self.display = False

    def log(self, component: str, message: str, level: int = LogLevel.DEBUG) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, Session, Chart)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        level_color = self.LEVEL_COLORS.get(level, "white")
        comp_color = self.COMPONENT_COLORS.get(component, "white")

        self.write(
            f"[dim]{timestamp}[/] "
            f"[{level_color}]{LogLevel.name(level):<5}[/] "
            f"[{comp_color}][{component}][/] {message}"
        )

    def debug(self, component: str, message: str) -> None:
        self.log(component, message, LogLevel.DEBUG)

    def info(self, component: str, message: str) -> None:
        self.log(component, message, LogLevel.INFO)

    def show(self) -> None:
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        self.display = False
        self.border_subtitle = "Hidden"

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True


class PlotPanel(Static):
    """Panel showing chart images using terminal graphics.

    textual_image picks Sixel, TGP or halfcell rendering for the terminal.
    Keeps every chart of the session; left/right move between them.
    """

    BORDER_TITLE = "Chart"
    BORDER_SUBTITLE = ""
    can_focus = True

    BINDINGS = [
        ("left", "prev_image", "Prev"),
        ("right", "next_image", "Next"),
    ]

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._image_widget: TextualImageWidget | None = None
        self._images: list[Path] = []
        self._current_index: int = 0

    @property
    def images(self) -> list[Path]:
        return list(self._images)

    def compose(self):
        self._image_widget = TextualImageWidget(None, id="plot-image")
        yield self._image_widget

    def on_mount(self) -> None:
        self.display = False

    def _update_subtitle(self) -> None:
        if not self._images:
            self.border_subtitle = ""
            return
        name = self._images[self._current_index].name
        if len(self._images) > 1:
            self.border_subtitle = f"{name} ({self._current_index + 1}/{len(self._images)}) [</>]"
        else:
            self.border_subtitle = name

    def _display_current(self) -> None:
        if self._image_widget is not None:
            self._image_widget.image = self._images[self._current_index]
        self._update_subtitle()
        self.display = True

    def show_image(self, image_path: str | Path) -> bool:
        """Add and display an image.

        Returns:
            False if the file does not exist
        """
        path = Path(image_path)
        if not path.exists():
            self.border_subtitle = "File not found"
            return False
        if path not in self._images:
            self._images.append(path)
        self._current_index = self._images.index(path)
        self._display_current()
        return True

    def action_prev_image(self) -> None:
        if len(self._images) > 1:
            self._current_index = (self._current_index - 1) % len(self._images)
            self._display_current()

    def action_next_image(self) -> None:
        if len(self._images) > 1:
            self._current_index = (self._current_index + 1) % len(self._images)
            self._display_current()

    def clear_images(self) -> None:
        """Forget all images and hide the panel."""
        if self._image_widget is not None:
            self._image_widget.image = None
        self._images.clear()
        self._current_index = 0
        self.border_subtitle = ""
        self.display = False
