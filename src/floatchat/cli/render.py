"""Console rendering of chat messages with Rich."""

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from ..chat import ChatMessage, Role
from ..ui.charts import chart_table
from ..ui.config import BOT_LABEL, MESSAGE_TIMESTAMP_FORMAT, USER_LABEL


def message_panel(message: ChatMessage) -> Panel:
    """Build a panel for one message, with its data table if it has a chart."""
    is_user = message.role == Role.USER
    parts = [Text(message.text)]
    if message.visualization is not None:
        parts.append(Text(""))
        parts.append(chart_table(message.visualization))
    return Panel(
        Group(*parts),
        title=USER_LABEL if is_user else BOT_LABEL,
        title_align="left",
        subtitle=message.created_at.strftime(MESSAGE_TIMESTAMP_FORMAT),
        subtitle_align="right",
        border_style="blue" if is_user else "cyan",
    )


def print_message(console: Console, message: ChatMessage) -> None:
    console.print(message_panel(message))
