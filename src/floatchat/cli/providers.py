"""Settings and session factory functions for CLI.

Centralizes creation of settings and chat sessions from environment
variables and command line overrides. Hides configuration details from
command implementations.
"""

from typing import Any

import typer
from rich.console import Console

from ..chat import ChatSession, Scheduler, create_scheduler
from ..config import ConfigError, Settings, load_settings

# Default console for output
_console = Console()


def get_settings(console: Console | None = None, **overrides: Any) -> Settings:
    """Load settings from the environment and apply CLI overrides.

    Args:
        console: Optional Rich console for output
        **overrides: Setting values from command options; None means unset

    Returns:
        Validated settings

    Raises:
        typer.Exit: If the environment holds malformed values
    """
    con = console or _console
    try:
        settings = load_settings()
        updates = {key: value for key, value in overrides.items() if value is not None}
        if updates:
            settings = Settings(**{**settings.model_dump(), **updates})
    except (ConfigError, ValueError) as e:
        con.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1) from None
    return settings


def get_session(
    settings: Settings,
    scheduler: Scheduler | None = None,
    console: Console | None = None,
) -> ChatSession:
    """Create a chat session from settings.

    Args:
        settings: Runtime settings
        scheduler: Scheduler to use (asyncio scheduler if None)
        console: Console receiving trace output when a log level is set

    Returns:
        New chat session seeded with the welcome message
    """
    session = ChatSession(
        scheduler=scheduler or create_scheduler("asyncio"),
        response_delay=settings.response_delay,
        seed=settings.seed,
    )
    if settings.log_level is not None:
        session.set_debug_callback(console_debug_callback(console or _console, settings.log_level))
    return session


def console_debug_callback(console: Console, log_level: str):
    """Build a debug callback that prints trace lines at or above a level."""
    from ..ui.config import LogLevel

    threshold = LogLevel.from_string(log_level)

    def _callback(level: str, component: str, message: str) -> None:
        numeric_level = LogLevel.from_string(level)
        if numeric_level >= threshold:
            console.print(f"[dim]{LogLevel.name(numeric_level):<7} [{component}] {message}[/dim]")

    return _callback
