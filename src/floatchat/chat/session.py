"""Chat session controller.

Owns the message list and pending flag for one session. All mutation goes
through `submit`, `cancel_pending` and `reset`; front ends read snapshots
and re-render when a registered listener fires.
"""

from collections.abc import Callable
from typing import Any

from ..visualization import VisualizationSelector, create_visualization_selector
from .models import ChatMessage, Role, SessionState
from .responder import WELCOME_MESSAGE, compose_reply
from .scheduler import ScheduledCall, Scheduler, create_scheduler

# Simulated assistant latency in seconds
DEFAULT_RESPONSE_DELAY = 1.5


class ChatSession:
    """Message store and simulated response generator.

    Only one reply may be pending at a time. A submission made while a
    reply is pending is rejected and dropped, not queued.

    Example:
        scheduler = ManualScheduler()
        session = ChatSession(scheduler=scheduler)
        session.submit("Show me temperature trends")
        scheduler.advance(DEFAULT_RESPONSE_DELAY)
        session.messages[-1].visualization.kind  # VisualizationKind.TEMPERATURE
    """

    def __init__(
        self,
        scheduler: Scheduler | None = None,
        selector: VisualizationSelector | None = None,
        response_delay: float = DEFAULT_RESPONSE_DELAY,
        seed: int | None = None,
    ) -> None:
        if response_delay < 0:
            raise ValueError(f"response_delay must be non-negative, got {response_delay}")
        if selector is not None and seed is not None:
            raise ValueError("Pass either selector or seed, not both")
        self._scheduler = scheduler or create_scheduler("asyncio")
        self._selector = selector or create_visualization_selector(seed=seed)
        self._response_delay = response_delay
        self._listeners: list[Callable[[], Any]] = []
        self._debug_callback: Callable[[str, str, str], Any] | None = None
        self._pending_call: ScheduledCall | None = None
        self._state = self._new_state()

    @staticmethod
    def _new_state() -> SessionState:
        state = SessionState()
        state.append(Role.BOT, WELCOME_MESSAGE)
        return state

    @property
    def session_id(self) -> str:
        return self._state.session_id

    @property
    def messages(self) -> tuple[ChatMessage, ...]:
        """Snapshot of the message list, oldest first."""
        return tuple(self._state.messages)

    @property
    def pending(self) -> bool:
        return self._state.pending

    @property
    def response_delay(self) -> float:
        return self._response_delay

    def add_listener(self, callback: Callable[[], Any]) -> None:
        """Register a callable run after every state change."""
        self._listeners.append(callback)

    def remove_listener(self, callback: Callable[[], Any]) -> None:
        self._listeners.remove(callback)

    def set_debug_callback(self, callback: Callable[[str, str, str], Any] | None) -> None:
        """Set the debug callback for session tracing.

        Args:
            callback: Callable(level: str, component: str, message: str)
                      level: 'debug', 'info', 'warning', 'error'
        """
        self._debug_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, "Session", message)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()

    def submit(self, text: str) -> bool:
        """Submit user text.

        Appends the user message at once and schedules the bot reply.

        Args:
            text: Raw user input

        Returns:
            True if accepted; False if the text is blank or a reply is pending
        """
        if not text.strip():
            self._debug("debug", "Ignored blank submission")
            return False
        if self._state.pending:
            self._debug("warning", "Dropped submission while a reply is pending")
            return False

        message = self._state.append(Role.USER, text)
        self._state.pending = True
        self._pending_call = self._scheduler.call_later(
            self._response_delay, lambda: self._respond(text)
        )
        self._debug("info", f"Message {message.id} accepted, reply in {self._response_delay}s")
        self._notify()
        return True

    def _respond(self, text: str) -> None:
        visualization = self._selector.select(text)
        message = self._state.append(Role.BOT, compose_reply(visualization), visualization)
        self._state.pending = False
        self._pending_call = None
        kind = visualization.kind.value if visualization else "none"
        self._debug("info", f"Reply {message.id} appended (visualization: {kind})")
        self._notify()

    def cancel_pending(self) -> bool:
        """Cancel the scheduled reply, if any.

        Returns:
            True if a pending reply was cancelled
        """
        if self._pending_call is None:
            return False
        cancelled = self._pending_call.cancel()
        self._pending_call = None
        self._state.pending = False
        self._debug("info", "Pending reply cancelled")
        self._notify()
        return cancelled

    def reset(self) -> None:
        """Discard the conversation and start a fresh session."""
        if self._pending_call is not None:
            self._pending_call.cancel()
            self._pending_call = None
        self._state = self._new_state()
        self._debug("info", f"Session {self._state.session_id[:8]} started")
        self._notify()

    def last_reply(self) -> ChatMessage | None:
        """Get the most recent bot message."""
        return self._state.last_bot_message()
