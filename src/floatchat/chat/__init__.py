"""Chat session module for FloatChat.

Holds the in-memory conversation and produces simulated replies.
"""

from .models import ChatMessage, Role, SessionState
from .responder import CLARIFYING_PROMPT, WELCOME_MESSAGE, compose_reply
from .scheduler import (
    AsyncioScheduler,
    ManualScheduler,
    ScheduledCall,
    Scheduler,
    create_scheduler,
)
from .session import DEFAULT_RESPONSE_DELAY, ChatSession

__all__ = [
    "AsyncioScheduler",
    "CLARIFYING_PROMPT",
    "ChatMessage",
    "ChatSession",
    "DEFAULT_RESPONSE_DELAY",
    "ManualScheduler",
    "Role",
    "ScheduledCall",
    "Scheduler",
    "SessionState",
    "WELCOME_MESSAGE",
    "compose_reply",
    "create_scheduler",
]
