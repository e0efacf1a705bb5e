"""Data models for chat session state.

These models define the structure of a conversation and its messages,
independent of how they are presented.
"""

from datetime import datetime
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from ..visualization import VisualizationPayload


class Role(str, Enum):
    """Author of a chat message."""

    USER = "user"
    BOT = "bot"


class ChatMessage(BaseModel):
    """A single message in the conversation.

    Messages are immutable once appended to a session.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=1, description="Sequential message identifier within session")
    role: Role
    text: str
    created_at: datetime = Field(default_factory=datetime.now)
    visualization: VisualizationPayload | None = Field(
        default=None,
        description="Chart attached to a bot reply"
    )

    @property
    def has_visualization(self) -> bool:
        return self.visualization is not None


class SessionState(BaseModel):
    """Complete in-memory state for one chat session.

    The message list only grows; nothing here is persisted.
    """

    session_id: str = Field(default_factory=lambda: str(uuid4()))
    messages: list[ChatMessage] = Field(default_factory=list)
    pending: bool = Field(default=False, description="A bot reply is scheduled")
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def next_id(self) -> int:
        return len(self.messages) + 1

    def append(
        self,
        role: Role,
        text: str,
        visualization: VisualizationPayload | None = None
    ) -> ChatMessage:
        """Append a new message with the next sequential id.

        Args:
            role: Author of the message
            text: Message body
            visualization: Optional chart, only valid on bot messages

        Returns:
            The appended message

        Raises:
            ValueError: If a user message carries a visualization
        """
        if visualization is not None and role != Role.BOT:
            raise ValueError("Only bot messages can carry a visualization")
        message = ChatMessage(
            id=self.next_id(),
            role=role,
            text=text,
            visualization=visualization,
        )
        self.messages.append(message)
        self.updated_at = datetime.now()
        return message

    def last_bot_message(self) -> ChatMessage | None:
        for message in reversed(self.messages):
            if message.role == Role.BOT:
                return message
        return None
