"""Data models for a studio session.

These describe the chat transcript and the outcome of agent runs,
independent of how a session is presented (TUI, CLI).
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..agent.data_structures import UIModel
from ..agent.text import make_id

MESSAGE_MAX_LENGTH = 3000


class Role(str, Enum):
    """Author of a chat message."""

    USER = "user"
    ASSISTANT = "assistant"


class RunMode(str, Enum):
    """Whether a run starts from scratch or builds on the current plan."""

    GENERATE = "generate"
    MODIFY = "modify"


class ChatMessage(BaseModel):
    """A single immutable chat message."""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    id: str = Field(default_factory=lambda: make_id("m"))
    role: Role
    content: str
    timestamp: datetime = Field(default_factory=datetime.now)


class RunOutcome(BaseModel):
    """Result of one agent run inside a session.

    Attributes:
        accepted: True if the plan passed validation and was installed
        model: The installed model when accepted
        error: The rejection reason when not accepted
    """

    model_config = ConfigDict(frozen=True)

    accepted: bool
    model: UIModel | None = None
    error: str | None = None


class VersionItem(BaseModel):
    """Display entry for one stored version."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Zero-based version position as text")
    label: str
    timestamp: datetime
