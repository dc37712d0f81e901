"""Studio session module.

Threads the transcript, current model and version history through one
explicit object.
"""

from .models import ChatMessage, Role, RunMode, RunOutcome, VersionItem
from .session import (
    DEFAULT_PROMPT,
    EXAMPLE_HINTS,
    EXAMPLE_PROMPT,
    INITIAL_PROMPT,
    WELCOME_MESSAGE,
    StudioSession,
)

__all__ = [
    "DEFAULT_PROMPT",
    "EXAMPLE_HINTS",
    "EXAMPLE_PROMPT",
    "INITIAL_PROMPT",
    "WELCOME_MESSAGE",
    "ChatMessage",
    "Role",
    "RunMode",
    "RunOutcome",
    "StudioSession",
    "VersionItem",
]
