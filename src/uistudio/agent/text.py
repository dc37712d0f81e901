"""Small text helpers shared by the planner and the session."""

import secrets
import time

DEFAULT_CLAMP_LENGTH = 5000
ELLIPSIS = "…"


def clamp_text(text: str, max_length: int = DEFAULT_CLAMP_LENGTH) -> str:
    """Cut text to max_length characters, marking the cut with an ellipsis."""
    if len(text) > max_length:
        return text[:max_length] + ELLIPSIS
    return text


def make_id(prefix: str) -> str:
    """Build an identifier like ``m_3f9a1c2e4b7d_18c2f4a9b10``."""
    return f"{prefix}_{secrets.token_hex(6)}_{int(time.time() * 1000):x}"
