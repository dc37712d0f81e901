"""Exception types raised by uistudio."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .agent.data_structures import UIPlan


class StudioError(Exception):
    """Base class for uistudio errors."""


class PlanValidationError(StudioError):
    """A candidate plan was rejected by the validator."""

    def __init__(self, reason: str, plan: "UIPlan | None" = None):
        super().__init__(reason)
        self.reason = reason
        self.plan = plan


class VersionNotFoundError(StudioError, IndexError):
    """No version exists at the requested position."""

    def __init__(self, index: int, size: int):
        super().__init__(f"Version {index} not found (history has {size} versions)")
        self.index = index
        self.size = size
