"""Abstract base class for version history backends.

This module defines the interface for storing UIModel versions.
The abstraction hides:
- Where versions live (process memory today)
- How positions map onto stored entries

History is append-only: entries are never reordered, replaced or removed,
and restoring an old version does not truncate the newer ones.
"""

from abc import ABC, abstractmethod

from ..agent.data_structures import UIModel
from ..errors import VersionNotFoundError


class VersionStore(ABC):
    """Append-only version history addressed by zero-based position."""

    @abstractmethod
    def append(self, model: UIModel) -> int:
        """Add a model to the end of the history.

        Returns:
            The position of the new version
        """

    @abstractmethod
    def get(self, index: int) -> UIModel:
        """Return the model stored at a position.

        Raises:
            VersionNotFoundError: If no version exists at that position
        """

    @abstractmethod
    def list_versions(self) -> list[UIModel]:
        """Return all versions, oldest first."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of stored versions."""

    @property
    @abstractmethod
    def backend_type(self) -> str:
        """Get the backend type identifier."""

    def restore_by_index(self, index: int) -> UIModel | None:
        """Check out a stored version without changing the history.

        Args:
            index: Zero-based version position

        Returns:
            The stored model, or None if the position is out of range
        """
        try:
            return self.get(index)
        except VersionNotFoundError:
            return None

    def latest(self) -> UIModel | None:
        """Return the most recently appended model, if any."""
        size = len(self)
        return self.get(size - 1) if size else None
