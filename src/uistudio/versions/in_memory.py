"""In-memory version history backend.

Simple list-based storage for session-only history.
Data is lost when the application exits.
"""

from ..agent.data_structures import UIModel
from ..errors import VersionNotFoundError
from .base import VersionStore


class InMemoryVersionStore(VersionStore):
    """In-memory version history (session-only)."""

    def __init__(self) -> None:
        self._versions: list[UIModel] = []

    def append(self, model: UIModel) -> int:
        """Append a model and return its position."""
        self._versions.append(model)
        return len(self._versions) - 1

    def get(self, index: int) -> UIModel:
        """Get the model at a position.

        Negative positions are rejected rather than counted from the end.
        """
        if not 0 <= index < len(self._versions):
            raise VersionNotFoundError(index, len(self._versions))
        return self._versions[index]

    def list_versions(self) -> list[UIModel]:
        """List versions, oldest first."""
        return list(self._versions)

    def __len__(self) -> int:
        return len(self._versions)

    @property
    def backend_type(self) -> str:
        return "memory"
