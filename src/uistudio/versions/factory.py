"""Factory for creating version history backends."""

from typing import Any

from .base import VersionStore


def create_version_store(backend: str = "memory", **kwargs: Any) -> VersionStore:
    """Create a version history backend.

    Args:
        backend: Backend type ("memory" currently supported)
        **kwargs: Backend-specific configuration

    Returns:
        VersionStore instance

    Raises:
        ValueError: If backend type is not supported
    """
    if backend == "memory":
        from .in_memory import InMemoryVersionStore
        return InMemoryVersionStore(**kwargs)

    raise ValueError(
        f"Unsupported version backend: {backend}. "
        f"Supported backends: memory"
    )
