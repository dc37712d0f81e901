"""Version history module for uistudio.

Keeps every accepted UIModel so earlier versions can be restored.
"""

from .base import VersionStore
from .factory import create_version_store
from .in_memory import InMemoryVersionStore

__all__ = [
    "InMemoryVersionStore",
    "VersionStore",
    "create_version_store",
]
