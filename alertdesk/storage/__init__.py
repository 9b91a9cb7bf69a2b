"""Key-value storage backends for alertdesk."""

from alertdesk.storage.base import BaseStorage
from alertdesk.storage.memory import MemoryStorage
from alertdesk.storage.sqlite import SQLiteStorage

__all__ = [
    "BaseStorage",
    "MemoryStorage",
    "SQLiteStorage",
]
