"""Key-value storage interface for alertdesk."""

from abc import ABC, abstractmethod
from typing import Optional


class BaseStorage(ABC):
    """Abstract base class for string key-value stores.

    Every value is an opaque string; the store has no transactions and no
    schema. Implementations signal failure by raising.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Read the value stored under a key.

        Args:
            key: Storage key.

        Returns:
            The stored string, or None if the key is absent.
        """
        pass

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Store a value, replacing whatever the key held before.

        Args:
            key: Storage key.
            value: String to store.
        """
        pass

    @abstractmethod
    async def remove(self, key: str) -> None:
        """Remove a key. Removing an absent key is not an error.

        Args:
            key: Storage key.
        """
        pass
