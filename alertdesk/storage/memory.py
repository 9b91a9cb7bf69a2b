"""In-process key-value storage."""

from typing import Optional

from alertdesk.storage.base import BaseStorage


class MemoryStorage(BaseStorage):
    """Dict-backed storage; contents live as long as the instance."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    async def remove(self, key: str) -> None:
        self._data.pop(key, None)
