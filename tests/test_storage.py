"""Property-based tests for the key-value storage backends."""

import asyncio
import sqlite3
import tempfile
from pathlib import Path

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from alertdesk.storage import MemoryStorage, SQLiteStorage

text_chars = st.characters(exclude_characters="\x00")
keys = st.text(alphabet=text_chars, min_size=1, max_size=40)
values = st.text(alphabet=text_chars, max_size=500)


@pytest.fixture
def temp_storage():
    """Create a temporary SQLite storage for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield SQLiteStorage(Path(tmpdir) / "test.db")


class TestSQLiteSchema:
    def test_kv_table_created(self, temp_storage: SQLiteStorage):
        conn = sqlite3.connect(temp_storage.db_path)
        try:
            tables = [
                row[0]
                for row in conn.execute(
                    "SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%'"
                )
            ]
        finally:
            conn.close()
        assert SQLiteStorage.TABLE in tables

    def test_creates_parent_directories(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            db_path = Path(tmpdir) / "nested" / "dir" / "alerts.db"
            SQLiteStorage(db_path)
            assert db_path.exists()

    def test_reopening_keeps_data(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            db_path = Path(tmpdir) / "test.db"
            SQLiteStorage(db_path).set_sync("k", "v")
            assert SQLiteStorage(db_path).get_sync("k") == "v"


class TestSetGetRemove:
    """
    *For any* key and value, a stored value is returned by get; after
    remove, get returns None.
    """

    @given(key=keys, value=values)
    @settings(max_examples=30, deadline=None)
    def test_sqlite_set_get_remove(self, key: str, value: str):
        with tempfile.TemporaryDirectory() as tmpdir:
            storage = SQLiteStorage(Path(tmpdir) / "test.db")

            async def scenario():
                await storage.set(key, value)
                stored = await storage.get(key)
                await storage.remove(key)
                return stored, await storage.get(key)

            stored, removed = asyncio.run(scenario())

            assert stored == value
            assert removed is None

    @given(key=keys, value=values)
    @settings(max_examples=50)
    def test_memory_set_get_remove(self, key: str, value: str):
        storage = MemoryStorage()

        async def scenario():
            await storage.set(key, value)
            stored = await storage.get(key)
            await storage.remove(key)
            return stored, await storage.get(key)

        stored, removed = asyncio.run(scenario())

        assert stored == value
        assert removed is None


class TestOverwrite:
    """*For any* sequence of writes to one key, the last write wins."""

    @given(writes=st.lists(values, min_size=1, max_size=10))
    @settings(max_examples=20, deadline=None)
    def test_last_write_wins(self, writes: list[str]):
        with tempfile.TemporaryDirectory() as tmpdir:
            storage = SQLiteStorage(Path(tmpdir) / "test.db")
            for value in writes:
                storage.set_sync("@alerts", value)

            assert storage.get_sync("@alerts") == writes[-1]

    @pytest.mark.asyncio
    async def test_keys_are_independent(self, temp_storage: SQLiteStorage):
        await temp_storage.set("a", "1")
        await temp_storage.set("b", "2")
        await temp_storage.remove("a")

        assert await temp_storage.get("a") is None
        assert await temp_storage.get("b") == "2"

    @pytest.mark.asyncio
    async def test_remove_missing_key(self, temp_storage: SQLiteStorage):
        await temp_storage.remove("never-set")
        assert await temp_storage.get("never-set") is None

    @pytest.mark.asyncio
    async def test_memory_initial_contents(self):
        storage = MemoryStorage({"k": "v"})
        assert await storage.get("k") == "v"
