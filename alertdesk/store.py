"""Alert store: the single source of truth for the alert collection.

All reads and writes of alerts go through an ``AlertStore``. Every mutation
is applied to the in-memory list first, then the whole collection is
serialized and written under one storage key. Storage failures are logged
and never raised to the caller.
"""

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Optional, Union

from pydantic import TypeAdapter

from alertdesk.factory import create_draft, generate_id, utc_now
from alertdesk.models import Alert, AlertDraft, AlertType
from alertdesk.seed import seed_alerts
from alertdesk.storage import BaseStorage

logger = logging.getLogger(__name__)

STORAGE_KEY = "@financial_alerts"
LOAD_ERROR_MESSAGE = "Failed to load alerts"
COPY_SUFFIX = " (Copy)"

# Fields that update() never reassigns.
_IMMUTABLE_FIELDS = frozenset({"id", "created_at", "updated_at"})

_ALERT_LIST = TypeAdapter(list[Alert])

Listener = Callable[[], None]


def serialize_alerts(alerts: list[Alert]) -> str:
    """Serialize alerts to the stored JSON array (camelCase keys)."""
    return _ALERT_LIST.dump_json(alerts, by_alias=True, exclude_none=True).decode()


def deserialize_alerts(payload: Union[str, bytes]) -> list[Alert]:
    """Parse a stored JSON array of alerts.

    Raises:
        ValueError: If the payload is not valid JSON or not a list of alerts.
    """
    return _ALERT_LIST.validate_json(payload)


class AlertStore:
    """In-memory alert collection mirrored to a key-value store.

    The collection is ordered newest first. Construct one store per
    process, call ``load()`` once, then pass the instance to whatever
    needs it.
    """

    def __init__(
        self,
        storage: BaseStorage,
        key: str = STORAGE_KEY,
        seed: Callable[[], list[Alert]] = seed_alerts,
        clock: Callable[[], datetime] = utc_now,
    ):
        """Initialize the store.

        Args:
            storage: Key-value storage backend.
            key: Storage key holding the serialized collection.
            seed: Supplier of the default collection used on first run
                and when loading fails.
            clock: Returns the current time (timezone-aware).
        """
        self._storage = storage
        self._key = key
        self._seed = seed
        self._clock = clock

        self._alerts: list[Alert] = []
        self._loading = True
        self._error: Optional[str] = None
        self._search_query = ""

        self._listeners: list[Listener] = []
        self._write_lock = asyncio.Lock()
        self._last_timestamp: Optional[datetime] = None

    # ==================== State ====================

    @property
    def alerts(self) -> list[Alert]:
        """Current collection, newest first."""
        return list(self._alerts)

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def error(self) -> Optional[str]:
        """Load-time error message, or None."""
        return self._error

    @property
    def search_query(self) -> str:
        return self._search_query

    @search_query.setter
    def search_query(self, query: str) -> None:
        self.set_search_query(query)

    def set_search_query(self, query: str) -> None:
        self._search_query = query
        self._notify()

    @property
    def filtered_alerts(self) -> list[Alert]:
        """The collection filtered by the current search query."""
        return self.filtered(self._search_query)

    def filtered(self, query: str) -> list[Alert]:
        """Filter alerts by name or type.

        Args:
            query: Search text. Blank text matches everything.

        Returns:
            Alerts whose name or type contains the query, ignoring case,
            in collection order.
        """
        if not query.strip():
            return list(self._alerts)
        needle = query.lower()
        return [
            alert
            for alert in self._alerts
            if needle in alert.name.lower() or needle in alert.type.lower()
        ]

    def get_by_id(self, alert_id: str) -> Optional[Alert]:
        """Look up an alert by ID. Returns None if absent."""
        for alert in self._alerts:
            if alert.id == alert_id:
                return alert
        return None

    def create_draft(self, alert_type: AlertType, name: str) -> Alert:
        """Build a new alert with the default config for its type.

        The store is not modified; pass the result to ``add()`` to keep it.
        """
        return create_draft(alert_type, name, now=self._clock())

    # ==================== Listeners ====================

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a callback run after every state change.

        Returns:
            A function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                logger.exception("Alert store listener failed")

    # ==================== Loading ====================

    async def load(self) -> None:
        """Load the collection from storage.

        Adopts the stored collection if there is one. On first run the seed
        dataset is adopted and written. If anything fails, ``error`` is set
        and the seed dataset is used so there is always data to show.
        """
        self._loading = True
        self._error = None
        self._notify()
        try:
            stored = await self._storage.get(self._key)
            if stored:
                self._alerts = deserialize_alerts(stored)
                logger.debug("Loaded %d alerts from %r", len(self._alerts), self._key)
            else:
                self._alerts = self._seed()
                logger.info(
                    "No alerts stored under %r, seeding %d defaults",
                    self._key,
                    len(self._alerts),
                )
                await self._storage.set(self._key, serialize_alerts(self._alerts))
        except Exception:
            logger.exception("Error loading alerts")
            self._error = LOAD_ERROR_MESSAGE
            self._alerts = self._seed()
        finally:
            self._loading = False
            self._notify()

    async def refresh(self) -> None:
        """Reload the collection from storage."""
        await self.load()

    # ==================== Mutations ====================

    async def add(self, draft: Union[AlertDraft, Alert]) -> Alert:
        """Commit a new alert.

        A fresh ID and timestamps are assigned; any ID or timestamps on
        ``draft`` are ignored. No validation beyond the model's own is done.

        Args:
            draft: The alert to add.

        Returns:
            The stored alert.
        """
        now = self._timestamp()
        alert = Alert(
            id=self._new_id(),
            name=draft.name,
            type=draft.type,
            is_active=draft.is_active,
            created_at=now,
            updated_at=now,
            config=draft.config.model_copy(deep=True),
        )
        self._alerts = [alert, *self._alerts]
        self._notify()
        await self._persist()
        return alert

    async def update(self, alert_id: str, **changes: Any) -> Optional[Alert]:
        """Merge field changes into an alert and refresh ``updated_at``.

        Storage failures are never raised. The errors below are caller
        mistakes and leave the collection unchanged.

        Args:
            alert_id: ID of the alert to change.
            **changes: New values keyed by field name (``name``,
                ``is_active``, ``type``, ``config``). ``id`` and the
                timestamps are never reassigned.

        Returns:
            The updated alert, or None if no alert has that ID.

        Raises:
            TypeError: If a change names a field alerts do not have.
            ValueError: If ``type`` changes without a new ``config``.
            pydantic.ValidationError: If the result would pair a config
                with the wrong alert type.
        """
        unknown = set(changes) - set(Alert.model_fields)
        if unknown:
            raise TypeError(f"Unknown alert field(s): {', '.join(sorted(unknown))}")

        index = self._index_of(alert_id)
        if index is None:
            return None

        changes = {k: v for k, v in changes.items() if k not in _IMMUTABLE_FIELDS}
        new_type = changes.get("type", self._alerts[index].type)
        if new_type != self._alerts[index].type and "config" not in changes:
            raise ValueError(
                f"Changing alert type to {new_type!r} requires a new config"
            )

        alert = self._apply(index, changes)
        await self._persist()
        return alert

    async def delete(self, alert_id: str) -> bool:
        """Remove an alert.

        Returns:
            True if an alert was removed, False if the ID was unknown.
        """
        index = self._index_of(alert_id)
        if index is None:
            return False

        self._alerts = self._alerts[:index] + self._alerts[index + 1:]
        self._notify()
        await self._persist()
        return True

    async def toggle_active(self, alert_id: str) -> Optional[Alert]:
        """Flip ``is_active`` on an alert.

        Returns:
            The updated alert, or None if no alert has that ID.
        """
        index = self._index_of(alert_id)
        if index is None:
            return None

        alert = self._apply(index, {"is_active": not self._alerts[index].is_active})
        await self._persist()
        return alert

    async def duplicate(self, alert_id: str) -> Optional[Alert]:
        """Copy an alert under a new ID, with " (Copy)" appended to its name.

        Returns:
            The new alert, or None if no alert has that ID.
        """
        original = self.get_by_id(alert_id)
        if original is None:
            return None

        now = self._timestamp()
        clone = original.model_copy(
            update={
                "id": self._new_id(),
                "name": f"{original.name}{COPY_SUFFIX}",
                "created_at": now,
                "updated_at": now,
            },
            deep=True,
        )
        self._alerts = [clone, *self._alerts]
        self._notify()
        await self._persist()
        return clone

    # ==================== Internals ====================

    def _index_of(self, alert_id: str) -> Optional[int]:
        for index, alert in enumerate(self._alerts):
            if alert.id == alert_id:
                return index
        return None

    def _apply(self, index: int, changes: dict[str, Any]) -> Alert:
        """Replace the alert at ``index`` with a re-validated, changed copy."""
        current = self._alerts[index]
        data = current.model_dump()
        data.update(changes)
        data["updated_at"] = self._timestamp(after=current.updated_at)
        alert = Alert.model_validate(data)

        alerts = list(self._alerts)
        alerts[index] = alert
        self._alerts = alerts
        self._notify()
        return alert

    def _new_id(self) -> str:
        existing = {alert.id for alert in self._alerts}
        alert_id = generate_id()
        while alert_id in existing:
            alert_id = generate_id()
        return alert_id

    def _timestamp(self, after: Optional[datetime] = None) -> datetime:
        """Current time, strictly later than any timestamp issued before."""
        now = self._clock()
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        floor = self._last_timestamp
        if after is not None and (floor is None or after > floor):
            floor = after
        if floor is not None and now <= floor:
            now = floor + timedelta(microseconds=1)
        self._last_timestamp = now
        return now

    async def _persist(self) -> None:
        """Write the whole collection under the storage key.

        The snapshot is taken before waiting on the write lock, so writes
        land in the order the mutations were made. Failures are logged and
        the in-memory state is kept as is.
        """
        payload = serialize_alerts(self._alerts)
        async with self._write_lock:
            try:
                await self._storage.set(self._key, payload)
            except Exception:
                logger.exception("Error saving alerts")
