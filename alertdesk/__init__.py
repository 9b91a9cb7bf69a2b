"""alertdesk - manage user-defined notification alerts."""

from alertdesk.factory import create_draft
from alertdesk.models import Alert, AlertDraft
from alertdesk.storage import BaseStorage, MemoryStorage, SQLiteStorage
from alertdesk.store import AlertStore

__all__ = [
    "Alert",
    "AlertDraft",
    "AlertStore",
    "BaseStorage",
    "MemoryStorage",
    "SQLiteStorage",
    "create_draft",
]
