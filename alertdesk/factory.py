"""Construction of new alerts: IDs, timestamps and default configs."""

import uuid
from datetime import datetime, timezone
from typing import Optional

from alertdesk.models import (
    Alert,
    AlertType,
    BaseAlertConfig,
    NewsAlertConfig,
    PriceAlertConfig,
    PublicationAlertConfig,
    ReportAlertConfig,
    ScheduledAlertConfig,
)

WEEKDAYS = [1, 2, 3, 4, 5]
DEFAULT_SCHEDULE_TIME = "08:00"


def generate_id() -> str:
    """Generate a new unique alert ID."""
    return f"alert-{uuid.uuid4().hex}"


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def default_config(alert_type: AlertType) -> BaseAlertConfig:
    """Build the default config for an alert type.

    A new instance is returned on every call so callers never share
    list fields.

    Args:
        alert_type: Alert type discriminator.

    Returns:
        Config instance of the variant matching ``alert_type``.

    Raises:
        ValueError: If the alert type is unknown.
    """
    if alert_type == "report":
        return ReportAlertConfig(frequency="realtime", reports=[])
    if alert_type == "price":
        return PriceAlertConfig(
            frequency="realtime",
            symbol="",
            symbol_name="",
            condition="above",
            threshold=0,
        )
    if alert_type == "news":
        return NewsAlertConfig(frequency="realtime", keywords=[], sources=[], topics=[])
    if alert_type == "publication":
        return PublicationAlertConfig(frequency="realtime", publications=[], categories=[])
    if alert_type == "scheduled":
        # Digests are daily-only
        return ScheduledAlertConfig(
            frequency="daily",
            schedule_time=DEFAULT_SCHEDULE_TIME,
            schedule_days=list(WEEKDAYS),
            included_alert_types=[],
        )
    raise ValueError(f"Unknown alert type: {alert_type!r}")


def create_draft(
    alert_type: AlertType, name: str, now: Optional[datetime] = None
) -> Alert:
    """Create a new, uncommitted alert with the default config for its type.

    Args:
        alert_type: Alert type discriminator.
        name: Alert name.
        now: Timestamp to use for both created_at and updated_at.

    Returns:
        A new active alert. It is not stored anywhere.
    """
    timestamp = now or utc_now()
    return Alert(
        id=generate_id(),
        name=name,
        type=alert_type,
        is_active=True,
        created_at=timestamp,
        updated_at=timestamp,
        config=default_config(alert_type),
    )
