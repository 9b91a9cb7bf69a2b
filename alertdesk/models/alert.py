"""Alert data models.

An alert is a tagged variant: ``type`` selects which config model applies,
and every validation path parses ``config`` with the model chosen by
``type``. Consumers branch on ``type`` through the ``is_*_alert``
predicates, never on which config fields happen to be present.
"""

from datetime import datetime, timezone
from typing import Any, Literal, Optional, Union, get_args

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from alertdesk.models.report import Report

AlertType = Literal["report", "price", "news", "publication", "scheduled"]
AlertFrequency = Literal["realtime", "daily", "weekly", "monthly"]
PriceCondition = Literal["above", "below", "change_percent"]

ALERT_TYPES: tuple[str, ...] = get_args(AlertType)
FREQUENCIES: tuple[str, ...] = get_args(AlertFrequency)
PRICE_CONDITIONS: tuple[str, ...] = get_args(PriceCondition)

ALERT_TYPE_LABELS: dict[str, str] = {
    "report": "Report Alert",
    "price": "Price Alert",
    "news": "News Alert",
    "publication": "Publication Alert",
    "scheduled": "Scheduled Alert",
}

FREQUENCY_LABELS: dict[str, str] = {
    "realtime": "Real-time",
    "daily": "Daily",
    "weekly": "Weekly",
    "monthly": "Monthly",
}

PRICE_CONDITION_LABELS: dict[str, str] = {
    "above": "Price Above",
    "below": "Price Below",
    "change_percent": "Change Percentage",
}

DAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

# Stored JSON uses camelCase keys; Python code uses field names.
_MODEL_CONFIG = {
    "frozen": True,
    "alias_generator": to_camel,
    "populate_by_name": True,
}

# Config variants reject keys that belong to another variant.
_CONFIG_MODEL_CONFIG = {**_MODEL_CONFIG, "extra": "forbid"}


class BaseAlertConfig(BaseModel):
    """Fields shared by every alert config variant."""

    frequency: AlertFrequency = Field(..., description="Delivery frequency")

    model_config = _CONFIG_MODEL_CONFIG


class ReportAlertConfig(BaseAlertConfig):
    """Notify when any of the selected reports is updated."""

    reports: list[Report] = Field(
        default_factory=list, description="Snapshot of selected catalog reports"
    )


class PriceAlertConfig(BaseAlertConfig):
    """Notify when a price assessment crosses a threshold."""

    symbol: str = Field(..., description="Price symbol code")
    symbol_name: str = Field(..., description="Price symbol display name")
    condition: PriceCondition = Field(..., description="Threshold condition")
    threshold: float = Field(..., description="Threshold value (percent for change_percent)")
    current_price: Optional[float] = Field(default=None, description="Last known price")


class NewsAlertConfig(BaseAlertConfig):
    """Notify on news matching keywords."""

    keywords: list[str] = Field(default_factory=list, description="Keywords to match")
    sources: Optional[list[str]] = Field(default=None, description="News sources")
    topics: Optional[list[str]] = Field(default=None, description="News topics")


class PublicationAlertConfig(BaseAlertConfig):
    """Notify when a new issue of a publication is released."""

    publications: list[str] = Field(default_factory=list, description="Publication titles")
    categories: Optional[list[str]] = Field(default=None, description="Publication categories")


class ScheduledAlertConfig(BaseAlertConfig):
    """A digest delivered at a fixed time on selected weekdays."""

    schedule_time: str = Field(
        ..., pattern=r"^([01]\d|2[0-3]):[0-5]\d$", description="Delivery time, HH:MM"
    )
    schedule_days: list[int] = Field(..., description="Weekdays, 0=Sunday .. 6=Saturday")
    included_alert_types: list[AlertType] = Field(
        default_factory=list, description="Alert types summarised in the digest"
    )

    @field_validator("schedule_days")
    @classmethod
    def _normalize_days(cls, days: list[int]) -> list[int]:
        for day in days:
            if not 0 <= day <= 6:
                raise ValueError(f"schedule day must be between 0 and 6, got {day}")
        return sorted(set(days))


AlertConfig = Union[
    ReportAlertConfig,
    PriceAlertConfig,
    NewsAlertConfig,
    PublicationAlertConfig,
    ScheduledAlertConfig,
]

CONFIG_MODELS: dict[str, type[BaseAlertConfig]] = {
    "report": ReportAlertConfig,
    "price": PriceAlertConfig,
    "news": NewsAlertConfig,
    "publication": PublicationAlertConfig,
    "scheduled": ScheduledAlertConfig,
}


def config_model_for(alert_type: str) -> type[BaseAlertConfig]:
    """Return the config model class for an alert type.

    Raises:
        ValueError: If the alert type is unknown.
    """
    try:
        return CONFIG_MODELS[alert_type]
    except KeyError:
        raise ValueError(f"Unknown alert type: {alert_type!r}") from None


class _TypedConfigModel(BaseModel):
    """Parses ``config`` with the variant selected by ``type``."""

    model_config = _MODEL_CONFIG

    @model_validator(mode="before")
    @classmethod
    def _parse_config_for_type(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        alert_type = data.get("type")
        config = data.get("config")
        if alert_type not in CONFIG_MODELS or config is None:
            return data

        model = CONFIG_MODELS[alert_type]
        if isinstance(config, BaseAlertConfig):
            if not isinstance(config, model):
                raise ValueError(
                    f"{type(config).__name__} does not match alert type {alert_type!r}"
                )
            return data
        return {**data, "config": model.model_validate(config)}

    @model_validator(mode="after")
    def _check_config_matches_type(self):
        if not isinstance(self.config, CONFIG_MODELS[self.type]):
            raise ValueError(
                f"{type(self.config).__name__} does not match alert type {self.type!r}"
            )
        return self


class AlertDraft(_TypedConfigModel):
    """An alert that has not been committed yet (no ID, no timestamps)."""

    name: str = Field(..., description="Alert name")
    type: AlertType = Field(..., description="Alert type discriminator")
    is_active: bool = Field(default=True, description="Whether the alert is enabled")
    config: AlertConfig = Field(..., description="Type-specific configuration")


class Alert(_TypedConfigModel):
    """A user-defined notification subscription."""

    id: str = Field(..., min_length=1, description="Unique alert ID")
    name: str = Field(..., description="Alert name")
    type: AlertType = Field(..., description="Alert type discriminator")
    is_active: bool = Field(default=True, description="Whether the alert is enabled")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last modification timestamp")
    config: AlertConfig = Field(..., description="Type-specific configuration")

    @field_validator("created_at", "updated_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # Naive timestamps are taken to be UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


def is_report_alert(alert: Union[Alert, AlertDraft]) -> bool:
    return alert.type == "report"


def is_price_alert(alert: Union[Alert, AlertDraft]) -> bool:
    return alert.type == "price"


def is_news_alert(alert: Union[Alert, AlertDraft]) -> bool:
    return alert.type == "news"


def is_publication_alert(alert: Union[Alert, AlertDraft]) -> bool:
    return alert.type == "publication"


def is_scheduled_alert(alert: Union[Alert, AlertDraft]) -> bool:
    return alert.type == "scheduled"
