"""Data models for alertdesk."""

from alertdesk.models.report import PriceSymbol, Report
from alertdesk.models.alert import (
    ALERT_TYPE_LABELS,
    ALERT_TYPES,
    CONFIG_MODELS,
    DAY_NAMES,
    FREQUENCIES,
    FREQUENCY_LABELS,
    PRICE_CONDITION_LABELS,
    PRICE_CONDITIONS,
    Alert,
    AlertConfig,
    AlertDraft,
    AlertFrequency,
    AlertType,
    BaseAlertConfig,
    NewsAlertConfig,
    PriceAlertConfig,
    PriceCondition,
    PublicationAlertConfig,
    ReportAlertConfig,
    ScheduledAlertConfig,
    config_model_for,
    is_news_alert,
    is_price_alert,
    is_publication_alert,
    is_report_alert,
    is_scheduled_alert,
)

__all__ = [
    "ALERT_TYPE_LABELS",
    "ALERT_TYPES",
    "CONFIG_MODELS",
    "DAY_NAMES",
    "FREQUENCIES",
    "FREQUENCY_LABELS",
    "PRICE_CONDITION_LABELS",
    "PRICE_CONDITIONS",
    "Alert",
    "AlertConfig",
    "AlertDraft",
    "AlertFrequency",
    "AlertType",
    "BaseAlertConfig",
    "NewsAlertConfig",
    "PriceAlertConfig",
    "PriceCondition",
    "PriceSymbol",
    "PublicationAlertConfig",
    "Report",
    "ReportAlertConfig",
    "ScheduledAlertConfig",
    "config_model_for",
    "is_news_alert",
    "is_price_alert",
    "is_publication_alert",
    "is_report_alert",
    "is_scheduled_alert",
]
