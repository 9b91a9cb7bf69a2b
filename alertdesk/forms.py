"""Alert creation/editing form.

``AlertForm`` holds what a user has entered while building an alert and
walks through three steps: pick a type, fill in the config, review. User
facing validation lives here; the store itself validates nothing.
"""

import math
from typing import Literal, Optional

from pydantic import BaseModel, Field

from alertdesk import catalog
from alertdesk.factory import DEFAULT_SCHEDULE_TIME, WEEKDAYS
from alertdesk.models import (
    Alert,
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
    is_news_alert,
    is_price_alert,
    is_publication_alert,
    is_report_alert,
    is_scheduled_alert,
)

WizardStep = Literal["type", "config", "review"]

NAME_REQUIRED = "Please enter an alert name"
REPORTS_REQUIRED = "Please select at least one report"
PRICE_SETTINGS_REQUIRED = "Please configure price alert settings"
NEWS_TERMS_REQUIRED = "Please enter keywords or select topics"
PUBLICATIONS_REQUIRED = "Please select at least one publication"
DAYS_REQUIRED = "Please select at least one day"


class AlertForm(BaseModel):
    """Inputs of the alert wizard."""

    step: WizardStep = Field(default="type", description="Current wizard step")
    type: Optional[AlertType] = Field(default=None, description="Selected alert type")
    name: str = Field(default="", description="Alert name as typed")
    frequency: AlertFrequency = Field(default="realtime")

    # Report
    report_ids: list[str] = Field(default_factory=list)

    # Price
    symbol: str = Field(default="")
    condition: PriceCondition = Field(default="above")
    threshold: str = Field(default="", description="Threshold as typed")

    # News
    keywords: str = Field(default="", description="Comma-separated keywords")
    topics: list[str] = Field(default_factory=list)
    sources: list[str] = Field(default_factory=list)

    # Publication
    publications: list[str] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)

    # Scheduled
    schedule_time: str = Field(default=DEFAULT_SCHEDULE_TIME)
    schedule_days: list[int] = Field(default_factory=lambda: list(WEEKDAYS))
    included_alert_types: list[AlertType] = Field(default_factory=list)

    model_config = {"validate_assignment": True}

    @classmethod
    def from_alert(cls, alert: Alert) -> "AlertForm":
        """Pre-fill a form from an existing alert (edit mode)."""
        form = cls(
            step="config",
            type=alert.type,
            name=alert.name,
            frequency=alert.config.frequency,
        )
        config = alert.config
        if is_report_alert(alert):
            form.report_ids = [report.id for report in config.reports]
        elif is_price_alert(alert):
            form.symbol = config.symbol
            form.condition = config.condition
            form.threshold = _format_number(config.threshold)
        elif is_news_alert(alert):
            form.keywords = ", ".join(config.keywords)
            form.topics = list(config.topics or [])
            form.sources = list(config.sources or [])
        elif is_publication_alert(alert):
            form.publications = list(config.publications)
            form.categories = list(config.categories or [])
        elif is_scheduled_alert(alert):
            form.schedule_time = config.schedule_time
            form.schedule_days = list(config.schedule_days)
            form.included_alert_types = list(config.included_alert_types)
        return form

    # ==================== Wizard ====================

    def select_type(self, alert_type: AlertType) -> None:
        """Choose the alert type and move on to the config step."""
        self.type = alert_type
        self.step = "config"

    def next_step(self) -> Optional[str]:
        """Advance from config to review.

        Returns:
            The validation error that blocks the move, or None.
        """
        if self.step != "config":
            return None
        error = self.validate()
        if error is None:
            self.step = "review"
        return error

    def back(self) -> bool:
        """Go back one step.

        Returns:
            False when already on the first step (the wizard should close).
        """
        if self.step == "review":
            self.step = "config"
            return True
        if self.step == "config":
            self.step = "type"
            self.type = None
            return True
        return False

    # ==================== Validation ====================

    def validate(self) -> Optional[str]:
        """Check the inputs.

        Returns:
            The first problem found, as a message for the user, or None.
        """
        if not self.name.strip():
            return NAME_REQUIRED

        if self.type == "report":
            if not self.report_ids:
                return REPORTS_REQUIRED
        elif self.type == "price":
            if not self.symbol.strip() or self._parse_threshold() is None:
                return PRICE_SETTINGS_REQUIRED
        elif self.type == "news":
            if not self._parse_keywords() and not self.topics:
                return NEWS_TERMS_REQUIRED
        elif self.type == "publication":
            if not self.publications:
                return PUBLICATIONS_REQUIRED
        elif self.type == "scheduled":
            if not self.schedule_days:
                return DAYS_REQUIRED
        return None

    # ==================== Building ====================

    def build_config(self) -> BaseAlertConfig:
        """Build the config for the selected type from the inputs.

        Raises:
            ValueError: If no type has been selected, or an input cannot
                be converted (e.g. a non-numeric threshold).
        """
        if self.type == "report":
            return ReportAlertConfig(
                frequency=self.frequency,
                reports=catalog.get_reports(self.report_ids),
            )
        if self.type == "price":
            threshold = self._parse_threshold()
            if threshold is None:
                raise ValueError(f"Invalid threshold: {self.threshold!r}")
            symbol = catalog.get_price_symbol(self.symbol)
            return PriceAlertConfig(
                frequency=self.frequency,
                symbol=symbol.symbol if symbol else self.symbol.strip(),
                symbol_name=symbol.name if symbol else "",
                condition=self.condition,
                threshold=threshold,
            )
        if self.type == "news":
            return NewsAlertConfig(
                frequency=self.frequency,
                keywords=self._parse_keywords(),
                topics=list(self.topics),
                sources=list(self.sources),
            )
        if self.type == "publication":
            return PublicationAlertConfig(
                frequency=self.frequency,
                publications=list(self.publications),
                categories=list(self.categories),
            )
        if self.type == "scheduled":
            return ScheduledAlertConfig(
                frequency="daily",
                schedule_time=self.schedule_time,
                schedule_days=list(self.schedule_days),
                included_alert_types=list(self.included_alert_types),
            )
        raise ValueError("No alert type selected")

    def to_draft(self) -> AlertDraft:
        """Build an active alert draft, ready for ``AlertStore.add``."""
        config = self.build_config()
        return AlertDraft(name=self.name.strip(), type=self.type, is_active=True, config=config)

    def changes(self) -> dict:
        """Field changes for ``AlertStore.update`` in edit mode."""
        config = self.build_config()
        return {"name": self.name.strip(), "type": self.type, "config": config}

    def _parse_keywords(self) -> list[str]:
        return [k.strip() for k in self.keywords.split(",") if k.strip()]

    def _parse_threshold(self) -> Optional[float]:
        text = self.threshold.strip()
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
        return value if math.isfinite(value) else None


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)
