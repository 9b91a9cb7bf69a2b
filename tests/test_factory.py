"""Tests for alert construction defaults."""

from datetime import datetime, timezone

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from alertdesk.factory import create_draft, default_config, generate_id
from alertdesk.models import ALERT_TYPES, CONFIG_MODELS


class TestDefaultConfig:
    """Each type has one canonical default config."""

    def test_price_defaults(self):
        draft = create_draft("price", "Test")

        assert draft.config.threshold == 0
        assert draft.config.condition == "above"
        assert draft.config.frequency == "realtime"
        assert draft.config.symbol == ""
        assert draft.config.symbol_name == ""

    def test_scheduled_defaults(self):
        config = default_config("scheduled")

        assert config.frequency == "daily"
        assert config.schedule_time == "08:00"
        assert config.schedule_days == [1, 2, 3, 4, 5]
        assert config.included_alert_types == []

    @pytest.mark.parametrize("alert_type", ["report", "news", "publication"])
    def test_realtime_by_default(self, alert_type: str):
        assert default_config(alert_type).frequency == "realtime"

    def test_list_fields_empty(self):
        assert default_config("report").reports == []
        news = default_config("news")
        assert (news.keywords, news.sources, news.topics) == ([], [], [])
        publication = default_config("publication")
        assert (publication.publications, publication.categories) == ([], [])

    def test_defaults_not_shared(self):
        first = default_config("news")
        first.keywords.append("OPEC")
        assert default_config("news").keywords == []

    def test_unknown_type(self):
        with pytest.raises(ValueError):
            default_config("sms")


class TestCreateDraft:
    @given(alert_type=st.sampled_from(ALERT_TYPES), name=st.text(max_size=40))
    @settings(max_examples=50)
    def test_draft_shape(self, alert_type: str, name: str):
        """*For any* type and name, the draft is active with a matching config."""
        draft = create_draft(alert_type, name)

        assert draft.name == name
        assert draft.type == alert_type
        assert draft.is_active is True
        assert draft.created_at == draft.updated_at
        assert isinstance(draft.config, CONFIG_MODELS[alert_type])

    def test_uses_given_time(self):
        now = datetime(2025, 5, 1, 8, 0, tzinfo=timezone.utc)
        draft = create_draft("news", "Test", now=now)
        assert draft.created_at == now == draft.updated_at

    def test_ids_are_unique(self):
        ids = {generate_id() for _ in range(1000)}
        assert len(ids) == 1000
        assert all(alert_id.startswith("alert-") for alert_id in ids)
