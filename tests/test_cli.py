"""Tests for the alertdesk command line."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from alertdesk.cli import cli
from alertdesk.models import Alert
from alertdesk.storage import SQLiteStorage
from alertdesk.store import STORAGE_KEY, AlertStore, deserialize_alerts


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """A config file pointing storage at a temporary database."""
    path = tmp_path / "config.toml"
    path.write_text(f'[storage]\npath = "{(tmp_path / "alerts.db").as_posix()}"\n')
    return path


def invoke(config_path: Path, *args: str, input: str | None = None):
    return CliRunner().invoke(cli, ["--config", str(config_path), *args], input=input)


def stored_alerts(config_path: Path) -> list[Alert]:
    storage = SQLiteStorage(config_path.parent / "alerts.db")
    return deserialize_alerts(storage.get_sync(STORAGE_KEY))


class TestListAndShow:
    def test_list_seeds_on_first_run(self, config_path: Path):
        result = invoke(config_path, "list")

        assert result.exit_code == 0, result.output
        assert "alert-001" in result.output
        assert "Total: 8 of 8 alerts" in result.output
        assert len(stored_alerts(config_path)) == 8

    def test_list_search(self, config_path: Path):
        result = invoke(config_path, "list", "--search", "opec")

        assert result.exit_code == 0, result.output
        assert "Total: 2 of 8 alerts" in result.output

    def test_list_search_without_matches(self, config_path: Path):
        result = invoke(config_path, "list", "--search", "zzz")

        assert result.exit_code == 0
        assert "No alerts found" in result.output

    def test_show_scheduled(self, config_path: Path):
        result = invoke(config_path, "show", "alert-005")

        assert result.exit_code == 0, result.output
        assert "Mon, Tue, Wed, Thu, Fri" in result.output
        assert "08:00" in result.output

    def test_show_missing(self, config_path: Path):
        result = invoke(config_path, "show", "alert-999")

        assert result.exit_code == 0
        assert "not found" in result.output


class TestCreate:
    def test_create_news(self, config_path: Path):
        result = invoke(
            config_path, "create", "news", "Rig Count",
            "--keywords", "rig count, drilling", "--topic", "Oil & Gas",
        )

        assert result.exit_code == 0, result.output
        newest = stored_alerts(config_path)[0]
        assert newest.name == "Rig Count"
        assert newest.type == "news"
        assert newest.config.keywords == ["rig count", "drilling"]
        assert newest.config.topics == ["Oil & Gas"]

    def test_create_price_resolves_symbol(self, config_path: Path):
        result = invoke(
            config_path, "create", "price", "Brent watch",
            "--symbol", "pcaas00", "--condition", "below", "--threshold", "70",
        )

        assert result.exit_code == 0, result.output
        config = stored_alerts(config_path)[0].config
        assert (config.symbol, config.symbol_name, config.threshold) == ("PCAAS00", "Brent Crude", 70)

    def test_create_report(self, config_path: Path):
        result = invoke(
            config_path, "create", "report", "Power", "--report", "rep-005", "--report", "rep-008",
        )

        assert result.exit_code == 0, result.output
        reports = stored_alerts(config_path)[0].config.reports
        assert [r.id for r in reports] == ["rep-005", "rep-008"]

    def test_create_scheduled_defaults(self, config_path: Path):
        result = invoke(config_path, "create", "scheduled", "Digest", "--include", "news")

        assert result.exit_code == 0, result.output
        config = stored_alerts(config_path)[0].config
        assert config.schedule_days == [1, 2, 3, 4, 5]
        assert config.included_alert_types == ["news"]

    def test_validation_error_exits(self, config_path: Path):
        result = invoke(config_path, "create", "price", "Brent", "--symbol", "PCAAS00")

        assert result.exit_code == 1
        assert "Please configure price alert settings" in result.output

    def test_invalid_time_exits(self, config_path: Path):
        result = invoke(config_path, "create", "scheduled", "Digest", "--time", "25:00")

        assert result.exit_code == 1
        assert "Invalid alert settings" in result.output


class TestMutations:
    def test_toggle(self, config_path: Path):
        result = invoke(config_path, "toggle", "alert-002")

        assert result.exit_code == 0, result.output
        assert "deactivated" in result.output
        alert = next(a for a in stored_alerts(config_path) if a.id == "alert-002")
        assert alert.is_active is False

    def test_duplicate(self, config_path: Path):
        result = invoke(config_path, "duplicate", "alert-001")

        assert result.exit_code == 0, result.output
        alerts = stored_alerts(config_path)
        assert alerts[0].name == "My Energy Docs (Copy)"
        assert len(alerts) == 9

    def test_delete_with_yes(self, config_path: Path):
        result = invoke(config_path, "delete", "alert-003", "--yes")

        assert result.exit_code == 0, result.output
        assert "alert-003" not in [a.id for a in stored_alerts(config_path)]

    def test_delete_declined(self, config_path: Path):
        result = invoke(config_path, "delete", "alert-003", input="n\n")

        assert result.exit_code == 0
        assert "Cancelled" in result.output
        assert "alert-003" in [a.id for a in stored_alerts(config_path)]

    def test_edit_threshold_and_name(self, config_path: Path):
        result = invoke(config_path, "edit", "alert-002", "--name", "NE Power", "--threshold", "80")

        assert result.exit_code == 0, result.output
        alert = next(a for a in stored_alerts(config_path) if a.id == "alert-002")
        assert alert.name == "NE Power"
        assert alert.config.threshold == 80
        assert alert.config.symbol == "AAGPL00"

    def test_edit_rejected_by_store_exits(self, config_path: Path, monkeypatch):
        async def reject(self, alert_id, **changes):
            raise ValueError("Changing alert type to 'news' requires a new config")

        monkeypatch.setattr(AlertStore, "update", reject)
        result = invoke(config_path, "edit", "alert-002", "--name", "NE Power")

        assert result.exit_code == 1
        assert "Could not update alert" in result.output
        alert = next(a for a in stored_alerts(config_path) if a.id == "alert-002")
        assert alert.name != "NE Power"

    def test_edit_blank_name_rejected(self, config_path: Path):
        result = invoke(config_path, "edit", "alert-002", "--name", "  ")

        assert result.exit_code == 1
        assert "Please enter an alert name" in result.output


class TestCatalogAndConfig:
    def test_reports_filtered(self, config_path: Path):
        result = invoke(config_path, "reports", "--commodity", "Coal")

        assert result.exit_code == 0, result.output
        assert "rep-002" in result.output
        assert "rep-001" not in result.output

    def test_symbols(self, config_path: Path):
        result = invoke(config_path, "symbols")

        assert result.exit_code == 0
        assert "PCAAS00" in result.output

    def test_init_config(self, tmp_path: Path):
        path = tmp_path / "new" / "config.toml"

        result = CliRunner().invoke(cli, ["--config", str(path), "init-config"])

        assert result.exit_code == 0, result.output
        assert path.exists()

    def test_bad_config_exits(self, tmp_path: Path):
        path = tmp_path / "config.toml"
        path.write_text("[storage\n")

        result = CliRunner().invoke(cli, ["--config", str(path), "list"])

        assert result.exit_code == 1
        assert "Configuration Error" in result.output
