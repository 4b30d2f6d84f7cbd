# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest
from sqlalchemy import inspect, text

import yoda_api.database
import yoda_api.models
from yoda_api.core.config import AutomationConfig, get_settings, normalize_database_url
from yoda_api.database import CLINICAL_STORE, MEMORY_STORE, close_all_databases, get_database, init_tables


@pytest.fixture()
def fresh_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Point both stores at tmp files and rebuild cached settings/connections."""
    monkeypatch.setenv("CLINICAL_DATABASE_URL", f"sqlite:///{tmp_path / 'clinical.db'}")
    monkeypatch.setenv("MEMORY_DATABASE_URL", f"sqlite:///{tmp_path / 'memory.db'}")
    close_all_databases()
    get_settings.cache_clear()
    yield monkeypatch
    close_all_databases()
    get_settings.cache_clear()


def test_automation_defaults() -> None:
    config = AutomationConfig()

    assert config.revenue_rate == 3.75
    assert config.default_estimated_minutes == 60
    assert config.automation_agent == "YODA Auto"
    assert (config.client_query_limit, config.task_query_limit) == (10, 20)
    assert (config.automate_query_limit, config.auto_complete_limit) == (10, 50)


def test_env_overrides_automation(fresh_settings) -> None:
    fresh_settings.setenv("REVENUE_RATE", "4.5")
    fresh_settings.setenv("AUTO_COMPLETE_LIMIT", "5")
    fresh_settings.setenv("AUTOMATION_AGENT", "Night Shift")

    settings = get_settings()

    assert settings.automation.revenue_rate == 4.5
    assert settings.automation.auto_complete_limit == 5
    assert settings.automation.automation_agent == "Night Shift"
    assert settings.automation.client_query_limit == 10


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("postgres://u:p@db:5432/clinical", "postgresql://u:p@db:5432/clinical"),
        ("mysql://u:p@db:3306/clinical", "mysql+pymysql://u:p@db:3306/clinical"),
        ("sqlite:///data/clinical.db", "sqlite:///data/clinical.db"),
    ],
)
def test_normalize_database_url(raw: str, expected: str) -> None:
    assert normalize_database_url(raw) == expected


def test_init_tables_creates_both_stores(fresh_settings) -> None:
    assert init_tables() is True

    clinical_tables = set(inspect(get_database(CLINICAL_STORE).engine).get_table_names())
    memory_tables = set(inspect(get_database(MEMORY_STORE).engine).get_table_names())

    assert clinical_tables == {"clients", "tasks"}
    assert memory_tables == {"memories"}


def test_unknown_store_is_rejected(fresh_settings) -> None:
    with pytest.raises(ValueError):
        get_database("billing")


@pytest.mark.parametrize("package", [yoda_api.database, yoda_api.models])
def test_package_exports_resolve(package) -> None:
    missing = [name for name in package.__all__ if not hasattr(package, name)]

    assert missing == []


def test_init_tables_keeps_existing_rows(fresh_settings) -> None:
    init_tables()
    with get_database(MEMORY_STORE).get_session() as session:
        session.execute(text("INSERT INTO memories (content, created_at) VALUES ('kept', '2026-10-19 09:00:00')"))

    init_tables()

    with get_database(MEMORY_STORE).get_session() as session:
        assert session.execute(text("SELECT COUNT(*) FROM memories")).scalar() == 1


def test_development_env_enables_reload(fresh_settings) -> None:
    fresh_settings.setenv("APP_ENV", "Development")

    assert get_settings().is_development() is True
