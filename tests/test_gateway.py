# tests/test_gateway.py

from __future__ import annotations

import logging

import pytest

from yoda_api.core.exceptions import DatabaseError
from yoda_api.core.logging_config import get_store_logger


def test_store_logger_names() -> None:
    assert get_store_logger("clinical").name == "yoda_api.stores.clinical"
    assert get_store_logger("memory").name == "yoda_api.stores.memory"


def test_queries_log_under_their_own_store(clinical_gateway, memory_gateway, caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="yoda_api.stores")

    clinical_gateway.all("SELECT COUNT(*) AS count FROM clients")
    memory_gateway.first("SELECT COUNT(*) AS count FROM memories")

    clinical_lines = [r.getMessage() for r in caplog.records if r.name == "yoda_api.stores.clinical"]
    memory_lines = [r.getMessage() for r in caplog.records if r.name == "yoda_api.stores.memory"]

    assert any("FROM clients" in line for line in clinical_lines)
    assert not any("FROM memories" in line for line in clinical_lines)
    assert any("FROM memories" in line for line in memory_lines)


def test_failed_query_is_logged_and_raised_per_store(memory_gateway, caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="yoda_api.stores")

    with pytest.raises(DatabaseError) as exc_info:
        memory_gateway.all("SELECT * FROM missing_table")

    assert exc_info.value.details == "store=memory"
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert errors
    assert {r.name for r in errors} == {"yoda_api.stores.memory"}
