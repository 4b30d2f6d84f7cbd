# tests/test_query_service.py

from __future__ import annotations

from datetime import date

import pytest

from yoda_api.analytics import Intent
from yoda_api.core.config import AutomationConfig
from yoda_api.core.exceptions import DatabaseError
from yoda_api.services import QueryService
from yoda_api.services.query_service import CAPABILITIES_MESSAGE

from .fakes import BrokenGateway, RecordingGateway


@pytest.fixture()
def service(clinical_gateway, config) -> QueryService:
    return QueryService(clinical_gateway, config)


def test_client_query_reports_count(service, seed) -> None:
    for name in ["Dana Reyes", "Ari Blum", "Cole Park", "Bea Stone"]:
        seed.client(name)

    result = service.handle("How many clients do I have")

    assert result.intent is Intent.CLIENT
    assert "Found 4 clients." in result.response_text
    assert [c["full_name"] for c in result.data["clients"]] == [
        "Ari Blum", "Bea Stone", "Cole Park", "Dana Reyes",
    ]


def test_client_query_is_capped_at_ten(service, seed) -> None:
    for i in range(12):
        seed.client(f"Client {i:02d}")

    result = service.handle("list clients")

    assert result.response_text == "Found 10 clients."
    assert len(result.data["clients"]) == 10
    assert result.data["clients"][0]["full_name"] == "Client 00"


def test_task_query_joins_client_and_sorts_by_priority(service, seed) -> None:
    ari = seed.client("Ari Blum")
    seed.task(client_id=ari, title="Intake", priority=2)
    seed.task(client_id=None, title="Orphan", priority=1)
    seed.task(client_id=ari, title="Done", priority=1, status="completed")

    result = service.handle("what tasks are open?")

    assert result.intent is Intent.TASK
    assert result.response_text == "You have 2 pending tasks."
    tasks = result.data["tasks"]
    assert [t["title"] for t in tasks] == ["Orphan", "Intake"]
    assert tasks[0]["client_name"] is None
    assert tasks[1]["client_name"] == "Ari Blum"


def test_task_query_is_capped_at_twenty(service, seed) -> None:
    for i in range(25):
        seed.task(priority=i % 5, due_date=date(2026, 11, 1))

    result = service.handle("tasks")

    assert len(result.data["tasks"]) == 20
    priorities = [t["priority"] for t in result.data["tasks"]]
    assert priorities == sorted(priorities)


def test_automate_query_completes_at_most_ten(service, seed) -> None:
    for _ in range(12):
        seed.auto_task(20)

    result = service.handle("automate everything")

    assert result.intent is Intent.AUTOMATE
    assert result.response_text == "✅ Automated 10 tasks!"
    assert result.data["automation"]["completed"] == 10
    assert seed.count_tasks("pending") == 2


def test_automate_query_uses_full_completion(service, seed) -> None:
    task_id = seed.auto_task(40)

    service.handle("automate")

    task = seed.fetch_task(task_id)
    assert task.completed_by == "YODA Auto"
    assert task.actual_minutes == 40


def test_automate_cap_comes_from_config(clinical_gateway, seed) -> None:
    for _ in range(5):
        seed.auto_task(20)
    service = QueryService(clinical_gateway, AutomationConfig(automate_query_limit=2))

    result = service.handle("automate please")

    assert result.response_text == "✅ Automated 2 tasks!"


def test_unknown_query_does_not_touch_store(config) -> None:
    gateway = RecordingGateway()
    service = QueryService(gateway, config)

    result = service.handle("what's the weather")

    assert result.intent is Intent.UNKNOWN
    assert result.response_text == CAPABILITIES_MESSAGE
    assert result.data == {}
    assert gateway.calls == []


def test_store_failure_propagates(config) -> None:
    service = QueryService(BrokenGateway(), config)

    with pytest.raises(DatabaseError):
        service.handle("clients")
