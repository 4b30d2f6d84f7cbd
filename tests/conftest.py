# tests/conftest.py

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Any

import pytest

# Keep app import side effects (log files, default SQLite files) out of the repo.
_TMP_ROOT = Path(tempfile.mkdtemp(prefix="yoda-tests-"))
os.environ.setdefault("LOG_DIR", str(_TMP_ROOT / "logs"))
os.environ.setdefault("CLINICAL_DATABASE_URL", f"sqlite:///{_TMP_ROOT / 'clinical.db'}")
os.environ.setdefault("MEMORY_DATABASE_URL", f"sqlite:///{_TMP_ROOT / 'memory.db'}")
os.environ.setdefault("AUTO_INIT_DB", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from fastapi.testclient import TestClient  # noqa: E402

from yoda_api.core.config import AutomationConfig  # noqa: E402
from yoda_api.database import (  # noqa: E402
    CLINICAL_STORE,
    MEMORY_STORE,
    ClinicalBase,
    Client,
    DatabaseConnection,
    DataStoreGateway,
    Memory,
    MemoryBase,
    Task,
)


class Seeder:
    """Inserts rows through the ORM so tests read back through raw SQL."""

    def __init__(self, clinical: DatabaseConnection, memory: DatabaseConnection) -> None:
        self.clinical = clinical
        self.memory = memory

    def client(self, full_name: str, **fields: Any) -> int:
        with self.clinical.get_session() as session:
            row = Client(full_name=full_name, **fields)
            session.add(row)
            session.flush()
            return row.id

    def task(self, **fields: Any) -> int:
        fields.setdefault("title", "Progress note")
        fields.setdefault("status", "pending")
        fields.setdefault("priority", 3)
        fields.setdefault("auto_completable", False)
        with self.clinical.get_session() as session:
            row = Task(**fields)
            session.add(row)
            session.flush()
            return row.id

    def auto_task(self, estimated_minutes: int | None = 30, **fields: Any) -> int:
        return self.task(estimated_minutes=estimated_minutes, auto_completable=True, **fields)

    def memory_entry(self, content: str) -> int:
        with self.memory.get_session() as session:
            row = Memory(content=content)
            session.add(row)
            session.flush()
            return row.id

    def fetch_task(self, task_id: int) -> Task:
        with self.clinical.get_session() as session:
            row = session.get(Task, task_id)
            session.expunge(row)
            return row

    def count_tasks(self, status: str) -> int:
        with self.clinical.get_session() as session:
            return session.query(Task).filter(Task.status == status).count()


@pytest.fixture()
def clinical_db(tmp_path: Path):
    db = DatabaseConnection(CLINICAL_STORE, f"sqlite:///{tmp_path / 'clinical.db'}")
    ClinicalBase.metadata.create_all(db.engine)
    yield db
    db.close()


@pytest.fixture()
def memory_db(tmp_path: Path):
    db = DatabaseConnection(MEMORY_STORE, f"sqlite:///{tmp_path / 'memory.db'}")
    MemoryBase.metadata.create_all(db.engine)
    yield db
    db.close()


@pytest.fixture()
def clinical_gateway(clinical_db: DatabaseConnection) -> DataStoreGateway:
    return DataStoreGateway(clinical_db)


@pytest.fixture()
def memory_gateway(memory_db: DatabaseConnection) -> DataStoreGateway:
    return DataStoreGateway(memory_db)


@pytest.fixture()
def config() -> AutomationConfig:
    return AutomationConfig()


@pytest.fixture()
def seed(clinical_db: DatabaseConnection, memory_db: DatabaseConnection) -> Seeder:
    return Seeder(clinical_db, memory_db)


@pytest.fixture()
def app_overrides(clinical_gateway, memory_gateway, config):
    """
    The FastAPI app wired to the per-test stores.

    Yields the overrides dict so a test can swap a gateway for a fake.
    """
    from yoda_api.api.dependencies import (
        get_automation_config,
        get_clinical_gateway,
        get_memory_gateway,
    )
    from yoda_api.api.main import app

    app.dependency_overrides[get_clinical_gateway] = lambda: clinical_gateway
    app.dependency_overrides[get_memory_gateway] = lambda: memory_gateway
    app.dependency_overrides[get_automation_config] = lambda: config
    yield app.dependency_overrides
    app.dependency_overrides.clear()


@pytest.fixture()
def client(app_overrides) -> TestClient:
    from yoda_api.api.main import app

    return TestClient(app, raise_server_exceptions=False)
