# tests/fakes.py

from __future__ import annotations

import threading
from typing import Any, Dict, Iterable, List, Optional

from yoda_api.core.exceptions import DatabaseError
from yoda_api.database import DataStoreGateway
from yoda_api.database.gateway import Row


class FailingUpdateGateway(DataStoreGateway):
    """
    Real gateway whose mutations fail for selected task ids.

    Used to exercise best-effort batches without breaking the store.
    """

    def __init__(self, inner: DataStoreGateway, failing_ids: Iterable[int]) -> None:
        super().__init__(inner.db)
        self.failing_ids = set(failing_ids)
        self.attempted: List[Any] = []

    def run(self, sql: str, params: Optional[Dict[str, Any]] = None) -> int:
        task_id = (params or {}).get("id")
        self.attempted.append(task_id)
        if task_id in self.failing_ids:
            raise DatabaseError(f"database is locked (task {task_id})", store=self.name)
        return super().run(sql, params)


class BrokenGateway:
    """Every call fails, as if the store were unreachable."""

    name = "broken"

    def __init__(self, message: str = "unable to open database file") -> None:
        self.message = message
        self.calls = 0

    def _fail(self, *args: Any, **kwargs: Any):
        self.calls += 1
        raise DatabaseError(self.message, store=self.name)

    first = _fail
    all = _fail
    run = _fail


class RecordingGateway:
    """Returns canned rows and records every statement it receives."""

    name = "recording"

    def __init__(self, rows: Optional[List[Row]] = None) -> None:
        self.rows = rows or []
        self.calls: List[str] = []

    def first(self, sql: str, params: Optional[Dict[str, Any]] = None) -> Optional[Row]:
        self.calls.append(sql)
        return self.rows[0] if self.rows else None

    def all(self, sql: str, params: Optional[Dict[str, Any]] = None) -> List[Row]:
        self.calls.append(sql)
        return list(self.rows)

    def run(self, sql: str, params: Optional[Dict[str, Any]] = None) -> int:
        self.calls.append(sql)
        return 1


class BarrierGateway:
    """
    Delegates reads to a real gateway once every party has arrived.

    Reads issued one after another never get past the barrier and fail
    with threading.BrokenBarrierError when it times out.
    """

    def __init__(self, inner: DataStoreGateway, barrier: threading.Barrier, timeout: float = 5.0) -> None:
        self.inner = inner
        self.barrier = barrier
        self.timeout = timeout
        self.name = inner.name

    def first(self, sql: str, params: Optional[Dict[str, Any]] = None) -> Optional[Row]:
        self.barrier.wait(timeout=self.timeout)
        return self.inner.first(sql, params)
