"""
Request and Response models for the YODA API.

These Pydantic models define the contract between client and server.
They provide:
- Type validation
- Automatic documentation
- Request/response serialization
"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class QueryRequest(BaseModel):
    """
    Request model for the /api/ai/query endpoint.

    Attributes:
        query: Free-text question; classified by keyword.
    """
    query: str = Field(
        ...,
        description="The user's question",
        examples=["How many clients do I have"]
    )


class QueryResponse(BaseModel):
    """Intent-routed answer to a free-text query."""
    response: str = Field(
        ...,
        description="Natural language answer"
    )
    data: Dict[str, Any] = Field(
        default_factory=dict,
        description="Rows behind the answer, keyed by kind (clients, tasks, automation)"
    )
    query: str = Field(
        ...,
        description="The query as received"
    )
    timestamp: datetime = Field(
        default_factory=datetime.utcnow,
        description="Response generation timestamp"
    )


class DatabaseCounts(BaseModel):
    clinical: int = 0
    memory: int = 0


class StatusResponse(BaseModel):
    """Response model for the /api/status endpoint."""
    status: str = Field(default="operational")
    version: str
    databases: DatabaseCounts
    pendingTasks: int = 0
    todayRevenue: float = 0
    timestamp: datetime = Field(default_factory=datetime.utcnow)


class TaskStats(BaseModel):
    total: int
    auto_completable: int


class TasksResponse(BaseModel):
    """Pending tasks with their client's name."""
    tasks: List[Dict[str, Any]]
    stats: TaskStats


class AutoCompleteResponse(BaseModel):
    """Outcome of one auto-completion batch."""
    success: bool
    completed: int
    revenue: float
    skipped: List[Any] = Field(default_factory=list)
    failed: List[Any] = Field(
        default_factory=list,
        description="Ids of tasks whose completion failed; the rest of the batch still ran"
    )
    message: str


class ErrorResponse(BaseModel):
    """Standard error response model."""
    error: str
    message: Optional[str] = None
    details: Optional[str] = None
