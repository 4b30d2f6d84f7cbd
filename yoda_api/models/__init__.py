"""
Models module - Pydantic schemas for data validation.

This module defines:
- Request models: Input validation for API endpoints
- Response models: Output formatting for API responses
"""
from yoda_api.models.api import (
    AutoCompleteResponse,
    DatabaseCounts,
    ErrorResponse,
    QueryRequest,
    QueryResponse,
    StatusResponse,
    TasksResponse,
    TaskStats,
)

__all__ = [
    "AutoCompleteResponse",
    "DatabaseCounts",
    "ErrorResponse",
    "QueryRequest",
    "QueryResponse",
    "StatusResponse",
    "TasksResponse",
    "TaskStats",
]
