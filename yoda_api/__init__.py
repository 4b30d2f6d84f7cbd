"""
YODA practice API root package.

This package contains all application source code organized by responsibility:
- api/       : FastAPI routes and HTTP handling
- core/      : Configuration, logging, and cross-cutting utilities
- services/  : Query handling, status aggregation, and task automation
- analytics/ : Intent classification for free-text queries
- database/  : Clinical and memory store access
- models/    : Pydantic models for request/response schemas
"""

__version__ = "3.0.0"
