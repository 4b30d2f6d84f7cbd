"""
Database module - Clinical and memory store access.

This module handles:
- Per-store connection management
- Parameterized query execution (DataStoreGateway)
- ORM schema definitions and table bootstrap
"""
from yoda_api.database.connection import (
    CLINICAL_STORE,
    MEMORY_STORE,
    DatabaseConnection,
    close_all_databases,
    get_database,
)
from yoda_api.database.gateway import DataStoreGateway, Row
from yoda_api.database.models import ClinicalBase, MemoryBase, Client, Task, Memory
from yoda_api.database.init_db import init_tables

__all__ = [
    # Connection
    "CLINICAL_STORE",
    "MEMORY_STORE",
    "DatabaseConnection",
    "close_all_databases",
    "get_database",
    # Gateway
    "DataStoreGateway",
    "Row",
    # Models
    "ClinicalBase",
    "MemoryBase",
    "Client",
    "Task",
    "Memory",
    # Init
    "init_tables",
]
