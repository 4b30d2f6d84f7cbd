"""
Database Connection Management.

This module manages one SQLAlchemy engine per relational store:
- clinical : clients and tasks
- memory   : stored memories

It provides:
- Connection pooling
- Session management
"""
from contextlib import contextmanager
from typing import Dict, Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.exc import SQLAlchemyError

from yoda_api.core.config import get_settings
from yoda_api.core.logging_config import get_store_logger

CLINICAL_STORE = "clinical"
MEMORY_STORE = "memory"


class DatabaseConnection:
    """
    Manages connections and session lifecycle for a single store.

    Example:
        >>> db = DatabaseConnection("clinical", "sqlite:///data/clinical.db")
        >>> with db.get_session() as session:
        ...     result = session.execute(text("SELECT 1"))
    """

    def __init__(self, name: str, connection_url: str):
        """
        Initialize database engine with connection pooling.

        Args:
            name: Store name used in logs and errors
            connection_url: SQLAlchemy connection URL
        """
        self.name = name
        self.logger = get_store_logger(name)

        engine_kwargs = {"pool_pre_ping": True, "echo": False}
        if not connection_url.startswith("sqlite"):
            # pool_size: Number of connections to keep open
            # max_overflow: Additional connections allowed under load
            engine_kwargs.update(pool_size=5, max_overflow=10)

        self.engine = create_engine(connection_url, **engine_kwargs)

        self._session_factory = sessionmaker(
            bind=self.engine,
            autocommit=False,
            autoflush=False,
        )

        location = connection_url.split("@")[-1] if "@" in connection_url else connection_url
        self.logger.info(f"Database connection initialized: {name} -> {location}")

    @contextmanager
    def get_session(self) -> Generator[Session, None, None]:
        """
        Get a database session with automatic cleanup.

        Transactions are rolled back on error, committed on success.

        Yields:
            SQLAlchemy Session object
        """
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            self.logger.error(f"Database error, rolling back: {e}")
            raise
        finally:
            session.close()

    def close(self):
        """Close all connections in the pool."""
        self.engine.dispose()
        self.logger.info("Database connections closed")


# Module-level instances (singleton per store)
_connections: Dict[str, DatabaseConnection] = {}


def get_database(name: str) -> DatabaseConnection:
    """
    Get or create the connection for a named store.

    This lazy initialization prevents connecting before app startup.

    Args:
        name: CLINICAL_STORE or MEMORY_STORE

    Returns:
        DatabaseConnection singleton for that store
    """
    connection: Optional[DatabaseConnection] = _connections.get(name)
    if connection is None:
        settings = get_settings()
        urls = {
            CLINICAL_STORE: settings.clinical_database_url,
            MEMORY_STORE: settings.memory_database_url,
        }
        if name not in urls:
            raise ValueError(f"Unknown store: {name}")
        connection = DatabaseConnection(name, urls[name])
        _connections[name] = connection
    return connection


def close_all_databases() -> None:
    """Dispose every engine created by get_database()."""
    for connection in list(_connections.values()):
        connection.close()
    _connections.clear()
