"""
DataStore Gateway - Parameterized query execution against one store.

Every read and write issued by the services goes through a gateway:
- first() : zero or one row
- all()   : a row set
- run()   : a mutation, returning the affected row count

Rows are returned as plain dictionaries. Driver failures are raised as
DatabaseError; nothing here retries.
"""
import time
from typing import Any, Dict, List, Optional

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from yoda_api.core.exceptions import DatabaseError
from yoda_api.core.logging_config import get_store_logger
from yoda_api.database.connection import DatabaseConnection

Row = Dict[str, Any]


class DataStoreGateway:
    """
    Executes parameterized SQL with logging and timing.

    Example:
        >>> gateway = DataStoreGateway(get_database(CLINICAL_STORE))
        >>> rows = gateway.all("SELECT * FROM clients WHERE id = :id", {"id": 1})
    """

    def __init__(self, db: DatabaseConnection):
        self.db = db
        self.logger = get_store_logger(db.name)

    @property
    def name(self) -> str:
        return self.db.name

    def first(self, sql: str, params: Optional[Dict[str, Any]] = None) -> Optional[Row]:
        """Execute a query and return its first row, or None."""
        rows = self._fetch(sql, params)
        return rows[0] if rows else None

    def all(self, sql: str, params: Optional[Dict[str, Any]] = None) -> List[Row]:
        """Execute a query and return every row."""
        return self._fetch(sql, params)

    def run(self, sql: str, params: Optional[Dict[str, Any]] = None) -> int:
        """
        Execute a mutation in its own transaction.

        Returns:
            Number of rows affected
        """
        self.logger.debug(f"Executing mutation: {_preview(sql)}")
        start_time = time.perf_counter()

        try:
            with self.db.get_session() as session:
                result = session.execute(text(sql), params or {})
                affected = result.rowcount
        except SQLAlchemyError as e:
            self.logger.error(f"Mutation failed: {e}")
            raise DatabaseError(str(e), store=self.name) from e

        execution_time = (time.perf_counter() - start_time) * 1000
        self.logger.debug(f"Mutation affected {affected} rows in {execution_time:.2f}ms")
        return affected

    def _fetch(self, sql: str, params: Optional[Dict[str, Any]]) -> List[Row]:
        self.logger.debug(f"Executing query: {_preview(sql)}")
        start_time = time.perf_counter()

        try:
            with self.db.get_session() as session:
                result = session.execute(text(sql), params or {})
                columns = list(result.keys())
                data = [dict(zip(columns, row)) for row in result.fetchall()]
        except SQLAlchemyError as e:
            self.logger.error(f"Query failed: {e}")
            raise DatabaseError(str(e), store=self.name) from e

        execution_time = (time.perf_counter() - start_time) * 1000
        self.logger.debug(f"Query returned {len(data)} rows in {execution_time:.2f}ms")
        return data


def _preview(sql: str) -> str:
    return " ".join(sql.split())[:100]
