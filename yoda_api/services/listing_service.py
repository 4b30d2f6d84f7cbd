"""
Listing Service - Raw client and task listings.
"""
from typing import Any, Dict, List

from yoda_api.core.logging_config import get_logger
from yoda_api.database.gateway import DataStoreGateway, Row

logger = get_logger(__name__)

CLIENTS_WITH_PENDING_COUNTS_SQL = """
    SELECT c.*, COUNT(t.id) AS pending_tasks
    FROM clients c
    LEFT JOIN tasks t ON c.id = t.client_id AND t.status = 'pending'
    GROUP BY c.id
    ORDER BY c.full_name
"""

ALL_PENDING_TASKS_SQL = """
    SELECT t.*, c.full_name AS client_name
    FROM tasks t
    LEFT JOIN clients c ON t.client_id = c.id
    WHERE t.status = 'pending'
    ORDER BY t.priority ASC, t.due_date ASC
"""


class ListingService:
    """Unpaginated listings over the clinical store."""

    def __init__(self, gateway: DataStoreGateway):
        self.gateway = gateway

    def list_clients(self) -> List[Row]:
        """Every client with its number of pending tasks, by name."""
        return self.gateway.all(CLIENTS_WITH_PENDING_COUNTS_SQL)

    def list_pending_tasks(self) -> Dict[str, Any]:
        """Every pending task with its client's name, plus summary stats."""
        tasks = self.gateway.all(ALL_PENDING_TASKS_SQL)
        stats = {
            "total": len(tasks),
            "auto_completable": sum(1 for task in tasks if task.get("auto_completable")),
        }
        logger.debug(f"Listed pending tasks: {stats}")
        return {"tasks": tasks, "stats": stats}
