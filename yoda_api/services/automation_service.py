"""
Automation Service - Bulk completion of auto-completable tasks.

The engine handles the complete flow:
1. Select a bounded batch of pending, auto-completable tasks
2. Complete each task in its own statement, one at a time
3. Bill each completed task from its estimated minutes
4. Report what was completed, skipped, and failed

There is no transaction around the batch. A failing row is recorded and
the batch carries on; a crash mid-batch leaves a prefix completed.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from yoda_api.core.config import AutomationConfig
from yoda_api.core.exceptions import DatabaseError
from yoda_api.core.logging_config import get_logger
from yoda_api.database.gateway import DataStoreGateway, Row
from yoda_api.services.billing import task_revenue

logger = get_logger(__name__)

SELECT_AUTO_COMPLETABLE_SQL = """
    SELECT * FROM tasks
    WHERE status = 'pending' AND auto_completable = :auto_completable
    ORDER BY id
    LIMIT :limit
"""

# Only pending rows transition; 0 affected rows means someone else got there first.
COMPLETE_TASK_SQL = """
    UPDATE tasks
    SET status = 'completed',
        completed_at = :completed_at,
        completed_by = :completed_by,
        actual_minutes = estimated_minutes
    WHERE id = :id AND status = 'pending'
"""


@dataclass
class AutoCompletionOutcome:
    """
    Result of one auto-completion run.

    Attributes:
        completed_count: Rows actually transitioned to completed
        total_revenue: Revenue of the completed rows only
        completed_task_ids: Ids of the completed rows
        skipped_task_ids: Rows no longer pending when updated
        failed_task_ids: Rows whose update raised
    """
    completed_count: int = 0
    total_revenue: float = 0.0
    completed_task_ids: List[Any] = field(default_factory=list)
    skipped_task_ids: List[Any] = field(default_factory=list)
    failed_task_ids: List[Any] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.failed_task_ids

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API response."""
        return {
            "completed": self.completed_count,
            "revenue": self.total_revenue,
            "completed_task_ids": self.completed_task_ids,
            "skipped_task_ids": self.skipped_task_ids,
            "failed_task_ids": self.failed_task_ids,
        }


def format_timestamp(moment: datetime) -> str:
    """Timestamp format shared by SQLite's datetime() and the other backends."""
    return moment.strftime("%Y-%m-%d %H:%M:%S")


class AutoCompletionEngine:
    """
    Completes pending auto-completable tasks and totals their revenue.

    Example:
        >>> engine = AutoCompletionEngine(gateway, AutomationConfig())
        >>> outcome = engine.auto_complete()
        >>> outcome.completed_count, outcome.total_revenue
        (3, 675.0)
    """

    def __init__(
        self,
        gateway: DataStoreGateway,
        config: AutomationConfig,
        clock: Callable[[], datetime] = datetime.utcnow,
    ):
        self.gateway = gateway
        self.config = config
        self.clock = clock

    def select_batch(self, limit: Optional[int] = None) -> List[Row]:
        """Fetch at most `limit` pending auto-completable tasks."""
        batch_size = self.config.auto_complete_limit if limit is None else limit
        return self.gateway.all(
            SELECT_AUTO_COMPLETABLE_SQL,
            {"auto_completable": True, "limit": batch_size},
        )

    def complete_task(self, task: Row) -> bool:
        """
        Transition one task to completed.

        Returns:
            False if the task was no longer pending
        """
        affected = self.gateway.run(
            COMPLETE_TASK_SQL,
            {
                "id": task["id"],
                "completed_at": format_timestamp(self.clock()),
                "completed_by": self.config.automation_agent,
            },
        )
        return affected > 0

    def auto_complete(self, limit: Optional[int] = None) -> AutoCompletionOutcome:
        """
        Run one auto-completion batch.

        Args:
            limit: Batch cap; defaults to config.auto_complete_limit

        Returns:
            AutoCompletionOutcome for the batch

        Raises:
            DatabaseError: If the batch cannot be selected
        """
        tasks = self.select_batch(limit)
        outcome = AutoCompletionOutcome()

        logger.info(f"Auto-completing {len(tasks)} eligible tasks")

        for task in tasks:
            task_id = task["id"]
            try:
                transitioned = self.complete_task(task)
            except DatabaseError as e:
                logger.warning(f"Auto-complete failed for task {task_id}: {e.message}")
                outcome.failed_task_ids.append(task_id)
                continue

            if not transitioned:
                logger.debug(f"Task {task_id} was no longer pending, skipped")
                outcome.skipped_task_ids.append(task_id)
                continue

            outcome.completed_task_ids.append(task_id)
            outcome.completed_count += 1
            outcome.total_revenue += task_revenue(task, self.config)

        logger.info(
            f"Auto-complete finished: completed={outcome.completed_count} "
            f"revenue={outcome.total_revenue:.2f} "
            f"skipped={len(outcome.skipped_task_ids)} failed={len(outcome.failed_task_ids)}"
        )
        return outcome
