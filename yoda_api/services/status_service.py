"""
Status Service - Aggregate counts across both stores.

The four reads are independent and run concurrently in the threadpool.
If any of them fails the whole status fails; there is no partial status.
"""
import asyncio
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Callable, Dict, Tuple

from starlette.concurrency import run_in_threadpool

from yoda_api import __version__
from yoda_api.core.config import AutomationConfig
from yoda_api.core.logging_config import get_logger
from yoda_api.database.gateway import DataStoreGateway
from yoda_api.services.automation_service import format_timestamp
from yoda_api.services.billing import COUNT_DEFAULT, REVENUE_DEFAULT

logger = get_logger(__name__)

CLIENT_COUNT_SQL = "SELECT COUNT(*) AS count FROM clients"
MEMORY_COUNT_SQL = "SELECT COUNT(*) AS count FROM memories"
PENDING_TASK_COUNT_SQL = "SELECT COUNT(*) AS count FROM tasks WHERE status = 'pending'"
TODAY_REVENUE_SQL = """
    SELECT SUM(actual_minutes * :rate) AS revenue
    FROM tasks
    WHERE status = 'completed'
    AND completed_at >= :day_start
    AND completed_at < :day_end
"""


@dataclass
class StatusReport:
    clinical_count: int
    memory_count: int
    pending_tasks: int
    today_revenue: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": "operational",
            "version": __version__,
            "databases": {
                "clinical": self.clinical_count,
                "memory": self.memory_count,
            },
            "pendingTasks": self.pending_tasks,
            "todayRevenue": self.today_revenue,
        }


def utc_day_bounds(moment: datetime) -> Tuple[str, str]:
    """Start (inclusive) and end (exclusive) of the UTC day containing `moment`."""
    day_start = moment.replace(hour=0, minute=0, second=0, microsecond=0)
    return format_timestamp(day_start), format_timestamp(day_start + timedelta(days=1))


class StatusService:
    """Builds the /api/status report."""

    def __init__(
        self,
        clinical: DataStoreGateway,
        memory: DataStoreGateway,
        config: AutomationConfig,
        clock: Callable[[], datetime] = datetime.utcnow,
    ):
        self.clinical = clinical
        self.memory = memory
        self.config = config
        self.clock = clock

    async def get_status(self) -> StatusReport:
        day_start, day_end = utc_day_bounds(self.clock())

        clients, memories, pending, revenue = await asyncio.gather(
            run_in_threadpool(self.clinical.first, CLIENT_COUNT_SQL),
            run_in_threadpool(self.memory.first, MEMORY_COUNT_SQL),
            run_in_threadpool(self.clinical.first, PENDING_TASK_COUNT_SQL),
            run_in_threadpool(
                self.clinical.first,
                TODAY_REVENUE_SQL,
                {"rate": self.config.revenue_rate, "day_start": day_start, "day_end": day_end},
            ),
        )

        report = StatusReport(
            clinical_count=int(COUNT_DEFAULT.from_row(clients)),
            memory_count=int(COUNT_DEFAULT.from_row(memories)),
            pending_tasks=int(COUNT_DEFAULT.from_row(pending)),
            today_revenue=float(REVENUE_DEFAULT.from_row(revenue)),
        )
        logger.debug(f"Status computed: {report}")
        return report
