"""
Query Service - Answers free-text questions about the practice.

This service handles the complete flow:
1. Classify the query into an intent
2. Dispatch to the handler registered for that intent
3. Return a human-readable answer plus the structured rows behind it

Handlers re-fetch everything per call; nothing is cached between requests.
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from yoda_api.analytics import Intent, IntentClassifier
from yoda_api.core.config import AutomationConfig
from yoda_api.core.logging_config import get_logger
from yoda_api.database.gateway import DataStoreGateway
from yoda_api.services.automation_service import AutoCompletionEngine

logger = get_logger(__name__)

CLIENTS_BY_NAME_SQL = """
    SELECT * FROM clients
    ORDER BY full_name
    LIMIT :limit
"""

PENDING_TASKS_BY_PRIORITY_SQL = """
    SELECT t.*, c.full_name AS client_name
    FROM tasks t
    LEFT JOIN clients c ON t.client_id = c.id
    WHERE t.status = 'pending'
    ORDER BY t.priority ASC
    LIMIT :limit
"""

CAPABILITIES_MESSAGE = "I can help with: clients, tasks, revenue, automation."


@dataclass
class QueryResult:
    """
    Answer to a free-text query.

    Attributes:
        response_text: Natural language summary
        data: Structured rows keyed by what they contain
        intent: Intent the query was classified as
    """
    response_text: str
    data: Dict[str, Any] = field(default_factory=dict)
    intent: Intent = Intent.UNKNOWN


class QueryService:
    """
    Routes free-text queries to intent handlers.

    Example:
        >>> service = QueryService(gateway, AutomationConfig())
        >>> result = service.handle("How many clients do I have")
        >>> result.response_text
        'Found 4 clients.'
    """

    def __init__(
        self,
        gateway: DataStoreGateway,
        config: AutomationConfig,
        engine: Optional[AutoCompletionEngine] = None,
        classifier: Optional[IntentClassifier] = None,
    ):
        self.gateway = gateway
        self.config = config
        self.engine = engine or AutoCompletionEngine(gateway, config)
        self.classifier = classifier or IntentClassifier()

        self._handlers: Dict[Intent, Callable[[], QueryResult]] = {
            Intent.CLIENT: self.handle_clients,
            Intent.TASK: self.handle_tasks,
            Intent.AUTOMATE: self.handle_automate,
            Intent.UNKNOWN: self.handle_unknown,
        }

    def handle(self, query: str) -> QueryResult:
        """
        Answer a query.

        Raises:
            DatabaseError: If the underlying read fails
        """
        intent = self.classifier.classify(query)
        logger.info(f"Handling query: intent={intent.value}, query={query[:50]!r}")

        result = self._handlers[intent]()
        result.intent = intent
        return result

    def handle_clients(self) -> QueryResult:
        clients = self.gateway.all(CLIENTS_BY_NAME_SQL, {"limit": self.config.client_query_limit})
        return QueryResult(
            response_text=f"Found {len(clients)} clients.",
            data={"clients": clients},
        )

    def handle_tasks(self) -> QueryResult:
        tasks = self.gateway.all(
            PENDING_TASKS_BY_PRIORITY_SQL, {"limit": self.config.task_query_limit}
        )
        return QueryResult(
            response_text=f"You have {len(tasks)} pending tasks.",
            data={"tasks": tasks},
        )

    def handle_automate(self) -> QueryResult:
        """Complete a small batch through the same path as the bulk endpoint."""
        outcome = self.engine.auto_complete(limit=self.config.automate_query_limit)
        return QueryResult(
            response_text=f"✅ Automated {outcome.completed_count} tasks!",
            data={"automation": outcome.to_dict()},
        )

    def handle_unknown(self) -> QueryResult:
        return QueryResult(response_text=CAPABILITIES_MESSAGE)
