"""
Services module - Business logic and orchestration.

Services contain the core application logic:
- No HTTP concerns (those belong in api/)
- No connection handling (that belongs in database/)
- Each service receives its gateways and AutomationConfig at construction
"""
from yoda_api.services.automation_service import AutoCompletionEngine, AutoCompletionOutcome
from yoda_api.services.billing import DefaultPolicy, default_policies, task_revenue
from yoda_api.services.listing_service import ListingService
from yoda_api.services.query_service import QueryResult, QueryService
from yoda_api.services.status_service import StatusReport, StatusService

__all__ = [
    "AutoCompletionEngine",
    "AutoCompletionOutcome",
    "DefaultPolicy",
    "default_policies",
    "task_revenue",
    "ListingService",
    "QueryResult",
    "QueryService",
    "StatusReport",
    "StatusService",
]
