"""
API Routes module - Endpoint definitions.

Each file in this module defines routes for a specific domain:
- status.py  : Aggregate counts and revenue
- ai.py      : Keyword-routed free-text queries
- clients.py : Client listing
- tasks.py   : Task listing and auto-completion
"""
from yoda_api.api.routes.ai import router as ai_router
from yoda_api.api.routes.clients import router as clients_router
from yoda_api.api.routes.status import router as status_router
from yoda_api.api.routes.tasks import router as tasks_router

# Listed in 404 responses.
AVAILABLE_ROUTES = ["/api/status", "/api/clients", "/api/tasks", "/api/ai/query"]

__all__ = [
    "ai_router",
    "clients_router",
    "status_router",
    "tasks_router",
    "AVAILABLE_ROUTES",
]
