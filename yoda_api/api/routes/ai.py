"""
AI Routes - Keyword-routed natural-language queries.

The query is classified by substring (client, then task, then automate)
and answered from the clinical store. An automate query completes a small
batch of auto-completable tasks.
"""
from datetime import datetime

from fastapi import APIRouter, Depends

from yoda_api.api.dependencies import get_query_service
from yoda_api.models.api import ErrorResponse, QueryRequest, QueryResponse
from yoda_api.services import QueryService


router = APIRouter(
    prefix="/api/ai",
    tags=["AI"],
    responses={
        400: {"model": ErrorResponse, "description": "Malformed query body"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)


@router.post(
    "/query",
    response_model=QueryResponse,
    summary="Ask a question",
    description="""
    Send a free-text question.

    **Intents (first match wins):**
    - mentions `client`: up to 10 clients by name
    - mentions `task`: up to 20 pending tasks by priority
    - mentions `automate`: completes up to 10 auto-completable tasks
    - anything else: a list of what the assistant can help with
    """
)
def ask(request: QueryRequest, service: QueryService = Depends(get_query_service)) -> QueryResponse:
    result = service.handle(request.query)

    return QueryResponse(
        response=result.response_text,
        data=result.data,
        query=request.query,
        timestamp=datetime.utcnow(),
    )
