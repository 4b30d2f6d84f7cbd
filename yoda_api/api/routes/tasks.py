"""
Task Routes - Pending task listing and bulk auto-completion.
"""
from fastapi import APIRouter, Depends

from yoda_api.api.dependencies import get_auto_completion_engine, get_listing_service
from yoda_api.models.api import AutoCompleteResponse, ErrorResponse, TasksResponse
from yoda_api.services import AutoCompletionEngine, ListingService


router = APIRouter(
    prefix="/api/tasks",
    tags=["Tasks"],
    responses={500: {"model": ErrorResponse, "description": "Internal server error"}},
)


@router.get(
    "",
    response_model=TasksResponse,
    summary="List pending tasks",
)
def list_tasks(service: ListingService = Depends(get_listing_service)) -> TasksResponse:
    """Pending tasks by priority then due date, with auto-completable count."""
    return TasksResponse(**service.list_pending_tasks())


@router.post(
    "/auto-complete",
    response_model=AutoCompleteResponse,
    summary="Complete auto-completable tasks",
    description="""
    Completes up to 50 pending auto-completable tasks, one at a time.

    Each task is stamped with `completed_at`, `completed_by`, and gets
    `actual_minutes` copied from its estimate. Revenue is billed from the
    estimate (60 minutes when missing) at the configured rate.

    A task that fails to update is listed in `failed`; the rest of the
    batch still runs and `success` is false.
    """
)
def auto_complete(engine: AutoCompletionEngine = Depends(get_auto_completion_engine)) -> AutoCompleteResponse:
    outcome = engine.auto_complete()

    return AutoCompleteResponse(
        success=outcome.success,
        completed=outcome.completed_count,
        revenue=outcome.total_revenue,
        skipped=outcome.skipped_task_ids,
        failed=outcome.failed_task_ids,
        message=f"Completed {outcome.completed_count} tasks, generated ${outcome.total_revenue:.2f}!",
    )
