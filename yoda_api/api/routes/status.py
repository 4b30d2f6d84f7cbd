"""
Status Routes - Aggregate counts for dashboards and monitoring.
"""
from datetime import datetime

from fastapi import APIRouter, Depends

from yoda_api.api.dependencies import get_status_service
from yoda_api.core.logging_config import get_logger
from yoda_api.models.api import ErrorResponse, StatusResponse
from yoda_api.services import StatusService

logger = get_logger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["Status"],
    responses={500: {"model": ErrorResponse, "description": "Store unavailable"}},
)


@router.get(
    "/status",
    response_model=StatusResponse,
    summary="Aggregate status",
    description="""
    Client count, memory count, pending task count, and revenue from tasks
    completed today (UTC). The four reads run concurrently; if any fails
    the request fails.
    """
)
async def get_status(service: StatusService = Depends(get_status_service)) -> StatusResponse:
    logger.debug("Status requested")

    report = await service.get_status()

    return StatusResponse(**report.to_dict(), timestamp=datetime.utcnow())
