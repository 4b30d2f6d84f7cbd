"""
Client Routes - Client listing with pending-task counts.
"""
from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from yoda_api.api.dependencies import get_listing_service
from yoda_api.models.api import ErrorResponse
from yoda_api.services import ListingService

router = APIRouter(
    prefix="/api",
    tags=["Clients"],
    responses={500: {"model": ErrorResponse, "description": "Internal server error"}},
)


@router.get(
    "/clients",
    response_model=List[Dict[str, Any]],
    summary="List clients",
)
def list_clients(service: ListingService = Depends(get_listing_service)) -> List[Dict[str, Any]]:
    """All clients sorted by name, each with a `pending_tasks` count."""
    return service.list_clients()
