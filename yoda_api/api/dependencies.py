"""
Request dependencies - Gateways, config, and services for route handlers.

Services are cheap and stateless, so they are built per request from the
pooled store connections. Tests swap stores through app.dependency_overrides.
"""
from fastapi import Depends

from yoda_api.core.config import AutomationConfig, get_settings
from yoda_api.database import CLINICAL_STORE, MEMORY_STORE, DataStoreGateway, get_database
from yoda_api.services import AutoCompletionEngine, ListingService, QueryService, StatusService


def get_automation_config() -> AutomationConfig:
    return get_settings().automation


def get_clinical_gateway() -> DataStoreGateway:
    return DataStoreGateway(get_database(CLINICAL_STORE))


def get_memory_gateway() -> DataStoreGateway:
    return DataStoreGateway(get_database(MEMORY_STORE))


def get_auto_completion_engine(
    gateway: DataStoreGateway = Depends(get_clinical_gateway),
    config: AutomationConfig = Depends(get_automation_config),
) -> AutoCompletionEngine:
    return AutoCompletionEngine(gateway, config)


def get_query_service(
    gateway: DataStoreGateway = Depends(get_clinical_gateway),
    config: AutomationConfig = Depends(get_automation_config),
    engine: AutoCompletionEngine = Depends(get_auto_completion_engine),
) -> QueryService:
    return QueryService(gateway, config, engine=engine)


def get_status_service(
    clinical: DataStoreGateway = Depends(get_clinical_gateway),
    memory: DataStoreGateway = Depends(get_memory_gateway),
    config: AutomationConfig = Depends(get_automation_config),
) -> StatusService:
    return StatusService(clinical, memory, config)


def get_listing_service(
    gateway: DataStoreGateway = Depends(get_clinical_gateway),
) -> ListingService:
    return ListingService(gateway)
