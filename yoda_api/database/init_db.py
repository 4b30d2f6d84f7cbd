"""
Database Initialization - Create tables for both stores.

Called on startup when AUTO_INIT_DB is enabled, or run directly:

    python -m yoda_api.database.init_db
"""
from yoda_api.core.logging_config import get_logger
from yoda_api.database.connection import CLINICAL_STORE, MEMORY_STORE, get_database
from yoda_api.database.models import ClinicalBase, MemoryBase

logger = get_logger(__name__)


def init_tables() -> bool:
    """
    Create clinical and memory tables if they don't exist.

    Returns:
        True if tables were created successfully
    """
    try:
        ClinicalBase.metadata.create_all(get_database(CLINICAL_STORE).engine)
        MemoryBase.metadata.create_all(get_database(MEMORY_STORE).engine)

        logger.info("Clinical and memory tables initialized successfully")
        return True

    except Exception as e:
        logger.error(f"Failed to initialize tables: {e}")
        raise


if __name__ == "__main__":
    print("Initializing clinical and memory tables...")
    init_tables()
    print("Done!")
