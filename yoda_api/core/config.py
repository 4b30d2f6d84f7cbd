"""
Configuration management via environment variables.

This module loads configuration from .env file using python-dotenv.
All configuration values are accessed through the Settings class;
billing and batch limits are grouped in AutomationConfig so services
receive them explicitly at construction time.
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


PROJECT_ROOT = Path(__file__).parent.parent.parent

# Load .env file from project root
# This must happen before accessing os.environ
load_dotenv(PROJECT_ROOT / ".env")


@dataclass(frozen=True)
class AutomationConfig:
    """
    Billing rate and batch caps used by the query and automation services.

    Attributes:
        revenue_rate: Monetary units billed per minute of task work
        default_estimated_minutes: Minutes billed when a task has no estimate
        automation_agent: Attribution written to completed_by
        client_query_limit: Max clients returned by the client intent
        task_query_limit: Max tasks returned by the task intent
        automate_query_limit: Batch cap for the automate intent
        auto_complete_limit: Batch cap for the auto-complete endpoint
    """
    revenue_rate: float = 3.75
    default_estimated_minutes: int = 60
    automation_agent: str = "YODA Auto"
    client_query_limit: int = 10
    task_query_limit: int = 20
    automate_query_limit: int = 10
    auto_complete_limit: int = 50


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    frozen=True makes the dataclass immutable, preventing accidental
    modification of settings at runtime.

    Attributes:
        app_name: Application identifier for logging
        app_env: Environment name (development, staging, production)
        log_level: Logging verbosity (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for daily log files
        clinical_database_url: Connection string for the clients/tasks store
        memory_database_url: Connection string for the memories store
        auto_init_db: Create missing tables on startup
        enable_audit_logging: Log every request through AuditMiddleware
        automation: Billing rate and batch caps
    """
    # Application settings
    app_name: str
    app_env: str
    log_level: str
    log_dir: Path

    # Database settings
    clinical_database_url: str
    memory_database_url: str
    auto_init_db: bool

    # Safety settings
    enable_audit_logging: bool

    # Billing / automation
    automation: AutomationConfig

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.app_env.lower() == "development"


def _get_env(key: str, default: Optional[str] = None) -> str:
    """
    Get environment variable with optional default.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Environment variable value

    Raises:
        ValueError: If required variable is not set and no default provided
    """
    value = os.environ.get(key, default)
    if value is None:
        raise ValueError(
            f"Required environment variable '{key}' is not set. "
            f"Please check your .env file."
        )
    return value


def normalize_database_url(database_url: str) -> str:
    """
    Make a connection URL usable by SQLAlchemy.

    Hosted providers hand out `postgres://` and `mysql://` URLs; SQLAlchemy
    needs the dialect name and the driver we ship.
    """
    if database_url.startswith("postgres://"):
        database_url = database_url.replace("postgres://", "postgresql://", 1)
    if database_url.startswith("mysql://"):
        database_url = database_url.replace("mysql://", "mysql+pymysql://", 1)
    return database_url


def _default_sqlite_url(name: str) -> str:
    data_dir = PROJECT_ROOT / "data"
    data_dir.mkdir(exist_ok=True)
    return f"sqlite:///{data_dir / name}"


def load_automation_config() -> AutomationConfig:
    """Build the automation config from environment overrides."""
    return AutomationConfig(
        revenue_rate=float(_get_env("REVENUE_RATE", "3.75")),
        default_estimated_minutes=int(_get_env("DEFAULT_ESTIMATED_MINUTES", "60")),
        automation_agent=_get_env("AUTOMATION_AGENT", "YODA Auto"),
        client_query_limit=int(_get_env("CLIENT_QUERY_LIMIT", "10")),
        task_query_limit=int(_get_env("TASK_QUERY_LIMIT", "20")),
        automate_query_limit=int(_get_env("AUTOMATE_QUERY_LIMIT", "10")),
        auto_complete_limit=int(_get_env("AUTO_COMPLETE_LIMIT", "50")),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are read once at startup; maxsize=1 ensures only one
    instance exists. Call get_settings.cache_clear() after changing
    the environment (tests do this).

    Returns:
        Settings instance with all configuration values
    """
    clinical_url = os.environ.get("CLINICAL_DATABASE_URL") or _default_sqlite_url("clinical.db")
    memory_url = os.environ.get("MEMORY_DATABASE_URL") or _default_sqlite_url("memory.db")

    return Settings(
        # Application
        app_name=_get_env("APP_NAME", "YodaPracticeAPI"),
        app_env=_get_env("APP_ENV", "development"),
        log_level=_get_env("LOG_LEVEL", "DEBUG"),
        log_dir=Path(_get_env("LOG_DIR", str(PROJECT_ROOT / "logs"))),

        # Database
        clinical_database_url=normalize_database_url(clinical_url),
        memory_database_url=normalize_database_url(memory_url),
        auto_init_db=_get_env("AUTO_INIT_DB", "true").lower() == "true",

        # Safety
        enable_audit_logging=_get_env("ENABLE_AUDIT_LOGGING", "true").lower() == "true",

        # Billing
        automation=load_automation_config(),
    )
