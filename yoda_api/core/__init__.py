"""
Core module - Configuration and cross-cutting concerns.

This module provides:
- config.py         : Environment-based configuration management
- logging_config.py : Centralized logging setup
- exceptions.py     : Error hierarchy mapped to HTTP responses
- middleware.py     : CORS and audit middleware
"""
from yoda_api.core.config import get_settings, Settings, AutomationConfig
from yoda_api.core.logging_config import setup_logging, get_logger

__all__ = [
    "get_settings",
    "Settings",
    "AutomationConfig",
    "setup_logging",
    "get_logger",
]
