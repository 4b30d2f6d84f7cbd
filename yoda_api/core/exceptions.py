"""
Custom Exceptions - Application-specific error classes.

This module defines a hierarchy of exceptions for clean error handling:
- Each exception has a status code and error code
- Used by the API layer for consistent error responses
"""
from typing import List, Optional


class YodaException(Exception):
    """
    Base exception for all API errors.

    Subclass this for specific error types.
    """
    status_code: int = 500
    error_code: str = "Internal server error"

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        """Convert to error response dict."""
        payload = {
            "error": self.error_code,
            "message": self.message,
        }
        if self.details:
            payload["details"] = self.details
        return payload


class ValidationError(YodaException):
    """Raised when the request body is malformed."""
    status_code = 400
    error_code = "validation_error"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, details=f"field={field}" if field else None)
        self.field = field


class DatabaseError(YodaException):
    """Raised when a store is unreachable or a statement fails."""
    status_code = 500
    error_code = "Internal server error"

    def __init__(self, message: str = "Database operation failed", store: Optional[str] = None):
        super().__init__(message, details=f"store={store}" if store else None)
        self.store = store


class RouteNotFound(YodaException):
    """Raised for any path/method pair outside the route table."""
    status_code = 404
    error_code = "Not found"

    def __init__(self, path: str, available: List[str]):
        super().__init__(message=f"No route for {path}")
        self.path = path
        self.available = list(available)

    def to_dict(self) -> dict:
        return {
            "error": self.error_code,
            "available": self.available,
        }
