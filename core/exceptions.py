"""Custom exception classes for the application.

Services raise these; the handlers in `core.error_handlers` turn them into
JSON error responses with the matching HTTP status.
"""

from typing import Optional, Any, Dict


class AppException(Exception):
    """Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code to return.
        details: Optional additional error details.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppException):
    """Raised when a requested resource does not exist."""

    def __init__(self, resource: str, identifier: Any, field: str = "id"):
        """Initialize not found error.

        Args:
            resource: Type of resource (e.g., 'Recipe', 'HealthProfile').
            identifier: Value that was looked up.
            field: Name of the lookup key, ``id`` unless stated otherwise.
        """
        message = f"{resource} with {field} '{identifier}' not found"
        super().__init__(message, status_code=404, details={"resource": resource, field: identifier})


class DatabaseError(AppException):
    """Raised when a database operation fails."""

    def __init__(self, message: str, operation: Optional[str] = None):
        details = {"operation": operation} if operation else {}
        super().__init__(message, status_code=500, details=details)
