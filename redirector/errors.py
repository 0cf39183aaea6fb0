"""
Error classes for slug registration.

Each error carries the HTTP status code, the short error title and the
client-facing message rendered into the ``{statusCode, error, message}``
envelope by the web layer.
"""

from typing import Optional, Dict, Any


class RedirectorError(Exception):
    """
    Base error class.

    Attributes:
        status_code: HTTP status code (default: 500)
        error: Short HTTP error title
        message: Client-facing error message
        details: Optional additional error details (logged, never sent)
    """
    status_code: int = 500
    error: str = "Internal server error"
    message: str = "Unknown internal server error"

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        """
        Initialize error.

        Args:
            message: Error message (overrides default)
            details: Optional additional error details
        """
        self.message = message or self.message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Render the client-facing error envelope."""
        return {
            "statusCode": self.status_code,
            "error": self.error,
            "message": self.message,
        }


class UnauthorizedError(RedirectorError):
    """401 Wrong API key."""
    status_code = 401
    error = "Unauthorized"
    message = "Wrong API key"


class ValidationError(RedirectorError):
    """400 Malformed slug or URL."""
    status_code = 400
    error = "Bad Request"
    message = "Validation error"


class SlugConflictError(RedirectorError):
    """400 Slug already registered."""
    status_code = 400
    error = "Bad Request"
    message = "Slug already registered"


class InternalError(RedirectorError):
    """500 Any other store failure."""
