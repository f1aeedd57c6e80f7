"""Exceptions used to translate rendering failures into HTTP responses.

The renderer itself never raises these; it propagates file-system and
template-engine errors unchanged. The HTTP layer wraps them.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error responses."""

    VIEW_ERROR = "VIEW_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    VIEW_NOT_FOUND = "VIEW_NOT_FOUND"
    TEMPLATE_RENDER_ERROR = "TEMPLATE_RENDER_ERROR"


class ViewException(Exception):
    """Base exception for view errors with HTTP status code support."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VIEW_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize view exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class ViewNotFoundException(ViewException):
    """A view or layout template does not exist."""

    def __init__(self, message: str = "View not found", details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.VIEW_NOT_FOUND,
            status_code=404,
            details=details,
        )


class TemplateRenderException(ViewException):
    """The template engine failed to compile or execute a template."""

    def __init__(self, message: str = "Template rendering failed", details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.TEMPLATE_RENDER_ERROR,
            status_code=500,
            details=details,
        )
