"""
Common exception classes for the Ajax command toolkit.

Builders and the responder never raise these: encoding failures surface as
the JSON encoder's own errors. These classes cover configuration and the
HTTP callback layer.
"""

from __future__ import annotations

from typing import Any


class AjaxCommandsError(Exception):
    """Base exception class for all toolkit errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        *,
        status_code: int | None = None,
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
            status_code: Optional HTTP status code hint for transport adapters
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.status_code = status_code or 500

    def to_dict(self) -> dict[str, Any]:
        error_dict: dict[str, Any] = {
            "message": self.message,
            "type": self.__class__.__name__,
        }
        if self.details:
            error_dict["details"] = self.details
        return {"error": error_dict}


class ConfigurationError(AjaxCommandsError):
    """Raised when there's a configuration issue."""

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details, status_code=400)


class CallbackNotFoundError(AjaxCommandsError):
    """Raised when a request names an Ajax callback that is not registered."""

    def __init__(
        self,
        message: str = "Ajax callback not found",
        callback_name: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details, status_code=404)
        self.callback_name = callback_name

