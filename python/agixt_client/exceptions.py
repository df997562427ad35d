"""
Exception types raised by the AGiXT client.
"""

from typing import Optional


class AGiXTClientError(Exception):
    """Base exception for client errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        self.message = message
        self.details = details
        super().__init__(self.message)


class RequestError(AGiXTClientError):
    """Raised when the HTTP request could not be completed."""


class ResponseDecodeError(AGiXTClientError):
    """Raised when a response body is not the JSON shape the endpoint returns."""


class InvalidInputError(AGiXTClientError):
    """Raised when arguments are rejected before a request is sent."""


class ApiError(AGiXTClientError):
    """Raised when the server answers with a non-2xx status."""

    def __init__(self, message: str, status: int, details: Optional[str] = None):
        self.status = status
        super().__init__(message, details)

    def __str__(self) -> str:
        return f"API error ({self.status}): {self.message}"


class AuthenticationError(ApiError):
    """Raised on 401/403 responses."""


class NotFoundError(ApiError):
    """Raised on 404 responses."""
