"""
Custom exceptions for http_adapter.

This module defines the exception hierarchy used throughout
the library for error handling and debugging.
"""

from typing import Any, Optional


class HTTPAdapterError(Exception):
    """Base exception for all http_adapter errors."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class ValidationError(HTTPAdapterError, ValueError):
    """Raised when a message is constructed from invalid input."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(f"Validation error: {message}", cause)


class StreamError(HTTPAdapterError):
    """Raised when there's an error with stream operations."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(f"Stream error: {message}", cause)


class RequestError(HTTPAdapterError):
    """Raised when the transport fails to complete an exchange."""


class RequestException(RequestError):
    """
    Transport failure enriched with the exchange that caused it.

    Carries the transport-native request that was dispatched, the
    partial response if the transport produced one before failing
    (``None`` otherwise), and the original transport error as ``cause``.
    """

    def __init__(
        self,
        message: str,
        request: Any,
        response: Optional[Any] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message, cause)
        self.request = request
        self.response = response

    @classmethod
    def create(
        cls,
        request: Any,
        response: Optional[Any] = None,
        cause: Optional[BaseException] = None,
    ) -> "RequestException":
        """
        Build a RequestException whose message describes the cause.

        Args:
            request: The transport-native request that was sent
            response: The partial abstract response, if any
            cause: The transport-native error

        Returns:
            New RequestException instance
        """
        if cause is None:
            message = "Request failed"
        else:
            message = f"Request failed: {cause}"

        if response is not None:
            message = f"{message} [status code {response.status_code}]"

        return cls(message, request=request, response=response, cause=cause)

    @property
    def has_response(self) -> bool:
        """Whether a partial response was received before the failure."""
        return self.response is not None
