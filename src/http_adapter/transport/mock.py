"""
Mock transport implementation for testing.

This module provides an in-memory TransportClient that can be used for
unit testing without requiring actual network connections.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from ..streams import Stream
from .base import RequestOptions, TransportClient, TransportError


@dataclass
class MockNativeRequest:
    """Native request produced by MockTransportClient."""

    method: str
    url: str
    options: RequestOptions

    @property
    def has_body(self) -> bool:
        return "body" in self.options


@dataclass
class MockNativeResponse:
    """Native response returned by MockTransportClient."""

    status_code: int = 200
    protocol_version: str = "1.1"
    headers: Dict[str, Any] = field(default_factory=dict)
    body: Optional[Stream] = None

    @classmethod
    def create(
        cls,
        status_code: int = 200,
        headers: Optional[Dict[str, Any]] = None,
        content: Optional[bytes] = None,
        protocol_version: str = "1.1",
    ) -> "MockNativeResponse":
        """
        Create a native response, wrapping ``content`` in a Stream.

        Args:
            status_code: Status code to report
            headers: Headers to report
            content: Body bytes, or None for a bodyless response
            protocol_version: Protocol version to report
        """
        body = Stream.from_bytes(content) if content is not None else None
        return cls(
            status_code=status_code,
            protocol_version=protocol_version,
            headers=headers or {},
            body=body,
        )


class MockTransportClient(TransportClient):
    """
    Mock transport for testing.

    Queued results are consumed in order by ``send``: a native response
    (or None) is returned, an exception is raised with the native request
    attached when it is a TransportError without one.
    """

    def __init__(
        self,
        results: Optional[List[Union[MockNativeResponse, BaseException, None]]] = None,
    ) -> None:
        """
        Initialize the mock transport.

        Args:
            results: Initial queue of responses or errors.
        """
        self._results: List[Union[MockNativeResponse, BaseException, None]] = list(
            results or []
        )
        self.created: List[MockNativeRequest] = []
        self.sent: List[MockNativeRequest] = []

    def create_request(
        self, method: str, url: str, options: RequestOptions
    ) -> MockNativeRequest:
        request = MockNativeRequest(method=method, url=url, options=options)
        self.created.append(request)
        return request

    def send(self, request: MockNativeRequest) -> Optional[MockNativeResponse]:
        self.sent.append(request)

        if not self._results:
            raise TransportError("No mock result queued", request=request)

        result = self._results.pop(0)

        if isinstance(result, BaseException):
            if isinstance(result, TransportError) and result.request is None:
                result.request = request
            raise result

        return result

    def add_response(self, response: Optional[MockNativeResponse]) -> None:
        """Queue a response (or None) for the next send."""
        self._results.append(response)

    def add_error(self, error: BaseException) -> None:
        """Queue an error for the next send."""
        self._results.append(error)

    @property
    def pending(self) -> int:
        """Number of queued results not yet consumed."""
        return len(self._results)
