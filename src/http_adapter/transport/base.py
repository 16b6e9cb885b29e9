"""
Transport capability for http_adapter.

This module defines the contract that a concrete HTTP transport must
satisfy to be driven by a TransportAdapter.
"""

from abc import ABC, abstractmethod
from typing import Any, BinaryIO, ClassVar, Dict, List, Optional, Tuple, Type

from typing_extensions import NotRequired, Protocol, TypedDict, runtime_checkable


class RequestOptions(TypedDict):
    """Options handed to ``TransportClient.create_request``."""

    version: str
    headers: Dict[str, List[str]]
    body: NotRequired[BinaryIO]


@runtime_checkable
class DetachableBody(Protocol):
    """A native body that can give up its raw handle."""

    def detach(self) -> BinaryIO:
        ...


@runtime_checkable
class TransportResponse(Protocol):
    """
    Shape of a transport-native response.

    ``headers`` may be a mapping of name to value(s) or an iterable of
    ``(name, value)`` pairs; ``body`` is None for bodyless responses.
    """

    @property
    def status_code(self) -> int:
        ...

    @property
    def protocol_version(self) -> str:
        ...

    @property
    def headers(self) -> Any:
        ...

    @property
    def body(self) -> Optional[DetachableBody]:
        ...


class TransportError(Exception):
    """
    Base class for transport-native request failures.

    Carries the native request and, when the transport got that far,
    the partial native response.
    """

    def __init__(
        self,
        message: str,
        request: Any = None,
        response: Optional[TransportResponse] = None,
    ) -> None:
        super().__init__(message)
        self.request = request
        self.response = response


class TransportClient(ABC):
    """
    Interface for HTTP transport implementations.

    A transport builds native requests from method, URL and options,
    and sends them, returning a native response or raising one of
    ``failure_types``.
    """

    failure_types: ClassVar[Tuple[Type[BaseException], ...]] = (TransportError,)

    @abstractmethod
    def create_request(self, method: str, url: str, options: RequestOptions) -> Any:
        """
        Build a transport-native request.

        Args:
            method: HTTP method
            url: Absolute URL
            options: Protocol version, headers and, if present, the raw body

        Returns:
            The native request handle.
        """
        pass

    @abstractmethod
    def send(self, request: Any) -> Optional[TransportResponse]:
        """
        Send a native request.

        Args:
            request: A handle returned by ``create_request``

        Returns:
            The native response, or None if the transport produced none.

        Raises:
            TransportError: If the exchange fails.
        """
        pass
