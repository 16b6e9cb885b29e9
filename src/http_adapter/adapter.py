"""
Adapter layer for http_adapter.

This module implements the boundary between the abstract Request and
Response types and a concrete TransportClient.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional, Union

from .exceptions import RequestException, ValidationError
from .http_primitives import Request, Response
from .streams import Stream
from .transport.base import RequestOptions, TransportClient, TransportResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Success:
    """The exchange completed; ``response`` is None if the transport gave none."""

    response: Optional[Response]

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> Optional[Response]:
        return self.response


@dataclass(frozen=True)
class Failure:
    """The transport failed; ``error`` carries request, partial response and cause."""

    error: RequestException

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> Optional[Response]:
        raise self.error from self.error.cause


Outcome = Union[Success, Failure]


class Adapter(ABC):
    """Interface for sending abstract requests."""

    @abstractmethod
    def send(self, request: Request) -> Optional[Response]:
        """
        Send a request and return its response.

        Raises:
            RequestError: If the transport fails to complete the exchange.
        """
        pass


class TransportAdapter(Adapter):
    """
    Adapter driving an injected TransportClient.

    The adapter keeps no state besides the client reference, so it is
    as safe for concurrent use as the client itself.
    """

    def __init__(self, client: TransportClient) -> None:
        """
        Initialize the adapter.

        Args:
            client: The transport that performs the network I/O
        """
        self._client = client

    @property
    def client(self) -> TransportClient:
        return self._client

    def send(self, request: Request) -> Optional[Response]:
        return self.dispatch(request).unwrap()

    def dispatch(self, request: Request) -> Outcome:
        """
        Send a request, reporting transport failures as a Failure.

        Errors raised while building the native request are not
        transport failures and propagate unchanged.

        Args:
            request: The request to send

        Returns:
            Success with the response, or Failure with a RequestException
        """
        native_request = self.transform_request(request)

        logger.debug(f"Dispatching {request.method} {request.url}")

        try:
            native_response = self._client.send(native_request)
        except self._client.failure_types as e:
            logger.error(f"Request {request.method} {request.url} failed: {e}")
            return Failure(RequestException.create(
                native_request, self._transform_partial(e), e
            ))

        response = self.transform_response(native_response)

        if response is None:
            logger.debug(f"{request.method} {request.url} -> no response")
        else:
            logger.debug(
                f"{request.method} {request.url} -> "
                f"{response.status_code} {response.reason_phrase}"
            )

        return Success(response)

    def _transform_partial(self, error: BaseException) -> Optional[Response]:
        # A partial response that cannot be represented is dropped so the
        # transport failure still surfaces as a RequestException.
        try:
            return self.transform_response(getattr(error, "response", None))
        except ValidationError as e:
            logger.warning(f"Discarding invalid partial response: {e}")
            return None

    def transform_request(self, request: Request) -> Any:
        """
        Create a transport-native request.

        The body, if any, is detached and handed to the transport; the
        ``body`` option is left out entirely for bodyless requests.

        Args:
            request: The abstract request

        Returns:
            Whatever the transport's ``create_request`` returns
        """
        options: RequestOptions = {
            "version": request.protocol_version,
            "headers": request.headers.as_dict(),
        }

        if request.body is not None:
            options["body"] = request.body.detach()

        return self._client.create_request(request.method, str(request.url), options)

    def transform_response(
        self, response: Optional[TransportResponse] = None
    ) -> Optional[Response]:
        """
        Create a Response from a transport-native response.

        The reason phrase is always derived from the status code, never
        taken from the transport.

        Args:
            response: The native response, or None

        Returns:
            The abstract Response, or None when there was no native response
        """
        if response is None:
            return None

        native_body = response.body
        body = Stream(native_body.detach()) if native_body is not None else None

        return Response(
            response.status_code,
            None,
            response.headers,
            body,
            response.protocol_version,
        )
