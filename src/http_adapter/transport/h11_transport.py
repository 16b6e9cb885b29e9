"""
Blocking HTTP/1.1 transport for http_adapter.

This module implements a TransportClient that speaks HTTP/1.1 with h11
over a plain or TLS socket, one request per connection.
"""

import io
import logging
import socket
import ssl
from dataclasses import dataclass, field
from typing import Any, BinaryIO, Callable, List, Optional, Tuple
from urllib.parse import urlparse

import h11

from ..streams import Stream
from .base import RequestOptions, TransportClient, TransportError

logger = logging.getLogger(__name__)

NativeHeaders = List[Tuple[str, str]]
Connector = Callable[[Tuple[str, int], Optional[float]], Any]

DEFAULT_PORTS = {"http": 80, "https": 443}
# h11 only writes HTTP/1.1 request lines
SUPPORTED_VERSIONS = ("1.1",)


@dataclass
class H11Request:
    """Native request understood by H11Transport."""

    method: str
    url: str
    scheme: str
    host: str
    port: int
    target: str
    version: str
    headers: NativeHeaders = field(default_factory=list)
    body: Optional[BinaryIO] = None


@dataclass
class H11Response:
    """Native response produced by H11Transport."""

    status_code: int
    protocol_version: str
    reason: str = ""
    headers: NativeHeaders = field(default_factory=list)
    body: Optional[Stream] = None


class H11TransportError(TransportError):
    """Raised when an h11 exchange fails."""


def _body_length(body: BinaryIO) -> Optional[int]:
    """Remaining length of a seekable body, or None if unknown."""
    try:
        position = body.tell()
        end = body.seek(0, io.SEEK_END)
        body.seek(position)
    except (AttributeError, OSError, ValueError):
        return None
    return end - position


class H11Transport(TransportClient):
    """
    HTTP/1.1 transport built on h11.

    Each ``send`` opens a connection, writes the request, reads the
    whole response into memory and closes the connection. The request
    line is always written as HTTP/1.1 by h11.
    """

    # Default configuration
    DEFAULT_TIMEOUT = 30.0  # 30 seconds
    DEFAULT_READ_SIZE = 65536  # 64KB chunks

    failure_types = (H11TransportError,)

    def __init__(
        self,
        timeout: Optional[float] = None,
        read_size: Optional[int] = None,
        ssl_context: Optional[ssl.SSLContext] = None,
        connect: Optional[Connector] = None,
    ) -> None:
        """
        Initialize the transport.

        Args:
            timeout: Socket timeout in seconds for connect, read and write
            read_size: Number of bytes per socket read and body chunk
            ssl_context: Context for https URLs (system default if None)
            connect: Socket factory, ``socket.create_connection`` if None
        """
        self._timeout = timeout or self.DEFAULT_TIMEOUT
        self._read_size = read_size or self.DEFAULT_READ_SIZE
        self._ssl_context = ssl_context
        self._connect = connect or socket.create_connection

    def create_request(
        self, method: str, url: str, options: RequestOptions
    ) -> H11Request:
        """
        Build an H11Request.

        Raises:
            ValueError: If the URL or protocol version is not supported
        """
        parsed = urlparse(url)
        scheme = parsed.scheme.lower()

        if scheme not in DEFAULT_PORTS:
            raise ValueError(f"Unsupported URL scheme: {parsed.scheme!r}")

        if not parsed.hostname:
            raise ValueError(f"URL has no host: {url!r}")

        version = options["version"]
        if version not in SUPPORTED_VERSIONS:
            raise ValueError(f"Unsupported HTTP version: {version!r}")

        port = parsed.port or DEFAULT_PORTS[scheme]
        target = parsed.path or "/"
        if parsed.query:
            target = f"{target}?{parsed.query}"

        headers: NativeHeaders = [
            (name, value)
            for name, values in options["headers"].items()
            for value in values
        ]
        names = {name.lower() for name, _ in headers}

        if "host" not in names:
            host = parsed.hostname
            if ":" in host:
                host = f"[{host}]"
            if parsed.port and parsed.port != DEFAULT_PORTS[scheme]:
                host = f"{host}:{parsed.port}"
            headers.insert(0, ("Host", host))

        body = options.get("body")
        if body is not None and not names & {"content-length", "transfer-encoding"}:
            length = _body_length(body)
            if length is None:
                headers.append(("Transfer-Encoding", "chunked"))
            else:
                headers.append(("Content-Length", str(length)))

        if "connection" not in names:
            headers.append(("Connection", "close"))

        return H11Request(
            method=method,
            url=url,
            scheme=scheme,
            host=parsed.hostname,
            port=port,
            target=target,
            version=version,
            headers=headers,
            body=body,
        )

    def send(self, request: H11Request) -> H11Response:
        """
        Perform the exchange.

        Raises:
            H11TransportError: On socket, TLS or HTTP protocol failure
        """
        try:
            sock = self._open_socket(request)
        except OSError as e:
            self._close_body(request)
            raise H11TransportError(
                f"Connection to {request.host}:{request.port} failed: {e}",
                request=request,
            ) from e

        connection = h11.Connection(h11.CLIENT)
        response: Optional[H11Response] = None

        try:
            self._send_request(sock, connection, request)
            response = self._receive_head(sock, connection, request)
            content = self._receive_body(sock, connection, request, response)
        except (OSError, ValueError, h11.ProtocolError) as e:
            raise H11TransportError(
                f"{request.method} {request.url} failed: {e}",
                request=request,
                response=response,
            ) from e
        finally:
            self._close_body(request)
            sock.close()
            logger.debug(f"Connection to {request.host}:{request.port} closed")

        if content is not None:
            response.body = Stream(io.BytesIO(content))

        return response

    def _open_socket(self, request: H11Request) -> Any:
        sock = self._connect((request.host, request.port), self._timeout)

        if request.scheme == "https":
            context = self._ssl_context or ssl.create_default_context()
            try:
                sock = context.wrap_socket(sock, server_hostname=request.host)
            except OSError:
                sock.close()
                raise

        logger.debug(f"Connected to {request.host}:{request.port}")
        return sock

    def _send_request(
        self, sock: Any, connection: h11.Connection, request: H11Request
    ) -> None:
        self._send_event(sock, connection, h11.Request(
            method=request.method,
            target=request.target,
            headers=request.headers,
        ))

        if request.body is not None:
            while True:
                chunk = request.body.read(self._read_size)
                if not chunk:
                    break
                self._send_event(sock, connection, h11.Data(data=chunk))

        self._send_event(sock, connection, h11.EndOfMessage())

    def _send_event(self, sock: Any, connection: h11.Connection, event: Any) -> None:
        data = connection.send(event)
        if data:
            sock.sendall(data)

    def _next_event(
        self,
        sock: Any,
        connection: h11.Connection,
        request: H11Request,
        response: Optional[H11Response] = None,
    ) -> Any:
        eof = False

        while True:
            event = connection.next_event()

            if event is not h11.NEED_DATA:
                return event

            if eof:
                raise H11TransportError(
                    "Connection closed unexpectedly",
                    request=request,
                    response=response,
                )

            data = sock.recv(self._read_size)
            # An empty read tells h11 the peer closed; close-delimited
            # bodies end this way.
            eof = not data
            connection.receive_data(data)

    def _receive_head(
        self, sock: Any, connection: h11.Connection, request: H11Request
    ) -> H11Response:
        while True:
            event = self._next_event(sock, connection, request)

            if isinstance(event, h11.InformationalResponse):
                continue

            if isinstance(event, h11.Response):
                return H11Response(
                    status_code=event.status_code,
                    protocol_version=event.http_version.decode("ascii"),
                    reason=event.reason.decode("latin-1"),
                    headers=[
                        (name.decode("latin-1"), value.decode("latin-1"))
                        for name, value in event.headers
                    ],
                )

            if isinstance(event, h11.ConnectionClosed):
                raise H11TransportError(
                    "Connection closed by server", request=request
                )

    def _receive_body(
        self,
        sock: Any,
        connection: h11.Connection,
        request: H11Request,
        response: H11Response,
    ) -> Optional[bytes]:
        chunks: List[bytes] = []
        received = False

        while True:
            event = self._next_event(sock, connection, request, response)

            if isinstance(event, h11.Data):
                chunks.append(bytes(event.data))
                received = True
                continue

            if isinstance(event, h11.EndOfMessage):
                return b"".join(chunks) if received else None

            if isinstance(event, h11.ConnectionClosed):
                raise H11TransportError(
                    "Connection closed by server",
                    request=request,
                    response=response,
                )

    def _close_body(self, request: H11Request) -> None:
        if request.body is not None and callable(getattr(request.body, "close", None)):
            request.body.close()

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def read_size(self) -> int:
        return self._read_size
