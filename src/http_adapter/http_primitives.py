"""
HTTP primitives for http_adapter.

This module defines the core data structures for HTTP requests and responses.
All classes are immutable to ensure thread safety and simplify reasoning.
"""

from dataclasses import dataclass, field, replace
from typing import BinaryIO, List, Optional, Union
from urllib.parse import urlparse

from .exceptions import ValidationError
from .headers import HeaderBag, HeaderValue, RawHeaders
from .status_codes import get_reason_phrase, is_valid_status_code
from .streams import Stream, create_stream

DEFAULT_PROTOCOL_VERSION = "1.1"

Body = Union[Stream, bytes, str, BinaryIO, None]


def _to_stream(body: Body) -> Optional[Stream]:
    if body is None:
        return None
    return create_stream(body)


class Message:
    """
    Behaviour shared by Request and Response.

    Holds the protocol version, a composed HeaderBag and an optional
    body Stream. Header accessors delegate to the HeaderBag.
    """

    headers: HeaderBag
    body: Optional[Stream]
    protocol_version: str

    def _validate_message(self) -> None:
        if not isinstance(self.protocol_version, str) or not self.protocol_version:
            raise ValidationError("protocol_version must be a non-empty string")

        if self.body is not None and not isinstance(self.body, Stream):
            raise ValidationError("body must be a Stream or None")

        # Always store the normalized form, whatever the caller passed.
        object.__setattr__(self, "headers", HeaderBag.normalize(self.headers))

    def get_header(self, name: str) -> List[str]:
        """Get all values of a header (case-insensitive)."""
        return self.headers.get_values(name)

    def get_header_line(self, name: str) -> str:
        """Get a header's values joined with ", "."""
        return self.headers.get_line(name)

    def has_header(self, name: str) -> bool:
        """Check if a header exists (case-insensitive)."""
        return self.headers.has(name)

    def get_headers(self) -> HeaderBag:
        """Get the full header bag."""
        return self.headers


@dataclass(frozen=True)
class Request(Message):
    """
    Immutable HTTP request representation.

    Once created, the request cannot be modified - any changes
    must create a new Request instance.
    """

    method: str
    url: str
    headers: HeaderBag = field(default_factory=HeaderBag)
    body: Optional[Stream] = None
    protocol_version: str = DEFAULT_PROTOCOL_VERSION

    def __post_init__(self) -> None:
        """Validate request data after initialization."""
        if not isinstance(self.method, str) or not self.method:
            raise ValidationError("method must be a non-empty string")

        if not isinstance(self.url, str):
            raise ValidationError("url must be a string")

        parsed = urlparse(self.url)
        if not parsed.scheme or not parsed.netloc:
            raise ValidationError(
                f"url must be absolute with scheme and host: {self.url!r}"
            )

        self._validate_message()

    @classmethod
    def create(
        cls,
        method: Union[str, bytes],
        url: object,
        headers: Optional[RawHeaders] = None,
        body: Body = None,
        protocol_version: str = DEFAULT_PROTOCOL_VERSION,
    ) -> "Request":
        """
        Create a Request with proper type conversion.

        Args:
            method: HTTP method (GET, POST, etc.)
            url: Absolute URL, as a string or any object whose str() is one
            headers: Optional headers in any form HeaderBag accepts
            body: Optional body as a Stream, bytes, string or raw handle
            protocol_version: HTTP protocol version

        Returns:
            New Request instance
        """
        if isinstance(method, bytes):
            method = method.decode("ascii")

        if isinstance(url, bytes):
            url = url.decode("ascii")

        return cls(
            method=method,
            url=str(url),
            headers=HeaderBag.normalize(headers),
            body=_to_stream(body),
            protocol_version=protocol_version,
        )

    def with_method(self, method: str) -> "Request":
        """Create a new request with a different method."""
        return replace(self, method=method)

    def with_url(self, url: object) -> "Request":
        """Create a new request with a different URL."""
        return replace(self, url=str(url))

    def with_headers(self, headers: RawHeaders) -> "Request":
        """Create a new request with different headers."""
        return replace(self, headers=HeaderBag.normalize(headers))

    def with_header(self, name: str, value: HeaderValue) -> "Request":
        """Create a new request with one header replaced."""
        return replace(self, headers=self.headers.with_values(name, value))

    def with_added_header(self, name: str, value: HeaderValue) -> "Request":
        """Create a new request with a value appended to a header."""
        return replace(self, headers=self.headers.with_added_values(name, value))

    def without_header(self, name: str) -> "Request":
        """Create a new request without a header."""
        return replace(self, headers=self.headers.without(name))

    def with_body(self, body: Body) -> "Request":
        """Create a new request with a different body."""
        return replace(self, body=_to_stream(body))

    def with_protocol_version(self, protocol_version: str) -> "Request":
        """Create a new request with a different protocol version."""
        return replace(self, protocol_version=protocol_version)


@dataclass(frozen=True)
class Response(Message):
    """
    Immutable HTTP response representation.

    The reason phrase is derived from the status code when none is
    given. The response itself is immutable, but the body stream can
    be consumed.
    """

    status_code: int
    reason_phrase: Optional[str] = None
    headers: HeaderBag = field(default_factory=HeaderBag)
    body: Optional[Stream] = None
    protocol_version: str = DEFAULT_PROTOCOL_VERSION

    def __post_init__(self) -> None:
        """Validate response data after initialization."""
        if not isinstance(self.status_code, int) or isinstance(self.status_code, bool):
            raise ValidationError("Status code should be an integer")

        if not is_valid_status_code(self.status_code):
            raise ValidationError("Status code must be between 100 and 599")

        if not self.reason_phrase:
            object.__setattr__(
                self, "reason_phrase", get_reason_phrase(self.status_code)
            )

        self._validate_message()

    @classmethod
    def create(
        cls,
        status_code: int,
        reason_phrase: Optional[str] = None,
        headers: Optional[RawHeaders] = None,
        body: Body = None,
        protocol_version: str = DEFAULT_PROTOCOL_VERSION,
    ) -> "Response":
        """
        Create a Response with proper validation.

        Args:
            status_code: HTTP status code
            reason_phrase: Optional reason phrase, derived when empty
            headers: Optional headers in any form HeaderBag accepts
            body: Optional body as a Stream, bytes, string or raw handle
            protocol_version: HTTP protocol version

        Returns:
            New Response instance
        """
        return cls(
            status_code=status_code,
            reason_phrase=reason_phrase,
            headers=HeaderBag.normalize(headers),
            body=_to_stream(body),
            protocol_version=protocol_version,
        )

    def with_status(self, status_code: int, reason_phrase: Optional[str] = None) -> "Response":
        """Create a new response with a different status (phrase re-derived)."""
        return replace(self, status_code=status_code, reason_phrase=reason_phrase)

    def with_headers(self, headers: RawHeaders) -> "Response":
        """Create a new response with different headers."""
        return replace(self, headers=HeaderBag.normalize(headers))

    def with_header(self, name: str, value: HeaderValue) -> "Response":
        """Create a new response with one header replaced."""
        return replace(self, headers=self.headers.with_values(name, value))

    def with_body(self, body: Body) -> "Response":
        """Create a new response with a different body."""
        return replace(self, body=_to_stream(body))

    def with_protocol_version(self, protocol_version: str) -> "Response":
        """Create a new response with a different protocol version."""
        return replace(self, protocol_version=protocol_version)

    @property
    def is_informational(self) -> bool:
        return 100 <= self.status_code < 200

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def is_redirect(self) -> bool:
        return 300 <= self.status_code < 400

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500

    @property
    def is_server_error(self) -> bool:
        return 500 <= self.status_code < 600
