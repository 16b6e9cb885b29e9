"""
http_adapter - Transport-agnostic HTTP messages and adapters

Immutable request/response value objects with normalized headers and
standard status semantics, and an adapter that maps them onto a
concrete HTTP transport.
"""

__version__ = "0.1.0"
__author__ = "Developer"
__email__ = "dev@example.com"

# Import main components for easy access
from .http_primitives import Message, Request, Response
from .headers import HeaderBag
from .streams import Stream, create_stream, read_stream_to_bytes
from .status_codes import REASON_PHRASES, get_reason_phrase
from .adapter import Adapter, Failure, Outcome, Success, TransportAdapter
from .exceptions import (
    HTTPAdapterError,
    RequestError,
    RequestException,
    StreamError,
    ValidationError,
)
from .transport import (
    H11Transport,
    H11TransportError,
    MockTransportClient,
    TransportClient,
    TransportError,
)

__all__ = [
    "Message",
    "Request",
    "Response",
    "HeaderBag",
    "Stream",
    "create_stream",
    "read_stream_to_bytes",
    "REASON_PHRASES",
    "get_reason_phrase",
    "Adapter",
    "Failure",
    "Outcome",
    "Success",
    "TransportAdapter",
    "HTTPAdapterError",
    "RequestError",
    "RequestException",
    "StreamError",
    "ValidationError",
    "H11Transport",
    "H11TransportError",
    "MockTransportClient",
    "TransportClient",
    "TransportError",
]
