"""
Transport components for http_adapter.

This module provides the transport capability the adapter drives,
plus a concrete h11 transport and an in-memory mock.
"""

from .base import (
    DetachableBody,
    RequestOptions,
    TransportClient,
    TransportError,
    TransportResponse,
)
from .h11_transport import H11Request, H11Response, H11Transport, H11TransportError
from .mock import MockNativeRequest, MockNativeResponse, MockTransportClient

__all__ = [
    "DetachableBody",
    "RequestOptions",
    "TransportClient",
    "TransportError",
    "TransportResponse",
    "H11Request",
    "H11Response",
    "H11Transport",
    "H11TransportError",
    "MockNativeRequest",
    "MockNativeResponse",
    "MockTransportClient",
]
