"""
Pytest configuration for http_adapter tests.

This file contains shared fixtures and configuration
for all tests in the project.
"""

import pytest
from typing import Any, List, Optional, Tuple
from unittest.mock import MagicMock

from http_adapter.adapter import TransportAdapter
from http_adapter.transport.base import TransportClient, TransportError
from http_adapter.transport.mock import MockTransportClient


class FakeSocket:
    """In-memory socket that replays canned response bytes."""

    def __init__(self, chunks: List[bytes]) -> None:
        self.chunks = list(chunks)
        self.sent: List[bytes] = []
        self.closed = False
        self.address: Optional[Tuple[str, int]] = None
        self.timeout: Optional[float] = None

    def sendall(self, data: bytes) -> None:
        self.sent.append(data)

    def recv(self, max_bytes: int) -> bytes:
        if not self.chunks:
            return b""
        chunk = self.chunks.pop(0)
        if len(chunk) > max_bytes:
            self.chunks.insert(0, chunk[max_bytes:])
            chunk = chunk[:max_bytes]
        return chunk

    def close(self) -> None:
        self.closed = True

    @property
    def sent_data(self) -> bytes:
        return b"".join(self.sent)


@pytest.fixture
def fake_socket():
    """Create a connect function returning a FakeSocket with canned data."""
    def _create(*chunks: bytes) -> Tuple[Any, FakeSocket]:
        sock = FakeSocket(list(chunks))

        def connect(address: Tuple[str, int], timeout: Optional[float]) -> FakeSocket:
            sock.address = address
            sock.timeout = timeout
            return sock

        return connect, sock
    return _create


@pytest.fixture
def mock_client():
    """Create a MagicMock standing in for a TransportClient."""
    client = MagicMock(spec=TransportClient)
    client.failure_types = (TransportError,)
    return client


@pytest.fixture
def mock_transport():
    """Create an in-memory transport."""
    return MockTransportClient()


@pytest.fixture
def adapter(mock_transport):
    """Create an adapter over the in-memory transport."""
    return TransportAdapter(mock_transport)


@pytest.fixture
def sample_headers():
    """Sample headers for testing."""
    return {
        "Content-Type": "application/json",
        "Authorization": "Bearer token123",
        "User-Agent": "http_adapter/0.1.0",
        "Accept": ["text/html", "application/json"],
    }


@pytest.fixture
def sample_request_data():
    """Sample request data for testing."""
    return {
        "method": "POST",
        "url": "https://api.example.com:8443/v1/data",
        "headers": {
            "Content-Type": "application/json",
            "Authorization": "Bearer token123",
        },
    }
