"""
Stream ownership for http_adapter.

This module provides the Stream wrapper used for request and response
bodies. A Stream owns exactly one raw binary handle until the handle is
detached, at which point ownership moves to whoever called ``detach()``.
"""

import io
from typing import Any, BinaryIO, Optional, Union

from .exceptions import StreamError


class Stream:
    """
    Owned wrapper around a raw byte-stream handle.

    The raw handle is any object with a ``read`` method (and usually
    ``close``), such as ``io.BytesIO``, an open file or a socket file.
    Once detached the Stream holds nothing and every operation other
    than ``close`` fails with StreamError.
    """

    def __init__(self, handle: BinaryIO) -> None:
        """
        Initialize Stream.

        Args:
            handle: The raw binary handle to take ownership of
        """
        if handle is None:
            raise StreamError("Cannot wrap a missing handle")

        if not callable(getattr(handle, "read", None)):
            raise StreamError(
                f"Handle of type {type(handle).__name__} is not readable"
            )

        self._handle: Optional[BinaryIO] = handle
        self._closed = False
        self._detached = False

    @classmethod
    def from_bytes(cls, data: Union[bytes, bytearray]) -> "Stream":
        """Create a Stream over an in-memory copy of ``data``."""
        return cls(io.BytesIO(bytes(data)))

    def detach(self) -> BinaryIO:
        """
        Hand the raw handle over to the caller.

        Returns:
            The raw handle; the caller is now responsible for closing it

        Raises:
            StreamError: If the handle was already detached or closed
        """
        if self._closed:
            raise StreamError("Cannot detach a closed stream")

        if self._handle is None:
            raise StreamError("Stream has already been detached")

        handle = self._handle
        self._handle = None
        self._detached = True
        return handle

    def read(self, size: int = -1) -> bytes:
        """
        Read up to ``size`` bytes, or everything when ``size`` is negative.

        Raises:
            StreamError: If the stream is closed or detached
        """
        handle = self._require_handle("read from")

        try:
            return handle.read(size)
        except (OSError, ValueError) as e:
            raise StreamError(f"Error reading from stream: {e}", cause=e) from e

    def close(self) -> None:
        """Close the stream and its handle. Closing twice is a no-op."""
        if self._closed:
            return

        self._closed = True
        handle, self._handle = self._handle, None

        if handle is not None and callable(getattr(handle, "close", None)):
            handle.close()

    def _require_handle(self, action: str) -> BinaryIO:
        if self._closed:
            raise StreamError(f"Cannot {action} closed stream")

        if self._handle is None:
            raise StreamError(f"Cannot {action} detached stream")

        return self._handle

    def __enter__(self) -> "Stream":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        if self._closed:
            state = "closed"
        elif self._handle is None:
            state = "detached"
        else:
            state = "open"
        return f"<Stream [{state}]>"

    @property
    def closed(self) -> bool:
        """Get whether the stream is closed."""
        return self._closed

    @property
    def detached(self) -> bool:
        """Get whether the handle has been handed over."""
        return self._detached


def create_stream(data: Union[bytes, bytearray, str, BinaryIO, Stream]) -> Stream:
    """
    Factory function to create a Stream from various data types.

    Args:
        data: Bytes, string (encoded as UTF-8), a raw handle or a Stream

    Returns:
        Stream instance
    """
    if isinstance(data, Stream):
        return data

    if isinstance(data, str):
        data = data.encode("utf-8")

    if isinstance(data, (bytes, bytearray)):
        return Stream.from_bytes(data)

    return Stream(data)


def read_stream_to_bytes(stream: Stream) -> bytes:
    """
    Read entire stream and close it.

    Args:
        stream: The stream to drain

    Returns:
        All bytes from the stream
    """
    with stream:
        return stream.read()
