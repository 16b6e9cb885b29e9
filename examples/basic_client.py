"""
Basic client example using http_adapter.

This example demonstrates how to send abstract requests through
a TransportAdapter backed by the h11 transport.
"""

import logging

from http_adapter import (
    H11Transport,
    Request,
    RequestError,
    Success,
    TransportAdapter,
    read_stream_to_bytes,
)

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def simple_get_request(adapter: TransportAdapter) -> None:
    """Demonstrate a simple GET request."""
    logger.info("Making simple GET request...")

    request = Request.create("GET", "http://httpbin.org/get")
    response = adapter.send(request)

    logger.info(f"Response status: {response.status_code} {response.reason_phrase}")
    logger.info(f"Content-Type: {response.get_header_line('content-type')}")

    if response.body is not None:
        body = read_stream_to_bytes(response.body)
        logger.info(f"Response body length: {len(body)} bytes")


def post_request_with_body(adapter: TransportAdapter) -> None:
    """Demonstrate a POST request with body."""
    logger.info("Making POST request with body...")

    request = Request.create(
        "POST",
        "http://httpbin.org/post",
        headers={"Content-Type": "application/json"},
        body=b'{"message": "Hello, World!"}',
    )

    outcome = adapter.dispatch(request)

    if isinstance(outcome, Success):
        logger.info(f"Response status: {outcome.response.status_code}")
    else:
        logger.warning(f"Request failed: {outcome.error}")


def failing_request(adapter: TransportAdapter) -> None:
    """Demonstrate transport failure handling."""
    logger.info("Making request to an unreachable host...")

    try:
        adapter.send(Request.create("GET", "http://localhost:1/"))
    except RequestError as e:
        logger.info(f"Caught {type(e).__name__}: {e}")
        logger.info(f"Original cause: {e.cause!r}")


def main() -> None:
    """Run all examples."""
    logger.info("Starting client examples...")

    adapter = TransportAdapter(H11Transport(timeout=10.0))

    simple_get_request(adapter)
    print()

    post_request_with_body(adapter)
    print()

    failing_request(adapter)

    logger.info("All examples completed successfully!")


if __name__ == "__main__":
    main()
