"""
Unit tests for HTTP primitives.

Tests the Request and Response classes and the status code table
to ensure they validate input and maintain immutability.
"""

import dataclasses
import io

import pytest

from http_adapter.exceptions import ValidationError
from http_adapter.headers import HeaderBag
from http_adapter.http_primitives import Request, Response
from http_adapter.status_codes import REASON_PHRASES, get_reason_phrase
from http_adapter.streams import Stream


class TestStatusCodes:
    """Test the reason phrase table."""

    @pytest.mark.parametrize("code,phrase", [
        (200, "OK"),
        (404, "Not Found"),
        (500, "Internal Server Error"),
        (418, "Unknown"),
        (209, "Unknown"),
    ])
    def test_get_reason_phrase(self, code, phrase) -> None:
        """Test exact lookups and the Unknown fallback."""
        assert get_reason_phrase(code) == phrase

    def test_table_is_read_only(self) -> None:
        """Test that the shared table cannot be mutated."""
        with pytest.raises(TypeError):
            REASON_PHRASES[200] = "Fine"


class TestRequest:
    """Test Request class functionality."""

    def test_create_basic(self) -> None:
        """Test creating a Request with defaults."""
        request = Request.create("GET", "http://foo.com")
        assert request.method == "GET"
        assert request.url == "http://foo.com"
        assert request.protocol_version == "1.1"
        assert request.headers == HeaderBag()
        assert request.body is None

    def test_create_with_headers(self, sample_request_data) -> None:
        """Test that headers are normalized."""
        request = Request.create(**sample_request_data)
        assert isinstance(request.headers, HeaderBag)
        assert request.get_header("content-type") == ["application/json"]
        assert request.get_header_line("AUTHORIZATION") == "Bearer token123"
        assert request.has_header("Authorization")

    def test_create_with_bytes(self) -> None:
        """Test creating a Request from bytes method and URL."""
        request = Request.create(b"POST", b"https://example.com/data", body=b"payload")
        assert request.method == "POST"
        assert request.url == "https://example.com/data"
        assert isinstance(request.body, Stream)
        assert request.body.read() == b"payload"

    def test_constructor_normalizes_headers(self) -> None:
        """Test that raw mappings passed to the constructor are normalized."""
        request = Request("GET", "http://foo.com", {"X-A": ["1", "2"]})
        assert request.headers["x-a"] == ("1", "2")

    @pytest.mark.parametrize("method", ["", None, b"GET"])
    def test_validation_method(self, method) -> None:
        """Test that method must be a non-empty string."""
        with pytest.raises(ValidationError, match="method"):
            Request(method=method, url="http://foo.com")

    @pytest.mark.parametrize("url", ["/relative/path", "foo.com", "http://", ""])
    def test_validation_url(self, url) -> None:
        """Test that url must be absolute."""
        with pytest.raises(ValidationError, match="absolute"):
            Request(method="GET", url=url)

    def test_validation_protocol_version(self) -> None:
        """Test that protocol_version must be non-empty."""
        with pytest.raises(ValidationError, match="protocol_version"):
            Request("GET", "http://foo.com", protocol_version="")

    def test_validation_body(self) -> None:
        """Test that body must be a Stream when constructed directly."""
        with pytest.raises(ValidationError, match="body"):
            Request("GET", "http://foo.com", body=b"raw")

    def test_immutability(self) -> None:
        """Test that Request is immutable."""
        request = Request.create("GET", "http://foo.com")

        with pytest.raises(dataclasses.FrozenInstanceError):
            request.method = "POST"

        with pytest.raises(dataclasses.FrozenInstanceError):
            request.headers = HeaderBag()

    def test_with_method(self) -> None:
        """Test creating new request with different method."""
        original = Request.create("GET", "http://foo.com")
        modified = original.with_method("POST")

        assert modified.method == "POST"
        assert modified.url == original.url
        assert original.method == "GET"

    def test_with_url(self) -> None:
        """Test creating new request with different URL."""
        modified = Request.create("GET", "http://foo.com").with_url("https://bar.com/x")
        assert modified.url == "https://bar.com/x"

        with pytest.raises(ValidationError):
            modified.with_url("not a url")

    def test_header_mutators(self) -> None:
        """Test the header with_* methods."""
        original = Request.create("GET", "http://foo.com", headers={"Accept": "text/html"})

        assert original.with_header("Accept", "*/*").get_header("accept") == ["*/*"]
        assert original.with_added_header("accept", "*/*").get_header("accept") == [
            "text/html", "*/*",
        ]
        assert not original.without_header("ACCEPT").has_header("accept")
        assert original.with_headers({"X-New": "1"}).headers == {"x-new": ["1"]}
        assert original.get_header("accept") == ["text/html"]

    def test_with_body(self) -> None:
        """Test creating new request with a body."""
        original = Request.create("POST", "http://foo.com")
        modified = original.with_body("text")

        assert modified.body.read() == b"text"
        assert original.body is None
        assert modified.with_body(None).body is None

    def test_with_protocol_version(self) -> None:
        """Test creating new request with different protocol version."""
        modified = Request.create("GET", "http://foo.com").with_protocol_version("1.0")
        assert modified.protocol_version == "1.0"


class TestResponse:
    """Test Response class functionality."""

    def test_create_basic(self) -> None:
        """Test creating basic Response."""
        response = Response.create(200)
        assert response.status_code == 200
        assert response.reason_phrase == "OK"
        assert response.headers == HeaderBag()
        assert response.body is None
        assert response.protocol_version == "1.1"

    def test_positional_construction(self) -> None:
        """Test constructing with positional arguments."""
        body = Stream(io.BytesIO(b"{}"))
        response = Response(201, None, {"Location": "/v1/data/123"}, body, "1.0")

        assert response.reason_phrase == "Created"
        assert response.get_header("location") == ["/v1/data/123"]
        assert response.body is body
        assert response.protocol_version == "1.0"

    def test_every_valid_code_has_a_phrase(self) -> None:
        """Test that all codes in [100, 599] construct with a phrase."""
        for code in range(100, 600):
            response = Response(code)
            assert response.reason_phrase
            assert response.reason_phrase == REASON_PHRASES.get(code, "Unknown")

    @pytest.mark.parametrize("code", [0, 99, 600, 1000, -200])
    def test_validation_status_code_range(self, code) -> None:
        """Test that out-of-range status codes are rejected."""
        with pytest.raises(ValidationError, match="between 100 and 599"):
            Response(code)

    @pytest.mark.parametrize("code", ["200", 200.0, None, True])
    def test_validation_status_code_int(self, code) -> None:
        """Test that status_code must be an integer."""
        with pytest.raises(ValidationError, match="should be an integer"):
            Response(code)

    def test_unlisted_code(self) -> None:
        """Test that an unlisted valid code resolves to Unknown."""
        assert Response(209).reason_phrase == "Unknown"

    def test_explicit_reason_phrase(self) -> None:
        """Test that a given reason phrase is kept."""
        assert Response(200, "Everything Fine").reason_phrase == "Everything Fine"
        assert Response(200, "").reason_phrase == "OK"

    def test_immutability(self) -> None:
        """Test that Response is immutable."""
        response = Response.create(200)

        with pytest.raises(dataclasses.FrozenInstanceError):
            response.status_code = 404

        with pytest.raises(dataclasses.FrozenInstanceError):
            response.reason_phrase = "Nope"

    def test_with_status(self) -> None:
        """Test that with_status re-derives the reason phrase."""
        original = Response.create(200, headers={"Server": "nginx"})
        modified = original.with_status(404)

        assert modified.status_code == 404
        assert modified.reason_phrase == "Not Found"
        assert modified.headers == original.headers
        assert original.status_code == 200

        assert original.with_status(404, "Gone Fishing").reason_phrase == "Gone Fishing"

        with pytest.raises(ValidationError):
            original.with_status(700)

    def test_with_header(self) -> None:
        """Test creating new response with a header replaced."""
        response = Response.create(200).with_header("Content-Type", "text/plain")
        assert response.get_header_line("content-type") == "text/plain"
        assert response.reason_phrase == "OK"

    def test_with_body(self) -> None:
        """Test creating new response with a body."""
        response = Response.create(200).with_body(b"hello")
        assert response.body.read() == b"hello"

    @pytest.mark.parametrize("code,attribute", [
        (101, "is_informational"),
        (204, "is_success"),
        (302, "is_redirect"),
        (404, "is_client_error"),
        (503, "is_server_error"),
    ])
    def test_status_class_predicates(self, code, attribute) -> None:
        """Test the status class predicates."""
        response = Response(code)
        predicates = [
            "is_informational", "is_success", "is_redirect",
            "is_client_error", "is_server_error",
        ]
        for name in predicates:
            assert getattr(response, name) is (name == attribute)
