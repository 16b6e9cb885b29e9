"""
Header storage for http_adapter.

HeaderBag maps lower-cased header names to ordered tuples of string
values. It is shared by Request and Response through composition.
"""

from collections.abc import Mapping as MappingABC
from typing import (
    Any,
    Dict,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Union,
)

HeaderValue = Union[str, bytes, int, float, Sequence[Any]]
RawHeaders = Union[
    "HeaderBag",
    Mapping[str, HeaderValue],
    Iterable[Tuple[Union[str, bytes], Union[str, bytes]]],
]


def _to_str(value: Any) -> str:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("latin-1")
    return str(value)


def _to_values(value: Any) -> Tuple[str, ...]:
    if isinstance(value, (list, tuple)):
        return tuple(_to_str(item) for item in value)
    return (_to_str(value),)


class HeaderBag(MappingABC):
    """
    Case-insensitive, order-preserving multi-value header store.

    Instances are read-only: build a new HeaderBag (or a new message)
    to change headers.
    """

    __slots__ = ("_headers",)

    def __init__(self, headers: Optional[Dict[str, Tuple[str, ...]]] = None) -> None:
        self._headers: Dict[str, Tuple[str, ...]] = dict(headers or {})

    @classmethod
    def normalize(cls, raw: Optional[RawHeaders] = None) -> "HeaderBag":
        """
        Normalize caller-supplied headers.

        A mapping is taken entry by entry: sequence values have each
        element coerced to ``str``, anything else becomes a one-element
        tuple. Names that collide once lower-cased are resolved last
        write wins.

        An iterable of ``(name, value)`` pairs, the shape transports such
        as h11 produce, accumulates repeated names in order instead.

        Args:
            raw: Mapping, iterable of pairs, HeaderBag or None

        Returns:
            New HeaderBag
        """
        if raw is None:
            return cls()

        if isinstance(raw, HeaderBag):
            return raw

        cleaned: Dict[str, Tuple[str, ...]] = {}

        if isinstance(raw, MappingABC):
            for name, value in raw.items():
                cleaned[_to_str(name).lower()] = _to_values(value)
        else:
            for name, value in raw:
                key = _to_str(name).lower()
                cleaned[key] = cleaned.get(key, ()) + _to_values(value)

        return cls(cleaned)

    def __getitem__(self, name: str) -> Tuple[str, ...]:
        return self._headers[_to_str(name).lower()]

    def __iter__(self) -> Iterator[str]:
        return iter(self._headers)

    def __len__(self) -> int:
        return len(self._headers)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, (str, bytes)):
            return False
        return _to_str(name).lower() in self._headers

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HeaderBag):
            return self._headers == other._headers
        if isinstance(other, MappingABC):
            return self == HeaderBag.normalize(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(sorted(self._headers.items())))

    def __repr__(self) -> str:
        return f"HeaderBag({self._headers!r})"

    def get_values(self, name: str) -> List[str]:
        """Get all values of a header (empty list when absent)."""
        return list(self._headers.get(_to_str(name).lower(), ()))

    def get_line(self, name: str) -> str:
        """Get all values of a header joined with ", " (empty when absent)."""
        return ", ".join(self._headers.get(_to_str(name).lower(), ()))

    def has(self, name: str) -> bool:
        """Check if a header exists (case-insensitive)."""
        return name in self

    def with_values(self, name: str, value: HeaderValue) -> "HeaderBag":
        """Return a copy with ``name`` replaced by ``value``."""
        headers = dict(self._headers)
        headers[_to_str(name).lower()] = _to_values(value)
        return HeaderBag(headers)

    def with_added_values(self, name: str, value: HeaderValue) -> "HeaderBag":
        """Return a copy with ``value`` appended to ``name``."""
        key = _to_str(name).lower()
        headers = dict(self._headers)
        headers[key] = headers.get(key, ()) + _to_values(value)
        return HeaderBag(headers)

    def without(self, name: str) -> "HeaderBag":
        """Return a copy with ``name`` removed."""
        key = _to_str(name).lower()
        return HeaderBag({k: v for k, v in self._headers.items() if k != key})

    def as_dict(self) -> Dict[str, List[str]]:
        """Get a plain, mutable copy of the headers."""
        return {name: list(values) for name, values in self._headers.items()}
