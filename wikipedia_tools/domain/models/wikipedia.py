"""
Wikipedia domain models - Request-scoped value types for the Wikipedia client.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from .errors import InvalidArgumentError

DEFAULT_BASE_URL = "https://en.wikipedia.org"
DEFAULT_SEARCH_LIMIT = 10
DEFAULT_SEARCH_NAMESPACE = 0
DEFAULT_SEARCH_OFFSET = 0
MAX_SEARCH_LIMIT = 500


class RawText(str):
    """Response body returned verbatim because it was not valid JSON."""

    def __repr__(self) -> str:
        return f"RawText({str.__repr__(self)})"


# Parsed JSON value from the MediaWiki API, or the raw-text fallback.
JsonValue = Any
SearchResult = Union[JsonValue, RawText]


@dataclass(frozen=True)
class ClientConfig:
    """Configuration owned by one WikipediaService instance."""
    base_url: Optional[str] = None

    @property
    def resolved_base_url(self) -> str:
        return (self.base_url or DEFAULT_BASE_URL).rstrip("/")

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> ClientConfig:
        """Build from a config slice; accepts both ``baseUrl`` and ``base_url``."""
        if not data:
            return cls()
        base_url = data.get("baseUrl", data.get("base_url"))
        return cls(base_url=base_url or None)


def _check_int(field_name: str, value: Any, minimum: int, maximum: Optional[int] = None) -> None:
    # bool is an int subclass but is never a meaningful count
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{field_name} must be an integer")
    if value < minimum:
        raise InvalidArgumentError(f"{field_name} must be >= {minimum}")
    if maximum is not None and value > maximum:
        raise InvalidArgumentError(f"{field_name} must be <= {maximum}")


@dataclass(frozen=True)
class SearchOptions:
    """Paging and namespace options for a full-text search."""
    limit: Optional[int] = None
    namespace: Optional[int] = None
    offset: Optional[int] = None

    def __post_init__(self) -> None:
        if self.limit is not None:
            _check_int("limit", self.limit, 0, MAX_SEARCH_LIMIT)
        if self.namespace is not None:
            _check_int("namespace", self.namespace, 0)
        if self.offset is not None:
            _check_int("offset", self.offset, 0)

    def resolved(self) -> SearchOptions:
        """Copy with every omitted (or zero) field replaced by its default."""
        return SearchOptions(
            limit=self.limit or DEFAULT_SEARCH_LIMIT,
            namespace=self.namespace or DEFAULT_SEARCH_NAMESPACE,
            offset=self.offset or DEFAULT_SEARCH_OFFSET,
        )
