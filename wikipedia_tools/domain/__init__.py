"""Domain layer - Pure business logic with no external dependencies."""

from .models.errors import (
    ErrorKind,
    WikipediaToolError,
    InvalidArgumentError,
    DependencyMissingError,
    UpstreamError,
    TransportError,
)
from .models.wikipedia import ClientConfig, SearchOptions, RawText, SearchResult

__all__ = [
    "ErrorKind",
    "WikipediaToolError",
    "InvalidArgumentError",
    "DependencyMissingError",
    "UpstreamError",
    "TransportError",
    "ClientConfig",
    "SearchOptions",
    "RawText",
    "SearchResult",
]
