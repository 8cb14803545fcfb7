"""Domain models package."""

from .errors import (
    ErrorKind,
    WikipediaToolError,
    InvalidArgumentError,
    DependencyMissingError,
    UpstreamError,
    TransportError,
    ConfigurationError,
    ToolRegistrationError,
    ToolNotFoundError,
)
from .wikipedia import ClientConfig, SearchOptions, RawText, SearchResult
from .tool import ToolDefinition, ToolCall, ToolCallStatus, ToolResult, json_result, text_result

__all__ = [
    "ErrorKind",
    "WikipediaToolError",
    "InvalidArgumentError",
    "DependencyMissingError",
    "UpstreamError",
    "TransportError",
    "ConfigurationError",
    "ToolRegistrationError",
    "ToolNotFoundError",
    "ClientConfig",
    "SearchOptions",
    "RawText",
    "SearchResult",
    "ToolDefinition",
    "ToolCall",
    "ToolCallStatus",
    "ToolResult",
    "json_result",
    "text_result",
]
