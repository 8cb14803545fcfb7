"""
Error domain models - Tagged error types shared by the service, tools and host.

Every failure a tool can surface is a ``WikipediaToolError`` carrying a ``kind``
so callers branch on the kind instead of probing ad hoc attributes.
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(Enum):
    """Category of a tool-facing failure."""
    INVALID_ARGUMENT = "invalid_argument"
    DEPENDENCY_MISSING = "dependency_missing"
    UPSTREAM_ERROR = "upstream_error"
    TRANSPORT_ERROR = "transport_error"


class WikipediaToolError(Exception):
    """Base error with kind, optional HTTP status and diagnostic details."""

    kind: ErrorKind = ErrorKind.UPSTREAM_ERROR

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        details: Any = None,
        kind: Optional[ErrorKind] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.details = details
        if kind is not None:
            self.kind = kind

    def with_prefix(self, prefix: str) -> WikipediaToolError:
        """Copy of this error with ``prefix`` prepended to the message."""
        return type(self)(
            f"{prefix} {self.message}",
            status=self.status,
            details=self.details,
            kind=self.kind,
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"kind": self.kind.value, "message": self.message}
        if self.status is not None:
            out["status"] = self.status
        if self.details is not None:
            out["details"] = self.details
        return out

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, message={self.message!r}, status={self.status!r})"


class InvalidArgumentError(WikipediaToolError):
    """Required input missing or out of range; raised before any I/O."""
    kind = ErrorKind.INVALID_ARGUMENT


class DependencyMissingError(WikipediaToolError):
    """A collaborator service is not registered with the host."""
    kind = ErrorKind.DEPENDENCY_MISSING


class UpstreamError(WikipediaToolError):
    """Wikipedia answered with a failure status."""
    kind = ErrorKind.UPSTREAM_ERROR


class TransportError(WikipediaToolError):
    """Network-level failure after the transport gave up retrying."""
    kind = ErrorKind.TRANSPORT_ERROR


class ConfigurationError(Exception):
    """Invalid configuration slice."""


class ToolRegistrationError(Exception):
    """Tool definition rejected by the registry."""


class ToolNotFoundError(Exception):
    """No tool registered under the requested name."""
