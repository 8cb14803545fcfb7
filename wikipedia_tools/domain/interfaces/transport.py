"""
Transport protocol interface.
Defines the retried HTTP collaborator the Wikipedia service talks to.
"""

from __future__ import annotations
from typing import Mapping, Optional, Protocol


class HttpResponse(Protocol):
    """Minimal response surface consumed by the service."""

    @property
    def status(self) -> int:
        ...

    @property
    def ok(self) -> bool:
        """True for 2xx statuses."""
        ...

    async def text(self) -> str:
        """Read the full body as text."""
        ...


class Transport(Protocol):
    """Protocol for HTTP transports that retry transient failures internally."""

    async def fetch(
        self,
        url: str,
        *,
        method: str = "GET",
        headers: Optional[Mapping[str, str]] = None,
    ) -> HttpResponse:
        """Issue a request and return the final response."""
        ...
