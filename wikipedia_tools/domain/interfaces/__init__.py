"""Domain interfaces package - Protocols for ports."""

from .transport import HttpResponse, Transport
from .tool_plugin import ServiceRegistry, ToolContext, ToolRegistry, HostContainer, Plugin

__all__ = [
    "HttpResponse",
    "Transport",
    "ServiceRegistry",
    "ToolContext",
    "ToolRegistry",
    "HostContainer",
    "Plugin",
]
