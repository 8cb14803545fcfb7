"""
Tool plugin protocol interfaces.
Defines the contracts between tools, the host container and the tool registry.
"""

from __future__ import annotations
from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence, Type, TypeVar

from ..models.tool import ToolCall, ToolDefinition, ToolResult

T = TypeVar("T")


class ServiceRegistry(Protocol):
    """Protocol for the host's service-by-type lookup."""

    def add_services(self, *services: Any) -> None:
        """Register service instances."""
        ...

    def get_service_by_type(self, service_type: Type[T]) -> Optional[T]:
        """Return the first registered instance of ``service_type`` or None."""
        ...

    def require_service_by_type(self, service_type: Type[T]) -> T:
        """Return the service or raise DependencyMissingError."""
        ...


class ToolContext(ServiceRegistry, Protocol):
    """What a tool sees while executing: service lookup plus the chat log sink."""

    def info_message(self, text: str) -> None:
        """Fire-and-forget informational message."""
        ...


class ToolRegistry(Protocol):
    """Protocol for tool registry implementations."""

    def register_tools(self, namespace: str, tools: Sequence[ToolDefinition]) -> None:
        """Register tools under a package namespace."""
        ...

    def get_tool(self, name: str) -> Optional[ToolDefinition]:
        """Get tool by name."""
        ...

    def list_tools(self) -> List[str]:
        """List all registered tool names."""
        ...

    def get_schemas(self) -> List[Dict[str, Any]]:
        """Get all tool schemas for the model."""
        ...

    async def execute_tool(self, tool_call: ToolCall, context: ToolContext) -> ToolResult:
        """Validate and execute a tool call."""
        ...


class HostContainer(ToolContext, Protocol):
    """Surface a plugin's ``install`` hook may use."""

    def get_config_slice(self, key: str, model: Any) -> Optional[Any]:
        """Validated config slice, or None when absent."""
        ...

    def add_tools(self, namespace: str, tools: Sequence[ToolDefinition]) -> None:
        ...


class Plugin(Protocol):
    name: str
    version: str
    description: str

    def install(self, host: HostContainer, config: Optional[Mapping[str, Any]] = None) -> None:
        ...
