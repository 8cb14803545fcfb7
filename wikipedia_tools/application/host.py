"""
Plugin host - Application service acting as the tool host's container.
Holds services, configuration slices and tools, and runs tool calls.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Type, TypeVar

from ..domain.interfaces.tool_plugin import Plugin
from ..domain.models.errors import DependencyMissingError
from ..domain.models.tool import ToolCall, ToolDefinition, ToolResult
from ..infrastructure.config.settings import parse_config_slice
from ..infrastructure.tools.registry import DefaultToolRegistry

T = TypeVar("T")

chat_logger = logging.getLogger("wikipedia_tools.chat")


class PluginHost:
    """In-process host: service lookup, config slices, tool registry and chat sink."""

    def __init__(
        self,
        config: Optional[Mapping[str, Any]] = None,
        tool_registry: Optional[DefaultToolRegistry] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._config: Dict[str, Any] = dict(config or {})
        self._services: List[Any] = []
        self._registry = tool_registry or DefaultToolRegistry()
        self._logger = logger or logging.getLogger(__name__)
        self.messages: List[str] = []

    @property
    def config(self) -> Dict[str, Any]:
        return self._config

    @property
    def tools(self) -> DefaultToolRegistry:
        return self._registry

    # Services
    def add_services(self, *services: Any) -> None:
        for service in services:
            self._services.append(service)
            self._logger.debug(f"Registered service: {type(service).__name__}")

    def get_service_by_type(self, service_type: Type[T]) -> Optional[T]:
        for service in self._services:
            if isinstance(service, service_type):
                return service
        return None

    def require_service_by_type(self, service_type: Type[T]) -> T:
        service = self.get_service_by_type(service_type)
        if service is None:
            raise DependencyMissingError(f"No service of type {service_type.__name__} is registered")
        return service

    # Configuration
    def get_config_slice(self, key: str, model: Any) -> Optional[Any]:
        return parse_config_slice(self._config.get(key), model)

    # Tools
    def add_tools(self, namespace: str, tools: Sequence[ToolDefinition]) -> None:
        self._registry.register_tools(namespace, tools)

    def info_message(self, text: str) -> None:
        self.messages.append(text)
        chat_logger.info(text)

    def install(self, plugin: Plugin) -> None:
        """Install a plugin, handing it the full host config."""
        plugin.install(self, self._config)
        self._logger.info(f"Installed plugin {plugin.name} {plugin.version}")

    async def invoke(self, tool_name: str, arguments: Optional[Dict[str, Any]] = None) -> ToolResult:
        """Run one tool call through schema validation and execution."""
        call = ToolCall(name=tool_name, arguments=dict(arguments or {}))
        return await self._registry.execute_tool(call, self)
