"""
Tool registry implementation - Infrastructure component managing tool definitions.

- Validates each tool's input schema (JSON Schema draft 2020-12) at registration
- Validates call arguments against that schema before ``execute`` runs
- Executes tools and wraps their payload in a ToolResult

Errors raised by a tool propagate to the caller unchanged; the registry only
logs them.
"""

from __future__ import annotations
import logging
import time
from typing import Any, Dict, List, Optional, Sequence

from jsonschema import Draft202012Validator
from jsonschema.exceptions import SchemaError, best_match

from ...domain.interfaces.tool_plugin import ToolContext, ToolRegistry
from ...domain.models.errors import InvalidArgumentError, ToolNotFoundError, ToolRegistrationError
from ...domain.models.tool import ToolCall, ToolCallStatus, ToolDefinition, ToolResult


class DefaultToolRegistry(ToolRegistry):
    """Default implementation of the tool registry."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self._tools: Dict[str, ToolDefinition] = {}
        self._validators: Dict[str, Draft202012Validator] = {}
        self._namespaces: Dict[str, List[str]] = {}

    def register_tools(self, namespace: str, tools: Sequence[ToolDefinition]) -> None:
        """Register tools under a package namespace."""
        for tool in tools:
            if tool.name in self._tools:
                raise ToolRegistrationError(f"Tool '{tool.name}' is already registered")
            try:
                Draft202012Validator.check_schema(tool.input_schema)
            except SchemaError as e:
                raise ToolRegistrationError(f"Tool '{tool.name}' has an invalid input schema: {e.message}") from e

            self._tools[tool.name] = tool
            self._validators[tool.name] = Draft202012Validator(tool.input_schema)
            self._namespaces.setdefault(namespace, []).append(tool.name)
            self._logger.debug(f"Registered tool: {tool.name} ({namespace})")

        self._logger.info(f"Loaded {len(tools)} tools from {namespace}")

    def get_tool(self, name: str) -> Optional[ToolDefinition]:
        """Get tool by name."""
        return self._tools.get(name)

    def list_tools(self) -> List[str]:
        """List all registered tool names."""
        return list(self._tools.keys())

    def list_namespaces(self) -> Dict[str, List[str]]:
        return {ns: list(names) for ns, names in self._namespaces.items()}

    def get_schemas(self) -> List[Dict[str, Any]]:
        """Get all tool schemas for the model."""
        return [tool.to_api_format() for tool in self._tools.values()]

    def validate_arguments(self, name: str, arguments: Dict[str, Any]) -> None:
        """Raise InvalidArgumentError when arguments do not match the tool's schema."""
        validator = self._validators.get(name)
        if validator is None:
            raise ToolNotFoundError(f"Tool '{name}' not found")
        error = best_match(validator.iter_errors(arguments))
        if error is not None:
            where = ".".join(str(p) for p in error.path)
            reason = f"{where}: {error.message}" if where else error.message
            raise InvalidArgumentError(f"[{name}] invalid arguments: {reason}")

    async def execute_tool(self, tool_call: ToolCall, context: ToolContext) -> ToolResult:
        """Validate and execute a tool call."""
        tool = self.get_tool(tool_call.name)
        if tool is None:
            raise ToolNotFoundError(f"Tool '{tool_call.name}' not found")

        self.validate_arguments(tool_call.name, tool_call.arguments)

        tool_call.status = ToolCallStatus.EXECUTING
        start_time = time.time()
        try:
            payload = await tool.execute(dict(tool_call.arguments), context)
        except Exception as e:
            tool_call.status = ToolCallStatus.FAILED
            self._logger.error(f"Tool {tool_call.name} execution failed: {e}")
            raise

        tool_call.status = ToolCallStatus.COMPLETED
        execution_time = (time.time() - start_time) * 1000
        self._logger.debug(f"Tool {tool_call.name} succeeded in {execution_time:.1f}ms")
        return ToolResult(tool_call=tool_call, payload=payload, execution_time_ms=execution_time)
