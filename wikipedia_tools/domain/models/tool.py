"""
Tool domain models - Tool definitions, calls and result envelopes.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, Optional, TYPE_CHECKING
from datetime import datetime
from enum import Enum
import json

if TYPE_CHECKING:
    from ..interfaces.tool_plugin import ToolContext


class ToolCallStatus(Enum):
    """Status of tool call execution."""
    PENDING = "pending"
    EXECUTING = "executing"
    COMPLETED = "completed"
    FAILED = "failed"


ToolPayload = Dict[str, Any]
ToolExecute = Callable[[Dict[str, Any], "ToolContext"], Awaitable[ToolPayload]]


def json_result(data: Any) -> ToolPayload:
    """Envelope for tools returning structured JSON."""
    return {"type": "json", "data": data}


def text_result(text: str) -> ToolPayload:
    """Envelope for tools returning plain text."""
    return {"type": "text", "text": text}


@dataclass(frozen=True)
class ToolDefinition:
    """A named, schema-validated operation exposed to the host."""
    name: str
    display_name: str
    description: str
    input_schema: Dict[str, Any]
    execute: ToolExecute

    def to_api_format(self) -> Dict[str, Any]:
        """Convert to the function-calling format sent to the model."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.input_schema,
            },
        }


@dataclass
class ToolCall:
    """Represents a tool call request."""
    name: str
    arguments: Dict[str, Any]
    call_id: Optional[str] = None
    status: ToolCallStatus = ToolCallStatus.PENDING
    created_at: datetime = field(default_factory=datetime.now)


@dataclass
class ToolResult:
    """Result of a successful tool execution."""
    tool_call: ToolCall
    payload: ToolPayload
    execution_time_ms: Optional[float] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def content(self) -> str:
        """Payload rendered as the string content of a tool message."""
        if self.payload.get("type") == "text":
            return str(self.payload.get("text", ""))
        data = self.payload.get("data")
        if isinstance(data, str):
            return data
        return json.dumps(data, ensure_ascii=False)
