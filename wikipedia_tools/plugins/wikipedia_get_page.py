"""Wikipedia raw page tool: returns a page's wiki markup verbatim."""
from __future__ import annotations

from typing import Any, Dict

from ..domain.interfaces.tool_plugin import ToolContext
from ..domain.models.errors import TransportError, WikipediaToolError
from ..domain.models.tool import ToolDefinition, ToolPayload, text_result
from ..infrastructure.wikipedia.service import WikipediaService

NAME = "wikipedia_getPage"
DISPLAY_NAME = "Wikipedia/getPage"
DESCRIPTION = "Retrieve a Wikipedia page's raw wiki markup content by title."

INPUT_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "title": {"type": "string", "minLength": 1, "description": "Wikipedia page title"},
    },
    "required": ["title"],
    "additionalProperties": False,
}


async def execute(arguments: Dict[str, Any], context: ToolContext) -> ToolPayload:
    title = arguments["title"]
    try:
        wikipedia = context.require_service_by_type(WikipediaService)
        context.info_message(f"[wikipediaGetPage] Retrieving: {title}")
        content = await wikipedia.get_page(title)
    except WikipediaToolError as e:
        raise e.with_prefix(f"[{NAME}]") from e
    except Exception as e:
        raise TransportError(f"[{NAME}] {e}") from e
    return text_result(content)


TOOL = ToolDefinition(
    name=NAME,
    display_name=DISPLAY_NAME,
    description=DESCRIPTION,
    input_schema=INPUT_SCHEMA,
    execute=execute,
)
