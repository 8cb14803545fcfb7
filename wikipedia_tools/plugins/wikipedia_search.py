"""Wikipedia full-text search tool returning the MediaWiki API's JSON."""
from __future__ import annotations

from typing import Any, Dict

from ..domain.interfaces.tool_plugin import ToolContext
from ..domain.models.errors import TransportError, WikipediaToolError
from ..domain.models.tool import ToolDefinition, ToolPayload, json_result
from ..domain.models.wikipedia import MAX_SEARCH_LIMIT, SearchOptions
from ..infrastructure.wikipedia.service import WikipediaService

NAME = "wikipedia_search"
DISPLAY_NAME = "Wikipedia/search"
DESCRIPTION = "Search Wikipedia articles. Returns structured JSON with search results."

INPUT_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "query": {"type": "string", "minLength": 1, "description": "Search query"},
        "limit": {
            "type": "integer",
            "minimum": 1,
            "maximum": MAX_SEARCH_LIMIT,
            "description": "Number of results (1-500, default: 10)",
        },
        "offset": {
            "type": "integer",
            "minimum": 0,
            "description": "Offset for pagination (default: 0)",
        },
    },
    "required": ["query"],
    "additionalProperties": False,
}


async def execute(arguments: Dict[str, Any], context: ToolContext) -> ToolPayload:
    query = arguments["query"]
    try:
        wikipedia = context.require_service_by_type(WikipediaService)
        context.info_message(f"[wikipediaSearch] Searching: {query}")
        results = await wikipedia.search(
            query,
            SearchOptions(limit=arguments.get("limit"), offset=arguments.get("offset")),
        )
    except WikipediaToolError as e:
        raise e.with_prefix(f"[{NAME}]") from e
    except Exception as e:
        raise TransportError(f"[{NAME}] {e}") from e
    return json_result(results)


TOOL = ToolDefinition(
    name=NAME,
    display_name=DISPLAY_NAME,
    description=DESCRIPTION,
    input_schema=INPUT_SCHEMA,
    execute=execute,
)
