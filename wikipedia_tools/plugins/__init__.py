"""Built-in Wikipedia tools."""

from . import wikipedia_get_page, wikipedia_search

TOOLS = [wikipedia_search.TOOL, wikipedia_get_page.TOOL]

__all__ = ["TOOLS", "wikipedia_search", "wikipedia_get_page"]
