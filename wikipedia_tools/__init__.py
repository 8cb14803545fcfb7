"""
wikipedia-tools - Wikipedia search and page retrieval exposed as agent tools.
"""

__version__ = "1.0.0"
__author__ = "wikipedia-tools Team"

__all__ = [
    "WikipediaService",
    "WikipediaPlugin",
    "PluginHost",
]


# Lazy attribute access to avoid importing httpx/pydantic at package import time.
def __getattr__(name: str):  # pragma: no cover - simple lazy loader
    if name == "WikipediaService":
        from .infrastructure.wikipedia.service import WikipediaService as _S
        return _S
    if name == "WikipediaPlugin":
        from .plugin import WikipediaPlugin as _P
        return _P
    if name == "PluginHost":
        from .application.host import PluginHost as _H
        return _H
    raise AttributeError(f"module 'wikipedia_tools' has no attribute {name!r}")
