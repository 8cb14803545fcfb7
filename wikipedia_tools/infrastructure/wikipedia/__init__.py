"""Wikipedia infrastructure package."""

from .service import WikipediaService, resolve_json_or_text, USER_AGENT

__all__ = ['WikipediaService', 'resolve_json_or_text', 'USER_AGENT']
