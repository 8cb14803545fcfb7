"""
Wikipedia service - MediaWiki API client used by the Wikipedia tools.

Builds request URLs against a fixed base URL, delegates the GET to a retrying
transport and normalizes responses into values or typed errors.
"""

from __future__ import annotations
import json
import logging
from typing import Any, Mapping, Optional, Union
from urllib.parse import urlencode

from ...domain.interfaces.transport import HttpResponse, Transport
from ...domain.models.errors import InvalidArgumentError, UpstreamError
from ...domain.models.wikipedia import ClientConfig, RawText, SearchOptions, SearchResult
from ...utils import truncate_text
from ..config.settings import get_settings
from ..http.transport import HttpxTransport

USER_AGENT = "TokenRing-Writer/1.0 (https://github.com/tokenring/writer)"
MAX_ERROR_DETAILS_CHARS = 500

logger = logging.getLogger(__name__)

_NO_VALUE = object()


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


async def _read_text(res: HttpResponse) -> str:
    try:
        return await res.text()
    except Exception as e:  # body read failures degrade to an empty body
        logger.debug(f"Failed to read response body ({res.status}): {e}")
        return ""


async def resolve_json_or_text(res: HttpResponse, context: str) -> SearchResult:
    """
    Turn a transport response into a parsed JSON value or a typed error.

    Failure statuses raise UpstreamError with the parsed body as details, or
    the first 500 characters of the raw body when it is not JSON. Successful
    responses whose body is not JSON come back as RawText.
    """
    text = await _read_text(res)
    parsed: Any = _NO_VALUE
    if text:
        try:
            parsed = json.loads(text, parse_constant=_reject_constant)
        except (ValueError, RecursionError):
            parsed = _NO_VALUE
            if res.ok:
                return RawText(text)

    if not res.ok:
        if parsed is not _NO_VALUE and parsed is not None:
            details = parsed
        else:
            details = truncate_text(text, MAX_ERROR_DETAILS_CHARS) or None
        logger.warning(f"{context} failed with HTTP {res.status}")
        raise UpstreamError(f"{context} failed ({res.status})", status=res.status, details=details)

    return None if parsed is _NO_VALUE else parsed


class WikipediaService:
    """Service for searching Wikipedia articles and reading raw page markup."""

    name = "Wikipedia"
    description = "Service for searching Wikipedia articles"

    def __init__(
        self,
        config: Union[ClientConfig, Mapping[str, Any], None] = None,
        transport: Optional[Transport] = None,
    ) -> None:
        if not isinstance(config, ClientConfig):
            config = ClientConfig.from_mapping(config)
        self._config = config
        self._base_url = config.resolved_base_url
        if transport is None:
            transport = HttpxTransport.from_settings(get_settings().retry)
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def config(self) -> ClientConfig:
        return self._config

    def _headers(self) -> dict:
        return {"User-Agent": USER_AGENT}

    def build_search_url(self, query: str, opts: Optional[SearchOptions] = None) -> str:
        resolved = (opts or SearchOptions()).resolved()
        params = {
            "action": "query",
            "list": "search",
            "srsearch": query,
            "format": "json",
            "srlimit": str(resolved.limit),
            "srnamespace": str(resolved.namespace),
            "sroffset": str(resolved.offset),
        }
        return f"{self._base_url}/w/api.php?{urlencode(params)}"

    def build_page_url(self, title: str) -> str:
        params = {"title": title, "action": "raw"}
        return f"{self._base_url}/w/index.php?{urlencode(params)}"

    async def search(self, query: str, opts: Optional[SearchOptions] = None) -> SearchResult:
        """Full-text search; returns the API's JSON (``query.search`` holds the hits)."""
        if not query:
            raise InvalidArgumentError("query is required")

        url = self.build_search_url(query, opts)
        logger.debug(f"Wikipedia search: GET {url}")
        res = await self._transport.fetch(url, method="GET", headers=self._headers())
        return await resolve_json_or_text(res, "Wikipedia search")

    async def get_page(self, title: str) -> str:
        """Raw wiki markup for ``title``, returned verbatim."""
        if not title:
            raise InvalidArgumentError("title is required")

        url = self.build_page_url(title)
        logger.debug(f"Wikipedia page: GET {url}")
        res = await self._transport.fetch(url, method="GET", headers=self._headers())

        if not res.ok:
            logger.warning(f"Wikipedia page retrieval for {title!r} failed with HTTP {res.status}")
            raise UpstreamError(f"Wikipedia page retrieval failed ({res.status})", status=res.status)

        return await res.text()
