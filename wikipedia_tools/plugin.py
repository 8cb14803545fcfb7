"""
Registration shim plugging the Wikipedia tools into a host container.

Hosts call ``install`` at startup in one of two ways:
- newer hosts pass the package config mapping (``{"wikipedia": {...}}``)
- older hosts pass no config; the slice is read via ``get_config_slice``

The tools are always registered. The WikipediaService is registered only when
a ``wikipedia`` slice is configured; otherwise tool calls fail with
DependencyMissingError.
"""

from __future__ import annotations
import logging
from typing import Any, Mapping, Optional

from . import __version__
from .domain.interfaces.tool_plugin import HostContainer
from .infrastructure.config.settings import WikipediaConfig, parse_config_slice
from .infrastructure.wikipedia.service import WikipediaService
from .plugins import TOOLS

PACKAGE_NAME = "wikipedia-tools"
CONFIG_KEY = "wikipedia"

logger = logging.getLogger(__name__)


class WikipediaPlugin:
    name = PACKAGE_NAME
    version = __version__
    description = "Wikipedia search and raw page retrieval tools"

    def __init__(self, transport: Optional[Any] = None) -> None:
        # Injected into the service this plugin creates; None uses HttpxTransport
        self._transport = transport

    def _config_slice(self, host: HostContainer, config: Optional[Mapping[str, Any]]) -> Optional[WikipediaConfig]:
        if config is None:
            return host.get_config_slice(CONFIG_KEY, WikipediaConfig)
        return parse_config_slice(config.get(CONFIG_KEY), WikipediaConfig)

    def install(self, host: HostContainer, config: Optional[Mapping[str, Any]] = None) -> None:
        host.add_tools(PACKAGE_NAME, TOOLS)

        wikipedia_config = self._config_slice(host, config)
        if wikipedia_config is None:
            logger.info("No wikipedia config slice; WikipediaService not registered")
            return
        service = WikipediaService(wikipedia_config.to_client_config(), transport=self._transport)
        host.add_services(service)
        logger.debug(f"WikipediaService registered for {service.base_url}")


plugin = WikipediaPlugin()
