#!/usr/bin/env python3
"""
Command-line entry point for the Wikipedia tools.
"""

import argparse
import asyncio
import json
import logging
import os
import sys
from dotenv import load_dotenv
from pydantic import ValidationError

# Load environment variables
load_dotenv()

# Import after loading env vars to ensure proper configuration
from . import __version__
from .application.host import PluginHost
from .domain.models.errors import ConfigurationError, WikipediaToolError
from .domain.models.wikipedia import SearchOptions
from .infrastructure.config.settings import get_settings
from .infrastructure.wikipedia.service import WikipediaService
from .plugin import WikipediaPlugin
from .plugins import wikipedia_get_page, wikipedia_search
from .utils import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wikipedia-tools",
        description="Search Wikipedia and fetch raw page markup through the Wikipedia tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s search "artificial intelligence" --limit 3
  %(prog)s --base-url https://es.wikipedia.org search "inteligencia artificial"
  %(prog)s page "Pet door"
  %(prog)s --dry-run page "Pet door"
        """
    )
    parser.add_argument('--base-url',
                       default=os.getenv('WIKIPEDIA_BASE_URL'),
                       help='Wikipedia base URL (or set WIKIPEDIA_BASE_URL). Default: https://en.wikipedia.org')
    parser.add_argument('--dry-run',
                       action='store_true',
                       help='Print the request URL instead of calling Wikipedia')
    parser.add_argument('--log-level',
                       default=os.getenv('LOG_LEVEL', 'WARNING'),
                       choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                       help='Set logging level')
    parser.add_argument('--version',
                       action='version',
                       version=f'%(prog)s {__version__}')

    sub = parser.add_subparsers(dest='command', required=True)

    p_search = sub.add_parser('search', help='Full-text search')
    p_search.add_argument('query', help='Search query')
    p_search.add_argument('--limit', type=int, help='Number of results (1-500, default: 10)')
    p_search.add_argument('--offset', type=int, help='Offset for pagination (default: 0)')
    p_search.add_argument('--namespace', type=int, help='Namespace to search (default: 0, articles)')

    p_page = sub.add_parser('page', help='Raw wiki markup of a page')
    p_page.add_argument('title', help='Page title')
    return parser


def _search_options(args: argparse.Namespace) -> SearchOptions:
    return SearchOptions(limit=args.limit, namespace=args.namespace, offset=args.offset)


def _tool_call(args: argparse.Namespace):
    if args.command == 'search':
        arguments = {'query': args.query}
        if args.limit is not None:
            arguments['limit'] = args.limit
        if args.offset is not None:
            arguments['offset'] = args.offset
        return wikipedia_search.NAME, arguments
    return wikipedia_get_page.NAME, {'title': args.title}


class _NoTransport:
    async def fetch(self, url, *, method="GET", headers=None):
        raise RuntimeError("dry run performs no requests")


def _dry_run_url(args: argparse.Namespace) -> str:
    # URL building performs no I/O, so no transport is needed
    service = WikipediaService({'baseUrl': args.base_url}, transport=_NoTransport())
    if args.command == 'search':
        return service.build_search_url(args.query, _search_options(args))
    return service.build_page_url(args.title)


def _render_json(data) -> str:
    if isinstance(data, str):
        return data
    return json.dumps(data, ensure_ascii=False, indent=2)


async def _search_namespace(args: argparse.Namespace, host: PluginHost) -> str:
    # The search tool does not take a namespace, so go to the service directly
    try:
        service = host.require_service_by_type(WikipediaService)
        data = await service.search(args.query, _search_options(args))
    except WikipediaToolError as e:
        raise e.with_prefix(f"[{wikipedia_search.NAME}]") from e
    return _render_json(data)


async def run(args: argparse.Namespace, host: PluginHost) -> str:
    if args.command == 'search' and args.namespace is not None:
        return await _search_namespace(args, host)
    tool_name, arguments = _tool_call(args)
    result = await host.invoke(tool_name, arguments)
    if result.payload.get('type') == 'json':
        return _render_json(result.payload.get('data'))
    return result.content


def main(argv=None) -> int:
    """Main entry point for the wikipedia-tools CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logger = logging.getLogger(__name__)

    try:
        settings = get_settings()
        setup_logging(args.log_level, settings.log_format)

        if args.dry_run:
            print(_dry_run_url(args))
            return 0

        # The CLI always configures the service; an unset base URL means the default host
        config = settings.host_config()
        config['wikipedia'] = {'baseUrl': args.base_url} if args.base_url else config.get('wikipedia', {})
        host = PluginHost(config)
        host.install(WikipediaPlugin())
        print(asyncio.run(run(args, host)))
        return 0
    except WikipediaToolError as e:
        logger.debug(f"Tool error: {e.to_dict()}")
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except ValidationError as e:
        print(f"Error: invalid settings: {e}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
