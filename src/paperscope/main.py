"""Command line entry point.

Searches arXiv (or parses a saved feed) and prints the records as JSON.
"""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import TextIO

import httpx
from pydantic import ValidationError

from paperscope.config.settings import settings
from paperscope.exceptions import FetchError, NoResultsError, ParseError
from paperscope.models.paper import PaperRecord, papers_to_json
from paperscope.models.query import SearchQuery
from paperscope.parsers.arxiv_parser import ArxivParser
from paperscope.services.search_service import SearchService
from paperscope.sources.arxiv import ArxivQuerySource
from paperscope.utils.logger import configure_logging, get_logger

EXIT_OK = 0
EXIT_NO_RESULTS = 1
EXIT_FAILURE = 2


def create_search_service(transport: httpx.AsyncBaseTransport | None = None) -> SearchService:
    """Build a SearchService from settings."""
    source = ArxivQuerySource(
        url=settings.arxiv_api_url,
        timeout=settings.arxiv_timeout,
        user_agent=settings.arxiv_user_agent,
        transport=transport,
    )
    return SearchService(source=source, parser=ArxivParser())


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=settings.app_name,
        description=f"{settings.app_name} - arXiv search to JSON",
    )
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--query", help="Search arXiv for these terms")
    target.add_argument("--file", type=Path, help="Parse a saved Atom feed instead of searching")
    parser.add_argument(
        "--max-results",
        type=int,
        default=settings.default_max_results,
        help=f"Maximum number of results (default: {settings.default_max_results})",
    )
    parser.add_argument("--start", type=int, default=0, help="Offset of the first result")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation")
    return parser


def main(
    argv: list[str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    out: TextIO | None = None,
) -> int:
    """Main entry point.

    Records are written to ``out`` (stdout by default).

    Returns:
        Process exit code: 0 on success, 1 when no papers were found,
        2 on fetch or parse failure.
    """
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)

    query: SearchQuery | None = None
    if args.query is not None:
        try:
            query = SearchQuery(query=args.query, start=args.start, max_results=args.max_results)
        except ValidationError as e:
            arg_parser.error(str(e))

    configure_logging(
        log_level=settings.log_level,
        json_format=settings.log_json,
    )
    logger = get_logger("cli").bind(app=settings.app_name)

    papers: list[PaperRecord]
    try:
        if query is None:
            papers = ArxivParser().parse(args.file.read_bytes(), source_id=str(args.file))
        else:
            papers = asyncio.run(create_search_service(transport).search(query))
    except NoResultsError:
        logger.warning("No papers found")
        return EXIT_NO_RESULTS
    except (FetchError, ParseError, OSError) as e:
        logger.error("Search failed", error=str(e))
        return EXIT_FAILURE

    print(papers_to_json(papers, indent=args.indent), file=out or sys.stdout)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
