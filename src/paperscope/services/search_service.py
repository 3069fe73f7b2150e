"""Paper search service.

Chains the query source and the feed parser.
"""

import structlog

from paperscope.exceptions import NoResultsError, ParseError
from paperscope.models.paper import PaperRecord
from paperscope.models.query import SearchQuery
from paperscope.parsers.base import FeedParser
from paperscope.sources.base import QuerySource

logger = structlog.get_logger()


class SearchService:
    """Search arXiv and return parsed paper records."""

    def __init__(self, source: QuerySource, parser: FeedParser):
        """Initialize search service.

        Args:
            source: Source that fetches raw Atom XML for a query.
            parser: Parser turning the feed into records.
        """
        self._source = source
        self._parser = parser

    async def search(self, query: SearchQuery) -> list[PaperRecord]:
        """Run a search.

        Returns:
            Records in feed order.

        Raises:
            FetchError: When the request fails.
            NoResultsError: When the feed holds no entries.
            ParseError: When the feed cannot be parsed.
        """
        log = logger.bind(
            source_id=self._source.source_id,
            query=query.query,
            start=query.start,
            max_results=query.max_results,
        )
        log.info("Starting paper search")

        raw_content = await self._source.fetch_raw(query)
        log.debug("Feed fetched", size=len(raw_content))

        try:
            papers = self._parser.parse(raw_content, source_id=self._source.source_id)
        except NoResultsError:
            log.info("Search returned no papers")
            raise
        except ParseError as e:
            log.error("Feed parse failed", error=str(e))
            raise

        log.info("Paper search completed", paper_count=len(papers))
        return papers
