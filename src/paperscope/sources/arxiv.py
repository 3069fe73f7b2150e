"""arXiv export API query source."""

import httpx

from paperscope.exceptions import FetchError
from paperscope.models.query import SearchQuery
from paperscope.utils.http_client import create_http_client


class ArxivQuerySource:
    """arXiv export API source.

    Runs a search against the Atom query endpoint and returns the raw feed.
    """

    def __init__(
        self,
        url: str = "http://export.arxiv.org/api/query",
        source_id: str = "arxiv.api",
        timeout: int = 30,
        user_agent: str = "Paperscope/1.0 (arXiv search client)",
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize arXiv query source.

        Args:
            url: Query endpoint URL.
            source_id: Unique source identifier.
            timeout: Request timeout in seconds.
            user_agent: User-Agent header for requests.
            transport: Optional httpx transport override.
        """
        self._url = url
        self._source_id = source_id
        self._timeout = timeout
        self._user_agent = user_agent
        self._transport = transport

    @property
    def source_id(self) -> str:
        """Unique identifier for this source."""
        return self._source_id

    @property
    def url(self) -> str:
        """Query endpoint URL."""
        return self._url

    def build_params(self, query: SearchQuery) -> dict[str, str]:
        """Query-string parameters for a search."""
        return {
            "search_query": query.search_query,
            "start": str(query.start),
            "max_results": str(query.max_results),
        }

    async def fetch_raw(self, query: SearchQuery) -> str:
        """Fetch the raw Atom XML for a search.

        Returns:
            Raw XML string.

        Raises:
            FetchError: When the request fails or returns a non-2xx status.
        """
        try:
            async with create_http_client(
                timeout=self._timeout,
                user_agent=self._user_agent,
                transport=self._transport,
            ) as client:
                response = await client.get(self._url, params=self.build_params(query))
                response.raise_for_status()
                return response.text
        except httpx.TimeoutException as e:
            raise FetchError(self._source_id, f"Request timed out: {e}") from e
        except httpx.HTTPStatusError as e:
            raise FetchError(
                self._source_id, f"HTTP {e.response.status_code}: {e.response.text[:200]}"
            ) from e
        except httpx.RequestError as e:
            raise FetchError(self._source_id, f"Request failed: {e}") from e
