"""Abstract query source interface using Protocol."""

from typing import Protocol

from paperscope.models.query import SearchQuery


class QuerySource(Protocol):
    """Search source abstraction protocol."""

    @property
    def source_id(self) -> str:
        """Unique identifier for this source."""
        ...

    async def fetch_raw(self, query: SearchQuery) -> str:
        """Fetch the raw feed for a search.

        Raises:
            FetchError: When the network request fails.
        """
        ...
