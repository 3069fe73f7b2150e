"""Abstract feed parser interface using Protocol."""

from typing import Protocol

from paperscope.models.paper import PaperRecord


class FeedParser(Protocol):
    """Feed parser abstraction protocol."""

    def parse(self, raw_content: str | bytes, source_id: str = "arxiv") -> list[PaperRecord]:
        """Parse feed content into PaperRecord objects.

        Args:
            raw_content: Raw XML from the feed source.
            source_id: Source identifier for error messages.

        Returns:
            List of parsed records, in document order.

        Raises:
            ParseError: When parsing fails or the feed is empty.
        """
        ...
