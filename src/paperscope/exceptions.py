"""Custom exceptions for Paperscope.

Provides a structured exception hierarchy for fetch and parse failures.
"""


class PaperscopeError(Exception):
    """Base exception class for all Paperscope errors."""

    pass


class FetchError(PaperscopeError):
    """Raised when fetching a feed from arXiv fails.

    Attributes:
        source_id: The identifier of the feed source that failed.
    """

    def __init__(self, source_id: str, message: str):
        self.source_id = source_id
        super().__init__(f"Failed to fetch {source_id}: {message}")


class ParseError(PaperscopeError):
    """Raised when feed content parsing fails.

    Attributes:
        source_id: The identifier of the feed source with parse error.
    """

    def __init__(self, source_id: str, message: str):
        self.source_id = source_id
        super().__init__(f"Failed to parse {source_id}: {message}")


class FeedSyntaxError(ParseError):
    """Raised when the XML tokenizer reports malformed markup."""

    pass


class FeedDecodingError(ParseError):
    """Raised when feed text is not valid UTF-8."""

    pass


class NoResultsError(ParseError):
    """Raised when a well-formed feed contains no entries.

    Kept apart from FeedSyntaxError so callers can report
    "nothing found" instead of "bad input".
    """

    def __init__(self, source_id: str):
        super().__init__(source_id, "No results found")
