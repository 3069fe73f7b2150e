"""arXiv Atom feed parser implementation.

A single pass over the feed's structural events drives a small state
machine: it tracks whether we are inside an ``entry``, which field is
collecting text, and assembles one PaperRecord per entry.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from lxml import etree

from paperscope.exceptions import FeedDecodingError, FeedSyntaxError, NoResultsError
from paperscope.models.paper import PaperRecord
from paperscope.parsers.events import EventKind, FeedEvent, iter_events
from paperscope.parsers.urls import normalize_url


class FeedTag(Enum):
    """Feed elements the parser recognizes."""

    ENTRY = "entry"
    TITLE = "title"
    AUTHOR = "author"
    SUMMARY = "summary"
    LINK = "link"
    CATEGORY = "category"

    @classmethod
    def from_name(cls, name: str) -> "FeedTag | None":
        """Return the tag for a local element name, None if unrecognized."""
        try:
            return cls(name)
        except ValueError:
            return None


class TextField(Enum):
    """Record fields filled from element text."""

    TITLE = "title"
    AUTHOR = "author"
    ABSTRACT = "abstract"


_TEXT_FIELDS = {
    FeedTag.TITLE: TextField.TITLE,
    FeedTag.AUTHOR: TextField.AUTHOR,
    FeedTag.SUMMARY: TextField.ABSTRACT,
}

_FIELD_TAGS = frozenset(
    {FeedTag.TITLE, FeedTag.AUTHOR, FeedTag.SUMMARY, FeedTag.LINK, FeedTag.CATEGORY}
)


@dataclass
class PaperBuilder:
    """Mutable accumulator for one entry."""

    title: str = ""
    abstract_text: str = ""
    url: str = ""
    authors: list[str] = field(default_factory=list)
    categories: list[str] = field(default_factory=list)

    def build(self) -> PaperRecord:
        return PaperRecord(
            title=self.title,
            authors=tuple(self.authors),
            abstract_text=self.abstract_text,
            url=self.url,
            categories=tuple(self.categories),
        )


@dataclass
class ParserState:
    """Per-call parse state.

    ``builder`` is present exactly while inside an entry; pending authors and
    categories live on it, so a new entry always starts with empty buffers.
    """

    builder: PaperBuilder | None = None
    active_field: TextField | None = None
    records: list[PaperRecord] = field(default_factory=list)

    @property
    def in_entry(self) -> bool:
        return self.builder is not None


class ArxivParser:
    """Parser for arXiv Atom feeds (export API responses).

    Stateless between calls; every ``parse`` owns a fresh ParserState, so one
    instance can serve concurrent callers.
    """

    def parse(self, raw_content: str | bytes, source_id: str = "arxiv") -> list[PaperRecord]:
        """Parse Atom content into PaperRecord objects.

        Args:
            raw_content: Atom XML as text, or bytes holding UTF-8 text.
            source_id: Source identifier used in error messages.

        Returns:
            Records in document order.

        Raises:
            FeedSyntaxError: When the markup is malformed.
            FeedDecodingError: When the content is not valid UTF-8.
            NoResultsError: When the feed holds no entries.
        """
        try:
            return self.parse_events(iter_events(raw_content), source_id=source_id)
        except etree.XMLSyntaxError as e:
            raise FeedSyntaxError(source_id, f"XML parsing error: {e}") from e
        except UnicodeError as e:
            raise FeedDecodingError(source_id, f"UTF-8 decoding error: {e}") from e

    def parse_events(
        self, events: Iterable[FeedEvent], source_id: str = "arxiv"
    ) -> list[PaperRecord]:
        """Run the state machine over an event stream.

        Parsing stops at the first EOF event; anything after it is not read.

        Raises:
            NoResultsError: When no entry was completed.
        """
        state = ParserState()

        for event in events:
            if event.kind is EventKind.EOF:
                break
            self._handle_event(state, event)

        if not state.records:
            raise NoResultsError(source_id)

        return state.records

    def _handle_event(self, state: ParserState, event: FeedEvent) -> None:
        if event.kind is EventKind.START:
            self._handle_start(state, event)
        elif event.kind is EventKind.TEXT:
            self._handle_text(state, event.text)
        elif event.kind is EventKind.END:
            self._handle_end(state, event)

    def _handle_start(self, state: ParserState, event: FeedEvent) -> None:
        tag = FeedTag.from_name(event.name)
        if tag is None:
            return

        if tag is FeedTag.ENTRY:
            state.builder = PaperBuilder()
            state.active_field = None
            return

        builder = state.builder
        if builder is None:
            return

        if tag in _TEXT_FIELDS:
            state.active_field = _TEXT_FIELDS[tag]
        elif tag is FeedTag.LINK:
            href = event.attributes.get("href")
            if href is not None:
                builder.url = normalize_url(href)
        elif tag is FeedTag.CATEGORY:
            term = event.attributes.get("term")
            if term is not None:
                builder.categories.append(term)

    def _handle_text(self, state: ParserState, text: str) -> None:
        builder = state.builder
        if builder is None or state.active_field is None:
            return

        if state.active_field is TextField.TITLE:
            builder.title = text
        elif state.active_field is TextField.AUTHOR:
            builder.authors.append(text)
        elif state.active_field is TextField.ABSTRACT:
            builder.abstract_text = text

    def _handle_end(self, state: ParserState, event: FeedEvent) -> None:
        tag = FeedTag.from_name(event.name)
        if tag is None:
            return

        if tag is FeedTag.ENTRY:
            if state.builder is not None:
                state.records.append(state.builder.build())
            state.builder = None
            state.active_field = None
        elif tag in _FIELD_TAGS:
            state.active_field = None
