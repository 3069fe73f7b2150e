"""Structural event stream over lxml's parser-target interface.

The document is fed to lxml in chunks; after each chunk the events the
target recorded are handed to the caller, so a feed is consumed in one pass
without building a tree.
"""

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from lxml import etree

DEFAULT_CHUNK_SIZE = 64 * 1024


class EventKind(Enum):
    """Kinds of structural events."""

    START = "start"
    END = "end"
    TEXT = "text"
    EOF = "eof"


@dataclass(frozen=True)
class FeedEvent:
    """One structural event.

    ``name`` is the local tag name for START/END, ``text`` is set for TEXT.
    """

    kind: EventKind
    name: str = ""
    attributes: dict[str, str] = field(default_factory=dict)
    text: str = ""


def local_name(tag: str) -> str:
    """Strip the namespace from a tag.

    Example: {http://www.w3.org/2005/Atom}entry -> entry
    """
    if tag.startswith("{"):
        return tag.rpartition("}")[2]
    return tag


class _EventCollector:
    """lxml parser target recording events in document order.

    Character data between two markup events is coalesced into a single
    TEXT event, trimmed, and dropped when only whitespace remains.
    """

    def __init__(self) -> None:
        self._events: deque[FeedEvent] = deque()
        self._text: list[str] = []

    def start(self, tag, attrib) -> None:
        self._flush_text()
        attributes = {local_name(key): value for key, value in attrib.items()}
        self._events.append(FeedEvent(EventKind.START, local_name(tag), attributes))

    def end(self, tag) -> None:
        self._flush_text()
        self._events.append(FeedEvent(EventKind.END, local_name(tag)))

    def data(self, data: str) -> None:
        self._text.append(data)

    def close(self) -> None:
        self._flush_text()
        self._events.append(FeedEvent(EventKind.EOF))

    def drain(self) -> Iterator[FeedEvent]:
        while self._events:
            yield self._events.popleft()

    def _flush_text(self) -> None:
        if not self._text:
            return
        text = "".join(self._text).strip()
        self._text.clear()
        if text:
            self._events.append(FeedEvent(EventKind.TEXT, text=text))


def to_utf8(document: str | bytes) -> bytes:
    """Return the document as UTF-8 bytes.

    Raises:
        UnicodeError: When bytes are not valid UTF-8 or a string holds
            unpaired surrogates.
    """
    if isinstance(document, bytes):
        # Validation only; lxml gets the original bytes.
        document.decode("utf-8")
        return document
    return document.encode("utf-8")


def iter_events(
    document: str | bytes,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Iterator[FeedEvent]:
    """Yield structural events for a feed document, ending with EOF.

    Args:
        document: Feed text, or bytes holding UTF-8 text.
        chunk_size: Number of bytes handed to lxml per feed call.

    Raises:
        UnicodeError: When the document is not valid UTF-8.
        lxml.etree.XMLSyntaxError: When the markup is malformed.
    """
    data = to_utf8(document)
    collector = _EventCollector()
    parser = etree.XMLParser(
        target=collector,
        encoding="utf-8",
        no_network=True,
    )

    for offset in range(0, len(data), chunk_size):
        parser.feed(data[offset : offset + chunk_size])
        yield from collector.drain()

    parser.close()
    yield from collector.drain()
