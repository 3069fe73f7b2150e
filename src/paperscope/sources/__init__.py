"""Sources package."""

from paperscope.sources.arxiv import ArxivQuerySource
from paperscope.sources.base import QuerySource

__all__ = [
    "QuerySource",
    "ArxivQuerySource",
]
