"""Parsers package."""

from paperscope.parsers.arxiv_parser import ArxivParser
from paperscope.parsers.base import FeedParser
from paperscope.parsers.urls import normalize_url

__all__ = [
    "FeedParser",
    "ArxivParser",
    "normalize_url",
]
