"""Models package."""

from paperscope.models.paper import PaperRecord, papers_from_json, papers_to_json
from paperscope.models.query import SearchQuery

__all__ = [
    "PaperRecord",
    "SearchQuery",
    "papers_to_json",
    "papers_from_json",
]
