"""Services package."""

from paperscope.services.search_service import SearchService

__all__ = [
    "SearchService",
]
