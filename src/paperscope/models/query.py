"""Search query model for the arXiv export API."""

from pydantic import BaseModel, Field


class SearchQuery(BaseModel):
    """arXiv search request."""

    query: str = Field(..., min_length=1, description="Free-text search terms")
    start: int = Field(default=0, ge=0, description="Offset of the first result")
    max_results: int = Field(
        default=5,
        ge=1,
        le=2000,
        description="Maximum number of results to return",
    )

    @property
    def search_query(self) -> str:
        """Value of the API's search_query parameter."""
        return f"all:{self.query}"
