"""Paper record model produced by the feed parser."""

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class PaperRecord(BaseModel):
    """One parsed feed entry.

    Field names are the stable JSON keys consumed downstream.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(default="", description="Paper title")
    authors: tuple[str, ...] = Field(default=(), description="Authors in source order")
    abstract_text: str = Field(default="", description="Paper abstract")
    url: str = Field(default="", description="Normalized https PDF link")
    categories: tuple[str, ...] = Field(default=(), description="Category terms in source order")


_records_adapter = TypeAdapter(list[PaperRecord])


def papers_to_json(papers: list[PaperRecord], indent: int | None = None) -> str:
    """Serialize records as a JSON array."""
    return _records_adapter.dump_json(papers, indent=indent).decode("utf-8")


def papers_from_json(raw: str | bytes) -> list[PaperRecord]:
    """Load records from a JSON array.

    Raises:
        pydantic.ValidationError: When the payload is not a list of records.
    """
    return _records_adapter.validate_json(raw)
