"""Book Pydantic schemas."""
from typing import Optional

from pydantic import Field

from book_registry.schemas.common import CamelSchema

MIN_PUBLICATION_YEAR = 1000
MAX_PUBLICATION_YEAR = 2100


class BookDraft(CamelSchema):
    """Caller-supplied book fields for create and update.

    Presence and range rules are checked by the registry so that every
    violated field can be reported in a single error.
    """

    id: Optional[int] = None
    title: Optional[str] = Field(None, description="Required, not blank")
    author: Optional[str] = Field(None, description="Required, not blank")
    genre: Optional[str] = None
    publication_year: Optional[int] = Field(
        None,
        description=f"Between {MIN_PUBLICATION_YEAR} and {MAX_PUBLICATION_YEAR} inclusive",
        json_schema_extra={"minimum": MIN_PUBLICATION_YEAR, "maximum": MAX_PUBLICATION_YEAR},
    )
    borrowed: bool = False
    borrowed_by: Optional[str] = Field(None, description="Required when borrowed is true")


class BookResponse(CamelSchema):
    """Schema for book response."""

    id: int
    title: str
    author: str
    genre: Optional[str] = None
    publication_year: Optional[int] = None
    borrowed: bool = False
    borrowed_by: Optional[str] = None


class BookStats(CamelSchema):
    """Aggregate counts over the registry."""

    total_books: int = Field(..., ge=0)
    borrowed: int = Field(..., ge=0)
