"""Pydantic schemas."""
from book_registry.schemas.book import BookDraft, BookResponse, BookStats
from book_registry.schemas.common import CamelSchema, ErrorResponse, MessageResponse

__all__ = [
    "CamelSchema",
    "ErrorResponse",
    "MessageResponse",
    # Book
    "BookDraft",
    "BookResponse",
    "BookStats",
]
