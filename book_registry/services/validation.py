"""Presence and range checks for book drafts."""
from typing import Optional

from book_registry.schemas.book import MAX_PUBLICATION_YEAR, MIN_PUBLICATION_YEAR, BookDraft


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def validate_draft(draft: BookDraft, check_borrow_state: bool = False) -> dict[str, str]:
    """Return a mapping of field name to message for every violated rule.

    An empty mapping means the draft is valid. ``check_borrow_state`` also
    requires a borrower whenever the draft marks the book as borrowed.
    """
    errors: dict[str, str] = {}

    if _is_blank(draft.title):
        errors["title"] = "Title is required"
    if _is_blank(draft.author):
        errors["author"] = "Author is required"

    year = draft.publication_year
    if year is not None:
        if year < MIN_PUBLICATION_YEAR:
            errors["publicationYear"] = f"Year must be after {MIN_PUBLICATION_YEAR}"
        elif year > MAX_PUBLICATION_YEAR:
            errors["publicationYear"] = f"Year must be before {MAX_PUBLICATION_YEAR}"

    if check_borrow_state and draft.borrowed and _is_blank(draft.borrowed_by):
        errors["borrowedBy"] = "borrowedBy is required when borrowed is true"

    return errors
