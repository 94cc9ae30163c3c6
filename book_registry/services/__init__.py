"""Business logic services."""
from book_registry.services.registry import BookRegistry
from book_registry.services.validation import validate_draft

__all__ = [
    "BookRegistry",
    "validate_draft",
]
