"""Domain models."""
from book_registry.models.book import Book

__all__ = ["Book"]
