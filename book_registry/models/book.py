"""
In-memory Book record.
"""
from typing import Optional


class Book:
    """
    Book record owned by the registry.
    """
    def __init__(
        self,
        id: int,
        title: str,
        author: str,
        genre: Optional[str] = None,
        publication_year: Optional[int] = None,
        borrowed: bool = False,
        borrowed_by: Optional[str] = None,
    ):
        self.id = id
        self.title = title
        self.author = author
        self.genre = genre
        self.publication_year = publication_year
        self.borrowed = borrowed
        self.borrowed_by = borrowed_by

    def copy(self) -> "Book":
        return Book(**self.to_dict())

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "genre": self.genre,
            "publication_year": self.publication_year,
            "borrowed": self.borrowed,
            "borrowed_by": self.borrowed_by,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"Book(id={self.id!r}, title={self.title!r}, borrowed={self.borrowed!r})"
