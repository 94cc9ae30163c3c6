"""In-memory book registry."""
from threading import Lock
from typing import Dict, List, Optional

from book_registry.core.exceptions import AlreadyBorrowedError, NotFoundError, ValidationError
from book_registry.core.logging import get_logger
from book_registry.core.utils import IDGenerator
from book_registry.models.book import Book
from book_registry.schemas.book import BookDraft
from book_registry.services.validation import validate_draft

logger = get_logger("registry")

DELETE_CONFIRMATION = "Book deleted successfully"


class BookRegistry:
    """
    Dict-based in-memory registry of books keyed by id.

    A single lock guards the map and the id generator. Every method hands
    back copies so callers never hold a reference to a stored record.
    """
    def __init__(self, id_gen: Optional[IDGenerator] = None):
        self._storage: Dict[int, Book] = {}
        self._id_gen = id_gen or IDGenerator()
        self._lock = Lock()

    def list(self, author: Optional[str] = None, genre: Optional[str] = None) -> List[Book]:
        """
        List books. When either filter is given, a book is included if its
        author matches OR its genre matches.
        """
        with self._lock:
            books = list(self._storage.values())
            if author is None and genre is None:
                result = [b.copy() for b in books]
            else:
                result = [
                    b.copy()
                    for b in books
                    if (author is not None and b.author == author)
                    or (genre is not None and b.genre == genre)
                ]
        logger.debug(f"Listed {len(result)} book(s) (author={author!r}, genre={genre!r})")
        return result

    def find(self, book_id: int) -> Optional[Book]:
        """
        Look up a book by ID, returning None when it is absent.
        """
        with self._lock:
            book = self._storage.get(book_id)
            return book.copy() if book is not None else None

    def get(self, book_id: int) -> Book:
        """
        Retrieve a book by ID.
        """
        book = self.find(book_id)
        if book is None:
            raise NotFoundError("Book", book_id)
        return book

    def create(self, draft: BookDraft) -> Book:
        """
        Validate a draft and store it under the next ID, not borrowed.
        """
        errors = validate_draft(draft)
        if errors:
            logger.warning(f"Rejected book create: {errors}")
            raise ValidationError(errors)
        with self._lock:
            book = Book(
                id=self._id_gen.next_id(),
                title=draft.title,
                author=draft.author,
                genre=draft.genre,
                publication_year=draft.publication_year,
            )
            self._storage[book.id] = book
            created = book.copy()
        logger.info(f"Created book {created.id}: {created.title!r} by {created.author!r}")
        return created

    def update(self, book_id: int, draft: BookDraft) -> Book:
        """
        Replace every field of an existing book. The stored ID always wins
        over any ID in the draft.
        """
        with self._lock:
            if book_id not in self._storage:
                raise NotFoundError("Book", book_id)
            errors = validate_draft(draft, check_borrow_state=True)
            if errors:
                logger.warning(f"Rejected update of book {book_id}: {errors}")
                raise ValidationError(errors)
            book = Book(
                id=book_id,
                title=draft.title,
                author=draft.author,
                genre=draft.genre,
                publication_year=draft.publication_year,
                borrowed=draft.borrowed,
                borrowed_by=draft.borrowed_by if draft.borrowed else None,
            )
            self._storage[book_id] = book
            updated = book.copy()
        logger.info(f"Updated book {book_id}")
        return updated

    def delete(self, book_id: int) -> str:
        """
        Delete a book by ID. Deleting an absent ID is a no-op.
        """
        with self._lock:
            removed = self._storage.pop(book_id, None)
        if removed is not None:
            logger.info(f"Deleted book {book_id}")
        else:
            logger.debug(f"Delete of absent book {book_id} ignored")
        return DELETE_CONFIRMATION

    def borrow(self, book_id: int, user_id: str) -> Book:
        """
        Mark a book as borrowed by user_id.
        """
        if user_id is None or not user_id.strip():
            raise ValidationError({"userId": "userId is required"})
        with self._lock:
            book = self._storage.get(book_id)
            if book is None:
                raise NotFoundError("Book", book_id)
            if book.borrowed:
                logger.warning(
                    f"Book {book_id} already borrowed by {book.borrowed_by!r}, "
                    f"refusing {user_id!r}"
                )
                raise AlreadyBorrowedError(book_id)
            book.borrowed = True
            book.borrowed_by = user_id
            borrowed = book.copy()
        logger.info(f"Book {book_id} borrowed by {user_id!r}")
        return borrowed

    def return_book(self, book_id: int) -> Book:
        """
        Mark a book as returned, whatever its previous state.
        """
        with self._lock:
            book = self._storage.get(book_id)
            if book is None:
                raise NotFoundError("Book", book_id)
            book.borrowed = False
            book.borrowed_by = None
            returned = book.copy()
        logger.info(f"Book {book_id} returned")
        return returned

    def stats(self) -> Dict[str, int]:
        """
        Count all books and the borrowed ones.
        """
        with self._lock:
            total = len(self._storage)
            borrowed = sum(1 for b in self._storage.values() if b.borrowed)
        return {"total_books": total, "borrowed": borrowed}
