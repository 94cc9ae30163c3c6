"""Book API routes."""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from book_registry.dependencies import get_registry
from book_registry.schemas.book import BookDraft, BookResponse, BookStats
from book_registry.schemas.common import ErrorResponse, MessageResponse
from book_registry.services.registry import BookRegistry

router = APIRouter(tags=["Books"])

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Book not found."}}
BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Invalid request."}}


@router.get("", response_model=List[BookResponse])
async def list_books(
    author: Optional[str] = None,
    genre: Optional[str] = None,
    registry: BookRegistry = Depends(get_registry),
) -> List[BookResponse]:
    """List books, optionally matching author or genre."""
    books = registry.list(author=author, genre=genre)
    return [BookResponse(**b.to_dict()) for b in books]


@router.get("/stats/total", response_model=BookStats)
async def get_stats(
    registry: BookRegistry = Depends(get_registry),
) -> BookStats:
    """Total and borrowed book counts."""
    return BookStats(**registry.stats())


@router.post(
    "/create",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
)
async def create_book(
    draft: BookDraft,
    registry: BookRegistry = Depends(get_registry),
) -> BookResponse:
    """Create a new book. The registry assigns its id."""
    book = registry.create(draft)
    return BookResponse(**book.to_dict())


@router.get("/{book_id}", response_model=BookResponse, responses=NOT_FOUND)
async def get_book(
    book_id: int,
    registry: BookRegistry = Depends(get_registry),
) -> BookResponse:
    """Retrieve a book by its id."""
    book = registry.get(book_id)
    return BookResponse(**book.to_dict())


@router.post(
    "/{book_id}/update",
    response_model=BookResponse,
    responses={**NOT_FOUND, **BAD_REQUEST},
)
async def update_book(
    book_id: int,
    draft: BookDraft,
    registry: BookRegistry = Depends(get_registry),
) -> BookResponse:
    """Replace every field of a book. The path id always wins."""
    book = registry.update(book_id, draft)
    return BookResponse(**book.to_dict())


@router.get("/{book_id}/delete", response_model=MessageResponse)
async def delete_book(
    book_id: int,
    registry: BookRegistry = Depends(get_registry),
) -> MessageResponse:
    """Delete a book. Missing ids are ignored."""
    return MessageResponse(message=registry.delete(book_id))


@router.post(
    "/{book_id}/borrow",
    response_model=BookResponse,
    responses={**NOT_FOUND, **BAD_REQUEST},
)
async def borrow_book(
    book_id: int,
    user_id: str = Query(..., alias="userId"),
    registry: BookRegistry = Depends(get_registry),
) -> BookResponse:
    """Borrow a book on behalf of userId."""
    book = registry.borrow(book_id, user_id)
    return BookResponse(**book.to_dict())


@router.put("/{book_id}/return", response_model=BookResponse, responses=NOT_FOUND)
async def return_book(
    book_id: int,
    registry: BookRegistry = Depends(get_registry),
) -> BookResponse:
    """Return a book. Returning a book that is not borrowed is allowed."""
    book = registry.return_book(book_id)
    return BookResponse(**book.to_dict())
