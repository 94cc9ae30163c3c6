"""API routers."""
from fastapi import APIRouter

from book_registry.api import books
from book_registry.config import settings

api_router = APIRouter()
api_router.include_router(books.router, prefix=settings.api_prefix)

__all__ = ["api_router"]
