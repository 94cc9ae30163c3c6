"""Core utilities."""
from book_registry.core.exceptions import (
    AlreadyBorrowedError,
    AppException,
    NotFoundError,
    ValidationError,
)
from book_registry.core.logging import get_logger, setup_logging
from book_registry.core.utils import IDGenerator

__all__ = [
    # Exceptions
    "AppException",
    "NotFoundError",
    "ValidationError",
    "AlreadyBorrowedError",
    # Logging
    "get_logger",
    "setup_logging",
    # Ids
    "IDGenerator",
]
