"""Custom exceptions for the application."""
from typing import Any, Optional


class AppException(Exception):
    """Base application exception."""

    status_code: int = 400

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppException):
    """Resource not found errors."""

    status_code = 404

    def __init__(self, resource: str, resource_id: Any):
        super().__init__(
            f"{resource} with id {resource_id} not found",
            error_code="NOT_FOUND",
            details={"resource": resource, "id": resource_id},
        )


class ValidationError(AppException):
    """Validation errors with field-level messages."""

    def __init__(self, fields: dict[str, str], message: str = "Validation failed"):
        self.fields = dict(fields)
        super().__init__(
            message,
            error_code="VALIDATION_ERROR",
            details={"fields": self.fields},
        )


class AlreadyBorrowedError(AppException):
    """Borrow attempted on a book that is currently borrowed."""

    def __init__(self, book_id: int):
        super().__init__(
            "Book already borrowed",
            error_code="ALREADY_BORROWED",
            details={"id": book_id},
        )
