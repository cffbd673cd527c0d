"""Domain exception hierarchy for structured error responses."""

from __future__ import annotations


class AppException(Exception):
    """Base exception for all domain errors.

    Subclasses set ``code`` and ``status_code`` at the class level; callers
    provide ``message`` and an optional ``details`` list.
    """

    code: str = "APP_ERROR"
    status_code: int = 500

    def __init__(self, message: str, details: list[dict] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or []


class NotFoundException(AppException):
    code = "NOT_FOUND"
    status_code = 404


class ConflictException(AppException):
    code = "CONFLICT"
    status_code = 409


class ValidationException(AppException):
    code = "VALIDATION_ERROR"
    status_code = 422


class CodeConflictException(ConflictException):
    """Every commit attempt lost the race for its product code."""

    code = "CODE_CONFLICT"


class AllocationExhaustedException(AppException):
    """No free product code was drawn within the attempt budget."""

    code = "ALLOCATION_EXHAUSTED"
    status_code = 503

    def __init__(self, attempts: int, space_size: int) -> None:
        super().__init__(
            f"Unable to allocate a free product code after {attempts} attempts",
            details=[{"field": "product_code", "message": f"code space of {space_size} is saturated"}],
        )
        self.attempts = attempts
        self.space_size = space_size
