"""
Domain layer exceptions.

These exceptions represent domain-level errors that occur when
business rules are violated or domain invariants are broken.

Every error belongs to exactly one ErrorKind. The set of kinds is closed,
so the layer that turns errors into protocol responses can map them
exhaustively without knowing every concrete error class.
"""

from enum import StrEnum
from typing import ClassVar


class ErrorKind(StrEnum):
    """Closed set of failure categories."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    FORBIDDEN = "forbidden"
    UNAUTHORIZED = "unauthorized"


class DomainError(Exception):
    """
    Base exception for all domain errors.

    Concrete errors never inherit from this class directly; they inherit
    from one of the per-kind bases below.
    """

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """
    Raised when domain validation fails.

    Example: Blank username, malformed email, over-length tweet.
    """

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value


class EntityNotFoundError(DomainError):
    """
    Raised when an entity cannot be found.

    Example: Looking up a tweet by ID that doesn't exist.
    """

    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity_type: str, entity_id: object, message: str | None = None) -> None:
        message = message or f"{entity_type} with id {entity_id} not found"
        super().__init__(message, {"entity_type": entity_type, "entity_id": str(entity_id)})
        self.entity_type = entity_type
        self.entity_id = entity_id


class ConflictError(DomainError):
    """
    Raised when an operation collides with the current state.

    Example: Registering a taken username, liking a tweet twice.
    """

    kind = ErrorKind.CONFLICT


class AuthorizationError(DomainError):
    """
    Raised when an authenticated caller may not perform an operation.

    Example: User trying to delete another user's tweet.
    """

    kind = ErrorKind.FORBIDDEN

    def __init__(self, message: str = "Not authorized to perform this action") -> None:
        super().__init__(message)


class AuthenticationError(DomainError):
    """
    Raised when the caller's identity cannot be established.

    Example: Wrong password, unknown username.
    """

    kind = ErrorKind.UNAUTHORIZED


class InvalidPageError(ValidationError):
    """Raised when a page index is negative."""

    def __init__(self, page: int) -> None:
        super().__init__("Page must be non-negative", field="page", value=page)


class InvalidPageSizeError(ValidationError):
    """Raised when a page size is outside the allowed range."""

    def __init__(self, size: int, max_size: int) -> None:
        super().__init__(f"Size must be between 1 and {max_size}", field="size", value=size)
