"""
Domain common module.

Contains base classes for domain modeling:
- ValueObject: Immutable objects defined by their attributes
- Entity: Objects with identity and lifecycle
- DomainError and its per-kind subclasses
"""

from .entity import Entity, EntityId
from .exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    EntityNotFoundError,
    ErrorKind,
    InvalidPageError,
    InvalidPageSizeError,
    ValidationError,
)
from .value_object import ValueObject

__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    "DomainError",
    "Entity",
    "EntityId",
    "EntityNotFoundError",
    "ErrorKind",
    "InvalidPageError",
    "InvalidPageSizeError",
    "ValidationError",
    "ValueObject",
]
