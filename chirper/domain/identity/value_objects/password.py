"""
Password value object.

Only the salted one-way hash is ever held. Hashing and verification are
delegated to a PasswordHasher supplied by the caller, so the cost factor
is configured once at process start instead of living in module state.
"""

from dataclasses import dataclass, field
from typing import Protocol

from chirper.domain.common.exceptions import ValidationError
from chirper.domain.common.value_object import ValueObject

MIN_PASSWORD_LENGTH = 8
PROTECTED_PLACEHOLDER = "[PROTECTED]"


class PasswordHasher(Protocol):
    def hash(self, plain_password: str) -> str: ...

    def verify(self, plain_password: str, hashed_password: str) -> bool: ...

    def dummy_hash(self) -> str: ...


@dataclass(frozen=True)
class Password(ValueObject):
    """
    Hashed password.

    Business Rules:
    - Plaintext is never stored
    - Plaintext must be at least MIN_PASSWORD_LENGTH characters
    - Text representation is always a placeholder, never the hash
    """

    hashed_value: str
    hasher: PasswordHasher = field(compare=False)

    def __post_init__(self) -> None:
        if not self.hashed_value or not self.hashed_value.strip():
            raise ValidationError("Password hash cannot be empty", field="password")

    @classmethod
    def from_plain_text(cls, plain_password: str, hasher: PasswordHasher) -> "Password":
        """
        Hash a plaintext password.

        Raises:
            ValidationError: If the plaintext is blank or too short
        """
        if plain_password is None or not plain_password.strip():
            raise ValidationError("Password cannot be empty", field="password")
        if len(plain_password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
                field="password",
            )
        return cls(hashed_value=hasher.hash(plain_password), hasher=hasher)

    def matches(self, plain_password: str | None) -> bool:
        """Check a plaintext candidate against the stored hash."""
        if plain_password is None:
            return False
        return self.hasher.verify(plain_password, self.hashed_value)

    def to_primitive(self) -> str:
        return self.hashed_value

    def __str__(self) -> str:
        return PROTECTED_PLACEHOLDER

    def __repr__(self) -> str:
        return f"Password({PROTECTED_PLACEHOLDER})"
