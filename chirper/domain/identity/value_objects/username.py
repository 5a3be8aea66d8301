"""Username value object."""

from dataclasses import dataclass

from chirper.domain.common.exceptions import ValidationError
from chirper.domain.common.value_object import ValueObject

MIN_USERNAME_LENGTH = 3
MAX_USERNAME_LENGTH = 20


@dataclass(frozen=True)
class Username(ValueObject):
    """
    Public handle of an account.

    Surrounding whitespace is trimmed before validation; the trimmed
    value must be MIN_USERNAME_LENGTH to MAX_USERNAME_LENGTH characters.
    Uniqueness is a storage concern.
    """

    value: str

    def __post_init__(self) -> None:
        if self.value is None or not str(self.value).strip():
            raise ValidationError("Username cannot be empty", field="username")

        trimmed = self.value.strip()
        if not MIN_USERNAME_LENGTH <= len(trimmed) <= MAX_USERNAME_LENGTH:
            raise ValidationError(
                f"Username must be between {MIN_USERNAME_LENGTH} and "
                f"{MAX_USERNAME_LENGTH} characters, but got: {len(trimmed)}",
                field="username",
                value=trimmed,
            )
        object.__setattr__(self, "value", trimmed)

    def __str__(self) -> str:
        return self.value
