"""Email value object."""

import re
from dataclasses import dataclass

from chirper.domain.common.exceptions import ValidationError
from chirper.domain.common.value_object import ValueObject

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")


@dataclass(frozen=True)
class Email(ValueObject):
    """E-mail address in local@domain.tld form, stored trimmed."""

    value: str

    def __post_init__(self) -> None:
        if self.value is None or not str(self.value).strip():
            raise ValidationError("Email cannot be empty", field="email")

        trimmed = self.value.strip()
        if not EMAIL_PATTERN.fullmatch(trimmed):
            raise ValidationError("Invalid email format", field="email", value=trimmed)
        object.__setattr__(self, "value", trimmed)

    def __str__(self) -> str:
        return self.value
