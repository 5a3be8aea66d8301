"""TweetContent value object."""

from dataclasses import dataclass

from chirper.domain.common.exceptions import ValidationError
from chirper.domain.common.value_object import ValueObject

MIN_CONTENT_LENGTH = 1
MAX_CONTENT_LENGTH = 280


@dataclass(frozen=True)
class TweetContent(ValueObject):
    """
    Body text of a tweet.

    Trimmed before the length check, so whitespace-only text is rejected
    as blank rather than counted.
    """

    value: str

    def __post_init__(self) -> None:
        if self.value is None or not str(self.value).strip():
            raise ValidationError("Tweet content cannot be empty", field="content")

        trimmed = self.value.strip()
        if not MIN_CONTENT_LENGTH <= len(trimmed) <= MAX_CONTENT_LENGTH:
            raise ValidationError(
                f"Tweet content must be between {MIN_CONTENT_LENGTH} and "
                f"{MAX_CONTENT_LENGTH} characters, but got: {len(trimmed)}",
                field="content",
            )
        object.__setattr__(self, "value", trimmed)

    def __str__(self) -> str:
        return self.value
