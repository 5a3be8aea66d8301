"""Exceptions raised by storage adapters and understood by use cases."""


class DuplicateRecordError(Exception):
    """
    Raised by a repository when a storage uniqueness constraint rejects a write.

    Use cases translate it into the same typed conflict error their own
    pre-check raises, since a concurrent request can slip between the two.

    Attributes:
        constraint: Logical name of the violated constraint, e.g. "username",
            "email", "follow", "like", "retweet"
    """

    def __init__(self, constraint: str) -> None:
        self.constraint = constraint
        super().__init__(f"Unique constraint violated: {constraint}")
