from collections.abc import Collection
from typing import Protocol

from chirper.domain.common.value_objects.ids import UserId
from chirper.domain.identity.entities.user import User
from chirper.domain.identity.value_objects import Email, Username


class UserRepositoryProtocol(Protocol):
    def find_by_id(self, user_id: UserId) -> User | None: ...

    def find_by_username(self, username: Username) -> User | None: ...

    def find_by_email(self, email: Email) -> User | None: ...

    def find_by_ids(self, user_ids: Collection[UserId]) -> dict[UserId, User]: ...

    def search(self, keyword: str, offset: int, limit: int) -> list[User]: ...

    def count_search(self, keyword: str) -> int: ...

    def save(self, user: User) -> User: ...

    def delete(self, user_id: UserId) -> None: ...
