from collections.abc import Generator
from contextlib import contextmanager
from typing import TypeVar

from dependency_injector.providers import Provider

from chirper.core import current_session
from chirper.database import session_scope

T = TypeVar("T")


@contextmanager
def use_case_scope(provider: Provider[T]) -> Generator[T, None, None]:
    """
    Build a use case bound to a fresh database session.

    The session is set on the current context only, so scopes running in
    other threads or tasks keep their own. It is closed when the block ends.

    Example:
        with use_case_scope(container.create_tweet_use_case) as use_case:
            use_case.create_tweet(user_id, "hello")
    """
    with session_scope() as db:
        token = current_session.set(db)
        try:
            yield provider()
        finally:
            current_session.reset(token)
