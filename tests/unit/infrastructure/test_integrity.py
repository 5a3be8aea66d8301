"""Tests for telling unique-constraint violations apart from other integrity errors."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import IntegrityError

from chirper.application.common.exceptions import DuplicateRecordError
from chirper.domain.common.value_objects.ids import TweetId, UserId
from chirper.domain.identity.entities.user import User
from chirper.domain.identity.value_objects import Email, Username
from chirper.domain.social.entities import Follow, Like
from chirper.infrastructure.identity.repositories import UserRepository
from chirper.infrastructure.persistence.integrity import violates_unique_constraint
from chirper.infrastructure.persistence.models import User as UserORM
from chirper.infrastructure.social.repositories import FollowRepository, LikeRepository

PG_DUPLICATE_USERNAME = (
    'duplicate key value violates unique constraint "uq_users_username"\n'
    "DETAIL:  Key (username)=(myemail) already exists."
)
PG_FOLLOW_FOREIGN_KEY = (
    'insert or update on table "follows" violates foreign key constraint '
    '"follows_follower_user_id_fkey"\n'
    'DETAIL:  Key (follower_user_id)=(1) is not present in table "users".'
)


def integrity_error(message: str) -> IntegrityError:
    return IntegrityError("INSERT ...", {}, Exception(message))


def failing_session(message: str) -> MagicMock:
    db = MagicMock()
    db.get.return_value = None
    db.flush.side_effect = integrity_error(message)
    return db


class TestViolatesUniqueConstraint:
    @pytest.mark.parametrize(
        ("message", "name", "expected"),
        [
            (PG_DUPLICATE_USERNAME, "uq_users_username", True),
            (PG_DUPLICATE_USERNAME, "uq_users_email", False),
            ("UNIQUE constraint failed: users.email", "uq_users_email", True),
            ("UNIQUE constraint failed: users.email", "uq_users_username", False),
            ("FOREIGN KEY constraint failed", "uq_users_email", False),
        ],
    )
    def test_users_table(self, message, name, expected) -> None:
        assert violates_unique_constraint(integrity_error(message), UserORM.__table__, name) is (
            expected
        )


class TestRepositoriesTranslateOnlyUniqueViolations:
    def test_detail_line_does_not_decide_the_user_constraint(self, hasher) -> None:
        repository = UserRepository(failing_session(PG_DUPLICATE_USERNAME), hasher)
        user = User.create(Username("myemail"), Email("a@example.com"), "password123", hasher)

        with pytest.raises(DuplicateRecordError) as exc_info:
            repository.save(user)
        assert exc_info.value.constraint == "username"

    def test_foreign_key_failure_on_follow_propagates(self) -> None:
        db = failing_session(PG_FOLLOW_FOREIGN_KEY)
        repository = FollowRepository(db)

        with pytest.raises(IntegrityError):
            repository.save(Follow.create(UserId.generate(), UserId.generate()))
        db.rollback.assert_called_once()

    def test_foreign_key_failure_on_like_propagates(self) -> None:
        repository = LikeRepository(failing_session("FOREIGN KEY constraint failed"))

        with pytest.raises(IntegrityError):
            repository.save(Like.create(UserId.generate(), TweetId.generate()))

    def test_sqlite_pair_violation_is_a_duplicate(self) -> None:
        repository = FollowRepository(
            failing_session(
                "UNIQUE constraint failed: follows.follower_user_id, follows.followed_user_id"
            )
        )

        with pytest.raises(DuplicateRecordError) as exc_info:
            repository.save(Follow.create(UserId.generate(), UserId.generate()))
        assert exc_info.value.constraint == "follow"
