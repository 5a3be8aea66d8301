"""Tests for SocialGraphService."""

from unittest.mock import MagicMock

import pytest

from chirper.domain.common.value_objects.ids import UserId
from chirper.domain.social.entities import Follow
from chirper.domain.social.exceptions import (
    AlreadyFollowingError,
    NotFollowingError,
    SelfFollowError,
)
from chirper.domain.social.services import SocialGraphService


@pytest.fixture
def follow_lookup() -> MagicMock:
    lookup = MagicMock()
    lookup.find_by_follower_and_followed.return_value = None
    return lookup


@pytest.fixture
def service(follow_lookup: MagicMock) -> SocialGraphService:
    return SocialGraphService(follow_lookup)


class TestValidateFollow:
    def test_passes_for_new_relation(self, service) -> None:
        service.validate_follow(UserId.generate(), UserId.generate())

    def test_self_follow_rejected_without_lookup(self, service, follow_lookup) -> None:
        user_id = UserId.generate()

        with pytest.raises(SelfFollowError):
            service.validate_follow(user_id, user_id)
        follow_lookup.find_by_follower_and_followed.assert_not_called()

    def test_existing_relation_rejected(self, service, follow_lookup) -> None:
        follower, followed = UserId.generate(), UserId.generate()
        follow_lookup.find_by_follower_and_followed.return_value = Follow.create(
            follower, followed
        )

        with pytest.raises(AlreadyFollowingError):
            service.validate_follow(follower, followed)


class TestValidateUnfollow:
    def test_missing_relation_rejected(self, service) -> None:
        with pytest.raises(NotFollowingError):
            service.validate_unfollow(UserId.generate(), UserId.generate())

    def test_self_unfollow_is_not_following(self, service) -> None:
        user_id = UserId.generate()
        with pytest.raises(NotFollowingError):
            service.validate_unfollow(user_id, user_id)

    def test_passes_for_existing_relation(self, service, follow_lookup) -> None:
        follower, followed = UserId.generate(), UserId.generate()
        follow_lookup.find_by_follower_and_followed.return_value = Follow.create(
            follower, followed
        )

        service.validate_unfollow(follower, followed)
        assert service.is_following(follower, followed)
