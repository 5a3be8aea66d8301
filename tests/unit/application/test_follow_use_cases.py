"""Tests for follow, unfollow and follower listing use cases."""

from unittest.mock import MagicMock

import pytest

from chirper.application.common.exceptions import DuplicateRecordError
from chirper.application.social.use_cases.follows import (
    FollowUserUseCase,
    GetFollowersUseCase,
    GetFollowingUseCase,
    UnfollowUserUseCase,
)
from chirper.domain.common.exceptions import InvalidPageError
from chirper.domain.common.value_objects.ids import UserId
from chirper.domain.identity.exceptions import UserNotFoundError
from chirper.domain.social.entities import Follow
from chirper.domain.social.exceptions import (
    AlreadyFollowingError,
    NotFollowingError,
    SelfFollowError,
)
from chirper.domain.social.services import SocialGraphService


@pytest.fixture
def follow_use_case(follows, users, uow) -> FollowUserUseCase:
    return FollowUserUseCase(follows, users, SocialGraphService(follows), uow)


@pytest.fixture
def unfollow_use_case(follows, uow) -> UnfollowUserUseCase:
    return UnfollowUserUseCase(follows, SocialGraphService(follows), uow)


class TestFollowUser:
    def test_follow(self, follow_use_case, follows, make_user, uow) -> None:
        alice, bob = make_user("alice"), make_user("bob")

        follow = follow_use_case.follow(alice.id, bob.id)

        assert follows.find_by_follower_and_followed(alice.id, bob.id) == follow
        assert uow.commits == 1

    def test_self_follow(self, follow_use_case, make_user) -> None:
        alice = make_user("alice")
        with pytest.raises(SelfFollowError):
            follow_use_case.follow(alice.id, alice.id)

    def test_already_following(self, follow_use_case, make_user) -> None:
        alice, bob = make_user("alice"), make_user("bob")
        follow_use_case.follow(alice.id, bob.id)

        with pytest.raises(AlreadyFollowingError):
            follow_use_case.follow(alice.id, bob.id)

    def test_unknown_target(self, follow_use_case, follows, make_user) -> None:
        alice = make_user("alice")

        with pytest.raises(UserNotFoundError):
            follow_use_case.follow(alice.id, UserId.generate())
        assert follows.follows == []

    def test_storage_conflict_is_translated(self, users, uow, make_user) -> None:
        alice, bob = make_user("alice"), make_user("bob")
        repository = MagicMock()
        repository.find_by_follower_and_followed.return_value = None
        repository.save.side_effect = DuplicateRecordError("follow")
        use_case = FollowUserUseCase(repository, users, SocialGraphService(repository), uow)

        with pytest.raises(AlreadyFollowingError):
            use_case.follow(alice.id, bob.id)
        assert uow.rollbacks == 1


class TestUnfollowUser:
    def test_unfollow(self, follow_use_case, unfollow_use_case, follows, make_user) -> None:
        alice, bob = make_user("alice"), make_user("bob")
        follow_use_case.follow(alice.id, bob.id)

        unfollow_use_case.unfollow(alice.id, bob.id)

        assert follows.find_by_follower_and_followed(alice.id, bob.id) is None

    def test_not_following(self, unfollow_use_case, make_user) -> None:
        alice, bob = make_user("alice"), make_user("bob")
        with pytest.raises(NotFollowingError):
            unfollow_use_case.unfollow(alice.id, bob.id)


class TestFollowerListings:
    @pytest.fixture
    def graph(self, follows, make_user):
        """bob is followed by alice, carol and dave (in that order); alice follows carol."""
        alice, bob, carol, dave = (make_user(name) for name in ("alice", "bob", "carol", "dave"))
        for follower in (alice, carol, dave):
            follows.save(Follow.create(follower.id, bob.id))
        follows.save(Follow.create(alice.id, carol.id))
        return alice, bob, carol, dave

    def test_followers_newest_first_with_caller_flags(self, users, follows, graph) -> None:
        alice, _, carol, dave = graph

        result = GetFollowersUseCase(users, follows).get_followers("bob", alice.id)

        assert [entry.user for entry in result.users] == [dave, carol, alice]
        assert [entry.followed_by_current_user for entry in result.users] == [False, True, False]
        assert result.total_pages == 1

    def test_anonymous_caller_skips_follow_state(self, users, graph) -> None:
        follow_repository = MagicMock()
        follow_repository.count_followers.return_value = 1
        follow_repository.find_follower_user_ids.return_value = [graph[0].id]

        result = GetFollowersUseCase(users, follow_repository).get_followers("bob")

        assert result.users[0].followed_by_current_user is False
        follow_repository.find_followed_user_ids_in.assert_not_called()

    def test_followers_pagination(self, users, follows, graph) -> None:
        _, _, _, dave = graph
        use_case = GetFollowersUseCase(users, follows)

        first = use_case.get_followers("bob", page=0, size=2)
        last = use_case.get_followers("bob", page=1, size=2)

        assert len(first.users) == 2
        assert first.total_pages == 2
        assert [entry.user for entry in last.users] == [graph[0]]
        assert first.users[0].user == dave

    def test_missing_users_are_skipped(self, users, follows, graph) -> None:
        _, _, carol, _ = graph
        users.delete(carol.id)

        result = GetFollowersUseCase(users, follows).get_followers("bob")

        assert carol not in [entry.user for entry in result.users]
        assert len(result.users) == 2

    def test_following(self, users, follows, graph) -> None:
        alice, bob, carol, _ = graph

        result = GetFollowingUseCase(users, follows).get_following("alice", carol.id)

        assert [entry.user for entry in result.users] == [carol, bob]
        assert [entry.followed_by_current_user for entry in result.users] == [False, True]

    def test_unknown_user(self, users, follows) -> None:
        with pytest.raises(UserNotFoundError):
            GetFollowersUseCase(users, follows).get_followers("nobody")
        with pytest.raises(UserNotFoundError):
            GetFollowingUseCase(users, follows).get_following("nobody")

    def test_invalid_page(self, users, follows, graph) -> None:
        with pytest.raises(InvalidPageError):
            GetFollowersUseCase(users, follows).get_followers("bob", page=-1)
