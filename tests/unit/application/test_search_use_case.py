"""Tests for SearchUseCase."""

import pytest

from chirper.application.social.use_cases.search import SearchUseCase
from chirper.domain.social.exceptions import InvalidSearchKeywordError


@pytest.fixture
def use_case(users, tweets) -> SearchUseCase:
    return SearchUseCase(users, tweets)


class TestSearch:
    def test_matches_users_and_tweets_ignoring_case(self, use_case, make_user, make_tweet) -> None:
        alice = make_user("alice", display_name="Alice Wonder")
        bob = make_user("bob", display_name="WONDERboy")
        make_user("carol")
        hit = make_tweet(alice, "A wonderful day")
        make_tweet(bob, "nothing to see")
        gone = make_tweet(bob, "wonder gone")
        gone.delete(bob.id)

        result = use_case.search("  wonder ")

        assert result.users == [alice, bob]
        assert result.tweets == [hit]
        assert (result.total_users, result.total_tweets) == (2, 1)

    @pytest.mark.parametrize("keyword", ["", "   ", "a", " b ", None])
    def test_rejects_short_keyword(self, use_case, keyword) -> None:
        with pytest.raises(InvalidSearchKeywordError):
            use_case.search(keyword)

    def test_paginates(self, use_case, make_user) -> None:
        for name in ("user1", "user2", "user3"):
            make_user(name)

        result = use_case.search("user", page=1, size=2)

        assert [u.username.value for u in result.users] == ["user3"]
        assert result.total_users == 3
