"""Use case for keyword search across users and tweets."""

from dataclasses import dataclass

import structlog

from chirper.application.common.pagination import PageRequest
from chirper.application.identity.protocols.user_repository import UserRepositoryProtocol
from chirper.application.social.protocols.tweet_repository import TweetRepositoryProtocol
from chirper.domain.identity.entities.user import User
from chirper.domain.social.entities.tweet import Tweet
from chirper.domain.social.exceptions import InvalidSearchKeywordError

logger = structlog.get_logger(__name__)

MIN_KEYWORD_LENGTH = 2


@dataclass
class SearchResult:
    users: list[User]
    tweets: list[Tweet]
    total_users: int
    total_tweets: int
    page: int
    size: int


class SearchUseCase:
    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        tweet_repository: TweetRepositoryProtocol,
    ) -> None:
        self.user_repository = user_repository
        self.tweet_repository = tweet_repository

    def search(self, keyword: str, page: int = 0, size: int = 20) -> SearchResult:
        """
        Search users by username or display name and tweets by content.

        Matching is case-insensitive and deleted tweets are never returned.

        Args:
            keyword: Search term, at least two characters after trimming
            page: Zero-based page index, applied to both result lists
            size: Page size

        Raises:
            InvalidSearchKeywordError: If the keyword is blank or too short
            InvalidPageError, InvalidPageSizeError: On bad paging input
        """
        term = (keyword or "").strip()
        if not term:
            raise InvalidSearchKeywordError("Search keyword cannot be empty")
        if len(term) < MIN_KEYWORD_LENGTH:
            raise InvalidSearchKeywordError(
                f"Search keyword must be at least {MIN_KEYWORD_LENGTH} characters"
            )

        page_request = PageRequest(page, size)

        users = self.user_repository.search(term, page_request.offset, page_request.limit)
        tweets = self.tweet_repository.search(term, page_request.offset, page_request.limit)
        total_users = self.user_repository.count_search(term)
        total_tweets = self.tweet_repository.count_search(term)

        logger.debug(
            "search_executed", keyword=term, users_found=total_users, tweets_found=total_tweets
        )

        return SearchResult(
            users=users,
            tweets=tweets,
            total_users=total_users,
            total_tweets=total_tweets,
            page=page,
            size=size,
        )
