"""Use case for reading the home timeline."""

from dataclasses import dataclass

from chirper.application.identity.protocols.user_repository import UserRepositoryProtocol
from chirper.application.social.protocols.follow_repository import FollowRepositoryProtocol
from chirper.application.social.protocols.reaction_repository import (
    LikeRepositoryProtocol,
    RetweetRepositoryProtocol,
)
from chirper.domain.common.value_objects.ids import UserId
from chirper.domain.identity.entities.user import User
from chirper.domain.social.entities.tweet import Tweet
from chirper.domain.social.services.timeline_service import TimelineService


@dataclass
class TimelineEntry:
    tweet: Tweet
    author: User
    likes_count: int
    retweets_count: int
    liked_by_current_user: bool
    retweeted_by_current_user: bool


@dataclass
class TimelineResult:
    entries: list[TimelineEntry]
    page: int
    size: int
    total_pages: int


class GetTimelineUseCase:
    def __init__(
        self,
        follow_repository: FollowRepositoryProtocol,
        user_repository: UserRepositoryProtocol,
        like_repository: LikeRepositoryProtocol,
        retweet_repository: RetweetRepositoryProtocol,
        timeline_service: TimelineService,
    ) -> None:
        self.follow_repository = follow_repository
        self.user_repository = user_repository
        self.like_repository = like_repository
        self.retweet_repository = retweet_repository
        self.timeline_service = timeline_service

    def get_timeline(self, user_id: UserId, page: int = 0, size: int = 20) -> TimelineResult:
        """
        Get one page of the feed built from the accounts the user follows.

        Authors, reaction counts and the caller's own reactions are loaded
        in one batch each for the whole page.

        Raises:
            InvalidPageError: If page is negative
            InvalidPageSizeError: If size is out of range
        """
        followed_user_ids = self.follow_repository.find_followed_user_ids(user_id)

        tweets = self.timeline_service.get_timeline(followed_user_ids, page, size)
        total_pages = self.timeline_service.calculate_total_pages(followed_user_ids, size)

        if not tweets:
            return TimelineResult(entries=[], page=page, size=size, total_pages=total_pages)

        tweet_ids = [tweet.id for tweet in tweets]
        authors = self.user_repository.find_by_ids({tweet.user_id for tweet in tweets})
        likes = self.like_repository.count_by_tweet_ids(tweet_ids)
        retweets = self.retweet_repository.count_by_tweet_ids(tweet_ids)
        liked = self.like_repository.find_tweet_ids_liked_by(user_id, tweet_ids)
        retweeted = self.retweet_repository.find_tweet_ids_retweeted_by(user_id, tweet_ids)

        entries = [
            TimelineEntry(
                tweet=tweet,
                author=authors[tweet.user_id],
                likes_count=likes.get(tweet.id, 0),
                retweets_count=retweets.get(tweet.id, 0),
                liked_by_current_user=tweet.id in liked,
                retweeted_by_current_user=tweet.id in retweeted,
            )
            for tweet in tweets
            if tweet.user_id in authors
        ]

        return TimelineResult(entries=entries, page=page, size=size, total_pages=total_pages)
