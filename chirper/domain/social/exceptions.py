"""Social module domain exceptions."""

from chirper.domain.common.exceptions import (
    AuthorizationError,
    ConflictError,
    EntityNotFoundError,
    ValidationError,
)


class TweetNotFoundError(EntityNotFoundError):
    """Raised when a tweet cannot be found (or has been deleted)."""

    def __init__(self, tweet_id: object) -> None:
        super().__init__("Tweet", tweet_id)


class TweetAlreadyDeletedError(ConflictError):
    """Raised when trying to delete an already-deleted tweet."""

    def __init__(self, tweet_id: object) -> None:
        super().__init__(f"Tweet {tweet_id} is already deleted", {"tweet_id": str(tweet_id)})


class NotTweetAuthorError(AuthorizationError):
    """Raised when someone other than the author tries to delete a tweet."""

    def __init__(self) -> None:
        super().__init__("Only the tweet author can delete this tweet")


class SelfFollowError(ValidationError):
    """Raised when a user tries to follow themselves."""

    def __init__(self) -> None:
        super().__init__("User cannot follow themselves", field="followed_user_id")


class AlreadyFollowingError(ConflictError):
    """Raised when the follow relation already exists."""

    def __init__(self) -> None:
        super().__init__("Already following this user")


class NotFollowingError(EntityNotFoundError):
    """Raised when unfollowing a user that is not followed."""

    def __init__(self, followed_user_id: object) -> None:
        super().__init__("Follow", followed_user_id, "Not following this user")


class AlreadyLikedError(ConflictError):
    """Raised when a user likes the same tweet twice."""

    def __init__(self) -> None:
        super().__init__("Already liked this tweet")


class AlreadyRetweetedError(ConflictError):
    """Raised when a user retweets the same tweet twice."""

    def __init__(self) -> None:
        super().__init__("Already retweeted this tweet")


class InvalidSearchKeywordError(ValidationError):
    """Raised when a search keyword is blank or too short."""

    def __init__(self, message: str) -> None:
        super().__init__(message, field="keyword")
