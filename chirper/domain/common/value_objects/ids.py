from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed user identifier."""


@dataclass(frozen=True)
class TweetId(EntityId):
    """Strongly-typed tweet identifier."""


@dataclass(frozen=True)
class FollowId(EntityId):
    """Strongly-typed follow relation identifier."""


@dataclass(frozen=True)
class LikeId(EntityId):
    """Strongly-typed like identifier."""


@dataclass(frozen=True)
class RetweetId(EntityId):
    """Strongly-typed retweet identifier."""
