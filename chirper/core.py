from contextvars import ContextVar
from datetime import timedelta

from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from chirper.application.identity.use_cases.get_user_profile_use_case import (
    GetUserProfileUseCase,
)
from chirper.application.identity.use_cases.login_user_use_case import LoginUserUseCase
from chirper.application.identity.use_cases.register_user_use_case import RegisterUserUseCase
from chirper.application.identity.use_cases.update_profile_use_case import UpdateProfileUseCase
from chirper.application.social.use_cases.follows import (
    FollowUserUseCase,
    GetFollowersUseCase,
    GetFollowingUseCase,
    UnfollowUserUseCase,
)
from chirper.application.social.use_cases.reactions import (
    LikeTweetUseCase,
    RetweetUseCase,
    UnlikeTweetUseCase,
    UnretweetUseCase,
)
from chirper.application.social.use_cases.search import SearchUseCase
from chirper.application.social.use_cases.timeline import GetTimelineUseCase
from chirper.application.social.use_cases.tweets import (
    CreateTweetUseCase,
    DeleteTweetUseCase,
    GetTweetUseCase,
)
from chirper.config import get_settings
from chirper.domain.identity.services.authentication_service import AuthenticationService
from chirper.domain.social.services.social_graph_service import SocialGraphService
from chirper.domain.social.services.timeline_service import TimelineService
from chirper.infrastructure.identity.repositories.user_repository import UserRepository
from chirper.infrastructure.identity.services.password_hasher import BcryptPasswordHasher
from chirper.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork
from chirper.infrastructure.social.repositories import (
    FollowRepository,
    LikeRepository,
    RetweetRepository,
    TweetRepository,
)


# Session of the request running in the current thread or task
current_session: ContextVar[Session] = ContextVar("current_session")


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Session bound by use_case_scope in the current thread or task
    db = providers.Callable(current_session.get)

    settings = providers.ThreadSafeSingleton(get_settings)

    # Identity services (application-scoped)
    password_hasher = providers.ThreadSafeSingleton(
        BcryptPasswordHasher, rounds=settings.provided.PASSWORD_HASH_ROUNDS
    )
    authentication_service = providers.ThreadSafeSingleton(
        AuthenticationService,
        secret_key=settings.provided.SECRET_KEY,
        token_ttl=providers.Factory(
            timedelta, minutes=settings.provided.ACCESS_TOKEN_EXPIRE_MINUTES
        ),
    )

    # Repositories
    unit_of_work = providers.Factory(SqlAlchemyUnitOfWork, db=db)
    user_repository = providers.Factory(UserRepository, db=db, password_hasher=password_hasher)
    tweet_repository = providers.Factory(TweetRepository, db=db)
    follow_repository = providers.Factory(FollowRepository, db=db)
    like_repository = providers.Factory(LikeRepository, db=db)
    retweet_repository = providers.Factory(RetweetRepository, db=db)

    # Domain services
    social_graph_service = providers.Factory(
        SocialGraphService, follow_lookup=follow_repository
    )
    timeline_service = providers.Factory(TimelineService, tweet_lookup=tweet_repository)

    # Identity module, application use cases
    register_user_use_case = providers.Factory(
        RegisterUserUseCase,
        user_repository=user_repository,
        password_hasher=password_hasher,
        unit_of_work=unit_of_work,
    )
    login_user_use_case = providers.Factory(
        LoginUserUseCase,
        user_repository=user_repository,
        authentication_service=authentication_service,
        password_hasher=password_hasher,
    )
    update_profile_use_case = providers.Factory(
        UpdateProfileUseCase,
        user_repository=user_repository,
        unit_of_work=unit_of_work,
    )
    get_user_profile_use_case = providers.Factory(
        GetUserProfileUseCase,
        user_repository=user_repository,
        follow_repository=follow_repository,
        tweet_repository=tweet_repository,
    )

    # Social module, application use cases
    create_tweet_use_case = providers.Factory(
        CreateTweetUseCase,
        tweet_repository=tweet_repository,
        unit_of_work=unit_of_work,
    )
    delete_tweet_use_case = providers.Factory(
        DeleteTweetUseCase,
        tweet_repository=tweet_repository,
        unit_of_work=unit_of_work,
    )
    get_tweet_use_case = providers.Factory(
        GetTweetUseCase,
        tweet_repository=tweet_repository,
        like_repository=like_repository,
        retweet_repository=retweet_repository,
    )
    follow_user_use_case = providers.Factory(
        FollowUserUseCase,
        follow_repository=follow_repository,
        user_repository=user_repository,
        social_graph_service=social_graph_service,
        unit_of_work=unit_of_work,
    )
    unfollow_user_use_case = providers.Factory(
        UnfollowUserUseCase,
        follow_repository=follow_repository,
        social_graph_service=social_graph_service,
        unit_of_work=unit_of_work,
    )
    get_followers_use_case = providers.Factory(
        GetFollowersUseCase,
        user_repository=user_repository,
        follow_repository=follow_repository,
    )
    get_following_use_case = providers.Factory(
        GetFollowingUseCase,
        user_repository=user_repository,
        follow_repository=follow_repository,
    )
    like_tweet_use_case = providers.Factory(
        LikeTweetUseCase,
        like_repository=like_repository,
        tweet_repository=tweet_repository,
        unit_of_work=unit_of_work,
    )
    unlike_tweet_use_case = providers.Factory(
        UnlikeTweetUseCase,
        like_repository=like_repository,
        unit_of_work=unit_of_work,
    )
    retweet_use_case = providers.Factory(
        RetweetUseCase,
        retweet_repository=retweet_repository,
        tweet_repository=tweet_repository,
        unit_of_work=unit_of_work,
    )
    unretweet_use_case = providers.Factory(
        UnretweetUseCase,
        retweet_repository=retweet_repository,
        unit_of_work=unit_of_work,
    )
    get_timeline_use_case = providers.Factory(
        GetTimelineUseCase,
        follow_repository=follow_repository,
        user_repository=user_repository,
        like_repository=like_repository,
        retweet_repository=retweet_repository,
        timeline_service=timeline_service,
    )
    search_use_case = providers.Factory(
        SearchUseCase,
        user_repository=user_repository,
        tweet_repository=tweet_repository,
    )


container = Container()
