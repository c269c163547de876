from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from lioarcade.application.gamification.use_cases.get_leaderboard_use_case import (
    GetLeaderboardUseCase,
)
from lioarcade.application.gamification.use_cases.get_user_progress_use_case import (
    GetUserProgressUseCase,
)
from lioarcade.application.gamification.use_cases.provision_gamification_use_case import (
    ProvisionGamificationUseCase,
)
from lioarcade.application.gamification.use_cases.submit_score_use_case import (
    SubmitScoreUseCase,
)
from lioarcade.config import get_settings
from lioarcade.domain.gamification.services.badge_evaluator import BadgeEvaluator
from lioarcade.infrastructure.common.event_logging import log_domain_event
from lioarcade.infrastructure.common.unit_of_work import SQLAlchemyUnitOfWork
from lioarcade.infrastructure.content.repositories import ContentRepository
from lioarcade.infrastructure.gamification.repositories import (
    GamificationRepository,
    LeaderboardRepository,
    ProgressRepository,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    settings = providers.Singleton(get_settings)

    # Repositories
    content_repository = providers.Factory(ContentRepository, db=db)
    progress_repository = providers.Factory(ProgressRepository, db=db)
    gamification_repository = providers.Factory(GamificationRepository, db=db)
    leaderboard_repository = providers.Factory(LeaderboardRepository, db=db)

    # Transactions; committed domain events go to the structured log
    unit_of_work = providers.Factory(
        SQLAlchemyUnitOfWork,
        db=db,
        event_handlers=providers.List(providers.Object(log_domain_event)),
    )

    # Domain services (pure domain logic, no db)
    badge_evaluator = providers.Factory(BadgeEvaluator)

    # Gamification module, application use cases
    submit_score_use_case = providers.Factory(
        SubmitScoreUseCase,
        content_lookup=content_repository,
        progress_repository=progress_repository,
        gamification_repository=gamification_repository,
        badge_evaluator=badge_evaluator,
        unit_of_work=unit_of_work,
    )

    get_user_progress_use_case = providers.Factory(
        GetUserProgressUseCase,
        gamification_repository=gamification_repository,
        progress_repository=progress_repository,
        recent_activity_limit=settings.provided.RECENT_ACTIVITY_LIMIT,
    )

    get_leaderboard_use_case = providers.Factory(
        GetLeaderboardUseCase,
        leaderboard_reader=leaderboard_repository,
        max_limit=settings.provided.LEADERBOARD_MAX_LIMIT,
    )

    provision_gamification_use_case = providers.Factory(
        ProvisionGamificationUseCase,
        gamification_repository=gamification_repository,
        unit_of_work=unit_of_work,
    )


# Initialize container
container = Container()
