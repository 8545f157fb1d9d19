from dependency_injector import containers, providers
from sqlalchemy.ext.asyncio import AsyncSession

from lifehacking.application.favorites.use_cases.add_favorite_use_case import AddFavoriteUseCase
from lifehacking.application.favorites.use_cases.merge_favorites_use_case import (
    MergeFavoritesUseCase,
)
from lifehacking.application.favorites.use_cases.remove_favorite_use_case import (
    RemoveFavoriteUseCase,
)
from lifehacking.application.favorites.use_cases.search_user_favorites_use_case import (
    SearchUserFavoritesUseCase,
)
from lifehacking.application.identity.services.user_ownership_service import (
    UserOwnershipService,
)
from lifehacking.application.identity.use_cases.delete_user_use_case import DeleteUserUseCase
from lifehacking.application.identity.use_cases.get_user_by_external_auth_id_use_case import (
    GetUserByExternalAuthIdUseCase,
)
from lifehacking.application.identity.use_cases.get_user_by_id_use_case import GetUserByIdUseCase
from lifehacking.infrastructure.common.security_events import LoggingSecurityEventNotifier
from lifehacking.infrastructure.content.repositories import CategoryRepository, TipRepository
from lifehacking.infrastructure.favorites.repositories import FavoritesRepository
from lifehacking.infrastructure.identity.repositories import UserRepository


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=AsyncSession)

    # Repositories
    user_repository = providers.Factory(UserRepository, db=db)
    tip_repository = providers.Factory(TipRepository, db=db)
    category_repository = providers.Factory(CategoryRepository, db=db)
    favorites_repository = providers.Factory(FavoritesRepository, db=db)

    # Audit trail
    security_event_notifier = providers.Singleton(LoggingSecurityEventNotifier)

    # Identity services
    user_ownership_service = providers.Factory(
        UserOwnershipService,
        user_repository=user_repository,
    )

    # Identity use cases
    get_user_by_external_auth_id_use_case = providers.Factory(
        GetUserByExternalAuthIdUseCase,
        user_repository=user_repository,
    )
    get_user_by_id_use_case = providers.Factory(
        GetUserByIdUseCase,
        user_repository=user_repository,
        ownership_service=user_ownership_service,
    )
    delete_user_use_case = providers.Factory(
        DeleteUserUseCase,
        user_repository=user_repository,
        favorites_repository=favorites_repository,
        ownership_service=user_ownership_service,
    )

    # Favorites use cases
    merge_favorites_use_case = providers.Factory(
        MergeFavoritesUseCase,
        favorites_repository=favorites_repository,
        tip_repository=tip_repository,
        user_repository=user_repository,
    )
    add_favorite_use_case = providers.Factory(
        AddFavoriteUseCase,
        favorites_repository=favorites_repository,
        tip_repository=tip_repository,
        user_repository=user_repository,
        category_repository=category_repository,
    )
    remove_favorite_use_case = providers.Factory(
        RemoveFavoriteUseCase,
        favorites_repository=favorites_repository,
        user_repository=user_repository,
    )
    search_user_favorites_use_case = providers.Factory(
        SearchUserFavoritesUseCase,
        favorites_repository=favorites_repository,
        category_repository=category_repository,
        user_repository=user_repository,
    )


# Initialize container
container = Container()
