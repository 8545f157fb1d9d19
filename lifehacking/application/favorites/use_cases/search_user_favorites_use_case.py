"""Use case for listing a user's favorites with filtering, sorting and paging."""

import structlog

from lifehacking.application.common.errors import AppError
from lifehacking.application.common.pagination import PaginatedResult
from lifehacking.application.common.result import Failure, Result, Success
from lifehacking.application.content.protocols.category_repository import (
    CategoryRepositoryProtocol,
)
from lifehacking.application.favorites.dtos import (
    UNKNOWN_CATEGORY_NAME,
    FavoriteDetail,
    FavoritesQuery,
)
from lifehacking.application.favorites.protocols.favorites_repository import (
    FavoritesRepositoryProtocol,
)
from lifehacking.application.identity.protocols.user_repository import UserRepositoryProtocol
from lifehacking.domain.common.value_objects.ids import UserId

logger = structlog.get_logger(__name__)


class SearchUserFavoritesUseCase:
    def __init__(
        self,
        favorites_repository: FavoritesRepositoryProtocol,
        category_repository: CategoryRepositoryProtocol,
        user_repository: UserRepositoryProtocol,
    ) -> None:
        self.favorites_repository = favorites_repository
        self.category_repository = category_repository
        self.user_repository = user_repository

    async def search(
        self, user_id: UserId, query: FavoritesQuery
    ) -> Result[PaginatedResult[FavoriteDetail], AppError]:
        """
        Get one page of a user's favorites with full tip details.

        Category names are resolved in a single batch; tips whose category is
        gone are labelled "Unknown Category".
        """
        try:
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                return Failure(AppError.not_found("User", user_id))

            rows, total = await self.favorites_repository.search(user_id, query)

            category_ids = {tip.category_id for _, tip in rows}
            categories = (
                await self.category_repository.find_by_ids(category_ids) if category_ids else {}
            )
        except Exception as e:
            logger.exception("search_favorites_failed", user_id=str(user_id))
            return Failure(
                AppError.infrastructure("An error occurred while searching favorites.", e)
            )

        items = []
        for favorite, tip in rows:
            category = categories.get(tip.category_id)
            category_name = category.name if category is not None else UNKNOWN_CATEGORY_NAME
            items.append(FavoriteDetail.from_entities(favorite, tip, category_name))

        return Success(PaginatedResult(items=items, total=total, pagination=query.pagination))
