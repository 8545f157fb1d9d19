"""Use case for adding a single tip to a user's favorites."""

import structlog

from lifehacking.application.common.errors import AppError
from lifehacking.application.common.result import Failure, Result, Success
from lifehacking.application.content.protocols.category_repository import (
    CategoryRepositoryProtocol,
)
from lifehacking.application.content.protocols.tip_repository import TipRepositoryProtocol
from lifehacking.application.favorites.dtos import UNKNOWN_CATEGORY_NAME, FavoriteDetail
from lifehacking.application.favorites.protocols.favorites_repository import (
    FavoritesRepositoryProtocol,
)
from lifehacking.application.identity.protocols.user_repository import UserRepositoryProtocol
from lifehacking.domain.common.exceptions import DuplicateFavoriteError
from lifehacking.domain.common.value_objects.ids import CategoryId, TipId, UserId
from lifehacking.domain.favorites.entities.favorite import Favorite

logger = structlog.get_logger(__name__)


def _already_favorited(tip_id: TipId) -> AppError:
    return AppError.conflict(f"Tip '{tip_id}' is already in user's favorites.")


class AddFavoriteUseCase:
    def __init__(
        self,
        favorites_repository: FavoritesRepositoryProtocol,
        tip_repository: TipRepositoryProtocol,
        user_repository: UserRepositoryProtocol,
        category_repository: CategoryRepositoryProtocol,
    ) -> None:
        self.favorites_repository = favorites_repository
        self.tip_repository = tip_repository
        self.user_repository = user_repository
        self.category_repository = category_repository

    async def add_favorite(self, user_id: UserId, tip_id: TipId) -> Result[FavoriteDetail, AppError]:
        """
        Add a tip to a user's favorites.

        Args:
            user_id: ID of the user
            tip_id: ID of the tip to favorite

        Returns:
            Success with the favorite and its tip details, or Failure with
            NOT_FOUND (user or tip), CONFLICT (already favorited) or INFRASTRUCTURE
        """
        try:
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                return Failure(AppError.not_found("User", user_id))

            tip = await self.tip_repository.find_by_id(tip_id)
            if tip is None:
                return Failure(AppError.not_found("Tip", tip_id))

            existing = await self.favorites_repository.find_by_user_and_tip(user_id, tip_id)
            if existing is not None:
                return Failure(_already_favorited(tip_id))

            favorite = await self.favorites_repository.add(Favorite.create(user_id, tip_id))
        except DuplicateFavoriteError:
            # Lost a race with a concurrent add of the same pair
            return Failure(_already_favorited(tip_id))
        except Exception as e:
            logger.exception("add_favorite_failed", user_id=str(user_id), tip_id=str(tip_id))
            return Failure(AppError.infrastructure("An error occurred while adding the favorite.", e))

        category_name = await self._get_category_name(tip.category_id)
        logger.info("added_favorite", user_id=str(user_id), tip_id=str(tip_id))
        return Success(FavoriteDetail.from_entities(favorite, tip, category_name))

    async def _get_category_name(self, category_id: CategoryId) -> str:
        try:
            category = await self.category_repository.find_by_id(category_id)
        except Exception:
            logger.warning("category_lookup_failed", category_id=str(category_id), exc_info=True)
            return UNKNOWN_CATEGORY_NAME
        return category.name if category is not None else UNKNOWN_CATEGORY_NAME
