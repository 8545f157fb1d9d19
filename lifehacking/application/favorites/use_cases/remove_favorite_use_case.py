"""Use case for removing a tip from a user's favorites."""

import structlog

from lifehacking.application.common.errors import AppError
from lifehacking.application.common.result import Failure, Result, Success
from lifehacking.application.favorites.protocols.favorites_repository import (
    FavoritesRepositoryProtocol,
)
from lifehacking.application.identity.protocols.user_repository import UserRepositoryProtocol
from lifehacking.domain.common.value_objects.ids import TipId, UserId

logger = structlog.get_logger(__name__)


def _favorite_not_found(tip_id: TipId) -> AppError:
    return AppError.not_found_message(f"Tip '{tip_id}' not found in user's favorites.")


class RemoveFavoriteUseCase:
    def __init__(
        self,
        favorites_repository: FavoritesRepositoryProtocol,
        user_repository: UserRepositoryProtocol,
    ) -> None:
        self.favorites_repository = favorites_repository
        self.user_repository = user_repository

    async def remove_favorite(self, user_id: UserId, tip_id: TipId) -> Result[bool, AppError]:
        """
        Remove a tip from a user's favorites.

        The caller is already authorized for ``user_id``, so a missing favorite
        is a genuine NOT_FOUND. That includes a favorite deleted by a
        concurrent request between the existence check and the delete.

        Returns:
            Success(True), or Failure with NOT_FOUND (user or favorite) or
            INFRASTRUCTURE
        """
        try:
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                return Failure(AppError.not_found("User", user_id))

            existing = await self.favorites_repository.find_by_user_and_tip(user_id, tip_id)
            if existing is None:
                return Failure(_favorite_not_found(tip_id))

            removed = await self.favorites_repository.remove(user_id, tip_id)
            if not removed:
                return Failure(_favorite_not_found(tip_id))
        except Exception as e:
            logger.exception("remove_favorite_failed", user_id=str(user_id), tip_id=str(tip_id))
            return Failure(
                AppError.infrastructure("An error occurred while removing the favorite.", e)
            )

        logger.info("removed_favorite", user_id=str(user_id), tip_id=str(tip_id))
        return Success(True)
