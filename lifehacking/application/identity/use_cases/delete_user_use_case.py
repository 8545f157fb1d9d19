"""Use case for deleting a user account together with its favorites."""

import structlog

from lifehacking.application.common.errors import AppError
from lifehacking.application.common.result import Failure, Result, Success
from lifehacking.application.favorites.protocols.favorites_repository import (
    FavoritesRepositoryProtocol,
)
from lifehacking.application.identity.dtos import CurrentUserContext
from lifehacking.application.identity.protocols.user_repository import UserRepositoryProtocol
from lifehacking.application.identity.services.user_ownership_service import (
    UserOwnershipService,
)
from lifehacking.domain.common.exceptions import ValidationError
from lifehacking.domain.common.value_objects.ids import UserId

logger = structlog.get_logger(__name__)


class DeleteUserUseCase:
    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        favorites_repository: FavoritesRepositoryProtocol,
        ownership_service: UserOwnershipService,
    ) -> None:
        self.user_repository = user_repository
        self.favorites_repository = favorites_repository
        self.ownership_service = ownership_service

    async def delete_user(
        self, user_id: str, current_user: CurrentUserContext | None
    ) -> Result[bool, AppError]:
        """
        Delete a user and every favorite they own.

        Only the account owner or an administrator may delete; anyone else
        gets the same NOT_FOUND a missing user would produce.

        Args:
            user_id: Textual user id from the request
            current_user: Caller context (None for trusted internal calls)

        Returns:
            Success(True), or Failure with VALIDATION, NOT_FOUND or INFRASTRUCTURE
        """
        try:
            user_id_vo = UserId.from_string(user_id)
        except ValidationError as e:
            return Failure(AppError.validation(e.message))

        try:
            user = await self.user_repository.find_by_id(user_id_vo)
            if user is None:
                return Failure(AppError.not_found("User", user_id))

            ownership_error = await self.ownership_service.ensure_owner_or_admin(
                user.id, current_user, user_id
            )
            if ownership_error is not None:
                return Failure(ownership_error)

            # Favorites are only flushed here; the user delete commits both together
            removed_favorites = await self.favorites_repository.remove_all_by_user(user.id)
            await self.user_repository.delete(user.id)
        except Exception as e:
            logger.exception("delete_user_failed", user_id=user_id)
            return Failure(AppError.infrastructure("An error occurred while deleting the user.", e))

        logger.info("deleted_user", user_id=user_id, removed_favorites=removed_favorites)
        return Success(True)
