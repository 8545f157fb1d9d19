"""Use case for reading a user profile, restricted to its owner or an admin."""

import structlog

from lifehacking.application.common.errors import AppError
from lifehacking.application.common.result import Failure, Result, Success
from lifehacking.application.identity.dtos import CurrentUserContext
from lifehacking.application.identity.protocols.user_repository import UserRepositoryProtocol
from lifehacking.application.identity.services.user_ownership_service import (
    UserOwnershipService,
)
from lifehacking.domain.common.exceptions import ValidationError
from lifehacking.domain.common.value_objects.ids import UserId
from lifehacking.domain.identity.entities.user import User

logger = structlog.get_logger(__name__)


class GetUserByIdUseCase:
    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        ownership_service: UserOwnershipService,
    ) -> None:
        self.user_repository = user_repository
        self.ownership_service = ownership_service

    async def get_user(
        self, user_id: str, current_user: CurrentUserContext | None
    ) -> Result[User, AppError]:
        """
        Get a user by ID on behalf of ``current_user``.

        Args:
            user_id: Textual user id from the request
            current_user: Caller context (None for trusted internal calls)

        Returns:
            Success with the user, or Failure with VALIDATION, NOT_FOUND
            (missing or not the caller's) or INFRASTRUCTURE
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
        except Exception as e:
            logger.exception("get_user_failed", user_id=user_id)
            return Failure(AppError.infrastructure("An error occurred while loading the user.", e))

        return Success(user)
