"""Use case for resolving the calling user from their identity-provider subject."""

import structlog

from lifehacking.application.common.errors import AppError
from lifehacking.application.common.result import Failure, Result, Success
from lifehacking.application.identity.protocols.user_repository import UserRepositoryProtocol
from lifehacking.domain.identity.entities.user import User

logger = structlog.get_logger(__name__)


class GetUserByExternalAuthIdUseCase:
    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        self.user_repository = user_repository

    async def get_user(self, external_auth_id: str) -> Result[User, AppError]:
        """
        Find the user registered under an external auth identifier.

        Returns:
            Success with the user, or Failure with VALIDATION (blank id),
            NOT_FOUND or INFRASTRUCTURE
        """
        if not external_auth_id or not external_auth_id.strip():
            return Failure(AppError.validation("External auth id is required."))

        try:
            user = await self.user_repository.find_by_external_auth_id(external_auth_id.strip())
        except Exception as e:
            logger.exception("user_lookup_failed", external_auth_id=external_auth_id)
            return Failure(AppError.infrastructure("An error occurred while loading the user.", e))

        if user is None:
            return Failure(
                AppError.not_found_message(
                    f"User with external auth id '{external_auth_id}' was not found."
                )
            )
        return Success(user)
