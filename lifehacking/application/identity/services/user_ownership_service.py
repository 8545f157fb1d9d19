"""Owner-or-admin access checks for user-scoped resources."""

import structlog

from lifehacking.application.common.errors import AppError
from lifehacking.application.identity.dtos import CurrentUserContext
from lifehacking.application.identity.protocols.user_repository import UserRepositoryProtocol
from lifehacking.domain.common.value_objects.ids import UserId

logger = structlog.get_logger(__name__)


class UserOwnershipService:
    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        self.user_repository = user_repository

    async def ensure_owner_or_admin(
        self,
        target_owner_id: UserId,
        current_user: CurrentUserContext | None,
        requested_resource_id: object,
    ) -> AppError | None:
        """
        Check that the caller owns the target resource or is an administrator.

        A denial is reported exactly like a missing user, so a non-owner cannot
        learn whether the requested resource exists.

        Args:
            target_owner_id: ID of the user who owns the resource
            current_user: Caller context; None means a trusted internal call
            requested_resource_id: ID the caller asked for, used in the error message

        Returns:
            None when access is granted, a NOT_FOUND AppError otherwise
        """
        if current_user is None or current_user.is_admin:
            return None

        caller = await self.user_repository.find_by_external_auth_id(
            current_user.external_auth_id
        )
        if caller is None or caller.id != target_owner_id:
            logger.warning(
                "ownership_check_denied",
                caller_external_auth_id=current_user.external_auth_id,
                requested_resource_id=str(requested_resource_id),
            )
            return AppError.not_found("User", requested_resource_id)

        return None
