"""User profile endpoints, restricted to the profile owner or an administrator."""

from fastapi import APIRouter, Depends, Request, Response
from starlette import status

from lifehacking.application.common.security_events import (
    SecurityEventName,
    SecurityEventOutcome,
)
from lifehacking.application.identity.use_cases.delete_user_use_case import DeleteUserUseCase
from lifehacking.application.identity.use_cases.get_user_by_id_use_case import GetUserByIdUseCase
from lifehacking.core import container
from lifehacking.infrastructure.common.di import SecurityEvents, inject_use_case
from lifehacking.infrastructure.common.errors import to_http_exception
from lifehacking.infrastructure.common.security_events import error_properties, request_properties
from lifehacking.infrastructure.identity.dependencies import CurrentUserContextDep
from lifehacking.infrastructure.identity.schemas import UserResponse

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/{user_id}", response_model=UserResponse, status_code=status.HTTP_200_OK)
async def get_user(
    user_id: str,
    current_user: CurrentUserContextDep,
    use_case: GetUserByIdUseCase = Depends(inject_use_case(container.get_user_by_id_use_case)),
) -> UserResponse:
    """
    Get a user profile.

    Callers other than the owner and administrators get 404, as if the user
    did not exist.
    """
    result = await use_case.get_user(user_id, current_user)
    if result.is_failure:
        raise to_http_exception(result.unwrap_error())
    return UserResponse.from_entity(result.unwrap())


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    request: Request,
    user_id: str,
    current_user: CurrentUserContextDep,
    security_events: SecurityEvents,
    use_case: DeleteUserUseCase = Depends(inject_use_case(container.delete_user_use_case)),
) -> Response:
    """
    Delete a user together with all of their favorites.

    Same access rule as reading the profile.
    """
    actor = current_user.external_auth_id
    result = await use_case.delete_user(user_id, current_user)
    if result.is_failure:
        error = result.unwrap_error()
        security_events.notify(
            SecurityEventName.USER_DELETE_FAILED,
            user_id,
            SecurityEventOutcome.FAILURE,
            **request_properties(request),
            actor=actor,
            **error_properties(error),
        )
        raise to_http_exception(error)

    security_events.notify(
        SecurityEventName.USER_DELETED,
        user_id,
        SecurityEventOutcome.SUCCESS,
        **request_properties(request),
        actor=actor,
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
