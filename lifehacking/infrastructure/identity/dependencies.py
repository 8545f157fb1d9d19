"""FastAPI dependencies for caller identity."""

from typing import Annotated

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from starlette import status

from lifehacking.application.identity.dtos import CurrentUserContext
from lifehacking.application.identity.use_cases.get_user_by_external_auth_id_use_case import (
    GetUserByExternalAuthIdUseCase,
)
from lifehacking.core import container
from lifehacking.domain.identity.entities.user import User
from lifehacking.infrastructure.common.di import inject_use_case
from lifehacking.infrastructure.common.errors import to_http_exception
from lifehacking.infrastructure.identity.auth.token_service import verify_access_token

bearer_scheme = HTTPBearer(auto_error=False)

CredentialsException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)


async def get_current_user_context(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> CurrentUserContext:
    """
    Build the caller context from the bearer token.

    Raises:
        HTTPException: 401 if the token is missing or invalid
    """
    if credentials is None:
        raise CredentialsException

    context = verify_access_token(credentials.credentials)
    if context is None:
        raise CredentialsException
    return context


async def get_current_user(
    context: Annotated[CurrentUserContext, Depends(get_current_user_context)],
    use_case: GetUserByExternalAuthIdUseCase = Depends(
        inject_use_case(container.get_user_by_external_auth_id_use_case)
    ),
) -> User:
    """
    Resolve the caller's own user record.

    Raises:
        HTTPException: 404 if the authenticated caller has no user record
    """
    result = await use_case.get_user(context.external_auth_id)
    if result.is_failure:
        raise to_http_exception(result.unwrap_error())
    return result.unwrap()


CurrentUser = Annotated[User, Depends(get_current_user)]
CurrentUserContextDep = Annotated[CurrentUserContext, Depends(get_current_user_context)]
