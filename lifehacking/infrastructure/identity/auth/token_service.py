"""Bearer token verification."""

import jwt
from jwt import InvalidTokenError

from lifehacking.application.identity.dtos import CurrentUserContext
from lifehacking.config import get_settings
from lifehacking.domain.identity.entities.user import UserRole


def verify_access_token(token: str) -> CurrentUserContext | None:
    """
    Verify a caller's access token and build the caller context.

    The ``sub`` claim is the identity provider's subject; ``role`` is optional
    and defaults to a regular user.

    Returns:
        Caller context if the token is valid, None otherwise
    """
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.TOKEN_ALGORITHM])
    except InvalidTokenError:
        return None

    subject = payload.get("sub")
    if not isinstance(subject, str) or not subject.strip():
        return None

    role = payload.get("role")
    if not isinstance(role, str) or not role:
        role = UserRole.USER.value

    return CurrentUserContext(external_auth_id=subject, role=role)
