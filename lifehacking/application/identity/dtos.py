"""DTOs for identity use cases."""

from dataclasses import dataclass

from lifehacking.domain.identity.entities.user import UserRole


@dataclass(frozen=True)
class CurrentUserContext:
    """
    Who is calling, as established by the boundary after token verification.

    Attributes:
        external_auth_id: Identity-provider subject of the caller
        role: Caller's role claim, compared case-insensitively
    """

    external_auth_id: str
    role: str = UserRole.USER.value

    @property
    def is_admin(self) -> bool:
        return UserRole.is_admin(self.role)
