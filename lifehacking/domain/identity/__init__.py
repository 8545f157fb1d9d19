"""Identity domain layer."""

from lifehacking.domain.identity.entities.user import User, UserRole

__all__ = [
    "User",
    "UserRole",
]
