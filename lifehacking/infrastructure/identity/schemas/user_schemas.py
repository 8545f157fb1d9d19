"""Pydantic schemas for user endpoints."""

from datetime import datetime
from uuid import UUID

from lifehacking.domain.identity.entities.user import User
from lifehacking.infrastructure.common.schemas import CamelModel


class UserResponse(CamelModel):
    """Schema for a user profile response."""

    id: UUID
    email: str
    name: str | None = None
    role: str
    created_at: datetime | None = None

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id.value,
            email=user.email,
            name=user.name,
            role=user.role.value,
            created_at=user.created_at,
        )
