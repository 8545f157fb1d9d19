"""User entity for identity management."""

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum

from lifehacking.domain.common.entity import Entity
from lifehacking.domain.common.exceptions import ValidationError
from lifehacking.domain.common.value_objects.ids import UserId

# Domain constraints
MAX_EMAIL_LENGTH = 256
MAX_EXTERNAL_AUTH_ID_LENGTH = 128


class UserRole(StrEnum):
    """Well-known user roles."""

    USER = "User"
    ADMIN = "Admin"

    @classmethod
    def is_admin(cls, role: str | None) -> bool:
        """Case-insensitive check for the administrator role."""
        return role is not None and role.casefold() == cls.ADMIN.value.casefold()


@dataclass(eq=False)
class User(Entity[UserId]):
    """
    User entity representing an account known to the identity provider.

    Business Rules:
    - External auth id (identity-provider subject) must be non-empty
    - External auth id is unique (enforced at repository level)
    - Email must be non-empty and at most MAX_EMAIL_LENGTH chars
    """

    id: UserId
    external_auth_id: str
    email: str
    name: str | None = None
    role: UserRole = UserRole.USER
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.external_auth_id or not self.external_auth_id.strip():
            raise ValidationError(
                "External auth id cannot be empty",
                field="external_auth_id",
                value=self.external_auth_id,
            )
        if len(self.external_auth_id) > MAX_EXTERNAL_AUTH_ID_LENGTH:
            raise ValidationError(
                f"External auth id cannot exceed {MAX_EXTERNAL_AUTH_ID_LENGTH} characters",
                field="external_auth_id",
            )
        if not self.email:
            raise ValidationError("Email cannot be empty", field="email", value=self.email)
        if len(self.email) > MAX_EMAIL_LENGTH:
            raise ValidationError(
                f"Email cannot exceed {MAX_EMAIL_LENGTH} characters", field="email"
            )

    @property
    def is_admin(self) -> bool:
        return self.role is UserRole.ADMIN

    @classmethod
    def create(
        cls,
        external_auth_id: str,
        email: str,
        name: str | None = None,
        role: UserRole = UserRole.USER,
    ) -> "User":
        """
        Create a new user.

        Raises:
            ValidationError: If external auth id or email is invalid
        """
        return cls(
            id=UserId.generate(),
            external_auth_id=external_auth_id.strip(),
            email=email,
            name=name,
            role=role,
            created_at=datetime.now(UTC),
        )

    @classmethod
    def create_with_id(
        cls,
        id: UserId,
        external_auth_id: str,
        email: str,
        name: str | None,
        role: UserRole,
        created_at: datetime,
    ) -> "User":
        """Reconstitute a user from persistence."""
        return cls(
            id=id,
            external_auth_id=external_auth_id,
            email=email,
            name=name,
            role=role,
            created_at=created_at,
        )
