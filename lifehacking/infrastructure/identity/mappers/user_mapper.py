"""Mapper for User ORM ↔ Domain conversion."""

from lifehacking.domain.common.value_objects.ids import UserId
from lifehacking.domain.identity.entities.user import User, UserRole
from lifehacking.infrastructure.common.timestamps import as_utc
from lifehacking.models import User as UserORM


class UserMapper:
    """Mapper for User ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: UserORM) -> User:
        """Convert ORM model to domain entity."""
        role = UserRole.ADMIN if UserRole.is_admin(orm_model.role) else UserRole.USER
        return User.create_with_id(
            id=UserId(orm_model.id),
            external_auth_id=orm_model.external_auth_id,
            email=orm_model.email,
            name=orm_model.name,
            role=role,
            created_at=as_utc(orm_model.created_at),
        )

    def to_orm(self, domain_entity: User, orm_model: UserORM | None = None) -> UserORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing; the external auth id never changes
            orm_model.email = domain_entity.email
            orm_model.name = domain_entity.name
            orm_model.role = domain_entity.role.value
            return orm_model

        return UserORM(
            id=domain_entity.id.value,
            external_auth_id=domain_entity.external_auth_id,
            email=domain_entity.email,
            name=domain_entity.name,
            role=domain_entity.role.value,
            created_at=domain_entity.created_at,
        )
