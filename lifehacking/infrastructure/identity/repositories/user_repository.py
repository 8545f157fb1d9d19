"""Repository for User domain entities."""

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from lifehacking.domain.common.value_objects.ids import UserId
from lifehacking.domain.identity.entities.user import User
from lifehacking.infrastructure.identity.mappers.user_mapper import UserMapper
from lifehacking.models import User as UserORM

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for User domain entities."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self.mapper = UserMapper()

    async def find_by_id(self, user_id: UserId) -> User | None:
        """
        Find a user by ID.

        Args:
            user_id: The user ID

        Returns:
            User entity if found, None otherwise
        """
        stmt = select(UserORM).where(UserORM.id == user_id.value)
        orm_model = (await self.db.execute(stmt)).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    async def find_by_external_auth_id(self, external_auth_id: str) -> User | None:
        """
        Find a user by the identity provider's subject identifier.

        Args:
            external_auth_id: The identity provider subject

        Returns:
            User entity if found, None otherwise
        """
        stmt = select(UserORM).where(UserORM.external_auth_id == external_auth_id)
        orm_model = (await self.db.execute(stmt)).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    async def delete(self, user_id: UserId) -> bool:
        """
        Delete a user record.

        Commits the session, so work already flushed in it (such as
        ``FavoritesRepository.remove_all_by_user``) commits with the delete or
        is rolled back with it.

        Returns:
            True if a row was deleted, False if the user did not exist
        """
        stmt = delete(UserORM).where(UserORM.id == user_id.value)
        try:
            result = await self.db.execute(stmt)
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
        deleted = result.rowcount > 0
        if deleted:
            logger.info(f"Deleted user {user_id}")
        return deleted
