"""
Domain-centric repository for user favorites.

Returns domain entities instead of ORM models.
Uses FavoriteMapper internally for conversions.
"""

import logging
from collections.abc import Collection
from datetime import UTC, datetime

from sqlalchemy import and_, delete, func, insert, or_, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from lifehacking.application.favorites.dtos import FavoriteSortField, FavoritesQuery, SortDirection
from lifehacking.domain.common.exceptions import DuplicateFavoriteError
from lifehacking.domain.common.value_objects.ids import TipId, UserId
from lifehacking.domain.content.entities.tip import Tip
from lifehacking.domain.favorites.entities.favorite import Favorite
from lifehacking.infrastructure.content.mappers.tip_mapper import TipMapper
from lifehacking.infrastructure.favorites.mappers.favorite_mapper import FavoriteMapper
from lifehacking.models import Tip as TipORM
from lifehacking.models import UserFavorite as UserFavoriteORM

logger = logging.getLogger(__name__)

_SORT_COLUMNS = {
    FavoriteSortField.ADDED_AT: UserFavoriteORM.added_at,
    FavoriteSortField.TITLE: TipORM.title,
    FavoriteSortField.CREATED_AT: TipORM.created_at,
}


class FavoritesRepository:
    """Repository for Favorite persistence (domain-centric)."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize repository.

        Args:
            db: SQLAlchemy async database session
        """
        self.db = db
        self.mapper = FavoriteMapper()
        self.tip_mapper = TipMapper()

    async def find_by_user_and_tip(self, user_id: UserId, tip_id: TipId) -> Favorite | None:
        stmt = select(UserFavoriteORM).where(
            UserFavoriteORM.user_id == user_id.value,
            UserFavoriteORM.tip_id == tip_id.value,
        )
        orm_model = (await self.db.execute(stmt)).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    async def get_existing_favorites(self, user_id: UserId, tip_ids: set[TipId]) -> set[TipId]:
        """
        Find which of the given tips the user has already favorited.

        Args:
            user_id: User ID value object
            tip_ids: Candidate tip IDs

        Returns:
            Subset of ``tip_ids`` that already have a favorite row
        """
        if not tip_ids:
            return set()

        stmt = select(UserFavoriteORM.tip_id).where(
            UserFavoriteORM.user_id == user_id.value,
            UserFavoriteORM.tip_id.in_([tip_id.value for tip_id in tip_ids]),
        )
        rows = (await self.db.execute(stmt)).scalars().all()
        return {TipId(value) for value in rows}

    async def add(self, favorite: Favorite) -> Favorite:
        """
        Persist a single favorite.

        Raises:
            DuplicateFavoriteError: If the (user, tip) pair already exists
        """
        orm_model = self.mapper.to_orm(favorite)
        try:
            self.db.add(orm_model)
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            if "unique" in str(e.orig).lower():
                raise DuplicateFavoriteError(str(favorite.user_id), str(favorite.tip_id)) from e
            raise

        logger.info(f"Added favorite tip {favorite.tip_id} for user {favorite.user_id}")
        return favorite

    async def add_batch(self, user_id: UserId, tip_ids: Collection[TipId]) -> list[Favorite]:
        """
        Insert one favorite per tip in a single statement.

        Uses ON CONFLICT DO NOTHING (PostgreSQL and SQLite) so rows written by a
        concurrent merge are skipped instead of failing the batch.

        Args:
            user_id: User ID value object
            tip_ids: Tips to favorite

        Returns:
            Favorites actually inserted by this call
        """
        if not tip_ids:
            return []

        added_at = datetime.now(UTC)
        favorites = [Favorite.reconstitute(user_id, tip_id, added_at) for tip_id in tip_ids]
        values = [self.mapper.to_row(favorite) for favorite in favorites]

        dialect = self.db.get_bind().dialect.name
        if dialect == "postgresql":
            stmt = postgresql.insert(UserFavoriteORM).values(values)
            stmt = stmt.on_conflict_do_nothing(index_elements=["user_id", "tip_id"])
        elif dialect == "sqlite":
            stmt = sqlite.insert(UserFavoriteORM).values(values)
            stmt = stmt.on_conflict_do_nothing(index_elements=["user_id", "tip_id"])
        else:
            stmt = insert(UserFavoriteORM).values(values)
        stmt = stmt.returning(UserFavoriteORM.tip_id)

        try:
            result = await self.db.execute(stmt)
            inserted = {TipId(value) for value in result.scalars().all()}
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        logger.info(f"Batch added {len(inserted)} of {len(values)} favorites for user {user_id}")
        return [favorite for favorite in favorites if favorite.tip_id in inserted]

    async def remove(self, user_id: UserId, tip_id: TipId) -> bool:
        """
        Delete a favorite.

        Returns:
            True if a row was deleted, False if it did not exist
        """
        stmt = delete(UserFavoriteORM).where(
            UserFavoriteORM.user_id == user_id.value,
            UserFavoriteORM.tip_id == tip_id.value,
        )
        try:
            result = await self.db.execute(stmt)
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
        return result.rowcount > 0

    async def remove_all_by_user(self, user_id: UserId) -> int:
        """
        Delete every favorite of a user and return how many were removed.

        Only flushes. The deletion becomes durable with the next commit on the
        session (see ``UserRepository.delete``) and is undone by a rollback.
        """
        stmt = delete(UserFavoriteORM).where(UserFavoriteORM.user_id == user_id.value)
        result = await self.db.execute(stmt)
        await self.db.flush()

        logger.info(f"Removed {result.rowcount} favorites for user {user_id}")
        return result.rowcount

    async def search(
        self, user_id: UserId, query: FavoritesQuery
    ) -> tuple[list[tuple[Favorite, Tip]], int]:
        """
        Get one page of a user's favorites joined with their tips.

        Args:
            user_id: User ID value object
            query: Filter, sort and paging criteria

        Returns:
            Tuple of ((favorite, tip) pairs for the page, total matching count)
        """
        conditions = [UserFavoriteORM.user_id == user_id.value]

        term = query.normalized_search_term
        if term:
            conditions.append(
                or_(
                    TipORM.title.icontains(term, autoescape=True),
                    TipORM.description.icontains(term, autoescape=True),
                )
            )
        if query.category_id is not None:
            conditions.append(TipORM.category_id == query.category_id.value)

        where_clause = and_(*conditions)

        count_stmt = (
            select(func.count(UserFavoriteORM.id))
            .join(TipORM, TipORM.id == UserFavoriteORM.tip_id)
            .where(where_clause)
        )
        total = (await self.db.execute(count_stmt)).scalar() or 0

        sort_column = _SORT_COLUMNS[query.sort_field]
        order = sort_column.asc() if query.sort_direction is SortDirection.ASC else sort_column.desc()

        stmt = (
            select(UserFavoriteORM, TipORM)
            .join(TipORM, TipORM.id == UserFavoriteORM.tip_id)
            .where(where_clause)
            .order_by(order, UserFavoriteORM.id)
            .offset(query.pagination.offset)
            .limit(query.pagination.limit)
        )
        rows = (await self.db.execute(stmt)).all()

        return [
            (self.mapper.to_domain(favorite_orm), self.tip_mapper.to_domain(tip_orm))
            for favorite_orm, tip_orm in rows
        ], total
