"""Read-only repository for Category domain entities."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from lifehacking.domain.common.value_objects.ids import CategoryId
from lifehacking.domain.content.entities.tip import Category
from lifehacking.infrastructure.content.mappers.category_mapper import CategoryMapper
from lifehacking.models import Category as CategoryORM


class CategoryRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self.mapper = CategoryMapper()

    async def find_by_id(self, category_id: CategoryId) -> Category | None:
        stmt = select(CategoryORM).where(CategoryORM.id == category_id.value)
        orm_model = (await self.db.execute(stmt)).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    async def find_by_ids(self, category_ids: set[CategoryId]) -> dict[CategoryId, Category]:
        if not category_ids:
            return {}

        stmt = select(CategoryORM).where(
            CategoryORM.id.in_([category_id.value for category_id in category_ids])
        )
        orm_models = (await self.db.execute(stmt)).scalars().all()
        categories = [self.mapper.to_domain(orm_model) for orm_model in orm_models]
        return {category.id: category for category in categories}
