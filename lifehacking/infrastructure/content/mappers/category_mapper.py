"""Mapper for Category ORM ↔ Domain conversion."""

from lifehacking.domain.common.value_objects.ids import CategoryId
from lifehacking.domain.content.entities.tip import Category
from lifehacking.models import Category as CategoryORM


class CategoryMapper:
    def to_domain(self, orm_model: CategoryORM) -> Category:
        """Convert ORM model to domain entity."""
        return Category(id=CategoryId(orm_model.id), name=orm_model.name)
