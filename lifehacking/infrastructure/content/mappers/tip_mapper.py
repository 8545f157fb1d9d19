"""Mapper for Tip ORM ↔ Domain conversion."""

from lifehacking.domain.common.value_objects.ids import CategoryId, TipId
from lifehacking.domain.content.entities.tip import Tip
from lifehacking.infrastructure.common.timestamps import as_utc, as_utc_or_none
from lifehacking.models import Tip as TipORM


class TipMapper:
    """Mapper for Tip ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: TipORM) -> Tip:
        """Convert ORM model to domain entity."""
        return Tip.create_with_id(
            id=TipId(orm_model.id),
            title=orm_model.title,
            description=orm_model.description,
            category_id=CategoryId(orm_model.category_id),
            created_at=as_utc(orm_model.created_at),
            updated_at=as_utc_or_none(orm_model.updated_at),
        )
