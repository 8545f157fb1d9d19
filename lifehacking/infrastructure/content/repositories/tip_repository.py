"""Read-only repository for Tip domain entities."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from lifehacking.domain.common.value_objects.ids import TipId
from lifehacking.domain.content.entities.tip import Tip
from lifehacking.infrastructure.content.mappers.tip_mapper import TipMapper
from lifehacking.models import Tip as TipORM


class TipRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self.mapper = TipMapper()

    async def find_by_id(self, tip_id: TipId) -> Tip | None:
        stmt = select(TipORM).where(TipORM.id == tip_id.value)
        orm_model = (await self.db.execute(stmt)).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    async def find_by_ids(self, tip_ids: set[TipId]) -> dict[TipId, Tip]:
        """
        Batch lookup of tips in a single query.

        Args:
            tip_ids: IDs to resolve

        Returns:
            Mapping of each found ID to its tip; IDs with no tip are absent
        """
        if not tip_ids:
            return {}

        stmt = select(TipORM).where(TipORM.id.in_([tip_id.value for tip_id in tip_ids]))
        orm_models = (await self.db.execute(stmt)).scalars().all()
        tips = [self.mapper.to_domain(orm_model) for orm_model in orm_models]
        return {tip.id: tip for tip in tips}
