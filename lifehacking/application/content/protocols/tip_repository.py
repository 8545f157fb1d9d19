from typing import Protocol

from lifehacking.domain.common.value_objects.ids import TipId
from lifehacking.domain.content.entities.tip import Tip


class TipRepositoryProtocol(Protocol):
    async def find_by_id(self, tip_id: TipId) -> Tip | None: ...

    async def find_by_ids(self, tip_ids: set[TipId]) -> dict[TipId, Tip]:
        """Return the subset of ``tip_ids`` that exist; the keys define existence."""
        ...
