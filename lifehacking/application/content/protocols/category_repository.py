from typing import Protocol

from lifehacking.domain.common.value_objects.ids import CategoryId
from lifehacking.domain.content.entities.tip import Category


class CategoryRepositoryProtocol(Protocol):
    async def find_by_id(self, category_id: CategoryId) -> Category | None: ...

    async def find_by_ids(self, category_ids: set[CategoryId]) -> dict[CategoryId, Category]: ...
