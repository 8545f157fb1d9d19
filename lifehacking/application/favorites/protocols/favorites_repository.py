from collections.abc import Collection
from typing import Protocol

from lifehacking.application.favorites.dtos import FavoritesQuery
from lifehacking.domain.common.value_objects.ids import TipId, UserId
from lifehacking.domain.content.entities.tip import Tip
from lifehacking.domain.favorites.entities.favorite import Favorite


class FavoritesRepositoryProtocol(Protocol):
    async def find_by_user_and_tip(self, user_id: UserId, tip_id: TipId) -> Favorite | None: ...

    async def get_existing_favorites(self, user_id: UserId, tip_ids: set[TipId]) -> set[TipId]:
        """Return the subset of ``tip_ids`` the user has already favorited."""
        ...

    async def add(self, favorite: Favorite) -> Favorite:
        """
        Persist one favorite.

        Raises:
            DuplicateFavoriteError: If the (user, tip) pair already exists
        """
        ...

    async def add_batch(self, user_id: UserId, tip_ids: Collection[TipId]) -> list[Favorite]:
        """
        Persist one favorite per tip id as a single write.

        Pairs that already exist are left untouched rather than treated as errors.
        """
        ...

    async def remove(self, user_id: UserId, tip_id: TipId) -> bool: ...

    async def remove_all_by_user(self, user_id: UserId) -> int:
        """Stage removal of every favorite of a user; committed by the user delete."""
        ...

    async def search(
        self, user_id: UserId, query: FavoritesQuery
    ) -> tuple[list[tuple[Favorite, Tip]], int]: ...
