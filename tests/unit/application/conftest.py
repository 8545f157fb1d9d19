"""In-memory repositories and fixtures for use case tests."""

import asyncio
from collections.abc import Callable, Collection

import pytest

from lifehacking.application.favorites.dtos import FavoritesQuery, FavoriteSortField, SortDirection
from lifehacking.domain.common.exceptions import DuplicateFavoriteError
from lifehacking.domain.common.value_objects.ids import CategoryId, TipId, UserId
from lifehacking.domain.content.entities.tip import Category, Tip
from lifehacking.domain.favorites.entities.favorite import Favorite
from lifehacking.domain.identity.entities.user import User, UserRole


class InMemoryTransaction:
    """Session shared by the in-memory repositories: staged work plus undo steps."""

    def __init__(self) -> None:
        self.undo: list[Callable[[], None]] = []

    def stage(self, undo: Callable[[], None]) -> None:
        self.undo.append(undo)

    def commit(self) -> None:
        self.undo.clear()

    def rollback(self) -> None:
        while self.undo:
            self.undo.pop()()


class InMemoryUserRepository:
    """
    User store.

    ``delete`` commits the shared transaction, or rolls it back and raises
    ``delete_error`` when that is set.
    """

    def __init__(
        self, users: list[User] | None = None, transaction: InMemoryTransaction | None = None
    ) -> None:
        self.users = {user.id: user for user in users or []}
        self.transaction = transaction or InMemoryTransaction()
        self.delete_error: Exception | None = None
        self.calls: list[str] = []

    async def find_by_id(self, user_id: UserId) -> User | None:
        self.calls.append("find_by_id")
        return self.users.get(user_id)

    async def find_by_external_auth_id(self, external_auth_id: str) -> User | None:
        self.calls.append("find_by_external_auth_id")
        return next(
            (user for user in self.users.values() if user.external_auth_id == external_auth_id),
            None,
        )

    async def delete(self, user_id: UserId) -> bool:
        self.calls.append("delete")
        if self.delete_error is not None:
            self.transaction.rollback()
            raise self.delete_error
        deleted = self.users.pop(user_id, None) is not None
        self.transaction.commit()
        return deleted


class InMemoryTipRepository:
    def __init__(self, tips: list[Tip] | None = None) -> None:
        self.tips = {tip.id: tip for tip in tips or []}
        self.calls: list[str] = []

    async def find_by_id(self, tip_id: TipId) -> Tip | None:
        self.calls.append("find_by_id")
        return self.tips.get(tip_id)

    async def find_by_ids(self, tip_ids: set[TipId]) -> dict[TipId, Tip]:
        self.calls.append("find_by_ids")
        return {tip_id: self.tips[tip_id] for tip_id in tip_ids if tip_id in self.tips}


class InMemoryCategoryRepository:
    def __init__(self, categories: list[Category] | None = None, error: Exception | None = None):
        self.categories = {category.id: category for category in categories or []}
        self.error = error

    async def find_by_id(self, category_id: CategoryId) -> Category | None:
        if self.error is not None:
            raise self.error
        return self.categories.get(category_id)

    async def find_by_ids(self, category_ids: set[CategoryId]) -> dict[CategoryId, Category]:
        if self.error is not None:
            raise self.error
        return {cid: self.categories[cid] for cid in category_ids if cid in self.categories}


class InMemoryFavoritesRepository:
    """
    Favorites store keyed by (user, tip).

    ``add_batch_error`` makes the batch write fail; ``add_batch_gate`` makes it
    wait on an event so tests can cancel the caller mid-write.
    ``remove_all_by_user`` is staged on the shared transaction instead of
    being committed on its own.
    """

    def __init__(
        self,
        tips: InMemoryTipRepository | None = None,
        transaction: InMemoryTransaction | None = None,
    ) -> None:
        self.favorites: dict[tuple[UserId, TipId], Favorite] = {}
        self.tips = tips
        self.transaction = transaction or InMemoryTransaction()
        self.calls: list[str] = []
        self.add_batch_error: Exception | None = None
        self.add_batch_gate: asyncio.Event | None = None
        self.add_batch_started = asyncio.Event()
        self.race_on_add = False
        self.race_on_remove = False

    def seed(self, user_id: UserId, *tip_ids: TipId) -> None:
        for tip_id in tip_ids:
            self.favorites[(user_id, tip_id)] = Favorite.create(user_id, tip_id)

    def tip_ids_for(self, user_id: UserId) -> set[TipId]:
        return {tip_id for (owner, tip_id) in self.favorites if owner == user_id}

    async def find_by_user_and_tip(self, user_id: UserId, tip_id: TipId) -> Favorite | None:
        self.calls.append("find_by_user_and_tip")
        return self.favorites.get((user_id, tip_id))

    async def get_existing_favorites(self, user_id: UserId, tip_ids: set[TipId]) -> set[TipId]:
        self.calls.append("get_existing_favorites")
        return {tip_id for tip_id in tip_ids if (user_id, tip_id) in self.favorites}

    async def add(self, favorite: Favorite) -> Favorite:
        self.calls.append("add")
        if self.race_on_add or favorite.key in self.favorites:
            raise DuplicateFavoriteError(favorite.user_id, favorite.tip_id)
        self.favorites[favorite.key] = favorite
        return favorite

    async def add_batch(self, user_id: UserId, tip_ids: Collection[TipId]) -> list[Favorite]:
        self.calls.append("add_batch")
        self.add_batch_started.set()
        if self.add_batch_gate is not None:
            await self.add_batch_gate.wait()
        if self.add_batch_error is not None:
            raise self.add_batch_error
        added = []
        for tip_id in tip_ids:
            if (user_id, tip_id) not in self.favorites:
                favorite = Favorite.create(user_id, tip_id)
                self.favorites[favorite.key] = favorite
                added.append(favorite)
        return added

    async def remove(self, user_id: UserId, tip_id: TipId) -> bool:
        self.calls.append("remove")
        if self.race_on_remove:
            # Another request deleted the row after the existence check
            self.favorites.pop((user_id, tip_id), None)
        return self.favorites.pop((user_id, tip_id), None) is not None

    async def remove_all_by_user(self, user_id: UserId) -> int:
        self.calls.append("remove_all_by_user")
        removed = {key: fav for key, fav in self.favorites.items() if key[0] == user_id}
        for key in removed:
            del self.favorites[key]
        self.transaction.stage(lambda: self.favorites.update(removed))
        return len(removed)

    async def search(
        self, user_id: UserId, query: FavoritesQuery
    ) -> tuple[list[tuple[Favorite, Tip]], int]:
        self.calls.append("search")
        assert self.tips is not None
        rows = [
            (favorite, self.tips.tips[favorite.tip_id])
            for (owner, _), favorite in self.favorites.items()
            if owner == user_id
        ]
        if query.category_id is not None:
            rows = [row for row in rows if row[1].category_id == query.category_id]

        sort_keys = {
            FavoriteSortField.ADDED_AT: lambda row: row[0].added_at,
            FavoriteSortField.TITLE: lambda row: row[1].title,
            FavoriteSortField.CREATED_AT: lambda row: row[1].created_at,
        }
        rows.sort(
            key=sort_keys[query.sort_field],
            reverse=query.sort_direction is SortDirection.DESC,
        )
        page = rows[query.pagination.offset : query.pagination.offset + query.pagination.limit]
        return page, len(rows)


@pytest.fixture
def user() -> User:
    return User.create("auth0|alice", "alice@example.com", name="Alice")


@pytest.fixture
def other_user() -> User:
    return User.create("auth0|bob", "bob@example.com", name="Bob")


@pytest.fixture
def admin() -> User:
    return User.create("auth0|admin", "admin@example.com", role=UserRole.ADMIN)


@pytest.fixture
def category() -> Category:
    return Category.create("Kitchen")


@pytest.fixture
def tips(category: Category) -> list[Tip]:
    return [
        Tip.create("Peel garlic fast", "Shake the cloves in a closed jar.", category.id),
        Tip.create("Ripen avocados", "Store them in a paper bag.", category.id),
        Tip.create("Keep herbs fresh", "Wrap them in a damp towel.", category.id),
    ]


@pytest.fixture
def transaction() -> InMemoryTransaction:
    return InMemoryTransaction()


@pytest.fixture
def user_repository(
    user: User, other_user: User, admin: User, transaction: InMemoryTransaction
) -> InMemoryUserRepository:
    return InMemoryUserRepository([user, other_user, admin], transaction)


@pytest.fixture
def tip_repository(tips: list[Tip]) -> InMemoryTipRepository:
    return InMemoryTipRepository(tips)


@pytest.fixture
def category_repository(category: Category) -> InMemoryCategoryRepository:
    return InMemoryCategoryRepository([category])


@pytest.fixture
def favorites_repository(
    tip_repository: InMemoryTipRepository, transaction: InMemoryTransaction
) -> InMemoryFavoritesRepository:
    return InMemoryFavoritesRepository(tip_repository, transaction)


@pytest.fixture
def failing_category_repository() -> InMemoryCategoryRepository:
    return InMemoryCategoryRepository(error=ConnectionError("category store unavailable"))


@pytest.fixture
def empty_category_repository() -> InMemoryCategoryRepository:
    return InMemoryCategoryRepository()
