"""DTOs for favorites use cases."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import StrEnum
from uuid import UUID

from lifehacking.application.common.pagination import Pagination
from lifehacking.domain.common.value_objects.ids import CategoryId
from lifehacking.domain.content.entities.tip import Tip
from lifehacking.domain.favorites.entities.favorite import Favorite

TIP_NOT_FOUND_MESSAGE = "Tip not found"
UNKNOWN_CATEGORY_NAME = "Unknown Category"


@dataclass(frozen=True)
class FailedTip:
    """A tip id that could not be merged, with the reason."""

    tip_id: UUID
    error_message: str


@dataclass(frozen=True)
class MergeFavoritesResult:
    """
    Summary of a favorites merge.

    ``total_received`` counts the raw input including client-side duplicates;
    ``added``, ``skipped`` and ``failed`` describe unique tip ids.
    """

    total_received: int
    added: int
    skipped: int
    failed: list[FailedTip] = field(default_factory=list)

    def with_failures(self, extra: list[FailedTip]) -> "MergeFavoritesResult":
        """Return a copy with ``extra`` appended to the failed list."""
        if not extra:
            return self
        return replace(self, failed=[*self.failed, *extra])


@dataclass(frozen=True)
class TipDetail:
    """Tip data enriched with its category name."""

    id: UUID
    title: str
    description: str
    category_id: UUID
    category_name: str
    created_at: datetime | None
    updated_at: datetime | None

    @classmethod
    def from_entity(cls, tip: Tip, category_name: str) -> "TipDetail":
        return cls(
            id=tip.id.value,
            title=tip.title,
            description=tip.description,
            category_id=tip.category_id.value,
            category_name=category_name,
            created_at=tip.created_at,
            updated_at=tip.updated_at,
        )


@dataclass(frozen=True)
class FavoriteDetail:
    """A favorite together with the full details of the favorited tip."""

    tip_id: UUID
    added_at: datetime
    tip: TipDetail

    @classmethod
    def from_entities(cls, favorite: Favorite, tip: Tip, category_name: str) -> "FavoriteDetail":
        return cls(
            tip_id=favorite.tip_id.value,
            added_at=favorite.added_at,
            tip=TipDetail.from_entity(tip, category_name),
        )


class FavoriteSortField(StrEnum):
    ADDED_AT = "added_at"
    TITLE = "title"
    CREATED_AT = "created_at"


class SortDirection(StrEnum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class FavoritesQuery:
    """Filter, sort and paging criteria for listing a user's favorites."""

    search_term: str | None = None
    category_id: CategoryId | None = None
    sort_field: FavoriteSortField = FavoriteSortField.ADDED_AT
    sort_direction: SortDirection = SortDirection.DESC
    pagination: Pagination = field(default_factory=Pagination)

    @property
    def normalized_search_term(self) -> str | None:
        if self.search_term is None:
            return None
        term = self.search_term.strip()
        return term or None
