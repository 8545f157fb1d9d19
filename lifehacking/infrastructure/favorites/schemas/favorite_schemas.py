"""Pydantic schemas for favorites API request/response validation."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from lifehacking.application.common.pagination import PaginatedResult
from lifehacking.application.favorites.dtos import (
    FailedTip,
    FavoriteDetail,
    MergeFavoritesResult,
    TipDetail,
)
from lifehacking.infrastructure.common.schemas import CamelModel


class TipDetailResponse(CamelModel):
    """Tip details embedded in a favorite."""

    id: UUID
    title: str
    description: str
    category_id: UUID
    category_name: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_dto(cls, tip: TipDetail) -> "TipDetailResponse":
        return cls(
            id=tip.id,
            title=tip.title,
            description=tip.description,
            category_id=tip.category_id,
            category_name=tip.category_name,
            created_at=tip.created_at,
            updated_at=tip.updated_at,
        )


class FavoriteResponse(CamelModel):
    """Schema for a single favorite."""

    tip_id: UUID
    added_at: datetime
    tip_details: TipDetailResponse

    @classmethod
    def from_dto(cls, favorite: FavoriteDetail) -> "FavoriteResponse":
        return cls(
            tip_id=favorite.tip_id,
            added_at=favorite.added_at,
            tip_details=TipDetailResponse.from_dto(favorite.tip),
        )


class PaginationMetadata(CamelModel):
    total_items: int
    page_number: int
    page_size: int
    total_pages: int


class PagedFavoritesResponse(CamelModel):
    """Schema for one page of favorites."""

    favorites: list[FavoriteResponse]
    metadata: PaginationMetadata

    @classmethod
    def from_page(cls, page: PaginatedResult[FavoriteDetail]) -> "PagedFavoritesResponse":
        return cls(
            favorites=[FavoriteResponse.from_dto(item) for item in page.items],
            metadata=PaginationMetadata(
                total_items=page.total,
                page_number=page.page,
                page_size=page.page_size,
                total_pages=page.total_pages,
            ),
        )


class MergeFavoritesRequest(CamelModel):
    """Schema for merging a client-side favorites list."""

    tip_ids: list[UUID] = Field(..., description="Tip IDs stored on the client")


class FailedTipResponse(CamelModel):
    tip_id: UUID
    error_message: str

    @classmethod
    def from_dto(cls, failed: FailedTip) -> "FailedTipResponse":
        return cls(tip_id=failed.tip_id, error_message=failed.error_message)


class MergeFavoritesResponse(CamelModel):
    """Schema for a merge summary."""

    total_received: int
    added: int
    skipped: int
    failed: list[FailedTipResponse]

    @classmethod
    def from_dto(cls, result: MergeFavoritesResult) -> "MergeFavoritesResponse":
        return cls(
            total_received=result.total_received,
            added=result.added,
            skipped=result.skipped,
            failed=[FailedTipResponse.from_dto(item) for item in result.failed],
        )
