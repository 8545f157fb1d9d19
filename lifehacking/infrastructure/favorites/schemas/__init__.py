from .favorite_schemas import (
    FailedTipResponse,
    FavoriteResponse,
    MergeFavoritesRequest,
    MergeFavoritesResponse,
    PagedFavoritesResponse,
    PaginationMetadata,
    TipDetailResponse,
)

__all__ = [
    "FailedTipResponse",
    "FavoriteResponse",
    "MergeFavoritesRequest",
    "MergeFavoritesResponse",
    "PagedFavoritesResponse",
    "PaginationMetadata",
    "TipDetailResponse",
]
