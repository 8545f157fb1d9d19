from .add_favorite_use_case import AddFavoriteUseCase
from .merge_favorites_use_case import MergeFavoritesUseCase
from .remove_favorite_use_case import RemoveFavoriteUseCase
from .search_user_favorites_use_case import SearchUserFavoritesUseCase

__all__ = [
    "AddFavoriteUseCase",
    "MergeFavoritesUseCase",
    "RemoveFavoriteUseCase",
    "SearchUserFavoritesUseCase",
]
