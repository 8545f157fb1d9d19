from .favorite_mapper import FavoriteMapper

__all__ = ["FavoriteMapper"]
