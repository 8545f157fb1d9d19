from .favorites_repository import FavoritesRepositoryProtocol

__all__ = [
    "FavoritesRepositoryProtocol",
]
