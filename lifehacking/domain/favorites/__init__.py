"""Favorites domain layer."""

from lifehacking.domain.favorites.entities import Favorite

__all__ = [
    "Favorite",
]
