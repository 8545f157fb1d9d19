"""Content domain layer (tips and categories)."""

from lifehacking.domain.content.entities import Category, Tip

__all__ = [
    "Category",
    "Tip",
]
