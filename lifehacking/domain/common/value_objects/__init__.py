"""Common value objects shared across all domain modules."""

from .ids import CategoryId, TipId, UserId

__all__ = [
    "CategoryId",
    "TipId",
    "UserId",
]
