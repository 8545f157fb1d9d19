from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed user identifier."""


@dataclass(frozen=True)
class TipId(EntityId):
    """Strongly-typed tip identifier."""


@dataclass(frozen=True)
class CategoryId(EntityId):
    """Strongly-typed category identifier."""
