"""
Base classes for Entities and their identifiers.

Entities are objects that have a distinct identity that runs through time
and different states. Two entities are equal if they have the same identity,
regardless of their attributes.

Example:
    @dataclass
    class Tip(Entity[TipId]):
        id: TipId
        title: str
        category_id: CategoryId
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar
from uuid import UUID, uuid4

from .exceptions import ValidationError
from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Entity IDs are value objects that wrap a non-nil UUID. They provide type
    safety to prevent mixing up IDs of different entities.

    Example:
        @dataclass(frozen=True)
        class UserId(EntityId):
            pass

        user_id = UserId.generate()
        tip_id = TipId(user_id.value)
        # Same UUID, different types: user_id != tip_id
    """

    value: UUID

    def __post_init__(self) -> None:
        name = self.__class__.__name__
        if not isinstance(self.value, UUID):
            raise ValidationError(f"{name} must wrap a UUID", field="value", value=self.value)
        if self.value.int == 0:
            raise ValidationError(f"{name} cannot be empty", field="value", value=str(self.value))

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Create a fresh random identifier."""
        return cls(uuid4())

    @classmethod
    def from_string(cls, raw: str) -> Self:
        """
        Parse an identifier from its textual form.

        Raises:
            ValidationError: If the text is not a UUID or is the nil UUID
        """
        try:
            value = UUID(raw)
        except (TypeError, ValueError, AttributeError) as e:
            raise ValidationError(
                f"Invalid {cls.__name__} format", field="value", value=raw
            ) from e
        return cls(value)

    def to_primitive(self) -> str:
        """Convert to primitive for serialization."""
        return str(self.value)


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Entities are:
    - Defined by identity (not attributes)
    - Mutable (state can change over time)
    - Have lifecycle (created, modified, deleted)

    Subclasses must have an 'id' attribute of type IdType.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
