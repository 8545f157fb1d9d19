"""Tip and Category entities consumed by the favorites subsystem."""

from dataclasses import dataclass
from datetime import UTC, datetime

from lifehacking.domain.common.entity import Entity
from lifehacking.domain.common.exceptions import ValidationError
from lifehacking.domain.common.value_objects.ids import CategoryId, TipId

MAX_TITLE_LENGTH = 200


@dataclass(eq=False)
class Tip(Entity[TipId]):
    """
    A content record a user can favorite.

    Business Rules:
    - Title must be non-empty and at most MAX_TITLE_LENGTH chars
    - Every tip belongs to exactly one category
    """

    id: TipId
    title: str
    description: str
    category_id: CategoryId
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.title or not self.title.strip():
            raise ValidationError("Tip title cannot be empty", field="title", value=self.title)
        if len(self.title) > MAX_TITLE_LENGTH:
            raise ValidationError(
                f"Tip title cannot exceed {MAX_TITLE_LENGTH} characters", field="title"
            )

    @classmethod
    def create(cls, title: str, description: str, category_id: CategoryId) -> "Tip":
        """Create a new tip."""
        return cls(
            id=TipId.generate(),
            title=title.strip(),
            description=description.strip(),
            category_id=category_id,
            created_at=datetime.now(UTC),
        )

    @classmethod
    def create_with_id(
        cls,
        id: TipId,
        title: str,
        description: str,
        category_id: CategoryId,
        created_at: datetime,
        updated_at: datetime | None,
    ) -> "Tip":
        """Reconstitute a tip from persistence."""
        return cls(
            id=id,
            title=title,
            description=description,
            category_id=category_id,
            created_at=created_at,
            updated_at=updated_at,
        )


@dataclass(eq=False)
class Category(Entity[CategoryId]):
    """Grouping of tips. Only its name is used here, for response enrichment."""

    id: CategoryId
    name: str

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Category name cannot be empty", field="name", value=self.name)

    @classmethod
    def create(cls, name: str) -> "Category":
        return cls(id=CategoryId.generate(), name=name.strip())
