"""Favorite entity linking a user to a tip."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from lifehacking.domain.common.value_objects.ids import TipId, UserId


@dataclass(frozen=True, eq=False)
class Favorite:
    """
    A user's favorited tip.

    Business Rules:
    - Identity is the (user_id, tip_id) pair; at most one favorite per pair
      (uniqueness enforced at repository level)
    - added_at is set once at creation and never changes
    - Favorites are never edited, only created and hard-deleted
    """

    user_id: UserId
    tip_id: TipId
    added_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def key(self) -> tuple[UserId, TipId]:
        """Composite identity of this favorite."""
        return (self.user_id, self.tip_id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Favorite):
            return False
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    @classmethod
    def create(cls, user_id: UserId, tip_id: TipId) -> "Favorite":
        """
        Create a new favorite stamped with the current UTC time.

        Args:
            user_id: ID of the user adding the favorite
            tip_id: ID of the tip being favorited

        Returns:
            New Favorite instance
        """
        return cls(user_id=user_id, tip_id=tip_id, added_at=datetime.now(UTC))

    @classmethod
    def reconstitute(cls, user_id: UserId, tip_id: TipId, added_at: datetime) -> "Favorite":
        """
        Reconstitute a favorite from persistence.

        Args:
            user_id: ID of the owning user
            tip_id: ID of the favorited tip
            added_at: Timestamp when the favorite was first stored

        Returns:
            Reconstituted Favorite instance
        """
        return cls(user_id=user_id, tip_id=tip_id, added_at=added_at)
