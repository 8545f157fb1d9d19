"""Mapper for UserFavorite ORM ↔ Favorite domain conversion."""

from lifehacking.domain.common.value_objects.ids import TipId, UserId
from lifehacking.domain.favorites.entities.favorite import Favorite
from lifehacking.infrastructure.common.timestamps import as_utc
from lifehacking.models import UserFavorite as UserFavoriteORM


class FavoriteMapper:
    """Mapper for UserFavorite ORM ↔ Favorite domain conversion."""

    def to_domain(self, orm_model: UserFavoriteORM) -> Favorite:
        """Convert ORM model to domain entity."""
        return Favorite.reconstitute(
            user_id=UserId(orm_model.user_id),
            tip_id=TipId(orm_model.tip_id),
            added_at=as_utc(orm_model.added_at),
        )

    def to_orm(self, domain_entity: Favorite) -> UserFavoriteORM:
        """Convert domain entity to a new ORM model. Favorites are never updated."""
        return UserFavoriteORM(
            user_id=domain_entity.user_id.value,
            tip_id=domain_entity.tip_id.value,
            added_at=domain_entity.added_at,
        )

    def to_row(self, domain_entity: Favorite) -> dict[str, object]:
        """Convert domain entity to a column mapping for bulk inserts."""
        return {
            "user_id": domain_entity.user_id.value,
            "tip_id": domain_entity.tip_id.value,
            "added_at": domain_entity.added_at,
        }
