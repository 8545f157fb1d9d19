from typing import Protocol

from lifehacking.domain.common.value_objects.ids import UserId
from lifehacking.domain.identity.entities.user import User


class UserRepositoryProtocol(Protocol):
    async def find_by_id(self, user_id: UserId) -> User | None: ...

    async def find_by_external_auth_id(self, external_auth_id: str) -> User | None: ...

    async def delete(self, user_id: UserId) -> bool: ...
