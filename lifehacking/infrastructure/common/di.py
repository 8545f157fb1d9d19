from collections.abc import Awaitable, Callable
from typing import Annotated, TypeVar

from dependency_injector.providers import Provider
from fastapi import Depends

from lifehacking.application.common.security_events import SecurityEventNotifierProtocol
from lifehacking.core import container
from lifehacking.database import DatabaseSession

T = TypeVar("T")


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], Awaitable[T]]:
    """
    Create a FastAPI dependency for a container provider.

    Builds the use case against the request-scoped database session. The
    override only lasts while the object graph is constructed; the built
    repositories keep their own reference to the session.
    """

    async def dependency(db: DatabaseSession) -> T:
        try:
            container.db.override(db)
            return provider()
        finally:
            container.db.reset_override()

    return dependency


def get_security_event_notifier() -> SecurityEventNotifierProtocol:
    return container.security_event_notifier()


SecurityEvents = Annotated[SecurityEventNotifierProtocol, Depends(get_security_event_notifier)]
