"""Names, outcomes and the notifier interface for security audit events."""

from enum import StrEnum
from typing import Protocol


class SecurityEventName(StrEnum):
    FAVORITE_ADDED = "favorite.added"
    FAVORITE_ADD_FAILED = "favorite.add.failed"
    FAVORITE_REMOVED = "favorite.removed"
    FAVORITE_REMOVE_FAILED = "favorite.remove.failed"
    FAVORITES_MERGED = "favorites.merged"
    FAVORITES_MERGE_FAILED = "favorites.merge.failed"
    USER_DELETED = "user.deleted"
    USER_DELETE_FAILED = "user.delete.failed"


class SecurityEventOutcome(StrEnum):
    SUCCESS = "Success"
    FAILURE = "Failure"


class SecurityEventNotifierProtocol(Protocol):
    def notify(
        self,
        event: SecurityEventName,
        subject_id: str | None,
        outcome: SecurityEventOutcome,
        correlation_id: str | None = None,
        **properties: str | int | None,
    ) -> None:
        """
        Publish a security-relevant event to the audit trail.

        Implementations must not raise and must not include secrets or
        personal data in ``properties``.
        """
        ...
