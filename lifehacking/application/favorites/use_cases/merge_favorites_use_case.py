"""Use case for merging a client-side favorites list into the server-side one."""

from collections.abc import Collection

import structlog

from lifehacking.application.common.errors import AppError
from lifehacking.application.common.result import Failure, Result, Success
from lifehacking.application.common.tasks import run_to_completion
from lifehacking.application.content.protocols.tip_repository import TipRepositoryProtocol
from lifehacking.application.favorites.dtos import (
    TIP_NOT_FOUND_MESSAGE,
    FailedTip,
    MergeFavoritesResult,
)
from lifehacking.application.favorites.protocols.favorites_repository import (
    FavoritesRepositoryProtocol,
)
from lifehacking.application.identity.protocols.user_repository import UserRepositoryProtocol
from lifehacking.domain.common.value_objects.ids import TipId, UserId

logger = structlog.get_logger(__name__)


class MergeFavoritesUseCase:
    def __init__(
        self,
        favorites_repository: FavoritesRepositoryProtocol,
        tip_repository: TipRepositoryProtocol,
        user_repository: UserRepositoryProtocol,
    ) -> None:
        self.favorites_repository = favorites_repository
        self.tip_repository = tip_repository
        self.user_repository = user_repository

    async def merge(
        self, user_id: UserId, tip_ids: Collection[TipId]
    ) -> Result[MergeFavoritesResult, AppError]:
        """
        Merge tip ids stored on the client into the user's favorites.

        Duplicate ids in the input collapse to one. Ids that match no tip are
        reported in ``failed`` and never block the valid ones. Tips already
        favorited are counted as skipped. Running the same merge twice adds
        nothing the second time.

        Once the batch insert has started it runs to completion even if the
        calling task is cancelled; cancellation before that point leaves the
        favorites untouched.

        Args:
            user_id: ID of the user whose favorites are merged into
            tip_ids: Raw tip ids from the client, duplicates allowed

        Returns:
            Success with the merge summary, or Failure with NOT_FOUND (unknown
            user) or INFRASTRUCTURE (storage failure, including a failed batch
            write; no partial summary is returned in that case)
        """
        total_received = len(tip_ids)

        try:
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                return Failure(AppError.not_found("User", user_id))

            unique_tip_ids = set(tip_ids)
            if not unique_tip_ids:
                return Success(MergeFavoritesResult(total_received, added=0, skipped=0))

            valid_tips = await self.tip_repository.find_by_ids(unique_tip_ids)
            valid_tip_ids = set(valid_tips) & unique_tip_ids
            failed = [
                FailedTip(tip_id=tip_id.value, error_message=TIP_NOT_FOUND_MESSAGE)
                for tip_id in sorted(unique_tip_ids - valid_tip_ids, key=str)
            ]

            if not valid_tip_ids:
                return Success(
                    MergeFavoritesResult(total_received, added=0, skipped=0, failed=failed)
                )

            existing_tip_ids = await self.favorites_repository.get_existing_favorites(
                user_id, valid_tip_ids
            )
            existing_tip_ids &= valid_tip_ids
            new_tip_ids = valid_tip_ids - existing_tip_ids

            if new_tip_ids:
                await run_to_completion(
                    self.favorites_repository.add_batch(user_id, sorted(new_tip_ids, key=str))
                )
        except Exception as e:
            logger.exception("merge_favorites_failed", user_id=str(user_id))
            return Failure(
                AppError.infrastructure("An error occurred while merging favorites.", e)
            )

        result = MergeFavoritesResult(
            total_received=total_received,
            added=len(new_tip_ids),
            skipped=len(existing_tip_ids),
            failed=failed,
        )
        logger.info(
            "merged_favorites",
            user_id=str(user_id),
            total_received=result.total_received,
            added=result.added,
            skipped=result.skipped,
            failed=len(result.failed),
        )
        return Success(result)
