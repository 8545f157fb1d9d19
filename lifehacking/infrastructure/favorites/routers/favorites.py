"""Endpoints for the authenticated caller's own favorites."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, Response
from starlette import status

from lifehacking.application.common.pagination import MAX_PAGE_SIZE, Pagination
from lifehacking.application.common.security_events import (
    SecurityEventName,
    SecurityEventOutcome,
)
from lifehacking.application.favorites.dtos import (
    FailedTip,
    FavoriteSortField,
    FavoritesQuery,
    SortDirection,
)
from lifehacking.application.favorites.use_cases.add_favorite_use_case import AddFavoriteUseCase
from lifehacking.application.favorites.use_cases.merge_favorites_use_case import (
    MergeFavoritesUseCase,
)
from lifehacking.application.favorites.use_cases.remove_favorite_use_case import (
    RemoveFavoriteUseCase,
)
from lifehacking.application.favorites.use_cases.search_user_favorites_use_case import (
    SearchUserFavoritesUseCase,
)
from lifehacking.core import container
from lifehacking.domain.common.exceptions import ValidationError
from lifehacking.domain.common.value_objects.ids import CategoryId, TipId
from lifehacking.infrastructure.common.di import SecurityEvents, inject_use_case
from lifehacking.infrastructure.common.errors import AppHTTPException, to_http_exception
from lifehacking.infrastructure.common.security_events import error_properties, request_properties
from lifehacking.infrastructure.favorites.schemas import (
    FavoriteResponse,
    MergeFavoritesRequest,
    MergeFavoritesResponse,
    PagedFavoritesResponse,
)
from lifehacking.infrastructure.identity.dependencies import CurrentUser

INVALID_TIP_ID_MESSAGE = "Invalid tip ID format"

router = APIRouter(prefix="/me/favorites", tags=["favorites"])


def _parse_tip_id(tip_id: UUID) -> TipId:
    try:
        return TipId(tip_id)
    except ValidationError as e:
        raise AppHTTPException(status.HTTP_400_BAD_REQUEST, "Validation error", e.message) from e


@router.get("", response_model=PagedFavoritesResponse, status_code=status.HTTP_200_OK)
async def search_favorites(
    current_user: CurrentUser,
    q: str | None = Query(
        None, description="Case-insensitive text to match in title or description"
    ),
    category_id: UUID | None = Query(None, alias="categoryId", description="Filter by category"),
    order_by: FavoriteSortField = Query(FavoriteSortField.ADDED_AT, alias="orderBy"),
    sort_direction: SortDirection = Query(SortDirection.DESC, alias="sortDirection"),
    page_number: int = Query(1, ge=1, alias="pageNumber"),
    page_size: int = Query(10, ge=1, le=MAX_PAGE_SIZE, alias="pageSize"),
    use_case: SearchUserFavoritesUseCase = Depends(
        inject_use_case(container.search_user_favorites_use_case)
    ),
) -> PagedFavoritesResponse:
    """
    List the caller's favorites with full tip details.

    Args:
        q: Search text
        category_id: Only favorites whose tip is in this category
        order_by: Sort field
        sort_direction: Sort direction
        page_number: 1-based page number
        page_size: Items per page

    Returns:
        One page of favorites plus pagination metadata
    """
    try:
        category = CategoryId(category_id) if category_id is not None else None
    except ValidationError as e:
        raise AppHTTPException(status.HTTP_400_BAD_REQUEST, "Validation error", e.message) from e

    query = FavoritesQuery(
        search_term=q,
        category_id=category,
        sort_field=order_by,
        sort_direction=sort_direction,
        pagination=Pagination(page=page_number, page_size=page_size),
    )
    result = await use_case.search(current_user.id, query)
    if result.is_failure:
        raise to_http_exception(result.unwrap_error())
    return PagedFavoritesResponse.from_page(result.unwrap())


@router.post("/merge", response_model=MergeFavoritesResponse, status_code=status.HTTP_200_OK)
async def merge_favorites(
    request: Request,
    body: MergeFavoritesRequest,
    current_user: CurrentUser,
    security_events: SecurityEvents,
    use_case: MergeFavoritesUseCase = Depends(inject_use_case(container.merge_favorites_use_case)),
) -> MergeFavoritesResponse:
    """
    Merge the favorites a client kept locally into the caller's favorites.

    Safe to retry: tips already favorited are skipped. Nil ids are reported as
    failed without reaching the merge and are not counted in totalReceived.
    """
    tip_ids: list[TipId] = []
    invalid: list[FailedTip] = []
    for raw_id in body.tip_ids:
        try:
            tip_ids.append(TipId(raw_id))
        except ValidationError:
            invalid.append(FailedTip(tip_id=raw_id, error_message=INVALID_TIP_ID_MESSAGE))

    result = await use_case.merge(current_user.id, tip_ids)
    if result.is_failure:
        error = result.unwrap_error()
        security_events.notify(
            SecurityEventName.FAVORITES_MERGE_FAILED,
            str(current_user.id),
            SecurityEventOutcome.FAILURE,
            **request_properties(request),
            tip_count=len(body.tip_ids),
            **error_properties(error),
        )
        raise to_http_exception(error)

    summary = result.unwrap().with_failures(invalid)
    security_events.notify(
        SecurityEventName.FAVORITES_MERGED,
        str(current_user.id),
        SecurityEventOutcome.SUCCESS,
        **request_properties(request),
        total_received=summary.total_received,
        added=summary.added,
        skipped=summary.skipped,
        failed=len(summary.failed),
    )
    return MergeFavoritesResponse.from_dto(summary)


@router.post("/{tip_id}", response_model=FavoriteResponse, status_code=status.HTTP_201_CREATED)
async def add_favorite(
    request: Request,
    tip_id: UUID,
    current_user: CurrentUser,
    security_events: SecurityEvents,
    use_case: AddFavoriteUseCase = Depends(inject_use_case(container.add_favorite_use_case)),
) -> FavoriteResponse:
    """Add a tip to the caller's favorites. Returns 409 if it is already there."""
    result = await use_case.add_favorite(current_user.id, _parse_tip_id(tip_id))
    if result.is_failure:
        error = result.unwrap_error()
        security_events.notify(
            SecurityEventName.FAVORITE_ADD_FAILED,
            str(current_user.id),
            SecurityEventOutcome.FAILURE,
            **request_properties(request),
            tip_id=str(tip_id),
            **error_properties(error),
        )
        raise to_http_exception(error)

    security_events.notify(
        SecurityEventName.FAVORITE_ADDED,
        str(current_user.id),
        SecurityEventOutcome.SUCCESS,
        **request_properties(request),
        tip_id=str(tip_id),
    )
    return FavoriteResponse.from_dto(result.unwrap())


@router.delete("/{tip_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_favorite(
    request: Request,
    tip_id: UUID,
    current_user: CurrentUser,
    security_events: SecurityEvents,
    use_case: RemoveFavoriteUseCase = Depends(inject_use_case(container.remove_favorite_use_case)),
) -> Response:
    """Remove a tip from the caller's favorites. Returns 404 if it is not there."""
    result = await use_case.remove_favorite(current_user.id, _parse_tip_id(tip_id))
    if result.is_failure:
        error = result.unwrap_error()
        security_events.notify(
            SecurityEventName.FAVORITE_REMOVE_FAILED,
            str(current_user.id),
            SecurityEventOutcome.FAILURE,
            **request_properties(request),
            tip_id=str(tip_id),
            **error_properties(error),
        )
        raise to_http_exception(error)

    security_events.notify(
        SecurityEventName.FAVORITE_REMOVED,
        str(current_user.id),
        SecurityEventOutcome.SUCCESS,
        **request_properties(request),
        tip_id=str(tip_id),
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
