"""Tests for the /api/me/favorites endpoints."""

import uuid

from fastapi import status
from httpx import AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from lifehacking import models
from lifehacking.infrastructure.common.errors import GENERIC_ERROR_DETAIL

NIL_UUID = "00000000-0000-0000-0000-000000000000"


async def _favorite_tip_ids(db_session: AsyncSession, user_id: uuid.UUID) -> set[uuid.UUID]:
    stmt = select(models.UserFavorite.tip_id).where(models.UserFavorite.user_id == user_id)
    return set((await db_session.execute(stmt)).scalars().all())


class TestAuthentication:
    async def test_missing_token_is_unauthorized(self, client: AsyncClient) -> None:
        response = await client.get("/api/me/favorites")
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    async def test_invalid_token_is_unauthorized(self, client: AsyncClient) -> None:
        response = await client.get(
            "/api/me/favorites", headers={"Authorization": "Bearer not-a-jwt"}
        )
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    async def test_caller_without_user_record_is_not_found(
        self, client: AsyncClient, auth_headers
    ) -> None:
        response = await client.get("/api/me/favorites", headers=auth_headers("stranger"))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["status"] == 404


class TestMergeFavorites:
    async def test_merge_adds_and_reports_summary(
        self, client, db_session, auth_headers, test_user, test_tips
    ) -> None:
        missing = str(uuid.uuid4())
        tip_ids = [str(tip.id) for tip in test_tips]

        response = await client.post(
            "/api/me/favorites/merge",
            json={"tipIds": [*tip_ids, tip_ids[0], missing]},
            headers=auth_headers(test_user.external_auth_id),
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["totalReceived"] == 5
        assert data["added"] == 3
        assert data["skipped"] == 0
        assert data["failed"] == [{"tipId": missing, "errorMessage": "Tip not found"}]
        assert await _favorite_tip_ids(db_session, test_user.id) == {tip.id for tip in test_tips}

    async def test_merge_twice_skips_everything(
        self, client, auth_headers, test_user, test_tips
    ) -> None:
        body = {"tipIds": [str(tip.id) for tip in test_tips]}
        headers = auth_headers(test_user.external_auth_id)
        await client.post("/api/me/favorites/merge", json=body, headers=headers)

        response = await client.post("/api/me/favorites/merge", json=body, headers=headers)

        data = response.json()
        assert data["added"] == 0
        assert data["skipped"] == 3
        assert data["failed"] == []

    async def test_nil_id_is_reported_as_invalid_format(
        self, client, auth_headers, test_user, test_tips
    ) -> None:
        response = await client.post(
            "/api/me/favorites/merge",
            json={"tipIds": [str(test_tips[0].id), NIL_UUID]},
            headers=auth_headers(test_user.external_auth_id),
        )

        data = response.json()
        assert data["totalReceived"] == 1
        assert data["added"] == 1
        assert data["failed"] == [{"tipId": NIL_UUID, "errorMessage": "Invalid tip ID format"}]

    async def test_empty_list(self, client, auth_headers, test_user) -> None:
        response = await client.post(
            "/api/me/favorites/merge",
            json={"tipIds": []},
            headers=auth_headers(test_user.external_auth_id),
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"totalReceived": 0, "added": 0, "skipped": 0, "failed": []}

    async def test_malformed_id_is_rejected(self, client, auth_headers, test_user) -> None:
        response = await client.post(
            "/api/me/favorites/merge",
            json={"tipIds": ["not-a-uuid"]},
            headers=auth_headers(test_user.external_auth_id),
        )
        assert response.status_code == 422


class TestAddFavorite:
    async def test_add_returns_created_favorite(
        self, client, auth_headers, test_user, test_tips, test_category
    ) -> None:
        tip = test_tips[0]

        response = await client.post(
            f"/api/me/favorites/{tip.id}", headers=auth_headers(test_user.external_auth_id)
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["tipId"] == str(tip.id)
        assert data["tipDetails"]["title"] == tip.title
        assert data["tipDetails"]["categoryName"] == test_category.name
        assert "addedAt" in data

    async def test_add_twice_is_conflict(self, client, auth_headers, test_user, test_tips) -> None:
        headers = auth_headers(test_user.external_auth_id)
        url = f"/api/me/favorites/{test_tips[0].id}"
        await client.post(url, headers=headers)

        response = await client.post(url, headers=headers)

        assert response.status_code == status.HTTP_409_CONFLICT
        body = response.json()
        assert body["status"] == 409
        assert body["title"] == "Conflict"

    async def test_add_unknown_tip(self, client, auth_headers, test_user) -> None:
        response = await client.post(
            f"/api/me/favorites/{uuid.uuid4()}", headers=auth_headers(test_user.external_auth_id)
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND

    async def test_add_nil_id_is_bad_request(self, client, auth_headers, test_user) -> None:
        response = await client.post(
            f"/api/me/favorites/{NIL_UUID}", headers=auth_headers(test_user.external_auth_id)
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestRemoveFavorite:
    async def test_remove(self, client, db_session, auth_headers, test_user, test_tips) -> None:
        headers = auth_headers(test_user.external_auth_id)
        url = f"/api/me/favorites/{test_tips[0].id}"
        await client.post(url, headers=headers)

        response = await client.delete(url, headers=headers)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert await _favorite_tip_ids(db_session, test_user.id) == set()

    async def test_remove_absent_favorite(self, client, auth_headers, test_user, test_tips):
        response = await client.delete(
            f"/api/me/favorites/{test_tips[0].id}",
            headers=auth_headers(test_user.external_auth_id),
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestSearchFavorites:
    async def test_lists_favorites_with_metadata(
        self, client, auth_headers, test_user, test_tips
    ) -> None:
        headers = auth_headers(test_user.external_auth_id)
        await client.post(
            "/api/me/favorites/merge",
            json={"tipIds": [str(tip.id) for tip in test_tips]},
            headers=headers,
        )

        response = await client.get(
            "/api/me/favorites",
            params={"orderBy": "title", "sortDirection": "asc", "pageSize": 2},
            headers=headers,
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["metadata"] == {
            "totalItems": 3,
            "pageNumber": 1,
            "pageSize": 2,
            "totalPages": 2,
        }
        assert [item["tipDetails"]["title"] for item in data["favorites"]] == [
            "Keep herbs fresh",
            "Peel garlic fast",
        ]

    async def test_search_text(self, client, auth_headers, test_user, test_tips) -> None:
        headers = auth_headers(test_user.external_auth_id)
        await client.post(
            "/api/me/favorites/merge",
            json={"tipIds": [str(tip.id) for tip in test_tips]},
            headers=headers,
        )

        response = await client.get("/api/me/favorites", params={"q": "garlic"}, headers=headers)

        favorites = response.json()["favorites"]
        assert [item["tipDetails"]["title"] for item in favorites] == ["Peel garlic fast"]

    async def test_page_size_over_limit_is_rejected(self, client, auth_headers, test_user):
        response = await client.get(
            "/api/me/favorites",
            params={"pageSize": 101},
            headers=auth_headers(test_user.external_auth_id),
        )
        assert response.status_code == 422

    async def test_favorites_are_private(
        self, client, auth_headers, test_user, other_user, test_tips
    ) -> None:
        await client.post(
            f"/api/me/favorites/{test_tips[0].id}",
            headers=auth_headers(test_user.external_auth_id),
        )

        response = await client.get(
            "/api/me/favorites", headers=auth_headers(other_user.external_auth_id)
        )

        assert response.json()["metadata"]["totalItems"] == 0


class TestErrorMapping:
    async def test_infrastructure_error_hides_the_cause(
        self, client, auth_headers, test_user, test_tips, monkeypatch
    ) -> None:
        from lifehacking.infrastructure.favorites.repositories import FavoritesRepository

        async def broken_add_batch(self, user_id, tip_ids):
            raise RuntimeError("connection reset by peer")

        monkeypatch.setattr(FavoritesRepository, "add_batch", broken_add_batch)

        response = await client.post(
            "/api/me/favorites/merge",
            json={"tipIds": [str(test_tips[0].id)]},
            headers=auth_headers(test_user.external_auth_id),
        )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        body = response.json()
        assert body["detail"] == GENERIC_ERROR_DETAIL
        assert "connection reset" not in response.text
