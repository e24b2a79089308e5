"""Integration tests for the section copy API."""

import pytest
from httpx import AsyncClient


async def _create(client: AsyncClient, headers: dict[str, str], section: str, title: str):
    response = await client.post(
        "/api/v1/project-details",
        json={
            "section": section,
            "title": title,
            "header": "Section header",
            "description": "Section description",
        },
        headers=headers,
    )
    assert response.status_code == 201
    return response.json()["data"]


class TestProjectDetailsAPI:
    @pytest.mark.asyncio
    async def test_section_returns_newest_record(
        self, client: AsyncClient, admin_headers: dict[str, str]
    ) -> None:
        await _create(client, admin_headers, "projects", "Old Projects")
        await _create(client, admin_headers, "projects", "New Projects")
        await _create(client, admin_headers, "skills", "Skills")

        response = await client.get("/api/v1/project-details/sections/projects")

        assert response.json()["data"]["title"] == "New Projects"

    @pytest.mark.asyncio
    async def test_empty_section_is_null(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/project-details/sections/services")

        assert response.status_code == 200
        assert response.json()["data"] is None

    @pytest.mark.asyncio
    async def test_unknown_section_is_rejected(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/project-details/sections/blog")

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_list_filters_by_section(
        self, client: AsyncClient, admin_headers: dict[str, str]
    ) -> None:
        await _create(client, admin_headers, "projects", "Projects")
        await _create(client, admin_headers, "experience", "Experience")

        response = await client.get("/api/v1/project-details", params={"section": "experience"})

        assert [r["title"] for r in response.json()["data"]] == ["Experience"]

    @pytest.mark.asyncio
    async def test_patch_stamps_updated_at(
        self, client: AsyncClient, admin_headers: dict[str, str]
    ) -> None:
        record = await _create(client, admin_headers, "projects", "Projects")
        assert record["updated_at"] is None

        response = await client.patch(
            f"/api/v1/project-details/{record['id']}",
            json={"header": "Things I built"},
            headers=admin_headers,
        )

        data = response.json()["data"]
        assert data["header"] == "Things I built"
        assert data["title"] == "Projects"
        assert data["updated_at"] is not None

    @pytest.mark.asyncio
    async def test_delete(self, client: AsyncClient, admin_headers: dict[str, str]) -> None:
        record = await _create(client, admin_headers, "skills", "Skills")

        response = await client.delete(
            f"/api/v1/project-details/{record['id']}", headers=admin_headers
        )
        again = await client.delete(
            f"/api/v1/project-details/{record['id']}", headers=admin_headers
        )

        assert response.status_code == 204
        assert again.status_code == 404
        assert again.json()["error_code"] == "PROJECT_DETAILS_NOT_FOUND"
