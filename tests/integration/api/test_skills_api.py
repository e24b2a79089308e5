"""Integration tests for the Skills API."""

import pytest
from httpx import AsyncClient

SKILL = {
    "title": "Python",
    "description": "APIs and data tooling",
    "link": "https://python.org",
}


class TestSkillsAPI:
    @pytest.mark.asyncio
    async def test_create_with_icon_url(
        self, client: AsyncClient, admin_headers: dict[str, str]
    ) -> None:
        response = await client.post(
            "/api/v1/skills",
            json={**SKILL, "icon_url": "https://cdn.example.com/python.svg"},
            headers=admin_headers,
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["icon"] == "https://cdn.example.com/python.svg"
        assert data["icon_file"] is None

    @pytest.mark.asyncio
    async def test_uploaded_icon_wins(
        self, client: AsyncClient, admin_headers: dict[str, str], upload_file
    ) -> None:
        storage_id = await upload_file()

        response = await client.post(
            "/api/v1/skills",
            json={
                **SKILL,
                "icon_url": "https://cdn.example.com/python.svg",
                "icon_file": storage_id,
            },
            headers=admin_headers,
        )

        data = response.json()["data"]
        assert data["icon_file"] == storage_id
        assert data["icon"].startswith("/api/v1/storage/files/")

    @pytest.mark.asyncio
    async def test_create_without_icon_source(
        self, client: AsyncClient, admin_headers: dict[str, str]
    ) -> None:
        response = await client.post("/api/v1/skills", json=SKILL, headers=admin_headers)

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_create_with_unknown_icon_file(
        self, client: AsyncClient, admin_headers: dict[str, str]
    ) -> None:
        response = await client.post(
            "/api/v1/skills",
            json={**SKILL, "icon_file": "5f0c2a4e-3c1d-4d7e-9a55-0b8f4d9b6c11"},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["error_code"] == "BLOB_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_empty_icon_file_is_stored_as_null(
        self, client: AsyncClient, admin_headers: dict[str, str]
    ) -> None:
        response = await client.post(
            "/api/v1/skills",
            json={**SKILL, "icon_url": "https://cdn.example.com/python.svg", "icon_file": ""},
            headers=admin_headers,
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["icon_file"] is None
        assert data["icon"] == "https://cdn.example.com/python.svg"

    @pytest.mark.asyncio
    async def test_patch_cannot_remove_last_icon_source(
        self, client: AsyncClient, admin_headers: dict[str, str]
    ) -> None:
        created = await client.post(
            "/api/v1/skills",
            json={**SKILL, "icon_url": "https://cdn.example.com/python.svg"},
            headers=admin_headers,
        )
        skill_id = created.json()["data"]["id"]

        response = await client.patch(
            f"/api/v1/skills/{skill_id}", json={"icon_url": None}, headers=admin_headers
        )

        assert response.status_code == 400
        assert response.json()["error_code"] == "MISSING_ICON_SOURCE"

    @pytest.mark.asyncio
    async def test_list_and_delete(
        self, client: AsyncClient, admin_headers: dict[str, str]
    ) -> None:
        created = await client.post(
            "/api/v1/skills",
            json={**SKILL, "icon_url": "https://cdn.example.com/python.svg"},
            headers=admin_headers,
        )
        skill_id = created.json()["data"]["id"]

        listed = await client.get("/api/v1/skills")
        deleted = await client.delete(f"/api/v1/skills/{skill_id}", headers=admin_headers)
        missing = await client.get(f"/api/v1/skills/{skill_id}")

        assert [s["id"] for s in listed.json()["data"]] == [skill_id]
        assert deleted.status_code == 204
        assert missing.json()["error_code"] == "SKILL_NOT_FOUND"
