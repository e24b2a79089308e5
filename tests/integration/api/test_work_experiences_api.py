"""Integration tests for the Work Experience API."""

import pytest
from httpx import AsyncClient


def _experience(icon: str, **overrides: object) -> dict:
    body: dict = {
        "icon": icon,
        "workplace": "Acme Corp",
        "work_title": "Software Engineer",
        "description": ["Built the billing system", "Mentored two juniors"],
        "start_date": "2022-01-01T00:00:00Z",
        "end_date": "2023-06-30T00:00:00Z",
    }
    body.update(overrides)
    return body


async def _create(client: AsyncClient, headers: dict[str, str], body: dict) -> dict:
    response = await client.post("/api/v1/work-experiences", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestWorkExperiencesAPI:
    @pytest.mark.asyncio
    async def test_create(
        self, client: AsyncClient, admin_headers: dict[str, str], upload_file
    ) -> None:
        data = await _create(client, admin_headers, _experience(await upload_file()))

        assert data["description"] == "Built the billing system • Mentored two juniors"
        assert data["description_items"] == [
            "Built the billing system",
            "Mentored two juniors",
        ]
        assert data["end_date"].startswith("2023-06-30")
        assert data["icon_url"].startswith("/api/v1/storage/files/")

    @pytest.mark.asyncio
    async def test_current_job_never_shows_end_date(
        self, client: AsyncClient, admin_headers: dict[str, str], upload_file
    ) -> None:
        data = await _create(
            client, admin_headers, _experience(await upload_file(), is_current_job=True)
        )

        assert data["is_current_job"] is True
        assert data["end_date"] is None

    @pytest.mark.asyncio
    async def test_past_job_requires_end_date(
        self, client: AsyncClient, admin_headers: dict[str, str], upload_file
    ) -> None:
        response = await client.post(
            "/api/v1/work-experiences",
            json=_experience(await upload_file(), end_date=None),
            headers=admin_headers,
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_latest_is_null_when_empty(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/work-experiences/latest")

        assert response.status_code == 200
        assert response.json()["data"] is None

    @pytest.mark.asyncio
    async def test_patch_latest(
        self, client: AsyncClient, admin_headers: dict[str, str], upload_file
    ) -> None:
        await _create(client, admin_headers, _experience(await upload_file()))
        newest = await _create(
            client, admin_headers, _experience(await upload_file(), workplace="Globex")
        )

        response = await client.patch(
            "/api/v1/work-experiences/latest",
            json={"work_title": "Staff Engineer"},
            headers=admin_headers,
        )

        data = response.json()["data"]
        assert data["id"] == newest["id"]
        assert data["work_title"] == "Staff Engineer"
        assert data["workplace"] == "Globex"

    @pytest.mark.asyncio
    async def test_patch_latest_on_empty_collection(
        self, client: AsyncClient, admin_headers: dict[str, str]
    ) -> None:
        response = await client.patch(
            "/api/v1/work-experiences/latest",
            json={"work_title": "Staff Engineer"},
            headers=admin_headers,
        )

        assert response.status_code == 404
        assert response.json()["error_code"] == "EMPTY_COLLECTION"

    @pytest.mark.asyncio
    async def test_patch_rechecks_date_range(
        self, client: AsyncClient, admin_headers: dict[str, str], upload_file
    ) -> None:
        created = await _create(client, admin_headers, _experience(await upload_file()))

        response = await client.patch(
            f"/api/v1/work-experiences/{created['id']}",
            json={"end_date": "2020-01-01T00:00:00Z"},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["error_code"] == "INVALID_DATE_RANGE"

    @pytest.mark.asyncio
    async def test_delete_removes_icon(
        self, client: AsyncClient, admin_headers: dict[str, str], upload_file
    ) -> None:
        icon = await upload_file()
        created = await _create(client, admin_headers, _experience(icon))

        response = await client.delete(
            f"/api/v1/work-experiences/{created['id']}", headers=admin_headers
        )
        resolved = await client.get(f"/api/v1/storage/{icon}/url")

        assert response.status_code == 204
        assert resolved.json()["data"]["url"] is None

    @pytest.mark.asyncio
    async def test_delete_latest_returns_id(
        self, client: AsyncClient, admin_headers: dict[str, str], upload_file
    ) -> None:
        older = await _create(client, admin_headers, _experience(await upload_file()))
        newest = await _create(client, admin_headers, _experience(await upload_file()))

        response = await client.delete("/api/v1/work-experiences/latest", headers=admin_headers)
        remaining = await client.get("/api/v1/work-experiences")

        assert response.json() == {"id": newest["id"]}
        assert [e["id"] for e in remaining.json()["data"]] == [older["id"]]

    @pytest.mark.asyncio
    async def test_delete_latest_on_empty_collection(
        self, client: AsyncClient, admin_headers: dict[str, str]
    ) -> None:
        response = await client.delete("/api/v1/work-experiences/latest", headers=admin_headers)

        assert response.status_code == 404
