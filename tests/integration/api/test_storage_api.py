"""Integration tests for the blob storage API."""

import pytest
from httpx import AsyncClient

from tests.conftest import PNG_BYTES


class TestUploadFlow:
    @pytest.mark.asyncio
    async def test_issue_requires_admin(self, client: AsyncClient) -> None:
        response = await client.post("/api/v1/storage/upload-urls")

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_upload_returns_storage_id(
        self, client: AsyncClient, admin_headers: dict[str, str]
    ) -> None:
        issued = await client.post("/api/v1/storage/upload-urls", headers=admin_headers)
        target = issued.json()["data"]

        response = await client.post(
            target["upload_url"], content=PNG_BYTES, headers={"Content-Type": "image/png"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["storageId"] == target["storage_id"]
        assert body["storage_id"] == target["storage_id"]
        assert body["content_type"] == "image/png"
        assert body["size"] == len(PNG_BYTES)

    @pytest.mark.asyncio
    async def test_upload_url_is_single_use(
        self, client: AsyncClient, admin_headers: dict[str, str]
    ) -> None:
        issued = await client.post("/api/v1/storage/upload-urls", headers=admin_headers)
        url = issued.json()["data"]["upload_url"]
        await client.post(url, content=PNG_BYTES, headers={"Content-Type": "image/png"})

        again = await client.post(url, content=PNG_BYTES, headers={"Content-Type": "image/png"})

        assert again.status_code == 409
        assert again.json()["error_code"] == "UPLOAD_ALREADY_COMPLETED"

    @pytest.mark.asyncio
    async def test_tampered_token(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/v1/storage/uploads/not-a-token",
            content=PNG_BYTES,
            headers={"Content-Type": "image/png"},
        )

        assert response.status_code == 400
        assert response.json()["error_code"] == "INVALID_UPLOAD_TOKEN"

    @pytest.mark.asyncio
    async def test_oversized_upload(
        self, client: AsyncClient, admin_headers: dict[str, str]
    ) -> None:
        issued = await client.post("/api/v1/storage/upload-urls", headers=admin_headers)

        response = await client.post(
            issued.json()["data"]["upload_url"],
            content=b"x" * (64 * 1024 + 1),
            headers={"Content-Type": "application/octet-stream"},
        )

        assert response.status_code == 413
        assert response.json()["error_code"] == "UPLOAD_REJECTED"

    @pytest.mark.asyncio
    async def test_chunked_upload_stops_at_the_limit(
        self, client: AsyncClient, admin_headers: dict[str, str]
    ) -> None:
        issued = await client.post("/api/v1/storage/upload-urls", headers=admin_headers)
        sent = []

        async def body():
            for _ in range(80):
                sent.append(64 * 1024)
                yield b"x" * (64 * 1024)

        response = await client.post(
            issued.json()["data"]["upload_url"],
            content=body(),
            headers={"Content-Type": "application/octet-stream"},
        )

        assert response.status_code == 413
        assert sum(sent) < 80 * 64 * 1024


class TestDownload:
    @pytest.mark.asyncio
    async def test_resolve_and_download(self, client: AsyncClient, upload_file) -> None:
        storage_id = await upload_file()

        resolved = await client.get(f"/api/v1/storage/{storage_id}/url")
        url = resolved.json()["data"]["url"]
        response = await client.get(url)

        assert response.status_code == 200
        assert response.content == PNG_BYTES
        assert response.headers["content-type"] == "image/png"
        assert response.headers["x-content-type-options"] == "nosniff"

    @pytest.mark.asyncio
    async def test_unknown_reference_resolves_to_null(self, client: AsyncClient) -> None:
        response = await client.get(
            "/api/v1/storage/5f0c2a4e-3c1d-4d7e-9a55-0b8f4d9b6c11/url"
        )

        assert response.status_code == 200
        assert response.json()["data"]["url"] is None

    @pytest.mark.asyncio
    async def test_upload_link_cannot_download(
        self, client: AsyncClient, admin_headers: dict[str, str]
    ) -> None:
        issued = await client.post("/api/v1/storage/upload-urls", headers=admin_headers)
        token = issued.json()["data"]["upload_url"].rsplit("/", 1)[-1]

        response = await client.get(f"/api/v1/storage/files/{token}")

        assert response.status_code == 404


class TestDelete:
    @pytest.mark.asyncio
    async def test_delete_blob(
        self, client: AsyncClient, admin_headers: dict[str, str], upload_file
    ) -> None:
        storage_id = await upload_file()

        response = await client.delete(f"/api/v1/storage/{storage_id}", headers=admin_headers)
        again = await client.delete(f"/api/v1/storage/{storage_id}", headers=admin_headers)
        resolved = await client.get(f"/api/v1/storage/{storage_id}/url")

        assert response.json() == {"storage_id": storage_id, "deleted": True}
        assert again.json()["deleted"] is False
        assert resolved.json()["data"]["url"] is None

    @pytest.mark.asyncio
    async def test_delete_requires_admin(self, client: AsyncClient, upload_file) -> None:
        storage_id = await upload_file()

        response = await client.delete(f"/api/v1/storage/{storage_id}")

        assert response.status_code == 401
