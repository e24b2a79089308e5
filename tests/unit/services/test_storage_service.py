"""Unit tests for StorageService."""

from datetime import timedelta
from uuid import UUID, uuid4

import pytest

from core.exceptions import (
    BlobNotFoundError,
    InvalidUploadTokenError,
    UploadAlreadyCompletedError,
    UploadRejectedError,
)
from domain.entities.blob import StoredBlob
from domain.services.storage_service import (
    DOWNLOAD_PURPOSE,
    UPLOAD_PURPOSE,
    StorageService,
    parse_reference,
)
from infrastructure.storage.url_signer import JoseUrlSigner
from tests.unit.conftest import FakeUnitOfWork


def _token(url: str) -> str:
    return url.rsplit("/", 1)[-1]


class TestParseReference:
    def test_valid_uuid(self):
        storage_id = uuid4()
        assert parse_reference(str(storage_id)) == storage_id

    @pytest.mark.parametrize("value", [None, "", "/icons/go.svg", "not-a-uuid"])
    def test_not_a_reference(self, value):
        assert parse_reference(value) is None


class TestUpload:
    @pytest.mark.asyncio
    async def test_issue_then_complete(self, storage: StorageService, uow: FakeUnitOfWork):
        uow.blobs.exists.return_value = False
        uow.blobs.create.side_effect = lambda blob: blob
        target = await storage.issue_upload_target()

        blob = await storage.complete_upload(
            _token(target.upload_url), "image/png; charset=binary", b"\x89PNG"
        )

        assert blob.id == target.storage_id
        assert blob.content_type == "image/png"
        assert blob.size == 4
        assert uow.committed

    @pytest.mark.asyncio
    async def test_second_upload_to_same_url_fails(
        self, storage: StorageService, uow: FakeUnitOfWork
    ):
        target = await storage.issue_upload_target()
        uow.blobs.exists.return_value = True

        with pytest.raises(UploadAlreadyCompletedError):
            await storage.complete_upload(_token(target.upload_url), "image/png", b"data")

    @pytest.mark.asyncio
    async def test_rejects_download_token(self, storage: StorageService, signer: JoseUrlSigner):
        token, _ = signer.sign(uuid4(), DOWNLOAD_PURPOSE, timedelta(minutes=5))

        with pytest.raises(InvalidUploadTokenError):
            await storage.complete_upload(token, "image/png", b"data")

    @pytest.mark.asyncio
    async def test_rejects_expired_token(self, storage: StorageService, signer: JoseUrlSigner):
        token, _ = signer.sign(uuid4(), UPLOAD_PURPOSE, timedelta(seconds=-10))

        with pytest.raises(InvalidUploadTokenError):
            await storage.complete_upload(token, "image/png", b"data")

    @pytest.mark.asyncio
    async def test_rejects_missing_content_type(self, storage: StorageService):
        target = await storage.issue_upload_target()

        with pytest.raises(UploadRejectedError):
            await storage.complete_upload(_token(target.upload_url), None, b"data")

    @pytest.mark.asyncio
    async def test_rejects_empty_body(self, storage: StorageService):
        target = await storage.issue_upload_target()

        with pytest.raises(UploadRejectedError):
            await storage.complete_upload(_token(target.upload_url), "image/png", b"")

    @pytest.mark.asyncio
    async def test_rejects_oversized_body(self, storage: StorageService):
        target = await storage.issue_upload_target()

        with pytest.raises(UploadRejectedError) as exc_info:
            await storage.complete_upload(_token(target.upload_url), "image/png", b"x" * 2048)

        assert exc_info.value.status_code == 413

    @pytest.mark.asyncio
    async def test_stops_reading_stream_past_the_limit(self, storage: StorageService):
        target = await storage.issue_upload_target()
        consumed = []

        async def chunks():
            for _ in range(10):
                consumed.append(512)
                yield b"x" * 512

        with pytest.raises(UploadRejectedError) as exc_info:
            await storage.complete_upload(_token(target.upload_url), "image/png", chunks())

        assert exc_info.value.status_code == 413
        assert sum(consumed) == 1536

    @pytest.mark.asyncio
    async def test_declared_size_rejected_before_reading(self, storage: StorageService):
        target = await storage.issue_upload_target()
        consumed = []

        async def chunks():
            consumed.append(1)
            yield b"x"

        with pytest.raises(UploadRejectedError) as exc_info:
            await storage.complete_upload(
                _token(target.upload_url), "image/png", chunks(), declared_size=4096
            )

        assert exc_info.value.status_code == 413
        assert consumed == []

    @pytest.mark.asyncio
    async def test_stream_within_limit_is_stored(
        self, storage: StorageService, uow: FakeUnitOfWork
    ):
        target = await storage.issue_upload_target()
        uow.blobs.exists.return_value = False
        uow.blobs.create.side_effect = lambda blob: blob

        async def chunks():
            yield b"abc"
            yield b""
            yield b"def"

        blob = await storage.complete_upload(
            _token(target.upload_url), "image/png", chunks(), declared_size=6
        )

        assert blob.data == b"abcdef"
        assert blob.id == target.storage_id


class TestResolve:
    @pytest.mark.asyncio
    async def test_existing_blob_gets_download_url(
        self, storage: StorageService, signer: JoseUrlSigner, storage_id: str
    ):
        url = await storage.resolve(storage_id)

        assert url is not None
        assert signer.verify(_token(url), DOWNLOAD_PURPOSE) == UUID(storage_id)

    @pytest.mark.asyncio
    async def test_missing_blob_resolves_to_none(
        self, storage: StorageService, uow: FakeUnitOfWork, storage_id: str
    ):
        uow.blobs.exists.return_value = False

        assert await storage.resolve(storage_id) is None

    @pytest.mark.asyncio
    async def test_malformed_reference_resolves_to_none(
        self, storage: StorageService, uow: FakeUnitOfWork
    ):
        assert await storage.resolve("nope") is None
        uow.blobs.exists.assert_not_called()

    @pytest.mark.asyncio
    async def test_icon_literal_passes_through(self, storage: StorageService):
        assert await storage.resolve_icon("/icons/go.svg") == "/icons/go.svg"


class TestOpenDownload:
    @pytest.mark.asyncio
    async def test_returns_blob(self, storage: StorageService, uow: FakeUnitOfWork):
        blob = StoredBlob(content_type="image/png", data=b"png")
        uow.blobs.get.return_value = blob

        result = await storage.open_download(_token(storage.download_url(blob.id)))

        assert result is blob

    @pytest.mark.asyncio
    async def test_upload_token_cannot_download(
        self, storage: StorageService, signer: JoseUrlSigner
    ):
        token, _ = signer.sign(uuid4(), UPLOAD_PURPOSE, timedelta(minutes=5))

        with pytest.raises(BlobNotFoundError) as exc_info:
            await storage.open_download(token)

        assert exc_info.value.status_code == 404


class TestRequire:
    @pytest.mark.asyncio
    async def test_normalizes_reference(
        self, storage: StorageService, uow: FakeUnitOfWork, storage_id: str
    ):
        assert await storage.require(uow, storage_id.upper()) == storage_id

    @pytest.mark.asyncio
    async def test_malformed_reference(self, storage: StorageService, uow: FakeUnitOfWork):
        with pytest.raises(BlobNotFoundError):
            await storage.require(uow, "not-a-uuid")


class TestPurgeOrphans:
    @pytest.mark.asyncio
    async def test_deletes_only_unreferenced(
        self, storage: StorageService, uow: FakeUnitOfWork
    ):
        kept, orphan = uuid4(), uuid4()
        uow.blobs.get_ids_created_before.return_value = [kept, orphan]
        uow.blobs.get_referenced_ids.return_value = {str(kept)}
        uow.blobs.delete_many.return_value = 1

        deleted = await storage.purge_orphans(timedelta(hours=24))

        assert deleted == 1
        uow.blobs.delete_many.assert_called_once_with([orphan])
        assert uow.committed

    @pytest.mark.asyncio
    async def test_nothing_old_enough(self, storage: StorageService, uow: FakeUnitOfWork):
        uow.blobs.get_ids_created_before.return_value = []

        assert await storage.purge_orphans(timedelta(hours=24)) == 0
        uow.blobs.get_referenced_ids.assert_not_called()
