"""Blob storage service: upload targets, URL resolution and cleanup."""

from collections.abc import AsyncIterable, Callable
from datetime import datetime, timedelta
from typing import Protocol
from uuid import UUID, uuid4

import structlog

from core.exceptions import (
    BlobNotFoundError,
    InvalidUploadTokenError,
    UploadAlreadyCompletedError,
    UploadRejectedError,
)
from domain.entities.blob import StoredBlob, UploadTarget
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()

UPLOAD_PURPOSE = "upload"
DOWNLOAD_PURPOSE = "download"


class IUrlSigner(Protocol):
    """Signs storage ids into expiring URL tokens."""

    def sign(self, storage_id: UUID, purpose: str, ttl: timedelta) -> tuple[str, datetime]:
        """Return a token and its expiry time."""
        ...

    def verify(self, token: str, purpose: str) -> UUID | None:
        """Return the storage id for a valid token, None otherwise."""
        ...


def parse_reference(reference: str | None) -> UUID | None:
    """Parse a stored reference into a storage id; None if it is not one."""
    if not reference:
        return None
    try:
        return UUID(reference)
    except ValueError:
        return None


class StorageService:
    """Service layer for uploaded binary assets.

    Uploads happen in two steps: an admin asks for an upload target, then the
    client POSTs raw bytes to it. The storage id is minted when the target is
    issued and becomes the blob's primary key on upload, which makes every
    upload URL single-use.
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        signer: IUrlSigner,
        upload_ttl: timedelta = timedelta(hours=1),
        download_ttl: timedelta = timedelta(hours=1),
        max_upload_bytes: int = 10 * 1024 * 1024,
        base_path: str = "/api/v1/storage",
    ) -> None:
        self._uow_factory = uow_factory
        self._signer = signer
        self._upload_ttl = upload_ttl
        self._download_ttl = download_ttl
        self._max_upload_bytes = max_upload_bytes
        self._base_path = base_path.rstrip("/")

    async def issue_upload_target(self) -> UploadTarget:
        """Mint a storage id and a short-lived URL to upload it to."""
        storage_id = uuid4()
        token, expires_at = self._signer.sign(storage_id, UPLOAD_PURPOSE, self._upload_ttl)
        return UploadTarget(
            storage_id=storage_id,
            upload_url=f"{self._base_path}/uploads/{token}",
            expires_at=expires_at,
        )

    async def complete_upload(
        self,
        token: str,
        content_type: str | None,
        data: bytes | AsyncIterable[bytes],
        declared_size: int | None = None,
    ) -> StoredBlob:
        """Store the uploaded bytes under the storage id the token was issued for.

        ``data`` may be a chunk stream; it is read only until it passes the
        size limit. ``declared_size`` is the request's Content-Length, checked
        before anything is read.
        """
        storage_id = self._signer.verify(token, UPLOAD_PURPOSE)
        if storage_id is None:
            raise InvalidUploadTokenError()
        if not content_type:
            raise UploadRejectedError("Content-Type header is required")
        if declared_size is not None and declared_size > self._max_upload_bytes:
            raise self._too_large()

        if not isinstance(data, bytes):
            data = await self._read_limited(data)
        if not data:
            raise UploadRejectedError("Upload body is empty")
        if len(data) > self._max_upload_bytes:
            raise self._too_large()

        async with self._uow_factory() as uow:
            if await uow.blobs.exists(storage_id):
                raise UploadAlreadyCompletedError(str(storage_id))

            blob = StoredBlob(
                id=storage_id,
                content_type=content_type.split(";")[0].strip(),
                data=data,
            )
            created = await uow.blobs.create(blob)
            await uow.commit()

        logger.info(
            "blob_uploaded",
            storage_id=str(storage_id),
            content_type=created.content_type,
            size=created.size,
        )
        return created

    async def _read_limited(self, chunks: AsyncIterable[bytes]) -> bytes:
        buffer = bytearray()
        async for chunk in chunks:
            buffer.extend(chunk)
            if len(buffer) > self._max_upload_bytes:
                raise self._too_large()
        return bytes(buffer)

    def _too_large(self) -> UploadRejectedError:
        return UploadRejectedError(
            f"Upload exceeds the {self._max_upload_bytes} byte limit",
            status_code=413,
        )

    async def resolve(
        self, reference: str | None, uow: IUnitOfWork | None = None
    ) -> str | None:
        """Resolve a stored reference to a fresh, time-bounded download URL.

        Returns None for malformed or missing references. Pass ``uow`` to reuse
        the caller's transaction instead of opening a new one.
        """
        storage_id = parse_reference(reference)
        if storage_id is None:
            return None

        if uow is not None:
            exists = await uow.blobs.exists(storage_id)
        else:
            async with self._uow_factory() as own_uow:
                exists = await own_uow.blobs.exists(storage_id)

        if not exists:
            return None
        return self.download_url(storage_id)

    def download_url(self, storage_id: UUID) -> str:
        """Sign a download URL for a storage id without checking it exists."""
        token, _ = self._signer.sign(storage_id, DOWNLOAD_PURPOSE, self._download_ttl)
        return f"{self._base_path}/files/{token}"

    async def resolve_icon(
        self, icon: str | None, uow: IUnitOfWork | None = None
    ) -> str | None:
        """Resolve an icon that may be a storage reference or a literal path/URL."""
        if icon and parse_reference(icon) is None:
            return icon
        return await self.resolve(icon, uow)

    async def open_download(self, token: str) -> StoredBlob:
        """Load the blob a download token points at."""
        storage_id = self._signer.verify(token, DOWNLOAD_PURPOSE)
        if storage_id is None:
            raise BlobNotFoundError("invalid-or-expired", status_code=404)

        async with self._uow_factory() as uow:
            blob = await uow.blobs.get(storage_id)
            if not blob:
                raise BlobNotFoundError(str(storage_id), status_code=404)
            return blob

    async def require(self, uow: IUnitOfWork, reference: str) -> str:
        """Check that a reference points at a stored blob and normalize it.

        Called from other services within their existing transaction.
        Raises BlobNotFoundError otherwise.
        """
        storage_id = parse_reference(reference)
        if storage_id is None or not await uow.blobs.exists(storage_id):
            raise BlobNotFoundError(reference)
        return str(storage_id)

    async def delete(self, reference: str) -> bool:
        """Delete a blob. Records still pointing at it are not touched."""
        storage_id = parse_reference(reference)
        if storage_id is None:
            return False

        async with self._uow_factory() as uow:
            deleted = await uow.blobs.delete(storage_id)
            await uow.commit()

        if deleted:
            logger.info("blob_deleted", storage_id=str(storage_id))
        return deleted  # type: ignore[no-any-return]

    async def purge_orphans(self, grace: timedelta) -> int:
        """Delete blobs older than ``grace`` that no content record references.

        Covers uploads whose follow-up create never happened and images
        replaced by a later update.
        """
        cutoff = datetime.utcnow() - grace
        async with self._uow_factory() as uow:
            candidates = await uow.blobs.get_ids_created_before(cutoff)
            if not candidates:
                return 0

            referenced = await uow.blobs.get_referenced_ids()
            orphans = [blob_id for blob_id in candidates if str(blob_id) not in referenced]
            if not orphans:
                return 0

            deleted = await uow.blobs.delete_many(orphans)
            await uow.commit()

        logger.info("orphan_blobs_purged", deleted_count=deleted)
        return deleted  # type: ignore[no-any-return]
