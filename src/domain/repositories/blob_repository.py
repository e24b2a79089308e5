"""Stored blob repository protocol."""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from domain.entities.blob import StoredBlob


class IBlobRepository(Protocol):
    """Repository interface for uploaded binary assets."""

    async def get(self, id: UUID) -> StoredBlob | None:
        """Get a blob (with its bytes) by ID."""
        ...

    async def exists(self, id: UUID) -> bool:
        """Check whether a blob exists without loading its bytes."""
        ...

    async def create(self, blob: StoredBlob) -> StoredBlob:
        """Store a new blob."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete a blob and return success status."""
        ...

    async def get_ids_created_before(self, cutoff: datetime) -> list[UUID]:
        """Get IDs of blobs created before the cutoff."""
        ...

    async def get_referenced_ids(self) -> set[str]:
        """Get every storage reference held by a content record."""
        ...

    async def delete_many(self, ids: list[UUID]) -> int:
        """Delete several blobs and return how many were removed."""
        ...
