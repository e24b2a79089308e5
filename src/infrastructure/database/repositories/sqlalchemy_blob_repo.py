"""SQLAlchemy implementation of the stored blob repository."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.blob import StoredBlob
from infrastructure.database.models import (
    ProjectModel,
    ServiceModel,
    SkillModel,
    StoredBlobModel,
    TechnologyModel,
    WorkExperienceModel,
)

# Columns that may hold a storage reference
_REFERENCE_COLUMNS = (
    ProjectModel.image,
    ServiceModel.icon,
    SkillModel.icon_file,
    WorkExperienceModel.icon,
    TechnologyModel.icon,
)


class SQLAlchemyBlobRepository:
    """SQLAlchemy implementation of IBlobRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> StoredBlob | None:
        """Get a blob (with its bytes) by ID."""
        model = await self._session.get(StoredBlobModel, id)
        return self._to_entity(model) if model else None

    async def exists(self, id: UUID) -> bool:
        """Check whether a blob exists without loading its bytes."""
        stmt = select(StoredBlobModel.id).where(StoredBlobModel.id == id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def create(self, blob: StoredBlob) -> StoredBlob:
        """Store a new blob."""
        model = StoredBlobModel(
            id=blob.id,
            content_type=blob.content_type,
            size=blob.size,
            data=blob.data,
            created_at=blob.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: UUID) -> bool:
        """Delete a blob."""
        stmt = delete(StoredBlobModel).where(StoredBlobModel.id == id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined,no-any-return]

    async def get_ids_created_before(self, cutoff: datetime) -> list[UUID]:
        """Get IDs of blobs created before the cutoff."""
        stmt = select(StoredBlobModel.id).where(StoredBlobModel.created_at < cutoff)
        result = await self._session.execute(stmt)
        return list(result.scalars())

    async def get_referenced_ids(self) -> set[str]:
        """Get every storage reference held by a content record."""
        referenced: set[str] = set()
        for column in _REFERENCE_COLUMNS:
            result = await self._session.execute(select(column).where(column.is_not(None)))
            referenced.update(result.scalars())
        return referenced

    async def delete_many(self, ids: list[UUID]) -> int:
        """Delete several blobs and return how many were removed."""
        if not ids:
            return 0
        stmt = delete(StoredBlobModel).where(StoredBlobModel.id.in_(ids))
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount  # type: ignore[attr-defined,no-any-return]

    def _to_entity(self, model: StoredBlobModel) -> StoredBlob:
        """Convert ORM model to domain entity."""
        return StoredBlob(
            id=model.id,
            content_type=model.content_type,
            data=model.data,
            created_at=model.created_at,
        )
