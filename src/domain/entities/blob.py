"""Stored blob domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class StoredBlob:
    """An uploaded binary asset such as an icon or project image."""

    content_type: str
    data: bytes
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True, slots=True)
class UploadTarget:
    """A short-lived, single-use upload URL and the storage id it will fill."""

    storage_id: UUID
    upload_url: str
    expires_at: datetime
