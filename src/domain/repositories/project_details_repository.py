"""Section copy repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.project_details import ProjectDetails, Section


class IProjectDetailsRepository(Protocol):
    """Repository interface for ProjectDetails entities."""

    async def get(self, id: UUID) -> ProjectDetails | None:
        """Get a section copy record by ID."""
        ...

    async def get_all(self, section: Section | None = None) -> list[ProjectDetails]:
        """Get all records, most recent first, optionally for one section."""
        ...

    async def get_latest_for_section(self, section: Section) -> ProjectDetails | None:
        """Get the newest record for a section."""
        ...

    async def create(self, details: ProjectDetails) -> ProjectDetails:
        """Create a new record."""
        ...

    async def update(self, details: ProjectDetails) -> ProjectDetails:
        """Update an existing record."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete a record and return success status."""
        ...
