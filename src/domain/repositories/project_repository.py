"""Project repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.project import Project


class IProjectRepository(Protocol):
    """Repository interface for Project entities."""

    async def get(self, id: UUID) -> Project | None:
        """Get a project by ID."""
        ...

    async def get_all(self) -> list[Project]:
        """Get all projects, most recent first."""
        ...

    async def create(self, project: Project) -> Project:
        """Create a new project."""
        ...

    async def update(self, project: Project) -> Project:
        """Update an existing project."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete a project and return success status."""
        ...
