"""Work experience repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.work_experience import WorkExperience


class IWorkExperienceRepository(Protocol):
    """Repository interface for WorkExperience entities."""

    async def get(self, id: UUID) -> WorkExperience | None:
        """Get a work experience by ID."""
        ...

    async def get_all(self) -> list[WorkExperience]:
        """Get all work experiences, most recent first."""
        ...

    async def get_latest(self) -> WorkExperience | None:
        """Get the most recently created work experience."""
        ...

    async def create(self, experience: WorkExperience) -> WorkExperience:
        """Create a new work experience."""
        ...

    async def update(self, experience: WorkExperience) -> WorkExperience:
        """Update an existing work experience."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete a work experience and return success status."""
        ...
