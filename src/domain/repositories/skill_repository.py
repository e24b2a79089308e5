"""Skill repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.skill import Skill


class ISkillRepository(Protocol):
    """Repository interface for Skill entities."""

    async def get(self, id: UUID) -> Skill | None:
        """Get a skill by ID."""
        ...

    async def get_all(self) -> list[Skill]:
        """Get all skills, most recent first."""
        ...

    async def create(self, skill: Skill) -> Skill:
        """Create a new skill."""
        ...

    async def update(self, skill: Skill) -> Skill:
        """Update an existing skill."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete a skill and return success status."""
        ...
