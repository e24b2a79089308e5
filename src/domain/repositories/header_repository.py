"""Header and introduction repository protocols."""

from typing import Protocol
from uuid import UUID

from domain.entities.header import Header, Introduction


class IHeaderRepository(Protocol):
    """Repository interface for Header entities."""

    async def get(self, id: UUID) -> Header | None:
        """Get a header by ID."""
        ...

    async def get_all(self) -> list[Header]:
        """Get all headers, most recent first."""
        ...

    async def get_latest(self) -> Header | None:
        """Get the most recently created header."""
        ...

    async def create(self, header: Header) -> Header:
        """Create a new header."""
        ...

    async def update(self, header: Header) -> Header:
        """Update an existing header."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete a header and return success status."""
        ...


class IIntroductionRepository(Protocol):
    """Repository interface for Introduction entities."""

    async def get(self, id: UUID) -> Introduction | None:
        """Get an introduction by ID."""
        ...

    async def get_all(self) -> list[Introduction]:
        """Get all introductions, most recent first."""
        ...

    async def get_latest(self) -> Introduction | None:
        """Get the most recently created introduction."""
        ...

    async def create(self, introduction: Introduction) -> Introduction:
        """Create a new introduction."""
        ...

    async def update(self, introduction: Introduction) -> Introduction:
        """Update an existing introduction."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete an introduction and return success status."""
        ...
