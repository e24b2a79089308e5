"""Technology repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.technology import Technology


class ITechnologyRepository(Protocol):
    """Repository interface for Technology entities."""

    async def get(self, id: UUID) -> Technology | None:
        """Get a technology by ID."""
        ...

    async def get_all(self, visible_only: bool = False) -> list[Technology]:
        """Get technologies in storage (creation) order."""
        ...

    async def get_max_order(self) -> int | None:
        """Get the highest order value, or None when the table is empty."""
        ...

    async def create(self, technology: Technology) -> Technology:
        """Create a new technology."""
        ...

    async def create_many(self, technologies: list[Technology]) -> list[Technology]:
        """Create several technologies in one flush."""
        ...

    async def update(self, technology: Technology) -> Technology:
        """Update an existing technology."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete a technology and return success status."""
        ...
