"""Service offering repository protocol."""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from domain.entities.service import Service, ServiceCategory


class IServiceRepository(Protocol):
    """Repository interface for Service entities."""

    async def get(self, id: UUID) -> Service | None:
        """Get a service by ID."""
        ...

    async def get_all(
        self,
        active_only: bool = False,
        category: ServiceCategory | None = None,
    ) -> list[Service]:
        """Get services ordered by display order, then creation time."""
        ...

    async def get_featured(self, limit: int) -> list[Service]:
        """Get active services that carry a badge, by display order."""
        ...

    async def get_page(
        self, limit: int, before: datetime | None = None
    ) -> list[Service]:
        """Get services newest first, created strictly before the cursor."""
        ...

    async def count_by_category(self, active_only: bool = True) -> dict[str, int]:
        """Count services per category."""
        ...

    async def create(self, service: Service) -> Service:
        """Create a new service."""
        ...

    async def update(self, service: Service) -> Service:
        """Update an existing service."""
        ...
