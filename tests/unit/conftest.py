"""Shared fixtures for unit tests."""

from typing import Any
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from domain.services.storage_service import StorageService
from infrastructure.storage.url_signer import JoseUrlSigner


class FakeUnitOfWork:
    """Fake Unit of Work with all 9 repository mocks for unit testing."""

    def __init__(self) -> None:
        self.headers = AsyncMock()
        self.introductions = AsyncMock()
        self.project_details = AsyncMock()
        self.skills = AsyncMock()
        self.projects = AsyncMock()
        self.services = AsyncMock()
        self.work_experiences = AsyncMock()
        self.technologies = AsyncMock()
        self.blobs = AsyncMock()
        self.blobs.exists.return_value = True
        self.committed = False
        self.rolled_back = False

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True

    async def __aenter__(self) -> "FakeUnitOfWork":
        return self

    async def __aexit__(self, *args: Any) -> None:
        pass


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def signer() -> JoseUrlSigner:
    return JoseUrlSigner(secret_key="unit-test-secret", algorithm="HS256")


@pytest.fixture
def storage(uow: FakeUnitOfWork, signer: JoseUrlSigner) -> StorageService:
    """StorageService over the fake unit of work."""
    return StorageService(lambda: uow, signer=signer, max_upload_bytes=1024)


@pytest.fixture
def storage_id() -> str:
    """A random storage reference, as stored on content records."""
    return str(uuid4())
