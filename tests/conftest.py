"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator, Awaitable, Callable
from pathlib import Path

# Disable rate limiting in tests
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from domain.services.storage_service import StorageService
from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.database.models import Base
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
from infrastructure.storage.url_signer import JoseUrlSigner

# Test database URL (SQLite in memory, one connection shared by all sessions)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

TEST_SECRET_KEY = "test-secret-key"
TEST_PASSKEY = "654321"

# Smallest valid PNG
PNG_BYTES = bytes.fromhex(
    "89504e470d0a1a0a0000000d4948445200000001000000010806000000"
    "1f15c4890000000d49444154789c6360000002000154a24f5d0000000049454e44ae426082"
)


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
def uow_factory(
    session_factory: async_sessionmaker[AsyncSession],
) -> Callable[[], SQLAlchemyUnitOfWork]:
    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(session_factory)

    return factory


@pytest.fixture
def auth_provider() -> JWTAuthProvider:
    """Create auth provider for testing."""
    return JWTAuthProvider(
        passkey=TEST_PASSKEY,
        secret_key=TEST_SECRET_KEY,
        algorithm="HS256",
        expire_minutes=30,
    )


@pytest.fixture
def admin_token(auth_provider: JWTAuthProvider) -> str:
    """Create an admin session token."""
    token, _ = auth_provider.login(TEST_PASSKEY)
    return token


@pytest.fixture
def admin_headers(admin_token: str) -> dict[str, str]:
    """Create authorization headers."""
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture
def storage_service(uow_factory: Callable[[], SQLAlchemyUnitOfWork]) -> StorageService:
    return StorageService(
        uow_factory,
        signer=JoseUrlSigner(secret_key=TEST_SECRET_KEY, algorithm="HS256"),
        max_upload_bytes=64 * 1024,
    )


def _provide(instance: object) -> Callable[[], object]:
    def dependency() -> object:
        return instance

    return dependency


@pytest.fixture
def app(
    session_factory: async_sessionmaker[AsyncSession],
    uow_factory: Callable[[], SQLAlchemyUnitOfWork],
    auth_provider: JWTAuthProvider,
    storage_service: StorageService,
) -> FastAPI:
    """
    Create the app wired to the test database.

    - Uses an in-memory SQLite database
    - Overrides the auth provider so tokens are signed with the test secret
    - Overrides every service factory to use the test unit of work
    """
    from api.dependencies.auth import get_auth_provider
    from api.v1 import dependencies as deps
    from domain.services.header_service import HeaderService, IntroductionService
    from domain.services.project_details_service import ProjectDetailsService
    from domain.services.project_service import ProjectService
    from domain.services.service_service import ServiceService
    from domain.services.skill_service import SkillService
    from domain.services.technology_service import TechnologyService
    from domain.services.work_experience_service import WorkExperienceService
    from infrastructure.database.session import get_async_session
    from main import create_app

    app = create_app()

    async def override_get_async_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    overrides: dict[Callable, object] = {
        deps.get_storage_service: storage_service,
        deps.get_header_service: HeaderService(uow_factory),
        deps.get_introduction_service: IntroductionService(uow_factory),
        deps.get_project_details_service: ProjectDetailsService(uow_factory),
        deps.get_skill_service: SkillService(uow_factory, storage_service),
        deps.get_project_service: ProjectService(uow_factory, storage_service),
        deps.get_service_service: ServiceService(uow_factory, storage_service),
        deps.get_work_experience_service: WorkExperienceService(uow_factory, storage_service),
        deps.get_technology_service: TechnologyService(uow_factory, storage_service),
        get_auth_provider: auth_provider,
    }
    for dependency, instance in overrides.items():
        app.dependency_overrides[dependency] = _provide(instance)
    app.dependency_overrides[get_async_session] = override_get_async_session

    return app


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client (no auth headers by default)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def upload_file(
    client: AsyncClient, admin_headers: dict[str, str]
) -> Callable[..., Awaitable[str]]:
    """Upload bytes through the two-step flow and return the storage id."""

    async def upload(data: bytes = PNG_BYTES, content_type: str = "image/png") -> str:
        issued = await client.post("/api/v1/storage/upload-urls", headers=admin_headers)
        assert issued.status_code == 201
        response = await client.post(
            issued.json()["data"]["upload_url"],
            content=data,
            headers={"Content-Type": content_type},
        )
        assert response.status_code == 200
        return str(response.json()["storageId"])

    return upload
