"""SQLAlchemy Unit of Work implementation."""

from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from infrastructure.database.repositories.sqlalchemy_blob_repo import SQLAlchemyBlobRepository
from infrastructure.database.repositories.sqlalchemy_header_repo import (
    SQLAlchemyHeaderRepository,
    SQLAlchemyIntroductionRepository,
)
from infrastructure.database.repositories.sqlalchemy_project_details_repo import (
    SQLAlchemyProjectDetailsRepository,
)
from infrastructure.database.repositories.sqlalchemy_project_repo import SQLAlchemyProjectRepository
from infrastructure.database.repositories.sqlalchemy_service_repo import SQLAlchemyServiceRepository
from infrastructure.database.repositories.sqlalchemy_skill_repo import SQLAlchemySkillRepository
from infrastructure.database.repositories.sqlalchemy_technology_repo import (
    SQLAlchemyTechnologyRepository,
)
from infrastructure.database.repositories.sqlalchemy_work_experience_repo import (
    SQLAlchemyWorkExperienceRepository,
)


class SQLAlchemyUnitOfWork:
    """Unit of Work implementation using SQLAlchemy."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None

    def _require_session(self) -> AsyncSession:
        if not self._session:
            raise RuntimeError("UnitOfWork not initialized. Use as context manager.")
        return self._session

    @property
    def headers(self) -> SQLAlchemyHeaderRepository:
        """Get header repository."""
        return SQLAlchemyHeaderRepository(self._require_session())

    @property
    def introductions(self) -> SQLAlchemyIntroductionRepository:
        """Get introduction repository."""
        return SQLAlchemyIntroductionRepository(self._require_session())

    @property
    def project_details(self) -> SQLAlchemyProjectDetailsRepository:
        """Get section copy repository."""
        return SQLAlchemyProjectDetailsRepository(self._require_session())

    @property
    def skills(self) -> SQLAlchemySkillRepository:
        """Get skill repository."""
        return SQLAlchemySkillRepository(self._require_session())

    @property
    def projects(self) -> SQLAlchemyProjectRepository:
        """Get project repository."""
        return SQLAlchemyProjectRepository(self._require_session())

    @property
    def services(self) -> SQLAlchemyServiceRepository:
        """Get service offering repository."""
        return SQLAlchemyServiceRepository(self._require_session())

    @property
    def work_experiences(self) -> SQLAlchemyWorkExperienceRepository:
        """Get work experience repository."""
        return SQLAlchemyWorkExperienceRepository(self._require_session())

    @property
    def technologies(self) -> SQLAlchemyTechnologyRepository:
        """Get technology repository."""
        return SQLAlchemyTechnologyRepository(self._require_session())

    @property
    def blobs(self) -> SQLAlchemyBlobRepository:
        """Get stored blob repository."""
        return SQLAlchemyBlobRepository(self._require_session())

    async def commit(self) -> None:
        """Commit the current transaction."""
        if self._session:
            await self._session.commit()

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        if self._session:
            await self._session.rollback()

    async def __aenter__(self) -> "SQLAlchemyUnitOfWork":
        """Enter the context manager and create session."""
        self._session = self._session_factory()
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[Exception],
        exc_tb: Any,
    ) -> None:
        """Exit the context manager and cleanup."""
        if self._session:
            if exc_type:
                await self.rollback()
            await self._session.close()
            self._session = None
