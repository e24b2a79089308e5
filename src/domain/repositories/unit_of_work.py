"""Unit of Work protocol."""

from typing import Protocol

from domain.repositories.blob_repository import IBlobRepository
from domain.repositories.header_repository import IHeaderRepository, IIntroductionRepository
from domain.repositories.project_details_repository import IProjectDetailsRepository
from domain.repositories.project_repository import IProjectRepository
from domain.repositories.service_repository import IServiceRepository
from domain.repositories.skill_repository import ISkillRepository
from domain.repositories.technology_repository import ITechnologyRepository
from domain.repositories.work_experience_repository import IWorkExperienceRepository


class IUnitOfWork(Protocol):
    """Unit of Work interface for managing transactions."""

    headers: IHeaderRepository
    introductions: IIntroductionRepository
    project_details: IProjectDetailsRepository
    skills: ISkillRepository
    projects: IProjectRepository
    services: IServiceRepository
    work_experiences: IWorkExperienceRepository
    technologies: ITechnologyRepository
    blobs: IBlobRepository

    async def commit(self) -> None:
        """Commit the current transaction."""
        ...

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        ...

    async def __aenter__(self) -> "IUnitOfWork":
        """Enter the context manager."""
        ...

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # type: ignore
        """Exit the context manager."""
        ...
