"""Dependency injection factories for API v1."""

from datetime import timedelta
from functools import lru_cache
from typing import Callable

from core.config import settings
from domain.services.header_service import HeaderService, IntroductionService
from domain.services.project_details_service import ProjectDetailsService
from domain.services.project_service import ProjectService
from domain.services.service_service import ServiceService
from domain.services.skill_service import SkillService
from domain.services.storage_service import StorageService
from domain.services.technology_service import TechnologyService
from domain.services.work_experience_service import WorkExperienceService
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
from infrastructure.storage.url_signer import JoseUrlSigner


def get_uow_factory() -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory)

    return factory


@lru_cache
def get_storage_service() -> StorageService:
    """Get Storage service instance."""
    return StorageService(
        get_uow_factory(),
        signer=JoseUrlSigner(),
        upload_ttl=timedelta(seconds=settings.upload_url_ttl_seconds),
        download_ttl=timedelta(seconds=settings.download_url_ttl_seconds),
        max_upload_bytes=settings.max_upload_bytes,
    )


@lru_cache
def get_header_service() -> HeaderService:
    """Get Header service instance."""
    return HeaderService(get_uow_factory())


@lru_cache
def get_introduction_service() -> IntroductionService:
    """Get Introduction service instance."""
    return IntroductionService(get_uow_factory())


@lru_cache
def get_project_details_service() -> ProjectDetailsService:
    """Get ProjectDetails service instance."""
    return ProjectDetailsService(get_uow_factory())


@lru_cache
def get_skill_service() -> SkillService:
    """Get Skill service instance."""
    return SkillService(get_uow_factory(), storage=get_storage_service())


@lru_cache
def get_project_service() -> ProjectService:
    """Get Project service instance."""
    return ProjectService(get_uow_factory(), storage=get_storage_service())


@lru_cache
def get_service_service() -> ServiceService:
    """Get Service offering service instance."""
    return ServiceService(get_uow_factory(), storage=get_storage_service())


@lru_cache
def get_work_experience_service() -> WorkExperienceService:
    """Get WorkExperience service instance."""
    return WorkExperienceService(get_uow_factory(), storage=get_storage_service())


@lru_cache
def get_technology_service() -> TechnologyService:
    """Get Technology service instance."""
    return TechnologyService(get_uow_factory(), storage=get_storage_service())
