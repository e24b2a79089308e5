"""Unit tests for WorkExperienceService."""

from datetime import datetime
from uuid import UUID, uuid4

import pytest

from core.exceptions import (
    BlobNotFoundError,
    EmptyCollectionError,
    InvalidDateRangeError,
    WorkExperienceNotFoundError,
)
from domain.entities.work_experience import WorkExperience
from domain.services.storage_service import StorageService
from domain.services.work_experience_service import WorkExperienceService
from tests.unit.conftest import FakeUnitOfWork


@pytest.fixture
def service(uow: FakeUnitOfWork, storage: StorageService) -> WorkExperienceService:
    return WorkExperienceService(lambda: uow, storage)


def _experience(icon: str, **overrides: object) -> WorkExperience:
    fields: dict = {
        "icon": icon,
        "workplace": "Acme",
        "work_title": "Engineer",
        "description": "Built things • Shipped things",
        "start_date": datetime(2022, 1, 1),
        "end_date": datetime(2023, 6, 30),
    }
    fields.update(overrides)
    return WorkExperience(**fields)


class TestCreate:
    @pytest.mark.asyncio
    async def test_requires_end_date_for_past_job(
        self, service: WorkExperienceService, uow: FakeUnitOfWork, storage_id: str
    ):
        with pytest.raises(InvalidDateRangeError):
            await service.create(
                icon=storage_id,
                workplace="Acme",
                work_title="Engineer",
                description="Work",
                start_date=datetime(2022, 1, 1),
            )

        uow.work_experiences.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_rejects_end_before_start(
        self, service: WorkExperienceService, storage_id: str
    ):
        with pytest.raises(InvalidDateRangeError):
            await service.create(
                icon=storage_id,
                workplace="Acme",
                work_title="Engineer",
                description="Work",
                start_date=datetime(2022, 1, 1),
                end_date=datetime(2021, 1, 1),
            )

    @pytest.mark.asyncio
    async def test_current_job_hides_end_date(
        self, service: WorkExperienceService, uow: FakeUnitOfWork, storage_id: str
    ):
        uow.work_experiences.create.side_effect = lambda e: e

        result = await service.create(
            icon=storage_id,
            workplace="Acme",
            work_title="Engineer",
            description="Work",
            start_date=datetime(2022, 1, 1),
            end_date=datetime(2024, 1, 1),
            is_current_job=True,
        )

        assert result.experience.end_date == datetime(2024, 1, 1)
        assert result.experience.visible_end_date is None

    @pytest.mark.asyncio
    async def test_icon_must_exist(
        self, service: WorkExperienceService, uow: FakeUnitOfWork, storage_id: str
    ):
        uow.blobs.exists.return_value = False

        with pytest.raises(BlobNotFoundError):
            await service.create(
                icon=storage_id,
                workplace="Acme",
                work_title="Engineer",
                description="Work",
                start_date=datetime(2022, 1, 1),
                is_current_job=True,
            )


class TestUpdate:
    @pytest.mark.asyncio
    async def test_update_latest_changes_only_sent_fields(
        self, service: WorkExperienceService, uow: FakeUnitOfWork, storage_id: str
    ):
        latest = _experience(storage_id)
        uow.work_experiences.get_latest.return_value = latest
        uow.work_experiences.update.side_effect = lambda e: e

        result = await service.update_latest({"work_title": "Senior Engineer"})

        assert result.experience.work_title == "Senior Engineer"
        assert result.experience.workplace == "Acme"
        assert result.experience.end_date == datetime(2023, 6, 30)

    @pytest.mark.asyncio
    async def test_update_latest_on_empty_collection(
        self, service: WorkExperienceService, uow: FakeUnitOfWork
    ):
        uow.work_experiences.get_latest.return_value = None

        with pytest.raises(EmptyCollectionError):
            await service.update_latest({"work_title": "x"})

    @pytest.mark.asyncio
    async def test_clearing_end_date_of_past_job_is_rejected(
        self, service: WorkExperienceService, uow: FakeUnitOfWork, storage_id: str
    ):
        existing = _experience(storage_id)
        uow.work_experiences.get.return_value = existing

        with pytest.raises(InvalidDateRangeError):
            await service.update(existing.id, {"end_date": None})

        assert not uow.committed

    @pytest.mark.asyncio
    async def test_raises_not_found(self, service: WorkExperienceService, uow: FakeUnitOfWork):
        uow.work_experiences.get.return_value = None

        with pytest.raises(WorkExperienceNotFoundError):
            await service.update(uuid4(), {"work_title": "x"})


class TestDelete:
    @pytest.mark.asyncio
    async def test_deletes_icon_blob_with_record(
        self, service: WorkExperienceService, uow: FakeUnitOfWork, storage_id: str
    ):
        existing = _experience(storage_id)
        uow.work_experiences.get.return_value = existing

        deleted_id = await service.delete(existing.id)

        assert deleted_id == existing.id
        uow.blobs.delete.assert_called_once_with(UUID(storage_id))
        uow.work_experiences.delete.assert_called_once_with(existing.id)
        assert uow.committed

    @pytest.mark.asyncio
    async def test_delete_latest_returns_its_id(
        self, service: WorkExperienceService, uow: FakeUnitOfWork, storage_id: str
    ):
        latest = _experience(storage_id)
        uow.work_experiences.get_latest.return_value = latest

        assert await service.delete_latest() == latest.id
        uow.blobs.delete.assert_called_once_with(UUID(storage_id))

    @pytest.mark.asyncio
    async def test_delete_latest_on_empty_collection(
        self, service: WorkExperienceService, uow: FakeUnitOfWork
    ):
        uow.work_experiences.get_latest.return_value = None

        with pytest.raises(EmptyCollectionError):
            await service.delete_latest()

        uow.blobs.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_raises_not_found(self, service: WorkExperienceService, uow: FakeUnitOfWork):
        uow.work_experiences.get.return_value = None

        with pytest.raises(WorkExperienceNotFoundError):
            await service.delete(uuid4())
