"""Unit tests for ProjectService."""

import pytest

from core.exceptions import BlobNotFoundError, ProjectNotFoundError
from domain.entities.project import Project
from domain.services.project_service import ProjectService
from domain.services.storage_service import StorageService
from tests.unit.conftest import FakeUnitOfWork


@pytest.fixture
def service(uow: FakeUnitOfWork, storage: StorageService) -> ProjectService:
    return ProjectService(lambda: uow, storage)


def _project(image: str, tag: str = "React, TypeScript") -> Project:
    return Project(
        image=image,
        card_title="Weather",
        card_description="Forecasts",
        tag=tag,
        github_link="https://github.com/jane/weather",
    )


class TestCreate:
    @pytest.mark.asyncio
    async def test_normalizes_image_reference(
        self, service: ProjectService, uow: FakeUnitOfWork, storage_id: str
    ):
        uow.projects.create.side_effect = lambda p: p

        result = await service.create(
            image=storage_id.upper(),
            card_title="Weather",
            card_description="Forecasts",
            tag="React, TypeScript",
            github_link="https://github.com/jane/weather",
        )

        assert result.project.image == storage_id
        assert result.image_url is not None
        assert uow.committed

    @pytest.mark.asyncio
    async def test_rejects_missing_blob(
        self, service: ProjectService, uow: FakeUnitOfWork, storage_id: str
    ):
        uow.blobs.exists.return_value = False

        with pytest.raises(BlobNotFoundError):
            await service.create(
                image=storage_id,
                card_title="Weather",
                card_description="Forecasts",
                tag="React",
                github_link="https://github.com/jane/weather",
            )

        uow.projects.create.assert_not_called()


class TestGetByTag:
    @pytest.mark.asyncio
    async def test_matches_whole_tags_case_insensitively(
        self, service: ProjectService, uow: FakeUnitOfWork, storage_id: str
    ):
        react = _project(storage_id, tag="React, TypeScript")
        preact = _project(storage_id, tag="Preact")
        uow.projects.get_all.return_value = [react, preact]

        result = await service.get_by_tag("react")

        assert [item.project.id for item in result] == [react.id]


class TestUpdate:
    @pytest.mark.asyncio
    async def test_leaves_unsent_fields(
        self, service: ProjectService, uow: FakeUnitOfWork, storage_id: str
    ):
        project = _project(storage_id)
        uow.projects.get.return_value = project
        uow.projects.update.side_effect = lambda p: p

        result = await service.update(project.id, {"card_title": "Weather v2"})

        assert result.project.card_title == "Weather v2"
        assert result.project.tag == "React, TypeScript"
        assert result.project.image == storage_id
        assert result.project.updated_at is not None

    @pytest.mark.asyncio
    async def test_clears_optional_field_with_none(
        self, service: ProjectService, uow: FakeUnitOfWork, storage_id: str
    ):
        project = _project(storage_id)
        project.website_link = "https://weather.example.com"
        uow.projects.get.return_value = project
        uow.projects.update.side_effect = lambda p: p

        result = await service.update(project.id, {"website_link": None})

        assert result.project.website_link is None

    @pytest.mark.asyncio
    async def test_raises_not_found(
        self, service: ProjectService, uow: FakeUnitOfWork, storage_id: str
    ):
        uow.projects.get.return_value = None

        with pytest.raises(ProjectNotFoundError):
            await service.update(_project(storage_id).id, {"card_title": "x"})
