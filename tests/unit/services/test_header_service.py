"""Unit tests for HeaderService and IntroductionService."""

from uuid import uuid4

import pytest

from core.exceptions import (
    DomainValidationError,
    HeaderNotFoundError,
    IntroductionNotFoundError,
)
from domain.entities.header import Header, Introduction
from domain.services.header_service import HeaderService, IntroductionService
from tests.unit.conftest import FakeUnitOfWork


@pytest.fixture
def headers(uow: FakeUnitOfWork) -> HeaderService:
    return HeaderService(lambda: uow)


@pytest.fixture
def introductions(uow: FakeUnitOfWork) -> IntroductionService:
    return IntroductionService(lambda: uow)


class TestHeaderCreate:
    @pytest.mark.asyncio
    async def test_creates_and_commits(self, headers: HeaderService, uow: FakeUnitOfWork):
        uow.headers.create.side_effect = lambda header: header

        result = await headers.create(name="Jane Doe", description="Developer")

        assert result.name == "Jane Doe"
        assert uow.committed


class TestHeaderGetCurrent:
    @pytest.mark.asyncio
    async def test_returns_latest(self, headers: HeaderService, uow: FakeUnitOfWork):
        latest = Header(name="Newest", description="Most recent")
        uow.headers.get_latest.return_value = latest

        assert await headers.get_current() is latest

    @pytest.mark.asyncio
    async def test_returns_none_when_empty(self, headers: HeaderService, uow: FakeUnitOfWork):
        uow.headers.get_latest.return_value = None

        assert await headers.get_current() is None


class TestHeaderUpdate:
    @pytest.mark.asyncio
    async def test_only_sent_fields_change(self, headers: HeaderService, uow: FakeUnitOfWork):
        header = Header(name="Original", description="Keep me")
        uow.headers.get.return_value = header
        uow.headers.update.side_effect = lambda h: h

        result = await headers.update(header.id, {"name": "Renamed"})

        assert result.name == "Renamed"
        assert result.description == "Keep me"
        assert uow.committed

    @pytest.mark.asyncio
    async def test_raises_not_found(self, headers: HeaderService, uow: FakeUnitOfWork):
        uow.headers.get.return_value = None

        with pytest.raises(HeaderNotFoundError):
            await headers.update(uuid4(), {"name": "x"})

    @pytest.mark.asyncio
    async def test_rejects_unknown_field(self, headers: HeaderService, uow: FakeUnitOfWork):
        header = Header(name="Original", description="Keep me")
        uow.headers.get.return_value = header

        with pytest.raises(DomainValidationError):
            await headers.update(header.id, {"id": uuid4()})

        assert not uow.committed


class TestHeaderDelete:
    @pytest.mark.asyncio
    async def test_deletes(self, headers: HeaderService, uow: FakeUnitOfWork):
        uow.headers.delete.return_value = True

        assert await headers.delete(uuid4()) is True
        assert uow.committed

    @pytest.mark.asyncio
    async def test_raises_not_found(self, headers: HeaderService, uow: FakeUnitOfWork):
        uow.headers.delete.return_value = False

        with pytest.raises(HeaderNotFoundError):
            await headers.delete(uuid4())


class TestIntroduction:
    @pytest.mark.asyncio
    async def test_get_by_id_raises_not_found(
        self, introductions: IntroductionService, uow: FakeUnitOfWork
    ):
        uow.introductions.get.return_value = None

        with pytest.raises(IntroductionNotFoundError) as exc_info:
            await introductions.get_by_id(uuid4())

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_partial_update(self, introductions: IntroductionService, uow: FakeUnitOfWork):
        intro = Introduction(title="Hello", header="About me", description="Long text")
        uow.introductions.get.return_value = intro
        uow.introductions.update.side_effect = lambda i: i

        result = await introductions.update(intro.id, {"header": "Who I am"})

        assert result.header == "Who I am"
        assert result.title == "Hello"
        assert result.description == "Long text"
