"""RepositoryResolver 단위 테스트."""

from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from apps.chatops.application.common.exceptions import ValidationError
from apps.chatops.application.repository.dto import RepositoryDetails
from apps.chatops.application.repository.exceptions import (
    EnrichmentError,
    IntegrationNotConfiguredError,
    RepositoryNameRequiredError,
)
from apps.chatops.application.repository.services import RepositoryResolver
from apps.chatops.domain.entities import Pipeline, Repository
from apps.chatops.domain.exceptions import (
    PipelineNotFoundError,
    RepositoryAlreadyExistsError,
    RepositoryNotFoundError,
)
from apps.chatops.tests.fakes import FakeSourceHosting, InMemoryRepositoryGateway


def _stub(url: str) -> Repository:
    return Repository(
        url=url,
        added_by="U123",
        added_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
    )


def _resolver(
    gateway: InMemoryRepositoryGateway,
    tx: AsyncMock,
    source_hosting: FakeSourceHosting | None = None,
) -> RepositoryResolver:
    return RepositoryResolver(
        query_gateway=gateway,
        command_gateway=gateway,
        transaction_manager=tx,
        source_hosting=source_hosting,
    )


@pytest.fixture
def github_details(ci_pipeline: Pipeline, release_pipeline: Pipeline) -> RepositoryDetails:
    return RepositoryDetails(
        name="widgets",
        default_branch="main",
        url="https://github.com/acme/widgets",
        pipelines=[ci_pipeline, release_pipeline],
    )


class TestAddRepository:
    """저장소 등록 테스트."""

    @pytest.mark.asyncio
    async def test_enriches_github_repository(
        self,
        repository_gateway: InMemoryRepositoryGateway,
        transaction_manager: AsyncMock,
        github_details: RepositoryDetails,
    ) -> None:
        """GitHub URL은 정식 이름/브랜치/파이프라인으로 채워짐."""
        source = FakeSourceHosting(details=github_details)
        resolver = _resolver(repository_gateway, transaction_manager, source)

        saved = await resolver.add_repository(_stub("https://github.com/acme/widgets"))

        assert saved.name == "widgets"
        assert saved.default_branch == "main"
        assert [p.name for p in saved.pipelines] == ["CI", "Release"]
        assert saved.added_by == "U123"
        assert source.requested_urls == ["https://github.com/acme/widgets"]
        transaction_manager.commit.assert_awaited_once()

        stored = await repository_gateway.get_by_name("widgets")
        assert stored is not None
        assert stored.url == "https://github.com/acme/widgets"

    @pytest.mark.asyncio
    async def test_enrichment_failure_writes_nothing(
        self,
        repository_gateway: InMemoryRepositoryGateway,
        transaction_manager: AsyncMock,
    ) -> None:
        source = FakeSourceHosting(error=EnrichmentError("https://github.com/acme/widgets", "API error: 404"))
        resolver = _resolver(repository_gateway, transaction_manager, source)

        with pytest.raises(EnrichmentError):
            await resolver.add_repository(_stub("https://github.com/acme/widgets"))

        assert len(repository_gateway) == 0
        transaction_manager.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_github_url_without_integration(
        self,
        repository_gateway: InMemoryRepositoryGateway,
        transaction_manager: AsyncMock,
    ) -> None:
        resolver = _resolver(repository_gateway, transaction_manager)

        with pytest.raises(IntegrationNotConfiguredError):
            await resolver.add_repository(_stub("https://github.com/acme/widgets"), name="widgets")

        assert len(repository_gateway) == 0

    @pytest.mark.asyncio
    async def test_non_enrichable_url_uses_explicit_name(
        self,
        repository_gateway: InMemoryRepositoryGateway,
        transaction_manager: AsyncMock,
    ) -> None:
        resolver = _resolver(repository_gateway, transaction_manager)
        stub = _stub("https://git.example.com/team/tools.git")
        stub.default_branch = "develop"

        saved = await resolver.add_repository(stub, name="tools")

        assert saved.name == "tools"
        assert saved.default_branch == "develop"
        assert saved.pipelines == []
        transaction_manager.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_non_enrichable_url_requires_name(
        self,
        repository_gateway: InMemoryRepositoryGateway,
        transaction_manager: AsyncMock,
    ) -> None:
        resolver = _resolver(repository_gateway, transaction_manager)

        with pytest.raises(RepositoryNameRequiredError) as exc_info:
            await resolver.add_repository(_stub("https://git.example.com/team/tools.git"))

        assert isinstance(exc_info.value, ValidationError)
        assert len(repository_gateway) == 0

    @pytest.mark.asyncio
    async def test_duplicate_name_rolls_back(
        self,
        transaction_manager: AsyncMock,
    ) -> None:
        """같은 이름 재등록은 충돌 (먼저 등록한 쪽 유지)."""
        existing = Repository(url="https://git.example.com/a/tools.git", name="tools")
        gateway = InMemoryRepositoryGateway([existing])
        resolver = _resolver(gateway, transaction_manager)

        with pytest.raises(RepositoryAlreadyExistsError):
            await resolver.add_repository(_stub("https://git.example.com/b/tools.git"), name="tools")

        transaction_manager.rollback.assert_awaited_once()
        stored = await gateway.get_by_name("tools")
        assert stored.url == "https://git.example.com/a/tools.git"

    def test_enrichable_hosts_are_configurable(
        self,
        repository_gateway: InMemoryRepositoryGateway,
        transaction_manager: AsyncMock,
    ) -> None:
        resolver = RepositoryResolver(
            repository_gateway,
            repository_gateway,
            transaction_manager,
            enrichable_hosts=["github.example.com"],
        )

        assert resolver.is_enrichable("https://github.example.com/o/r") is True
        assert resolver.is_enrichable("https://github.com/o/r") is False
        assert resolver.is_enrichable("https://github.example.com/o") is False


class TestDirectoryOperations:
    """조회 / 기본 파이프라인 변경 테스트."""

    @pytest.fixture
    def gateway(self, ci_pipeline: Pipeline, release_pipeline: Pipeline) -> InMemoryRepositoryGateway:
        ci_pipeline.is_default = True
        return InMemoryRepositoryGateway(
            [
                Repository(
                    url="https://github.com/acme/widgets",
                    name="widgets",
                    pipelines=[ci_pipeline, release_pipeline],
                ),
                Repository(url="https://git.example.com/a/tools.git", name="tools"),
            ]
        )

    @pytest.mark.asyncio
    async def test_get_repository_not_found(
        self, gateway: InMemoryRepositoryGateway, transaction_manager: AsyncMock
    ) -> None:
        resolver = _resolver(gateway, transaction_manager)

        with pytest.raises(RepositoryNotFoundError) as exc_info:
            await resolver.get_repository("missing")

        assert exc_info.value.message == "Repository not found: missing"

    @pytest.mark.asyncio
    async def test_list_and_pipelines(
        self, gateway: InMemoryRepositoryGateway, transaction_manager: AsyncMock
    ) -> None:
        resolver = _resolver(gateway, transaction_manager)

        repositories = await resolver.list_repositories()
        pipelines = await resolver.get_repository_pipelines("widgets")

        assert [r.name for r in repositories] == ["tools", "widgets"]
        assert [p.name for p in pipelines] == ["CI", "Release"]

    @pytest.mark.asyncio
    async def test_set_default_pipeline(
        self, gateway: InMemoryRepositoryGateway, transaction_manager: AsyncMock
    ) -> None:
        resolver = _resolver(gateway, transaction_manager)

        updated = await resolver.set_default_pipeline("widgets", "Release")

        assert [p.name for p in updated.default_pipelines] == ["Release"]
        assert gateway.locked == ["widgets"]
        transaction_manager.commit.assert_awaited_once()

        stored = await gateway.get_by_name("widgets")
        assert [(p.name, p.is_default) for p in stored.pipelines] == [
            ("CI", False),
            ("Release", True),
        ]

    @pytest.mark.asyncio
    async def test_set_default_unknown_pipeline(
        self, gateway: InMemoryRepositoryGateway, transaction_manager: AsyncMock
    ) -> None:
        resolver = _resolver(gateway, transaction_manager)

        with pytest.raises(PipelineNotFoundError):
            await resolver.set_default_pipeline("widgets", "Deploy")

        transaction_manager.rollback.assert_awaited_once()
        stored = await gateway.get_by_name("widgets")
        assert [p.name for p in stored.default_pipelines] == ["CI"]

    @pytest.mark.asyncio
    async def test_set_default_unknown_repository(
        self, gateway: InMemoryRepositoryGateway, transaction_manager: AsyncMock
    ) -> None:
        resolver = _resolver(gateway, transaction_manager)

        with pytest.raises(RepositoryNotFoundError):
            await resolver.set_default_pipeline("missing", "CI")
