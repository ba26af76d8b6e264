"""Repository Resolver.

저장소 디렉터리(영속 저장소)를 감싸고, 최초 등록 시 소스 호스팅 플랫폼에서
메타데이터를 보강합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from apps.chatops.application.repository.exceptions import (
    IntegrationNotConfiguredError,
    RepositoryNameRequiredError,
)
from apps.chatops.domain.exceptions import (
    DomainError,
    RepositoryNotFoundError,
)
from apps.chatops.domain.value_objects import RepositoryLocator

if TYPE_CHECKING:
    from apps.chatops.application.common.ports import TransactionManager
    from apps.chatops.application.repository.ports import (
        RepositoryCommandGateway,
        RepositoryQueryGateway,
        SourceHostingGateway,
    )
    from apps.chatops.domain.entities import Pipeline, Repository

logger = logging.getLogger(__name__)

DEFAULT_ENRICHABLE_HOSTS: tuple[str, ...] = ("github.com",)


class RepositoryResolver:
    """저장소 등록/조회 서비스.

    Dependencies:
        - query_gateway / command_gateway: 저장소 디렉터리
        - transaction_manager: 커밋/롤백
        - source_hosting: GitHub 연동 (없을 수 있음)
    """

    def __init__(
        self,
        query_gateway: "RepositoryQueryGateway",
        command_gateway: "RepositoryCommandGateway",
        transaction_manager: "TransactionManager",
        source_hosting: "SourceHostingGateway | None" = None,
        enrichable_hosts: Sequence[str] = DEFAULT_ENRICHABLE_HOSTS,
    ) -> None:
        self._query = query_gateway
        self._command = command_gateway
        self._tx = transaction_manager
        self._source_hosting = source_hosting
        self._enrichable_hosts = tuple(enrichable_hosts)

    def is_enrichable(self, url: str) -> bool:
        """소스 호스팅 플랫폼에서 메타데이터를 가져올 수 있는 URL인지 확인합니다."""
        locator = RepositoryLocator.parse(url)
        return locator is not None and locator.is_hosted_on(self._enrichable_hosts)

    async def add_repository(self, repository: "Repository", *, name: str | None = None) -> "Repository":
        """저장소를 등록합니다.

        보강 가능한 URL이면 플랫폼의 정식 이름/기본 브랜치/파이프라인으로
        채운 뒤 저장합니다. 보강이 실패하면 아무것도 저장하지 않습니다.

        Args:
            repository: url, added_by, added_at이 채워진 저장소 스텁
            name: 보강할 수 없는 URL에 사용할 명시적 이름

        Returns:
            저장된 저장소 (name이 채워짐)

        Raises:
            IntegrationNotConfiguredError: GitHub URL인데 연동이 없음
            EnrichmentError: 메타데이터 조회 실패
            RepositoryNameRequiredError: 보강 불가 URL에 이름 없음
            RepositoryAlreadyExistsError: 같은 이름이 이미 등록됨
        """
        if self.is_enrichable(repository.url):
            if self._source_hosting is None:
                raise IntegrationNotConfiguredError()

            details = await self._source_hosting.fetch_repository(repository.url)
            repository.name = details.name
            repository.default_branch = details.default_branch
            repository.pipelines = list(details.pipelines)
        else:
            explicit_name = name or repository.name
            if not explicit_name:
                raise RepositoryNameRequiredError(repository.url)
            repository.name = explicit_name

        try:
            saved = await self._command.add(repository)
            await self._tx.commit()
        except DomainError:
            await self._tx.rollback()
            raise

        logger.info(
            "Repository added",
            extra={
                "repository": saved.name,
                "added_by": saved.added_by,
                "pipeline_count": len(saved.pipelines),
            },
        )
        return saved

    async def get_repository(self, name: str) -> "Repository":
        """이름으로 저장소를 조회합니다.

        Raises:
            RepositoryNotFoundError: 등록되지 않은 저장소
        """
        repository = await self._query.get_by_name(name)
        if repository is None:
            raise RepositoryNotFoundError(name)
        return repository

    async def list_repositories(self) -> list["Repository"]:
        return await self._query.list_all()

    async def get_repository_pipelines(self, name: str) -> list["Pipeline"]:
        repository = await self.get_repository(name)
        return repository.pipelines

    async def set_default_pipeline(self, repository_name: str, pipeline_name: str) -> "Repository":
        """기본 파이프라인을 변경합니다.

        행을 잠근 상태에서 플래그를 바꾸고 한 번의 UPDATE로 저장합니다.

        Raises:
            RepositoryNotFoundError: 등록되지 않은 저장소
            PipelineNotFoundError: 저장소에 없는 파이프라인
        """
        repository = await self._query.get_by_name(repository_name, for_update=True)
        if repository is None:
            raise RepositoryNotFoundError(repository_name)

        try:
            repository.mark_default_pipeline(pipeline_name)
            updated = await self._command.update(repository)
            await self._tx.commit()
        except DomainError:
            await self._tx.rollback()
            raise

        logger.info(
            "Default pipeline changed",
            extra={"repository": repository_name, "pipeline": pipeline_name},
        )
        return updated
