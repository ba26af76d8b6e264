"""In-memory test doubles for chatops ports."""

from __future__ import annotations

import copy

from apps.chatops.application.repository.dto import RepositoryDetails
from apps.chatops.domain.entities import Repository
from apps.chatops.domain.exceptions import (
    RepositoryAlreadyExistsError,
    RepositoryNotFoundError,
)
from apps.chatops.domain.value_objects import CommandResult, WorkflowTrigger


class InMemoryRepositoryGateway:
    """저장소 디렉터리 인메모리 구현 (조회/수정 게이트웨이 겸용).

    DB처럼 저장 시점의 사본을 보관하고, 조회마다 새 사본을 돌려줍니다.
    """

    def __init__(self, repositories: list[Repository] | None = None) -> None:
        self._rows: dict[str, Repository] = {}
        self.locked: list[str] = []
        for repository in repositories or []:
            self._rows[repository.name] = copy.deepcopy(repository)

    async def get_by_name(self, name: str, *, for_update: bool = False) -> Repository | None:
        if for_update:
            self.locked.append(name)
        row = self._rows.get(name)
        return copy.deepcopy(row) if row is not None else None

    async def list_all(self) -> list[Repository]:
        return [copy.deepcopy(self._rows[name]) for name in sorted(self._rows)]

    async def add(self, repository: Repository) -> Repository:
        if repository.name in self._rows:
            raise RepositoryAlreadyExistsError(repository.name)
        self._rows[repository.name] = copy.deepcopy(repository)
        return repository

    async def update(self, repository: Repository) -> Repository:
        if repository.name not in self._rows:
            raise RepositoryNotFoundError(repository.name)
        self._rows[repository.name] = copy.deepcopy(repository)
        return repository

    def __len__(self) -> int:
        return len(self._rows)


class FakeSourceHosting:
    """SourceHostingGateway 테스트 구현."""

    def __init__(self, details: RepositoryDetails | None = None, error: Exception | None = None) -> None:
        self.details = details
        self.error = error
        self.requested_urls: list[str] = []

    async def fetch_repository(self, url: str) -> RepositoryDetails:
        self.requested_urls.append(url)
        if self.error is not None:
            raise self.error
        assert self.details is not None
        return self.details


class FakeWorkflowTrigger:
    """WorkflowTriggerGateway 테스트 구현."""

    def __init__(self, result: CommandResult | None = None) -> None:
        self.result = result or CommandResult.success("Workflow triggered successfully")
        self.triggers: list[WorkflowTrigger] = []

    async def trigger_workflow(self, trigger: WorkflowTrigger) -> CommandResult:
        self.triggers.append(trigger)
        return self.result
