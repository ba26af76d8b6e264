"""Repository directory ports (interfaces)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from apps.chatops.domain.entities.repository import Repository


class RepositoryQueryGateway(Protocol):
    """저장소 조회 포트."""

    async def get_by_name(self, name: str, *, for_update: bool = False) -> Repository | None:
        """이름으로 저장소를 조회합니다.

        for_update=True이면 트랜잭션이 끝날 때까지 행을 잠급니다.
        """
        ...

    async def list_all(self) -> list[Repository]:
        """등록된 모든 저장소를 이름순으로 조회합니다."""
        ...


class RepositoryCommandGateway(Protocol):
    """저장소 수정 포트."""

    async def add(self, repository: Repository) -> Repository:
        """새 저장소를 저장합니다.

        Raises:
            RepositoryAlreadyExistsError: 같은 이름의 저장소가 이미 존재
        """
        ...

    async def update(self, repository: Repository) -> Repository:
        """저장소 정보를 갱신합니다.

        Raises:
            RepositoryNotFoundError: 갱신 대상 행이 없음
        """
        ...
