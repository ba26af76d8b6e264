"""SQLAlchemy implementation of repository directory gateways."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Mapping
from uuid import uuid4

from sqlalchemy import insert, select, update
from sqlalchemy.exc import IntegrityError

from apps.chatops.domain.entities import Pipeline, Repository
from apps.chatops.domain.exceptions import (
    RepositoryAlreadyExistsError,
    RepositoryNotFoundError,
)
from apps.chatops.infrastructure.persistence_postgres.mappings import repositories_table

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


def row_to_repository(row: Mapping[str, Any]) -> Repository:
    """DB 행을 Repository 엔티티로 변환합니다."""
    return Repository(
        id=row["id"],
        name=row["name"],
        url=row["url"],
        default_branch=row["default_branch"] or "",
        added_by=row["added_by"] or "",
        added_at=row["added_at"],
        pipelines=[Pipeline.from_dict(item) for item in (row["pipelines"] or [])],
    )


def serialize_pipelines(repository: Repository) -> list[dict]:
    return [pipeline.to_dict() for pipeline in repository.pipelines]


class SqlaRepositoryQueryGateway:
    """저장소 조회 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: "AsyncSession") -> None:
        self._session = session

    async def get_by_name(self, name: str, *, for_update: bool = False) -> Repository | None:
        """이름으로 저장소를 조회합니다."""
        stmt = select(repositories_table).where(repositories_table.c.name == name)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self._session.execute(stmt)
        row = result.mappings().one_or_none()
        return row_to_repository(row) if row is not None else None

    async def list_all(self) -> list[Repository]:
        """모든 저장소를 이름순으로 조회합니다."""
        stmt = select(repositories_table).order_by(repositories_table.c.name)
        result = await self._session.execute(stmt)
        return [row_to_repository(row) for row in result.mappings().all()]


class SqlaRepositoryCommandGateway:
    """저장소 수정 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: "AsyncSession") -> None:
        self._session = session

    async def add(self, repository: Repository) -> Repository:
        """새 저장소를 저장합니다.

        name UNIQUE 제약 위반은 RepositoryAlreadyExistsError로 변환합니다.
        """
        if repository.id is None:
            repository.id = uuid4()

        stmt = insert(repositories_table).values(
            id=repository.id,
            name=repository.name,
            url=repository.url,
            default_branch=repository.default_branch,
            added_by=repository.added_by,
            added_at=repository.added_at,
            pipelines=serialize_pipelines(repository),
        )
        try:
            await self._session.execute(stmt)
            await self._session.flush()
        except IntegrityError as e:
            logger.info(
                "Repository name conflict",
                extra={"repository": repository.name},
            )
            raise RepositoryAlreadyExistsError(repository.name) from e
        return repository

    async def update(self, repository: Repository) -> Repository:
        """url, 기본 브랜치, 파이프라인 목록을 한 번의 UPDATE로 갱신합니다."""
        stmt = (
            update(repositories_table)
            .where(repositories_table.c.name == repository.name)
            .values(
                url=repository.url,
                default_branch=repository.default_branch,
                pipelines=serialize_pipelines(repository),
            )
        )
        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            raise RepositoryNotFoundError(repository.name)
        await self._session.flush()
        return repository
