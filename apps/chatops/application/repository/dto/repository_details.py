"""Repository details fetched from the source-hosting platform."""

from __future__ import annotations

from dataclasses import dataclass, field

from apps.chatops.domain.entities.repository import Pipeline


@dataclass
class RepositoryDetails:
    """소스 호스팅 플랫폼에서 조회한 저장소 메타데이터."""

    name: str
    default_branch: str
    url: str | None = None
    pipelines: list[Pipeline] = field(default_factory=list)
