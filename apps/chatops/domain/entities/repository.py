"""Repository entity - a registered target and its CI pipelines."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID

from apps.chatops.domain.exceptions.repository import PipelineNotFoundError


@dataclass
class Pipeline:
    """CI 워크플로 정의.

    path는 저장소 내 워크플로 파일 위치입니다 (예: .github/workflows/ci.yml).
    """

    name: str
    path: str
    is_default: bool = False

    def matches(self, key: str) -> bool:
        """이름 또는 경로가 일치하는지 확인합니다."""
        return key in (self.name, self.path)

    def to_dict(self) -> dict:
        return {"name": self.name, "path": self.path, "is_default": self.is_default}

    @classmethod
    def from_dict(cls, data: dict) -> Pipeline:
        return cls(
            name=data["name"],
            path=data["path"],
            is_default=bool(data.get("is_default", False)),
        )


@dataclass
class Repository:
    """저장소 엔티티.

    chatops.repositories 테이블에 저장됩니다. name은 디렉터리 내에서 유일하며
    pipelines가 비어 있는 저장소도 유효합니다.
    """

    url: str
    name: str = ""
    default_branch: str = ""
    added_by: str = ""
    added_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    pipelines: list[Pipeline] = field(default_factory=list)
    id: UUID | None = None

    def find_pipeline(self, key: str) -> Pipeline | None:
        """이름 또는 경로로 파이프라인을 찾습니다."""
        for pipeline in self.pipelines:
            if pipeline.matches(key):
                return pipeline
        return None

    def mark_default_pipeline(self, pipeline_name: str) -> Pipeline:
        """지정한 파이프라인만 기본값으로 표시합니다.

        나머지 파이프라인의 기본값 플래그는 모두 해제됩니다.

        Raises:
            PipelineNotFoundError: 해당 이름의 파이프라인이 없음
        """
        target = next((p for p in self.pipelines if p.name == pipeline_name), None)
        if target is None:
            raise PipelineNotFoundError(self.name, pipeline_name)

        for pipeline in self.pipelines:
            pipeline.is_default = pipeline is target
        return target

    @property
    def default_pipelines(self) -> list[Pipeline]:
        return [p for p in self.pipelines if p.is_default]
