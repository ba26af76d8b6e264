"""Repository HTTP schemas."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from apps.chatops.presentation.http.schemas.command import PipelineResponse


class RepositoryResponse(BaseModel):
    """저장소 응답 스키마."""

    id: UUID | None = Field(None, description="저장소 ID")
    name: str = Field(..., description="저장소 이름")
    url: str = Field(..., description="저장소 URL")
    default_branch: str = Field("", description="기본 브랜치")
    added_by: str = Field("", description="등록한 사용자")
    added_at: datetime = Field(..., description="등록 시각")
    pipelines: list[PipelineResponse] = Field(default_factory=list, description="파이프라인 목록")

    model_config = {"from_attributes": True}


class RepositoryListResponse(BaseModel):
    """저장소 목록 응답 스키마."""

    repositories: list[RepositoryResponse] = Field(..., description="저장소 목록")
    total: int = Field(..., description="총 개수")


class PipelineListResponse(BaseModel):
    """파이프라인 목록 응답 스키마."""

    repository: str = Field(..., description="저장소 이름")
    pipelines: list[PipelineResponse] = Field(..., description="파이프라인 목록")


class SetDefaultPipelineRequest(BaseModel):
    """기본 파이프라인 변경 요청 스키마."""

    pipeline_name: str = Field(..., min_length=1, description="기본으로 지정할 파이프라인 이름")
