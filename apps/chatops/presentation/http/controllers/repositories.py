"""Repositories controller - Repository directory endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from apps.chatops.application.repository.services import RepositoryResolver
from apps.chatops.presentation.http.schemas import (
    PipelineListResponse,
    PipelineResponse,
    RepositoryListResponse,
    RepositoryResponse,
    SetDefaultPipelineRequest,
)
from apps.chatops.setup.dependencies import get_repository_resolver

router = APIRouter(prefix="/repositories", tags=["repositories"])


@router.get("", response_model=RepositoryListResponse)
async def list_repositories(
    resolver: RepositoryResolver = Depends(get_repository_resolver),
) -> RepositoryListResponse:
    """등록된 저장소 목록을 조회합니다."""
    repositories = await resolver.list_repositories()
    return RepositoryListResponse(
        repositories=[RepositoryResponse.model_validate(repo) for repo in repositories],
        total=len(repositories),
    )


@router.get("/{name}", response_model=RepositoryResponse)
async def get_repository(
    name: str,
    resolver: RepositoryResolver = Depends(get_repository_resolver),
) -> RepositoryResponse:
    """저장소를 조회합니다."""
    repository = await resolver.get_repository(name)
    return RepositoryResponse.model_validate(repository)


@router.get("/{name}/pipelines", response_model=PipelineListResponse)
async def get_repository_pipelines(
    name: str,
    resolver: RepositoryResolver = Depends(get_repository_resolver),
) -> PipelineListResponse:
    """저장소의 파이프라인 목록을 조회합니다."""
    pipelines = await resolver.get_repository_pipelines(name)
    return PipelineListResponse(
        repository=name,
        pipelines=[PipelineResponse.model_validate(p) for p in pipelines],
    )


@router.put("/{name}/default-pipeline", response_model=RepositoryResponse)
async def set_default_pipeline(
    name: str,
    request: SetDefaultPipelineRequest,
    resolver: RepositoryResolver = Depends(get_repository_resolver),
) -> RepositoryResponse:
    """기본 파이프라인을 변경합니다."""
    repository = await resolver.set_default_pipeline(name, request.pipeline_name)
    return RepositoryResponse.model_validate(repository)
