"""Repository domain exceptions."""

from __future__ import annotations

from apps.chatops.domain.exceptions.base import DomainError, NotFoundError


class RepositoryNotFoundError(NotFoundError):
    """등록되지 않은 저장소."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Repository not found: {name}")


class PipelineNotFoundError(NotFoundError):
    """저장소에 없는 파이프라인."""

    def __init__(self, repository_name: str, pipeline_name: str) -> None:
        self.repository_name = repository_name
        self.pipeline_name = pipeline_name
        super().__init__(
            f"Pipeline {pipeline_name} not found in repository {repository_name}"
        )


class RepositoryAlreadyExistsError(DomainError):
    """같은 이름의 저장소가 이미 등록됨."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Repository {name} already exists")
