"""Repository registration exceptions."""

from apps.chatops.application.common.exceptions.base import (
    ApplicationError,
    ValidationError,
)


class EnrichmentError(ApplicationError):
    """소스 호스팅 플랫폼 조회 실패 (저장소 등록 중단)."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch repository details for {url}: {reason}")


class IntegrationNotConfiguredError(ApplicationError):
    """외부 플랫폼 연동이 설정되지 않음."""

    def __init__(self, integration: str = "GitHub") -> None:
        self.integration = integration
        super().__init__(f"{integration} integration is not configured")


class RepositoryNameRequiredError(ValidationError):
    """메타데이터를 조회할 수 없는 URL에 name 파라미터가 없음."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(
            f"Repository name is required for {url} (use: manage <url> name=<name>)"
        )


__all__ = [
    "EnrichmentError",
    "IntegrationNotConfiguredError",
    "RepositoryNameRequiredError",
]
