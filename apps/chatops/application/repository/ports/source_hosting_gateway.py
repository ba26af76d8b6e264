"""SourceHostingGateway Port.

소스 호스팅 플랫폼(GitHub)에서 저장소 메타데이터를 가져오는 인터페이스입니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from apps.chatops.application.repository.dto import RepositoryDetails


class SourceHostingGateway(Protocol):
    """소스 호스팅 플랫폼 Gateway 인터페이스.

    구현체:
        - GitHubClient (infrastructure/github/)
    """

    async def fetch_repository(self, url: str) -> RepositoryDetails:
        """저장소 이름, 기본 브랜치, 워크플로 목록을 조회합니다.

        Args:
            url: 저장소 URL

        Returns:
            저장소 메타데이터

        Raises:
            EnrichmentError: 플랫폼 연결 실패 또는 거부
        """
        ...
