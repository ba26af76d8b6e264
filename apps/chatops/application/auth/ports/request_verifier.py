"""RequestVerifier Port.

채팅 플랫폼에서 들어온 요청의 진위를 확인하는 인터페이스입니다.
"""

from __future__ import annotations

from typing import Protocol


class RequestVerifier(Protocol):
    """인바운드 요청 검증 인터페이스.

    구현체:
        - SlackSignatureVerifier (infrastructure/security/)
    """

    def verify(self, body: bytes, timestamp: str | None, signature: str | None) -> None:
        """요청 본문과 서명 헤더를 검증합니다.

        Args:
            body: 원본 요청 본문
            timestamp: 요청 타임스탬프 헤더 값
            signature: 서명 헤더 값

        Raises:
            AuthError: 타임스탬프 오류, 만료, 서명 불일치
        """
        ...
