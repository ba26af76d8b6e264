"""Slack request signature verification.

Slack 서명 규칙:
    base = "v0:" + timestamp + ":" + body
    signature = "v0=" + hex(HMAC-SHA256(signing_secret, base))
"""

from __future__ import annotations

import hashlib
import hmac
import logging
import time
from typing import Callable

from apps.chatops.application.auth.exceptions import AuthError

logger = logging.getLogger(__name__)

SIGNATURE_VERSION = "v0"
DEFAULT_TOLERANCE_SECONDS = 300


class SlackSignatureVerifier:
    """Slack 요청 서명 검증기.

    RequestVerifier 구현체. CPU 연산만 수행합니다.
    """

    def __init__(
        self,
        signing_secret: str,
        *,
        tolerance_seconds: int = DEFAULT_TOLERANCE_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """
        Args:
            signing_secret: Slack 앱 signing secret
            tolerance_seconds: 허용 시간 오차 (재전송 방지 윈도우)
            clock: 현재 Unix 시각 제공자 (테스트용)
        """
        self._secret = signing_secret.encode("utf-8")
        self._tolerance = tolerance_seconds
        self._clock = clock

    def compute_signature(self, timestamp: str, body: bytes) -> str:
        """서명 문자열을 계산합니다."""
        base = f"{SIGNATURE_VERSION}:{timestamp}:".encode("utf-8") + body
        digest = hmac.new(self._secret, base, hashlib.sha256).hexdigest()
        return f"{SIGNATURE_VERSION}={digest}"

    def verify(self, body: bytes, timestamp: str | None, signature: str | None) -> None:
        """요청을 검증합니다.

        signing secret이 비어 있으면 모든 요청을 거부합니다.

        Raises:
            AuthError: secret 미설정, 타임스탬프 파싱 실패, 허용 시간 초과, 서명 불일치
        """
        if not self._secret:
            logger.error("Slack signing secret is not configured")
            raise AuthError("signing secret not configured")

        try:
            ts = int(timestamp or "")
        except ValueError:
            raise AuthError("invalid timestamp") from None

        if abs(self._clock() - ts) > self._tolerance:
            logger.warning("Rejected stale Slack request", extra={"timestamp": ts})
            raise AuthError("stale request")

        expected = self.compute_signature(timestamp or "", body)
        if not signature or not hmac.compare_digest(
            expected.encode("utf-8"), signature.encode("utf-8")
        ):
            logger.warning("Rejected Slack request with invalid signature")
            raise AuthError("invalid signature")
