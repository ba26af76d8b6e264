"""Slack request signature dependency.

본문 파싱 전에 서명을 검증합니다. Starlette는 request.body()를 캐시하므로
이후 핸들러에서 같은 본문을 다시 읽을 수 있습니다.
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends, Header, Request

from apps.chatops.application.auth.exceptions import AuthError
from apps.chatops.application.auth.ports import RequestVerifier
from apps.chatops.setup.dependencies import get_request_verifier

logger = logging.getLogger(__name__)


async def verified_body(
    request: Request,
    verifier: RequestVerifier = Depends(get_request_verifier),
    x_slack_request_timestamp: Annotated[
        str | None, Header(alias="X-Slack-Request-Timestamp")
    ] = None,
    x_slack_signature: Annotated[str | None, Header(alias="X-Slack-Signature")] = None,
) -> bytes:
    """서명이 검증된 원본 요청 본문을 반환합니다."""
    body = await request.body()
    try:
        verifier.verify(body, x_slack_request_timestamp, x_slack_signature)
    except AuthError as e:
        logger.warning(
            "Slack signature rejected",
            extra={"reason": e.reason, "path": request.url.path},
        )
        raise
    return body


VerifiedBody = Annotated[bytes, Depends(verified_body)]
