"""HTTP request logging middleware.

요청마다 request_id를 부여하고, 완료 시 method/path/status/duration을 한 줄로 기록합니다.
"""

from __future__ import annotations

import logging
import secrets
import time
from typing import Awaitable, Callable

from fastapi import FastAPI, Request, Response

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def _request_id(request: Request) -> str:
    """헤더의 request_id를 사용하고, 없으면 새로 생성합니다."""
    return request.headers.get(REQUEST_ID_HEADER) or secrets.token_hex(8)


async def log_requests(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """요청 처리 결과를 로깅합니다.

    처리되지 않은 예외는 기록 후 그대로 전파합니다.
    """
    request_id = _request_id(request)
    request.state.request_id = request_id
    extra = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "remote_addr": request.client.host if request.client else None,
    }
    start = time.perf_counter()

    try:
        response = await call_next(request)
    except Exception:
        extra["duration_ms"] = round((time.perf_counter() - start) * 1000, 2)
        logger.exception("HTTP request failed", extra=extra)
        raise

    extra["status_code"] = response.status_code
    extra["duration_ms"] = round((time.perf_counter() - start) * 1000, 2)
    logger.info("HTTP request completed", extra=extra)

    response.headers[REQUEST_ID_HEADER] = request_id
    return response


def register_request_logging(app: FastAPI) -> None:
    """요청 로깅 미들웨어를 등록합니다."""
    app.middleware("http")(log_requests)
