"""Logging configuration.

로컬 실행은 일반 텍스트 포맷, 클러스터 배포는 ECS 호환 JSON 포맷을 사용합니다.
"""

from __future__ import annotations

import logging
import sys

import ecs_logging

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO", json_format: bool = False) -> None:
    """애플리케이션 로깅을 설정합니다."""
    handler = logging.StreamHandler(sys.stdout)
    if json_format:
        handler.setFormatter(ecs_logging.StdlibFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    # 외부 라이브러리 로그 레벨 조정
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
