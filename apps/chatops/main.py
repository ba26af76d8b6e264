"""ChatOps API - FastAPI application entry point.

Slack 커맨드를 받아 저장소를 등록하거나 GitHub Actions 워크플로를 실행합니다.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from apps.chatops.infrastructure.persistence_postgres.session import dispose_engine
from apps.chatops.presentation.http.controllers import (
    health_router,
    repositories_router,
    slack_router,
)
from apps.chatops.presentation.http.errors.handlers import register_exception_handlers
from apps.chatops.presentation.http.middleware.request_logging import register_request_logging
from apps.chatops.setup.config import get_settings
from apps.chatops.setup.dependencies import get_github_client
from apps.chatops.setup.logging import setup_logging

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 수명주기 관리."""
    # Startup
    setup_logging(settings.log_level, json_format=settings.log_json)
    logger.info(f"Starting {settings.app_name} ({settings.environment})")
    if get_github_client() is None:
        logger.warning("GitHub token not configured; repository lookup and workflow triggers are disabled")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")
    github_client = get_github_client()
    if github_client is not None:
        await github_client.close()
    await dispose_engine()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션을 생성합니다."""
    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        description="ChatOps command dispatch and workflow trigger API",
        docs_url="/api/v1/chatops/docs",
        openapi_url="/api/v1/chatops/openapi.json",
        redoc_url="/api/v1/chatops/redoc",
        lifespan=lifespan,
    )

    register_exception_handlers(app)
    register_request_logging(app)

    # 라우터 등록
    app.include_router(health_router)  # /health, /ping (prefix 없음)
    app.include_router(slack_router, prefix="/api/v1")
    app.include_router(repositories_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.chatops.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.environment == "local",
    )
