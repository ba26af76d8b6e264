"""HTTP controllers (routers)."""

from apps.chatops.presentation.http.controllers.health import router as health_router
from apps.chatops.presentation.http.controllers.repositories import (
    router as repositories_router,
)
from apps.chatops.presentation.http.controllers.slack import router as slack_router

__all__ = ["health_router", "repositories_router", "slack_router"]
