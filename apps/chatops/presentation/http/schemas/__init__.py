"""HTTP request/response schemas."""

from apps.chatops.presentation.http.schemas.command import (
    CommandResultResponse,
    PipelineResponse,
    UrlVerificationResponse,
)
from apps.chatops.presentation.http.schemas.repository import (
    PipelineListResponse,
    RepositoryListResponse,
    RepositoryResponse,
    SetDefaultPipelineRequest,
)

__all__ = [
    "CommandResultResponse",
    "PipelineResponse",
    "UrlVerificationResponse",
    "RepositoryResponse",
    "RepositoryListResponse",
    "PipelineListResponse",
    "SetDefaultPipelineRequest",
]
