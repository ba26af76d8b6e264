"""Domain Exceptions."""

from apps.chatops.domain.exceptions.base import DomainError, NotFoundError
from apps.chatops.domain.exceptions.repository import (
    PipelineNotFoundError,
    RepositoryAlreadyExistsError,
    RepositoryNotFoundError,
)

__all__ = [
    "DomainError",
    "NotFoundError",
    "RepositoryNotFoundError",
    "PipelineNotFoundError",
    "RepositoryAlreadyExistsError",
]
