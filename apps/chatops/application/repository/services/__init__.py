"""Repository services."""

from apps.chatops.application.repository.services.repository_resolver import (
    DEFAULT_ENRICHABLE_HOSTS,
    RepositoryResolver,
)

__all__ = ["DEFAULT_ENRICHABLE_HOSTS", "RepositoryResolver"]
