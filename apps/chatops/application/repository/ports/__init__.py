"""Repository ports."""

from apps.chatops.application.repository.ports.repository_gateway import (
    RepositoryCommandGateway,
    RepositoryQueryGateway,
)
from apps.chatops.application.repository.ports.source_hosting_gateway import (
    SourceHostingGateway,
)

__all__ = [
    "RepositoryCommandGateway",
    "RepositoryQueryGateway",
    "SourceHostingGateway",
]
