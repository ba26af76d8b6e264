"""Repository DTOs."""

from apps.chatops.application.repository.dto.repository_details import RepositoryDetails

__all__ = ["RepositoryDetails"]
