"""GitHub integration."""

from apps.chatops.infrastructure.github.client import GitHubClient

__all__ = ["GitHubClient"]
