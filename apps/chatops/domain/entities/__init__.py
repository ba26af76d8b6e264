"""Domain entities."""

from apps.chatops.domain.entities.command import Actor, Command, CommandOrigin
from apps.chatops.domain.entities.repository import Pipeline, Repository

__all__ = ["Actor", "Command", "CommandOrigin", "Pipeline", "Repository"]
