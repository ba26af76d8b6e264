"""Command services."""

from apps.chatops.application.command.services.command_parser import CommandParser

__all__ = ["CommandParser"]
