"""Dispatch commands."""

from apps.chatops.application.dispatch.commands.dispatch_command import (
    DispatchCommandInteractor,
)

__all__ = ["DispatchCommandInteractor"]
