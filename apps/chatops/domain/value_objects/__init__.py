"""Domain value objects."""

from apps.chatops.domain.value_objects.command_result import CommandResult
from apps.chatops.domain.value_objects.repository_locator import RepositoryLocator
from apps.chatops.domain.value_objects.workflow_trigger import (
    VERIFICATION_TRIGGER,
    WorkflowTrigger,
)

__all__ = [
    "CommandResult",
    "RepositoryLocator",
    "VERIFICATION_TRIGGER",
    "WorkflowTrigger",
]
