"""Workflow ports."""

from apps.chatops.application.workflow.ports.workflow_trigger_gateway import (
    WorkflowTriggerGateway,
)

__all__ = ["WorkflowTriggerGateway"]
