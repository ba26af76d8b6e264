"""Domain services."""

from apps.chatops.domain.services.pipeline_selector import (
    AskUser,
    NoPipelines,
    PipelineDecision,
    PipelineSelector,
    RunPipeline,
)

__all__ = [
    "AskUser",
    "NoPipelines",
    "PipelineDecision",
    "PipelineSelector",
    "RunPipeline",
]
