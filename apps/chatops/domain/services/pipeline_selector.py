"""Pipeline selection decision procedure.

저장소의 파이프라인 목록만 보고 자동 실행 여부를 결정합니다. I/O 없음.

결정표:
    - 파이프라인 없음          → NoPipelines
    - 기본값이 정확히 하나      → RunPipeline
    - 기본값이 없거나 둘 이상   → AskUser (임의로 고르지 않음)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

from apps.chatops.domain.entities.repository import Pipeline


@dataclass(frozen=True)
class NoPipelines:
    """실행할 파이프라인이 없음."""


@dataclass(frozen=True)
class RunPipeline:
    """기본 파이프라인을 실행."""

    pipeline: Pipeline


@dataclass(frozen=True)
class AskUser:
    """사용자에게 선택을 요청."""

    pipelines: tuple[Pipeline, ...]


PipelineDecision = Union[NoPipelines, RunPipeline, AskUser]


class PipelineSelector:
    """파이프라인 선택 도메인 서비스."""

    def select(self, pipelines: Sequence[Pipeline]) -> PipelineDecision:
        if not pipelines:
            return NoPipelines()

        defaults = [p for p in pipelines if p.is_default]
        if len(defaults) == 1:
            return RunPipeline(defaults[0])

        return AskUser(tuple(pipelines))
