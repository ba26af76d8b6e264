"""WorkflowTrigger value object."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

VERIFICATION_TRIGGER = "verification"


@dataclass(frozen=True)
class WorkflowTrigger:
    """CI 워크플로 실행 요청 (저장되지 않음).

    Attributes:
        repository: 저장소 이름
        workflow: 실행할 파이프라인 경로
        type: 트리거 종류 라벨
        parameters: 워크플로 입력값
        owner: 저장소 소유 계정 (GitHub owner)
        ref: 실행 대상 git ref (None이면 클라이언트 기본값)
    """

    repository: str
    workflow: str
    type: str = VERIFICATION_TRIGGER
    parameters: Mapping[str, str] = field(default_factory=dict)
    owner: str | None = None
    ref: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))
