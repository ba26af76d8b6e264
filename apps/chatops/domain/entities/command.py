"""Command entity - a parsed, typed intent from chat or automation."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Mapping
from uuid import UUID, uuid4

from apps.chatops.domain.enums import CommandType


@dataclass(frozen=True)
class CommandOrigin:
    """커맨드 출처.

    사람이 입력한 커맨드는 channel_id를, 워크플로 이벤트로 합성된 커맨드는
    workflow_id/step_id를 가집니다.
    """

    platform: str
    channel_id: str | None = None
    workflow_id: str | None = None
    step_id: str | None = None

    @property
    def is_automation(self) -> bool:
        return self.workflow_id is not None or self.step_id is not None


@dataclass(frozen=True)
class Actor:
    """커맨드를 실행한 사용자.

    permissions는 아직 채워지지 않습니다 (항상 빈 집합).
    """

    user_id: str
    platform: str
    permissions: frozenset[str] = frozenset()


@dataclass(frozen=True)
class Command:
    """커맨드 엔티티.

    생성 이후 변경되지 않습니다. parameters는 읽기 전용 매핑으로 감쌉니다.
    """

    type: CommandType
    parameters: Mapping[str, Any]
    origin: CommandOrigin
    actor: Actor
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))

    def get_parameter(self, key: str) -> Any:
        """파라미터 값을 반환합니다 (없으면 None)."""
        return self.parameters.get(key)
