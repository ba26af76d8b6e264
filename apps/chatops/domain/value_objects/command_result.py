"""CommandResult value object - uniform outcome of a dispatched command."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from apps.chatops.domain.enums import CommandResultStatus


@dataclass(frozen=True)
class CommandResult:
    """커맨드 처리 결과.

    워크플로 트리거 실패도 예외가 아닌 status=error 결과로 표현됩니다.
    details는 파이프라인 선택이 필요할 때 후보 목록을 담습니다.
    """

    status: CommandResultStatus
    message: str
    details: Any = None

    @classmethod
    def success(cls, message: str, details: Any = None) -> CommandResult:
        return cls(status=CommandResultStatus.SUCCESS, message=message, details=details)

    @classmethod
    def error(cls, message: str, details: Any = None) -> CommandResult:
        return cls(status=CommandResultStatus.ERROR, message=message, details=details)

    @classmethod
    def select_pipeline(cls, message: str, details: Any) -> CommandResult:
        return cls(
            status=CommandResultStatus.SELECT_PIPELINE,
            message=message,
            details=details,
        )

    @property
    def is_success(self) -> bool:
        return self.status == CommandResultStatus.SUCCESS
