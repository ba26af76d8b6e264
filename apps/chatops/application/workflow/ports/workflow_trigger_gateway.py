"""WorkflowTriggerGateway Port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from apps.chatops.domain.value_objects import CommandResult, WorkflowTrigger


class WorkflowTriggerGateway(Protocol):
    """CI 워크플로 트리거 인터페이스.

    구현체:
        - GitHubClient (infrastructure/github/)
    """

    async def trigger_workflow(self, trigger: WorkflowTrigger) -> CommandResult:
        """워크플로를 실행합니다.

        네트워크 오류와 HTTP 4xx/5xx 응답은 예외가 아닌 status=error 결과로 반환합니다.
        """
        ...
