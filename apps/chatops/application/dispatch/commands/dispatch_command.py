"""DispatchCommand Command.

파싱된 커맨드를 타입별 핸들러로 보내고 CommandResult를 반환하는 Use Case입니다.

Architecture:
    - UseCase: DispatchCommandInteractor (상태 없음, 협력자만 주입)
    - Services: RepositoryResolver, PipelineSelector
    - Ports: WorkflowTriggerGateway
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from apps.chatops.application.common.exceptions import InvalidCommandParameterError
from apps.chatops.application.dispatch.exceptions import (
    DispatchTimeoutError,
    UnknownCommandTypeError,
)
from apps.chatops.application.repository.exceptions import IntegrationNotConfiguredError
from apps.chatops.domain.entities import Repository
from apps.chatops.domain.enums import CommandType
from apps.chatops.domain.exceptions import PipelineNotFoundError
from apps.chatops.domain.services import AskUser, NoPipelines, RunPipeline
from apps.chatops.domain.value_objects import (
    VERIFICATION_TRIGGER,
    CommandResult,
    RepositoryLocator,
    WorkflowTrigger,
)

if TYPE_CHECKING:
    from apps.chatops.application.repository.services import RepositoryResolver
    from apps.chatops.application.workflow.ports import WorkflowTriggerGateway
    from apps.chatops.domain.entities import Command, Pipeline
    from apps.chatops.domain.services import PipelineSelector

logger = logging.getLogger(__name__)

NO_PIPELINES_MESSAGE = "No pipelines found for this repository"
SELECT_PIPELINE_MESSAGE = "Please select a pipeline to run"


class DispatchCommandInteractor:
    """커맨드 디스패처.

    Workflow:
        manage_repository:
            1. repository_url 검증
            2. 저장소 등록 (RepositoryResolver - 필요 시 GitHub 보강)
            3. 등록 완료 후 이름이 채워진 성공 메시지 생성
        verify_repository:
            1. repository_name 검증 및 저장소 조회
            2. pipeline 파라미터가 있으면 해당 파이프라인, 없으면 PipelineSelector 결정
            3. 워크플로 트리거 결과를 그대로 반환
    """

    def __init__(
        self,
        resolver: "RepositoryResolver",
        selector: "PipelineSelector",
        workflow_trigger: "WorkflowTriggerGateway | None" = None,
    ) -> None:
        self._resolver = resolver
        self._selector = selector
        self._workflow_trigger = workflow_trigger

    async def execute(self, command: "Command", *, timeout: float | None = None) -> CommandResult:
        """커맨드를 처리합니다.

        Args:
            command: 파싱된 커맨드
            timeout: 요청 단위 제한 시간 (초). 초과 시 진행 중인 외부 호출을 취소합니다.

        Raises:
            InvalidCommandParameterError: 필수 파라미터 누락
            RepositoryNotFoundError: 등록되지 않은 저장소
            EnrichmentError: GitHub 메타데이터 조회 실패
            UnknownCommandTypeError: 지원하지 않는 커맨드 타입
            DispatchTimeoutError: 제한 시간 초과
        """
        logger.info(
            "Dispatching command",
            extra={
                "command_id": str(command.id),
                "command_type": getattr(command.type, "value", command.type),
                "user_id": command.actor.user_id,
                "channel_id": command.origin.channel_id,
                "workflow_id": command.origin.workflow_id,
            },
        )

        if timeout is None:
            return await self._route(command)

        try:
            return await asyncio.wait_for(self._route(command), timeout=timeout)
        except asyncio.TimeoutError:
            logger.warning(
                "Command dispatch timed out",
                extra={"command_id": str(command.id), "timeout_seconds": timeout},
            )
            raise DispatchTimeoutError(timeout) from None

    async def _route(self, command: "Command") -> CommandResult:
        if command.type is CommandType.MANAGE_REPOSITORY:
            return await self._handle_manage_repository(command)
        if command.type is CommandType.VERIFY_REPOSITORY:
            return await self._handle_verify_repository(command)
        raise UnknownCommandTypeError(command.type)

    async def _handle_manage_repository(self, command: "Command") -> CommandResult:
        url = command.get_parameter("repository_url")
        if not isinstance(url, str) or not url:
            raise InvalidCommandParameterError("invalid repository URL")

        stub = Repository(
            url=url,
            default_branch=command.get_parameter("branch") or "",
            added_by=command.actor.user_id,
            added_at=command.created_at,
        )
        repository = await self._resolver.add_repository(
            stub, name=command.get_parameter("name")
        )

        # 보강이 끝난 뒤의 이름으로 메시지를 만든다
        return CommandResult.success(
            f"Repository {repository.name} has been added successfully"
        )

    async def _handle_verify_repository(self, command: "Command") -> CommandResult:
        name = command.get_parameter("repository_name")
        if not isinstance(name, str) or not name:
            raise InvalidCommandParameterError("invalid repository name")

        repository = await self._resolver.get_repository(name)

        requested = command.get_parameter("pipeline")
        if requested:
            pipeline = repository.find_pipeline(requested)
            if pipeline is None:
                raise PipelineNotFoundError(repository.name, requested)
            return await self._trigger(repository, pipeline)

        decision = self._selector.select(repository.pipelines)
        if isinstance(decision, NoPipelines):
            return CommandResult.error(NO_PIPELINES_MESSAGE)
        if isinstance(decision, AskUser):
            return CommandResult.select_pipeline(
                SELECT_PIPELINE_MESSAGE,
                details=list(decision.pipelines),
            )
        if isinstance(decision, RunPipeline):
            return await self._trigger(repository, decision.pipeline)
        raise TypeError(f"Unexpected pipeline decision: {decision!r}")

    async def _trigger(self, repository: Repository, pipeline: "Pipeline") -> CommandResult:
        if self._workflow_trigger is None:
            raise IntegrationNotConfiguredError()

        locator = RepositoryLocator.parse(repository.url)
        trigger = WorkflowTrigger(
            repository=repository.name,
            workflow=pipeline.path,
            type=VERIFICATION_TRIGGER,
            owner=locator.owner if locator else None,
            ref=repository.default_branch or None,
        )
        result = await self._workflow_trigger.trigger_workflow(trigger)

        logger.info(
            "Workflow trigger finished",
            extra={
                "repository": repository.name,
                "workflow": pipeline.path,
                "status": result.status.value,
            },
        )
        return result
