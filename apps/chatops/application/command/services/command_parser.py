"""Command Parser.

채팅 텍스트 또는 워크플로 이벤트를 Command 엔티티로 변환합니다.

텍스트 문법:
    manage <repository_url> [name=<name>] [branch=<branch>]
    verify <repository_name> [pipeline=<pipeline>]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from apps.chatops.application.command.exceptions import ParseError
from apps.chatops.domain.entities.command import Actor, Command, CommandOrigin
from apps.chatops.domain.enums import ChatPlatform, CommandType

logger = logging.getLogger(__name__)

WORKFLOW_ACTOR_ID = "workflow"


@dataclass(frozen=True)
class _ActionSpec:
    command_type: CommandType
    target_key: str
    option_keys: frozenset[str]


_ACTIONS: dict[str, _ActionSpec] = {
    "manage": _ActionSpec(
        command_type=CommandType.MANAGE_REPOSITORY,
        target_key="repository_url",
        option_keys=frozenset({"name", "branch"}),
    ),
    "verify": _ActionSpec(
        command_type=CommandType.VERIFY_REPOSITORY,
        target_key="repository_name",
        option_keys=frozenset({"pipeline"}),
    ),
}


class CommandParser:
    """커맨드 파서."""

    def parse(self, raw_text: str, actor: Actor, origin: CommandOrigin) -> Command:
        """자유 텍스트 커맨드를 파싱합니다.

        Args:
            raw_text: 사용자가 입력한 텍스트 (예: "verify my-repo")
            actor: 실행 사용자
            origin: 커맨드 출처

        Returns:
            Command 엔티티

        Raises:
            ParseError: 토큰 수 부족, 알 수 없는 액션, 잘못된 옵션
        """
        parts = (raw_text or "").split()
        if len(parts) < 2:
            raise ParseError(
                f"invalid command format: expected at least 2 parts, got {len(parts)}"
            )

        verb, target, *option_tokens = parts
        spec = self._lookup(verb)

        parameters: dict[str, Any] = {spec.target_key: target}
        parameters.update(self._parse_options(verb, spec, option_tokens))

        command = Command(
            type=spec.command_type,
            parameters=parameters,
            origin=origin,
            actor=actor,
        )
        logger.debug(
            "Command parsed",
            extra={"command_id": str(command.id), "command_type": command.type.value},
        )
        return command

    def from_workflow_step(
        self,
        event: Mapping[str, Any],
        actor: Actor | None = None,
    ) -> Command:
        """Slack workflow_step_execute 이벤트에서 커맨드를 생성합니다.

        텍스트 파싱을 거치지 않지만 결과 Command 형태는 parse()와 같습니다.

        Raises:
            ParseError: workflow_step 또는 필수 입력값(action, repository) 누락
        """
        workflow_step = event.get("workflow_step")
        if not isinstance(workflow_step, Mapping):
            raise ParseError("invalid workflow step format")

        inputs = workflow_step.get("inputs")
        if not isinstance(inputs, Mapping):
            raise ParseError("invalid workflow step inputs")

        repository = _input_value(inputs, "repository")
        if not repository:
            raise ParseError("repository input is required")

        action = _input_value(inputs, "action")
        if not action:
            raise ParseError("action input is required")

        spec = self._lookup(action)
        parameters: dict[str, Any] = {spec.target_key: repository}
        for key in spec.option_keys:
            value = _input_value(inputs, key)
            if value:
                parameters[key] = value

        origin = CommandOrigin(
            platform=ChatPlatform.SLACK.value,
            workflow_id=_optional_str(workflow_step.get("workflow_id")),
            step_id=_optional_str(workflow_step.get("step_id")),
        )
        return Command(
            type=spec.command_type,
            parameters=parameters,
            origin=origin,
            actor=actor or Actor(user_id=WORKFLOW_ACTOR_ID, platform=ChatPlatform.SLACK.value),
        )

    @staticmethod
    def _lookup(verb: str) -> _ActionSpec:
        spec = _ACTIONS.get(verb.lower())
        if spec is None:
            raise ParseError(f"unknown action: {verb}")
        return spec

    @staticmethod
    def _parse_options(verb: str, spec: _ActionSpec, tokens: list[str]) -> dict[str, str]:
        options: dict[str, str] = {}
        for token in tokens:
            key, sep, value = token.partition("=")
            if not sep or not key or not value:
                raise ParseError("invalid parameter format, expected key=value")
            if key not in spec.option_keys:
                raise ParseError(f"unknown parameter for {verb}: {key}")
            options[key] = value
        return options


def _input_value(inputs: Mapping[str, Any], key: str) -> str | None:
    """워크플로 입력값 추출 ("값" 또는 {"value": "값"} 모두 허용)."""
    raw = inputs.get(key)
    if isinstance(raw, Mapping):
        raw = raw.get("value")
    if isinstance(raw, str):
        return raw.strip() or None
    return None


def _optional_str(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None
