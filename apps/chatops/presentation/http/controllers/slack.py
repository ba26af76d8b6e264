"""Slack controller - Slash command and Events API endpoints."""

from __future__ import annotations

import json
import logging
from typing import Any
from urllib.parse import parse_qs

from fastapi import APIRouter, Depends

from apps.chatops.application.command.exceptions import ParseError
from apps.chatops.application.command.services import CommandParser
from apps.chatops.application.dispatch.commands import DispatchCommandInteractor
from apps.chatops.domain.entities import Actor, CommandOrigin
from apps.chatops.domain.enums import ChatPlatform
from apps.chatops.presentation.http.auth import VerifiedBody
from apps.chatops.presentation.http.schemas import CommandResultResponse
from apps.chatops.setup.dependencies import (
    SettingsDep,
    get_command_parser,
    get_dispatch_command_interactor,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/slack", tags=["slack"])

URL_VERIFICATION = "url_verification"
EVENT_CALLBACK = "event_callback"
WORKFLOW_STEP_EXECUTE = "workflow_step_execute"


def _form_value(form: dict[str, list[str]], key: str) -> str:
    values = form.get(key)
    return values[0] if values else ""


@router.post(
    "/commands",
    response_model=CommandResultResponse,
    response_model_exclude_none=True,
)
async def handle_command(
    body: VerifiedBody,
    settings: SettingsDep,
    parser: CommandParser = Depends(get_command_parser),
    interactor: DispatchCommandInteractor = Depends(get_dispatch_command_interactor),
) -> CommandResultResponse:
    """Slack 슬래시 커맨드를 처리합니다."""
    form = parse_qs(body.decode("utf-8", errors="replace"), keep_blank_values=True)
    platform = ChatPlatform.SLACK.value
    actor = Actor(user_id=_form_value(form, "user_id"), platform=platform)
    origin = CommandOrigin(platform=platform, channel_id=_form_value(form, "channel_id") or None)

    command = parser.parse(_form_value(form, "text"), actor, origin)
    logger.info(
        "Command received",
        extra={
            "command_id": str(command.id),
            "command_type": command.type.value,
            "user_id": actor.user_id,
            "channel_id": origin.channel_id,
        },
    )

    result = await interactor.execute(command, timeout=settings.request_timeout_seconds)
    return CommandResultResponse.from_result(result)


@router.post("/events")
async def handle_event(
    body: VerifiedBody,
    settings: SettingsDep,
    parser: CommandParser = Depends(get_command_parser),
    interactor: DispatchCommandInteractor = Depends(get_dispatch_command_interactor),
) -> dict[str, Any]:
    """Slack Events API 요청을 처리합니다.

    url_verification은 challenge를 그대로 돌려주고, workflow_step_execute는
    커맨드로 변환해 디스패치합니다.
    """
    try:
        payload = json.loads(body or b"{}")
    except ValueError as e:
        raise ParseError("invalid event payload") from e
    if not isinstance(payload, dict):
        raise ParseError("invalid event payload")

    event_type = payload.get("type")
    if event_type == URL_VERIFICATION:
        return {"challenge": str(payload.get("challenge", ""))}

    event = payload
    if event_type == EVENT_CALLBACK:
        event = payload.get("event")
        if not isinstance(event, dict):
            raise ParseError("invalid event payload")
        event_type = event.get("type")

    if event_type != WORKFLOW_STEP_EXECUTE:
        raise ParseError(f"unsupported event type: {event_type}")

    command = parser.from_workflow_step(event)
    logger.info(
        "Workflow step received",
        extra={
            "command_id": str(command.id),
            "command_type": command.type.value,
            "workflow_id": command.origin.workflow_id,
            "step_id": command.origin.step_id,
        },
    )

    result = await interactor.execute(command, timeout=settings.request_timeout_seconds)
    return CommandResultResponse.from_result(result).model_dump(mode="json", exclude_none=True)
