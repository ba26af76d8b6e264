"""Command HTTP schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from apps.chatops.domain.enums import CommandResultStatus
from apps.chatops.domain.value_objects import CommandResult


class PipelineResponse(BaseModel):
    """파이프라인 응답 스키마."""

    name: str = Field(..., description="파이프라인 이름")
    path: str = Field(..., description="워크플로 파일 경로")
    is_default: bool = Field(False, description="기본 파이프라인 여부")

    model_config = {"from_attributes": True}


class CommandResultResponse(BaseModel):
    """커맨드 처리 결과 응답 스키마.

    details는 파이프라인 선택이 필요할 때만 포함됩니다.
    """

    status: CommandResultStatus = Field(..., description="처리 결과 상태")
    message: str = Field(..., description="사용자에게 보여줄 메시지")
    details: list[PipelineResponse] | None = Field(None, description="선택 후보 파이프라인")

    @classmethod
    def from_result(cls, result: CommandResult) -> CommandResultResponse:
        details = None
        if result.details is not None:
            details = [PipelineResponse.model_validate(item) for item in result.details]
        return cls(status=result.status, message=result.message, details=details)


class UrlVerificationResponse(BaseModel):
    """Slack url_verification 응답 스키마."""

    challenge: str
