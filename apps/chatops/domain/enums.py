"""ChatOps Domain Enums."""

from enum import Enum


class CommandType(str, Enum):
    """커맨드 타입.

    새 타입을 추가하면 DispatchCommandInteractor 분기도 함께 추가해야 합니다.
    """

    MANAGE_REPOSITORY = "manage_repository"
    VERIFY_REPOSITORY = "verify_repository"


class CommandResultStatus(str, Enum):
    """커맨드 처리 결과 상태."""

    SUCCESS = "success"
    ERROR = "error"
    SELECT_PIPELINE = "select_pipeline"


class ChatPlatform(str, Enum):
    """커맨드가 유입된 채팅 플랫폼."""

    SLACK = "slack"
