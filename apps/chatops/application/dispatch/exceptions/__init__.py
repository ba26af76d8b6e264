"""Dispatch exceptions."""

from apps.chatops.application.common.exceptions.base import ApplicationError


class UnknownCommandTypeError(ApplicationError):
    """처리할 수 없는 커맨드 타입."""

    def __init__(self, command_type: object) -> None:
        self.command_type = command_type
        value = getattr(command_type, "value", command_type)
        super().__init__(f"unknown command type: {value}")


class DispatchTimeoutError(ApplicationError):
    """요청 제한 시간 안에 커맨드 처리가 끝나지 않음."""

    def __init__(self, timeout_seconds: float) -> None:
        self.timeout_seconds = timeout_seconds
        super().__init__(f"Command processing timed out after {timeout_seconds:g}s")


__all__ = ["DispatchTimeoutError", "UnknownCommandTypeError"]
