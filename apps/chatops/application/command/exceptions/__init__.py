"""Command parsing exceptions."""

from apps.chatops.application.common.exceptions.base import ApplicationError


class ParseError(ApplicationError):
    """커맨드 텍스트 또는 이벤트 페이로드 형식 오류."""


__all__ = ["ParseError"]
