"""Base application exceptions."""

from __future__ import annotations


class ApplicationError(Exception):
    """애플리케이션 계층 기본 예외."""

    def __init__(self, message: str = "Application error occurred") -> None:
        self.message = message
        super().__init__(message)


class ValidationError(ApplicationError):
    """커맨드 파라미터 누락 또는 타입 오류."""


class InvalidCommandParameterError(ValidationError):
    """커맨드 파라미터가 없거나 문자열이 아님."""
