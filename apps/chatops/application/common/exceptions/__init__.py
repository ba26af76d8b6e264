"""Application Exceptions.

공통 예외만 포함합니다. 기능별 예외는 각 패키지에서 직접 import하세요:
  - apps.chatops.application.auth.exceptions.*
  - apps.chatops.application.command.exceptions.*
  - apps.chatops.application.repository.exceptions.*
  - apps.chatops.application.dispatch.exceptions.*
"""

from apps.chatops.application.common.exceptions.base import (
    ApplicationError,
    InvalidCommandParameterError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "InvalidCommandParameterError",
    "ValidationError",
]
