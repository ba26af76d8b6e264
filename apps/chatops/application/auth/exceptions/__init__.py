"""Request authentication exceptions."""

from apps.chatops.application.common.exceptions.base import ApplicationError


class AuthError(ApplicationError):
    """요청 서명 검증 실패 (위조 또는 재전송)."""

    def __init__(self, reason: str = "authentication failed") -> None:
        self.reason = reason
        super().__init__(reason)


__all__ = ["AuthError"]
