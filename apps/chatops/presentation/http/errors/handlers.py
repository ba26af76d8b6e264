"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from apps.chatops.application.auth.exceptions import AuthError
from apps.chatops.application.command.exceptions import ParseError
from apps.chatops.application.common.exceptions import ApplicationError, ValidationError
from apps.chatops.application.dispatch.exceptions import (
    DispatchTimeoutError,
    UnknownCommandTypeError,
)
from apps.chatops.application.repository.exceptions import (
    EnrichmentError,
    IntegrationNotConfiguredError,
)
from apps.chatops.domain.exceptions import (
    DomainError,
    NotFoundError,
    RepositoryAlreadyExistsError,
)


def _error_response(status_code: int, message: str, code: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "error", "message": message, "code": code},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(AuthError)
    async def auth_error_handler(request: Request, exc: AuthError):
        return _error_response(401, exc.message, "AUTH_FAILED")

    @app.exception_handler(ParseError)
    async def parse_error_handler(request: Request, exc: ParseError):
        return _error_response(400, exc.message, "PARSE_ERROR")

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return _error_response(400, exc.message, "VALIDATION_ERROR")

    @app.exception_handler(UnknownCommandTypeError)
    async def unknown_command_type_handler(request: Request, exc: UnknownCommandTypeError):
        return _error_response(400, exc.message, "UNKNOWN_COMMAND_TYPE")

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return _error_response(404, exc.message, "NOT_FOUND")

    @app.exception_handler(RepositoryAlreadyExistsError)
    async def repository_exists_handler(request: Request, exc: RepositoryAlreadyExistsError):
        return _error_response(409, exc.message, "REPOSITORY_ALREADY_EXISTS")

    @app.exception_handler(EnrichmentError)
    async def enrichment_error_handler(request: Request, exc: EnrichmentError):
        return _error_response(502, exc.message, "ENRICHMENT_FAILED")

    @app.exception_handler(IntegrationNotConfiguredError)
    async def integration_not_configured_handler(
        request: Request, exc: IntegrationNotConfiguredError
    ):
        return _error_response(503, exc.message, "INTEGRATION_NOT_CONFIGURED")

    @app.exception_handler(DispatchTimeoutError)
    async def dispatch_timeout_handler(request: Request, exc: DispatchTimeoutError):
        return _error_response(504, exc.message, "DISPATCH_TIMEOUT")

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return _error_response(400, exc.message, "DOMAIN_ERROR")

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return _error_response(400, exc.message, "APPLICATION_ERROR")
