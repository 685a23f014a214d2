"""Exception handlers rendering every failure as ``{success, message}``."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from letsconnect.domain.error import DomainError
from letsconnect.interface.error import AuthenticationError


def _failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content={"success": False, "message": message}
    )


def install_error_handlers(app: FastAPI) -> None:
    """Register the handlers on the application."""

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logfire.error(
                "Domain error",
                error=exc.message,
                error_type=type(exc).__name__,
                path=request.url.path,
            )
        else:
            logfire.warn(
                "Request rejected",
                error=exc.message,
                error_type=type(exc).__name__,
                status_code=exc.status_code,
                path=request.url.path,
            )
        return _failure(exc.status_code, exc.message)

    @app.exception_handler(AuthenticationError)
    async def authentication_error_handler(
        request: Request, exc: AuthenticationError
    ) -> JSONResponse:
        logfire.info("Unauthenticated request", path=request.url.path)
        return _failure(exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return _failure(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = exc.errors()
        logfire.warn("Validation error", errors=str(errors), path=request.url.path)
        message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
        return _failure(status.HTTP_422_UNPROCESSABLE_ENTITY, message)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logfire.exception(
            "Unhandled exception",
            error_type=type(exc).__name__,
            path=request.url.path,
            method=request.method,
        )
        return _failure(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error"
        )
