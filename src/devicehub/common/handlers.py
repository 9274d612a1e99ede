"""Exception handlers that render every error as {message, requestId}."""

import traceback

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from devicehub.common.exceptions import DeviceHubError
from devicehub.common.logging import get_logger
from devicehub.common.schemas import ErrorResponse
from devicehub.common.validation import first_error_message

logger = get_logger("errors")

GENERIC_MESSAGE = "Internal server error"


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


def _show_details(request: Request) -> bool:
    settings = getattr(request.app.state, "settings", None)
    return bool(settings and settings.is_development)


def error_response(
    request: Request, status_code: int, message: str, exc: BaseException | None = None
) -> JSONResponse:
    """Build the shared error body; tracebacks only leave the process in development."""
    body = ErrorResponse(message=message, request_id=_request_id(request))
    if exc is not None and _show_details(request):
        body.error = "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True, exclude_none=True),
    )


def internal_error_response(request: Request, exc: BaseException) -> JSONResponse:
    logger.error(
        "%s %s failed: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
        extra={"request_id": _request_id(request)},
    )
    return error_response(request, 500, GENERIC_MESSAGE, exc)


async def handle_devicehub_error(request: Request, exc: DeviceHubError) -> JSONResponse:
    if exc.status_code >= 500:
        return internal_error_response(request, exc)
    return error_response(request, exc.status_code, exc.message)


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return error_response(request, 400, first_error_message(exc.errors()))


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    # Framework 404/405 only come from unmatched routes.
    if exc.status_code in (404, 405):
        return error_response(request, 404, "Route not found")
    return error_response(request, exc.status_code, str(exc.detail))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DeviceHubError, handle_devicehub_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
