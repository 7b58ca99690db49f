"""Exception handlers for FastAPI.

Centralized exception handling for the application.
Transforms various exception types into the unified, localized error envelope.
"""

from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from socialhub.shared.i18n import get_i18n_service
from socialhub.shared.i18n.keys import CommonTranslationKeys
from socialhub.shared.logging import get_logger
from socialhub.shared.validation.formatter import ValidationErrorFormatter
from socialhub.shared.validation.issues import issues_from_pydantic
from socialhub.shared.validation.types import RequestSource

from .base import AppError
from .domain import InternalServerError, ValidationError

logger = get_logger(__name__)

# FastAPI ``loc`` roots -> request sources
LOC_SOURCES: dict[str, RequestSource] = {
    "body": RequestSource.BODY,
    "query": RequestSource.QUERY,
    "path": RequestSource.PARAMS,
    "header": RequestSource.HEADERS,
    "cookie": RequestSource.COOKIES,
}

STATUS_TRANSLATION_KEYS: dict[int, str] = {
    400: CommonTranslationKeys.BAD_REQUEST,
    401: CommonTranslationKeys.UNAUTHORIZED,
    403: CommonTranslationKeys.FORBIDDEN,
    404: CommonTranslationKeys.NOT_FOUND,
    405: CommonTranslationKeys.METHOD_NOT_ALLOWED,
    409: CommonTranslationKeys.CONFLICT,
    422: CommonTranslationKeys.UNPROCESSABLE_ENTITY,
    429: CommonTranslationKeys.RATE_LIMIT_EXCEEDED,
    500: CommonTranslationKeys.INTERNAL_SERVER_ERROR,
    503: CommonTranslationKeys.SERVICE_UNAVAILABLE,
}


def _request_language(request: Request) -> str | None:
    return getattr(request.state, "language", None)


def render_app_error(request: Request, exc: AppError, headers: dict[str, str] | None = None) -> JSONResponse:
    """Build the JSON response for an AppError.

    Default messages are translated; explicit ones are kept.
    """
    message = get_i18n_service().resolve_message(
        exc.translation_key,
        message=exc.message,
        language=_request_language(request),
        prioritize_translated=not exc.message_overridden,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_response(message).to_content(),
        headers={**(headers or {}), "X-Error-Code": exc.code},
    )


def _strip_loc_root(error: dict[str, Any]) -> dict[str, Any]:
    loc = tuple(error.get("loc", ()))
    if loc and loc[0] in LOC_SOURCES:
        return {**error, "loc": loc[1:]}
    return error


def validation_error_from_request(exc: RequestValidationError, language: str | None = None) -> ValidationError:
    """Run FastAPI's own validation errors through the validation formatter."""
    errors: list[dict[str, Any]] = list(exc.errors())
    root = str(errors[0]["loc"][0]) if errors and errors[0].get("loc") else "body"
    source = LOC_SOURCES.get(root, RequestSource.BODY)

    stripped = [_strip_loc_root(error) for error in errors]
    original_data = exc.body if source is RequestSource.BODY else None

    formatted = ValidationErrorFormatter().format(
        issues_from_pydantic(stripped),
        source=source,
        language=language,
        original_data=original_data,
    )
    return ValidationError(formatted, source)


def setup_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers in FastAPI application.

    Registers handlers for:
    - Business errors (AppError)
    - Validation errors (RequestValidationError)
    - HTTP errors (StarletteHTTPException)
    - Unexpected exceptions (Exception)

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(AppError)
    async def app_exception_handler(request: Request, exc: AppError) -> JSONResponse:
        """Handle application business errors."""
        log = logger.bind(code=exc.code, status_code=exc.status_code, path=request.url.path)
        if exc.is_operational:
            log.warning("Application error: {message}", message=exc.message)
        else:
            log.opt(exception=exc).error("Non-operational application error: {message}", message=exc.message)

        return render_app_error(request, exc)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle FastAPI parameter validation errors."""
        error = validation_error_from_request(exc, _request_language(request))
        logger.warning(
            "Request validation failed",
            path=request.url.path,
            source=error.source,
            summary=error.metadata.get("summary"),
        )
        return render_app_error(request, error)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle standard HTTP exceptions from FastAPI/Starlette."""
        detail = str(exc.detail)
        try:
            is_default_detail = HTTPStatus(exc.status_code).phrase == detail
        except ValueError:
            is_default_detail = False

        error = AppError(
            message=detail,
            translation_key=STATUS_TRANSLATION_KEYS.get(exc.status_code, CommonTranslationKeys.UNKNOWN_ERROR),
            status_code=exc.status_code,
            code=f"HTTP_{exc.status_code}",
        )
        error.message_overridden = not is_default_detail
        return render_app_error(request, error, headers=dict(exc.headers or {}))

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle all unhandled exceptions (last line of defense).

        Logs full traceback for investigation, never exposes the exception text.
        """
        logger.opt(exception=exc).error("CRITICAL: Unhandled exception", path=request.url.path)
        return render_app_error(request, InternalServerError())

