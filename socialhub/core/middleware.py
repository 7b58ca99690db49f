"""
Request processing middleware.
"""

import time
import uuid
from collections.abc import Awaitable, Callable
from enum import StrEnum

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from .config import I18nConfig, settings
from .logging import clear_request_context, get_logger, set_request_context

logger = get_logger(__name__)


# ==================== Request Tracing Middleware ====================


class RequestTracingMiddleware(BaseHTTPMiddleware):
    """Request tracing and logging middleware.

    Adds a request ID to every request and logs request/response details.
    """

    # Endpoints skipped by request logging
    SKIP_LOG_ENDPOINTS: set[str] = {
        "/health",
        "/healthz",
        "/ready",
        "/live",
    }

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        """Process the request with tracing."""
        request_id = (
            request.headers.get("X-Request-ID")
            or request.headers.get("X-Correlation-ID")
            or str(uuid.uuid4())
        )
        request.state.request_id = request_id

        set_request_context(request_id=request_id, trace_id=request_id)

        start_time = time.perf_counter()

        try:
            response = await call_next(request)
            duration = time.perf_counter() - start_time

            response.headers["X-Request-ID"] = request_id
            self._log_request(request=request, response=response, duration=duration)

            return response

        except Exception as e:
            duration = time.perf_counter() - start_time
            logger.error(
                "Request failed",
                request_id=request_id,
                method=request.method,
                path=str(request.url.path),
                duration_ms=round(duration * 1000, 2),
                error=str(e),
                exc_info=True,
            )
            raise

        finally:
            clear_request_context()

    def _log_request(self, request: Request, response: Response, duration: float) -> None:
        """Log request details."""
        if request.url.path in self.SKIP_LOG_ENDPOINTS:
            return

        log_level = "info" if response.status_code < 400 else "warning"
        if response.status_code >= 500:
            log_level = "error"

        log_method = getattr(logger, log_level)
        log_method(
            "{method} {path}",
            method=request.method,
            path=str(request.url.path),
            query_string=str(request.query_params) if request.query_params else None,
            status_code=response.status_code,
            duration_ms=round(duration * 1000, 2),
            language=getattr(request.state, "language", None),
            client_ip=request.client.host if request.client else "unknown",
        )


# ==================== Language Detection Middleware ====================


class LanguageSource(StrEnum):
    URL = "url"
    QUERY = "query"
    COOKIE = "cookie"
    HEADER = "accept-language"
    DEFAULT = "default"


class LanguageDetectionMiddleware(BaseHTTPMiddleware):
    """Detect the language of the request.

    Detection order: language segment in the URL path, ``?lang=`` query
    parameter, ``lang`` cookie, primary tag of ``Accept-Language``, default
    language. The result is stored on ``request.state.language`` and in the
    request context; unless it came from the cookie, it is remembered in the
    cookie for following requests.
    """

    def __init__(self, app: ASGIApp, config: I18nConfig | None = None) -> None:
        super().__init__(app)
        self.config = config or settings.i18n
        self.supported_languages = set(self.config.supported_languages_list)

    def _supported(self, value: str | None) -> str | None:
        if not value:
            return None
        language = value.strip().lower()
        return language if language in self.supported_languages else None

    def detect_language(self, request: Request) -> tuple[str, LanguageSource]:
        """Return the detected language and where it came from."""
        for segment in request.url.path.split("/"):
            if language := self._supported(segment):
                return language, LanguageSource.URL

        if language := self._supported(request.query_params.get(self.config.query_param)):
            return language, LanguageSource.QUERY

        if language := self._supported(request.cookies.get(self.config.cookie_name)):
            return language, LanguageSource.COOKIE

        accept_language = request.headers.get("Accept-Language")
        if accept_language:
            primary = accept_language.split(",")[0].split(";")[0].split("-")[0]
            if language := self._supported(primary):
                return language, LanguageSource.HEADER

        return self.config.default_language, LanguageSource.DEFAULT

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        language, source = self.detect_language(request)

        request.state.language = language
        set_request_context(language=language)

        logger.debug(
            f"Detected language: {language} from {source}",
            language=language,
            source=str(source),
            path=str(request.url.path),
        )

        response = await call_next(request)

        if source is not LanguageSource.COOKIE:
            response.set_cookie(
                self.config.cookie_name,
                language,
                max_age=self.config.cookie_max_age,
                httponly=True,
                secure=not settings.app.debug,
                samesite="strict",
            )

        return response


# ==================== Setup Function ====================


def setup_middleware(app: FastAPI) -> None:
    """Configure all middleware of the application.

    Args:
        app: FastAPI application.
    """
    # Last added runs first: tracing wraps language detection
    app.add_middleware(LanguageDetectionMiddleware)
    app.add_middleware(RequestTracingMiddleware)
