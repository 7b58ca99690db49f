"""Unit tests for request tracing and language detection middleware."""

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from socialhub.core.config import I18nConfig
from socialhub.core.logging import get_request_context
from socialhub.core.middleware import LanguageDetectionMiddleware, LanguageSource, setup_middleware


@pytest.fixture
def middleware_app() -> FastAPI:
    app = FastAPI()
    setup_middleware(app)

    @app.get("/echo")
    @app.get("/{lang}/echo")
    async def echo(request: Request) -> dict:
        return {
            "language": request.state.language,
            "requestId": request.state.request_id,
            "context": get_request_context(),
        }

    return app


@pytest.fixture
def middleware_client(middleware_app: FastAPI) -> TestClient:
    return TestClient(middleware_app)


class TestLanguageDetection:
    """Detection order: URL, query, cookie, Accept-Language, default."""

    def test_default(self, middleware_client):
        response = middleware_client.get("/echo")
        assert response.json()["language"] == "en"

    def test_accept_language(self, middleware_client):
        response = middleware_client.get("/echo", headers={"Accept-Language": "vi-VN,vi;q=0.9,en;q=0.8"})
        assert response.json()["language"] == "vi"

    def test_unsupported_accept_language(self, middleware_client):
        response = middleware_client.get("/echo", headers={"Accept-Language": "fr-FR,fr;q=0.9"})
        assert response.json()["language"] == "en"

    def test_cookie_beats_header(self, middleware_client):
        response = middleware_client.get("/echo", headers={"Cookie": "lang=vi", "Accept-Language": "en"})
        assert response.json()["language"] == "vi"

    def test_query_beats_cookie(self, middleware_client):
        response = middleware_client.get("/echo?lang=en", headers={"Cookie": "lang=vi"})
        assert response.json()["language"] == "en"

    def test_url_beats_query(self, middleware_client):
        response = middleware_client.get("/vi/echo?lang=en")
        assert response.json()["language"] == "vi"

    def test_language_in_request_context(self, middleware_client):
        response = middleware_client.get("/echo?lang=vi")
        assert response.json()["context"]["language"] == "vi"

    def test_cookie_is_set(self, middleware_client):
        response = middleware_client.get("/echo?lang=vi")
        cookie = response.headers["set-cookie"]

        assert cookie.startswith("lang=vi")
        assert "HttpOnly" in cookie
        assert "SameSite=strict" in cookie

    def test_cookie_not_reset_when_detected_from_cookie(self, middleware_client):
        response = middleware_client.get("/echo", headers={"Cookie": "lang=vi"})
        assert "set-cookie" not in response.headers

    def test_detect_language_source(self):
        from starlette.requests import Request as StarletteRequest

        middleware = LanguageDetectionMiddleware(FastAPI(), config=I18nConfig(supported_languages="en,vi,de"))
        scope = {
            "type": "http",
            "method": "GET",
            "path": "/echo",
            "query_string": b"",
            "headers": [(b"accept-language", b"de-AT;q=1.0")],
        }
        assert middleware.detect_language(StarletteRequest(scope)) == ("de", LanguageSource.HEADER)


class TestRequestTracing:
    """Request ID propagation."""

    def test_generated_request_id(self, middleware_client):
        response = middleware_client.get("/echo")
        request_id = response.headers["X-Request-ID"]

        assert request_id
        assert response.json()["requestId"] == request_id
        assert response.json()["context"]["request_id"] == request_id

    def test_incoming_request_id_is_kept(self, middleware_client):
        response = middleware_client.get("/echo", headers={"X-Request-ID": "abc-123"})
        assert response.headers["X-Request-ID"] == "abc-123"

    def test_correlation_id_header(self, middleware_client):
        response = middleware_client.get("/echo", headers={"X-Correlation-ID": "corr-9"})
        assert response.json()["requestId"] == "corr-9"
