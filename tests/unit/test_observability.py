from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient

from letshang.core.config import settings
from letshang.core.observability import SECURITY_HEADERS, setup_observability
from letshang.main import app


def test_health_sets_request_id_header() -> None:
    client = TestClient(app)
    response = client.get("/health")

    assert response.status_code == 200
    assert response.headers.get("x-request-id")


def test_request_id_is_forwarded_from_header() -> None:
    client = TestClient(app)
    response = client.get("/health", headers={"X-Request-ID": "req-123"})

    assert response.status_code == 200
    assert response.headers.get("x-request-id") == "req-123"


def test_security_headers_are_set() -> None:
    client = TestClient(app)
    response = client.get("/")

    for name, value in SECURITY_HEADERS.items():
        assert response.headers.get(name) == value


def test_unhandled_exception_returns_generic_error() -> None:
    test_app = FastAPI()
    setup_observability(test_app, settings)

    @test_app.get("/boom")
    def boom():
        raise RuntimeError("kaboom")

    client = TestClient(test_app)
    response = client.get("/boom", headers={"X-Request-ID": "req-boom"})

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
    assert "kaboom" not in response.text
    assert response.headers.get("x-request-id") == "req-boom"


def test_helmet_defaults_include_csp_and_hsts() -> None:
    client = TestClient(app)
    response = client.get("/health")

    assert response.headers["content-security-policy"].startswith("default-src 'self';")
    assert "object-src 'none'" in response.headers["content-security-policy"]
    assert response.headers["strict-transport-security"] == "max-age=15552000; includeSubDomains"
    assert response.headers["origin-agent-cluster"] == "?1"
    assert response.headers["x-permitted-cross-domain-policies"] == "none"
    assert response.headers["x-download-options"] == "noopen"
    assert response.headers["x-xss-protection"] == "0"
