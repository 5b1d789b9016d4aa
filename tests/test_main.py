"""Unit tests for backend/main.py."""

from collections.abc import Generator
import re

import pytest
from fastapi.testclient import TestClient

from backend import __version__
from backend.errors import ForbiddenError, NotFoundError, UnauthenticatedError, ValidationError
from backend.main import _cors_kwargs, create_app
from tests.utils import api_path


@pytest.fixture
def app_with_failures():
    """App with extra routes that raise each kind of error."""
    app = create_app()

    @app.get("/boom")
    def boom() -> None:
        raise RuntimeError("secret internals")

    @app.get("/forbidden")
    def forbidden() -> None:
        raise ForbiddenError("nope")

    @app.get("/missing")
    def missing() -> None:
        raise NotFoundError("Task with id 1 not found")

    @app.get("/invalid")
    def invalid() -> None:
        raise ValidationError(["a is wrong", "b is wrong"])

    @app.get("/anonymous")
    def anonymous() -> None:
        raise UnauthenticatedError()

    return app


@pytest.fixture
def client(app_with_failures) -> Generator[TestClient, None, None]:
    with TestClient(app_with_failures, raise_server_exceptions=False) as test_client:
        yield test_client


class TestApp:
    """Application wiring."""

    def test_health(self, client: TestClient) -> None:
        response = client.get(api_path("/health"))

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": __version__}

    def test_version_comes_from_pyproject(self) -> None:
        assert __version__ == "0.1.0"

    def test_routes_are_mounted_under_prefix(self) -> None:
        paths = {route.path for route in create_app().routes}

        for expected in (
            "/auth/login",
            "/tasks",
            "/tasks/{task_id}",
            "/tasks/team/{team_id}/today",
            "/teams/management/{team_id}",
            "/employees/me",
        ):
            assert api_path(expected) in paths


class TestErrorHandlers:
    """Domain errors map to status codes; anything else is a 500."""

    def test_unexpected_error_is_hidden(self, client: TestClient, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("ERROR", logger="teamtasks.errors"):
            response = client.get("/boom")

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}
        assert "secret internals" not in response.text
        assert any(record.name == "teamtasks.errors" and record.exc_info for record in caplog.records)

    def test_forbidden(self, client: TestClient) -> None:
        response = client.get("/forbidden")

        assert response.status_code == 403
        assert response.json() == {"detail": "nope"}

    def test_not_found(self, client: TestClient) -> None:
        response = client.get("/missing")

        assert response.status_code == 404
        assert response.json() == {"detail": "Task with id 1 not found"}

    def test_validation_lists_violations(self, client: TestClient) -> None:
        response = client.get("/invalid")

        assert response.status_code == 422
        assert response.json() == {"detail": ["a is wrong", "b is wrong"]}

    def test_unauthenticated_sets_challenge(self, client: TestClient) -> None:
        response = client.get("/anonymous")

        assert response.status_code == 401
        assert response.json() == {"detail": "Not Authorized"}
        assert response.headers["www-authenticate"] == "Bearer"


class TestCors:
    """CORS option building."""

    def test_exact_and_pattern_origins(self) -> None:
        kwargs = _cors_kwargs(["http://localhost:3000", re.compile(r"http://192\.168\.1\..*:8080")])

        assert kwargs["allow_origins"] == ["http://localhost:3000"]
        assert re.fullmatch(kwargs["allow_origin_regex"], "http://192.168.1.7:8080")

    def test_no_patterns(self) -> None:
        assert _cors_kwargs(["*"]) == {"allow_origins": ["*"]}
