"""API tests for system routes and app-wide HTTP behavior.

Validates root and health endpoints, trace id propagation, and Problem
Details for framework-level errors.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from src.core.config import settings
from src.presentation.routers.api.middleware.trace_middleware import resolve_trace_id

GET_DATABASE = "src.presentation.routers.system.get_database"


def database_reachable(reachable: bool) -> MagicMock:
    database = MagicMock()
    database.check_connection = AsyncMock(return_value=reachable)
    return database


@pytest.mark.api
class TestSystemRoutes:
    def test_root_endpoint_returns_status_and_version(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json() == {
            "message": settings.app_name,
            "status": "operational",
            "version": settings.app_version,
        }

    def test_health_when_database_connected(self, client):
        with patch(GET_DATABASE, return_value=database_reachable(True)):
            response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "database": "connected"}

    def test_health_when_database_down(self, client):
        with patch(GET_DATABASE, return_value=database_reachable(False)):
            response = client.get("/health")

        assert response.status_code == 503
        assert response.json() == {"status": "unhealthy", "database": "disconnected"}


@pytest.mark.api
class TestTraceHeader:
    def test_trace_id_generated(self, client):
        response = client.get("/")

        assert response.headers["X-Trace-Id"]

    def test_trace_ids_differ_per_request(self, client):
        first = client.get("/").headers["X-Trace-Id"]
        second = client.get("/").headers["X-Trace-Id"]

        assert first != second

    def test_incoming_trace_id_echoed(self, client):
        response = client.get("/", headers={"X-Trace-Id": "abc-123"})

        assert response.headers["X-Trace-Id"] == "abc-123"

    @pytest.mark.parametrize("incoming", ["x" * 200, "bad id with spaces", "<script>"])
    def test_malformed_incoming_trace_id_replaced(self, client, incoming):
        response = client.get("/", headers={"X-Trace-Id": incoming})

        assert response.headers["X-Trace-Id"] != incoming
        assert len(response.headers["X-Trace-Id"]) == 36


@pytest.mark.unit
class TestResolveTraceId:
    def test_well_formed_id_kept(self):
        assert resolve_trace_id("req-42.retry:1") == "req-42.retry:1"

    @pytest.mark.parametrize("incoming", [None, ""])
    def test_missing_id_generated(self, incoming):
        assert len(resolve_trace_id(incoming)) == 36


@pytest.mark.api
class TestFrameworkErrors:
    def test_unknown_route_returns_problem_details(self, client):
        response = client.get("/api/nothing-here")

        assert response.status_code == 404
        data = response.json()
        assert data["title"] == "Resource Not Found"
        assert data["type"] == f"{settings.api_base_url}/errors/not-found"
        assert data["instance"] == "/api/nothing-here"
        assert data["trace_id"] == response.headers["X-Trace-Id"]

    def test_wrong_method_returns_405(self, client):
        response = client.delete("/api/rentals/overdue")

        assert response.status_code == 405
        assert response.json()["title"] == "Method Not Allowed"

    def test_malformed_json_returns_422(self, client):
        response = client.post(
            "/api/members",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 422
        assert response.json()["title"] == "Validation Failed"
