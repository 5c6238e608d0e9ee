"""Tests for FastAPI endpoints."""

import pytest
from httpx import Client

from colors_api.api.app import create_app
from colors_api.container import reset_container

PRIMARY = "#3b82f6"
SECONDARY = "#10b981"


@pytest.fixture
def test_client() -> Client:
    """Create a test client backed by a fresh container."""
    from starlette.testclient import TestClient

    reset_container()
    with TestClient(create_app()) as client:
        yield client
    reset_container()


@pytest.fixture
def session_id(test_client: Client) -> str:
    response = test_client.post(
        "/api/colors/generate",
        json={"primaryColor": PRIMARY, "secondaryColor": SECONDARY},
    )
    assert response.status_code == 200
    return response.json()["data"]["sessionId"]


class TestGeneralEndpoints:
    def test_home(self, test_client: Client) -> None:
        response = test_client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "success"
        assert data["endpoints"]["health"] == "/health"

    def test_health_check_returns_ok(self, test_client: Client) -> None:
        response = test_client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["sessions"] == 0
        assert data["uptime"] >= 0

    def test_api_info_lists_color_endpoints(self, test_client: Client) -> None:
        data = test_client.get("/api").json()

        assert data["name"] == "Colors API"
        paths = [endpoint["path"] for endpoint in data["endpoints"]["colors"]]
        assert "/api/colors/generate" in paths

    def test_request_id_header(self, test_client: Client) -> None:
        response = test_client.get("/health")

        assert len(response.headers["X-Request-ID"]) == 8


class TestSuggestionsEndpoint:
    def test_returns_three_suggestions(self, test_client: Client) -> None:
        response = test_client.post(
            "/api/colors/suggestions", json={"primaryColor": "#ff0000"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["data"]["primaryColor"] == "#ff0000"
        assert [s["color"] for s in data["data"]["suggestions"]] == [
            "#00ffff",
            "#00ff00",
            "#00ff80",
        ]
        assert data["data"]["generatedAt"].endswith("Z")

    def test_invalid_color_returns_400(self, test_client: Client) -> None:
        response = test_client.post(
            "/api/colors/suggestions", json={"primaryColor": "red"}
        )

        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert data["error"] == "INVALID_COLOR_FORMAT"
        assert "primaryColor" in data["message"]

    def test_padded_color_returns_400(self, test_client: Client) -> None:
        response = test_client.post(
            "/api/colors/suggestions", json={"primaryColor": " #3B82F6 "}
        )

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_COLOR_FORMAT"

    def test_missing_color_returns_422(self, test_client: Client) -> None:
        response = test_client.post("/api/colors/suggestions", json={})

        assert response.status_code == 422


class TestGenerateEndpoint:
    def test_generates_and_caches(self, test_client: Client) -> None:
        response = test_client.post(
            "/api/colors/generate",
            json={
                "primaryColor": PRIMARY,
                "secondaryColor": SECONDARY,
                "grayTheme": "blue",
            },
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["sessionId"].startswith("session_")
        assert data["stats"]["totalColors"] == 292
        assert data["stats"]["sections"] == 26
        assert data["stats"]["generatedAt"].endswith("Z")
        assert data["colorSystem"]["primary"][4]["light"] == PRIMARY
        assert data["colorSystem"]["metadata"]["grayTheme"] == "blue"
        assert test_client.get("/health").json()["sessions"] == 1

    def test_client_session_id_is_used(self, test_client: Client) -> None:
        response = test_client.post(
            "/api/colors/generate",
            json={
                "primaryColor": PRIMARY,
                "secondaryColor": SECONDARY,
                "sessionId": "my-session",
            },
        )

        assert response.json()["data"]["sessionId"] == "my-session"
        assert test_client.get("/api/colors/session/my-session").status_code == 200

    def test_invalid_secondary_returns_400(self, test_client: Client) -> None:
        response = test_client.post(
            "/api/colors/generate",
            json={"primaryColor": PRIMARY, "secondaryColor": "#12"},
        )

        assert response.status_code == 400
        assert response.json()["context"]["field"] == "secondaryColor"

    def test_invalid_theme_returns_400(self, test_client: Client) -> None:
        response = test_client.post(
            "/api/colors/generate",
            json={
                "primaryColor": PRIMARY,
                "secondaryColor": SECONDARY,
                "backgroundTheme": "purple",
            },
        )

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_THEME_OPTION"

    def test_missing_secondary_returns_422(self, test_client: Client) -> None:
        response = test_client.post(
            "/api/colors/generate", json={"primaryColor": PRIMARY}
        )

        assert response.status_code == 422


class TestExportEndpoint:
    def test_css_download(self, test_client: Client, session_id: str) -> None:
        response = test_client.get(
            "/api/colors/export/css", params={"sessionId": session_id}
        )

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/css")
        assert response.headers["content-disposition"] == (
            'attachment; filename="colors-both.css"'
        )
        assert "  --primary-05: #3b82f6;" in response.text

    def test_json_themes_camel_case(self, test_client: Client, session_id: str) -> None:
        response = test_client.get(
            "/api/colors/export/json",
            params={
                "sessionId": session_id,
                "structure": "themes",
                "caseStyle": "camelCase",
                "mode": "light",
            },
        )

        assert response.status_code == 200
        assert response.headers["content-disposition"] == (
            'attachment; filename="colors-light-themes-camelCase.json"'
        )
        assert list(response.json()["cssVariables"]) == ["light"]

    def test_custom_prefix(self, test_client: Client, session_id: str) -> None:
        response = test_client.get(
            "/api/colors/export/scss",
            params={"sessionId": session_id, "prefix": "ds", "mode": "dark"},
        )

        assert response.status_code == 200
        assert "$ds_primary-05: #3b82f6;" in response.text

    def test_figma_export(self, test_client: Client, session_id: str) -> None:
        response = test_client.get(
            "/api/colors/export/figma", params={"sessionId": session_id}
        )

        assert response.status_code == 200
        assert len(response.json()["variables"]) == 292

    def test_unknown_format_returns_400(self, test_client: Client) -> None:
        response = test_client.get(
            "/api/colors/export/pdf", params={"sessionId": "whatever"}
        )

        assert response.status_code == 400
        assert response.json()["error"] == "UNSUPPORTED_EXPORT_FORMAT"

    def test_unknown_session_returns_404(self, test_client: Client) -> None:
        response = test_client.get(
            "/api/colors/export/css", params={"sessionId": "session_missing"}
        )

        assert response.status_code == 404
        assert response.json()["error"] == "SESSION_NOT_FOUND"

    def test_missing_session_id_returns_422(self, test_client: Client) -> None:
        response = test_client.get("/api/colors/export/css")

        assert response.status_code == 422

    def test_invalid_mode_returns_400(self, test_client: Client, session_id: str) -> None:
        response = test_client.get(
            "/api/colors/export/css", params={"sessionId": session_id, "mode": "sepia"}
        )

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_EXPORT_OPTION"

    def test_structure_ignored_for_non_json_formats(
        self, test_client: Client, session_id: str
    ) -> None:
        response = test_client.get(
            "/api/colors/export/css",
            params={"sessionId": session_id, "structure": "bogus"},
        )

        assert response.status_code == 200
        assert "  --primary-05: #3b82f6;" in response.text

    def test_invalid_json_structure_returns_400(
        self, test_client: Client, session_id: str
    ) -> None:
        response = test_client.get(
            "/api/colors/export/json",
            params={"sessionId": session_id, "structure": "bogus"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_EXPORT_OPTION"

    def test_invalid_prefix_returns_422(self, test_client: Client, session_id: str) -> None:
        response = test_client.get(
            "/api/colors/export/css", params={"sessionId": session_id, "prefix": "$x"}
        )

        assert response.status_code == 422


class TestSessionEndpoints:
    def test_get_session(self, test_client: Client, session_id: str) -> None:
        response = test_client.get(f"/api/colors/session/{session_id}")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["sessionId"] == session_id
        assert data["expiresAt"].endswith("Z")
        assert data["stats"]["totalColors"] == 292
        assert len(data["colorSystem"]["transparency"]) == 27

    def test_delete_session(self, test_client: Client, session_id: str) -> None:
        response = test_client.delete(f"/api/colors/session/{session_id}")

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Session deleted successfully",
        }
        assert test_client.get(f"/api/colors/session/{session_id}").status_code == 404

    def test_delete_missing_session_returns_404(self, test_client: Client) -> None:
        response = test_client.delete("/api/colors/session/nope")

        assert response.status_code == 404


class TestListingEndpoints:
    def test_formats(self, test_client: Client) -> None:
        response = test_client.get("/api/colors/formats")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["totalFormats"] == 6
        assert [f["id"] for f in data["formats"]] == [
            "css",
            "scss",
            "json",
            "figma",
            "tailwind",
            "csv",
        ]
        assert data["formats"][0]["contentType"] == "text/css"

    def test_themes(self, test_client: Client) -> None:
        response = test_client.get("/api/colors/themes")

        assert response.status_code == 200
        data = response.json()["data"]
        assert len(data["grayThemes"]) == 5
        assert data["backgroundThemes"][0]["name"] == "Smart Auto"
