"""Integration tests for end-to-end workflows and the assembled application."""

import logging
import uuid

import pytest
from fastapi.testclient import TestClient

from newsroom.core.database import get_db
from newsroom.core.logging_config import CORRELATION_HEADER
from newsroom.main import app


@pytest.fixture
def app_client(db_session, memory_cache):
    """Client for the real application, minus the lifespan."""

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.state.cache = memory_cache
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()


@pytest.mark.integration
class TestEndToEndWorkflow:
    """Test complete end-to-end workflows."""

    def test_category_lifecycle(self, client):
        """Create -> list -> read -> delete -> read again."""
        created = client.post("/category", json={"categoryName": "World"})
        assert created.status_code == 201
        category_id = created.json()["payload"]["category"]["id"]

        listing = client.get("/category").json()["payload"]["categories"]
        assert category_id in [c["id"] for c in listing]

        assert client.get(f"/category/{category_id}").status_code == 200

        deleted = client.delete(f"/category/{category_id}")
        assert deleted.status_code == 200

        assert client.get(f"/category/{category_id}").status_code == 404
        assert client.get("/category").json()["payload"]["categories"] == []

    def test_news_lifecycle(self, client):
        """Create category and news -> soft delete -> restore -> cascade."""
        category_id = client.post("/category", json={"categoryName": "Economy"}).json()[
            "payload"
        ]["category"]["id"]

        news_id = client.post(
            "/news",
            json={
                "title": "Rates hold steady",
                "description": "The central bank kept rates unchanged",
                "categoryId": category_id,
            },
        ).json()["payload"]["news"]["id"]

        first_read = client.get(f"/news/{news_id}").json()["payload"]
        assert first_read["fromCache"] is False
        assert first_read["news"]["category"]["categoryName"] == "Economy"

        client.delete(f"/news/{news_id}")
        assert client.get(f"/news/{news_id}").status_code == 404
        assert client.get("/news").json()["payload"]["pagination"]["total"] == 0

        client.post(f"/news/restore/{news_id}")
        assert client.get(f"/news/{news_id}").status_code == 200
        assert client.get("/news").json()["payload"]["pagination"]["total"] == 1

        client.delete(f"/category/{category_id}")
        assert client.get(f"/news/{news_id}").status_code == 404
        assert client.get("/news/deleted").json()["payload"]["news"] == []


@pytest.mark.integration
class TestErrorHandling:
    """Test the error envelope for failures outside the domain errors."""

    def test_unknown_route(self, client):
        response = client.get("/nowhere")

        assert response.status_code == 404
        data = response.json()
        assert data["status"] == 404
        assert data["errors"] == []

    def test_wrong_method(self, client):
        response = client.put(f"/news/{uuid.uuid4()}", json={})

        assert response.status_code == 405
        assert response.json()["status"] == 405

    def test_malformed_json_body(self, client):
        response = client.post(
            "/category",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Validation failed"

    def test_unexpected_error_is_generic_500(self, test_app, client, caplog):
        def explode():
            raise RuntimeError("database password is hunter2")

        test_app.add_api_route("/explode", explode, methods=["GET"])

        with caplog.at_level(logging.ERROR, logger="newsroom.api.error_handlers"):
            response = client.get("/explode")

        assert response.status_code == 500
        assert response.json() == {
            "status": 500,
            "message": "Internal server error",
            "errors": [],
        }
        assert "hunter2" not in response.text
        assert any(r.levelno == logging.ERROR for r in caplog.records)

    def test_client_errors_logged_as_warning(self, client, caplog):
        with caplog.at_level(logging.WARNING, logger="newsroom.api.error_handlers"):
            client.get(f"/news/{uuid.uuid4()}")

        record = next(r for r in caplog.records if r.name == "newsroom.api.error_handlers")
        assert record.levelno == logging.WARNING
        assert record.status == 404
        assert record.request_path.startswith("/news/")


@pytest.mark.integration
class TestApplication:
    """Test the assembled application in newsroom.main."""

    def test_root(self, app_client):
        response = app_client.get("/")

        assert response.status_code == 200
        assert response.json()["name"] == "Newsroom API"

    def test_health(self, app_client):
        response = app_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_correlation_id_generated(self, app_client):
        response = app_client.get("/health")

        assert uuid.UUID(response.headers[CORRELATION_HEADER])

    def test_correlation_id_propagated(self, app_client):
        response = app_client.get("/health", headers={CORRELATION_HEADER: "req-123"})

        assert response.headers[CORRELATION_HEADER] == "req-123"

    def test_routers_mounted(self, app_client, test_news):
        assert app_client.get("/category").status_code == 200
        assert app_client.get(f"/news/{test_news.id}").status_code == 200
