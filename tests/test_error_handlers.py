import pytest
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from app.utils.exceptions import ConflictError, InternalError, NotFoundError


class TestErrorHandlers:
    """Test error handlers"""

    def test_404_unknown_route(self, client):
        """Test unknown routes use the error envelope"""
        response = client.get("/nonexistent-route")

        assert response.status_code == 404
        assert response.json["success"] is False
        assert "message" in response.json

    def test_405_method_not_allowed(self, client):
        response = client.put("/api/v1/categories/some-id", json={})

        assert response.status_code == 405
        assert response.json["success"] is False

    def test_app_error_with_field(self, app):
        client = app.test_client()

        @app.route("/test-not-found")
        def test_not_found():
            raise NotFoundError("Thing not found", field="id")

        response = client.get("/test-not-found")
        assert response.status_code == 404
        assert response.json == {
            "success": False,
            "message": "Thing not found",
            "errors": [{"field": "id", "message": "Thing not found"}],
        }

    def test_app_error_without_field(self, app):
        client = app.test_client()

        @app.route("/test-conflict")
        def test_conflict():
            raise ConflictError("Duplicate")

        response = client.get("/test-conflict")
        assert response.status_code == 409
        assert "errors" not in response.json

    def test_internal_error(self, app):
        client = app.test_client()

        @app.route("/test-internal")
        def test_internal():
            raise InternalError()

        response = client.get("/test-internal")
        assert response.status_code == 500
        assert response.json["message"] == "Internal server error"

    def test_500_error_handler(self, app):
        """Test unexpected exceptions are reduced to a generic 500"""
        client = app.test_client()

        @app.route("/test-500")
        def test_500():
            raise Exception("secret connection string")

        response = client.get("/test-500")
        assert response.status_code == 500
        assert response.json == {"success": False, "message": "Internal server error"}

    def test_integrity_error_handler(self, app):
        """Test IntegrityError handler"""
        client = app.test_client()

        @app.route("/test-integrity")
        def test_integrity():
            raise IntegrityError("test", "test", "test")

        response = client.get("/test-integrity")
        assert response.status_code == 409
        assert response.json["message"] == "Database integrity error"

    def test_sqlalchemy_error_handler(self, app):
        """Test database errors are reported without driver detail"""
        client = app.test_client()

        @app.route("/test-database")
        def test_database():
            raise SQLAlchemyError("connection refused on 10.0.0.5")

        response = client.get("/test-database")
        assert response.status_code == 500
        assert response.json == {"success": False, "message": "Database error"}


class TestHealth:
    """Test health endpoint"""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json == {"status": "healthy"}
