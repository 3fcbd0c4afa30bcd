"""
API tests for system endpoints and startup against the bundled data.
"""

from fastapi.testclient import TestClient

from movie_catalog.api import config, dependencies
from movie_catalog.api.main import app
from movie_catalog.core.catalog import Catalog
from movie_catalog.core.reviews import ReviewService


class TestHealth:
    """Tests for GET /api/health."""

    def test_health_with_bundled_data(self):
        """The bundled catalog reports healthy with non-zero counts."""
        with TestClient(app) as client:
            r = client.get("/api/health")
        assert r.status_code == 200
        data = r.json()
        assert data["status"] == "healthy"
        assert data["movies"] > 0
        assert data["genres"] > 0
        assert data["reviews"] > 0

    def test_health_with_empty_catalog(self):
        """An empty catalog (failed load) reports degraded status."""
        app.dependency_overrides[dependencies.get_catalog] = lambda: Catalog()
        app.dependency_overrides[dependencies.get_review_service] = lambda: ReviewService()
        try:
            r = TestClient(app).get("/api/health")
        finally:
            app.dependency_overrides.clear()
        assert r.status_code == 200
        assert r.json() == {"status": "degraded", "movies": 0, "genres": 0, "reviews": 0}

    def test_bundled_search_scenarios(self):
        """Name search and an unsatisfiable name/genre pair on the bundled data."""
        with TestClient(app) as client:
            r = client.get("/movies/search", params={"name": "Prison"})
            assert r.status_code == 200
            assert all("prison" in m["movieName"].lower() for m in r.json()["movies"])

            r = client.get("/movies/search", params={"name": "Prison", "genre": "Comedy"})
            assert r.json()["movies"] == []


class TestConfig:
    """Tests for environment-driven configuration."""

    def test_defaults(self, monkeypatch):
        """Without env vars the bundled data file and port 8080 are used."""
        monkeypatch.delenv("MOVIES_DATA_PATH", raising=False)
        monkeypatch.delenv("API_PORT", raising=False)
        monkeypatch.delenv("LOG_FILE", raising=False)
        assert config.get_movies_path().endswith("movies.json")
        assert config.get_api_port() == 8080
        assert config.get_log_file() is None

    def test_env_overrides(self, monkeypatch):
        """Env vars override paths, port and log level."""
        monkeypatch.setenv("MOVIES_DATA_PATH", "/tmp/other.json")
        monkeypatch.setenv("API_PORT", "9000")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert config.get_movies_path() == "/tmp/other.json"
        assert config.get_api_port() == 9000
        assert config.get_log_level() == "DEBUG"
