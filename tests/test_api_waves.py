"""Tests for the wave HTTP API."""
import pytest
from fastapi.testclient import TestClient

from lifttrax.api.routes.dependencies import get_catalog
from lifttrax.config.settings import Settings, get_settings
from lifttrax.main import create_app
from lifttrax.models.enums import Muscle


@pytest.fixture
def settings(tmp_path):
    return Settings(
        catalog_path=str(tmp_path / "missing.yaml"),
        default_week_count=3,
        max_week_count=8,
        log_json=True,
    )


@pytest.fixture
def app(settings, catalog):
    app = create_app()
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_catalog] = lambda: catalog
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app)


class TestHealth:
    """Test the health endpoint."""

    def test_health(self, client):
        """Test health reports healthy and echoes the request ID."""
        response = client.get("/health", headers={"X-Request-ID": "req-health"})

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.headers["X-Request-ID"] == "req-health"


class TestCreateWave:
    """Test POST /waves."""

    def test_generates_requested_weeks(self, client):
        """Test a seeded request returns the wave in the response envelope."""
        response = client.post("/waves", json={"weeks": 2, "seed": 11})

        assert response.status_code == 200
        body = response.json()
        assert body["errors"] == []
        assert body["data"]["week_count"] == 2

        week = body["data"]["weeks"][0]
        assert week["week"] == 1
        assert [day["day"] for day in week["days"]] == ["monday", "tuesday", "thursday", "friday"]

        monday = week["days"][0]["entries"]
        assert monday[0]["name"] == "Warmup Circuit"
        assert monday[0]["type"] == "circuit"
        assert monday[0]["circuit"]["warmup"] is True
        assert monday[1]["single"]["metric"] == {
            "kind": "reps",
            "description": "1 reps",
            "reps": 1,
            "min_reps": None,
            "max_reps": None,
            "seconds": None,
            "feet": None,
        }

    def test_seed_is_reproducible(self, client):
        """Test the same seed yields the same wave."""
        first = client.post("/waves", json={"weeks": 2, "seed": 5}).json()["data"]
        second = client.post("/waves", json={"weeks": 2, "seed": 5}).json()["data"]

        assert first == second

    def test_default_week_count(self, client):
        """Test the configured default is used when weeks is omitted."""
        response = client.post("/waves", json={})

        assert response.json()["data"]["week_count"] == 3

    def test_too_many_weeks(self, client):
        """Test requests above the configured maximum are rejected."""
        response = client.post("/waves", json={"weeks": 9})

        assert response.status_code == 400
        assert response.json()["errors"][0]["code"] == "VAL_WEEKS_001"

    def test_zero_weeks_rejected_by_schema(self, client):
        """Test the request schema rejects non-positive week counts."""
        response = client.post("/waves", json={"weeks": 0})

        assert response.status_code == 422

    def test_catalog_shortage(self, app, client, make_catalog):
        """Test generation errors map to 422 with the request ID in meta."""
        app.dependency_overrides[get_catalog] = lambda: make_catalog(skip_muscles=(Muscle.CALF,))

        response = client.post("/waves", json={"weeks": 2}, headers={"X-Request-ID": "req-short"})

        assert response.status_code == 422
        body = response.json()
        assert body["errors"][0]["code"] == "GEN_VARIETY_CALF"
        assert body["meta"]["request_id"] == "req-short"

    def test_missing_catalog_file(self, app, client):
        """Test an unreadable configured catalog is reported as a validation error."""
        del app.dependency_overrides[get_catalog]

        response = client.post("/waves", json={"weeks": 1})

        assert response.status_code == 400
        assert response.json()["errors"][0]["code"] == "VAL_CATALOG_001"

    def test_hypertrophy_program(self, client):
        """Test the program field selects the hypertrophy generator."""
        response = client.post("/waves", json={"weeks": 1, "seed": 2, "program": "hypertrophy"})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["program"] == "hypertrophy"
        monday = data["weeks"][0]["days"][0]["entries"]
        assert monday[1]["name"] == "Main Hypertrophy"
        assert monday[1]["single"]["rpe"] == 8.0
        assert monday[1]["single"]["metric"]["kind"] == "reps_range"
        assert (monday[1]["single"]["metric"]["min_reps"], monday[1]["single"]["metric"]["max_reps"]) == (8, 12)

    def test_unknown_program_rejected(self, client):
        """Test programs outside the enum fail request validation."""
        response = client.post("/waves", json={"weeks": 1, "program": "powerbuilding"})

        assert response.status_code == 422

    def test_default_catalog_from_other_directory(self, app, client, tmp_path, monkeypatch):
        """Test the relative default catalog path is found outside the project root."""
        monkeypatch.chdir(tmp_path)
        app.dependency_overrides[get_settings] = lambda: Settings(
            catalog_path="data/exercise_catalog.yaml", default_week_count=2, max_week_count=8
        )
        del app.dependency_overrides[get_catalog]

        response = client.post("/waves", json={"seed": 4})

        assert response.status_code == 200
        assert response.json()["data"]["week_count"] == 2


class TestCreateWaveMarkdown:
    """Test POST /waves/markdown."""

    def test_markdown(self, client):
        """Test the wave is returned as Markdown text."""
        response = client.post("/waves/markdown", json={"weeks": 1, "seed": 3})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/markdown")
        lines = response.text.splitlines()
        assert lines[0] == "# Week 1"
        assert "## Monday" in lines
        assert "### Max Effort Single" in lines
