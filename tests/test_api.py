"""
Tests for FastAPI endpoints
"""
import pytest
from fastapi.testclient import TestClient
from unittest.mock import Mock

import api
from api import app, get_analyzer
from exceptions import AnalysisError, FailureKind
from seo_analyzer import SEOAnalyzer
from storage import NullResultSink

from conftest import make_page


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


def override_analyzer(analyzer):
    app.dependency_overrides[get_analyzer] = lambda: analyzer


class TestAPIEndpoints:
    """Test class for API endpoints"""

    def test_root_endpoint(self, client):
        response = client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "SEO Analyzer API"
        assert data["version"] == "1.0.0"
        assert "/docs" in data["docs"]

    def test_health_check(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_analyze_url_success(self, client, fake_fetcher):
        fake_fetcher.html = make_page()
        override_analyzer(SEOAnalyzer(fetcher=fake_fetcher, sink=NullResultSink()))

        response = client.post("/analyze", json={"url": "https://example.com/garden"})

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["message"] == "URL analysis completed"
        assert data["data"]["url"] == "https://example.com/garden"
        assert data["data"]["overallScore"] == 100
        assert data["data"]["issues"] == []
        assert len(data["data"]["recommendations"]) == 3

    def test_analyze_url_failure(self, client):
        analyzer = Mock()
        analyzer.analyze.side_effect = AnalysisError(FailureKind.BAD_STATUS, status_code=404)
        override_analyzer(analyzer)

        response = client.post("/analyze", json={"url": "http://example.com/missing"})

        assert response.status_code == 502
        data = response.json()
        assert data["success"] is False
        assert data["message"] == "Failed to analyze the website"
        assert data["data"] == {"kind": "bad_status", "status_code": 404}

    def test_analyze_url_invalid_input(self, client):
        response = client.post("/analyze", json={"url": "invalid-url"})
        assert response.status_code == 422

    def test_analyzer_not_initialized(self, client, monkeypatch):
        monkeypatch.setattr(api, "analyzer", None)
        response = client.post("/analyze", json={"url": "https://example.com"})
        assert response.status_code == 500
