"""
Tests for the HTTP routes
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from blog_categorizer.app import app
from blog_categorizer.core.config import AppSettings
from blog_categorizer.core.dependencies import get_app_settings, get_categorizer, get_resolver
from blog_categorizer.core.errors import AiCallFailed, ExtractionError, FetchBlocked
from blog_categorizer.schemas import Category
from conftest import StubCategorizer, StubResolver


@pytest.fixture
def resolver():
    return StubResolver(text="An article about Azure Functions")


@pytest.fixture
def categorizer():
    return StubCategorizer(category=Category.CLOUD)


@pytest.fixture
def client(resolver, categorizer):
    app.dependency_overrides[get_resolver] = lambda: resolver
    app.dependency_overrides[get_categorizer] = lambda: categorizer
    app.dependency_overrides[get_app_settings] = lambda: AppSettings(max_input_chars=30000)
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestCategorizeValidation:
    """Test input validation on POST /categorize"""

    @pytest.mark.parametrize("body", [{"input": ""}, {"input": "   "}, {"input": "\n\t"}, {}, {"input": None}])
    def test_blank_input(self, client, resolver, categorizer, body):
        """Test blank input is rejected without touching any service"""
        resp = client.post("/categorize", json=body)

        assert resp.status_code == 400
        assert resp.json() == {"error": "Input required (URL or article text)."}
        assert resolver.calls == []
        assert categorizer.calls == []

    def test_missing_body(self, client, resolver, categorizer):
        resp = client.post("/categorize")

        assert resp.status_code == 400
        assert "error" in resp.json()
        assert resolver.calls == []
        assert categorizer.calls == []

    def test_non_string_input(self, client, categorizer):
        resp = client.post("/categorize", json={"input": 42})

        assert resp.status_code == 400
        assert categorizer.calls == []


class TestCategorize:
    """Test POST /categorize"""

    def test_success(self, client, resolver, categorizer):
        resp = client.post("/categorize", json={"input": "https://blog.example.com/post"})

        assert resp.status_code == 200
        assert resp.json() == {"category": "Cloud"}
        assert resolver.calls == ["https://blog.example.com/post"]
        assert categorizer.calls == ["An article about Azure Functions"]

    def test_dotnet_category_serialized(self, client, categorizer):
        categorizer.category = Category.DOTNET

        resp = client.post("/categorize", json={"input": "Records in C# 12"})

        assert resp.json() == {"category": ".NET"}

    def test_long_text_truncated(self, client, resolver, categorizer):
        """Test text over the cap reaches the categorizer at exactly the cap length"""
        resolver.text = "x" * 40000

        resp = client.post("/categorize", json={"input": "some text"})

        assert resp.status_code == 200
        assert len(categorizer.calls[0]) == 30000

    def test_text_at_cap_untouched(self, client, resolver, categorizer):
        resolver.text = "x" * 30000

        client.post("/categorize", json={"input": "some text"})

        assert len(categorizer.calls[0]) == 30000

    def test_extraction_failure(self, client, resolver, categorizer):
        """Test fetch/extract errors map to a 500 problem with detail"""
        resolver.error = FetchBlocked("Failed to fetch HTML (403 or blocked).")

        resp = client.post("/categorize", json={"input": "https://blog.example.com/post"})

        assert resp.status_code == 500
        assert resp.json()["detail"].startswith("Failed to fetch/extract URL:")
        assert "403 or blocked" in resp.json()["detail"]
        assert categorizer.calls == []

    def test_generic_extraction_error(self, client, resolver):
        resolver.error = ExtractionError("parser exploded")

        resp = client.post("/categorize", json={"input": "https://blog.example.com/post"})

        assert resp.status_code == 500
        assert "parser exploded" in resp.json()["detail"]

    def test_ai_failure(self, client, categorizer):
        """Test API errors map to a 500 problem with detail"""
        categorizer.error = AiCallFailed(401, "bad credentials")

        resp = client.post("/categorize", json={"input": "some text"})

        assert resp.status_code == 500
        assert resp.json()["detail"].startswith("AI classification failed:")
        assert "bad credentials" in resp.json()["detail"]

    def test_ai_network_failure(self, client, categorizer):
        categorizer.error = httpx.ConnectError("unreachable")

        resp = client.post("/categorize", json={"input": "some text"})

        assert resp.status_code == 500
        assert "unreachable" in resp.json()["detail"]


class TestHealthRoutes:
    """Test /api routes"""

    def test_health(self, client):
        resp = client.get("/api/health")

        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}

    def test_categories(self, client):
        resp = client.get("/api/categories")

        assert resp.status_code == 200
        data = resp.json()
        assert data["categories"] == ["Tech", "AI", "Cloud", ".NET", "Architecture", "Tutorials", "Other"]
        assert data["fallback"] == "Other"
