import pytest
from fastapi.testclient import TestClient

from domain.exceptions import ProviderUnavailable
from domain.services.generation_client import get_generation_client
from main import app


class TestContentAIAPI:
    """HTTP routes backed by a fake generation client"""

    @pytest.fixture
    def client(self):
        """Test client that clears dependency overrides afterwards"""
        yield TestClient(app)
        app.dependency_overrides.clear()

    @pytest.fixture
    def use_outputs(self, fake_client):
        """Install a fake generation client with the given outputs"""
        def _use(*outputs):
            backend = fake_client(*outputs)
            app.dependency_overrides[get_generation_client] = lambda: backend
            return backend

        return _use

    def test_moderate_success(self, client, use_outputs):
        """Moderation of a civil comment"""
        backend = use_outputs('{"safe": true, "reason": "Civil feedback"}')

        response = client.post(
            "/ai/moderate",
            json={"comment": "Good points, but section 2 is unclear.", "post": {"title": "On caching"}},
        )

        assert response.status_code == 200
        assert response.json() == {"safe": True, "reason": "Civil feedback"}
        assert "Article summary: (none)" in backend.requests[0].user_message

    def test_moderate_validation_error(self, client, use_outputs):
        """An empty comment fails request validation"""
        use_outputs()

        response = client.post("/ai/moderate", json={"comment": "", "post": {"title": "T"}})

        assert response.status_code == 422

    def test_moderate_blank_comment(self, client, use_outputs):
        """A whitespace-only comment returns 400"""
        backend = use_outputs()

        response = client.post("/ai/moderate", json={"comment": "   ", "post": {"title": "T"}})

        assert response.status_code == 400
        assert backend.requests == []

    def test_moderate_schema_violation(self, client, use_outputs):
        """Malformed model output returns 502"""
        use_outputs('{"safe": true}')

        response = client.post("/ai/moderate", json={"comment": "hello", "post": {"title": "T"}})

        assert response.status_code == 502

    def test_moderate_deeply_nested_output(self, client, use_outputs):
        """Deeply nested model output returns 502"""
        use_outputs("[" * 2000 + "]" * 2000)

        response = client.post("/ai/moderate", json={"comment": "hello", "post": {"title": "T"}})

        assert response.status_code == 502

    def test_moderate_provider_unavailable(self, client, use_outputs):
        """Backend failure returns 503"""
        use_outputs(ProviderUnavailable("connection refused"))

        response = client.post("/ai/moderate", json={"comment": "hello", "post": {"title": "T"}})

        assert response.status_code == 503
        assert response.json()["detail"] == "Generation provider unavailable"

    def test_summarize_success(self, client, use_outputs):
        """Summary of an article"""
        use_outputs("  一段简短的摘要。 ")

        response = client.post("/ai/summarize", json={"text": "A long article body."})

        assert response.status_code == 200
        assert response.json() == {"summary": "一段简短的摘要。"}

    def test_summarize_empty_output(self, client, use_outputs):
        """A blank summary returns 502"""
        use_outputs("   ")

        response = client.post("/ai/summarize", json={"text": "A long article body."})

        assert response.status_code == 502

    def test_summarize_missing_text(self, client, use_outputs):
        """Missing text fails request validation"""
        use_outputs()

        response = client.post("/ai/summarize", json={})

        assert response.status_code == 422

    def test_tags_success(self, client, use_outputs):
        """Tags are deduplicated and the vocabulary reaches the prompt"""
        backend = use_outputs('{"tags": ["Python", "asyncio", "Python"]}')

        response = client.post(
            "/ai/tags",
            json={"title": "asyncio deep dive", "content": "Event loops...", "existing_tags": ["Python", "Go"]},
        )

        assert response.status_code == 200
        assert sorted(response.json()["tags"]) == ["Python", "asyncio"]
        assert '["Python", "Go"]' in backend.requests[0].user_message

    def test_tags_default_vocabulary(self, client, use_outputs):
        """The vocabulary defaults to an empty list"""
        backend = use_outputs('{"tags": ["Rust"]}')

        response = client.post("/ai/tags", json={"title": "Ownership in Rust"})

        assert response.status_code == 200
        assert "\n[]\n" in backend.requests[0].user_message

    def test_tags_schema_violation(self, client, use_outputs):
        """Non-JSON model output returns 502"""
        use_outputs("not json")

        response = client.post("/ai/tags", json={"title": "T"})

        assert response.status_code == 502
