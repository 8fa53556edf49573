"""Integration tests for the summaries API.

Tests for summarizer/api/v1/summaries.py and the orchestration error
mapping in summarizer/main.py.
"""

import pytest

from summarizer.config import ProviderType
from summarizer.core.coordinator import SummarizationCoordinator, get_coordinator
from summarizer.main import app
from tests.fixtures.mock_providers import build_registry, fail

pytestmark = pytest.mark.integration

TRANSCRIPT = b"Alice: we ship Friday.\nBob: I will write the release notes."


async def create_transcript(client) -> str:
    response = await client.post(
        "/api/v1/transcripts",
        files={"file": ("standup.txt", TRANSCRIPT, "text/plain")},
    )
    assert response.status_code == 200
    return response.json()["id"]


def use_providers(available) -> dict:
    registry, fakes = build_registry(available)
    coordinator = SummarizationCoordinator(registry)
    app.dependency_overrides[get_coordinator] = lambda: coordinator
    return fakes


class TestCreateSummary:
    async def test_fallback_provenance_is_recorded(self, async_client, both_available):
        transcript_id = await create_transcript(async_client)

        response = await async_client.post(
            "/api/v1/summaries", json={"transcript_id": transcript_id}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["content"] == "Groq summary"
        assert data["generated_summary"] == "Groq summary"
        assert data["ai_provider"] == "groq"
        assert data["ai_model"] == "llama3-70b-8192"
        assert data["custom_prompt"] == ""
        assert data["transcript_id"] == transcript_id

        _, fakes = both_available
        assert fakes[ProviderType.GROQ].models_called == [
            "llama3-8b-8192",
            "llama3-70b-8192",
        ]
        assert fakes[ProviderType.OPENAI].calls == []

    async def test_custom_prompt_reaches_provider(self, async_client, both_available):
        transcript_id = await create_transcript(async_client)

        response = await async_client.post(
            "/api/v1/summaries",
            json={"transcript_id": transcript_id, "custom_prompt": "Action items only"},
        )

        assert response.json()["custom_prompt"] == "Action items only"
        _, fakes = both_available
        user_prompt = fakes[ProviderType.GROQ].calls[0]["user_prompt"]
        assert user_prompt.startswith("Custom instructions: Action items only")
        assert TRANSCRIPT.decode() in user_prompt

    async def test_missing_transcript(self, async_client):
        response = await async_client.post(
            "/api/v1/summaries", json={"transcript_id": "nope"}
        )

        assert response.status_code == 404
        assert response.json()["error"] == "Transcript not found"

    async def test_missing_transcript_id(self, async_client):
        response = await async_client.post("/api/v1/summaries", json={})
        assert response.status_code == 422


class TestOrchestrationErrors:
    async def test_no_provider_is_503(self, async_client):
        transcript_id = await create_transcript(async_client)
        use_providers({})

        response = await async_client.post(
            "/api/v1/summaries", json={"transcript_id": transcript_id}
        )

        assert response.status_code == 503
        assert "GROQ_API_KEY" in response.json()["error"]

    async def test_single_provider_exhausted_is_502(self, async_client):
        transcript_id = await create_transcript(async_client)
        use_providers(
            {ProviderType.OPENAI: {"gpt-3.5-turbo": fail(ProviderType.OPENAI, "quota")}}
        )

        response = await async_client.post(
            "/api/v1/summaries", json={"transcript_id": transcript_id}
        )

        assert response.status_code == 502
        assert response.json() == {
            "error": "Failed to generate summary. No alternative AI service available.",
            "detail": [
                {
                    "provider": "openai",
                    "models_tried": [
                        {"model": "gpt-3.5-turbo", "error_message": "quota"}
                    ],
                }
            ],
        }

    async def test_all_providers_exhausted_is_502(self, async_client):
        transcript_id = await create_transcript(async_client)
        use_providers(
            {
                ProviderType.GROQ: {"m1": fail(ProviderType.GROQ, "a")},
                ProviderType.OPENAI: {"m1": fail(ProviderType.OPENAI, "b")},
            }
        )

        response = await async_client.post(
            "/api/v1/summaries", json={"transcript_id": transcript_id}
        )

        assert response.status_code == 502
        data = response.json()
        assert data["error"] == "Failed to generate summary with available AI services"
        assert [trail["provider"] for trail in data["detail"]] == ["groq", "openai"]

    async def test_failed_summary_is_not_stored(self, async_client):
        transcript_id = await create_transcript(async_client)
        use_providers({ProviderType.GROQ: {"m1": fail(ProviderType.GROQ)}})

        response = await async_client.post(
            "/api/v1/summaries", json={"transcript_id": transcript_id}
        )

        assert response.status_code == 502
        assert "id" not in response.json()


class TestGetAndUpdateSummary:
    async def create_summary(self, client) -> dict:
        transcript_id = await create_transcript(client)
        response = await client.post(
            "/api/v1/summaries", json={"transcript_id": transcript_id}
        )
        assert response.status_code == 200
        return response.json()

    async def test_get_summary(self, async_client):
        created = await self.create_summary(async_client)

        response = await async_client.get(f"/api/v1/summaries/{created['id']}")

        assert response.status_code == 200
        assert response.json()["content"] == created["content"]

    async def test_get_missing_summary(self, async_client):
        response = await async_client.get("/api/v1/summaries/nope")
        assert response.status_code == 404

    async def test_edit_summary(self, async_client):
        created = await self.create_summary(async_client)

        response = await async_client.put(
            f"/api/v1/summaries/{created['id']}",
            json={"edited_summary": "My edited notes"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["content"] == "My edited notes"
        assert data["generated_summary"] == created["generated_summary"]

        fetched = await async_client.get(f"/api/v1/summaries/{created['id']}")
        assert fetched.json()["content"] == "My edited notes"

    async def test_blank_edit_is_400(self, async_client):
        created = await self.create_summary(async_client)

        response = await async_client.put(
            f"/api/v1/summaries/{created['id']}", json={"edited_summary": "  "}
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Edited summary content is required"

    async def test_edit_missing_summary(self, async_client):
        response = await async_client.put(
            "/api/v1/summaries/nope", json={"edited_summary": "text"}
        )
        assert response.status_code == 404
