import json

import pytest

from domain.entities import ModerationInput, ModerationResult, PostInfo
from domain.exceptions import InvalidInput, ProviderUnavailable, SchemaViolation
from domain.services.moderation_service import MODERATION_SCHEMA, ModerationService


class TestModerationService:
    """Comment moderation"""

    @pytest.fixture
    def moderation_input(self):
        """Comment on a post with a summary"""
        return ModerationInput(
            comment="I disagree with this article's conclusion, the data doesn't support it.",
            post=PostInfo(title="Why benchmarks lie", summary="On microbenchmark pitfalls"),
        )

    @pytest.mark.asyncio
    async def test_moderate_success(self, fake_client, moderation_input):
        """An approved comment"""
        client = fake_client(json.dumps({"safe": True, "reason": "Civil criticism of the article"}))
        service = ModerationService(client, model_id="test-model")

        result = await service.moderate(moderation_input)

        assert result == ModerationResult(safe=True, reason="Civil criticism of the article")

        request = client.requests[0]
        assert request.model_id == "test-model"
        assert request.output_schema is MODERATION_SCHEMA
        assert request.temperature is None
        assert "Why benchmarks lie" in request.user_message
        assert moderation_input.comment in request.user_message

    @pytest.mark.asyncio
    async def test_moderate_rejection_is_returned_verbatim(self, fake_client, moderation_input):
        """A rejection is returned with the model's reason"""
        client = fake_client('{"safe": false, "reason": "Prompt injection attempt"}')

        result = await ModerationService(client).moderate(moderation_input)

        assert result.safe is False
        assert result.reason == "Prompt injection attempt"

    def test_schema_fields(self):
        """The verdict schema has safe and reason"""
        assert MODERATION_SCHEMA.field_names() == ["safe", "reason"]

    @pytest.mark.asyncio
    async def test_missing_field_raises_schema_violation(self, fake_client, moderation_input):
        """A verdict without a reason is rejected"""
        client = fake_client('{"safe": true}')

        with pytest.raises(SchemaViolation):
            await ModerationService(client).moderate(moderation_input)

    @pytest.mark.asyncio
    async def test_string_boolean_is_not_coerced(self, fake_client, moderation_input):
        """"true" as a string is not accepted for safe"""
        client = fake_client('{"safe": "false", "reason": "spam"}')

        with pytest.raises(SchemaViolation):
            await ModerationService(client).moderate(moderation_input)

    @pytest.mark.asyncio
    async def test_blank_reason_raises_schema_violation(self, fake_client, moderation_input):
        """A blank reason is rejected"""
        client = fake_client('{"safe": true, "reason": "  "}')

        with pytest.raises(SchemaViolation):
            await ModerationService(client).moderate(moderation_input)

    @pytest.mark.asyncio
    async def test_empty_comment_fails_before_provider_call(self, fake_client):
        """An empty comment never reaches the backend"""
        client = fake_client()

        with pytest.raises(InvalidInput):
            await ModerationService(client).moderate(ModerationInput(comment="", post=PostInfo(title="T")))

        assert client.requests == []

    @pytest.mark.asyncio
    async def test_provider_error_propagates(self, fake_client, moderation_input):
        """ProviderUnavailable is passed through"""
        client = fake_client(ProviderUnavailable("down"))

        with pytest.raises(ProviderUnavailable):
            await ModerationService(client).moderate(moderation_input)
