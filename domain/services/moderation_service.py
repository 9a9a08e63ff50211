import logging

from config.ai_settings import DEFAULT_MODEL_ID
from domain.entities.content import ModerationInput, ModerationResult
from domain.entities.schema_descriptor import FieldType, SchemaDescriptor, SchemaField
from domain.entities.text_generation import GenerationRequest
from domain.exceptions import SchemaViolation
from domain.services.generation_client import GenerationClient
from domain.services.prompt_builder import build_moderation_prompt

logger = logging.getLogger(__name__)

MODERATION_SCHEMA = SchemaDescriptor(
    name="moderation_result",
    fields=(
        SchemaField("safe", FieldType.BOOLEAN, "Whether the comment is safe to publish"),
        SchemaField("reason", FieldType.STRING, "Short explanation of why the comment was approved or rejected"),
    ),
)


class ModerationService:
    """Accept/reject decisions for blog comments"""

    def __init__(self, generation_client: GenerationClient, model_id: str = DEFAULT_MODEL_ID):
        self.generation_client = generation_client
        self.model_id = model_id

    async def moderate(self, data: ModerationInput) -> ModerationResult:
        """Decide whether a comment may be published.

        The decision is returned as the model produced it; the model is not
        deterministic, so callers should rely on schema conformance only.
        """
        prompt = build_moderation_prompt(data)
        request = GenerationRequest.from_prompt(self.model_id, prompt, output_schema=MODERATION_SCHEMA)

        output = await self.generation_client.generate(request)

        if not output["reason"].strip():
            raise SchemaViolation(
                "Moderation reason must not be empty", schema_name=MODERATION_SCHEMA.name, value=output
            )

        logger.info(f"Moderated comment ({len(data.comment)} chars): safe={output['safe']}")
        return ModerationResult(safe=output["safe"], reason=output["reason"])
