import logging
from typing import Iterable, List

from config.ai_settings import DEFAULT_MODEL_ID
from domain.entities.content import TaggingInput
from domain.entities.schema_descriptor import FieldType, SchemaDescriptor, SchemaField
from domain.entities.text_generation import GenerationRequest
from domain.services.generation_client import GenerationClient
from domain.services.prompt_builder import TAGGING_TEMPERATURE, build_tagging_prompt

logger = logging.getLogger(__name__)

TAGGING_SCHEMA = SchemaDescriptor(
    name="tagging_result",
    fields=(SchemaField("tags", FieldType.STRING_ARRAY, "List of generated tags"),),
)


def dedupe_tags(tags: Iterable[str]) -> List[str]:
    """Drop exact duplicates, keeping the first occurrence"""
    return list(dict.fromkeys(tags))


class TaggingService:
    """Topical tags for an article, matched against an existing vocabulary"""

    def __init__(self, generation_client: GenerationClient, model_id: str = DEFAULT_MODEL_ID):
        self.generation_client = generation_client
        self.model_id = model_id

    async def generate_tags(self, data: TaggingInput) -> List[str]:
        """Generate distinct tags for an article.

        The result has set semantics: entries are pairwise distinct and their
        order carries no meaning. The 1-3 size bound is requested from the
        model but not enforced.
        """
        prompt = build_tagging_prompt(data)
        request = GenerationRequest.from_prompt(
            self.model_id, prompt, temperature=TAGGING_TEMPERATURE, output_schema=TAGGING_SCHEMA
        )

        output = await self.generation_client.generate(request)
        tags = dedupe_tags(output["tags"])

        logger.info(f"Generated {len(tags)} tags ({len(output['tags'])} before dedupe)")
        return tags
