import logging

from config.ai_settings import DEFAULT_MODEL_ID, DEFAULT_SUMMARY_LANGUAGE
from domain.entities.content import SummaryInput, SummaryResult
from domain.entities.text_generation import GenerationRequest
from domain.exceptions import EmptyOutput
from domain.services.generation_client import GenerationClient
from domain.services.prompt_builder import SUMMARY_TEMPERATURE, build_summary_prompt

logger = logging.getLogger(__name__)


class SummaryService:
    """Short summaries of free-form text.

    The length cap is a prompt instruction only; a summary longer than
    SUMMARY_MAX_CHARS is returned as-is.
    """

    def __init__(
        self,
        generation_client: GenerationClient,
        model_id: str = DEFAULT_MODEL_ID,
        language: str = DEFAULT_SUMMARY_LANGUAGE,
    ):
        self.generation_client = generation_client
        self.model_id = model_id
        self.language = language

    async def summarize(self, data: SummaryInput) -> SummaryResult:
        prompt = build_summary_prompt(data, language=self.language)
        request = GenerationRequest.from_prompt(self.model_id, prompt, temperature=SUMMARY_TEMPERATURE)

        text = await self.generation_client.generate(request)
        summary = text.strip()
        if not summary:
            logger.warning(f"Model {self.model_id} returned a blank summary")
            raise EmptyOutput("Model returned an empty summary")

        logger.info(f"Summarized {len(data.text)} chars into {len(summary)} chars")
        return SummaryResult(summary=summary)
