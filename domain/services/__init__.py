from .generation_client import GenerationClient, OpenAIGenerationClient, get_generation_client
from .moderation_service import MODERATION_SCHEMA, ModerationService
from .summary_service import SummaryService
from .tagging_service import TAGGING_SCHEMA, TaggingService

__all__ = [
    "GenerationClient",
    "OpenAIGenerationClient",
    "get_generation_client",
    "ModerationService",
    "MODERATION_SCHEMA",
    "SummaryService",
    "TaggingService",
    "TAGGING_SCHEMA",
]
