from .content import (ModerationInput, ModerationResult, PostInfo, SummaryInput,
                      SummaryResult, TaggingInput)
from .schema_descriptor import FieldType, SchemaDescriptor, SchemaField
from .text_generation import GenerationRequest, PromptMessages

__all__ = [
    "PostInfo",
    "ModerationInput",
    "ModerationResult",
    "SummaryInput",
    "SummaryResult",
    "TaggingInput",
    "FieldType",
    "SchemaField",
    "SchemaDescriptor",
    "GenerationRequest",
    "PromptMessages",
]
