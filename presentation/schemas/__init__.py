from .content_ai_schemas import (
    PostSchema, ModerationRequest, ModerationResponse,
    SummaryRequest, SummaryResponse,
    TaggingRequest, TaggingResponse
)

__all__ = [
    "PostSchema", "ModerationRequest", "ModerationResponse",
    "SummaryRequest", "SummaryResponse",
    "TaggingRequest", "TaggingResponse"
]
