import logging

from fastapi import APIRouter, Depends, HTTPException

from config.ai_settings import load_ai_settings
from domain.entities import ModerationInput, PostInfo, SummaryInput, TaggingInput
from domain.exceptions import ContentAIError, EmptyOutput, InvalidInput, ProviderUnavailable, SchemaViolation
from domain.services.generation_client import GenerationClient, get_generation_client
from domain.services.moderation_service import ModerationService
from domain.services.summary_service import SummaryService
from domain.services.tagging_service import TaggingService
from presentation.schemas.content_ai_schemas import (ModerationRequest, ModerationResponse, SummaryRequest,
                                                     SummaryResponse, TaggingRequest, TaggingResponse)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ai", tags=["Content AI"])


def get_moderation_service(client: GenerationClient = Depends(get_generation_client)) -> ModerationService:
    """Dependency injection for ModerationService"""
    return ModerationService(client, model_id=load_ai_settings().model_id)


def get_summary_service(client: GenerationClient = Depends(get_generation_client)) -> SummaryService:
    """Dependency injection for SummaryService"""
    settings = load_ai_settings()
    return SummaryService(client, model_id=settings.model_id, language=settings.summary_language)


def get_tagging_service(client: GenerationClient = Depends(get_generation_client)) -> TaggingService:
    """Dependency injection for TaggingService"""
    return TaggingService(client, model_id=load_ai_settings().model_id)


def _to_http_error(e: ContentAIError) -> HTTPException:
    """Map domain errors onto HTTP status codes"""
    if isinstance(e, InvalidInput):
        return HTTPException(status_code=400, detail=str(e))
    if isinstance(e, ProviderUnavailable):
        return HTTPException(status_code=503, detail="Generation provider unavailable")
    if isinstance(e, (SchemaViolation, EmptyOutput)):
        return HTTPException(status_code=502, detail=f"Invalid model output: {e}")
    return HTTPException(status_code=500, detail=str(e))


@router.post("/moderate", response_model=ModerationResponse, summary="Moderate a comment")
async def moderate_comment(request: ModerationRequest, service: ModerationService = Depends(get_moderation_service)):
    data = ModerationInput(
        comment=request.comment,
        post=PostInfo(title=request.post.title, summary=request.post.summary),
    )
    try:
        result = await service.moderate(data)
    except ContentAIError as e:
        logger.error(f"Moderation failed: {type(e).__name__}: {e}")
        raise _to_http_error(e)
    return ModerationResponse(safe=result.safe, reason=result.reason)


@router.post("/summarize", response_model=SummaryResponse, summary="Summarize text")
async def summarize_text(request: SummaryRequest, service: SummaryService = Depends(get_summary_service)):
    try:
        result = await service.summarize(SummaryInput(text=request.text))
    except ContentAIError as e:
        logger.error(f"Summary failed: {type(e).__name__}: {e}")
        raise _to_http_error(e)
    return SummaryResponse(summary=result.summary)


@router.post("/tags", response_model=TaggingResponse, summary="Generate tags for an article")
async def generate_tags(request: TaggingRequest, service: TaggingService = Depends(get_tagging_service)):
    data = TaggingInput(
        title=request.title,
        summary=request.summary,
        content=request.content,
        existing_tags=tuple(request.existing_tags),
    )
    try:
        tags = await service.generate_tags(data)
    except ContentAIError as e:
        logger.error(f"Tagging failed: {type(e).__name__}: {e}")
        raise _to_http_error(e)
    return TaggingResponse(tags=tags)


# Exported for main.py
content_ai_router = router
