from .content_ai_api import content_ai_router

__all__ = [
    "content_ai_router",
]
