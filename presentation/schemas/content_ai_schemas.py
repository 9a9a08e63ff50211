from typing import List, Optional

from pydantic import BaseModel, Field


class PostSchema(BaseModel):
    """Post the comment belongs to"""

    title: str = Field(..., description="Article title", min_length=1)
    summary: Optional[str] = Field(None, description="Article summary")


class ModerationRequest(BaseModel):
    comment: str = Field(..., description="Comment text to review", min_length=1)
    post: PostSchema


class ModerationResponse(BaseModel):
    safe: bool = Field(..., description="Whether the comment may be published")
    reason: str = Field(..., description="Short reason for the decision")


class SummaryRequest(BaseModel):
    text: str = Field(..., description="Text to summarize", min_length=1)


class SummaryResponse(BaseModel):
    summary: str = Field(..., description="Generated summary (about 200 characters at most, not enforced)")


class TaggingRequest(BaseModel):
    title: str = Field(..., description="Article title", min_length=1)
    summary: Optional[str] = Field(None, description="Article summary")
    content: Optional[str] = Field(None, description="Article body; only a bounded prefix is sent to the model")
    existing_tags: List[str] = Field(default_factory=list, description="Existing tag vocabulary")


class TaggingResponse(BaseModel):
    tags: List[str] = Field(..., description="Distinct tags; order is not significant")
