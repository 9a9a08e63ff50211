from dataclasses import dataclass, field
from typing import Optional, Sequence


@dataclass(frozen=True)
class PostInfo:
    title: str
    summary: Optional[str] = None


@dataclass(frozen=True)
class ModerationInput:
    comment: str
    post: PostInfo


@dataclass(frozen=True)
class ModerationResult:
    safe: bool
    reason: str


@dataclass(frozen=True)
class SummaryInput:
    text: str


@dataclass(frozen=True)
class SummaryResult:
    summary: str


@dataclass(frozen=True)
class TaggingInput:
    title: str
    summary: Optional[str] = None
    content: Optional[str] = None
    existing_tags: Sequence[str] = field(default_factory=tuple)
