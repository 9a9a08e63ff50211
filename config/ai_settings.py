"""AI provider settings read from the environment.

Values come from the process environment (a ``.env`` file is loaded by
``config.env`` on import), so lower layers never parse variables themselves.
"""

import os
from dataclasses import dataclass
from typing import Optional

# Ensure .env is loaded
from config import env  # noqa: F401

DEFAULT_MODEL_ID = "@cf/meta/llama-3.3-70b-instruct-fp8-fast"
DEFAULT_SUMMARY_LANGUAGE = "Simplified Chinese"


@dataclass(frozen=True)
class AISettings:
    api_key: Optional[str]
    base_url: Optional[str]
    model_id: str = DEFAULT_MODEL_ID
    timeout_s: float = 60.0
    max_retries: int = 2
    summary_language: str = DEFAULT_SUMMARY_LANGUAGE


def _read_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


def _read_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {raw!r}")
    return value


def load_ai_settings() -> AISettings:
    """Build AISettings from environment variables"""
    return AISettings(
        api_key=os.getenv("AI_API_KEY") or os.getenv("OPENAI_API_KEY"),
        base_url=os.getenv("AI_BASE_URL") or None,
        model_id=os.getenv("AI_MODEL_ID") or DEFAULT_MODEL_ID,
        timeout_s=_read_float("AI_TIMEOUT_S", 60.0),
        max_retries=_read_int("AI_MAX_RETRIES", 2),
        summary_language=os.getenv("AI_SUMMARY_LANGUAGE") or DEFAULT_SUMMARY_LANGUAGE,
    )
