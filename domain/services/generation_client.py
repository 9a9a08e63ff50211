import json
import logging
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Any, Dict, Optional, Union

import openai
from openai import AsyncOpenAI

from config.ai_settings import AISettings, load_ai_settings
from domain.entities.schema_descriptor import SchemaDescriptor
from domain.entities.text_generation import GenerationRequest
from domain.exceptions import EmptyOutput, ProviderUnavailable, SchemaViolation

logger = logging.getLogger(__name__)

GenerationOutput = Union[str, Dict[str, Any]]


class GenerationClient(ABC):
    """Abstract access to a text generation backend.

    Subclasses only implement the transport call (``_complete``). Output
    checking lives here so every backend gives the same guarantees: raw text
    in text mode, a schema-validated dict in structured mode.
    """

    @abstractmethod
    async def _complete(self, request: GenerationRequest) -> Optional[Union[str, Dict[str, Any]]]:
        """Send the request to the backend and return its raw output

        Backends that decode structured output themselves may return a dict.
        Transport failures must be raised as ProviderUnavailable.
        """

    async def generate(self, request: GenerationRequest) -> GenerationOutput:
        """Run one request/response cycle

        Args:
            request: The generation request

        Returns:
            Raw text when the request has no output schema, otherwise the
            validated structured object

        Raises:
            ProviderUnavailable: The backend could not be reached or errored
            SchemaViolation: Structured output did not match the schema
            EmptyOutput: Text mode returned nothing
        """
        mode = f"schema={request.output_schema.name}" if request.structured else "text"
        logger.debug(f"Generating with model {request.model_id} ({mode}, temperature={request.temperature})")

        raw = await self._complete(request)

        if request.output_schema is None:
            if raw is None:
                raise EmptyOutput(f"Model {request.model_id} returned no text")
            if not isinstance(raw, str):
                raise SchemaViolation(
                    f"Expected text output from model {request.model_id}, got {type(raw).__name__}", value=raw
                )
            return raw

        return self._parse_structured(raw, request.output_schema)

    def _parse_structured(self, raw: Any, schema: SchemaDescriptor) -> Dict[str, Any]:
        if raw is None:
            raise SchemaViolation(f"No output returned for schema '{schema.name}'", schema_name=schema.name)

        value = raw
        if isinstance(raw, str):
            try:
                value = json.loads(raw)
            except (json.JSONDecodeError, RecursionError) as e:
                logger.warning(f"Structured output for '{schema.name}' is not valid JSON: {e}")
                raise SchemaViolation(
                    f"Output for schema '{schema.name}' is not valid JSON: {e}",
                    schema_name=schema.name,
                    value=raw,
                ) from e

        try:
            return schema.validate(value)
        except SchemaViolation as e:
            logger.warning(str(e))
            raise


class OpenAIGenerationClient(GenerationClient):
    """Generation backend speaking the OpenAI chat completions API

    Works with any OpenAI-compatible endpoint (set ``base_url``), e.g. the
    Cloudflare Workers AI ``/ai/v1`` endpoint.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: float = 60.0,
        max_retries: int = 2,
        client: Optional[AsyncOpenAI] = None,
    ):
        if client is None:
            if not api_key:
                raise ValueError("AI_API_KEY or OPENAI_API_KEY environment variable is required")
            client = AsyncOpenAI(api_key=api_key, base_url=base_url, timeout=timeout_s, max_retries=max_retries)
        self.client = client

    @classmethod
    def from_settings(cls, settings: AISettings) -> "OpenAIGenerationClient":
        return cls(
            api_key=settings.api_key,
            base_url=settings.base_url,
            timeout_s=settings.timeout_s,
            max_retries=settings.max_retries,
        )

    def _build_params(self, request: GenerationRequest) -> Dict[str, Any]:
        params: Dict[str, Any] = {
            "model": request.model_id,
            "messages": request.messages(),
        }
        if request.temperature is not None:
            params["temperature"] = request.temperature
        if request.output_schema is not None:
            params["response_format"] = {
                "type": "json_schema",
                "json_schema": {
                    "name": request.output_schema.name,
                    "schema": request.output_schema.to_json_schema(),
                    "strict": True,
                },
            }
        return params

    async def _complete(self, request: GenerationRequest) -> Optional[str]:
        try:
            completion = await self.client.chat.completions.create(**self._build_params(request))
        except openai.OpenAIError as e:
            logger.error(f"Generation provider error for model {request.model_id}: {type(e).__name__}: {e}")
            raise ProviderUnavailable(f"Generation provider error: {e}") from e

        if not completion.choices:
            return None
        return completion.choices[0].message.content


@lru_cache(maxsize=1)
def get_generation_client() -> GenerationClient:
    """Factory for the configured generation backend (one shared binding)"""
    return OpenAIGenerationClient.from_settings(load_ai_settings())
