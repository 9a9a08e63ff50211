from dataclasses import dataclass
from typing import Dict, List, Optional

from domain.entities.schema_descriptor import SchemaDescriptor
from domain.exceptions import InvalidInput


@dataclass(frozen=True)
class PromptMessages:
    """System/user message pair produced by the prompt builders"""

    system: str
    user: str


@dataclass(frozen=True)
class GenerationRequest:
    """A single call to the generation backend"""

    model_id: str
    system_message: str
    user_message: str
    temperature: Optional[float] = None
    output_schema: Optional[SchemaDescriptor] = None

    def __post_init__(self):
        if not self.model_id or not self.model_id.strip():
            raise InvalidInput("model_id is required")
        if isinstance(self.temperature, bool):
            raise InvalidInput("temperature must be a number, got a boolean")
        if self.temperature is not None and not 0.0 <= self.temperature <= 1.0:
            raise InvalidInput(f"temperature must be between 0 and 1, got {self.temperature}")

    @classmethod
    def from_prompt(
        cls,
        model_id: str,
        prompt: PromptMessages,
        temperature: Optional[float] = None,
        output_schema: Optional[SchemaDescriptor] = None,
    ) -> "GenerationRequest":
        return cls(
            model_id=model_id,
            system_message=prompt.system,
            user_message=prompt.user,
            temperature=temperature,
            output_schema=output_schema,
        )

    @property
    def structured(self) -> bool:
        return self.output_schema is not None

    def messages(self) -> List[Dict[str, str]]:
        return [
            {"role": "system", "content": self.system_message},
            {"role": "user", "content": self.user_message},
        ]
