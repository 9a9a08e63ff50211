from dataclasses import dataclass
from enum import Enum
from functools import cached_property
from typing import Any, Dict, List, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field, ValidationError, create_model

from domain.exceptions import SchemaViolation


class FieldType(str, Enum):
    """Primitive types allowed in structured output"""

    BOOLEAN = "boolean"
    STRING = "string"
    STRING_ARRAY = "string_array"


_PYTHON_TYPES: Dict[FieldType, Any] = {
    FieldType.BOOLEAN: bool,
    FieldType.STRING: str,
    FieldType.STRING_ARRAY: List[str],
}


@dataclass(frozen=True)
class SchemaField:
    name: str
    type: FieldType
    description: str


@dataclass(frozen=True)
class SchemaDescriptor:
    """Declarative shape of a structured model response.

    The same descriptor is sent to the provider (as JSON Schema, with the
    per-field descriptions steering the model) and used to validate whatever
    comes back. Validation is strict: the field set must match exactly and
    primitive types are never coerced.
    """

    name: str
    fields: Tuple[SchemaField, ...]

    def __post_init__(self):
        if not self.fields:
            raise ValueError(f"Schema '{self.name}' must declare at least one field")
        names = [f.name for f in self.fields]
        if len(set(names)) != len(names):
            raise ValueError(f"Schema '{self.name}' has duplicate field names: {names}")

    @cached_property
    def model(self) -> Type[BaseModel]:
        """pydantic model mirroring the descriptor"""
        definitions = {
            f.name: (_PYTHON_TYPES[f.type], Field(..., description=f.description)) for f in self.fields
        }
        return create_model(
            self.name,
            __config__=ConfigDict(strict=True, extra="forbid"),
            **definitions,
        )

    def field_names(self) -> List[str]:
        return [f.name for f in self.fields]

    def to_json_schema(self) -> Dict[str, Any]:
        return self.model.model_json_schema()

    def validate(self, value: Any) -> Dict[str, Any]:
        """Validate a decoded model response against the schema

        Args:
            value: Decoded JSON value returned by the provider

        Returns:
            The validated object as a plain dict

        Raises:
            SchemaViolation: If the value is not an object with exactly the
                declared fields and types
        """
        try:
            return self.model.model_validate(value).model_dump()
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}" for err in e.errors()
            )
            raise SchemaViolation(
                f"Output does not match schema '{self.name}': {problems}",
                schema_name=self.name,
                value=value,
            ) from e
