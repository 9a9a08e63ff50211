from typing import Any, Optional


class ContentAIError(Exception):
    """Base class for all content AI errors"""


class InvalidInput(ContentAIError, ValueError):
    """Caller-supplied data failed a structural precondition.

    Raised before any provider call is made.
    """


class ProviderUnavailable(ContentAIError):
    """The generation backend could not be reached or returned an error"""


class SchemaViolation(ContentAIError):
    """Structured output did not match the declared schema"""

    def __init__(self, message: str, schema_name: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.schema_name = schema_name
        self.value = value


class EmptyOutput(ContentAIError):
    """Text output was blank where content is required"""
