from typing import Any, List

import pytest

from domain.entities.text_generation import GenerationRequest
from domain.services.generation_client import GenerationClient


class FakeGenerationClient(GenerationClient):
    """Backend stub that replays canned outputs and records every request"""

    def __init__(self, *outputs: Any):
        self.outputs = list(outputs)
        self.requests: List[GenerationRequest] = []

    async def _complete(self, request: GenerationRequest):
        self.requests.append(request)
        output = self.outputs.pop(0)
        if isinstance(output, Exception):
            raise output
        return output


@pytest.fixture
def fake_client():
    """Factory for FakeGenerationClient instances"""

    def _make(*outputs: Any) -> FakeGenerationClient:
        return FakeGenerationClient(*outputs)

    return _make
