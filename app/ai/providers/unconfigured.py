from typing import Sequence

from app.ai.types import ChatMessage
from app.pipeline.errors import ModelUnavailable


class UnconfiguredGateway:
    def __init__(self, reason: str = "Model provider is not configured."):
        self._reason = reason

    async def complete(self, messages: Sequence[ChatMessage]) -> str:
        raise ModelUnavailable(self._reason)

    async def aclose(self) -> None:
        return None
