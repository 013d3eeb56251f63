from dataclasses import dataclass
from typing import Literal, Protocol, Sequence


Role = Literal["system", "user", "assistant"]


@dataclass(frozen=True)
class ChatMessage:
    role: Role
    content: str


class ModelGateway(Protocol):
    async def complete(self, messages: Sequence[ChatMessage]) -> str: ...

    async def aclose(self) -> None: ...
