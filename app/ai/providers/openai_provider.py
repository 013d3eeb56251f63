from __future__ import annotations

import asyncio
import logging
import time
from typing import Optional, Sequence

import openai
from openai import AsyncOpenAI

from app.ai.types import ChatMessage
from app.pipeline.errors import ModelQuotaExceeded, ModelUnavailable

logger = logging.getLogger(__name__)


class OpenAIChatGateway:
    """Single-turn chat completion against any OpenAI-compatible endpoint (OpenAI, Groq)."""

    def __init__(
        self,
        model: str,
        api_key: str,
        base_url: Optional[str] = None,
        timeout_s: float = 30.0,
        temperature: float = 0.3,
        max_tokens: int = 4000,
        client: Optional[AsyncOpenAI] = None,
    ):
        if not (api_key or "").strip():
            raise ValueError("api_key is required for OpenAIChatGateway")
        self._model = model
        self._timeout_s = timeout_s
        self._temperature = temperature
        self._max_tokens = max_tokens
        # retries are a caller policy; one pipeline run makes at most one call
        self._client = client or AsyncOpenAI(
            api_key=api_key.strip(),
            base_url=base_url or None,
            timeout=timeout_s,
            max_retries=0,
        )

    @property
    def model(self) -> str:
        return self._model

    async def complete(self, messages: Sequence[ChatMessage]) -> str:
        payload = [{"role": m.role, "content": m.content} for m in messages]
        started = time.perf_counter()
        try:
            response = await asyncio.wait_for(
                self._client.chat.completions.create(
                    model=self._model,
                    messages=payload,
                    temperature=self._temperature,
                    max_tokens=self._max_tokens,
                    stream=False,
                ),
                timeout=self._timeout_s,
            )
        except asyncio.TimeoutError as exc:
            raise ModelUnavailable(f"Model call timed out after {self._timeout_s:g}s.") from exc
        except openai.RateLimitError as exc:
            raise ModelQuotaExceeded("Model provider rate limit reached.") from exc
        except openai.APITimeoutError as exc:
            raise ModelUnavailable(f"Model call timed out after {self._timeout_s:g}s.") from exc
        except openai.APIConnectionError as exc:
            raise ModelUnavailable("Model provider is unreachable.") from exc
        except openai.AuthenticationError as exc:
            raise ModelUnavailable("Model provider rejected the credentials.") from exc
        except openai.APIStatusError as exc:
            raise ModelUnavailable(f"Model provider returned status {exc.status_code}.") from exc
        except openai.OpenAIError as exc:
            raise ModelUnavailable(f"Model call failed: {exc}") from exc

        content = response.choices[0].message.content if response.choices else ""
        logger.info(
            "model_call_completed model=%s latency_ms=%s chars=%s",
            self._model,
            int((time.perf_counter() - started) * 1000),
            len(content or ""),
        )
        if not content:
            raise ModelUnavailable("Model provider returned an empty completion.")
        return content

    async def aclose(self) -> None:
        await self._client.close()
