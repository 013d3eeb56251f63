import logging
from functools import lru_cache

from app.ai.config import AIConfig, load_ai_config
from app.ai.types import ModelGateway

from app.ai.providers.openai_provider import OpenAIChatGateway
from app.ai.providers.unconfigured import UnconfiguredGateway

logger = logging.getLogger(__name__)

_PLACEHOLDER_PREFIXES = ("your_", "replace_")


def _looks_like_placeholder(value: str) -> bool:
    lower = value.strip().lower()
    return lower.startswith(_PLACEHOLDER_PREFIXES) or lower in {"changeme", "todo"}


def build_model_gateway(cfg: AIConfig) -> ModelGateway:
    if cfg.provider not in {"groq", "openai"}:
        raise ValueError(f"Unsupported LLM_PROVIDER='{cfg.provider}'")

    if not cfg.api_key or _looks_like_placeholder(cfg.api_key):
        logger.warning("model_gateway_unconfigured provider=%s", cfg.provider)
        return UnconfiguredGateway(reason=f"No API key configured for provider '{cfg.provider}'.")

    return OpenAIChatGateway(
        model=cfg.model,
        api_key=cfg.api_key,
        base_url=cfg.base_url,
        timeout_s=cfg.timeout_s,
        temperature=cfg.temperature,
        max_tokens=cfg.max_tokens,
    )


@lru_cache(maxsize=1)
def get_model_gateway() -> ModelGateway:
    return build_model_gateway(load_ai_config())
