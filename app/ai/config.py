import os
from dataclasses import dataclass

from app.core.config import _get_env, _get_env_float, _get_env_int

_PROVIDER_DEFAULTS = {
    "groq": ("https://api.groq.com/openai/v1", "llama-3.1-8b-instant", "GROQ_API_KEY"),
    "openai": (None, "gpt-4o-mini", "OPENAI_API_KEY"),
}


@dataclass(frozen=True)
class AIConfig:
    provider: str
    model: str
    api_key: str | None
    base_url: str | None
    timeout_s: float
    temperature: float
    max_tokens: int


def load_ai_config() -> AIConfig:
    provider = (os.getenv("LLM_PROVIDER") or "groq").strip().lower()
    base_url, model, key_env = _PROVIDER_DEFAULTS.get(provider, (None, "", "LLM_API_KEY"))
    api_key = (_get_env("LLM_API_KEY") or _get_env(key_env) or "").strip()
    return AIConfig(
        provider=provider,
        model=(_get_env("LLM_MODEL", model) or model).strip(),
        api_key=api_key or None,
        base_url=_get_env("LLM_BASE_URL", base_url),
        timeout_s=_get_env_float("LLM_TIMEOUT_S", 30.0),
        temperature=_get_env_float("LLM_TEMPERATURE", 0.3),
        max_tokens=_get_env_int("LLM_MAX_TOKENS", 4000),
    )
