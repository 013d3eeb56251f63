from contextlib import asynccontextmanager
import logging

from app.ai.config import load_ai_config
from app.ai.factory import get_model_gateway

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    cfg = load_ai_config()
    gateway = get_model_gateway()
    logger.info(
        "cv_service_started provider=%s model=%s gateway=%s timeout_s=%s",
        cfg.provider,
        cfg.model,
        type(gateway).__name__,
        cfg.timeout_s,
    )
    yield
    try:
        await gateway.aclose()
    except Exception as exc:  # pragma: no cover - shutdown must not raise
        logger.warning("model_gateway_close_failed: %s", exc)
    get_model_gateway.cache_clear()
