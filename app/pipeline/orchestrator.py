from __future__ import annotations

import logging
import time
from enum import Enum

from app.ai.types import ModelGateway
from app.normalize.text import normalize_cv_text
from app.pipeline.analysis import (
    build_cover_letter,
    build_improvements,
    build_quality_analysis,
    describe_pipeline,
)
from app.pipeline.errors import ModelStageError
from app.pipeline.fallback import extract_fallback_structure
from app.pipeline.prompt import build_messages
from app.pipeline.response_parser import parse_model_output
from app.schemas.cv import JobTargeting, PipelineMode, PipelineResult
from app.schemas.resume import ResumeStructure

logger = logging.getLogger("app.cv_pipeline")

FALLBACK_NAME = "Professional"


class PipelineStage(str, Enum):
    START = "start"
    BUILD_PROMPT = "build_prompt"
    CALL_MODEL = "call_model"
    PARSE_RESPONSE = "parse_response"
    FALLBACK = "fallback"
    SUCCESS = "success"


class CvPipeline:
    """Turns CV text into a PipelineResult.

    The model path (prompt, model call, parse) is tried first. Any
    failure raised by the call or the parse moves the run to the
    heuristic extractor, which cannot fail once the text passed the length
    policy. Only ContentTooShort reaches the caller.
    """

    def __init__(self, gateway: ModelGateway, *, model_label: str = "LLM", min_chars: int | None = None):
        self._gateway = gateway
        self._model_label = model_label
        self._min_chars = min_chars

    async def run(self, cv_text: str, job: JobTargeting | None = None) -> PipelineResult:
        started = time.perf_counter()
        job = job or JobTargeting()
        text = normalize_cv_text(cv_text, minimum=self._min_chars)

        stage = PipelineStage.START
        failure_code = None
        try:
            stage = PipelineStage.BUILD_PROMPT
            messages = build_messages(text, job)
            stage = PipelineStage.CALL_MODEL
            raw = await self._gateway.complete(messages)
            stage = PipelineStage.PARSE_RESPONSE
            structure = parse_model_output(raw)
            mode = PipelineMode.MODEL_DERIVED
        except ModelStageError as exc:
            failure_code = exc.code
            logger.warning("cv_pipeline_model_failed stage=%s code=%s: %s", stage.value, exc.code, exc)
            stage = PipelineStage.FALLBACK
            structure = self._fallback(text)
            mode = PipelineMode.HEURISTIC_FALLBACK
        except Exception:
            failure_code = "model_error"
            logger.exception("cv_pipeline_model_failed stage=%s code=%s", stage.value, failure_code)
            stage = PipelineStage.FALLBACK
            structure = self._fallback(text)
            mode = PipelineMode.HEURISTIC_FALLBACK

        result = PipelineResult(
            mode=mode,
            structured_data=structure,
            quality_analysis=build_quality_analysis(mode, model_label=self._model_label),
            improvements_narrative=build_improvements(mode),
            cover_letter_paragraph=build_cover_letter(mode, job),
            pipeline_description=describe_pipeline(mode),
        )
        logger.info(
            "cv_pipeline_completed mode=%s targeted=%s chars=%s failure=%s latency_ms=%s",
            mode.value,
            not job.is_empty(),
            len(text),
            failure_code or "-",
            int((time.perf_counter() - started) * 1000),
        )
        return result

    @staticmethod
    def _fallback(text: str) -> ResumeStructure:
        structure = extract_fallback_structure(text)
        if not structure.header.name:
            structure.header.name = FALLBACK_NAME
        return structure
