from __future__ import annotations

import logging

from starlette.concurrency import run_in_threadpool

from app.ai.config import load_ai_config
from app.ai.factory import get_model_gateway
from app.parsing.parse import extract_document
from app.pipeline.orchestrator import CvPipeline
from app.render.html import RenderedDocument, build_download, render_resume_html
from app.schemas.cv import ImproveRequest, ImproveResponse, PipelineMode, RenderRequest, UploadResponse

logger = logging.getLogger("app.cv")

_MODE_MESSAGES = {
    PipelineMode.MODEL_DERIVED: "CV improved successfully.",
    PipelineMode.HEURISTIC_FALLBACK: "CV processed with basic parsing. AI enhancement is temporarily unavailable.",
}


def get_cv_pipeline() -> CvPipeline:
    return CvPipeline(get_model_gateway(), model_label=load_ai_config().model)


async def extract_upload(*, content: bytes, media_type: str | None, filename: str) -> UploadResponse:
    document = await run_in_threadpool(extract_document, content, media_type, filename=filename)
    return UploadResponse(
        text=document.text,
        page_count=document.page_count,
        characters=document.characters,
        original_file_name=document.filename,
    )


async def improve_cv(payload: ImproveRequest, pipeline: CvPipeline) -> ImproveResponse:
    result = await pipeline.run(payload.cv_text, payload.targeting())
    return ImproveResponse(
        **dict(result),
        message=_MODE_MESSAGES[result.mode],
        html_content=render_resume_html(result.structured_data),
    )


def render_download(payload: RenderRequest) -> RenderedDocument:
    return build_download(structured_data=payload.structured_data, html_content=payload.html_content)
