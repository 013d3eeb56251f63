from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from app.pipeline.errors import RenderingInputMissing
from app.schemas.resume import ResumeStructure

logger = logging.getLogger(__name__)

HTML_MEDIA_TYPE = "text/html"
_TEMPLATE_DIR = Path(__file__).parent / "templates"

env = Environment(
    loader=FileSystemLoader(_TEMPLATE_DIR),
    autoescape=True,
    undefined=StrictUndefined,
    trim_blocks=True,
)


@dataclass(frozen=True)
class RenderedDocument:
    body: str
    filename: str
    media_type: str = HTML_MEDIA_TYPE


def render_resume_html(resume: ResumeStructure) -> str:
    """Render a resume as one self-contained HTML page; empty sections are left out."""
    return env.get_template("resume.html").render(r=resume)


def download_filename(now_ms: int | None = None) -> str:
    stamp = int(time.time() * 1000) if now_ms is None else now_ms
    return f"improved-resume-{stamp}.html"


def build_download(
    structured_data: ResumeStructure | None = None,
    html_content: str | None = None,
    *,
    now_ms: int | None = None,
) -> RenderedDocument:
    prerendered = bool(html_content and html_content.strip())
    if prerendered:
        body = html_content
    elif structured_data is not None:
        body = render_resume_html(structured_data)
    else:
        raise RenderingInputMissing()
    logger.info("cv_render_completed prerendered=%s bytes=%s", prerendered, len(body.encode("utf-8")))
    return RenderedDocument(body=body, filename=download_filename(now_ms))
