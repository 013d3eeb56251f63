from __future__ import annotations

import logging
from io import BytesIO

from pypdf import PdfReader

from app.core.config import settings
from app.normalize.text import normalize_cv_text
from app.pipeline.errors import ExtractionFailed, PayloadTooLarge, UnsupportedMediaType

from .models import ExtractedDocument

logger = logging.getLogger(__name__)

# pypdf is noisy about recoverable structure problems
logging.getLogger("pypdf").setLevel(logging.ERROR)

PDF_MEDIA_TYPE = "application/pdf"
PDF_MAGIC = b"%PDF-"


def _base_media_type(media_type: str | None) -> str:
    return (media_type or "").split(";")[0].strip().lower()


def ensure_pdf_media_type(media_type: str | None) -> None:
    base = _base_media_type(media_type)
    if base != PDF_MEDIA_TYPE:
        raise UnsupportedMediaType(base)


def validate_upload(*, content: bytes, media_type: str | None, max_bytes: int | None = None) -> None:
    limit = settings.max_upload_bytes if max_bytes is None else max_bytes
    ensure_pdf_media_type(media_type)
    if len(content) > limit:
        raise PayloadTooLarge(size=len(content), limit=limit)


def _read_pdf(content: bytes) -> tuple[list[str], int]:
    if not content.startswith(PDF_MAGIC):
        raise ExtractionFailed("File signature does not match .pdf content.")
    try:
        reader = PdfReader(BytesIO(content))
        if reader.is_encrypted and not reader.decrypt(""):
            raise ExtractionFailed("Encrypted PDF files are not supported.")
        pages = [(page.extract_text() or "").strip() for page in reader.pages]
    except ExtractionFailed:
        raise
    except Exception as exc:
        raise ExtractionFailed("Unable to extract text from this PDF file.") from exc
    if not pages:
        raise ExtractionFailed("PDF file contains no pages.")
    return pages, len(pages)


def extract_document(
    content: bytes,
    media_type: str | None,
    *,
    filename: str = "",
    max_bytes: int | None = None,
    min_chars: int | None = None,
) -> ExtractedDocument:
    validate_upload(content=content, media_type=media_type, max_bytes=max_bytes)
    pages, page_count = _read_pdf(content)
    text = normalize_cv_text("\n\n".join(chunk for chunk in pages if chunk), minimum=min_chars)
    logger.info("cv_document_extracted pages=%s chars=%s", page_count, len(text))
    return ExtractedDocument(
        text=text,
        page_count=page_count,
        characters=len(text),
        filename=filename,
    )
