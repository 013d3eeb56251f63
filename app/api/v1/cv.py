import logging

from fastapi import APIRouter, Depends, File, Header, HTTPException, Request, UploadFile, status
from fastapi.responses import Response

from app.core.config import settings
from app.core.quota import QuotaService, get_quota_service
from app.core.rate_limit import rate_limit
from app.core.security import check_api_key, resolve_user_id
from app.parsing.parse import ensure_pdf_media_type
from app.pipeline.errors import PayloadTooLarge, PipelineError
from app.pipeline.orchestrator import CvPipeline
from app.schemas.cv import ImproveRequest, ImproveResponse, RenderRequest, UploadResponse
from app.services.cv_service import extract_upload, get_cv_pipeline, improve_cv, render_download

logger = logging.getLogger("app.cv")

router = APIRouter()

_READ_CHUNK_BYTES = 1024 * 64
_RENDER_FAILED_DETAIL = "Failed to generate resume file. Please try again."


def _raise_http_error(exc: PipelineError) -> None:
    raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc


async def _read_limited(file: UploadFile, limit: int) -> bytes:
    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await file.read(_READ_CHUNK_BYTES)
        if not chunk:
            break
        total += len(chunk)
        if total > limit:
            raise PayloadTooLarge(size=total, limit=limit)
        chunks.append(chunk)
    return b"".join(chunks)


@router.post("/cv/upload", response_model=UploadResponse)
async def cv_upload(
    request: Request,
    file: UploadFile | None = File(default=None),
    resume: UploadFile | None = File(default=None),
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    _ = request
    check_api_key(x_api_key)
    # older clients post the document under "resume"
    file = file if file is not None else resume
    if file is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file uploaded.")
    filename = file.filename or "resume.pdf"
    try:
        ensure_pdf_media_type(file.content_type)
        content = await _read_limited(file, settings.max_upload_bytes)
        return await extract_upload(content=content, media_type=file.content_type, filename=filename)
    except PipelineError as exc:
        logger.info("cv_upload_rejected code=%s file=%s", exc.code, filename)
        _raise_http_error(exc)


@router.post("/cv/improve", response_model=ImproveResponse)
@rate_limit()
async def cv_improve(
    request: Request,
    payload: ImproveRequest,
    pipeline: CvPipeline = Depends(get_cv_pipeline),
    quota: QuotaService = Depends(get_quota_service),
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
    x_user_id: str | None = Header(default=None, alias="X-User-Id"),
):
    _ = request
    check_api_key(x_api_key)
    if not quota.has_quota(resolve_user_id(x_user_id)):
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail="You have reached your usage limit. Please upgrade for unlimited access.",
        )
    try:
        return await improve_cv(payload, pipeline)
    except PipelineError as exc:
        _raise_http_error(exc)


@router.post("/cv/render")
@router.post("/cv/generate-html", include_in_schema=False)
@router.post("/cv/generate-pdf-from-structured", include_in_schema=False)
async def cv_render(
    payload: RenderRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    check_api_key(x_api_key)
    try:
        document = render_download(payload)
    except PipelineError as exc:
        _raise_http_error(exc)
    except Exception as exc:
        logger.exception("cv_render_failed")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=_RENDER_FAILED_DETAIL) from exc

    return Response(
        content=document.body,
        media_type=document.media_type,
        headers={"Content-Disposition": f'attachment; filename="{document.filename}"'},
    )
