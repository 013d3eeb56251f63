from __future__ import annotations


class PipelineError(RuntimeError):
    code = "pipeline_error"
    status_code = 500

    def __init__(self, message: str, *, code: str | None = None, status_code: int | None = None):
        super().__init__(message)
        if code is not None:
            self.code = code
        if status_code is not None:
            self.status_code = status_code


# document stage

class UnsupportedMediaType(PipelineError):
    code = "unsupported_media_type"
    status_code = 415

    def __init__(self, media_type: str, *, allowed: str = "application/pdf"):
        super().__init__(f"Unsupported file type '{media_type or 'unknown'}'. Only PDF files are allowed ({allowed}).")
        self.media_type = media_type


class PayloadTooLarge(PipelineError):
    code = "payload_too_large"
    status_code = 413

    def __init__(self, size: int, limit: int):
        super().__init__(f"File too large. Maximum allowed size is {limit // (1024 * 1024)} MB.")
        self.size = size
        self.limit = limit


class ExtractionFailed(PipelineError):
    code = "extraction_failed"
    status_code = 422


# normalization stage

class ContentTooShort(PipelineError):
    code = "content_too_short"
    status_code = 400

    def __init__(self, length: int, minimum: int):
        super().__init__(
            f"CV content must be at least {minimum} characters long (got {length}). "
            "Please ensure the document contains readable text."
        )
        self.length = length
        self.minimum = minimum


# model stage: always recovered by falling back to the heuristic extractor

class ModelStageError(PipelineError):
    code = "model_error"
    status_code = 503


class ModelUnavailable(ModelStageError):
    code = "model_unavailable"


class ModelQuotaExceeded(ModelStageError):
    code = "model_quota_exceeded"
    status_code = 429


class MalformedModelOutput(ModelStageError):
    code = "malformed_model_output"
    status_code = 502


# rendering stage

class RenderingInputMissing(PipelineError):
    code = "rendering_input_missing"
    status_code = 400

    def __init__(self, message: str = "Structured data or HTML content is required."):
        super().__init__(message)
