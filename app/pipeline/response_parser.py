from __future__ import annotations

import json
import re

from pydantic import ValidationError

from app.pipeline.errors import MalformedModelOutput
from app.schemas.resume import ResumeStructure

_LEADING_FENCE_RE = re.compile(r"^\s*```[A-Za-z0-9_-]*[ \t]*\n?")
_TRAILING_FENCE_RE = re.compile(r"\n?[ \t]*```\s*$")


def strip_code_fences(raw: str) -> str:
    text = (raw or "").strip()
    text = _LEADING_FENCE_RE.sub("", text, count=1)
    text = _TRAILING_FENCE_RE.sub("", text, count=1)
    return text.strip()


def parse_model_output(raw: str) -> ResumeStructure:
    payload = strip_code_fences(raw)
    if not payload:
        raise MalformedModelOutput("Model returned an empty response.")
    try:
        decoded = json.loads(payload)
    except json.JSONDecodeError as exc:
        raise MalformedModelOutput(f"Model output is not valid JSON: {exc.msg} (line {exc.lineno}).") from exc
    except (ValueError, RecursionError) as exc:
        # oversized integer literals and pathological nesting
        raise MalformedModelOutput(f"Model output could not be decoded: {type(exc).__name__}.") from exc
    if not isinstance(decoded, dict):
        raise MalformedModelOutput(f"Model output must be a JSON object, got {type(decoded).__name__}.")
    try:
        return ResumeStructure.model_validate(decoded)
    except ValidationError as exc:
        raise MalformedModelOutput(
            f"Model output does not match the resume shape ({exc.error_count()} errors)."
        ) from exc
