from __future__ import annotations

import re

from app.core.config import settings
from app.pipeline.errors import ContentTooShort

_INLINE_SPACE_RE = re.compile(r"[^\S\n]+")
_BLANK_RUN_RE = re.compile(r"\n{3,}")


def normalize_line(line: str) -> str:
    return _INLINE_SPACE_RE.sub(" ", line).strip()


def normalize_text(raw: str) -> str:
    text = (raw or "").replace("\r\n", "\n").replace("\r", "\n")
    lines = [normalize_line(line) for line in text.split("\n")]
    # lines are trimmed, so any run of 2+ blank lines is now 3+ newlines
    return _BLANK_RUN_RE.sub("\n\n", "\n".join(lines)).strip()


def enforce_min_length(text: str, minimum: int | None = None) -> str:
    required = settings.min_cv_chars if minimum is None else minimum
    if len(text) < required:
        raise ContentTooShort(length=len(text), minimum=required)
    return text


def normalize_cv_text(raw: str, *, minimum: int | None = None) -> str:
    return enforce_min_length(normalize_text(raw), minimum)
