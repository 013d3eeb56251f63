from __future__ import annotations

from fastapi import HTTPException, status

from app.core.config import settings


def check_api_key(x_api_key: str | None) -> None:
    if settings.cv_auth_mode != "protected" or not settings.api_key:
        return
    if x_api_key != settings.api_key:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Please provide a valid API key to use the CV service.",
        )


def resolve_user_id(x_user_id: str | None) -> str | None:
    value = (x_user_id or "").strip()
    return value[:128] or None
