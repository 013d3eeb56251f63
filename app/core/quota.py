from __future__ import annotations

from typing import Protocol


class QuotaService(Protocol):
    def has_quota(self, user_id: str | None) -> bool: ...


class UnlimitedQuota:
    """Default when no external quota service is wired in; guests and users are never limited."""

    def has_quota(self, user_id: str | None) -> bool:
        return True


_default_quota = UnlimitedQuota()


def get_quota_service() -> QuotaService:
    return _default_quota
