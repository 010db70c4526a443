"""Shared dependencies for API routes."""

from fastapi import Request
from slowapi import Limiter

USER_ID_HEADER = "x-user-id"


def get_user_id(request: Request) -> str:
    """Rate limit key: the caller's user id header, shared 'anonymous' bucket otherwise."""
    return request.headers.get(USER_ID_HEADER, "").strip() or "anonymous"


limiter = Limiter(key_func=get_user_id, headers_enabled=True)
