"""
Session-based user helpers and FastAPI dependencies.

Reads the logged-in user from request.session (set by the auth callback) and
provides require_user for route protection.

Optional: set SESSION_MAX_IDLE_SECONDS to treat the user as inactive after that
long without a request (default 0 = disabled).
"""

import os
import time
from typing import Optional

from fastapi import HTTPException, Request


def _session_max_idle_seconds() -> int:
    """Max seconds without a request before user is considered inactive. 0 = disabled."""
    return int(os.getenv("SESSION_MAX_IDLE_SECONDS", "0"))


def get_user(request: Request) -> Optional[dict]:
    """Return the user stored in the session, or None if not authenticated."""
    return request.session.get("user")


def is_session_stale(request: Request) -> bool:
    """Return True if the user has been idle longer than SESSION_MAX_IDLE_SECONDS."""
    max_idle = _session_max_idle_seconds()
    if max_idle <= 0:
        return False

    now = int(time.time())
    last_at = request.session.get("last_activity_at", now)
    return now - last_at >= max_idle


def touch_session_activity(request: Request) -> None:
    """Update last_activity_at in the session so idle timeout is based on recent requests."""
    request.session["last_activity_at"] = int(time.time())


def require_user():
    """Dependency: request must carry a fresh logged-in session. Use as: Depends(require_user())."""

    async def _dep(request: Request):
        user = get_user(request)
        if user is None:
            raise HTTPException(status_code=401, detail="Not authenticated")
        if is_session_stale(request):
            raise HTTPException(
                status_code=401,
                detail="Session expired or inactive; please log in again",
            )
        touch_session_activity(request)
        return user

    return _dep
