"""
FastAPI auth router: login, callback, /me, logout.

Builds an APIRouter around an OAuthProvider (Unsplash by default) and keeps the
authenticated user in the Starlette session.
"""

import logging
import time

from authlib.integrations.starlette_client import OAuthError
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, RedirectResponse

from unsplash_auth.errors import InternalOAuthError, ProfileParseError
from unsplash_auth.protocol import OAuthProvider

logger = logging.getLogger(__name__)


def _session_user(user, profile) -> dict:
    """Reduce the verify result to something the session cookie can hold."""
    if user is profile:
        return {
            "provider": profile.provider,
            "id": profile.id,
            "username": profile.username,
            "name": profile.as_dict()["name"],
            "avatar": profile.avatar,
        }
    return user


def create_auth_router(provider: OAuthProvider):
    """Create an APIRouter with /login, /auth/callback, /me, and /logout endpoints."""
    router = APIRouter()

    @router.get("/login")
    async def login(request: Request):
        """Redirect the user to the IdP login page with the configured callback URL."""
        return await provider.login_redirect(request)

    @router.get("/auth/callback", name="auth_callback")
    async def auth_callback(request: Request):
        """Handle OAuth callback: exchange code for token, store user, redirect to /me."""
        try:
            user, profile = await provider.handle_callback(request)
        except OAuthError as e:
            return JSONResponse({"error": str(e)}, status_code=400)
        except (InternalOAuthError, ProfileParseError) as e:
            logger.error("Profile fetch from %s failed: %s", provider.name, e)
            return JSONResponse({"error": str(e)}, status_code=502)

        if not user:
            return JSONResponse({"error": "user rejected"}, status_code=403)

        request.session["user"] = _session_user(user, profile)
        request.session["provider"] = provider.name
        request.session["logged_in_at"] = int(time.time())
        return RedirectResponse(url="/me")

    @router.get("/me")
    async def me(request: Request):
        """Return current user; redirect to /login if not authenticated."""
        if "user" not in request.session:
            return RedirectResponse(url="/login")
        return {
            "user": request.session["user"],
            "provider": request.session.get("provider"),
            "logged_in_at": request.session.get("logged_in_at"),
        }

    @router.get("/logout")
    async def logout(request: Request):
        """Clear session and redirect to home."""
        request.session.clear()
        return RedirectResponse(url="/")

    return router
