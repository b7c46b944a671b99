"""
FastAPI app: Unsplash OAuth + session-based login.

Decisions:
- .env is loaded before building the provider so UNSPLASH_* and SESSION_SECRET
  are available when the auth router is created.
- verify() accepts every Unsplash user; swap in a lookup/create against your
  user store and return False to reject a login.
- Session secret from SESSION_SECRET env; default "change-me" is for dev only.
"""

import logging
import os

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, Request
from starlette.middleware.sessions import SessionMiddleware

from unsplash_auth import (
    StrategyConfig,
    UnsplashOAuthProvider,
    create_auth_router,
    require_user,
    touch_session_activity,
)

load_dotenv()
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))

SESSION_SECRET = os.getenv("SESSION_SECRET", "change-me")


def verify(access_token, refresh_token, profile):
    """Map an Unsplash profile to the application user stored in the session."""
    return {
        "id": profile.id,
        "username": profile.username,
        "avatar": profile.avatar,
    }


provider = UnsplashOAuthProvider(StrategyConfig.from_env(), verify)

app = FastAPI()
app.add_middleware(SessionMiddleware, secret_key=SESSION_SECRET)


@app.middleware("http")
async def update_activity(request: Request, call_next):
    """Update last_activity_at for logged-in users so idle timeout is accurate."""
    response = await call_next(request)
    if "user" in request.session:
        touch_session_activity(request)
    return response

app.include_router(create_auth_router(provider))


@app.get("/")
async def home(request: Request):
    user = request.session.get("user")
    return {"logged_in": bool(user), "user": user}


@app.get("/photos")
async def photos_area(user=Depends(require_user())):
    return {"ok": True, "area": "photos", "username": user.get("username")}
