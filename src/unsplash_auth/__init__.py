"""
Unsplash OAuth strategy.

Exposes the provider (UnsplashOAuthProvider), its config and profile types,
the profile-fetch errors, session helpers and the FastAPI auth router factory.
"""

from .config import (
    DEFAULT_AUTHORIZATION_URL,
    DEFAULT_TOKEN_URL,
    PROFILE_URL,
    StrategyConfig,
)
from .errors import InternalOAuthError, ProfileParseError
from .profile import CanonicalProfile, ProfileName, parse_profile
from .protocol import OAuthProvider, ProfileFetcher
from .router import create_auth_router
from .session import get_user, is_session_stale, require_user, touch_session_activity
from .unsplash import UnsplashOAuthProvider

__all__ = [
    "DEFAULT_AUTHORIZATION_URL",
    "DEFAULT_TOKEN_URL",
    "PROFILE_URL",
    "StrategyConfig",
    "InternalOAuthError",
    "ProfileParseError",
    "CanonicalProfile",
    "ProfileName",
    "parse_profile",
    "OAuthProvider",
    "ProfileFetcher",
    "UnsplashOAuthProvider",
    "create_auth_router",
    "get_user",
    "is_session_stale",
    "require_user",
    "touch_session_activity",
]
