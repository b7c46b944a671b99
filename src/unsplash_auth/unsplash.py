"""
Unsplash OAuth provider.

Uses Authlib for the OAuth2 authorization-code flow and calls the Unsplash API
/me endpoint to build the user profile. Endpoint URLs default to the Unsplash
constants in unsplash_auth.config.
"""

import inspect
import logging
from typing import Any, Awaitable, Callable, Optional, Union

import httpx
from authlib.integrations.starlette_client import OAuth

from unsplash_auth.config import (
    DEFAULT_AUTHORIZATION_URL,
    DEFAULT_TOKEN_URL,
    PROFILE_URL,
    StrategyConfig,
)
from unsplash_auth.errors import InternalOAuthError
from unsplash_auth.profile import PROVIDER_NAME, CanonicalProfile, parse_profile
from unsplash_auth.protocol import OAuthProvider

logger = logging.getLogger(__name__)

API_BASE_URL = "https://api.unsplash.com/"

# verify(access_token, refresh_token, profile) -> user; may be sync or async
VerifyCallback = Callable[[str, Optional[str], CanonicalProfile], Union[Any, Awaitable[Any]]]


class UnsplashOAuthProvider(OAuthProvider):
    """OAuth provider that authenticates against Unsplash and reads /me for the profile."""

    name: str = PROVIDER_NAME

    def __init__(self, config: StrategyConfig, verify: Optional[VerifyCallback] = None):
        """Resolve endpoints, validate required credentials and register the Authlib client."""
        missing = config.missing_fields()
        if missing:
            raise ValueError(f"UnsplashOAuthProvider requires {', '.join(missing)}")

        self.name = PROVIDER_NAME
        self.config = config
        self.verify = verify
        self.authorization_url = config.authorization_url or DEFAULT_AUTHORIZATION_URL
        self.token_url = config.token_url or DEFAULT_TOKEN_URL

        # One registry per provider instance; nothing is shared across strategies.
        self.oauth = OAuth()
        self.oauth.register(
            name=self.name,
            client_id=config.client_id,
            client_secret=config.client_secret,
            authorize_url=self.authorization_url,
            access_token_url=self.token_url,
            api_base_url=API_BASE_URL,
            client_kwargs={"scope": config.scope},
        )

    @property
    def client(self):
        """Authlib Starlette client registered for Unsplash."""
        return self.oauth.create_client(self.name)

    async def login_redirect(self, request, redirect_uri: str | None = None):
        """Return RedirectResponse to Unsplash; defaults to the configured callback URL."""
        return await self.client.authorize_redirect(request, redirect_uri or self.config.callback_url)

    async def fetch_profile(self, access_token: str) -> CanonicalProfile:
        """
        GET /me with the bearer token and normalize the response.

        Exactly one request, no retries. Transport errors and non-2xx responses
        raise InternalOAuthError; a non-JSON body raises ProfileParseError.
        """
        headers = {
            "Authorization": f"Bearer {access_token}",
            "Accept-Version": "v1",
        }
        try:
            async with httpx.AsyncClient() as client:
                r = await client.get(PROFILE_URL, headers=headers)
                r.raise_for_status()
                body = r.text
        except httpx.HTTPError as e:
            logger.warning("Unsplash profile request failed: %s", e)
            raise InternalOAuthError("failed to fetch user profile", e) from e

        return parse_profile(body)

    async def handle_callback(self, request) -> tuple[Any, CanonicalProfile]:
        """Exchange code for token, fetch the profile and run verify. Return (user, profile)."""
        token = await self.client.authorize_access_token(request)
        profile = await self.fetch_profile(token["access_token"])
        logger.info("Fetched Unsplash profile for user %s", profile.id)

        if self.verify is None:
            return profile, profile

        user = self.verify(token["access_token"], token.get("refresh_token"), profile)
        if inspect.isawaitable(user):
            user = await user
        return user, profile
