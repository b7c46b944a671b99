"""
Protocols for OAuth providers used by the auth router.

Providers contribute endpoint configuration to Authlib and a profile-fetch hook
(ProfileFetcher); the OAuth2 redirect and code exchange stay with Authlib.
"""

from typing import Any, Protocol, runtime_checkable

from unsplash_auth.profile import CanonicalProfile


@runtime_checkable
class ProfileFetcher(Protocol):
    """Anything that can turn an access token into a CanonicalProfile."""

    async def fetch_profile(self, access_token: str) -> CanonicalProfile:
        """Fetch the current user for access_token and normalize it."""
        ...


@runtime_checkable
class OAuthProvider(ProfileFetcher, Protocol):
    """Protocol for an OAuth provider (e.g. Unsplash)."""

    name: str

    async def login_redirect(self, request, redirect_uri: str | None = None):
        """Redirect the user to the identity provider login page."""
        ...

    async def handle_callback(self, request) -> tuple[Any, CanonicalProfile]:
        """Handle the OAuth callback: exchange code for token, return (user, profile)."""
        ...
