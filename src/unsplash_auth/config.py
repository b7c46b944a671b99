"""
Configuration module for the Unsplash strategy.

Holds the fixed Unsplash endpoint constants and the StrategyConfig record the
provider is built from. Authorization/token URLs are optional and fall back to
the Unsplash defaults; client ID, secret and callback URL are required.
"""

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_AUTHORIZATION_URL = "https://unsplash.com/oauth/authorize"
DEFAULT_TOKEN_URL = "https://unsplash.com/oauth/token"
PROFILE_URL = "https://api.unsplash.com/me"
DEFAULT_SCOPE = "public"


@dataclass(frozen=True)
class StrategyConfig:
    """Client credentials and endpoint overrides for the Unsplash strategy."""

    client_id: Optional[str]
    client_secret: Optional[str]
    callback_url: Optional[str]
    authorization_url: Optional[str] = None
    token_url: Optional[str] = None
    scope: str = DEFAULT_SCOPE

    @classmethod
    def from_env(cls) -> "StrategyConfig":
        """Build a config from UNSPLASH_* environment variables (load .env first)."""
        return cls(
            client_id=os.getenv("UNSPLASH_CLIENT_ID"),
            client_secret=os.getenv("UNSPLASH_CLIENT_SECRET"),
            callback_url=os.getenv("UNSPLASH_CALLBACK_URL"),
            authorization_url=os.getenv("UNSPLASH_AUTHORIZATION_URL") or None,
            token_url=os.getenv("UNSPLASH_TOKEN_URL") or None,
            scope=os.getenv("UNSPLASH_SCOPE", DEFAULT_SCOPE),
        )

    def missing_fields(self) -> list[str]:
        """Return the names of required fields that are unset or empty."""
        required = ("client_id", "client_secret", "callback_url")
        return [name for name in required if not getattr(self, name)]
