"""
Canonical profile shape for Unsplash users.

parse_profile maps the fixed subset of fields the strategy reads (uid, first_name,
last_name, username, profile_image) and keeps the raw body and parsed JSON so
callers can reach provider-specific extras.
"""

import json
from dataclasses import dataclass
from typing import Any, Optional

from unsplash_auth.errors import ProfileParseError

PROVIDER_NAME = "unsplash"


@dataclass(frozen=True)
class ProfileName:
    first_name: Optional[str]
    last_name: Optional[str]


@dataclass(frozen=True)
class CanonicalProfile:
    """Normalized Unsplash user; built fresh for every fetch."""

    id: Optional[str]
    name: ProfileName
    username: Optional[str]
    avatar: Any
    raw: str
    json: Any
    provider: str = PROVIDER_NAME

    def as_dict(self) -> dict:
        """Return the profile as a plain dict (session-safe, `_raw`/`_json` keys for extras)."""
        return {
            "provider": self.provider,
            "id": self.id,
            "name": {
                "first_name": self.name.first_name,
                "last_name": self.name.last_name,
            },
            "username": self.username,
            "avatar": self.avatar,
            "_raw": self.raw,
            "_json": self.json,
        }


def parse_profile(body: str) -> CanonicalProfile:
    """
    Parse a /me response body into a CanonicalProfile.

    Raises ProfileParseError if the body is not JSON or is JSON null. Missing
    fields become None; nothing is validated for completeness. Older API responses carry the user ID
    as `uid`, newer ones as `id`; `uid` wins when both are present.
    """
    try:
        data = json.loads(body)
    except (ValueError, RecursionError) as e:
        raise ProfileParseError(body, e) from e

    if data is None:
        e = TypeError("profile response body is null")
        raise ProfileParseError(body, e) from e

    fields = data if isinstance(data, dict) else {}
    user_id = fields["uid"] if "uid" in fields else fields.get("id")

    return CanonicalProfile(
        provider=PROVIDER_NAME,
        id=user_id,
        name=ProfileName(
            first_name=fields.get("first_name"),
            last_name=fields.get("last_name"),
        ),
        username=fields.get("username"),
        avatar=fields.get("profile_image"),
        raw=body,
        json=data,
    )
