"""
Pytest fixtures for unsplash_auth tests.

Provides:
- A StrategyConfig with test credentials
- An UnsplashOAuthProvider built from it
- A helper that patches httpx.AsyncClient to return a canned /me response
"""

import json
from contextlib import contextmanager
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from unsplash_auth import StrategyConfig, UnsplashOAuthProvider

ME_PAYLOAD = {
    "uid": "u1",
    "first_name": "A",
    "last_name": "B",
    "username": "alice",
    "profile_image": "http://x/a.png",
}


@pytest.fixture
def config():
    return StrategyConfig(
        client_id="test-client-id",
        client_secret="test-client-secret",
        callback_url="https://www.example.net/auth/callback",
    )


@pytest.fixture
def provider(config):
    return UnsplashOAuthProvider(config)


@contextmanager
def mock_unsplash_get(body=None, get_side_effect=None, raise_for_status=None):
    """Patch httpx.AsyncClient in the provider module; yields the mocked `get`."""
    with patch("unsplash_auth.unsplash.httpx.AsyncClient") as mock_client:
        mock_response = MagicMock()
        mock_response.status_code = 200
        mock_response.text = json.dumps(ME_PAYLOAD) if body is None else body
        if raise_for_status is not None:
            mock_response.raise_for_status.side_effect = raise_for_status

        get = AsyncMock(return_value=mock_response, side_effect=get_side_effect)
        mock_client.return_value.__aenter__.return_value.get = get
        yield get
