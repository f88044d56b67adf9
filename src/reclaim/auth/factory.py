"""Auth client factory.

Provides a factory function to get the appropriate auth client
based on configuration (real Reclaim API or mock for testing).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from reclaim.config import get_settings

if TYPE_CHECKING:
    from reclaim.auth.protocol import AuthClientProtocol


# Cached instances so connection pools and mock state survive across requests
_mock_client_instance: AuthClientProtocol | None = None
_http_client: httpx.AsyncClient | None = None


def get_auth_client() -> AuthClientProtocol:
    """Get the appropriate auth client based on configuration.

    If DEV__AUTH_MOCK=true, returns MockAuthClient (singleton to preserve state).
    Otherwise, returns ReclaimApiClient bound to API__URL.

    Returns:
        An auth client implementing AuthClientProtocol.

    Raises:
        ValueError: If api.url is empty and mock mode is disabled.
    """
    global _mock_client_instance, _http_client  # noqa: PLW0603
    settings = get_settings()

    if settings.dev.auth_mock:
        if _mock_client_instance is None:
            from reclaim.auth.mock import MockAuthClient

            _mock_client_instance = MockAuthClient()
        return _mock_client_instance

    if not settings.api.url:
        msg = (
            "API__URL is required when DEV__AUTH_MOCK is not enabled. "
            "Set API__URL in your .env file."
        )
        raise ValueError(msg)

    if _http_client is None:
        _http_client = httpx.AsyncClient(timeout=settings.api.timeout_seconds)

    from reclaim.auth.client import ReclaimApiClient

    return ReclaimApiClient(base_url=settings.api.url, http_client=_http_client)


async def close_auth_client() -> None:
    """Close the shared HTTP client, if one was opened."""
    global _http_client  # noqa: PLW0603
    if _http_client is not None:
        await _http_client.aclose()
        _http_client = None


def clear_config_cache() -> None:
    """Clear the configuration and mock client caches.

    Useful for testing when you need to reload configuration
    or reset mock client state.
    """
    global _mock_client_instance  # noqa: PLW0603
    get_settings.cache_clear()
    _mock_client_instance = None
