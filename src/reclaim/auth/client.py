"""HTTP client for the Reclaim API authentication endpoints.

Implements AuthClientProtocol on top of a shared ``httpx.AsyncClient``.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from reclaim.auth.errors import ApiException
from reclaim.auth.models import AuthenticationToken

logger = logging.getLogger(__name__)

AUTHORIZE_PATH = "/authentication/authorize"
AUTHORIZE_GOOGLE_PATH = "/authentication/authorize/google"


class ReclaimApiClient:
    """Client for the Reclaim API sign-in endpoints."""

    def __init__(self, base_url: str, http_client: httpx.AsyncClient) -> None:
        """Initialize with the API base URL and a shared HTTP client.

        Args:
            base_url: Reclaim API root, e.g. ``https://api.example.com``.
            http_client: Shared httpx AsyncClient instance.
        """
        self._base_url = base_url.rstrip("/")
        self._client = http_client

    async def authorize(
        self,
        email_address: str,
        password: str,
    ) -> AuthenticationToken | None:
        logger.debug("Authorizing local credentials")
        return await self._post(
            AUTHORIZE_PATH,
            {"emailAddress": email_address, "password": password},
        )

    async def authorize_google(
        self,
        credential: str,
        nonce: str,
    ) -> AuthenticationToken | None:
        logger.debug("Authorizing Google credential (length=%d)", len(credential))
        return await self._post(
            AUTHORIZE_GOOGLE_PATH,
            {"credential": credential, "nonce": nonce},
        )

    async def _post(
        self,
        path: str,
        body: dict[str, Any],
    ) -> AuthenticationToken | None:
        """POST ``body`` and decode the token from the response.

        Raises:
            ApiException: On any non-2xx response.
            httpx.TransportError: When the API cannot be reached.
        """
        response = await self._client.post(f"{self._base_url}{path}", json=body)

        if not response.is_success:
            logger.warning(
                "Authorize request failed",
                extra={"path": path, "status_code": response.status_code},
            )
            raise ApiException(
                "An unexpected server error occurred.",
                status_code=response.status_code,
                response=response.text,
                headers=dict(response.headers),
            )

        if not response.content.strip():
            return None

        data = response.json()
        if data is None:
            return None
        return AuthenticationToken.model_validate(data)
