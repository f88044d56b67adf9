"""Protocol defining the auth client interface.

Both ReclaimApiClient and MockAuthClient implement this protocol,
allowing them to be used interchangeably.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from reclaim.auth.models import AuthenticationToken


class AuthClientProtocol(Protocol):
    """Protocol for authentication clients.

    Implementations return a token, return None when the API sends no
    token, and raise ``ApiException`` for coded failures. Transport errors
    propagate as raised by the HTTP layer.
    """

    async def authorize(
        self,
        email_address: str,
        password: str,
    ) -> AuthenticationToken | None:
        """Sign in with an email address and password.

        Args:
            email_address: A single address or ``admin:user`` pair.
            password: The account password.

        Returns:
            The bearer token, or None if the API returned no token.
        """
        ...

    async def authorize_google(
        self,
        credential: str,
        nonce: str,
    ) -> AuthenticationToken | None:
        """Sign in with a Google ID token.

        Args:
            credential: The ID token from the Google sign-in widget.
            nonce: The nonce the widget was initialised with.

        Returns:
            The bearer token, or None if the API returned no token.
        """
        ...
