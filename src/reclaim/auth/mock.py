"""Mock auth client for testing.

This module provides a mock implementation of the AuthClientProtocol
that can be used in tests and local development without a running API.

Any well-formed email with the password ``MOCK_VALID_PASSWORD`` signs in.
Identifiers of the form ``<ErrorCodeName>@example.com`` raise the matching
coded failure, so every message on the sign-in page can be exercised.
"""

from __future__ import annotations

import hashlib
import json

from reclaim.auth.errors import ApiException
from reclaim.auth.models import AuthenticationToken, ErrorCode

MOCK_VALID_PASSWORD = "password"
MOCK_VALID_GOOGLE_CREDENTIAL = "mock-google-credential"
MOCK_NO_TOKEN_EMAIL = "no-token@example.com"
MOCK_ERROR_DOMAIN = "example.com"

_ERROR_CODE_VALUES = frozenset(code.value for code in ErrorCode)


def _email_to_token(email: str) -> str:
    """Generate a deterministic bearer token from an email."""
    return f"mock-token-{hashlib.md5(email.encode()).hexdigest()[:12]}"


def _coded_failure(code: ErrorCode) -> ApiException:
    return ApiException(
        "An unexpected server error occurred.",
        status_code=400,
        response=json.dumps({"errorCodeName": code.value}),
    )


class MockAuthClient:
    """Mock implementation of AuthClientProtocol for testing.

    Credential conventions:
        - ``<code>@example.com`` (for any ErrorCode value) - raises that code
        - ``no-token@example.com`` - succeeds without returning a token
        - any other email + ``MOCK_VALID_PASSWORD`` - signs in
        - any other email + other password - AccountCredentialsInvalid
        - Google credential ``MOCK_VALID_GOOGLE_CREDENTIAL`` - signs in
        - any other Google credential - GoogleJwtBearerTokenInvalid
    """

    def __init__(self) -> None:
        """Initialize the mock client."""
        # Track calls for test assertions
        self._calls: list[dict[str, str]] = []
        # Nonces already used for Google sign-in
        self._used_nonces: set[str] = set()

    async def authorize(
        self,
        email_address: str,
        password: str,
    ) -> AuthenticationToken | None:
        self._calls.append({"method": "authorize", "email_address": email_address})

        local_part, _, domain = email_address.partition("@")
        if domain == MOCK_ERROR_DOMAIN and local_part in _ERROR_CODE_VALUES:
            raise _coded_failure(ErrorCode(local_part))

        if email_address == MOCK_NO_TOKEN_EMAIL:
            return None

        if password != MOCK_VALID_PASSWORD:
            raise _coded_failure(ErrorCode.ACCOUNT_CREDENTIALS_INVALID)

        return AuthenticationToken(token=_email_to_token(email_address))

    async def authorize_google(
        self,
        credential: str,
        nonce: str,
    ) -> AuthenticationToken | None:
        self._calls.append({"method": "authorize_google", "nonce": nonce})

        if nonce in self._used_nonces:
            raise _coded_failure(ErrorCode.GOOGLE_JWT_NONCE_INVALID)

        if credential != MOCK_VALID_GOOGLE_CREDENTIAL:
            raise _coded_failure(ErrorCode.GOOGLE_JWT_BEARER_TOKEN_INVALID)

        self._used_nonces.add(nonce)
        return AuthenticationToken(token=_email_to_token("google-user@example.com"))

    def get_calls(self) -> list[dict[str, str]]:
        """Get the list of authorize calls made (for test assertions)."""
        return self._calls.copy()

    def clear_calls(self) -> None:
        """Clear tracked calls and used nonces (for test isolation)."""
        self._calls.clear()
        self._used_nonces.clear()
