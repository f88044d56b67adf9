"""Run one sign-in strategy against the auth client."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from reclaim.auth.models import (
    Authenticated,
    AuthenticationOutcome,
    Failure,
    FailureKind,
    FederatedCredentials,
    LocalCredentials,
    SignInStrategy,
)

if TYPE_CHECKING:
    from reclaim.auth.protocol import AuthClientProtocol

logger = logging.getLogger(__name__)

MISSING_CREDENTIAL_MESSAGE = (
    "An error occurred while attempting to sign in via Google: the remote system "
    "failed to return a valid credential token."
)


async def submit(
    strategy: SignInStrategy,
    client: AuthClientProtocol,
) -> AuthenticationOutcome:
    """Authenticate with the given strategy.

    Exceptions raised by ``client`` are not caught here.
    """
    match strategy:
        case LocalCredentials(identifier=identifier, secret=secret):
            token = await client.authorize(identifier, secret)
        case FederatedCredentials(credential=None):
            logger.warning("Google sign-in returned no credential")
            return Failure(
                kind=FailureKind.MISSING_CREDENTIAL,
                message=MISSING_CREDENTIAL_MESSAGE,
            )
        case FederatedCredentials(credential=credential, nonce=nonce):
            token = await client.authorize_google(credential, nonce)
        case _:
            msg = f"Unknown sign-in strategy: {strategy!r}"
            raise TypeError(msg)

    if token is None:
        return Failure(kind=FailureKind.NO_TOKEN)
    return Authenticated(token=token)
