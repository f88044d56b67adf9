"""Authentication module for Reclaim.

Provides the sign-in flow against the Reclaim API with support for:
- Email/password sign-in (including ``admin:user`` act-as identifiers)
- Google sign-in via an ID token and per-page nonce
- Mock client for testing

Usage:
    from reclaim.auth import SignInFlow, get_auth_client

    flow = SignInFlow(
        client=get_auth_client(),
        navigate=ui.navigate.to,
        context_provider=lambda: NavigationContext.from_query_params(params),
    )
    flow.identifier = "user@example.com"
    flow.secret = "hunter2"
    await flow.submit_local()
"""

from __future__ import annotations

from reclaim.auth.classify import classify
from reclaim.auth.dispatch import submit
from reclaim.auth.errors import ApiException, RemoteError
from reclaim.auth.factory import clear_config_cache, close_auth_client, get_auth_client
from reclaim.auth.flow import FlowState, SignInFlow
from reclaim.auth.models import (
    Authenticated,
    AuthenticationOutcome,
    AuthenticationToken,
    ErrorClassification,
    ErrorCode,
    Failure,
    FailureKind,
    FederatedCredentials,
    IdentifierParts,
    IdentityProvider,
    LocalCredentials,
    NavigationContext,
    ValidationResult,
)
from reclaim.auth.protocol import AuthClientProtocol
from reclaim.auth.redirect import DEFAULT_LANDING_PATH, resolve
from reclaim.auth.validation import parse_identifier, validate

__all__ = [
    "DEFAULT_LANDING_PATH",
    "ApiException",
    "AuthClientProtocol",
    "Authenticated",
    "AuthenticationOutcome",
    "AuthenticationToken",
    "ErrorClassification",
    "ErrorCode",
    "Failure",
    "FailureKind",
    "FederatedCredentials",
    "FlowState",
    "IdentifierParts",
    "IdentityProvider",
    "LocalCredentials",
    "NavigationContext",
    "RemoteError",
    "SignInFlow",
    "ValidationResult",
    "classify",
    "clear_config_cache",
    "close_auth_client",
    "get_auth_client",
    "parse_identifier",
    "resolve",
    "submit",
    "validate",
]
