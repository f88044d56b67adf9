"""Data models for the sign-in flow.

These types describe the credentials a user submits, the outcome of an
authentication attempt, and the ambient request context consulted after a
successful sign-in.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum, StrEnum
from typing import Any, TypeAlias

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ErrorCode(StrEnum):
    """Coded failures returned by the Reclaim API in ``errorCodeName``."""

    ACCOUNT_CREDENTIALS_INVALID = "AccountCredentialsInvalid"
    ACCOUNT_EXTERNAL_CREDENTIALS_INVALID = "AccountExternalCredentialsInvalid"
    ACCOUNT_EMAIL_ADDRESS_NOT_CONFIRMED = "AccountEmailAddressNotConfirmed"
    ACCOUNT_LOCKED_OUT = "AccountLockedOut"
    ACCOUNT_LOCKED_OUT_OVERRIDE = "AccountLockedOutOverride"
    ACCOUNT_TOMBSTONED = "AccountTombstoned"
    ACCOUNT_CREDENTIALS_EXPIRED = "AccountCredentialsExpired"
    ACCOUNT_CREDENTIALS_NOT_CONFIRMED = "AccountCredentialsNotConfirmed"
    ACCOUNT_REQUIRES_IDENTITY_PROVIDER_LOCAL = "AccountRequiresIdentityProviderLocal"
    ACCOUNT_REQUIRES_IDENTITY_PROVIDER_GOOGLE = "AccountRequiresIdentityProviderGoogle"
    GOOGLE_JWT_BEARER_TOKEN_INVALID = "GoogleJwtBearerTokenInvalid"
    GOOGLE_JWT_NONCE_INVALID = "GoogleJwtNonceInvalid"


class IdentityProvider(StrEnum):
    """How an account signs in."""

    LOCAL = "Local"
    GOOGLE = "Google"


class AuthenticationToken(BaseModel):
    """Bearer credential returned by a successful authorize call.

    Unknown wire fields are kept so callers can forward the token untouched.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        frozen=True,
    )

    token: str
    valid_until: datetime | None = None


@dataclass(frozen=True)
class IdentifierParts:
    """A sign-in identifier split on its optional colon.

    Attributes:
        primary: The account signing in.
        acting_as: The account to act as, for the ``admin:user`` form.
    """

    primary: str
    acting_as: str | None = None


@dataclass(frozen=True)
class ValidationResult:
    """Result of checking the submitted credentials before any network call.

    A ``message`` of a single space means nothing has been entered yet,
    as opposed to input that was entered but is malformed.
    """

    valid: bool
    message: str | None = None


@dataclass(frozen=True)
class ErrorClassification:
    """User-facing message for a failed sign-in.

    Attributes:
        message: Text shown to the user; may contain ``<br/>`` markup.
        show_password_reset_link: Whether to reveal the forgot-password link.
    """

    message: str
    show_password_reset_link: bool = False


@dataclass(frozen=True)
class LocalCredentials:
    """Email/password sign-in."""

    identifier: str
    secret: str


@dataclass(frozen=True)
class FederatedCredentials:
    """Google sign-in; ``credential`` is the ID token from the widget."""

    credential: str | None
    nonce: str


SignInStrategy: TypeAlias = LocalCredentials | FederatedCredentials


class FailureKind(Enum):
    """Why an authentication attempt did not produce a token."""

    NO_TOKEN = "no_token"
    MISSING_CREDENTIAL = "missing_credential"
    PROVIDER_ERROR = "provider_error"
    TRANSPORT = "transport"
    REMOTE = "remote"


@dataclass(frozen=True)
class Authenticated:
    """Successful outcome carrying the bearer token."""

    token: AuthenticationToken


@dataclass(frozen=True)
class Failure:
    """Failed outcome.

    Attributes:
        kind: Which failure path produced this outcome.
        message: Fixed message, or the stringified error for REMOTE failures.
        code: ``errorCodeName`` from the API, for REMOTE failures.
        payload: Raw error body, kept for diagnostics.
    """

    kind: FailureKind
    message: str | None = None
    code: str | None = None
    payload: Any = None


AuthenticationOutcome: TypeAlias = Authenticated | Failure


@dataclass(frozen=True)
class NavigationContext:
    """Query parameters of the current request, read at submission time.

    Attributes:
        redirect_to: The ``redirectTo`` parameter as Starlette returns it
            (decoded once); ``resolve`` decodes it a second time.
        email_address: The ``emailAddress`` pre-fill parameter.
    """

    redirect_to: str | None = None
    email_address: str | None = None

    @classmethod
    def from_query_params(cls, params: Any) -> NavigationContext:
        """Build from any mapping with ``.get`` (e.g. Starlette ``QueryParams``)."""
        return cls(
            redirect_to=params.get("redirectTo"),
            email_address=params.get("emailAddress"),
        )
