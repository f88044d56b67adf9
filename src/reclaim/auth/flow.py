"""Sign-in flow controller.

Owns the form state of the sign-in page and drives a submission through
validation, authentication, error classification and redirect. The
controller has no UI dependency: the page injects a ``navigate`` callable
and a ``context_provider`` that reads the current query parameters.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any
from uuid import uuid4

import httpx

from reclaim.auth.classify import classify
from reclaim.auth.dispatch import submit
from reclaim.auth.errors import RemoteError
from reclaim.auth.models import (
    Authenticated,
    Failure,
    FailureKind,
    FederatedCredentials,
    IdentityProvider,
    LocalCredentials,
    NavigationContext,
    SignInStrategy,
)
from reclaim.auth.redirect import DEFAULT_LANDING_PATH, resolve
from reclaim.auth.validation import validate

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from reclaim.auth.models import AuthenticationOutcome, AuthenticationToken
    from reclaim.auth.protocol import AuthClientProtocol

logger = logging.getLogger(__name__)

NO_TOKEN_MESSAGE = (
    "The request could not be completed, an authentication token was not "
    "returned from the API."
)
BACKEND_UNREACHABLE_MESSAGE = (
    "The request could not be completed, the backend API may not be configured "
    "correctly."
)
GOOGLE_ERROR_MESSAGE = "An error occurred while attempting to sign in via Google."


class FlowState(Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    AUTHENTICATING = "authenticating"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class SignInFlow:
    """State machine behind the sign-in form.

    States: IDLE -> VALIDATING -> AUTHENTICATING -> SUCCEEDED | FAILED.
    FAILED falls straight back to IDLE so the form stays usable.
    SUCCEEDED is terminal for the submission and triggers navigation.

    Attributes:
        identifier: Email address field (``admin:user`` pairs allowed).
        secret: Password field.
        nonce: Random value bound to Google sign-in; fixed for the page load.
        error_message: Message to display, empty when there is none.
        password_reset_visible: Whether to show the forgot-password link.
        state: Current FlowState.
        last_outcome: Outcome of the most recent attempt, or None before one.
    """

    def __init__(
        self,
        client: AuthClientProtocol,
        navigate: Callable[[str], None],
        context_provider: Callable[[], NavigationContext],
        *,
        nonce: str | None = None,
        default_landing_path: str = DEFAULT_LANDING_PATH,
        on_authenticated: Callable[[AuthenticationToken, IdentityProvider], None]
        | None = None,
    ) -> None:
        self._client = client
        self._navigate = navigate
        self._context_provider = context_provider
        self._default_landing_path = default_landing_path
        self._on_authenticated = on_authenticated

        self.nonce = nonce or str(uuid4())
        self.identifier = ""
        self.secret = ""
        self.error_message = ""
        self.password_reset_visible = False
        self.state = FlowState.IDLE
        self.last_outcome: AuthenticationOutcome | None = None

    @property
    def submit_enabled(self) -> bool:
        """Both fields filled and no attempt already in flight."""
        return (
            bool(self.identifier)
            and bool(self.secret)
            and self.state is not FlowState.AUTHENTICATING
        )

    @staticmethod
    def initial_identifier(
        context: NavigationContext,
        provider: IdentityProvider | None,
    ) -> str:
        """Pre-fill value for the email field.

        Only honoured when the browser last signed in with a password.
        """
        if provider is IdentityProvider.LOCAL:
            return context.email_address or ""
        return ""

    async def submit_local(self) -> None:
        """Handle the form's submit event."""
        if self.state is FlowState.AUTHENTICATING:
            logger.debug("Ignoring submit while a sign-in is in flight")
            return

        self._transition(FlowState.VALIDATING)
        result = validate(self.identifier, self.secret)
        if not result.valid:
            self.error_message = result.message or ""
            self._transition(FlowState.IDLE)
            return

        await self._sign_in(
            LocalCredentials(identifier=self.identifier, secret=self.secret),
            IdentityProvider.LOCAL,
        )

    async def submit_google(self, credential_response: Mapping[str, Any] | None) -> None:
        """Handle the Google widget's success callback."""
        if self.state is FlowState.AUTHENTICATING:
            logger.debug("Ignoring Google callback while a sign-in is in flight")
            return

        credential = None
        if credential_response is not None:
            credential = credential_response.get("credential")

        await self._sign_in(
            FederatedCredentials(credential=credential, nonce=self.nonce),
            IdentityProvider.GOOGLE,
        )

    def google_error(self) -> None:
        """Handle the Google widget's error callback."""
        logger.warning("Google sign-in widget reported an error")
        self._settle(
            Failure(kind=FailureKind.PROVIDER_ERROR, message=GOOGLE_ERROR_MESSAGE),
            IdentityProvider.GOOGLE,
        )

    async def _sign_in(
        self,
        strategy: SignInStrategy,
        provider: IdentityProvider,
    ) -> None:
        self.error_message = ""
        self.password_reset_visible = False
        self._transition(FlowState.AUTHENTICATING)

        outcome: AuthenticationOutcome
        try:
            outcome = await submit(strategy, self._client)
        except httpx.TransportError:
            logger.exception("Sign-in request did not reach the API")
            outcome = Failure(
                kind=FailureKind.TRANSPORT, message=BACKEND_UNREACHABLE_MESSAGE
            )
        except Exception as exc:
            remote = RemoteError.from_exception(exc)
            logger.warning(
                "Sign-in rejected: code=%s payload=%r",
                remote.code,
                remote.payload,
                exc_info=exc,
            )
            outcome = Failure(
                kind=FailureKind.REMOTE,
                message=str(exc),
                code=remote.code,
                payload=remote.payload,
            )

        self._settle(outcome, provider)

    def _settle(
        self,
        outcome: AuthenticationOutcome,
        provider: IdentityProvider,
    ) -> None:
        self.last_outcome = outcome
        match outcome:
            case Authenticated(token=token):
                self._succeed(token, provider)
            case Failure(kind=FailureKind.NO_TOKEN):
                self._fail(NO_TOKEN_MESSAGE)
            case Failure(kind=FailureKind.REMOTE, code=code, message=raw):
                classification = classify(code, raw=raw)
                self._fail(
                    classification.message,
                    show_reset_link=classification.show_password_reset_link,
                )
            case Failure(message=message):
                self._fail(message or "")

    def _succeed(self, token: AuthenticationToken, provider: IdentityProvider) -> None:
        self._transition(FlowState.SUCCEEDED)

        # Re-read every time; the address may have changed since page load.
        path = resolve(self._context_provider(), default=self._default_landing_path)

        if self._on_authenticated is not None:
            try:
                self._on_authenticated(token, provider)
            except Exception:
                logger.exception("on_authenticated hook failed; continuing sign-in")

        logger.info("Sign-in succeeded via %s, navigating to %s", provider, path)
        self._navigate(path)

    def _fail(self, message: str, *, show_reset_link: bool = False) -> None:
        self.error_message = message
        self.password_reset_visible = show_reset_link
        self._transition(FlowState.FAILED)
        self._transition(FlowState.IDLE)

    def _transition(self, state: FlowState) -> None:
        logger.debug("Sign-in flow %s -> %s", self.state.value, state.value)
        self.state = state
