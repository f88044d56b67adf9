"""Sign-in page for Reclaim.

Binds the NiceGUI form and the Google sign-in button to a SignInFlow.
Uses either the real Reclaim API or MockAuthClient based on DEV__AUTH_MOCK.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from nicegui import app, ui

from reclaim.auth import (
    IdentityProvider,
    NavigationContext,
    SignInFlow,
    get_auth_client,
)
from reclaim.config import get_settings

if TYPE_CHECKING:
    from collections.abc import Mapping

    from nicegui.events import GenericEventArguments

    from reclaim.auth import AuthenticationToken

logger = logging.getLogger(__name__)

_PROVIDER_KEY = "identity_provider"

# Loads Google Identity Services and renders its button into #google-login-button.
# The credential and any load failure are forwarded to Python via emitEvent.
_GOOGLE_SIGNIN_JS = """
<script>
function reclaimInitGoogle() {
    var target = document.getElementById('google-login-button');
    if (!target) { setTimeout(reclaimInitGoogle, 100); return; }
    google.accounts.id.initialize({
        client_id: %(client_id)s,
        nonce: %(nonce)s,
        callback: function(response) {
            emitEvent('google_credential', {
                credential: response ? response.credential : null
            });
        }
    });
    google.accounts.id.renderButton(target, {theme: 'outline', size: 'large'});
}
</script>
<script src="https://accounts.google.com/gsi/client" async
        onload="reclaimInitGoogle()" onerror="emitEvent('google_error')"></script>
"""


def _get_stored_provider() -> IdentityProvider | None:
    """Provider this browser last signed in with, if any."""
    stored = app.storage.user.get(_PROVIDER_KEY)
    if stored in {p.value for p in IdentityProvider}:
        return IdentityProvider(stored)
    return None


def _remember_provider(
    _token: AuthenticationToken,
    provider: IdentityProvider,
) -> None:
    app.storage.user[_PROVIDER_KEY] = provider.value


def _markup_to_text(message: str) -> str:
    """Render the ``<br/>`` breaks in API messages as newlines."""
    return message.replace("<br/>", "\n")


def _credential_response(args: Any) -> Mapping[str, Any] | None:
    return args if isinstance(args, dict) else None


def _build_google_section(flow: SignInFlow, client_id: str) -> None:
    """Build the Google sign-in button and wire its callbacks to the flow."""
    ui.label("OR").classes("my-2 text-gray-500 self-center")
    ui.element("div").props('id="google-login-button"').classes("self-center")
    ui.add_body_html(
        _GOOGLE_SIGNIN_JS
        % {"client_id": json.dumps(client_id), "nonce": json.dumps(flow.nonce)}
    )

    async def on_credential(e: GenericEventArguments) -> None:
        logger.info("Google credential received")
        await flow.submit_google(_credential_response(e.args))

    ui.on("google_credential", on_credential)
    ui.on("google_error", lambda: flow.google_error())


@ui.page("/signin")
async def signin_page() -> None:
    """Sign-in page with email/password and Google options."""
    settings = get_settings()
    logger.info("api url: %s", settings.api.url)

    client = ui.context.client

    def read_context() -> NavigationContext:
        return NavigationContext.from_query_params(client.request.query_params)

    flow = SignInFlow(
        client=get_auth_client(),
        navigate=ui.navigate.to,
        context_provider=read_context,
        default_landing_path=settings.app.default_landing_path,
        on_authenticated=_remember_provider,
    )
    flow.identifier = SignInFlow.initial_identifier(
        read_context(), _get_stored_provider()
    )

    with ui.card().classes("w-96 p-4 self-center"):
        ui.label("Welcome!").classes("text-2xl font-bold")
        ui.label("Please provide your user credentials in order to sign in.").classes(
            "text-sm text-gray-600 mb-2"
        )

        ui.label().bind_text_from(
            flow, "error_message", backward=_markup_to_text
        ).classes("text-red-600 whitespace-pre-line").props(
            'data-testid="signin-error"'
        )

        with ui.row().classes("gap-1 text-sm").bind_visibility_from(
            flow, "password_reset_visible"
        ):
            ui.label("Forgot your password?")
            ui.link("Click here to request a password reset!", "/forgotpassword")

        email_input = (
            ui.input(label="Email address")
            .bind_value(flow, "identifier")
            .props('data-testid="email-input"')
            .classes("w-full")
        )
        (
            ui.input(label="Password", password=True)
            .bind_value(flow, "secret")
            .props('data-testid="password-input"')
            .classes("w-full")
            .on("keydown.enter", flow.submit_local)
        )
        email_input.on("keydown.enter", flow.submit_local)

        ui.button("Sign in", on_click=flow.submit_local).bind_enabled_from(
            flow, "submit_enabled"
        ).props('data-testid="signin-btn"').classes("w-full mt-2")

        if settings.google.client_id:
            _build_google_section(flow, settings.google.client_id)

        with ui.row().classes("gap-1 text-sm mt-4"):
            ui.label("Interested in learning more?")
            ui.link("Click here to get started!", "/register")


@ui.page("/")
def index_page() -> None:
    """Send visitors to the sign-in page."""
    ui.navigate.to("/signin")
