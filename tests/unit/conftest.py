"""Shared fixtures for unit tests."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from reclaim.auth import AuthenticationToken, NavigationContext, SignInFlow

SAMPLE_NONCE = "0f8fad5b-d9cb-469f-a165-70867728950e"
SAMPLE_TOKEN = AuthenticationToken(token="bearer-abc123")


@pytest.fixture
def auth_client() -> MagicMock:
    """Auth client whose authorize calls succeed with SAMPLE_TOKEN."""
    client = MagicMock()
    client.authorize = AsyncMock(return_value=SAMPLE_TOKEN)
    client.authorize_google = AsyncMock(return_value=SAMPLE_TOKEN)
    return client


@pytest.fixture
def navigate() -> MagicMock:
    return MagicMock()


@pytest.fixture
def context() -> dict[str, NavigationContext]:
    """Mutable holder so tests can change the query string between submits."""
    return {"current": NavigationContext()}


@pytest.fixture
def flow(
    auth_client: MagicMock,
    navigate: MagicMock,
    context: dict[str, NavigationContext],
) -> SignInFlow:
    return SignInFlow(
        client=auth_client,
        navigate=navigate,
        context_provider=lambda: context["current"],
        nonce=SAMPLE_NONCE,
    )
