"""Identifier and password checks run before any sign-in request."""

from __future__ import annotations

import re

from reclaim.auth.models import IdentifierParts, ValidationResult

EMAIL_ADDRESS_PATTERN = re.compile(r"[^\s@:]+@[^\s@:]+\.[^\s@:]+")

EMPTY_INPUT_MESSAGE = " "
INVALID_EMAIL_MESSAGE = "The email address you provided is not valid."


def is_email_address(value: str) -> bool:
    return EMAIL_ADDRESS_PATTERN.fullmatch(value) is not None


def parse_identifier(identifier: str) -> IdentifierParts | None:
    """Split an identifier into its primary and act-as addresses.

    Accepts ``user@example.com`` or ``admin@example.com:user@example.com``.
    Returns None when any part is not an email address or there is more
    than one colon.
    """
    parts = identifier.split(":")
    if len(parts) > 2 or not all(is_email_address(p) for p in parts):
        return None
    if len(parts) == 2:
        return IdentifierParts(primary=parts[0], acting_as=parts[1])
    return IdentifierParts(primary=parts[0])


def validate(identifier: str, secret: str) -> ValidationResult:
    """Check that both fields are filled and the identifier is well-formed."""
    if not identifier or not secret:
        return ValidationResult(valid=False, message=EMPTY_INPUT_MESSAGE)

    if parse_identifier(identifier) is None:
        return ValidationResult(valid=False, message=INVALID_EMAIL_MESSAGE)

    return ValidationResult(valid=True)
