"""Map Reclaim API error codes to the messages shown on the sign-in page."""

from __future__ import annotations

from reclaim.auth.models import ErrorClassification, ErrorCode

_CREDENTIALS_INVALID = ErrorClassification(
    message=(
        "The credentials you provided are invalid.  Please check your email "
        "address and password and try again to sign in."
    ),
    show_password_reset_link=True,
)
_EXTERNAL_CREDENTIALS_INVALID = ErrorClassification(
    message=(
        "The Google account does not appear to be configured as an account on "
        "this system.  Please try signing in with an email address and password, "
        "or create a new account on the registration page."
    ),
)
_EMAIL_ADDRESS_NOT_CONFIRMED = ErrorClassification(
    message=(
        "You cannot sign in until you have confirmed your account.  Please check "
        "your email for the welcome message we sent when you registered."
        "<br/><br/>If you have not received the welcome message, please use the "
        "link below to request a password reset."
    ),
)
_LOCKED_OUT = ErrorClassification(
    message=(
        "Your account has been locked due to too many failed sign-in attempts.  "
        "Please wait for 30 minutes, then request a password reset."
    ),
)
_TOMBSTONED = ErrorClassification(message="Your account has been disabled.")
_CREDENTIALS_EXPIRED = ErrorClassification(
    message=(
        "Your account credentials are expired.  Please check your email for a "
        "password reset email, or click the Forgot Password link below to retry."
    ),
)
_REQUIRES_LOCAL = ErrorClassification(
    message=(
        "You created your account using an email address and password.  Please "
        "sign in using these credentials rather than using the Google sign-in "
        "framework."
    ),
)
_REQUIRES_GOOGLE = ErrorClassification(
    message=(
        "You created your account using your Google account, rather than using a "
        "standard email address and password.  Please sign in using the Google "
        "sign-in button."
    ),
)
_JWT_BEARER_TOKEN_INVALID = ErrorClassification(
    message=(
        "Your account could not be validated by Google.  Please check that your "
        "Google account is valid and try again."
    ),
)
_JWT_NONCE_INVALID = ErrorClassification(
    message=(
        "Your account could not be validated by Google, the nonce is invalid.  "
        "Please check that your Google account is valid and try again."
    ),
)

CLASSIFICATIONS: dict[ErrorCode, ErrorClassification] = {
    ErrorCode.ACCOUNT_CREDENTIALS_INVALID: _CREDENTIALS_INVALID,
    ErrorCode.ACCOUNT_EXTERNAL_CREDENTIALS_INVALID: _EXTERNAL_CREDENTIALS_INVALID,
    ErrorCode.ACCOUNT_EMAIL_ADDRESS_NOT_CONFIRMED: _EMAIL_ADDRESS_NOT_CONFIRMED,
    ErrorCode.ACCOUNT_LOCKED_OUT: _LOCKED_OUT,
    ErrorCode.ACCOUNT_LOCKED_OUT_OVERRIDE: _LOCKED_OUT,
    ErrorCode.ACCOUNT_TOMBSTONED: _TOMBSTONED,
    ErrorCode.ACCOUNT_CREDENTIALS_EXPIRED: _CREDENTIALS_EXPIRED,
    ErrorCode.ACCOUNT_CREDENTIALS_NOT_CONFIRMED: _CREDENTIALS_EXPIRED,
    ErrorCode.ACCOUNT_REQUIRES_IDENTITY_PROVIDER_LOCAL: _REQUIRES_LOCAL,
    ErrorCode.ACCOUNT_REQUIRES_IDENTITY_PROVIDER_GOOGLE: _REQUIRES_GOOGLE,
    ErrorCode.GOOGLE_JWT_BEARER_TOKEN_INVALID: _JWT_BEARER_TOKEN_INVALID,
    ErrorCode.GOOGLE_JWT_NONCE_INVALID: _JWT_NONCE_INVALID,
}


def classify(code: str | None, raw: str | None = None) -> ErrorClassification:
    """Return the message and reset-link flag for an error code.

    Args:
        code: The ``errorCodeName`` from the API, or None if absent.
        raw: Stringified error, shown verbatim for unknown codes.

    Returns:
        The fixed classification for known codes; otherwise ``raw`` (or the
        code itself) as the message, with no reset link.
    """
    # ErrorCode is a StrEnum, so plain strings hit the same keys.
    classification = CLASSIFICATIONS.get(code)  # type: ignore[call-overload]
    if classification is not None:
        return classification

    return ErrorClassification(message=raw if raw is not None else str(code))
