"""Tests for identifier parsing and credential validation."""

from __future__ import annotations

import pytest

from reclaim.auth.models import IdentifierParts
from reclaim.auth.validation import (
    EMPTY_INPUT_MESSAGE,
    INVALID_EMAIL_MESSAGE,
    is_email_address,
    parse_identifier,
    validate,
)


class TestIsEmailAddress:
    @pytest.mark.parametrize(
        "value",
        [
            "user@example.com",
            "first.last@sub.example.org",
            "user+tag@example.co.uk",
            "AccountLockedOut@example.com",
        ],
    )
    def test_accepts_email_shapes(self, value: str) -> None:
        assert is_email_address(value)

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "user",
            "user@",
            "@example.com",
            "user@localhost",
            "user@@example.com",
            "user name@example.com",
            "user@example.com ",
            "user@example.com\n",
        ],
    )
    def test_rejects_non_email_shapes(self, value: str) -> None:
        assert not is_email_address(value)


class TestParseIdentifier:
    def test_single_address(self) -> None:
        assert parse_identifier("user@example.com") == IdentifierParts(
            primary="user@example.com"
        )

    def test_act_as_pair(self) -> None:
        parts = parse_identifier("admin@example.com:user@example.com")

        assert parts == IdentifierParts(
            primary="admin@example.com", acting_as="user@example.com"
        )

    def test_three_parts_rejected(self) -> None:
        assert parse_identifier("a@example.com:b@example.com:c@example.com") is None

    def test_pair_with_malformed_half_rejected(self) -> None:
        assert parse_identifier("admin@example.com:user") is None
        assert parse_identifier("admin:user@example.com") is None

    def test_trailing_colon_rejected(self) -> None:
        assert parse_identifier("admin@example.com:") is None


class TestValidate:
    def test_valid_single_address(self) -> None:
        result = validate("user@example.com", "pw")

        assert result.valid is True
        assert result.message is None

    def test_valid_act_as_pair(self) -> None:
        assert validate("a@example.com:b@example.com", "pw").valid is True

    @pytest.mark.parametrize(
        ("identifier", "secret"),
        [("", "pw"), ("user@example.com", ""), ("", ""), ("not-an-email", "")],
    )
    def test_empty_field_gives_placeholder(self, identifier: str, secret: str) -> None:
        """Empty input is reported with a blank placeholder, not the real error."""
        result = validate(identifier, secret)

        assert result.valid is False
        assert result.message == EMPTY_INPUT_MESSAGE

    @pytest.mark.parametrize(
        "identifier",
        [
            "not-an-email",
            "a@example.com:b@example.com:c@example.com",
            "a@example.com:nope",
            "a@example.com::b@example.com",
            "a@example.com\n:b@example.com",
        ],
    )
    def test_malformed_identifier(self, identifier: str) -> None:
        result = validate(identifier, "pw")

        assert result.valid is False
        assert result.message == INVALID_EMAIL_MESSAGE
