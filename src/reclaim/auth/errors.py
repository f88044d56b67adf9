"""Errors raised by the Reclaim API client and their fail-safe parsing."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


class ApiException(Exception):
    """The Reclaim API answered with a non-success status.

    Attributes:
        status_code: HTTP status of the response.
        response: Raw response body text, usually ``{"errorCodeName": ...}``.
        headers: Response headers.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        response: str,
        headers: dict[str, str] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response
        self.headers = headers or {}

    def __str__(self) -> str:
        return f"{self.message}\n\nStatus: {self.status_code}\nResponse:\n{self.response}"


@dataclass(frozen=True)
class RemoteError:
    """Structured view of a failed API call.

    Attributes:
        code: The ``errorCodeName`` field, or None when the body carries none.
        payload: The decoded body, or the raw text when it is not JSON.
    """

    code: str | None
    payload: Any = None

    @classmethod
    def from_exception(cls, exc: BaseException) -> RemoteError:
        """Extract the error code from an exception's response body.

        Never raises: bodies that are missing, not JSON, or not a JSON object
        produce a RemoteError with ``code=None``.
        """
        body = getattr(exc, "response", None)
        if not isinstance(body, (str, bytes, bytearray)) or not body:
            return cls(code=None, payload=body)

        try:
            payload = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.debug("Error body is not JSON: %r", body[:200])
            return cls(code=None, payload=body)

        if not isinstance(payload, dict):
            return cls(code=None, payload=payload)

        code = payload.get("errorCodeName")
        return cls(code=code if isinstance(code, str) else None, payload=payload)
