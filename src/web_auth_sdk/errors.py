from __future__ import annotations

from typing import Any

from .types import RejectionReason

NO_TOKEN_DETAIL = "No token sent."


class WebAuthError(Exception):
    """Base class for every failure of a web authentication attempt."""


class TransportError(WebAuthError):
    def __init__(self, message: str, response: Any | None = None) -> None:
        super().__init__(message)
        self.response = response


class MalformedChallengeError(WebAuthError):
    pass


class ChallengeRejectedError(WebAuthError):
    def __init__(self, reason: RejectionReason, detail: str | None = None) -> None:
        super().__init__(detail or reason.message)
        self.reason = reason
        self.detail = detail


class TokenMissingError(WebAuthError):
    def __init__(self, detail: str = NO_TOKEN_DETAIL, response: Any | None = None) -> None:
        super().__init__(f"Web authentication failed: {detail}")
        self.detail = detail
        self.response = response
