from __future__ import annotations

import base64
import json
import logging
from typing import Any

import requests

from ..challenge.validator import assert_challenge_ok
from ..config import Settings
from ..errors import NO_TOKEN_DETAIL, MalformedChallengeError, TokenMissingError, TransportError
from ..ledger.base import LedgerSDK
from ..types import ChallengeArtifact

logger = logging.getLogger(__name__)


def _transport(session: requests.Session | None) -> Any:
    return session if session is not None else requests


def fetch_challenge(
    endpoint: str,
    service_account: str,
    local_account: str,
    *,
    ledger: LedgerSDK,
    session: requests.Session | None = None,
    settings: Settings | None = None,
    now_ms: int | None = None,
) -> ChallengeArtifact:
    """Fetch a challenge transaction and check it before handing it out.

    Raises TransportError, MalformedChallengeError or ChallengeRejectedError.
    """
    settings = settings or Settings()
    logger.debug(f"Fetching web auth challenge from {endpoint}...")

    try:
        response = _transport(session).get(
            endpoint,
            params={"account": local_account},
            headers={"User-Agent": settings.user_agent},
            timeout=settings.request_timeout,
        )
        response.raise_for_status()
    except requests.RequestException as e:
        logger.debug(f"Fetching web auth challenge from {endpoint} failed: {e}")
        raise TransportError(
            f"Cannot fetch web auth challenge: {e}", response=e.response
        ) from e

    try:
        data = response.json()
    except ValueError as e:
        raise MalformedChallengeError(f"Web auth challenge is not valid JSON: {e}") from e

    transaction = data.get("transaction") if isinstance(data, dict) else None
    if not isinstance(transaction, str):
        raise MalformedChallengeError("Web auth challenge response carries no transaction.")

    try:
        challenge = ledger.decode(base64.b64decode(transaction, validate=True))
    except Exception as e:  # noqa: BLE001
        raise MalformedChallengeError(f"Cannot decode web auth challenge: {e}") from e

    logger.debug(f"Fetched web auth challenge: {challenge}")
    assert_challenge_ok(challenge, service_account, local_account, ledger=ledger, now_ms=now_ms)
    return challenge


def submit_response(
    endpoint: str,
    signed_challenge: ChallengeArtifact,
    *,
    ledger: LedgerSDK,
    session: requests.Session | None = None,
    settings: Settings | None = None,
) -> str:
    """Post the signed challenge and return the bearer token."""
    settings = settings or Settings()
    transaction = base64.b64encode(ledger.encode(signed_challenge)).decode("ascii")
    body = json.dumps({"transaction": transaction})

    # SEP-10 requires exactly "application/json", no charset
    headers = {
        "Content-Type": "application/json",
        "User-Agent": settings.user_agent,
    }

    try:
        response = _transport(session).post(
            endpoint, data=body, headers=headers, timeout=settings.request_timeout
        )
        response.raise_for_status()
    except requests.RequestException as e:
        logger.debug(f"Authentication at {endpoint} failed: {e}")
        raise TransportError(f"Web authentication failed: {e}", response=e.response) from e

    try:
        data = response.json()
    except ValueError:
        data = None

    if not isinstance(data, dict) or not isinstance(data.get("token"), str):
        error = data.get("error") if isinstance(data, dict) else None
        raise TokenMissingError(str(error) if error else NO_TOKEN_DETAIL, response=response)

    return data["token"]
