from __future__ import annotations

import logging
from typing import Any

import requests

from ..config import Settings
from ..ledger.base import LedgerSDK
from ..ledger.stellar import StellarLedger
from ..types import ChallengeArtifact
from .http import fetch_challenge, submit_response

logger = logging.getLogger(__name__)


def authenticate(
    endpoint: str,
    service_account: str,
    keypair: Any,
    network: Any,
    *,
    ledger: LedgerSDK | None = None,
    session: requests.Session | None = None,
    settings: Settings | None = None,
) -> str:
    """Run one challenge-response round and return the bearer token.

    The challenge is fetched and checked, signed for ``network`` and posted
    back. Any failure aborts the round; nothing is retried here.
    """
    ledger = ledger or StellarLedger()
    challenge = fetch_challenge(
        endpoint,
        service_account,
        ledger.public_identity(keypair),
        ledger=ledger,
        session=session,
        settings=settings,
    )

    signed = ledger.sign(challenge, keypair, network)
    token = submit_response(endpoint, signed, ledger=ledger, session=session, settings=settings)
    logger.debug(f"Authenticated at {endpoint}")
    return token


class WebAuthClient:
    """Web auth endpoint bound to a service signing account and a network."""

    def __init__(
        self,
        endpoint: str,
        service_account: str,
        network: Any,
        *,
        ledger: LedgerSDK | None = None,
        session: requests.Session | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.endpoint = endpoint
        self.service_account = service_account
        self.network = network
        self.ledger = ledger or StellarLedger()
        self.session = session
        self.settings = settings or Settings()

    def fetch_challenge(self, account: str) -> ChallengeArtifact:
        return fetch_challenge(
            self.endpoint,
            self.service_account,
            account,
            ledger=self.ledger,
            session=self.session,
            settings=self.settings,
        )

    def submit_response(self, signed_challenge: ChallengeArtifact) -> str:
        return submit_response(
            self.endpoint,
            signed_challenge,
            ledger=self.ledger,
            session=self.session,
            settings=self.settings,
        )

    def authenticate(self, keypair: Any) -> str:
        return authenticate(
            self.endpoint,
            self.service_account,
            keypair,
            self.network,
            ledger=self.ledger,
            session=self.session,
            settings=self.settings,
        )
