# Re-export from local modules
from .challenge import assert_challenge_ok, check_challenge
from .client import WebAuthClient, authenticate, fetch_challenge, submit_response
from .config import Settings
from .errors import (
    ChallengeRejectedError,
    MalformedChallengeError,
    TokenMissingError,
    TransportError,
    WebAuthError,
)
from .ledger import LedgerSDK, StellarLedger
from .types import ChallengeArtifact, RejectionReason

__all__ = [
    "ChallengeArtifact",
    "ChallengeRejectedError",
    "LedgerSDK",
    "MalformedChallengeError",
    "RejectionReason",
    "Settings",
    "StellarLedger",
    "TokenMissingError",
    "TransportError",
    "WebAuthClient",
    "WebAuthError",
    "assert_challenge_ok",
    "authenticate",
    "check_challenge",
    "fetch_challenge",
    "submit_response",
]
