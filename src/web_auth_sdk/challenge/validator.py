from __future__ import annotations

import logging
import time

from ..errors import ChallengeRejectedError
from ..ledger.base import LedgerSDK
from ..types import MANAGE_DATA, ChallengeArtifact, RejectionReason

logger = logging.getLogger(__name__)

TIME_TOLERANCE_MS = 10_000
NONCE_LENGTH = 64


def _now_ms() -> int:
    return int(time.time() * 1000)


def get_nonce(challenge: ChallengeArtifact) -> bytes | None:
    """Return the value of the first manage_data operation, if any."""
    for operation in challenge.operations:
        if operation.type == MANAGE_DATA:
            return operation.value if operation.value is not None else b""
    return None


def check_challenge(
    challenge: ChallengeArtifact,
    service_account: str,
    local_account: str,
    *,
    ledger: LedgerSDK,
    now_ms: int | None = None,
) -> RejectionReason | None:
    """Check a challenge transaction before it gets signed.

    Checks run in a fixed order and the first violation is returned.
    ``None`` means the challenge is fine. Has no side effects; pass
    ``now_ms`` to pin the clock.
    """
    if challenge.source != service_account:
        return RejectionReason.SOURCE_MISMATCH
    # Compared as a string so huge sequence numbers are never truncated
    if str(challenge.sequence) != "0":
        return RejectionReason.SEQUENCE_NOT_ZERO

    if challenge.time_bounds is None:
        return RejectionReason.NO_TIME_BOUNDS
    now = _now_ms() if now_ms is None else now_ms
    if int(challenge.time_bounds.min_time) * 1000 > now + TIME_TOLERANCE_MS:
        return RejectionReason.LOWER_BOUND_IN_FUTURE
    if int(challenge.time_bounds.max_time) * 1000 < now - TIME_TOLERANCE_MS:
        return RejectionReason.UPPER_BOUND_IN_PAST

    if not challenge.operations:
        return RejectionReason.NO_OPERATIONS

    nonce = get_nonce(challenge)
    if nonce is None or len(nonce) != NONCE_LENGTH:
        return RejectionReason.INVALID_NONCE

    service_hint = ledger.hint(service_account)
    if not any(ledger.hint_matches(sig, service_hint) for sig in challenge.signatures):
        return RejectionReason.NOT_SIGNED_BY_SERVICE

    return None


def assert_challenge_ok(
    challenge: ChallengeArtifact,
    service_account: str,
    local_account: str,
    *,
    ledger: LedgerSDK,
    now_ms: int | None = None,
) -> None:
    logger.debug(
        f"Checking challenge transaction (local account {local_account}, "
        f"service signing account {service_account})..."
    )
    reason = check_challenge(
        challenge, service_account, local_account, ledger=ledger, now_ms=now_ms
    )
    if reason is None:
        return
    if reason is RejectionReason.INVALID_NONCE and get_nonce(challenge) is None:
        raise ChallengeRejectedError(
            reason, "Challenge does not contain a manage_data operation."
        )
    raise ChallengeRejectedError(reason)
