"""Type definitions for web auth SDK."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

MANAGE_DATA = "manage_data"


class RejectionReason(Enum):
    SOURCE_MISMATCH = "Challenge source account does not match the remote signing account."
    SEQUENCE_NOT_ZERO = "Challenge sequence number must be zero."
    NO_TIME_BOUNDS = "Challenge transaction has no time bounds set."
    LOWER_BOUND_IN_FUTURE = "Challenge transaction lower time bound is in the future."
    UPPER_BOUND_IN_PAST = "Challenge transaction upper time bound is in the past."
    NO_OPERATIONS = "Challenge transaction carries no operations."
    INVALID_NONCE = "Challenge must carry a manage_data nonce of 64 bytes."
    NOT_SIGNED_BY_SERVICE = "Challenge not signed by service's signing key."

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class TimeBounds:
    min_time: int  # epoch seconds
    max_time: int


@dataclass(frozen=True)
class ChallengeOperation:
    type: str
    name: str | None = None
    value: bytes | None = None
    source: str | None = None


@dataclass(frozen=True)
class ChallengeSignature:
    hint: bytes
    signature: bytes


@dataclass(frozen=True)
class ChallengeArtifact:
    """Structured view of a challenge transaction.

    Built from untrusted network data by a ledger SDK; nothing here is
    validated on construction. ``envelope`` is the SDK's own object and is
    what gets signed and serialized.
    """

    source: str
    sequence: str
    time_bounds: TimeBounds | None
    operations: tuple[ChallengeOperation, ...] = ()
    signatures: tuple[ChallengeSignature, ...] = ()
    envelope: Any = field(default=None, compare=False, repr=False)
