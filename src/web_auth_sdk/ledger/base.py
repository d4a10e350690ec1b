from __future__ import annotations

from typing import Any, Protocol

from ..types import ChallengeArtifact, ChallengeSignature


class LedgerSDK(Protocol):
    """Operations the web auth flow needs from a ledger SDK.

    The flow only orchestrates and validates structurally; transaction
    encoding and cryptography stay behind this interface.
    """

    def decode(self, raw: bytes) -> ChallengeArtifact:
        """Parse a binary transaction envelope into a challenge artifact."""
        ...

    def encode(self, artifact: ChallengeArtifact) -> bytes:
        """Serialize the artifact's envelope back to its binary form."""
        ...

    def sign(self, artifact: ChallengeArtifact, keypair: Any, network: Any) -> ChallengeArtifact:
        """Return a copy of ``artifact`` carrying an extra signature by ``keypair``."""
        ...

    def hint(self, account_id: str) -> bytes:
        ...

    def hint_matches(self, signature: ChallengeSignature, hint: bytes) -> bool:
        ...

    def public_identity(self, keypair: Any) -> str:
        ...
