from __future__ import annotations

import base64
import re

from stellar_sdk import Keypair, ManageData, Network, TransactionEnvelope

from ..types import (
    MANAGE_DATA,
    ChallengeArtifact,
    ChallengeOperation,
    ChallengeSignature,
    TimeBounds,
)


def _operation_type(operation: object) -> str:
    if isinstance(operation, ManageData):
        return MANAGE_DATA
    return re.sub(r"(?<!^)(?=[A-Z])", "_", type(operation).__name__).lower()


def _network_passphrase(network: Network | str) -> str:
    if isinstance(network, Network):
        return network.network_passphrase
    return network


class StellarLedger:
    """LedgerSDK backed by stellar-sdk transaction envelopes."""

    def __init__(self, network: Network | str = Network.PUBLIC_NETWORK_PASSPHRASE) -> None:
        # Only used to parse envelopes; signing always takes the network explicitly.
        self.decode_passphrase = _network_passphrase(network)

    def decode(self, raw: bytes) -> ChallengeArtifact:
        xdr = base64.b64encode(raw).decode("ascii")
        envelope = TransactionEnvelope.from_xdr(xdr, self.decode_passphrase)
        return self._to_artifact(envelope)

    def encode(self, artifact: ChallengeArtifact) -> bytes:
        return base64.b64decode(artifact.envelope.to_xdr())

    def sign(
        self, artifact: ChallengeArtifact, keypair: Keypair, network: Network | str
    ) -> ChallengeArtifact:
        envelope = TransactionEnvelope.from_xdr(
            artifact.envelope.to_xdr(), _network_passphrase(network)
        )
        envelope.sign(keypair)
        return self._to_artifact(envelope)

    def hint(self, account_id: str) -> bytes:
        return Keypair.from_public_key(account_id).signature_hint()

    def hint_matches(self, signature: ChallengeSignature, hint: bytes) -> bool:
        return signature.hint == hint

    def public_identity(self, keypair: Keypair) -> str:
        return keypair.public_key

    def _to_artifact(self, envelope: TransactionEnvelope) -> ChallengeArtifact:
        tx = envelope.transaction
        time_bounds = None
        if tx.preconditions is not None and tx.preconditions.time_bounds is not None:
            time_bounds = TimeBounds(
                min_time=tx.preconditions.time_bounds.min_time,
                max_time=tx.preconditions.time_bounds.max_time,
            )

        operations = []
        for op in tx.operations:
            value = None
            name = None
            if isinstance(op, ManageData):
                name = op.data_name
                value = op.data_value
            operations.append(
                ChallengeOperation(
                    type=_operation_type(op),
                    name=name,
                    value=value,
                    source=op.source.account_id if op.source is not None else None,
                )
            )

        return ChallengeArtifact(
            source=tx.source.account_id,
            sequence=str(tx.sequence),
            time_bounds=time_bounds,
            operations=tuple(operations),
            signatures=tuple(
                ChallengeSignature(hint=sig.signature_hint, signature=sig.signature)
                for sig in envelope.signatures
            ),
            envelope=envelope,
        )
