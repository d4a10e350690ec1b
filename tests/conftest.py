import base64
import dataclasses
import hashlib
import json
import os
import time
from unittest.mock import MagicMock

import pytest

from web_auth_sdk.types import (
    MANAGE_DATA,
    ChallengeArtifact,
    ChallengeOperation,
    ChallengeSignature,
    TimeBounds,
)

SERVICE_ACCOUNT = "SERVICE-ACCOUNT"
CLIENT_ACCOUNT = "CLIENT-ACCOUNT"
NOW_MS = 1_700_000_000_000
NOW = NOW_MS // 1000


def fake_hint(account_id: str) -> bytes:
    return hashlib.sha256(account_id.encode()).digest()[-4:]


class FakeKeypair:
    def __init__(self, account_id: str) -> None:
        self.account_id = account_id


class FakeLedger:
    """In-memory LedgerSDK using JSON as the envelope encoding."""

    def decode(self, raw: bytes) -> ChallengeArtifact:
        data = json.loads(raw.decode("utf-8"))
        bounds = data["time_bounds"]
        return ChallengeArtifact(
            source=data["source"],
            sequence=data["sequence"],
            time_bounds=TimeBounds(*bounds) if bounds else None,
            operations=tuple(
                ChallengeOperation(
                    type=op["type"],
                    name=op.get("name"),
                    value=base64.b64decode(op["value"]) if op.get("value") is not None else None,
                    source=op.get("source"),
                )
                for op in data["operations"]
            ),
            signatures=tuple(
                ChallengeSignature(base64.b64decode(h), base64.b64decode(s))
                for h, s in data["signatures"]
            ),
            envelope=raw,
        )

    def encode(self, artifact: ChallengeArtifact) -> bytes:
        bounds = artifact.time_bounds
        data = {
            "source": artifact.source,
            "sequence": artifact.sequence,
            "time_bounds": [bounds.min_time, bounds.max_time] if bounds else None,
            "operations": [
                {
                    "type": op.type,
                    "name": op.name,
                    "value": base64.b64encode(op.value).decode() if op.value is not None else None,
                    "source": op.source,
                }
                for op in artifact.operations
            ],
            "signatures": [
                [base64.b64encode(s.hint).decode(), base64.b64encode(s.signature).decode()]
                for s in artifact.signatures
            ],
        }
        return json.dumps(data, sort_keys=True).encode("utf-8")

    def sign(self, artifact, keypair, network):
        signature = ChallengeSignature(
            hint=fake_hint(keypair.account_id),
            signature=hashlib.sha256(f"{network}:{keypair.account_id}".encode()).digest(),
        )
        return dataclasses.replace(artifact, signatures=artifact.signatures + (signature,))

    def hint(self, account_id: str) -> bytes:
        return fake_hint(account_id)

    def hint_matches(self, signature, hint) -> bool:
        return signature.hint == hint

    def public_identity(self, keypair) -> str:
        return keypair.account_id


def make_challenge(
    source=SERVICE_ACCOUNT,
    sequence="0",
    time_bounds=TimeBounds(NOW - 60, NOW + 60),
    nonce=b"n" * 64,
    operations=None,
    signers=(SERVICE_ACCOUNT,),
) -> ChallengeArtifact:
    if operations is None:
        operations = (
            ChallengeOperation(
                type=MANAGE_DATA, name="example.com auth", value=nonce, source=CLIENT_ACCOUNT
            ),
        )
    return ChallengeArtifact(
        source=source,
        sequence=sequence,
        time_bounds=time_bounds,
        operations=tuple(operations),
        signatures=tuple(ChallengeSignature(fake_hint(s), b"\x01" * 64) for s in signers),
    )


def json_response(data, status_code=200):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = data
    return response


@pytest.fixture
def ledger():
    return FakeLedger()


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def challenge_b64(ledger):
    """Serialize an artifact the way the service would send it."""

    def _encode(artifact: ChallengeArtifact) -> str:
        return base64.b64encode(ledger.encode(artifact)).decode("ascii")

    return _encode


# stellar-sdk helpers


@pytest.fixture
def stellar_keys():
    from stellar_sdk import Keypair

    return Keypair.random(), Keypair.random()


def build_stellar_challenge(
    server_kp, client_account, network_passphrase, min_time=None, max_time=None
):
    from stellar_sdk import Account, TransactionBuilder

    now = int(time.time())
    builder = TransactionBuilder(
        source_account=Account(server_kp.public_key, -1),
        network_passphrase=network_passphrase,
        base_fee=100,
    )
    builder.add_time_bounds(
        now - 60 if min_time is None else min_time,
        now + 60 if max_time is None else max_time,
    )
    builder.append_manage_data_op(
        data_name="example.com auth",
        data_value=base64.b64encode(os.urandom(48)),
        source=client_account,
    )
    envelope = builder.build()
    envelope.sign(server_kp)
    return envelope
