from .validator import (
    NONCE_LENGTH,
    TIME_TOLERANCE_MS,
    assert_challenge_ok,
    check_challenge,
    get_nonce,
)

__all__ = [
    "NONCE_LENGTH",
    "TIME_TOLERANCE_MS",
    "assert_challenge_ok",
    "check_challenge",
    "get_nonce",
]
