"""Configuration settings for web auth SDK."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "web-auth-sdk"


@dataclass
class Settings:
    """Transport settings shared by the fetch and submit requests.

    The SDK never reads the environment on its own; hosts that want
    environment-driven settings call ``Settings.from_env()``.
    """

    request_timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls) -> Settings:
        timeout = os.getenv("WEB_AUTH_TIMEOUT", "")
        return cls(
            request_timeout=float(timeout) if timeout else DEFAULT_TIMEOUT,
            user_agent=os.getenv("WEB_AUTH_USER_AGENT", DEFAULT_USER_AGENT),
        )
