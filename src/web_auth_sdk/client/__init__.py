from .auth import WebAuthClient, authenticate
from .http import fetch_challenge, submit_response

__all__ = ["WebAuthClient", "authenticate", "fetch_challenge", "submit_response"]
