"""
GDAX API key authentication and request signing.
"""
from typing import Dict, Any
import base64
import binascii
import hashlib
import hmac
import json
import logging
import os
import time

from .errors import InvalidCredentialsError


class GdaxCredentials:
    """Immutable GDAX API key, secret and passphrase."""

    __slots__ = ("key", "secret", "passphrase", "_secret_bytes")

    def __init__(self, key: str, secret: str, passphrase: str):
        """
        Initialize GDAX credentials.

        Args:
            key: API key
            secret: Base64-encoded API secret
            passphrase: API passphrase chosen when the key was created

        Raises:
            InvalidCredentialsError: If the secret is not valid base64
        """
        try:
            secret_bytes = base64.b64decode(secret, validate=True)
        except (binascii.Error, ValueError) as e:
            raise InvalidCredentialsError(f"API secret is not valid base64: {e}") from e

        object.__setattr__(self, "key", key)
        object.__setattr__(self, "secret", secret)
        object.__setattr__(self, "passphrase", passphrase)
        object.__setattr__(self, "_secret_bytes", secret_bytes)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r})"

    @property
    def secret_bytes(self) -> bytes:
        """The decoded HMAC key."""
        return self._secret_bytes

    @classmethod
    def from_env(cls, env_var: str = "GDAX_CREDENTIALS") -> "GdaxCredentials":
        """
        Load credentials from environment variable containing JSON.

        Expected JSON format:
        {
            "key": "...",
            "secret": "<base64>",
            "passphrase": "..."
        }

        Args:
            env_var: Environment variable name containing JSON credentials

        Returns:
            GdaxCredentials instance

        Raises:
            ValueError: If credentials are missing or invalid
        """
        creds_json = os.getenv(env_var)
        if not creds_json:
            raise ValueError(f"Environment variable '{env_var}' is not set")

        try:
            creds_data: Dict[str, Any] = json.loads(creds_json)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in '{env_var}': {e}")
        if not isinstance(creds_data, dict):
            raise ValueError(f"Credentials in '{env_var}' must be a JSON object")

        required_fields = ["key", "secret", "passphrase"]
        missing = [f for f in required_fields if f not in creds_data]
        if missing:
            raise ValueError(f"Missing required credential fields: {', '.join(missing)}")

        return cls(
            key=creds_data["key"],
            secret=creds_data["secret"],
            passphrase=creds_data["passphrase"],
        )


def sign(secret: bytes, method: str, path: str, body: str, timestamp: str) -> str:
    """
    Compute the CB-ACCESS-SIGN value for a request.

    The message is ``timestamp + METHOD + path + body`` with no separators,
    signed with HMAC-SHA256 and base64 encoded.

    Args:
        secret: Decoded API secret
        method: HTTP method, any case
        path: Request path including query string
        body: Exact request body, empty string when there is none
        timestamp: Decimal epoch seconds, as sent in CB-ACCESS-TIMESTAMP

    Returns:
        Base64 signature string
    """
    message = f"{timestamp}{method.upper()}{path}{body}".encode("utf-8")
    digest = hmac.new(secret, message, hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


class GdaxAuthenticator:
    """Build signed CB-ACCESS-* headers for private GDAX requests."""

    def __init__(self, credentials: GdaxCredentials):
        self.credentials = credentials

    def get_auth_headers(self, request_method: str, request_path: str, body: str = "") -> Dict[str, str]:
        """
        Get HTTP headers for an authenticated GDAX request.

        A new timestamp is taken on every call; the same string is signed
        and sent, so the exchange can recompute the signature.

        Args:
            request_method: HTTP method
            request_path: API endpoint path including query string
            body: Exact request body

        Returns:
            Dictionary of CB-ACCESS-* headers
        """
        timestamp = str(int(time.time()))
        signature = sign(self.credentials.secret_bytes, request_method, request_path, body, timestamp)
        logging.debug(f"Signed {request_method.upper()} {request_path} at {timestamp}")
        return {
            "CB-ACCESS-KEY": self.credentials.key,
            "CB-ACCESS-SIGN": signature,
            "CB-ACCESS-TIMESTAMP": timestamp,
            "CB-ACCESS-PASSPHRASE": self.credentials.passphrase,
        }
