"""
HTTP request primitives shared by the public and private GDAX clients.
"""
from typing import Any, Callable, Dict, Optional, Protocol, TypeVar
import json
import logging
import os

import requests
from pydantic import ValidationError

from . import __version__
from .errors import ApiError, DecodeError, TransportError

T = TypeVar("T")

DEFAULT_API_BASE_URL = "https://api.gdax.com"
DEFAULT_TIMEOUT = 30
USER_AGENT = f"gdax-client-python/{__version__}"
SUPPORTED_METHODS = ("GET", "POST", "DELETE")


def get_api_base_url(api_base_url: Optional[str] = None) -> str:
    """Resolve the API base URL: explicit argument, then GDAX_API_BASE_URL, then the default."""
    if api_base_url is None:
        api_base_url = os.getenv("GDAX_API_BASE_URL", DEFAULT_API_BASE_URL)
    return api_base_url.rstrip("/")


class Authenticator(Protocol):
    """Protocol for objects that sign private requests."""

    def get_auth_headers(self, request_method: str, request_path: str, body: str = "") -> Dict[str, str]:
        """
        Get HTTP headers for an authenticated request.

        Args:
            request_method: HTTP method (GET, POST, DELETE)
            request_path: API endpoint path including query string
            body: Exact request body

        Returns:
            Dictionary of authentication headers
        """
        ...


class Requester:
    """Send GDAX requests and decode their responses."""

    def __init__(
        self,
        api_base_url: Optional[str] = None,
        authenticator: Optional[Authenticator] = None,
        timeout: float = DEFAULT_TIMEOUT
    ):
        """
        Args:
            api_base_url: Override default API base URL
            authenticator: Signs every request when set; public requests leave it unset
            timeout: Per-request timeout in seconds
        """
        self.api_base_url = get_api_base_url(api_base_url)
        self.authenticator = authenticator
        self.timeout = timeout

    def _headers(self, method: str, path: str, body: str) -> Dict[str, str]:
        headers = {
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }
        if self.authenticator is not None:
            headers.update(self.authenticator.get_auth_headers(method, path, body))
        if body:
            headers["Content-Type"] = "application/json"
        return headers

    def request(self, method: str, path: str, decoder: Callable[[Any], T], body: str = "") -> T:
        """
        Send one request and decode the response.

        Args:
            method: "GET", "POST" or "DELETE"
            path: Endpoint path including query string, starting with "/"
            decoder: Turns the parsed JSON body into the result type
            body: Final request body; signed and sent unchanged

        Returns:
            Decoded response

        Raises:
            ApiError: If the exchange answered with a non-2xx status
            TransportError: If the HTTP request itself failed
            DecodeError: If a response body does not match the expected schema
        """
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        headers = self._headers(method, path, body)
        url = f"{self.api_base_url}{path}"
        logging.debug(f"{method} {url}")

        try:
            if method == "GET":
                response = requests.get(url, headers=headers, timeout=self.timeout)
            elif method == "POST":
                response = requests.post(url, headers=headers, data=body.encode("utf-8"), timeout=self.timeout)
            else:
                response = requests.delete(url, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            logging.error(f"{method} {url} failed: {e}")
            raise TransportError(f"{method} {path} failed: {e}") from e

        logging.debug(f"{method} {url} -> {response.status_code}")

        if not response.ok:
            error = _decode_error(response)
            logging.warning(f"GDAX API error on {method} {path}: {error}")
            raise error

        payload = _parse_json(response)
        try:
            return decoder(payload)
        except DecodeError:
            logging.error(f"Unexpected response body for {method} {path}")
            raise
        except (ValidationError, ValueError, OverflowError) as e:
            logging.error(f"Unexpected response body for {method} {path}: {e}")
            raise DecodeError(f"Response body for {method} {path} does not match the expected schema: {e}") from e

    def get(self, path: str, decoder: Callable[[Any], T]) -> T:
        return self.request("GET", path, decoder)

    def post(self, path: str, body: str, decoder: Callable[[Any], T]) -> T:
        return self.request("POST", path, decoder, body=body)

    def delete(self, path: str, decoder: Callable[[Any], T]) -> T:
        return self.request("DELETE", path, decoder)


def _parse_json(response: requests.Response) -> Any:
    """Parse a response body as JSON; an empty body is ``None``."""
    text = response.text
    if not text.strip():
        return None
    try:
        return json.loads(text)
    except ValueError as e:
        # JSONDecodeError, or an integer literal past the int conversion limit
        raise DecodeError(f"Response body is not valid JSON: {e}") from e


def _decode_error(response: requests.Response) -> ApiError:
    payload = _parse_json(response)
    if not isinstance(payload, dict) or not isinstance(payload.get("message"), str):
        raise DecodeError(
            f"Error response with status {response.status_code} has no 'message' field: {response.text[:200]!r}"
        )
    return ApiError(payload["message"], status_code=response.status_code)
