"""
Shared fixtures for GDAX client tests.
"""
import json
from typing import Any, Callable, Optional
from unittest.mock import MagicMock, patch

import pytest


def build_response(status_code: int = 200, body: Any = None, text: Optional[str] = None) -> MagicMock:
    """Create a mock requests.Response with the given status and JSON body."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    if text is None:
        text = "" if body is None else json.dumps(body)
    response.text = text
    return response


@pytest.fixture
def make_response() -> Callable[..., MagicMock]:
    return build_response


@pytest.fixture
def mock_requests_get() -> Any:
    """Mock the requests.get function."""
    with patch('requests.get') as mock_get:
        yield mock_get


@pytest.fixture
def mock_requests_post() -> Any:
    """Mock the requests.post function."""
    with patch('requests.post') as mock_post:
        yield mock_post


@pytest.fixture
def mock_requests_delete() -> Any:
    """Mock the requests.delete function."""
    with patch('requests.delete') as mock_delete:
        yield mock_delete
