"""
Shared fixtures: an AGiXTClient wired to a mocked aiohttp session.
"""

import json
from typing import Any, Dict, NamedTuple, Optional
from unittest.mock import MagicMock

import pytest
from aiohttp import ClientSession

from agixt_client import AGiXTClient

_UNSET = object()


class RecordedRequest(NamedTuple):
    method: str
    url: str
    json: Any
    params: Optional[Dict[str, Any]]
    headers: Dict[str, str]


class MockAiohttpResponse:
    """Mock aiohttp response."""

    def __init__(self, status: int = 200, json_data: Any = _UNSET, text_data: str = None, body: bytes = None):
        self.status = status
        self._json_data = json_data
        self._text_data = text_data
        self._body = body

    async def text(self):
        if self._text_data is not None:
            return self._text_data
        if self._json_data is _UNSET:
            return ""
        return json.dumps(self._json_data)

    async def read(self):
        if self._body is not None:
            return self._body
        return (await self.text()).encode("utf-8")


class AsyncContextManagerMock:
    """Stands in for session.request(): records each call and replays responses in order."""

    def __init__(self, *responses):
        self._responses = list(responses)
        self._current = None
        self.calls = []

    def __call__(self, method, url, **kwargs):
        self.calls.append(
            RecordedRequest(
                method=method,
                url=str(url),
                json=kwargs.get("json"),
                params=kwargs.get("params"),
                headers=kwargs.get("headers") or {},
            )
        )
        if len(self._responses) > 1:
            self._current = self._responses.pop(0)
        else:
            self._current = self._responses[0]
        return self

    @property
    def last(self) -> RecordedRequest:
        return self.calls[-1]

    async def __aenter__(self):
        if isinstance(self._current, BaseException):
            raise self._current
        return self._current

    async def __aexit__(self, *args):
        pass


@pytest.fixture
def mock_session():
    """Create a mock session with properly configured methods."""
    session = MagicMock(spec=ClientSession)
    session.closed = False

    async def mock_close():
        session.closed = True

    session.close = mock_close
    return session


@pytest.fixture
async def client(mock_session):
    """Client using the mocked session."""
    client = AGiXTClient("http://localhost:7437", api_key="test-key")
    client._session = mock_session
    client._owner = True
    yield client
    await client.close()


@pytest.fixture
def reply():
    """Factory for mocked responses: reply(status, json_data, text_data=..., body=...)."""
    return MockAiohttpResponse


@pytest.fixture
def respond(mock_session):
    """Queue responses (or exceptions) for the next session.request() calls."""

    def _respond(*responses):
        mock = AsyncContextManagerMock(*responses)
        mock_session.request = mock
        return mock

    return _respond
