"""
Session handling and request dispatch shared by every endpoint wrapper.
"""

import asyncio
import json
import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import aiohttp
from aiohttp import ClientSession, ClientTimeout
from pydantic import ValidationError
from yarl import URL

from agixt_client.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from agixt_client.exceptions import (
    ApiError,
    AuthenticationError,
    InvalidInputError,
    NotFoundError,
    RequestError,
    ResponseDecodeError,
)
from agixt_client.models import ErrorResponse

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


def normalize_api_key(api_key: Optional[str]) -> Optional[str]:
    """Strip a leading bearer prefix; the server expects the bare token."""
    if not api_key:
        return None
    token = api_key.replace("Bearer ", "").replace("bearer ", "").strip()
    return token or None


class BaseClient:
    """
    Owns the aiohttp session, the header map and the request/response plumbing.

    Endpoint groups are mixed into AGiXTClient on top of this class and only
    ever talk to the server through `_request`.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        verbose: bool = False,
        timeout: float = DEFAULT_TIMEOUT,
        verify_ssl: bool = True,
    ):
        """
        Initialize the client.

        Args:
            base_url: AGiXT server URL (default: "http://localhost:7437")
            api_key: Optional API key or JWT; a "Bearer " prefix is removed
            verbose: Log status code and body of every response at INFO
                through the "agixt_client" logger; nothing is shown until
                the application configures logging
            timeout: Request timeout in seconds (default: 300)
            verify_ssl: Whether to verify SSL certificates (default: True)
        """
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.verbose = verbose
        self.timeout = ClientTimeout(total=timeout)
        self.verify_ssl = verify_ssl
        self.headers: Dict[str, str] = {"Content-Type": JSON_CONTENT_TYPE}
        token = normalize_api_key(api_key)
        if token:
            self.headers["Authorization"] = token
        self._session: Optional[ClientSession] = None
        self._owner = False

    async def __aenter__(self):
        """Enter context manager and create session."""
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit context manager and close session."""
        await self.close()

    async def start(self) -> None:
        """Start the client session."""
        if self._session is None:
            self._session = ClientSession(
                timeout=self.timeout,
                connector=aiohttp.TCPConnector(ssl=self.verify_ssl),
            )
            self._owner = True

    async def close(self) -> None:
        """Close the client session."""
        if self._session is not None and self._owner:
            await self._session.close()
            self._session = None

    @property
    def session(self) -> ClientSession:
        """Get the HTTP session."""
        if self._session is None or self._session.closed:
            raise RuntimeError(
                "Client session not initialized. Use async context manager or call start() first."
            )
        return self._session

    def _path(self, template: str, **segments: Any) -> str:
        """Fill path placeholders, rejecting empty identifiers."""
        quoted = {}
        for name, value in segments.items():
            if value is None or str(value) == "":
                raise InvalidInputError(f"{name} must not be empty")
            quoted[name] = quote(str(value), safe="")
        return template.format(**quoted)

    def _url(self, path: str) -> URL:
        return URL(f"{self.base_url}{path}")

    async def _request(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        params: Optional[Dict[str, Any]] = None,
        authenticated: bool = True,
        raw: bool = False,
    ) -> Any:
        """
        Send one request and return the decoded reply.

        Args:
            method: HTTP method
            path: Path below the base URL, starting with "/"
            body: Optional JSON body
            params: Optional query parameters
            authenticated: Send the Authorization header
            raw: Return the body bytes instead of decoding JSON

        Raises:
            RequestError: If the request could not be sent or timed out
            ApiError: If the server answers with an error status
            ResponseDecodeError: If a successful body is not valid JSON
        """
        url = self._url(path)
        headers = dict(self.headers) if authenticated else {"Content-Type": JSON_CONTENT_TYPE}
        logger.debug("%s %s", method, url)
        try:
            async with self.session.request(
                method, url, json=body, params=params, headers=headers
            ) as response:
                return await self._handle_response(response, raw=raw)
        except aiohttp.ClientError as e:
            raise RequestError(f"{method} {url} failed", str(e)) from e
        except asyncio.TimeoutError as e:
            raise RequestError(f"{method} {url} timed out") from e

    async def _handle_response(self, response: aiohttp.ClientResponse, raw: bool = False) -> Any:
        """Handle HTTP response and raise errors if needed."""
        if raw and response.status < 400:
            if self.verbose:
                logger.info("Status Code: %s (binary body)", response.status)
            return await response.read()

        body = await response.read()
        if response.status >= 400:
            text = body.decode("utf-8", errors="replace")
            if self.verbose:
                logger.info("Status Code: %s\nResponse JSON:\n%s", response.status, text)
            raise self._error_for(response.status, text)

        try:
            text = body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ResponseDecodeError("Response is not valid UTF-8", repr(body[:200])) from e
        if self.verbose:
            logger.info("Status Code: %s\nResponse JSON:\n%s", response.status, text)

        if not text.strip():
            return None
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise ResponseDecodeError("Response is not valid JSON", text[:200]) from e

    @staticmethod
    def _error_for(status: int, body: str) -> ApiError:
        message = body or f"HTTP {status}"
        try:
            data = json.loads(body)
            if isinstance(data, dict):
                message = ErrorResponse(**data).describe() or message
        except (ValueError, TypeError, ValidationError):
            pass

        if status in (401, 403):
            return AuthenticationError(message, status, body)
        if status == 404:
            return NotFoundError(message, status, body)
        return ApiError(message, status, body)

    @staticmethod
    def _field(data: Any, key: str) -> Any:
        """Return data[key], treating any other shape as a decode failure."""
        if not isinstance(data, dict) or key not in data:
            raise ResponseDecodeError(f"Response has no '{key}' field", repr(data)[:200])
        return data[key]

    @staticmethod
    def _list(data: Any, key: Optional[str] = None) -> List[Any]:
        """Accept a bare list, or a list wrapped under `key`; otherwise empty."""
        if isinstance(data, list):
            return data
        if key and isinstance(data, dict) and isinstance(data.get(key), list):
            return data[key]
        return []

    def _message(self, data: Any) -> Any:
        return self._field(data, "message")
