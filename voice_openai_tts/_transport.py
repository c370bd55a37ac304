"""
Transport layer for OpenAI HTTP communication.

This module provides the Transport class that handles low-level HTTP
communication with the OpenAI API, including session management,
authentication headers and call-scoped timeouts.
"""

from __future__ import annotations

import asyncio
import sys
import uuid
from typing import Any
from typing import Optional

import aiohttp

from ._auth import AuthBase
from ._exceptions import ConnectionError
from ._exceptions import TransportError
from ._helpers import get_version
from ._logging import get_logger
from ._models import ConnectionConfig


class Transport:
    """
    HTTP transport layer for OpenAI API communication.

    The transport does not interpret response statuses; callers receive the
    aiohttp response and must release it, typically with ``async with``.

    Args:
        url: Base URL for the OpenAI API, e.g. ``https://api.openai.com/v1``.
        conn_config: Connection timeouts.
        auth: Authentication instance providing the bearer header.
        request_id: Optional identifier sent as ``X-Request-Id``. Generated
            automatically if not provided.

    Examples:
        >>> transport = Transport(url, ConnectionConfig(), StaticKeyAuth("sk-..."))
        >>> async with await transport.get("/models", timeout=5.0) as response:
        ...     print(response.status)
        >>> await transport.close()
    """

    def __init__(
        self,
        url: str,
        conn_config: ConnectionConfig,
        auth: AuthBase,
        request_id: Optional[str] = None,
    ) -> None:
        self._url = url
        self._conn_config = conn_config
        self._auth = auth
        self._request_id = request_id or str(uuid.uuid4())
        self._session: Optional[aiohttp.ClientSession] = None
        self._closed = False
        self._logger = get_logger(__name__)

        self._logger.debug("Transport initialized (request_id=%s, url=%s)", self._request_id, self._url)

    async def post(
        self,
        path: str,
        json_data: Optional[dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> aiohttp.ClientResponse:
        """
        Send POST request to the API.

        Args:
            path: API endpoint path
            json_data: Optional JSON data for request body
            timeout: Optional total request timeout in seconds

        Returns:
            HTTP response object

        Raises:
            ConnectionError: If the request could not be sent
            TransportError: If the request timed out
        """
        return await self._request("POST", path, json_data=json_data, timeout=timeout)

    async def get(self, path: str, timeout: Optional[float] = None) -> aiohttp.ClientResponse:
        """
        Send GET request to the API.

        Args:
            path: API endpoint path
            timeout: Optional total request timeout in seconds

        Returns:
            HTTP response object

        Raises:
            ConnectionError: If the request could not be sent
            TransportError: If the request timed out
        """
        return await self._request("GET", path, timeout=timeout)

    async def close(self) -> None:
        """
        Close the HTTP session and cleanup resources.

        It's safe to call multiple times.
        """
        if self._session:
            try:
                await self._session.close()
            except Exception:
                pass  # Best effort cleanup
            finally:
                self._session = None
        self._closed = True

    def _ensure_session(self) -> None:
        """Ensure HTTP session is created."""
        if self._session is None and not self._closed:
            self._logger.debug(
                "Creating HTTP session (connect_timeout=%.1fs)",
                self._conn_config.connect_timeout,
            )
            timeout = aiohttp.ClientTimeout(
                total=self._conn_config.synthesis_timeout,
                connect=self._conn_config.connect_timeout,
            )
            self._session = aiohttp.ClientSession(timeout=timeout)

    async def _request(
        self,
        method: str,
        path: str,
        json_data: Optional[dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> aiohttp.ClientResponse:
        """
        Send HTTP request to the API.

        Args:
            method: HTTP method (GET, POST)
            path: API endpoint path
            json_data: Optional JSON data for request body
            timeout: Optional total request timeout in seconds

        Returns:
            HTTP response object

        Raises:
            ConnectionError: If the session is closed or the connection fails
            TransportError: If the request times out
        """
        if self._closed:
            raise ConnectionError("Transport is closed")

        self._ensure_session()

        if self._session is None:
            raise ConnectionError("Failed to create HTTP session")

        url = f"{self._url.rstrip('/')}{path}"
        headers = await self._prepare_headers()

        self._logger.debug("Sending HTTP request %s %s (json=%s)", method, url, json_data is not None)

        kwargs: dict[str, Any] = {"headers": headers}
        if timeout:
            kwargs["timeout"] = aiohttp.ClientTimeout(total=timeout, connect=self._conn_config.connect_timeout)
        if json_data is not None:
            kwargs["json"] = json_data

        try:
            return await self._session.request(method, url, **kwargs)
        except asyncio.TimeoutError:
            self._logger.error("Request timeout %s %s (timeout=%.1fs)", method, path, timeout or 0.0)
            raise TransportError(f"Request timeout for {method} {path}") from None
        except aiohttp.ClientError as e:
            self._logger.error("Request failed %s %s: %s", method, path, e)
            raise ConnectionError(f"Request failed: {e}") from e

    async def _prepare_headers(self) -> dict[str, str]:
        """
        Prepare HTTP headers for requests.

        Returns:
            Headers dictionary with authentication and tracking info
        """
        headers = await self._auth.get_auth_headers()
        headers["User-Agent"] = (
            f"voice-openai-tts-v{get_version()} python/{sys.version_info.major}.{sys.version_info.minor}"
        )

        if self._request_id:
            headers["X-Request-Id"] = self._request_id

        return headers
