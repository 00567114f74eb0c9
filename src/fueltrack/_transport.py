"""HTTP transport: JSON in, JSON out, bearer auth."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Protocol

import aiohttp

from fueltrack._redact import redact_for_log
from fueltrack.config import FuelTrackConfig
from fueltrack.exceptions import FuelTrackTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by the client.

    Having a protocol here makes it easy to pass test doubles while
    keeping the production implementation (`HttpTransport`) concrete.
    """

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        payload: Any = None,
        token: str | None = None,
    ) -> Any:
        ...


def _error_detail(text: str) -> str:
    """Pick a human-readable message out of an error body."""
    try:
        body = json.loads(text)
    except json.JSONDecodeError:
        return text[:200]
    if isinstance(body, dict):
        for key in ("message", "error", "detail"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return text[:200]


class HttpTransport:
    """aiohttp-backed transport for the fuel tracking API."""

    def __init__(self, config: FuelTrackConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=config.timeout)

    def _headers(self, token: str | None) -> dict[str, str]:
        headers: dict[str, str] = {
            "accept": "application/json",
            "user-agent": self._config.user_agent,
        }
        if token:
            headers["authorization"] = f"Bearer {token}"
        return headers

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        payload: Any = None,
        token: str | None = None,
    ) -> Any:
        """Send one request and return the decoded JSON body.

        Raises
        ------
        FuelTrackTransportError
            On connection failure, timeout, a non-2xx status or a body
            that is not UTF-8 JSON.
        """
        url = self._config.endpoint_url(endpoint)
        _logger.debug("%s %s body=%s", method, url, redact_for_log(payload))

        try:
            async with self._http.request(
                method,
                url,
                json=payload,
                headers=self._headers(token),
                timeout=self._timeout,
            ) as resp:
                body = await resp.read()
                status = resp.status
        except asyncio.TimeoutError as exc:
            raise FuelTrackTransportError(
                f"Request to {endpoint} timed out after {self._config.timeout:g}s",
                endpoint=endpoint,
            ) from exc
        except aiohttp.ClientError as exc:
            raise FuelTrackTransportError(
                f"Request to {endpoint} failed: {exc}",
                endpoint=endpoint,
            ) from exc

        _logger.debug("%s %s -> HTTP %s", method, url, status)
        text = body.decode("utf-8", errors="replace")

        if not 200 <= status < 300:
            raise FuelTrackTransportError(
                f"HTTP {status} from {endpoint}: {_error_detail(text)}",
                status_code=status,
                endpoint=endpoint,
            )

        if not text.strip():
            return None

        try:
            return json.loads(body.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise FuelTrackTransportError(
                f"Invalid JSON from {endpoint}: {text[:200]}",
                status_code=status,
                endpoint=endpoint,
            ) from exc
