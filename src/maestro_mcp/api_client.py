"""API-Football v3 client.

Every request goes through ``ApiClient.fetch``, which never raises: transport,
decode and HTTP-status failures all come back as a ``Failure`` carrying a
string.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from maestro_mcp.config import ApiConfig
from maestro_mcp.result import Result, failure, success

logger = logging.getLogger(__name__)

Scalar = str | int | float | bool


def sanitize(params: Mapping[str, Scalar | None]) -> dict[str, Scalar]:
    """Drop parameters whose value is ``None``.

    Falsy values such as ``0`` or ``False`` are real values and are kept.
    """
    return {key: value for key, value in params.items() if value is not None}


class ApiClient:
    """Issue single GET requests against API-Football."""

    def __init__(
        self,
        config: ApiConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._config = config
        self._transport = transport

    @property
    def config(self) -> ApiConfig:
        return self._config

    async def fetch(
        self, path: str, params: Mapping[str, Scalar | None]
    ) -> Result[Any, str]:
        """GET ``path`` with sanitized query params and decode the JSON body.

        The decoded payload is returned as-is; its shape is not validated.
        """
        url = f"{self._config.base_url}{path}"
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                resp = await client.get(
                    url,
                    params=sanitize(params),
                    headers=self._config.headers,
                )
            if not resp.is_success:
                logger.warning("GET %s returned HTTP %d", path, resp.status_code)
                return failure(f"HTTP error! status: {resp.status_code}")
            return success(resp.json())
        except (
            httpx.HTTPError, httpx.InvalidURL, httpx.StreamError, ValueError
        ) as exc:
            logger.error("Error making request to %s: %s", path, exc)
            return failure(str(exc) or type(exc).__name__)
