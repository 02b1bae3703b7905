"""Static API configuration, built once at startup."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://v3.football.api-sports.io"


@dataclass(frozen=True)
class ApiConfig:
    """Base URL and credentials for API-Football."""
    api_key: str
    base_url: str = DEFAULT_BASE_URL

    @property
    def headers(self) -> dict[str, str]:
        return {
            "x-rapidapi-key": self.api_key,
            "Accept": "application/json",
        }

    @classmethod
    def from_env(cls) -> ApiConfig:
        """Read ``API_SPORTS_KEY`` and optional ``API_SPORTS_BASE_URL``."""
        key = os.environ.get("API_SPORTS_KEY", "")
        if not key:
            raise ValueError(
                "API_SPORTS_KEY environment variable is required. "
                "Get a key at https://dashboard.api-football.com/"
            )
        base_url = os.environ.get("API_SPORTS_BASE_URL", DEFAULT_BASE_URL)
        return cls(api_key=key, base_url=base_url.rstrip("/"))
