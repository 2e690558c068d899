from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

API_BASE = "https://meme-api.com/gimme"


class MemeApiError(RuntimeError):
    pass


def build_http_client(timeout: float, user_agent: str) -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=timeout, headers={"User-Agent": user_agent})


class MemeApiClient:
    def __init__(self, http: httpx.AsyncClient, base_url: str = API_BASE) -> None:
        self._http = http
        self._base_url = base_url.rstrip("/")

    async def fetch_random(self, subreddit: str) -> dict[str, Any]:
        """Fetch one random post for ``subreddit``.

        Raises MemeApiError on timeouts, network errors, non-2xx responses and
        bodies that are not a JSON object.
        """
        try:
            response = await self._http.get(f"{self._base_url}/{subreddit}")
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Meme API returned %s for r/%s: %s",
                exc.response.status_code,
                subreddit,
                exc.response.text[:200],
            )
            raise MemeApiError(f"HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise MemeApiError(str(exc) or exc.__class__.__name__) from exc
        except ValueError as exc:
            raise MemeApiError("Response is not valid JSON") from exc

        if not isinstance(data, dict):
            raise MemeApiError("Unexpected payload shape")
        return data
