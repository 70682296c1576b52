"""HTTP access to the MLB Stats API with an optional response cache.

Every request is a single GET; there is no retry loop. Successful JSON bodies
are stored in the injected ``CacheStore`` keyed by the request URL so back-to-back
calls inside the TTL window are answered locally.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import httpx

from pitch_tracker.exceptions import UpstreamUnavailableError

if TYPE_CHECKING:
    from pitch_tracker.cache.protocol import CacheStore

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://statsapi.mlb.com/api"
CACHE_NAMESPACE = "statsapi"


class StatsApiClient:
    def __init__(
        self,
        client: httpx.Client | None = None,
        cache: CacheStore | None = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        ttl_seconds: int = 3600,
    ) -> None:
        self._client = client or httpx.Client(timeout=httpx.Timeout(10.0, connect=5.0))
        self._cache = cache
        self._base_url = base_url.rstrip("/")
        self._ttl_seconds = ttl_seconds

    def url_for(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    def get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """GET ``path`` and return the decoded JSON body.

        Raises:
            UpstreamUnavailableError: on a failed request, a non-2xx status, or a
                body that is not valid JSON. ``status_code`` is set when the server
                answered.
        """
        url = self.url_for(path)
        cache_key = str(httpx.URL(url, params=params or {}))

        if self._cache is not None:
            cached = self._cache.get(CACHE_NAMESPACE, cache_key)
            if cached is not None:
                try:
                    data = json.loads(cached)
                except ValueError:
                    logger.warning("Discarding undecodable cache entry for %s", cache_key)
                    self._cache.invalidate(CACHE_NAMESPACE, cache_key)
                else:
                    logger.debug("Cache hit for %s", cache_key)
                    return data

        logger.debug("GET %s params=%s", url, params)
        try:
            response = self._client.get(url, params=params)
        except httpx.HTTPError as e:
            raise UpstreamUnavailableError(f"Request to {url} failed", url=url, cause=e) from e

        logger.debug("Stats API responded %d for %s", response.status_code, url)
        if response.is_error:
            raise UpstreamUnavailableError(
                f"Stats API returned {response.status_code} {response.reason_phrase}",
                url=url,
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamUnavailableError(
                f"Stats API returned an undecodable body for {url}",
                url=url,
                status_code=response.status_code,
                cause=e,
            ) from e

        if self._cache is not None:
            self._cache.put(CACHE_NAMESPACE, cache_key, response.text, self._ttl_seconds)
        return data
