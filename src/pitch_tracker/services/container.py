"""Centralized service container for CLI and server dependency injection."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cached_property
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx
    from config import ConfigurationSet

    from pitch_tracker.cache.protocol import CacheStore
    from pitch_tracker.ingest.stats_api import StatsApiClient
    from pitch_tracker.services.query import PitchingQueryService

logger = logging.getLogger(__name__)


@dataclass
class ServiceConfig:
    """Configuration options for service creation.

    Attributes:
        no_cache: Disable the response cache.
        config_path: YAML file layered over the built-in defaults.
    """

    no_cache: bool = False
    config_path: str = "pitch_tracker.yaml"


class ServiceContainer:
    """Lazily-initialized container for service dependencies.

    Supports explicit injection for testing via constructor parameters.
    When dependencies are not provided, they are created on first access
    using the default implementations.
    """

    def __init__(
        self,
        config: ServiceConfig | None = None,
        *,
        http_client: httpx.Client | None = None,
        cache_store: CacheStore | None = None,
        query_service: PitchingQueryService | None = None,
    ) -> None:
        self._config = config or ServiceConfig()
        self._http_client = http_client
        self._cache_store = cache_store
        self._query_service = query_service

    @property
    def config(self) -> ServiceConfig:
        return self._config

    @cached_property
    def app_config(self) -> ConfigurationSet:
        from pitch_tracker.config import create_config

        return create_config(self._config.config_path, no_cache=self._config.no_cache)

    @cached_property
    def cache_store(self) -> CacheStore | None:
        """Response cache, or None when caching is disabled."""
        from pitch_tracker.config import cache_enabled

        if self._cache_store is not None:
            return self._cache_store
        if self._config.no_cache or not cache_enabled(self.app_config):
            logger.debug("Response cache disabled")
            return None
        from pitch_tracker.cache.sqlite_store import SqliteCacheStore

        return SqliteCacheStore(Path(str(self.app_config["cache.db_path"])).expanduser())

    @cached_property
    def http_client(self) -> httpx.Client:
        if self._http_client is not None:
            return self._http_client
        import httpx

        timeout = float(str(self.app_config["api.timeout"]))
        connect = float(str(self.app_config["api.connect_timeout"]))
        return httpx.Client(timeout=httpx.Timeout(timeout, connect=connect))

    @cached_property
    def stats_api(self) -> StatsApiClient:
        from pitch_tracker.ingest.stats_api import StatsApiClient

        return StatsApiClient(
            self.http_client,
            self.cache_store,
            base_url=str(self.app_config["api.base_url"]),
            ttl_seconds=int(str(self.app_config["cache.ttl_seconds"])),
        )

    @cached_property
    def query_service(self) -> PitchingQueryService:
        if self._query_service is not None:
            return self._query_service
        from pitch_tracker.config import load_pitchers
        from pitch_tracker.ingest.game_log_source import GameLogSource
        from pitch_tracker.ingest.pitch_feed_source import PitchFeedSource
        from pitch_tracker.ingest.season_source import SeasonSource
        from pitch_tracker.services.query import PitchingQueryService

        return PitchingQueryService(
            SeasonSource(self.stats_api),
            GameLogSource(self.stats_api),
            PitchFeedSource(self.stats_api),
            load_pitchers(self.app_config),
            max_workers=int(str(self.app_config["enrichment.max_workers"])),
        )


_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the global service container, creating one if needed."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def has_container() -> bool:
    """Whether a global container has been created or installed."""
    return _container is not None


def set_container(container: ServiceContainer | None) -> None:
    """Set or reset the global service container.

    Pass None to reset, which will cause get_container() to create
    a fresh container on next access.
    """
    global _container
    _container = container
