"""Storage contract for raw Stats API response bodies."""

from __future__ import annotations

from typing import Protocol


class CacheStore(Protocol):
    """Text bodies keyed by ``(namespace, key)``, each with its own expiry.

    The Stats API client stores one entry per request URL under the
    ``"statsapi"`` namespace.
    """

    def get(self, namespace: str, key: str) -> str | None:
        """Return the stored body, or None when absent or expired."""
        ...

    def put(self, namespace: str, key: str, value: str, ttl_seconds: int) -> None: ...

    def invalidate(self, namespace: str, key: str | None = None) -> None:
        """Drop one entry, or every entry in ``namespace`` when ``key`` is None."""
        ...

    def purge_expired(self) -> int:
        """Delete expired entries and return how many were removed."""
        ...
