"""Query services and their dependency wiring."""

from pitch_tracker.services.container import (
    ServiceConfig,
    ServiceContainer,
    get_container,
    has_container,
    set_container,
)
from pitch_tracker.services.query import PitchingQueryService

__all__ = [
    "PitchingQueryService",
    "ServiceConfig",
    "ServiceContainer",
    "get_container",
    "has_container",
    "set_container",
]
