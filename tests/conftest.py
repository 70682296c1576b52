"""Shared pytest fixtures for test modules."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from pitch_tracker.services import set_container

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def reset_service_container() -> Generator[None]:
    """Reset the global ServiceContainer after the test."""
    yield
    set_container(None)
