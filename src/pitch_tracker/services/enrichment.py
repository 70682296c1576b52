"""Replaces provider-reported pitch counts with counts taken from each game's feed."""

from __future__ import annotations

import dataclasses
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pitch_tracker.domain.game_log import GameLogRecord
    from pitch_tracker.domain.pitch import PitchRecord

logger = logging.getLogger(__name__)


class PitchLoader(Protocol):
    def load_pitches(self, game_id: int) -> list[PitchRecord]: ...


def count_pitches_thrown(pitches: Sequence[PitchRecord], pitcher_id: int) -> int:
    return sum(1 for p in pitches if p.pitcher_id == pitcher_id and p.is_countable)


def _enrich_one(loader: PitchLoader, pitcher_id: int, record: GameLogRecord) -> GameLogRecord:
    try:
        pitches = loader.load_pitches(record.game_id)
    except Exception:
        logger.warning(
            "Keeping reported pitch count %d for game %d",
            record.pitch_count,
            record.game_id,
            exc_info=True,
        )
        return record
    return dataclasses.replace(record, pitch_count=count_pitches_thrown(pitches, pitcher_id))


def enrich_pitch_counts(
    pitcher_id: int,
    records: Sequence[GameLogRecord],
    loader: PitchLoader,
    *,
    max_workers: int = 8,
) -> list[GameLogRecord]:
    """Return ``records`` with each ``pitch_count`` recomputed from the game feed.

    Games are fetched concurrently. A game whose feed cannot be loaded keeps its
    original record; the result always has the input's length and order.
    """
    if not records:
        return []
    with ThreadPoolExecutor(max_workers=max(1, min(max_workers, len(records)))) as executor:
        futures = [executor.submit(_enrich_one, loader, pitcher_id, record) for record in records]
        enriched = [f.result() for f in futures]

    changed = sum(1 for before, after in zip(records, enriched, strict=True) if before is not after)
    logger.info("Enriched pitch counts for %d of %d games (pitcher %d)", changed, len(records), pitcher_id)
    return enriched
