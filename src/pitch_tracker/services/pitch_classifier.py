from __future__ import annotations

import logging
import math
from collections import Counter
from typing import TYPE_CHECKING

from pitch_tracker.domain.pitch_summary import BUCKET_WIDTH, PitchClassification, PitchTypeCount, SpeedBucket

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pitch_tracker.domain.pitch import PitchRecord

logger = logging.getLogger(__name__)


def parse_speed(speed: str) -> float | None:
    """Numeric part of a speed label such as ``"95.3 mph"``."""
    number, _, _ = speed.strip().partition(" ")
    try:
        value = float(number)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def bucket_floor(value: float) -> int:
    return math.floor(value / BUCKET_WIDTH) * BUCKET_WIDTH


def classify_pitches(pitches: Iterable[PitchRecord]) -> PitchClassification:
    """Speed histogram in 5 mph buckets and per-type frequency.

    Events without a pitch type or speed are ignored by both tallies.
    """
    buckets: Counter[int] = Counter()
    types: Counter[str] = Counter()
    for pitch in pitches:
        if not pitch.is_countable:
            continue
        types[pitch.pitch_type] += 1
        value = parse_speed(pitch.speed)
        if value is None:
            logger.debug("Unparseable speed %r on pitch %s", pitch.speed, pitch.id)
            continue
        buckets[bucket_floor(value)] += 1

    return PitchClassification(
        speed_histogram=tuple(SpeedBucket(low=low, count=buckets[low]) for low in sorted(buckets)),
        type_frequency=tuple(PitchTypeCount(pitch_type=t, count=c) for t, c in types.items()),
    )
