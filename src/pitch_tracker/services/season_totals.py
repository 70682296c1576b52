"""Season aggregates over game log rows.

Innings use the fractional-innings convention: the digit after the point is a
count of outs, so "6.1" is 6 1/3 innings and "6.3" is not a valid value.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from pitch_tracker.domain.game_log import GameResult
from pitch_tracker.domain.season_totals import SeasonTotals

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pitch_tracker.domain.game_log import GameLogRecord

_OUTS_FRACTION = {"0": 0.0, "1": 1 / 3, "2": 2 / 3}


def parse_innings(value: str) -> float:
    """Convert ``"W.F"`` to real innings. Malformed input counts as zero."""
    whole, _, outs = value.strip().partition(".")
    if not whole.isdecimal():
        return 0.0
    return int(whole) + _OUTS_FRACTION.get(outs, 0.0)


def format_innings(total: float) -> str:
    """Render real innings back to ``"whole.outs"``."""
    whole = math.floor(total)
    outs = round((total - whole) * 3)
    if outs == 3:
        whole, outs = whole + 1, 0
    return f"{whole}.{outs}"


def _per_inning_rate(numerator: float, innings: float, scale: float = 1.0) -> str:
    if innings == 0:
        return "0.00"
    return f"{numerator / innings * scale:.2f}"


def calculate_season_totals(records: Sequence[GameLogRecord]) -> SeasonTotals:
    innings = sum(parse_innings(r.innings_pitched) for r in records)
    earned_runs = sum(r.earned_runs for r in records)
    walks = sum(r.walks for r in records)
    hits = sum(r.hits for r in records)

    return SeasonTotals(
        games_count=len(records),
        wins=sum(1 for r in records if r.result is GameResult.WIN),
        losses=sum(1 for r in records if r.result is GameResult.LOSS),
        innings_pitched_total=format_innings(innings),
        era=_per_inning_rate(earned_runs, innings, scale=9),
        whip=_per_inning_rate(walks + hits, innings),
        strikeouts=sum(r.strikeouts for r in records),
        walks=walks,
        runs=sum(r.runs for r in records),
        hits=hits,
        earned_runs=earned_runs,
        home_runs=sum(r.home_runs for r in records),
        pitches_thrown=sum(r.pitch_count for r in records),
    )
