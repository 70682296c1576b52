"""Query surface used by the CLI and the HTTP endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pitch_tracker.services.enrichment import enrich_pitch_counts
from pitch_tracker.services.pitch_classifier import classify_pitches
from pitch_tracker.services.season_totals import calculate_season_totals

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pitch_tracker.domain.game_log import GameLogRecord
    from pitch_tracker.domain.pitch import PitchRecord
    from pitch_tracker.domain.pitch_summary import PitchClassification
    from pitch_tracker.domain.pitcher import Pitcher
    from pitch_tracker.domain.season import Season
    from pitch_tracker.domain.season_totals import SeasonTotals
    from pitch_tracker.ingest.game_log_source import GameLogSource
    from pitch_tracker.ingest.pitch_feed_source import PitchFeedSource
    from pitch_tracker.ingest.season_source import SeasonSource


class PitchingQueryService:
    def __init__(
        self,
        season_source: SeasonSource,
        game_log_source: GameLogSource,
        pitch_feed_source: PitchFeedSource,
        pitchers: tuple[Pitcher, ...] = (),
        *,
        max_workers: int = 8,
    ) -> None:
        self._season_source = season_source
        self._game_log_source = game_log_source
        self._pitch_feed_source = pitch_feed_source
        self._pitchers = pitchers
        self._max_workers = max_workers

    def pitchers(self) -> tuple[Pitcher, ...]:
        return self._pitchers

    def seasons(self, pitcher_id: int) -> list[Season]:
        return self._season_source.fetch_seasons(pitcher_id)

    def game_log(self, pitcher_id: int, season: int) -> list[GameLogRecord]:
        return self._game_log_source.fetch_game_log(pitcher_id, season)

    def enriched_game_log(self, pitcher_id: int, season: int) -> list[GameLogRecord]:
        records = self.game_log(pitcher_id, season)
        return enrich_pitch_counts(pitcher_id, records, self._pitch_feed_source, max_workers=self._max_workers)

    def pitches(self, game_id: int, pitcher_id: int | None = None) -> list[PitchRecord]:
        records = self._pitch_feed_source.fetch_pitches(game_id)
        if pitcher_id is None:
            return records
        return [r for r in records if r.pitcher_id == pitcher_id]

    def season_totals(self, records: Sequence[GameLogRecord]) -> SeasonTotals:
        return calculate_season_totals(records)

    def classify(self, pitches: Sequence[PitchRecord]) -> PitchClassification:
        return classify_pitches(pitches)
