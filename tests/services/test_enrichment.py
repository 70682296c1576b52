import threading

from pitch_tracker.domain.game_log import GameLogRecord
from pitch_tracker.domain.pitch import NOT_AVAILABLE, PitchRecord
from pitch_tracker.exceptions import GameFeedUnavailableError
from pitch_tracker.services.enrichment import count_pitches_thrown, enrich_pitch_counts

_PITCHER = 506433
_OTHER = 592450


def _record(game_id: int, pitch_count: int = 90) -> GameLogRecord:
    return GameLogRecord(
        game_id=game_id,
        game_date=f"2024-05-{game_id:02d}",
        opponent_label="vs Seattle Mariners",
        innings_pitched="6.0",
        strikeouts=5,
        walks=1,
        runs=2,
        whip="1.00",
        pitch_count=pitch_count,
    )


def _pitch(n: int, pitcher_id: int = _PITCHER, pitch_type: str = "Slider (SL)", speed: str = "84.1 mph") -> PitchRecord:
    return PitchRecord(
        id=f"{n}-0",
        pitcher_id=pitcher_id,
        inning_label="Top 1",
        pitcher_name="Yu Darvish",
        batter_name="Cal Raleigh",
        count_label="B:0 S:0 O:0",
        pitch_type=pitch_type,
        speed=speed,
        result_description="Ball",
    )


class FakePitchLoader:
    def __init__(self, outcomes: dict[int, list[PitchRecord] | Exception]) -> None:
        self._outcomes = outcomes
        self.calls: list[int] = []
        self._lock = threading.Lock()

    def load_pitches(self, game_id: int) -> list[PitchRecord]:
        with self._lock:
            self.calls.append(game_id)
        outcome = self._outcomes[game_id]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class TestCountPitchesThrown:
    def test_counts_only_matching_countable_pitches(self) -> None:
        pitches = [
            _pitch(0),
            _pitch(1),
            _pitch(2, pitcher_id=_OTHER),
            _pitch(3, pitch_type=NOT_AVAILABLE),
            _pitch(4, speed=NOT_AVAILABLE),
        ]
        assert count_pitches_thrown(pitches, _PITCHER) == 2


class TestEnrichPitchCounts:
    def test_overwrites_pitch_counts(self) -> None:
        loader = FakePitchLoader({1: [_pitch(i) for i in range(101)], 2: [_pitch(i) for i in range(88)]})

        enriched = enrich_pitch_counts(_PITCHER, [_record(1), _record(2)], loader)

        assert [r.pitch_count for r in enriched] == [101, 88]

    def test_middle_failure_keeps_original_count(self) -> None:
        records = [_record(1, 90), _record(2, 77), _record(3, 95)]
        loader = FakePitchLoader(
            {
                1: [_pitch(i) for i in range(97)],
                2: GameFeedUnavailableError(2, "status 503"),
                3: [_pitch(i) for i in range(102)],
            }
        )

        enriched = enrich_pitch_counts(_PITCHER, records, loader)

        assert len(enriched) == 3
        assert [r.game_id for r in enriched] == [1, 2, 3]
        assert enriched[0].pitch_count == 97
        assert enriched[1].pitch_count == 77
        assert enriched[2].pitch_count == 102

    def test_unexpected_exception_is_contained(self) -> None:
        loader = FakePitchLoader({1: RuntimeError("boom"), 2: [_pitch(0)]})

        enriched = enrich_pitch_counts(_PITCHER, [_record(1, 80), _record(2, 70)], loader)

        assert [r.pitch_count for r in enriched] == [80, 1]

    def test_excludes_other_pitchers_and_sentinels(self) -> None:
        pitches = [_pitch(0), _pitch(1, pitcher_id=_OTHER), _pitch(2, speed=NOT_AVAILABLE)]
        loader = FakePitchLoader({1: pitches})

        [enriched] = enrich_pitch_counts(_PITCHER, [_record(1)], loader)

        assert enriched.pitch_count == 1

    def test_preserves_order_with_many_workers(self) -> None:
        records = [_record(i) for i in range(1, 21)]
        loader = FakePitchLoader({i: [_pitch(n) for n in range(i)] for i in range(1, 21)})

        enriched = enrich_pitch_counts(_PITCHER, records, loader, max_workers=6)

        assert [r.game_id for r in enriched] == list(range(1, 21))
        assert [r.pitch_count for r in enriched] == list(range(1, 21))
        assert sorted(loader.calls) == list(range(1, 21))

    def test_input_records_are_not_mutated(self) -> None:
        records = [_record(1, 90)]
        enrich_pitch_counts(_PITCHER, records, FakePitchLoader({1: []}))
        assert records[0].pitch_count == 90

    def test_empty_input(self) -> None:
        assert enrich_pitch_counts(_PITCHER, [], FakePitchLoader({})) == []
