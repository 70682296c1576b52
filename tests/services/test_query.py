import httpx
import pytest

from pitch_tracker.domain.game_log import GameResult
from pitch_tracker.domain.pitcher import Pitcher
from pitch_tracker.domain.season import Season
from pitch_tracker.exceptions import UpstreamUnavailableError
from pitch_tracker.ingest.game_log_source import GameLogSource
from pitch_tracker.ingest.pitch_feed_source import PitchFeedSource
from pitch_tracker.ingest.season_source import SeasonSource
from pitch_tracker.services.query import PitchingQueryService
from tests.fakes.stats_api import (
    FakeCacheStore,
    RoutingTransport,
    feed_response,
    json_response,
    make_api,
    make_event,
    make_game_split,
    make_play,
    stats_response,
)

_DARVISH = 506433
_OPPOSING = 669923


def _service(transport: RoutingTransport, cache: FakeCacheStore | None = None) -> PitchingQueryService:
    api = make_api(transport, cache)
    return PitchingQueryService(
        SeasonSource(api),
        GameLogSource(api),
        PitchFeedSource(api),
        (Pitcher(id=_DARVISH, name="ダルビッシュ有", name_en="Yu Darvish"),),
        max_workers=4,
    )


def _feed(own_pitches: int, other_pitches: int = 0) -> httpx.Response:
    plays = [make_play(0, [make_event(i) for i in range(own_pitches)], pitcher_id=_DARVISH)]
    if other_pitches:
        plays.append(
            make_play(1, [make_event(i) for i in range(other_pitches)], is_top=False, pitcher_id=_OPPOSING)
        )
    return json_response(feed_response(plays))


def _game_log_transport() -> RoutingTransport:
    splits = [
        make_game_split(game_pk=11, game_date="2024-04-02T23:10:00Z", wins=1, pitchesThrown=90),
        make_game_split(game_pk=12, game_date="2024-04-08T23:10:00Z", losses=1, pitchesThrown=85),
        make_game_split(game_pk=13, game_date="2024-04-14T23:10:00Z", pitchesThrown=99),
    ]
    return RoutingTransport(
        {
            rf"/v1/people/{_DARVISH}/stats$": json_response(stats_response(splits)),
            r"/game/11/feed/live$": _feed(93, other_pitches=20),
            r"/game/12/feed/live$": httpx.Response(503, content=b"unavailable"),
            r"/game/13/feed/live$": _feed(101),
        }
    )


class TestPitchingQueryService:
    def test_pitchers(self) -> None:
        service = _service(RoutingTransport())
        assert [p.id for p in service.pitchers()] == [_DARVISH]

    def test_seasons(self) -> None:
        transport = RoutingTransport(
            {r"/stats$": json_response(stats_response([{"season": "2023"}, {"season": "2024"}]))}
        )
        assert _service(transport).seasons(_DARVISH) == [Season(2024), Season(2023)]

    def test_game_log_keeps_reported_counts(self) -> None:
        records = _service(_game_log_transport()).game_log(_DARVISH, 2024)

        assert [r.game_id for r in records] == [13, 12, 11]
        assert [r.pitch_count for r in records] == [99, 85, 90]
        assert [r.result for r in records] == [GameResult.NONE, GameResult.LOSS, GameResult.WIN]

    def test_enriched_game_log(self) -> None:
        records = _service(_game_log_transport()).enriched_game_log(_DARVISH, 2024)

        assert [r.game_id for r in records] == [13, 12, 11]
        assert [r.pitch_count for r in records] == [101, 85, 93]

    def test_enriched_game_log_propagates_game_log_failure(self) -> None:
        transport = RoutingTransport({r"/stats$": httpx.Response(502)})

        with pytest.raises(UpstreamUnavailableError):
            _service(transport).enriched_game_log(_DARVISH, 2024)

    def test_pitches_filtered_to_pitcher(self) -> None:
        transport = RoutingTransport({r"/game/11/feed/live$": _feed(3, other_pitches=2)})
        service = _service(transport)

        assert len(service.pitches(11)) == 5
        assert {p.pitcher_id for p in service.pitches(11, _DARVISH)} == {_DARVISH}
        assert len(service.pitches(11, _OPPOSING)) == 2

    def test_pitches_for_missing_game_is_empty(self) -> None:
        assert _service(RoutingTransport()).pitches(999) == []

    def test_totals_and_classification(self) -> None:
        service = _service(_game_log_transport())
        totals = service.season_totals(service.game_log(_DARVISH, 2024))
        assert totals.games_count == 3
        assert totals.wins == 1
        assert totals.losses == 1
        assert totals.innings_pitched_total == "18.0"

        classification = service.classify(service.pitches(13))
        assert classification.total == 101

    def test_repeat_queries_served_from_cache(self) -> None:
        transport = _game_log_transport()
        service = _service(transport, FakeCacheStore())

        first = service.game_log(_DARVISH, 2024)
        second = service.game_log(_DARVISH, 2024)

        assert first == second
        assert len(transport.requests) == 1
