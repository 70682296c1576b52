import logging

from pitch_tracker.domain.game_log import GameLogRecord, GameResult
from pitch_tracker.ingest.payloads import PeopleStatsResponse, StatSplit, as_dict, first_splits
from pitch_tracker.ingest.stats_api import StatsApiClient

logger = logging.getLogger(__name__)

_DATE_LENGTH = len("YYYY-MM-DD")


def _indicates_one(count: object, flag: object) -> bool:
    # The count wins; the split-level flag only fills in when the count is missing.
    if isinstance(count, int) and not isinstance(count, bool):
        return count == 1
    return flag is True


def derive_result(split: StatSplit) -> GameResult:
    """Classify the appearance as a win, loss, save or none, in that priority."""
    stat = as_dict(split.get("stat"))
    if _indicates_one(stat.get("wins"), split.get("isWin")):
        return GameResult.WIN
    if _indicates_one(stat.get("losses"), split.get("isLoss")):
        return GameResult.LOSS
    if _indicates_one(stat.get("saves"), split.get("isSave")):
        return GameResult.SAVE
    return GameResult.NONE


def truncate_game_date(raw: object) -> str:
    """Cut an ISO timestamp down to ``YYYY-MM-DD``; shorter values pass through."""
    if not isinstance(raw, str):
        return ""
    return raw[:_DATE_LENGTH] if len(raw) >= _DATE_LENGTH else raw


def split_to_record(split: StatSplit, position: int) -> GameLogRecord:
    stat = as_dict(split.get("stat"))
    game = as_dict(split.get("game"))
    opponent = as_dict(split.get("opponent"))

    game_pk = game.get("gamePk")
    game_id = game_pk if isinstance(game_pk, int) and not isinstance(game_pk, bool) else position
    prefix = "vs" if split.get("isHome") else "@"

    return GameLogRecord(
        game_id=game_id,
        game_date=truncate_game_date(game.get("gameDate")),
        opponent_label=f"{prefix} {opponent.get('name', '')}",
        innings_pitched=stat.get("inningsPitched", "0.0"),
        strikeouts=stat.get("strikeOuts", 0),
        walks=stat.get("baseOnBalls", 0),
        runs=stat.get("runs", 0),
        whip=stat.get("whip", "0.00"),
        hits=stat.get("hits", 0),
        earned_runs=stat.get("earnedRuns", 0),
        home_runs=stat.get("homeRuns", 0),
        pitch_count=stat.get("pitchesThrown", 0),
        result=derive_result(split),
    )


def sort_by_date_desc(records: list[GameLogRecord]) -> list[GameLogRecord]:
    """Newest first. Plain string ordering, valid for zero-padded ``YYYY-MM-DD``."""
    return sorted(records, key=lambda r: r.game_date, reverse=True)


class GameLogSource:
    """Normalizes a pitcher's per-season game log into ``GameLogRecord`` rows."""

    def __init__(self, api: StatsApiClient) -> None:
        self._api = api

    def fetch_game_log(self, pitcher_id: int, season: int) -> list[GameLogRecord]:
        """Return one record per game, newest first.

        A response without splits yields ``[]``. Transport failures and non-success
        statuses propagate as ``UpstreamUnavailableError``.
        """
        data: PeopleStatsResponse = self._api.get_json(
            f"v1/people/{pitcher_id}/stats",
            {"stats": "gameLog", "season": season, "group": "pitching"},
        )
        splits = first_splits(data)
        if splits is None:
            logger.warning("No game log splits for pitcher %d, season %d", pitcher_id, season)
            return []

        records: list[GameLogRecord] = []
        seen: set[int] = set()
        for position, split in enumerate(splits):
            if not isinstance(split, dict):
                continue
            record = split_to_record(split, position)
            if record.game_id in seen:
                logger.warning("Dropping duplicate game %d in game log for pitcher %d", record.game_id, pitcher_id)
                continue
            seen.add(record.game_id)
            records.append(record)

        logger.info("Fetched %d game log rows for pitcher %d, season %d", len(records), pitcher_id, season)
        return sort_by_date_desc(records)
