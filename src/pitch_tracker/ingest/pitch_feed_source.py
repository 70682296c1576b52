"""Flattens a game's live play-by-play feed into per-pitch records."""

import logging

from pitch_tracker.domain.pitch import NOT_AVAILABLE, PitchRecord
from pitch_tracker.exceptions import GameFeedUnavailableError, UpstreamUnavailableError
from pitch_tracker.ingest.payloads import GameFeedResponse, Play, PlayEvent, all_plays, as_dict
from pitch_tracker.ingest.stats_api import StatsApiClient

logger = logging.getLogger(__name__)

NOT_FOUND = "not found"


def format_pitch_type(event: PlayEvent) -> str:
    pitch_type = as_dict(as_dict(event.get("details")).get("type"))
    description = pitch_type.get("description")
    if not description or not isinstance(description, str):
        return NOT_AVAILABLE
    code = pitch_type.get("code")
    return f"{description} ({code})" if code else description


def format_speed(event: PlayEvent) -> str:
    start_speed = as_dict(event.get("pitchData")).get("startSpeed")
    if isinstance(start_speed, bool) or not isinstance(start_speed, (int, float)) or not start_speed:
        return NOT_AVAILABLE
    return f"{start_speed:.1f} mph"


def event_to_record(play: Play, event: PlayEvent) -> PitchRecord | None:
    """Build a record for one play event, or None when its context is missing."""
    count = as_dict(event.get("count"))
    about = as_dict(play.get("about"))
    matchup = as_dict(play.get("matchup"))
    if not count or not about or not matchup:
        return None

    pitcher = as_dict(matchup.get("pitcher"))
    batter = as_dict(matchup.get("batter"))
    half = "Top" if about.get("isTopInning") else "Bot"
    pitcher_id = pitcher.get("id")

    return PitchRecord(
        id=f"{about.get('atBatIndex')}-{event.get('index')}",
        pitcher_id=pitcher_id if isinstance(pitcher_id, int) else 0,
        inning_label=f"{half} {about.get('inning')}",
        pitcher_name=pitcher.get("fullName") or "",
        batter_name=batter.get("fullName") or "",
        count_label=f"B:{count.get('balls', 0)} S:{count.get('strikes', 0)} O:{count.get('outs', 0)}",
        pitch_type=format_pitch_type(event),
        speed=format_speed(event),
        result_description=as_dict(event.get("details")).get("description") or NOT_AVAILABLE,
    )


def flatten_feed(data: GameFeedResponse) -> list[PitchRecord]:
    """Every retained event of every play, in feed order.

    Plays and events that are not JSON objects are skipped.
    """
    plays = all_plays(data)
    if plays is None:
        return []
    records: list[PitchRecord] = []
    for play in plays:
        if not isinstance(play, dict):
            continue
        events = play.get("playEvents")
        if not isinstance(events, list):
            continue
        for event in events:
            if not isinstance(event, dict):
                continue
            record = event_to_record(play, event)
            if record is not None:
                records.append(record)
    return records


def _failure_reason(error: UpstreamUnavailableError) -> str:
    if error.status_code is None:
        return "transport error"
    if error.status_code == 404:
        return NOT_FOUND
    if error.status_code >= 400:
        return f"status {error.status_code}"
    return "invalid body"


class PitchFeedSource:
    def __init__(self, api: StatsApiClient) -> None:
        self._api = api

    def load_pitches(self, game_id: int) -> list[PitchRecord]:
        """Load the game's pitch records.

        Raises:
            GameFeedUnavailableError: when the feed is missing (404), the provider
                answers with any other error status, or the request fails.
        """
        try:
            data: GameFeedResponse = self._api.get_json(f"v1.1/game/{game_id}/feed/live")
        except UpstreamUnavailableError as e:
            raise GameFeedUnavailableError(game_id, _failure_reason(e), cause=e) from e

        if all_plays(data) is None:
            logger.warning("No play data in feed for game %d", game_id)
            return []
        records = flatten_feed(data)
        logger.debug("Extracted %d pitch events for game %d", len(records), game_id)
        return records

    def fetch_pitches(self, game_id: int) -> list[PitchRecord]:
        """Best-effort variant of ``load_pitches``: an unavailable feed is an empty list."""
        try:
            return self.load_pitches(game_id)
        except GameFeedUnavailableError as e:
            if e.reason == NOT_FOUND:
                logger.warning("No pitch data found for game %d", game_id)
            else:
                logger.error("%s", e)
            return []
