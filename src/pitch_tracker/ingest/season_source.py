import logging

from pitch_tracker.domain.season import Season
from pitch_tracker.ingest.payloads import PeopleStatsResponse, first_splits
from pitch_tracker.ingest.stats_api import StatsApiClient

logger = logging.getLogger(__name__)


def _parse_year(raw: object) -> int | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip())
    except ValueError:
        return None


class SeasonSource:
    """Resolves the seasons in which a pitcher recorded pitching statistics."""

    def __init__(self, api: StatsApiClient) -> None:
        self._api = api

    def fetch_seasons(self, pitcher_id: int) -> list[Season]:
        """Return the pitcher's seasons, newest first, without duplicates.

        A response without a season index yields ``[]``. Transport failures and
        non-success statuses propagate as ``UpstreamUnavailableError``.
        """
        if pitcher_id <= 0:
            raise ValueError(f"pitcher_id must be positive, got {pitcher_id}")

        data: PeopleStatsResponse = self._api.get_json(
            f"v1/people/{pitcher_id}/stats",
            {"stats": "yearByYear", "group": "pitching"},
        )
        splits = first_splits(data)
        if splits is None:
            logger.warning("No season splits in yearByYear response for pitcher %d", pitcher_id)
            return []

        years = {year for split in splits if (year := _parse_year(split.get("season"))) is not None}
        seasons = [Season(year=year) for year in sorted(years, reverse=True)]
        logger.info("Resolved %d seasons for pitcher %d", len(seasons), pitcher_id)
        return seasons
