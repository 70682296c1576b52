"""Typed views of the Stats API documents this package reads.

Every key is optional (``total=False``). The provider mostly omits fields, but
some nodes arrive as ``null``, so nested objects are read through ``as_dict``
and every access point declares its default. Nothing here validates shapes.
"""

from __future__ import annotations

from typing import Any, TypedDict


# --- people/{id}/stats?stats=yearByYear / gameLog ---


class _Named(TypedDict, total=False):
    id: int
    name: str
    fullName: str
    link: str


class _PitchingStat(TypedDict, total=False):
    inningsPitched: str
    wins: int
    losses: int
    saves: int
    strikeOuts: int
    baseOnBalls: int
    runs: int
    whip: str
    hits: int
    earnedRuns: int
    homeRuns: int
    pitchesThrown: int


class _Game(TypedDict, total=False):
    gamePk: int
    gameDate: str
    season: str


class StatSplit(TypedDict, total=False):
    season: str
    game: _Game
    opponent: _Named
    stat: _PitchingStat
    isHome: bool
    isWin: bool
    isLoss: bool
    isSave: bool


class _StatGroup(TypedDict, total=False):
    splits: list[StatSplit]


class PeopleStatsResponse(TypedDict, total=False):
    stats: list[_StatGroup]


# --- game/{gamePk}/feed/live ---


class _PitchTypeDetail(TypedDict, total=False):
    code: str
    description: str


class _EventDetails(TypedDict, total=False):
    type: _PitchTypeDetail
    call: _PitchTypeDetail
    description: str


class _PitchData(TypedDict, total=False):
    startSpeed: float


class _Count(TypedDict, total=False):
    balls: int
    strikes: int
    outs: int


class PlayEvent(TypedDict, total=False):
    details: _EventDetails
    pitchData: _PitchData
    count: _Count
    index: int


class _About(TypedDict, total=False):
    atBatIndex: int
    inning: int
    isTopInning: bool


class _Matchup(TypedDict, total=False):
    batter: _Named
    pitcher: _Named


class Play(TypedDict, total=False):
    about: _About
    matchup: _Matchup
    playEvents: list[PlayEvent]


class _Plays(TypedDict, total=False):
    allPlays: list[Play]


class _LiveData(TypedDict, total=False):
    plays: _Plays


class GameFeedResponse(TypedDict, total=False):
    gamePk: int
    liveData: _LiveData


def as_dict(value: Any) -> dict[str, Any]:
    """``value`` when it is a JSON object, otherwise an empty one."""
    return value if isinstance(value, dict) else {}


def first_splits(data: PeopleStatsResponse | None) -> list[StatSplit] | None:
    """Return ``stats[0].splits`` or None when any level of that path is missing."""
    if not isinstance(data, dict):
        return None
    stats = data.get("stats")
    if not stats or not isinstance(stats, list):
        return None
    splits = stats[0].get("splits") if isinstance(stats[0], dict) else None
    if not isinstance(splits, list):
        return None
    return splits


def all_plays(data: GameFeedResponse | None) -> list[Play] | None:
    """Return ``liveData.plays.allPlays`` or None when any level is missing."""
    if not isinstance(data, dict):
        return None
    plays = as_dict(as_dict(data.get("liveData")).get("plays")).get("allPlays")
    if not isinstance(plays, list):
        return None
    return plays
