from dataclasses import dataclass
from enum import StrEnum


class GameResult(StrEnum):
    WIN = "W"
    LOSS = "L"
    SAVE = "S"
    NONE = "-"


@dataclass(frozen=True)
class GameLogRecord:
    """One pitcher appearance in one game.

    ``innings_pitched`` uses the fractional-innings convention where the digit
    after the point counts outs ("6.1" is six innings and one out).
    ``pitch_count`` is the provider-reported value until enrichment replaces it.
    """

    game_id: int
    game_date: str
    opponent_label: str
    innings_pitched: str
    strikeouts: int
    walks: int
    runs: int
    whip: str
    hits: int = 0
    earned_runs: int = 0
    home_runs: int = 0
    pitch_count: int = 0
    result: GameResult = GameResult.NONE
