from dataclasses import dataclass


@dataclass(frozen=True)
class SeasonTotals:
    games_count: int
    wins: int
    losses: int
    innings_pitched_total: str
    era: str
    whip: str
    strikeouts: int
    walks: int
    runs: int
    hits: int
    earned_runs: int
    home_runs: int
    pitches_thrown: int
