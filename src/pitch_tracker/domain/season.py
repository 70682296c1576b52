from dataclasses import dataclass


@dataclass(frozen=True)
class Season:
    year: int
