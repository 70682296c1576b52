from dataclasses import dataclass

BUCKET_WIDTH = 5


@dataclass(frozen=True)
class SpeedBucket:
    low: int
    count: int

    @property
    def label(self) -> str:
        return f"{self.low}-{self.low + BUCKET_WIDTH - 1}"


@dataclass(frozen=True)
class PitchTypeCount:
    pitch_type: str
    count: int


@dataclass(frozen=True)
class PitchClassification:
    speed_histogram: tuple[SpeedBucket, ...]
    type_frequency: tuple[PitchTypeCount, ...]

    @property
    def total(self) -> int:
        return sum(t.count for t in self.type_frequency)
