from dataclasses import dataclass

NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class PitchRecord:
    id: str
    pitcher_id: int
    inning_label: str
    pitcher_name: str
    batter_name: str
    count_label: str
    pitch_type: str = NOT_AVAILABLE
    speed: str = NOT_AVAILABLE
    result_description: str = NOT_AVAILABLE

    @property
    def is_countable(self) -> bool:
        """False for pickoffs and other events without pitch type or speed."""
        return self.pitch_type != NOT_AVAILABLE and self.speed != NOT_AVAILABLE
