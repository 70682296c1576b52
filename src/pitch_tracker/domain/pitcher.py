from dataclasses import dataclass


@dataclass(frozen=True)
class Pitcher:
    id: int
    name: str
    name_en: str

    @property
    def display_name(self) -> str:
        if self.name == self.name_en:
            return self.name
        return f"{self.name} ({self.name_en})"
