from pitch_tracker.domain.pitcher import Pitcher

# MLBAM ids
DEFAULT_PITCHERS: tuple[Pitcher, ...] = (
    Pitcher(id=506433, name="ダルビッシュ有", name_en="Yu Darvish"),
    Pitcher(id=579328, name="菊池雄星", name_en="Yusei Kikuchi"),
    Pitcher(id=673540, name="千賀滉大", name_en="Kodai Senga"),
    Pitcher(id=684007, name="今永昇太", name_en="Shota Imanaga"),
    Pitcher(id=660271, name="大谷翔平", name_en="Shohei Ohtani"),
)


def find_pitcher(pitchers: tuple[Pitcher, ...], pitcher_id: int) -> Pitcher | None:
    for pitcher in pitchers:
        if pitcher.id == pitcher_id:
            return pitcher
    return None
