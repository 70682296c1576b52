from rich.console import Console
from rich.table import Table

from pitch_tracker.domain.game_log import GameLogRecord
from pitch_tracker.domain.pitch import PitchRecord
from pitch_tracker.domain.pitch_summary import PitchClassification
from pitch_tracker.domain.pitcher import Pitcher
from pitch_tracker.domain.season import Season
from pitch_tracker.domain.season_totals import SeasonTotals

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {message}")


def print_pitchers(pitchers: tuple[Pitcher, ...]) -> None:
    if not pitchers:
        console.print("No pitchers configured.")
        return
    table = Table(title="Pitchers")
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("English name")
    for p in pitchers:
        table.add_row(str(p.id), p.name, p.name_en)
    console.print(table)


def print_seasons(pitcher_label: str, seasons: list[Season]) -> None:
    if not seasons:
        console.print(f"No pitching seasons found for {pitcher_label}.")
        return
    console.print(f"Seasons for [bold]{pitcher_label}[/bold]: " + ", ".join(str(s.year) for s in seasons))


def print_game_log(season: int, records: list[GameLogRecord], totals: SeasonTotals) -> None:
    if not records:
        console.print(f"No games found for the {season} season.")
        return

    table = Table(title=f"{season} game log", show_footer=True)
    table.add_column("Date", footer="Total")
    table.add_column("Game", justify="right")
    table.add_column("Opponent", footer=f"{totals.games_count} G")
    table.add_column("Res", justify="right", footer=f"{totals.wins}-{totals.losses}")
    table.add_column("IP", justify="right", footer=totals.innings_pitched_total)
    table.add_column("H", justify="right", footer=str(totals.hits))
    table.add_column("R", justify="right", footer=str(totals.runs))
    table.add_column("ER", justify="right", footer=str(totals.earned_runs))
    table.add_column("HR", justify="right", footer=str(totals.home_runs))
    table.add_column("BB", justify="right", footer=str(totals.walks))
    table.add_column("SO", justify="right", footer=str(totals.strikeouts))
    table.add_column("NP", justify="right", footer=str(totals.pitches_thrown))
    table.add_column("WHIP", justify="right", footer=totals.whip)

    for r in records:
        table.add_row(
            r.game_date,
            str(r.game_id),
            r.opponent_label,
            r.result.value,
            r.innings_pitched,
            str(r.hits),
            str(r.runs),
            str(r.earned_runs),
            str(r.home_runs),
            str(r.walks),
            str(r.strikeouts),
            str(r.pitch_count),
            r.whip,
        )
    console.print(table)
    console.print(f"  ERA: [bold]{totals.era}[/bold]  WHIP: [bold]{totals.whip}[/bold]")


def print_pitches(game_id: int, pitches: list[PitchRecord]) -> None:
    # Non-pitch events such as pickoffs carry N/A type and speed.
    pitches = [p for p in pitches if p.is_countable]
    if not pitches:
        console.print(f"No pitch data found for game {game_id}.")
        return

    table = Table(title=f"Pitch detail (game {game_id})")
    table.add_column("Inning")
    table.add_column("Pitcher")
    table.add_column("Batter")
    table.add_column("Count")
    table.add_column("Type")
    table.add_column("Speed", justify="right")
    table.add_column("Result")
    for p in pitches:
        table.add_row(
            p.inning_label,
            p.pitcher_name,
            p.batter_name,
            p.count_label,
            p.pitch_type,
            p.speed,
            p.result_description,
        )
    console.print(table)


def print_classification(classification: PitchClassification) -> None:
    if classification.total == 0:
        console.print("No classifiable pitches.")
        return

    speeds = Table(title="Speed distribution (mph)")
    speeds.add_column("Bucket")
    speeds.add_column("Pitches", justify="right")
    for bucket in classification.speed_histogram:
        speeds.add_row(bucket.label, str(bucket.count))
    console.print(speeds)

    types = Table(title="Pitch types")
    types.add_column("Type")
    types.add_column("Pitches", justify="right")
    types.add_column("Share", justify="right")
    for entry in classification.type_frequency:
        types.add_row(entry.pitch_type, str(entry.count), f"{entry.count / classification.total:.1%}")
    console.print(types)
