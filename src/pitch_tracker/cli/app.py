import logging
from typing import Annotated

import typer

from pitch_tracker.cli._logging import configure_logging, enable_access_log
from pitch_tracker.cli._output import (
    console,
    print_classification,
    print_error,
    print_game_log,
    print_pitchers,
    print_pitches,
    print_seasons,
)
from pitch_tracker.exceptions import UpstreamUnavailableError
from pitch_tracker.ingest.stats_api import CACHE_NAMESPACE
from pitch_tracker.roster import find_pitcher
from pitch_tracker.services.container import (
    ServiceConfig,
    ServiceContainer,
    get_container,
    has_container,
    set_container,
)

logger = logging.getLogger(__name__)

app = typer.Typer(name="pitch-tracker", help="Pitching statistics from the MLB Stats API.")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable DEBUG logging")] = False,
    no_cache: Annotated[bool, typer.Option("--no-cache", help="Bypass the response cache")] = False,
    config: Annotated[str, typer.Option("--config", help="YAML config file")] = "pitch_tracker.yaml",
) -> None:
    """Pitching statistics from the MLB Stats API."""
    configure_logging(verbose=verbose)
    # A container installed beforehand (tests) is left alone.
    if not has_container():
        set_container(ServiceContainer(ServiceConfig(no_cache=no_cache, config_path=config)))
    if ctx.invoked_subcommand is None:
        raise typer.Exit()


_PitcherArg = Annotated[int, typer.Argument(help="MLBAM pitcher id", min=1)]
_SeasonArg = Annotated[int, typer.Argument(help="Season year")]
_GameArg = Annotated[int, typer.Argument(help="Game id (gamePk)", min=1)]


def _pitcher_label(pitcher_id: int) -> str:
    pitcher = find_pitcher(get_container().query_service.pitchers(), pitcher_id)
    return pitcher.display_name if pitcher is not None else str(pitcher_id)


@app.command()
def pitchers() -> None:
    """List the configured pitchers."""
    print_pitchers(get_container().query_service.pitchers())


@app.command()
def seasons(pitcher_id: _PitcherArg) -> None:
    """List the seasons a pitcher has pitching statistics for."""
    try:
        result = get_container().query_service.seasons(pitcher_id)
    except UpstreamUnavailableError as e:
        print_error(f"Failed to retrieve seasons from the MLB API: {e}")
        raise typer.Exit(code=1) from e
    print_seasons(_pitcher_label(pitcher_id), result)


@app.command()
def games(
    pitcher_id: _PitcherArg,
    season: _SeasonArg,
    enrich: Annotated[bool, typer.Option("--enrich", help="Recount pitches from each game's feed")] = False,
) -> None:
    """Show a pitcher's game log for a season with season totals."""
    service = get_container().query_service
    try:
        records = service.enriched_game_log(pitcher_id, season) if enrich else service.game_log(pitcher_id, season)
    except UpstreamUnavailableError as e:
        print_error(f"Failed to retrieve game log from the MLB API: {e}")
        raise typer.Exit(code=1) from e
    console.print(f"[bold]{_pitcher_label(pitcher_id)}[/bold]")
    print_game_log(season, records, service.season_totals(records))


@app.command()
def pitches(
    game_id: _GameArg,
    pitcher: Annotated[
        int | None, typer.Option("--pitcher", help="Only pitches thrown by this pitcher", min=1)
    ] = None,
    summary: Annotated[bool, typer.Option("--summary", help="Show speed and pitch type summary")] = False,
) -> None:
    """Show pitch-by-pitch detail for a game."""
    service = get_container().query_service
    records = service.pitches(game_id, pitcher)
    print_pitches(game_id, records)
    if summary:
        print_classification(service.classify(records))


@app.command("purge-cache")
def purge_cache(
    everything: Annotated[bool, typer.Option("--all", help="Drop every cached response")] = False,
) -> None:
    """Remove expired Stats API responses from the local cache."""
    store = get_container().cache_store
    if store is None:
        console.print("Response cache is disabled.")
        return
    if everything:
        store.invalidate(CACHE_NAMESPACE)
        console.print("Cleared all cached Stats API responses.")
        return
    console.print(f"Removed {store.purge_expired()} expired responses.")


@app.command()
def serve(
    host: Annotated[str, typer.Option("--host", help="Interface to bind")] = "127.0.0.1",
    port: Annotated[int, typer.Option("--port", help="Port to listen on")] = 5000,
) -> None:
    """Serve the pitch-detail HTTP endpoint."""
    from pitch_tracker.cli._server import create_pitch_data_app

    flask_app = create_pitch_data_app(get_container().query_service)
    enable_access_log()
    logger.info("Serving pitch data on http://%s:%d/api/pitch-data/<game_id>", host, port)
    flask_app.run(host=host, port=port)
