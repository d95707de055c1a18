"""FPL Squad Picker command line interface.

Usage:
    # Three squads from the live FPL API with the default £100m budget
    fpl-squad-picker recommend

    # Value squad only, from a CSV snapshot, saved as a text file
    fpl-squad-picker recommend --catalog players.csv --budget 99.5 --strategy value --output-dir exports/

    # Show the active configuration
    fpl-squad-picker show-config
"""

from pathlib import Path
from typing import List, Optional

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from fpl_squad_picker.adapters.catalog_repositories import (
    CsvPlayerRepository,
    FPLApiPlayerRepository,
)
from fpl_squad_picker.config import config
from fpl_squad_picker.config.utils import create_config_template
from fpl_squad_picker.domain.models.squad import SquadDomain, Strategy
from fpl_squad_picker.domain.services.squad_set_service import SquadSetService
from fpl_squad_picker.interfaces.squad_export import (
    export_filename,
    render_squad_export,
    squad_to_dataframe,
)
from fpl_squad_picker.utils.logging import configure_logging

app = typer.Typer(
    help="FPL Squad Picker - Balanced, Value and Aggressive squad recommendations"
)
console = Console()


def _requested_strategies(strategy: str) -> List[Strategy]:
    if strategy.lower() == "all":
        return list(Strategy)
    return [Strategy(strategy.lower())]


def _squad_table(squad: SquadDomain) -> Table:
    strategy = squad.strategy
    table = Table(
        title=f"Set {strategy.set_number}: {strategy.label} ({squad.formation})"
    )
    df = squad_to_dataframe(squad)
    for column in df.columns:
        table.add_column(column)
    for row in df.itertuples(index=False):
        table.add_row(*[str(value) for value in row])
    return table


@app.command()
def recommend(
    budget: Optional[float] = typer.Option(
        None, "--budget", "-b", help="Squad budget in £m (default from config)"
    ),
    catalog: Optional[Path] = typer.Option(
        None,
        "--catalog",
        "-c",
        help="Normalized CSV catalog; the live FPL API is used when omitted",
    ),
    gameweek: Optional[int] = typer.Option(
        None, "--gameweek", "-g", help="Target gameweek shown in the export"
    ),
    strategy: str = typer.Option(
        "all",
        "--strategy",
        "-s",
        help="Strategy to show: balanced, value, aggressive or all",
    ),
    output_dir: Optional[Path] = typer.Option(
        None, "--output-dir", "-o", help="Write each squad export to this directory"
    ),
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug logging"),
):
    """Build the three strategy squads and print (or save) their exports."""
    configure_logging(
        "DEBUG" if debug else config.logging.level, config.logging.log_file
    )

    try:
        strategies = _requested_strategies(strategy)
    except ValueError:
        valid = ", ".join(["all"] + [s.value for s in Strategy])
        console.print(
            f"[red]Error: strategy must be one of {valid}, got '{strategy}'[/red]"
        )
        raise typer.Exit(1)

    if budget is None:
        budget = config.recommendation.default_budget

    if catalog is not None:
        repository = CsvPlayerRepository(catalog)
    else:
        repository = FPLApiPlayerRepository()

    console.print("[yellow]📊 Loading player catalog...[/yellow]")
    players_result = repository.get_current_players()
    if players_result.is_failure:
        console.print(f"[red]Error: {players_result.error.message}[/red]")
        raise typer.Exit(1)
    players = players_result.value

    if gameweek is None:
        gameweek = config.recommendation.default_gameweek
        if catalog is None:
            gameweek_result = repository.get_current_gameweek()
            if gameweek_result.is_success:
                gameweek = gameweek_result.value

    squads_result = SquadSetService().recommend(players, budget)
    if squads_result.is_failure:
        console.print(f"[red]Error: {squads_result.error.message}[/red]")
        raise typer.Exit(1)
    squads = squads_result.value

    console.print(
        f"[cyan]{len(players)} players | GW {gameweek} | Budget £{budget:.1f}m[/cyan]\n"
    )
    for selected_strategy in strategies:
        squad = squads[selected_strategy]
        console.print(_squad_table(squad))
        if not squad.is_complete:
            console.print(
                f"[yellow]⚠️ Only {len(squad.selected)} of 15 players fit the budget and squad rules[/yellow]"
            )
        if squad.used_fallback_formation:
            console.print(
                "[yellow]⚠️ No legal formation available - starting XI is best effort[/yellow]"
            )

        export_text = render_squad_export(squad, gameweek=gameweek)
        console.print(export_text, markup=False, highlight=False)

        if output_dir is not None:
            output_dir.mkdir(parents=True, exist_ok=True)
            path = output_dir / export_filename(selected_strategy.set_number, gameweek)
            path.write_text(export_text, encoding="utf-8")
            logger.info(f"💾 Saved {path}")
            console.print(f"[green]Saved {path}[/green]")


@app.command("show-config")
def show_config(
    template: bool = typer.Option(
        False, "--template", help="Print the default configuration instead"
    ),
):
    """Print the active configuration as JSON."""
    if template:
        console.print_json(create_config_template())
    else:
        console.print_json(config.model_dump_json())


def main():
    app()


if __name__ == "__main__":
    main()
