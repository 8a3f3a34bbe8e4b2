"""Command line interface for sprout."""

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich import print
from rich.console import Console
from rich.table import Table

from sprout import __version__
from sprout.categories import DEFAULT_CATEGORIES, CategoryRegistry
from sprout.git import BranchSource
from sprout.logging_config import configure_logging
from sprout.naming import synthesize
from sprout.runner import RealTuiRunner, TuiRunner
from sprout.session import Session
from sprout.tui import SproutApp

app = typer.Typer(help="Create conventionally named git branches")
console = Console()
tui_runner: TuiRunner = RealTuiRunner()


@dataclass(frozen=True)
class Settings:
    """Options shared by all commands."""

    path: Path
    categories: CategoryRegistry = DEFAULT_CATEGORIES


def version_callback(value: bool) -> None:
    if value:
        print(f"sprout {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    path: Annotated[Path, typer.Option(help="Path to git repository", envvar="SPROUT_PATH")] = Path("."),
    log_level: Annotated[
        str, typer.Option(help="Console log level (DEBUG, INFO, WARNING, ERROR)", envvar="SPROUT_LOG_LEVEL")
    ] = "WARNING",
    log_file: Annotated[
        Optional[Path], typer.Option(help="Also write debug logs to this file", envvar="SPROUT_LOG_FILE")
    ] = None,
    version: Annotated[
        bool, typer.Option("--version", callback=version_callback, is_eager=True, help="Show version and exit")
    ] = False,
) -> None:
    """Create conventionally named git branches. Runs `new` when no command is given."""
    configure_logging(log_level, log_file)
    ctx.obj = Settings(path=path)
    if ctx.invoked_subcommand is None:
        ctx.invoke(new, ctx)


@app.command()
def new(ctx: typer.Context) -> None:
    """Pick a starting branch and a category, then create and switch to a new branch."""
    settings: Settings = ctx.obj
    source = BranchSource(settings.path)
    session = Session(settings.categories, source.create_and_switch)

    try:
        created = tui_runner.run(SproutApp(session, source))
    except Exception as err:
        print(f"[red]Error running program:[/red] {err}")
        raise typer.Exit(code=1) from err

    if created:
        console.print(f"\n✅ Created and switched to branch: [cyan]{created}[/cyan]")


@app.command()
def categories(ctx: typer.Context) -> None:
    """List the categories available for new branches."""
    settings: Settings = ctx.obj
    table = Table(
        title="Branch Categories",
        show_header=True,
        header_style="bold",
        title_style="bold blue",
        show_edge=True,
    )
    table.add_column("Category", style="cyan", no_wrap=True)
    table.add_column("Code", style="magenta", no_wrap=True)
    table.add_column("Example", style="yellow", no_wrap=True)
    for category in settings.categories:
        table.add_row(category.display, category.code, synthesize(category.code))
    console.print(table)


if __name__ == "__main__":
    app()
