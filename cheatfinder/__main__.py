"""Command line interface for the cheat sheet finder."""

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from cheatfinder import offline
from cheatfinder.aggregation import CheatSheetEngine, autocomplete
from cheatfinder.config import Settings, configure_logging, get_settings
from cheatfinder.data_models import CheatSheetItem
from cheatfinder.query import QueryService
from cheatfinder.storage import FavoritesStore, UsageTracker

app = typer.Typer(
    name="cheatfinder",
    help="Search command cheat sheets from cheat.sh, DevHints, tldr and offline sheets.",
    no_args_is_help=True,
)
console = Console()


def _settings() -> Settings:
    settings = get_settings()
    configure_logging(settings.log_level)
    return settings


def _favorites(settings: Settings) -> FavoritesStore:
    return FavoritesStore(settings.favorites_path, limit=settings.favorites_limit)


def _usage(settings: Settings) -> UsageTracker:
    return UsageTracker(
        settings.history_path,
        limit=settings.history_limit,
        max_age_days=settings.history_max_age_days,
    )


async def _run_query(settings: Settings, query: str) -> list[CheatSheetItem]:
    async with CheatSheetEngine.from_settings(settings) as engine:
        service = QueryService(engine, _favorites(settings), _usage(settings))
        return await service.handle(query)


def _print_items(items: list[CheatSheetItem], title: str) -> None:
    if not items:
        console.print("[yellow]No results[/yellow]")
        return

    table = Table(title=title)
    table.add_column("Score", justify="right", style="dim")
    table.add_column("Command", style="cyan", overflow="fold")
    table.add_column("Description")
    table.add_column("Source", style="magenta")
    for item in items:
        table.add_row(str(item.score), item.command, item.description, item.source_name)
    console.print(table)


@app.command()
def search(
    query: list[str] = typer.Argument(..., help="Search terms, or a cs: command"),
) -> None:
    """Search all enabled sources (cs:fav, cs:popular and cs:<category> also work)."""
    settings = _settings()
    text = " ".join(query)
    items = asyncio.run(_run_query(settings, text))
    _print_items(items, f"Results for '{text}'")


@app.command()
def suggest(term: list[str] = typer.Argument(..., help="Partial query")) -> None:
    """Show autocomplete suggestions."""
    suggestions = autocomplete(" ".join(term))
    if not suggestions:
        console.print("[yellow]No suggestions[/yellow]")
        raise typer.Exit(1)
    for s in suggestions:
        console.print(f"  [cyan]{s}[/cyan]")


@app.command()
def categories() -> None:
    """List the offline categories."""
    table = Table(title="Offline categories")
    table.add_column("Category", style="cyan")
    table.add_column("Commands", justify="right")
    for name, entries in offline.OFFLINE_SHEETS.items():
        table.add_row(name, str(len(entries)))
    console.print(table)


@app.command()
def browse(category: str = typer.Argument(..., help="Offline category, e.g. git")) -> None:
    """Show every offline command of a category."""
    items = offline.get_by_category(category)
    if not items:
        console.print(f"[red]Unknown category: {category}[/red]")
        console.print(f"[dim]Available: {', '.join(offline.categories())}[/dim]")
        raise typer.Exit(1)
    _print_items(items, category)


@app.command()
def use(
    command: str = typer.Argument(..., help="Command that was used"),
    term: str | None = typer.Option(None, "--term", "-t", help="Search that found it"),
) -> None:
    """Record that a command was used, to personalize future results."""
    settings = _settings()
    tracker = _usage(settings)
    tracker.record_usage(command, term)
    console.print(
        f"[green]Recorded[/green] {command} "
        f"[dim](score {tracker.usage_score(command)})[/dim]"
    )


@app.command()
def favorite(
    command: str = typer.Argument(..., help="Command to add or remove"),
    source: str | None = typer.Option(None, "--source", "-s", help="Source name"),
) -> None:
    """Toggle a command in the favorites."""
    settings = _settings()
    store = _favorites(settings)

    matches = [
        item
        for item in offline.search(command)
        if item.command == command and (source is None or item.source_name == source)
    ]
    item = matches[0] if matches else CheatSheetItem(
        title=command,
        command=command,
        source_name=source or "Personal",
    )

    if store.toggle(item):
        console.print(f"[green]Added to favorites:[/green] {item.command}")
    else:
        console.print(f"[yellow]Removed from favorites:[/yellow] {item.command}")


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", help="Bind address"),
    port: int = typer.Option(8000, help="Port"),
) -> None:
    """Run the HTTP API."""
    import uvicorn

    settings = _settings()
    uvicorn.run(
        "cheatfinder.api.app:create_app",
        factory=True,
        host=host,
        port=port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    app()
