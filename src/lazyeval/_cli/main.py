import json
import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from lazyeval._strategies import chain_scenario, run_all_scenarios

from .config import ConfigError, LazyevalConfig, get_config

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Lazyeval CLI."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _load_config() -> LazyevalConfig:
    try:
        config = get_config()
    except ConfigError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e
    logger.debug("Loaded config: %r", config)
    return config


@app.command()
def strategies(
    *,
    runs: Annotated[
        int | None,
        typer.Option("-n", "--runs", min=1, help="Number of triggers per strategy (default from config)"),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the reports as JSON"),
    ] = False,
) -> None:
    """Trigger each evaluation strategy repeatedly and count the underlying calls."""
    config = _load_config()
    n_runs = runs if runs is not None else config.runs

    reports = run_all_scenarios(n_runs)

    if as_json:
        typer.echo(json.dumps([report.model_dump(mode="json") for report in reports], indent=2))
        return

    table = Table(show_header=True, header_style="bold cyan", box=None)
    table.add_column("Strategy", style="dim")
    table.add_column("Result")
    table.add_column("Calls", justify="right")
    table.add_column("Triggers", justify="right")

    for report in reports:
        table.add_row(
            str(report.strategy),
            escape(repr(report.result)),
            str(report.calls),
            str(report.triggers),
        )

    out_console.print(Panel(table, title="[bold]Evaluation Strategies[/bold]", border_style="cyan"))


@app.command()
def chain(
    *,
    depth: Annotated[
        int | None,
        typer.Option("-d", "--depth", min=1, help="Number of chained links (default from config)"),
    ] = None,
) -> None:
    """Build a long chain of computations and trigger it."""
    config = _load_config()
    n_links = depth if depth is not None else config.chain_depth

    err_console.print(f"[cyan]Chaining {n_links} computations...[/cyan]")
    report = chain_scenario(n_links)

    out_console.print(f"[green]✓ Resolved {report.depth} links: result = {report.result}[/green]")


def main() -> None:
    app()
