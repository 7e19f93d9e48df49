"""
Command line entry point for interm.

Runs the simulated download demo and prints the library version.
"""
from __future__ import annotations

import asyncio
import logging
import sys
from typing import Optional

import typer
from rich.console import Console

from .config import APP_NAME, VERSION, InTermSettings, load_settings
from .demo import run_downloads
from .errors import InTermError
from .terminal import ProcessTerminal

app = typer.Typer(
    name=APP_NAME,
    help="InTerm: independently updatable terminal lines",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


def _configure_logging(settings: InTermSettings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def downloads(
    count: int = typer.Option(10, "--count", "-n", min=1, help="Number of parallel downloads"),
    max_delay: float = typer.Option(0.05, "--max-delay", min=0.0, help="Upper bound of the per-step delay in seconds"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for the random download speeds"),
) -> None:
    """Show N simulated downloads, each rewriting its own line."""
    settings = load_settings()
    _configure_logging(settings)
    terminal = ProcessTerminal(write_log_path=settings.write_log_path)
    if not terminal.is_tty():
        err_console.print("[yellow]Warning:[/yellow] stdout is not a terminal")

    try:
        asyncio.run(run_downloads(count, max_delay, terminal=terminal, seed=seed))
    except InTermError as exc:
        # The cursor may be stale; get back onto a fresh line before reporting.
        sys.stdout.write("\n")
        err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(1)

    console.print("[cyan]All downloads complete![/cyan]")


@app.command()
def version() -> None:
    """Print the interm version."""
    typer.echo(f"{APP_NAME} {VERSION}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
