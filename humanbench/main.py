"""HumanBenchmark in the terminal.

Usage::

    humanbench                       # interactive game menu
    humanbench --scores              # view per-game averages
    humanbench --data-dir ./scores   # keep records somewhere else
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from humanbench import config

app = typer.Typer(add_completion=False)


# -- CLI entry point ----------------------------------------------------------


@app.command()
def main(
    scores: bool = typer.Option(
        False, "--scores",
        help="Show per-game averages and exit.",
    ),
    data_dir: Optional[Path] = typer.Option(
        None, "--data-dir",
        file_okay=False,
        help=f"Where records and the log live (default: platform data dir, or ${config.DATA_DIR_ENV}).",
    ),
) -> None:
    """Reaction, memory, aim and typing tests in the terminal."""
    directory = data_dir if data_dir is not None else config.data_dir()

    # Imported lazily so ``--help`` stays fast.
    from humanbench.frontend.cli.input_handler import TerminalError
    from humanbench.frontend.cli.rich import app as rich_app

    if scores:
        rich_app.print_scores(directory)
        return

    try:
        rich_app.run(directory)
    except TerminalError as exc:
        typer.echo(f"humanbench: {exc}", err=True)
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    app()
