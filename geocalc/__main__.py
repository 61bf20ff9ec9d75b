"""CLI for the geocalc area/perimeter calculator.

Usage:
    python -m geocalc          # Interactive session on stdin/stdout
    echo -e "circulo\\narea\\n2" | geocalc
"""

from __future__ import annotations

import logging
import sys

import typer
from rich.console import Console
from rich.markup import escape

from geocalc.logging_config import setup_logging
from geocalc.session import InputReader, make_output_console, run_session

app = typer.Typer(
    name="geocalc",
    help="Area and perimeter calculator for basic figures",
    add_completion=False,
)
console = Console(stderr=True)


@app.command()
def cmd_calculate() -> None:
    """Ask for a figure, an operation and its dimensions, then print the result."""
    setup_logging(logging.WARNING)
    out = make_output_console()
    try:
        with InputReader(sys.stdin, out) as reader:
            run_session(reader, out)
    except (ValueError, EOFError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
