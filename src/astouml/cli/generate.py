import logging
import os
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from astouml.core.pipeline import output_path_for, run_pipeline
from astouml.core.summary import summarize_tokens
from astouml.models import Token
from astouml.observers.logging_observer import LoggingScanObserver

LOG_LEVEL_ENV = "ASTOUML_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def _resolve_log_level(verbose: bool) -> str:
    if verbose:
        return "DEBUG"
    level = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    if level not in logging.getLevelNamesMapping():
        err_console.print(f"[red]Unknown log level in {LOG_LEVEL_ENV}:[/red] {level}")
        raise typer.Exit(code=1)
    return level


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _render_summary(tokens: list[Token]) -> None:
    table = Table(show_lines=False)
    table.add_column("kind")
    table.add_column("count", justify="right")
    for kind, count in summarize_tokens(tokens).items():
        table.add_row(str(kind), str(count))
    console.print(table)
    console.print(f"({len(tokens)} tokens)")


def generate(
    filenames: Annotated[list[str] | None, typer.Argument(help="Source file to convert.", show_default=False)] = None,
    output: Annotated[str | None, typer.Option("--output", "-o", help="Write the diagram to this path.")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log every classification step.")] = False,
    summary: Annotated[bool, typer.Option(help="Print the number of tokens per kind.")] = False,
) -> None:
    """Generate a PlantUML class diagram from a source file."""
    if not filenames:
        err_console.print("Usage: astouml <filename>")
        raise typer.Exit(code=1)
    if len(filenames) > 1:
        err_console.print("Too many arguments")
        raise typer.Exit(code=1)

    _configure_logging(_resolve_log_level(verbose))
    filename = filenames[0]
    console.print(f"Generating UML diagram for {filename}")

    try:
        source_text = Path(filename).read_bytes().decode("utf-8")
    except FileNotFoundError:
        err_console.print(f"[red]File not found:[/red] {filename}")
        raise typer.Exit(code=1) from None
    except UnicodeDecodeError:
        err_console.print(f"[red]Not a UTF-8 text file:[/red] {filename}")
        raise typer.Exit(code=1) from None
    except OSError as exc:
        err_console.print(f"[red]Cannot read {filename}:[/red] {exc.strerror or exc}")
        raise typer.Exit(code=1) from None

    result = run_pipeline(source_text, LoggingScanObserver())

    unknown = sum(1 for token in result.tokens if token.is_unrecognized)
    if unknown:
        console.print(f"[yellow]{unknown} unrecognized token(s)[/yellow]")
    if summary:
        _render_summary(result.tokens)

    output_path = Path(output) if output else output_path_for(filename)
    try:
        output_path.write_text(result.diagram, encoding="utf-8", newline="")
    except OSError as exc:
        err_console.print(f"[red]Cannot write {output_path}:[/red] {exc.strerror or exc}")
        raise typer.Exit(code=1) from None
    console.print(f"[green]UML diagram generated in {output_path}[/green]")
