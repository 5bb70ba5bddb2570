import importlib.metadata
import logging
from pathlib import Path
from typing import Optional

import rich.console
import typer
from pydantic import ValidationError
from rich.table import Table
from rich.text import Text
from typer import Typer

from .config import CONFIG, load_config
from .parser import StatementSplitter
from .types_ import ParsedStatement

app = Typer(pretty_exceptions_show_locals=False)

console = rich.console.Console(highlight=False)
error_console = rich.console.Console(
    stderr=True, style="red", highlight=False, markup=False
)

logger = logging.getLogger("cmdsplit")


def render(statements: list[ParsedStatement], as_json: bool) -> None:
    if as_json or CONFIG.output_format == "json":
        for stmt in statements:
            typer.echo(stmt.to_view().model_dump_json())
        return

    table = Table("#", "command", "params", "redirection", "target", "operator")
    for i, stmt in enumerate(statements, 1):
        view = stmt.to_view()
        table.add_row(
            str(i),
            Text(view.command),
            Text(view.params),
            Text(view.redirection),
            Text(view.redirection_target),
            Text(view.control_operator),
        )
    console.print(table)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(None, "--log-level"),
    version: bool = typer.Option(False, "--version", "-v"),
) -> None:
    if version:
        version_ = importlib.metadata.version("cmdsplit")
        print(f"cmdsplit version: {version_}")
        raise typer.Exit()

    try:
        config = load_config()
        CONFIG.update(
            log_level=config.log_level if log_level is None else log_level.upper(),  # type: ignore[arg-type]
            output_format=config.output_format,
        )
    except ValidationError as e:
        error_console.print(f"Invalid configuration: {e}")
        raise typer.Exit(1)
    logging.basicConfig(level=CONFIG.log_level, format="%(asctime)s: %(message)s")

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


@app.command()
def split(
    line: str,
    json: bool = typer.Option(False, "--json", help="Print one JSON object per statement"),
) -> None:
    """Split a single command line into statements."""
    render(StatementSplitter().parse_string(line), json)


@app.command()
def file(
    path: Path,
    json: bool = typer.Option(False, "--json", help="Print one JSON object per statement"),
) -> None:
    """Split every line of a file into statements."""
    try:
        statements = StatementSplitter().parse_file(path)
    except (OSError, UnicodeDecodeError) as e:
        error_console.print(f"Error reading {path}: {e}")
        raise typer.Exit(1)
    logger.info(f"Split {len(statements)} statements from {path}")
    render(statements, json)


if __name__ == "__main__":
    app()
