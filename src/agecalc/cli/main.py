"""
The Command-Line Interface (CLI).

This module is the user-facing entry point for the age calculator. It uses
Typer for argument parsing and Rich for console output.

Commands:
- `age`: Prints the age of a person born in a given year.

The top-level callback loads settings (from `--env-file` and the environment)
and configures logging before any command runs.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from typing_extensions import Annotated

# --- Local Imports from the `agecalc` package ---
from ..config.settings import DEFAULT_ENV_FILE, Settings, load_settings
from ..core.age import calculate_age

# --- CLI Application Initialization ---
app = typer.Typer(
    name="agecalc",
    help="agecalc: Works out how old someone is from the year they were born.",
    add_completion=False,
    rich_markup_mode="markdown"
)

console = Console()
cli_logger = logging.getLogger(__name__)


@app.callback()
def main(
    ctx: typer.Context,
    env_file: Annotated[Path, typer.Option(
        "--env-file", "-e",
        dir_okay=False,
        help="Path to a .env file with AGECALC_* settings."
    )] = DEFAULT_ENV_FILE,
):
    """
    Loads configuration and sets up logging.
    """
    try:
        settings = load_settings(env_file)
    except ValidationError as e:
        console.print(f"[bold red]Error:[/bold red] Invalid configuration: {escape(str(e))}")
        raise typer.Exit(code=1)

    logging.basicConfig(level=settings.log_level, format='%(asctime)s - %(levelname)s - %(message)s')
    cli_logger.debug(f"Loaded settings: {settings}")
    ctx.obj = settings


# --- CLI Commands ---

@app.command()
def age(
    ctx: typer.Context,
    birth_year: Annotated[int, typer.Argument(help="The year the person was born.")],
    as_of: Annotated[Optional[datetime], typer.Option(
        "--as-of", "-a",
        formats=["%Y-%m-%d"],
        help="Compute the age as of this date instead of today."
    )] = None,
    as_json: Annotated[bool, typer.Option(
        "--json",
        help="Print the result as a JSON document."
    )] = False,
):
    """
    Prints the age of a person born in BIRTH_YEAR.
    """
    settings: Settings = ctx.obj
    if as_of is not None:
        reference = as_of.date()
    else:
        reference = settings.reference_date

    result = calculate_age(birth_year, reference)

    if as_json:
        typer.echo(result.model_dump_json())
        return

    console.print(
        f"Born in [cyan]{result.birth_year}[/cyan]: "
        f"[bold green]{result.age}[/bold green] years old in {result.reference_year}."
    )


# --- Main Execution Guard ---
if __name__ == "__main__":
    app()
