"""Console output helpers for the CLI.

The rendered path goes to stdout as plain text; diagnostics go to stderr
through a Rich console.
"""

import typer
from rich.console import Console
from rich.text import Text

console = Console(stderr=True, soft_wrap=True)

SYM_ERR = "✗"  # Error


def print_version(version: str) -> None:
    """Print application version to stdout.

    Args:
        version: Application version string
    """
    typer.echo(f"glyphoutline v{version}")


def print_path(text: str) -> None:
    """Print a rendered path to stdout exactly as given."""
    typer.echo(text)


def print_error(stage: str, message: str, details: str | None = None) -> None:
    """Print error message naming the failing stage.

    Args:
        stage: Pipeline stage that failed
        message: Main error message
        details: Optional detailed error information
    """
    line = Text(f"{SYM_ERR} Error ", style="bold red")
    line.append(f"[{stage}]", style="bold")
    line.append(f": {message}")
    console.print(line)
    if details:
        console.print(Text(f"  {details}"))
