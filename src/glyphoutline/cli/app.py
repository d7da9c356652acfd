"""CLI application entry point for glyphoutline.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from glyphoutline import __version__
from glyphoutline.cli.output import print_error, print_path, print_version
from glyphoutline.config import GlyphOutlineSettings, LoggingConfig
from glyphoutline.core import GlyphPathExtractor, PathRenderer
from glyphoutline.exceptions import GlyphOutlineError, UsageError
from glyphoutline.io import FontEngine
from glyphoutline.utils import configure_logging

EXIT_OK = 0
EXIT_FAILURE = 1
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
USAGE = "glyphoutline <font_path.ttf> <character>"

# Create the Typer app
app = typer.Typer(
    name="glyphoutline",
    help="Print the unscaled vector outline of one character's glyph.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        print_version(__version__)
        raise typer.Exit()


@app.command()
def extract(
    font_path: Annotated[
        Path,
        typer.Argument(
            help="Path to the TTF/OTF/TTC font file",
            show_default=False,
        ),
    ],
    character: Annotated[
        str,
        typer.Argument(
            help="The character whose glyph outline to print",
            show_default=False,
        ),
    ],
    face_index: Annotated[
        int,
        typer.Option(
            "--face-index",
            "-i",
            help="Face to open inside a font collection",
        ),
    ] = 0,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level on stderr (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Print the outline of CHARACTER's glyph in FONT_PATH.

    Coordinates are in font design units: no scaling, no hinting.

    Example:
        glyphoutline Roboto-Regular.ttf A
    """
    try:
        if log_level.upper() not in LOG_LEVELS:
            raise UsageError(
                f"Invalid log level: {log_level} (expected one of {', '.join(LOG_LEVELS)})"
            )

        settings = GlyphOutlineSettings(
            engine=FontEngine.configure(face_index=face_index),
            logging=LoggingConfig(log_file=log_file, log_level=log_level.upper()),
        )
        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
        )

        extractor = GlyphPathExtractor(settings, logger=logger)
        glyph_path = extractor.extract(font_path, character)
    except UsageError as e:
        print_error(e.stage, e.message, details=f"Usage: {USAGE}")
        raise typer.Exit(code=EXIT_FAILURE)
    except GlyphOutlineError as e:
        print_error(e.stage, str(e))
        raise typer.Exit(code=EXIT_FAILURE)

    renderer = PathRenderer(settings.render)
    print_path(renderer.render_report(glyph_path, character, font_path))


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return its exit status.

    Parser errors (wrong argument count, bad option values) are usage
    errors and exit with status 1.

    Args:
        argv: Arguments without the program name (sys.argv[1:] if None)

    Returns:
        Process exit status
    """
    command = typer.main.get_command(app)
    try:
        result = command.main(args=argv, prog_name="glyphoutline", standalone_mode=False)
    except typer.TyperException as e:
        print_error(UsageError.stage, e.format_message(), details=f"Usage: {USAGE}")
        return EXIT_FAILURE
    except typer.Abort:
        return EXIT_FAILURE

    return result if isinstance(result, int) else EXIT_OK


def cli() -> None:
    """Entry point for the CLI application."""
    raise SystemExit(main())


if __name__ == "__main__":
    cli()
