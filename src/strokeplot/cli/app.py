"""CLI application entry point for strokeplot.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from strokeplot import __version__
from strokeplot.cli.output import (
    console,
    print_error,
    print_font_list,
    print_header,
    print_summary,
)
from strokeplot.config import (
    LoggingConfig,
    LogLevel,
    RenderConfig,
    StoreConfig,
    StrokeplotSettings,
)
from strokeplot.core import RenderPipeline, build_store
from strokeplot.exceptions import FontResolutionError, StrokeplotError

app = typer.Typer(
    name="strokeplot",
    help="Render stroke fonts as gnuplot line-segment scripts.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Strokeplot[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def render(
    font: Annotated[
        str | None,
        typer.Argument(
            help="Font name or path to a glyph-set .json document",
            show_default=False,
        ),
    ] = None,
    text: Annotated[
        str | None,
        typer.Argument(
            help="Text to render (omit for a sample sheet)",
            show_default=False,
        ),
    ] = None,
    terminal: Annotated[
        str,
        typer.Option(
            "--terminal",
            "-T",
            help="gnuplot terminal type and options, e.g. 'png crop transparent'",
        ),
    ] = "wxt",
    height: Annotated[
        int,
        typer.Option(
            "--height",
            "-h",
            help="Font height; sizes the output canvas",
            min=1,
        ),
    ] = 100,
    font_path: Annotated[
        list[Path] | None,
        typer.Option(
            "--font-path",
            "-F",
            help="Directory to search for glyph-set documents (repeatable)",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the script to a file instead of stdout",
        ),
    ] = None,
    annotate: Annotated[
        bool,
        typer.Option(
            "--annotate/--no-annotate",
            help="Emit per-glyph comment lines",
        ),
    ] = True,
    list_fonts: Annotated[
        bool,
        typer.Option(
            "--list-fonts",
            help="List available fonts and exit",
        ),
    ] = False,
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
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Print a render summary",
        ),
    ] = False,
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
    """Render a stroke font as a gnuplot script.

    With only FONT, a sample sheet of character codes 32..255 is produced.
    With FONT and TEXT, the text is rendered on a single line.

    Example:
        strokeplot simplex-demo 'HELLO WORLD' | gnuplot -p
    """
    # Validate log level argument
    try:
        level = LogLevel(log_level.upper())
    except ValueError:
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)

    store_config = StoreConfig()
    if font_path:
        store_config = StoreConfig(search_paths=[*font_path, *store_config.search_paths])

    settings = StrokeplotSettings(
        render=RenderConfig(scale=height, terminal=terminal, annotate=annotate),
        store=store_config,
        logging=LoggingConfig(log_file=log_file, log_level=level),
    )

    if list_fonts:
        print_font_list(build_store(settings).available())
        raise typer.Exit(code=0)

    if font is None:
        print_error("Missing font", details="Pass a font name or use --list-fonts.")
        raise typer.Exit(code=1)

    if verbose:
        print_header(__version__)

    try:
        pipeline = RenderPipeline(settings)
        result = pipeline.render(font, text)

        if output is None:
            typer.echo(result.script, nl=False)
        else:
            output.write_text(result.script, encoding="utf-8")

        if verbose:
            print_summary(
                font_name=result.layout.font_name,
                mode=result.layout.mode.value,
                drawn=result.stats.glyphs_drawn,
                skipped=result.stats.glyphs_skipped,
                segments=result.stats.segments_emitted,
                output_path=str(output) if output is not None else None,
            )

    except FontResolutionError as e:
        print_error(f"Could not load font: {e.identifier}", details=e.reason)
        raise typer.Exit(code=1)
    except StrokeplotError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except OSError as e:
        print_error(f"Could not write output: {e}")
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
