"""CLI application entry point for glyphpath.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from glyphpath import __version__
from glyphpath.cli.output import (
    print_error,
    print_font_info,
    print_glyph_summary,
    print_header,
    print_step,
    print_success,
)
from glyphpath.config import (
    DocumentConfig,
    GlyphPathSettings,
    LoggingConfig,
    LogLevel,
    Overlay,
    TessellationConfig,
)
from glyphpath.core import layout_message
from glyphpath.exceptions import FontLoadError, GlyphPathError
from glyphpath.io import FontReader, parse_code_point
from glyphpath.io.document import render_document
from glyphpath.utils import ConversionLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="glyphpath",
    help="Convert TrueType glyph outlines to SVG paths.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"glyphpath v{__version__}")
        raise typer.Exit()


def _parse_message(message: str, codepoints: bool) -> list[str | int]:
    if not codepoints:
        return list(message)
    return [parse_code_point(token) for token in message.split()]


@app.command()
def render(
    input_font: Annotated[
        Path,
        typer.Argument(
            help="Path to input TTF font file",
            show_default=False,
        ),
    ],
    message: Annotated[
        str,
        typer.Argument(
            help="Text to render",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output SVG path (default: write to stdout)",
        ),
    ] = None,
    lines: Annotated[
        bool,
        typer.Option(
            "--lines",
            "-l",
            help="Replace quadratic curves with line segments",
        ),
    ] = False,
    step: Annotated[
        float,
        typer.Option(
            "--step",
            help="Curve sampling increment used with --lines (0-1]",
            min=0.001,
            max=1.0,
        ),
    ] = 0.1,
    codepoints: Annotated[
        bool,
        typer.Option(
            "--codepoints",
            help="Treat MESSAGE as space-separated code points (65, 0x41, 0101)",
        ),
    ] = False,
    strict: Annotated[
        bool,
        typer.Option(
            "--strict",
            help="Fail on characters missing from the font instead of drawing .notdef",
        ),
    ] = False,
    overlay: Annotated[
        list[Overlay] | None,
        typer.Option(
            "--overlay",
            help="Debug overlay to draw (repeatable)",
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        LogLevel,
        typer.Option(
            "--log-level",
            help="Console logging level",
            case_sensitive=False,
        ),
    ] = LogLevel.WARNING,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
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
    """Convert the glyphs of MESSAGE to an SVG document.

    Glyphs are placed left to right, each moved by its advance width. With
    --lines every quadratic curve is replaced by straight segments.

    Example:
        glyphpath DejaVuSans.ttf "Hello" -o hello.svg
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not input_font.exists():
        print_error(
            f"Input file not found: {input_font}",
            details=f"The file '{input_font}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_font.is_file():
        print_error(
            f"Input path is not a file: {input_font}",
            details="Please provide a path to a TTF font file.",
        )
        raise typer.Exit(code=1)

    try:
        chars = _parse_message(message, codepoints)
    except ValueError as e:
        print_error(str(e), details="Code points are decimal, 0x hex or 0-prefixed octal.")
        raise typer.Exit(code=1)

    # Status goes to stderr; keep it off when SVG is written to stdout
    show_status = not quiet and output is not None

    settings = GlyphPathSettings(
        tessellation=TessellationConfig(emit_curves=not lines, step=step),
        document=DocumentConfig(overlays=overlay or []),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else LogLevel.WARNING,
        ),
    )

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level.value,
        file_level=settings.logging.file_log_level.value,
        quiet=quiet,
    )
    conversion_logger = ConversionLogger(logger)

    if show_status:
        print_header(__version__)
        print_step("Loading font")

    try:
        reader = FontReader(input_font)
        try:
            reader.load()
        except GlyphPathError:
            raise
        except Exception as e:
            raise FontLoadError(str(input_font), str(e)) from e

        try:
            if show_status:
                print_font_info(str(input_font), reader.glyph_count, reader.units_per_em)
                if settings.tessellation.emit_curves:
                    print_step("Converting glyphs")
                else:
                    segments = settings.tessellation.samples_per_curve
                    print_step(f"Converting glyphs ({segments} segments per curve)")

            text_layout = layout_message(
                reader,
                chars,
                tessellation=settings.tessellation,
                layout=settings.layout,
                conversion_logger=conversion_logger,
                strict=strict,
            )
            bounding_box = reader.bounding_box
        finally:
            reader.close()

        stats = conversion_logger.stats
        if show_status:
            print_glyph_summary(
                [placed.glyph.name for placed in text_layout.glyphs],
                empty=stats.empty_count,
                verbose=verbose,
            )

        doc = render_document(text_layout, bounding_box, settings.document)

        if output is None:
            typer.echo(doc.tostring())
            return

        doc.save(output)
        if show_status:
            print_success(
                output_path=str(output),
                total_time_s=stats.duration_seconds,
                glyphs=stats.converted_count + stats.empty_count,
                commands=stats.commands_emitted,
            )

    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except GlyphPathError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
