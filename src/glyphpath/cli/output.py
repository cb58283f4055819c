"""Rich console output helpers for the CLI.

Everything here prints to stderr; stdout is reserved for SVG output.
"""


from rich.console import Console
from rich.text import Text

console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]glyphpath[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(font_path: str, glyph_count: int, upm: int) -> None:
    """Print font information.

    Args:
        font_path: Path to the font file
        glyph_count: Total number of glyphs in font
        upm: Units per em value
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(font_path)
    console.print(line)
    console.print(f"  {glyph_count:,} glyphs {SYM_DOT} {upm:,} UPM")


def print_glyph_summary(glyph_names: list[str], empty: int, verbose: bool) -> None:
    """Print the glyphs a message resolved to.

    Args:
        glyph_names: Glyph names in message order
        empty: Number of glyphs with no outline
        verbose: Whether to list the glyph names
    """
    console.print(
        f"  [green]{len(glyph_names)}[/green] glyphs {SYM_DOT} {empty} without outline"
    )
    if verbose and glyph_names:
        names_str = ", ".join(glyph_names[:20])
        if len(glyph_names) > 20:
            names_str += f" {SYM_DOT}{SYM_DOT}{SYM_DOT} (+{len(glyph_names) - 20} more)"
        console.print(f"  {names_str}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def print_success(output_path: str, total_time_s: float, glyphs: int, commands: int) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        total_time_s: Total conversion time in seconds
        glyphs: Number of glyphs converted
        commands: Total number of path commands emitted
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)
    console.print(f"  {glyphs} glyphs {SYM_DOT} {commands} path commands")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
