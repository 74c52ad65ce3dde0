"""Rich console output helpers for the CLI.

Scripts go to stdout, so everything printed here goes to stderr.
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
    console.print(f"\n[bold]Strokeplot[/bold] v{version}")
    console.print("─" * 44)


def print_font_list(names: list[str]) -> None:
    """Print resolvable font names."""
    console.print(f"\n[bold]{len(names)} fonts available[/bold]\n")
    for name in names:
        console.print(Text(f"  {name}"))


def print_summary(
    font_name: str,
    mode: str,
    drawn: int,
    skipped: int,
    segments: int,
    output_path: str | None = None,
) -> None:
    """Print a render summary.

    Args:
        font_name: Name of the rendered font
        mode: Layout mode value
        drawn: Number of glyphs drawn
        skipped: Number of characters without a glyph
        segments: Number of segments emitted
        output_path: Script path, if written to a file
    """
    line = Text(f"{SYM_OK} ", style="bold green")
    line.append(font_name, style="bold")
    line.append(f" ({mode})")
    console.print(line)
    console.print(
        f"  {drawn} glyphs {SYM_DOT} {skipped} skipped {SYM_DOT} {segments} segments"
    )
    if output_path is not None:
        console.print(Text(f"  {SYM_STEP} {output_path}"))


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] ", end="")
    console.print(Text(message))
    if details:
        console.print(Text(f"  {details}"))
