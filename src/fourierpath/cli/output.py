"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def format_complex(value: complex, precision: int = 6) -> str:
    """Format a complex number as ``re ± im i``."""
    sign = "-" if value.imag < 0 else "+"
    return f"{value.real:.{precision}f} {sign} {abs(value.imag):.{precision}f}i"


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Fourierpath[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_path_info(svg_path: str, path_count: int, segment_count: int) -> None:
    """Print information about a loaded path.

    Args:
        svg_path: Path to the SVG file
        path_count: Number of <path> elements read
        segment_count: Number of cubic segments
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(svg_path)
    console.print(line)
    console.print(f"  {path_count} paths {SYM_DOT} {segment_count} cubic segments")


def print_point(label: str, t: float, value: complex) -> None:
    """Print a curve point at parameter t."""
    console.print(f"  {label} at t={t:g}: [bold]{format_complex(value)}[/bold]")


def print_bounds(points: Sequence[complex]) -> None:
    """Print the bounding box of sampled points."""
    if not points:
        return
    xs = [p.real for p in points]
    ys = [p.imag for p in points]
    console.print(
        f"  {len(points)} samples {SYM_DOT} "
        f"x [{min(xs):.3f}, {max(xs):.3f}] {SYM_DOT} y [{min(ys):.3f}, {max(ys):.3f}]"
    )


def print_terms_table(terms: Sequence[tuple[int, complex]], limit: int) -> None:
    """Print series terms in the given order.

    Args:
        terms: (frequency, coefficient) pairs
        limit: Maximum number of rows shown
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("k", justify="right")
    table.add_column("coefficient")
    table.add_column("|c_k|", justify="right")

    for k, c in terms[:limit]:
        table.add_row(str(k), format_complex(c), f"{abs(c):.6f}")

    console.print(table)
    if len(terms) > limit:
        console.print(f"  {SYM_DOT}{SYM_DOT}{SYM_DOT} (+{len(terms) - limit} more terms)")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(total_time_s: float, coefficients: int, evaluations: int) -> None:
    """Print success message with summary.

    Args:
        total_time_s: Total processing time in seconds
        coefficients: Number of coefficients computed
        evaluations: Number of integrand evaluations (0 if not tracked)
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")
    summary = f"  {coefficients} coefficients"
    if evaluations:
        summary += f" {SYM_DOT} {evaluations:,} integrand evaluations"
    console.print(summary)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
