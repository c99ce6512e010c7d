"""Rich console output helpers for the CLI.

Everything the ``pathfit`` commands print goes through the shared
``console`` so tests can capture it and ``--quiet`` can skip it.
"""

from rich.console import Console
from rich.markup import escape
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn
from rich.table import Table
from rich.text import Text

from pathfit.domain import Rect

console = Console()

MARK_STEP = "▸"
MARK_OK = "✓"
MARK_FAIL = "✗"
SEP = "·"


def create_progress() -> Progress:
    """Progress bar counting rendered policies.

    The ``policy`` task field is shown next to the bar; update it with
    ``progress.update(task_id, policy=...)``.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=30, complete_style="cyan", finished_style="green"),
        MofNCompleteColumn(),
        TextColumn("[dim]{task.fields[policy]}[/dim]"),
        console=console,
    )


def print_header(version: str, canvas: Rect) -> None:
    """Print the banner with the reference rectangle in use."""
    console.print(f"\n[bold]pathfit[/bold] v{version} {SEP} canvas {format_rect(canvas)}")
    console.rule(style="dim")


def print_step(message: str) -> None:
    console.print(f"\n{MARK_STEP} {message}")


def format_rect(rect: Rect) -> str:
    """Format a rectangle as 'x, y  w × h'."""
    return f"{rect.x:.1f}, {rect.y:.1f}  {rect.width:.1f} × {rect.height:.1f}"


def print_path_info(source: str, contours: int, points: int, bounds: Rect) -> None:
    """Print a summary of the loaded centerline.

    Args:
        source: Where the path came from (file name or "demo curve")
        contours: Number of contours
        points: Number of points
        bounds: Bounding rectangle of the centerline
    """
    console.print(Text(f"  {source}"))
    console.print(f"  {contours} contours {SEP} {points} points {SEP} {format_rect(bounds)}")


def print_policy_table(rows: list[tuple[str, Rect, str]]) -> None:
    """Print the fitted bounds for each rendered policy.

    Non-finite bounds are highlighted.

    Args:
        rows: (policy, fitted bounds, output file) per policy
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Policy", no_wrap=True)
    table.add_column("Bounds", no_wrap=True)
    table.add_column("Output", overflow="fold")
    for policy, bounds, output in rows:
        style = None if bounds.is_finite() else "yellow"
        table.add_row(policy, format_rect(bounds), escape(output), style=style)
    console.print()
    console.print(table)


def print_summary(
    output_dir: str,
    total_time_s: float,
    rendered: int,
    degenerate: int,
    errors: int,
    avg_time_ms: float | None = None,
) -> None:
    """Print the run summary.

    Args:
        output_dir: Directory the previews were written to
        total_time_s: Total render time in seconds
        rendered: Number of previews written
        degenerate: Number of previews with non-finite bounds
        errors: Number of policies that failed
        avg_time_ms: Average time per policy in milliseconds
    """
    if errors:
        console.print(f"\n[bold yellow]{MARK_FAIL} Finished with errors[/bold yellow]")
    else:
        console.print(f"\n[bold green]{MARK_OK} Complete[/bold green] in {total_time_s:.2f}s")

    console.print(Text(f"  {output_dir}", style="bold"))

    counts = f"  {rendered} previews"
    if degenerate:
        counts += f" {SEP} [yellow]{degenerate} degenerate[/yellow]"
    if errors:
        counts += f" {SEP} [red]{errors} errors[/red]"
    if avg_time_ms is not None:
        counts += f" {SEP} {avg_time_ms:.1f}ms avg"
    console.print(counts)


def print_error(message: str, details: str | None = None) -> None:
    """Print an error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{MARK_FAIL} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")
