"""CLI application entry point for pathfit.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from pathfit import __version__
from pathfit.cli.output import (
    console,
    create_progress,
    print_error,
    print_header,
    print_path_info,
    print_policy_table,
    print_step,
    print_summary,
)
from pathfit.config import CanvasConfig, LoggingConfig, PathfitSettings, StrokeConfig
from pathfit.core import PICKER_PRESETS, PreviewRenderer, demo_path
from pathfit.domain import (
    Anchor,
    FitPolicy,
    LineCap,
    LineJoin,
    Outline,
    format_policy,
    parse_policy,
)
from pathfit.exceptions import PathfitError
from pathfit.io import PathReader, parse_svg_path

# Create the Typer app
app = typer.Typer(
    name="pathfit",
    help="Fit stroked vector paths into a reference rectangle.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]pathfit[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
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
    """Fit stroked vector paths into a reference rectangle."""


@app.command()
def render(
    path_data: Annotated[
        str | None,
        typer.Argument(
            help="SVG path data of the centerline (default: the demo curve)",
            show_default=False,
        ),
    ] = None,
    input_file: Annotated[
        Path | None,
        typer.Option(
            "--input",
            "-i",
            help="Read the centerline from an SVG document or a path-data file",
        ),
    ] = None,
    policies: Annotated[
        list[str] | None,
        typer.Option(
            "--policy",
            "-p",
            help="Fit policy, repeatable (default: all picker presets)",
        ),
    ] = None,
    canvas_width: Annotated[
        float,
        typer.Option("--canvas-width", "-W", help="Reference rectangle width", min=0.0),
    ] = 400.0,
    canvas_height: Annotated[
        float,
        typer.Option("--canvas-height", "-H", help="Reference rectangle height", min=0.0),
    ] = 300.0,
    stroke_width: Annotated[
        float,
        typer.Option("--stroke-width", "-w", help="Stroke width", min=0.0),
    ] = 24.0,
    cap: Annotated[
        str,
        typer.Option("--cap", help="Line cap (butt|round|square)"),
    ] = "round",
    join: Annotated[
        str,
        typer.Option("--join", help="Line join (miter|round|bevel)"),
    ] = "miter",
    output_dir: Annotated[
        Path,
        typer.Option("--output-dir", "-o", help="Directory for the preview SVG files"),
    ] = Path("."),
    stem: Annotated[
        str,
        typer.Option("--stem", help="File name prefix for previews"),
    ] = "pathfit",
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Write detailed logs to file"),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Verbose console output"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Minimal console output"),
    ] = False,
) -> None:
    """Stroke a centerline and render it under one or more fit policies.

    Without path data the demo S-curve is used. Without --policy every
    picker preset is rendered (as-is, scale fit, align top/center,
    scale + align top/center).

    Example:
        pathfit render "M50 150 C150 250 250 50 350 150" -p scale_and_align:center
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if path_data is not None and input_file is not None:
        print_error("Give either path data or --input, not both")
        raise typer.Exit(code=1)

    try:
        selected = _resolve_policies(policies)
        settings = PathfitSettings(
            stroke=StrokeConfig(
                line_width=stroke_width,
                line_cap=LineCap(cap.lower()),
                line_join=LineJoin(join.lower()),
            ),
            canvas=CanvasConfig(width=canvas_width, height=canvas_height),
            logging=LoggingConfig(
                log_file=log_file,
                log_level="DEBUG" if verbose else log_level,
            ),
        )
    except ValueError as e:
        # pydantic's ValidationError is a ValueError too
        details = _validation_details(e) if isinstance(e, ValidationError) else None
        print_error(str(e) if details is None else "Invalid option", details=details)
        raise typer.Exit(code=1)
    except PathfitError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__, settings.canvas.to_rect())

    try:
        if not quiet:
            print_step("Loading path")
        path, source = _load_path(path_data, input_file)
        bounds = path.bounding_rect()

        if not quiet:
            print_path_info(source, path.contour_count, path.point_count, bounds)
            print_step(f"Rendering {len(selected)} policies")

        renderer = PreviewRenderer(settings, quiet=quiet)

        if not quiet:
            with create_progress() as progress:
                task_id = progress.add_task("Rendering", total=len(selected), policy="")

                def update_progress(completed: int, _total: int, policy: str, _ok: bool) -> None:
                    progress.update(task_id, completed=completed, policy=policy)

                stats = renderer.render(
                    path=path,
                    policies=selected,
                    output_dir=output_dir,
                    stem=stem,
                    progress_callback=update_progress,
                )
        else:
            stats = renderer.render(
                path=path, policies=selected, output_dir=output_dir, stem=stem
            )

    except FileNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except PathfitError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_policy_table([(policy, rect, str(out)) for policy, rect, out in stats.results])
        print_summary(
            output_dir=str(output_dir),
            total_time_s=stats.duration_seconds,
            rendered=stats.rendered_count,
            degenerate=stats.degenerate_count,
            errors=stats.error_count,
            avg_time_ms=stats.avg_render_time_ms,
        )

    if stats.error_count:
        for policy, message in stats.errors:
            print_error(f"{policy}: {message}")
        raise typer.Exit(code=1)


@app.command("policies")
def list_policies() -> None:
    """List accepted policy strings and the picker presets."""
    console.print("\n[bold]Modes[/bold]\n")
    console.print("  as_is")
    console.print("  scale_fit")
    console.print("  align:<anchor>")
    console.print("  scale_and_align:<anchor>")

    console.print("\n[bold]Anchors[/bold]\n")
    for anchor in Anchor:
        console.print(f"  {anchor.value}")

    console.print("\n[bold]Presets[/bold]\n")
    for label, policy in PICKER_PRESETS.items():
        console.print(f"  {label:<22} {format_policy(policy)}")


def _resolve_policies(policies: list[str] | None) -> list[FitPolicy]:
    """Parse --policy values, falling back to every picker preset.

    Raises:
        PolicyError: If a value cannot be parsed
    """
    if not policies:
        return list(PICKER_PRESETS.values())
    return [parse_policy(text) for text in policies]


def _load_path(path_data: str | None, input_file: Path | None) -> tuple[Outline, str]:
    """Load the centerline from the argument, a file, or the demo curve.

    Returns:
        Tuple of (outline, human-readable source)
    """
    if input_file is not None:
        return PathReader(input_file).read(), str(input_file)
    if path_data is not None:
        return parse_svg_path(path_data), "path data"
    return demo_path(), "demo curve"


def _validation_details(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in error.errors()
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
