"""Preview rendering orchestration.

This module coordinates the preview workflow: stroke a centerline once,
fit the stroked outline under each requested policy, and write one SVG
document per policy.

Key components:
- render_policy: Fit one stroked outline under one policy
- PreviewRenderer: Main orchestrator class for preview rendering
"""

import time
import traceback
from collections.abc import Callable
from pathlib import Path

from pathfit.config import PathfitSettings
from pathfit.core.fitter import PathFitter
from pathfit.core.stroker import Stroker
from pathfit.domain import FitPolicy, Outline, Rect, format_policy
from pathfit.io import SvgWriter
from pathfit.utils import RenderLogger, RenderStats, configure_logging


def render_policy(stroked: Outline, policy: FitPolicy, canvas: Rect) -> tuple[Outline, Rect]:
    """Fit a stroked outline under one policy.

    Args:
        stroked: Stroked outline
        policy: Fit policy
        canvas: Reference rectangle

    Returns:
        Tuple of (fitted outline, its bounding rectangle)
    """
    fitted = PathFitter().fit(stroked, policy, canvas)
    return fitted, fitted.bounding_rect()


class PreviewRenderer:
    """Orchestrates stroke, fit and write for a set of policies.

    Manages the complete workflow:
    1. Stroke the centerline path
    2. Fit the stroked outline under each policy
    3. Write one preview SVG per policy
    4. Collect statistics

    Example:
        settings = PathfitSettings()
        renderer = PreviewRenderer(settings)
        stats = renderer.render(
            path=demo_path(),
            policies=[ScaleFit(), Align(Anchor.CENTER)],
            output_dir=Path("previews"),
        )
    """

    def __init__(self, config: PathfitSettings, quiet: bool = False) -> None:
        """Initialize preview renderer with configuration.

        Args:
            config: Pathfit settings with stroke, canvas and logging config
            quiet: Suppress console log output
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=quiet,
        )
        self.render_logger = RenderLogger(self.logger)
        self.stroker = Stroker(
            tolerance=config.stroke.flatten_tolerance,
            quad_segs=config.stroke.quad_segs,
        )
        self.writer = SvgWriter(
            canvas=config.canvas.to_rect(),
            fill=config.canvas.fill,
            background=config.canvas.background,
        )

    def render(
        self,
        path: Outline,
        policies: list[FitPolicy] | None = None,
        output_dir: Path = Path("."),
        stem: str = "pathfit",
        progress_callback: Callable[[int, int, str, bool], None] | None = None,
    ) -> RenderStats:
        """Render previews of ``path`` under each policy.

        Args:
            path: Centerline outline
            policies: Policies to render, in order; defaults to the single
                policy configured in ``config.fit``
            output_dir: Directory for the SVG files (default: current directory)
            stem: File name prefix
            progress_callback: Optional callback(completed, total, policy, success)

        Returns:
            RenderStats for this call only, with counts, output paths and timing

        Raises:
            StrokeError: If the path cannot be stroked
        """
        if policies is None:
            policies = [self.config.fit.to_policy()]

        # Each run gets its own statistics
        self.render_logger = RenderLogger(self.logger)
        stats = self.render_logger.stats
        stats.start_time = time.time()

        canvas = self.config.canvas.to_rect()
        stroked = self.stroker.stroke(path, self.config.stroke.to_style())
        self.render_logger.log_stroked(
            contours=stroked.contour_count,
            points=stroked.point_count,
            bounds=stroked.bounding_rect(),
        )

        total = len(policies)
        for completed, policy in enumerate(policies, start=1):
            label = format_policy(policy)
            start = time.time()
            success = True
            try:
                fitted, bounds = render_policy(stroked, policy, canvas)

                if fitted.is_empty():
                    self.render_logger.log_empty_outline(label)
                elif not bounds.is_finite():
                    self.render_logger.log_degenerate_outline(label, bounds)

                output_path = SvgWriter.get_preview_path(output_dir, stem, policy)
                self.writer.write(fitted, output_path)

                self.render_logger.log_render_complete(
                    policy=label,
                    bounds=bounds,
                    output_path=output_path,
                    duration_ms=(time.time() - start) * 1000,
                )
            except Exception as e:
                success = False
                self.render_logger.log_render_error(label, e, traceback.format_exc())

            if progress_callback:
                progress_callback(completed, total, label, success)

        stats.end_time = time.time()
        self.logger.info(
            "Render complete",
            rendered=stats.rendered_count,
            errors=stats.error_count,
            duration_s=round(stats.duration_seconds, 3),
        )
        return stats
