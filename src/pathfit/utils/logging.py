"""Logging utilities for pathfit."""

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

import structlog

from pathfit.domain import Rect


@dataclass
class RenderStats:
    """Statistics from a render run."""

    rendered_count: int = 0
    empty_count: int = 0
    degenerate_count: int = 0
    error_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    results: list[tuple[str, Rect, Path]] = field(default_factory=list)
    render_times_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate run duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def outputs(self) -> list[Path]:
        """Paths of the written previews, in render order."""
        return [output for _, _, output in self.results]

    @property
    def avg_render_time_ms(self) -> float | None:
        """Average time per policy render."""
        if not self.render_times_ms:
            return None
        return sum(self.render_times_ms) / len(self.render_times_ms)


# Processors applied to both structlog and plain stdlib records
_SHARED_PROCESSORS = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
]


# Handlers attached to the root logger by the last configure_logging call
_installed_handlers: list[logging.Handler] = []


def _formatter(renderer) -> structlog.stdlib.ProcessorFormatter:
    return structlog.stdlib.ProcessorFormatter(
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        foreign_pre_chain=_SHARED_PROCESSORS,
    )


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    The log file receives one JSON object per event. The console (stderr)
    receives the same events as key=value lines, filtered at
    ``console_level``. Calling it again closes and replaces the handlers
    installed by the previous call.

    Args:
        log_file: Path to log file (``pathfit_<timestamp>.log`` if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, log to the file only

    Returns:
        Configured structlog logger
    """
    if log_file is None:
        log_file = Path(f"pathfit_{datetime.now():%Y%m%d_%H%M%S}.log")

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Reconfiguring replaces the previous handlers instead of stacking them
    while _installed_handlers:
        old = _installed_handlers.pop()
        root_logger.removeHandler(old)
        old.close()

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(file_level.upper())
    file_handler.setFormatter(_formatter(structlog.processors.JSONRenderer()))
    root_logger.addHandler(file_handler)
    _installed_handlers.append(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(console_level.upper())
        console_handler.setFormatter(_formatter(structlog.dev.ConsoleRenderer(colors=False)))
        root_logger.addHandler(console_handler)
        _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("pathfit")
    logger.info("Logging initialized", log_file=str(log_file), level=file_level)
    return logger


def _rounded(rect: Rect) -> list[float | str]:
    # NaN and inf are not valid JSON numbers
    return [round(v, 3) if math.isfinite(v) else str(v) for v in rect.to_bounds()]


class RenderLogger:
    """Logger for tracking render progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RenderStats()

    def log_stroked(self, contours: int, points: int, bounds: Rect) -> None:
        """Log the stroked outline before fitting."""
        self._logger.debug(
            "Path stroked",
            contours=contours,
            points=points,
            bounds=_rounded(bounds),
        )

    def log_render_complete(
        self,
        policy: str,
        bounds: Rect,
        output_path: Path,
        duration_ms: float,
    ) -> None:
        """Log a successful policy render."""
        self._logger.info(
            "Policy rendered",
            policy=policy,
            bounds=_rounded(bounds),
            output=str(output_path),
            duration_ms=round(duration_ms, 2),
        )
        self._stats.rendered_count += 1
        self._stats.results.append((policy, bounds, output_path))
        self._stats.render_times_ms.append(duration_ms)

    def log_empty_outline(self, policy: str) -> None:
        """Log a render whose outline has no segments."""
        self._logger.warning("Empty outline", policy=policy)
        self._stats.empty_count += 1

    def log_degenerate_outline(self, policy: str, bounds: Rect) -> None:
        """Log a render whose bounds are infinite or NaN."""
        self._logger.warning(
            "Degenerate outline",
            policy=policy,
            bounds=_rounded(bounds),
        )
        self._stats.degenerate_count += 1

    def log_render_error(
        self,
        policy: str,
        error: Exception,
        traceback: str | None = None,
    ) -> None:
        """Log a failed policy render."""
        self._logger.error(
            "Policy render failed",
            policy=policy,
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((policy, str(error)))

    @property
    def stats(self) -> RenderStats:
        """Get current render statistics."""
        return self._stats
