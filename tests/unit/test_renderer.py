"""Tests for preview rendering orchestration."""

import logging
from pathlib import Path
from unittest.mock import Mock, patch

import pytest
import structlog

from pathfit.config import FitConfig, FitMode, LoggingConfig, PathfitSettings
from pathfit.core import PICKER_PRESETS, PreviewRenderer, demo_path, render_policy
from pathfit.domain import Align, Anchor, AsIs, Outline, Rect, ScaleFit
from pathfit.exceptions import SvgWriteError
from pathfit.io import SvgWriter
from pathfit.utils import RenderLogger, RenderStats, configure_logging


@pytest.fixture
def settings(tmp_path: Path) -> PathfitSettings:
    """Settings logging into the test's temporary directory."""
    return PathfitSettings(logging=LoggingConfig(log_file=tmp_path / "pathfit.log"))


@pytest.fixture
def renderer(settings: PathfitSettings) -> PreviewRenderer:
    return PreviewRenderer(settings, quiet=True)


class TestRenderPolicy:
    """Tests for render_policy function."""

    def test_returns_outline_and_bounds(self) -> None:
        square = Outline.from_polylines([[(0, 0), (10, 0), (10, 10), (0, 10)]])
        fitted, bounds = render_policy(square, Align(Anchor.CENTER), Rect(0, 0, 100, 100))
        assert bounds == Rect(45, 45, 10, 10)
        assert fitted.bounding_rect() == bounds

    def test_as_is_keeps_outline(self) -> None:
        square = Outline.from_polylines([[(0, 0), (10, 0), (10, 10)]])
        fitted, _ = render_policy(square, AsIs(), Rect(0, 0, 100, 100))
        assert fitted == square


class TestPreviewRenderer:
    """Tests for PreviewRenderer class."""

    def test_init(self, renderer: PreviewRenderer, settings: PathfitSettings) -> None:
        """Test renderer initialization."""
        assert renderer.config is settings
        assert renderer.stroker.tolerance == settings.stroke.flatten_tolerance
        assert renderer.stroker.quad_segs == settings.stroke.quad_segs

    def test_render_all_presets(self, renderer: PreviewRenderer, tmp_path: Path) -> None:
        """Test one preview file per preset."""
        output_dir = tmp_path / "previews"
        stats = renderer.render(demo_path(), list(PICKER_PRESETS.values()), output_dir)

        assert stats.rendered_count == len(PICKER_PRESETS)
        assert stats.error_count == 0
        assert len(list(output_dir.glob("pathfit-*.svg"))) == len(PICKER_PRESETS)
        assert all(path.exists() for path in stats.outputs)
        assert stats.duration_seconds >= 0

    def test_results_in_order(self, renderer: PreviewRenderer, tmp_path: Path) -> None:
        policies = [ScaleFit(), Align(Anchor.TOP)]
        stats = renderer.render(demo_path(), policies, tmp_path, stem="curve")
        assert [label for label, _, _ in stats.results] == ["scale_fit", "align:top"]
        assert stats.outputs[1] == tmp_path / "curve-align-top.svg"

    def test_result_bounds(self, renderer: PreviewRenderer, tmp_path: Path) -> None:
        """Test recorded bounds are the fitted outline's bounds."""
        stats = renderer.render(demo_path(), [Align(Anchor.TOP_LEADING)], tmp_path)
        _, bounds, _ = stats.results[0]
        assert bounds.min_x == pytest.approx(0)
        assert bounds.min_y == pytest.approx(0)

    def test_empty_path(self, renderer: PreviewRenderer, tmp_path: Path) -> None:
        """Test an empty path renders empty previews and is counted."""
        stats = renderer.render(Outline(), [AsIs(), ScaleFit()], tmp_path)
        assert stats.empty_count == 2
        assert stats.rendered_count == 2
        assert stats.error_count == 0

    def test_write_error_counted(self, renderer: PreviewRenderer, tmp_path: Path) -> None:
        """Test a failed write is recorded and the run continues."""
        error = SvgWriteError("out.svg", "disk full")
        with patch.object(renderer.writer, "write", side_effect=[error, None]):
            stats = renderer.render(demo_path(), [AsIs(), ScaleFit()], tmp_path)

        assert stats.error_count == 1
        assert stats.rendered_count == 1
        assert stats.errors[0][0] == "as_is"
        assert "disk full" in stats.errors[0][1]

    def test_progress_callback(self, renderer: PreviewRenderer, tmp_path: Path) -> None:
        callback = Mock()
        renderer.render(demo_path(), [AsIs(), ScaleFit()], tmp_path, progress_callback=callback)
        assert callback.call_count == 2
        callback.assert_called_with(2, 2, "scale_fit", True)

    def test_log_file_written(
        self, renderer: PreviewRenderer, settings: PathfitSettings, tmp_path: Path
    ) -> None:
        renderer.render(demo_path(), [AsIs()], tmp_path)
        assert settings.logging.log_file.exists()

    def test_default_policy_from_config(self, tmp_path: Path) -> None:
        """Test the configured fit policy is used when none are passed."""
        settings = PathfitSettings(
            fit=FitConfig(mode=FitMode.ALIGN, anchor=Anchor.CENTER),
            logging=LoggingConfig(log_file=tmp_path / "pathfit.log"),
        )
        stats = PreviewRenderer(settings, quiet=True).render(demo_path(), output_dir=tmp_path)

        assert [label for label, _, _ in stats.results] == ["align:center"]
        assert stats.outputs == [tmp_path / "pathfit-align-center.svg"]
        assert stats.outputs[0].exists()

    def test_repeated_render_has_fresh_stats(
        self, renderer: PreviewRenderer, tmp_path: Path
    ) -> None:
        """Test a second render does not carry over the first run's counts."""
        first = renderer.render(demo_path(), [AsIs(), ScaleFit()], tmp_path)
        second = renderer.render(demo_path(), [Align(Anchor.TOP)], tmp_path)

        assert first is not second
        assert first.rendered_count == 2
        assert second.rendered_count == 1
        assert [label for label, _, _ in second.results] == ["align:top"]


class TestRenderLogger:
    """Tests for RenderLogger statistics."""

    @pytest.fixture
    def render_logger(self) -> RenderLogger:
        return RenderLogger(structlog.get_logger("test"))

    def test_degenerate_counted(self, render_logger: RenderLogger) -> None:
        nan = float("nan")
        render_logger.log_degenerate_outline("scale_fit", Rect(nan, nan, nan, nan))
        assert render_logger.stats.degenerate_count == 1

    def test_render_complete(self, render_logger: RenderLogger, tmp_path: Path) -> None:
        output = SvgWriter.get_preview_path(tmp_path, "pathfit", AsIs())
        render_logger.log_render_complete("as_is", Rect(0, 0, 1, 1), output, 2.0)
        render_logger.log_render_complete("as_is", Rect(0, 0, 1, 1), output, 4.0)
        stats = render_logger.stats
        assert stats.rendered_count == 2
        assert stats.avg_render_time_ms == pytest.approx(3.0)
        assert stats.outputs == [output, output]

    def test_render_error(self, render_logger: RenderLogger) -> None:
        render_logger.log_render_error("align:top", ValueError("boom"))
        assert render_logger.stats.error_count == 1
        assert render_logger.stats.errors == [("align:top", "boom")]


class TestRenderStats:
    """Tests for RenderStats properties."""

    def test_empty_stats(self) -> None:
        stats = RenderStats()
        assert stats.duration_seconds == 0.0
        assert stats.avg_render_time_ms is None
        assert stats.outputs == []


class TestConfigureLogging:
    """Tests for configure_logging handler setup."""

    def test_reconfigure_replaces_handlers(self, tmp_path: Path) -> None:
        """Test a second call closes the first call's handlers."""
        root = logging.getLogger()
        before = list(root.handlers)

        configure_logging(tmp_path / "first.log", quiet=True)
        [first] = [h for h in root.handlers if h not in before]
        configure_logging(tmp_path / "second.log", quiet=True)
        added = [h for h in root.handlers if h not in before]

        assert first not in root.handlers
        assert len(added) == 1
        assert added[0].baseFilename == str(tmp_path / "second.log")

    def test_two_renderers_log_once(self, tmp_path: Path) -> None:
        """Test each event is written once after building two renderers."""
        root = logging.getLogger()
        before = list(root.handlers)
        log_file = tmp_path / "pathfit.log"
        settings = PathfitSettings(logging=LoggingConfig(log_file=log_file))

        PreviewRenderer(settings, quiet=True)
        PreviewRenderer(settings, quiet=True)
        logging.getLogger("pathfit.test").warning("single line")

        assert len([h for h in root.handlers if h not in before]) == 1
        assert log_file.read_text(encoding="utf-8").count("single line") == 1
