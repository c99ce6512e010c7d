"""Configuration settings for pathfit."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from pathfit.domain import (
    Align,
    Anchor,
    AsIs,
    FitPolicy,
    LineCap,
    LineJoin,
    Rect,
    ScaleAndAlign,
    ScaleFit,
    StrokeStyle,
)


class FitMode(str, Enum):
    """Fit mode, the anchor-less half of a fit policy."""

    AS_IS = "as_is"
    SCALE_FIT = "scale_fit"
    ALIGN = "align"
    SCALE_AND_ALIGN = "scale_and_align"


class StrokeConfig(BaseModel):
    """Configuration for stroke expansion."""

    line_width: float = Field(
        default=24.0,
        ge=0.0,
        description="Full stroke width in path units",
    )
    line_cap: LineCap = Field(
        default=LineCap.ROUND,
        description="Cap style for open contour ends",
    )
    line_join: LineJoin = Field(
        default=LineJoin.MITER,
        description="Join style for corners",
    )
    miter_limit: float = Field(
        default=10.0,
        ge=1.0,
        description="Miter length ratio beyond which joins are beveled",
    )
    flatten_tolerance: float = Field(
        default=0.25,
        gt=0.0,
        le=10.0,
        description="Maximum deviation when flattening curves",
    )
    quad_segs: int = Field(
        default=16,
        ge=1,
        le=64,
        description="Segments per quarter circle for round caps and joins",
    )

    def to_style(self) -> StrokeStyle:
        """Build the stroke style value."""
        return StrokeStyle(
            line_width=self.line_width,
            line_cap=self.line_cap,
            line_join=self.line_join,
            miter_limit=self.miter_limit,
        )


class FitConfig(BaseModel):
    """Fit policy used by ``PreviewRenderer.render`` when no policies are passed."""

    mode: FitMode = Field(
        default=FitMode.AS_IS,
        description="Fit mode",
    )
    anchor: Anchor | None = Field(
        default=None,
        description="Alignment anchor (required for align modes)",
    )

    @model_validator(mode="after")
    def _check_anchor(self) -> "FitConfig":
        needs_anchor = self.mode in (FitMode.ALIGN, FitMode.SCALE_AND_ALIGN)
        if needs_anchor and self.anchor is None:
            raise ValueError(f"fit mode '{self.mode.value}' requires an anchor")
        if not needs_anchor and self.anchor is not None:
            raise ValueError(f"fit mode '{self.mode.value}' does not take an anchor")
        return self

    def to_policy(self) -> FitPolicy:
        """Build the fit policy value."""
        if self.mode is FitMode.SCALE_FIT:
            return ScaleFit()
        if self.mode is FitMode.ALIGN:
            return Align(self.anchor)
        if self.mode is FitMode.SCALE_AND_ALIGN:
            return ScaleAndAlign(self.anchor)
        return AsIs()


class CanvasConfig(BaseModel):
    """Reference rectangle and preview colors."""

    x: float = Field(default=0.0, description="Canvas origin X")
    y: float = Field(default=0.0, description="Canvas origin Y")
    width: float = Field(default=400.0, ge=0.0, description="Canvas width")
    height: float = Field(default=300.0, ge=0.0, description="Canvas height")
    fill: str = Field(default="#e4572e", description="Outline fill color")
    background: str | None = Field(
        default="#fffbe6",
        description="Background color (None for transparent)",
    )

    def to_rect(self) -> Rect:
        """Build the reference rectangle."""
        return Rect(self.x, self.y, self.width, self.height)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class PathfitSettings(BaseModel):
    """Main application settings."""

    stroke: StrokeConfig = Field(default_factory=StrokeConfig)
    fit: FitConfig = Field(default_factory=FitConfig)
    canvas: CanvasConfig = Field(default_factory=CanvasConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PathfitSettings:
    """Get default application settings."""
    return PathfitSettings()
